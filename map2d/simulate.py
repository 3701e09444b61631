"""Simulation helpers for map2d.

This module contains helper functions to generate random sparse maps and
to sample stored pairs from them. They are intended for tests, demos and
the view benchmark.

The primary functions are:

* :func:`random_map2d` – build a map over an ``n_rows x n_cols`` integer
  grid where each cell is present with a given probability.
* :func:`sample_pairs` – draw stored ``(row, col)`` pairs without
  replacement.
"""

from __future__ import annotations

import numpy as np

from .core import Map2D, create_instance
from .types import ColKey, RowKey


def _as_generator(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def random_map2d(
    n_rows: int,
    n_cols: int,
    density: float = 0.5,
    rng: np.random.Generator | int | None = None,
) -> Map2D[int, int, float]:
    """Generate a random sparse map over an integer grid.

    Each cell ``(i, j)`` with ``0 <= i < n_rows`` and ``0 <= j < n_cols`` is
    stored independently with probability ``density``; stored values are
    drawn uniformly from ``[0, 1)``.

    Parameters
    ----------
    n_rows : int
        Number of candidate row keys.
    n_cols : int
        Number of candidate column keys.
    density : float, optional
        Probability that a cell is present. Default is 0.5.
    rng : numpy.random.Generator or int, optional
        Source of randomness, or a seed for one. If ``None``, a fresh
        unseeded generator is used.

    Returns
    -------
    Map2D[int, int, float]
        The generated map.
    """
    if n_rows < 0 or n_cols < 0:
        raise ValueError(
            f"Dimensions must be non-negative, got n_rows={n_rows}, n_cols={n_cols}"
        )
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0, 1], got {density}")
    gen = _as_generator(rng)
    mask = gen.random((n_rows, n_cols)) < density
    values = gen.random((n_rows, n_cols))
    result = create_instance()
    for i, j in zip(*np.nonzero(mask)):
        result.put(int(i), int(j), float(values[i, j]))
    return result


def sample_pairs(
    m: Map2D,
    n_samples: int,
    rng: np.random.Generator | int | None = None,
) -> list[tuple[RowKey, ColKey]]:
    """Sample stored ``(row, col)`` pairs without replacement.

    Parameters
    ----------
    m : Map2D
        Map to sample from.
    n_samples : int
        Number of pairs to draw.
    rng : numpy.random.Generator or int, optional
        Source of randomness, or a seed for one.

    Returns
    -------
    list[tuple]
        Distinct pairs, each present in ``m``.
    """
    if n_samples < 0:
        raise ValueError(f"n_samples must be non-negative, got {n_samples}")
    if n_samples > m.size():
        raise ValueError(
            f"n_samples ({n_samples}) cannot exceed number of entries ({m.size()})"
        )
    gen = _as_generator(rng)
    pairs = [(entry.row, entry.col) for entry in m.entries()]
    picks = gen.choice(len(pairs), size=n_samples, replace=False)
    return [pairs[k] for k in picks]
