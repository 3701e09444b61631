"""pandas interchange for map2d.

A :class:`~map2d.core.Map2D` is a sparse table, so it converts naturally to
and from :class:`pandas.DataFrame` objects in two layouts:

* wide – index holds the row keys, columns hold the column keys and missing
  pairs are filled with a placeholder (``NaN`` by default);
* long – one record per stored triple, in three named columns.

The functions here never share storage with their input: the frames they
build own fresh data, and the maps they build are new instances.
"""

import logging
from typing import Any

import numpy as np
import pandas as pd

from .core import Map2D, create_instance

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    """``pd.isna`` restricted to scalars, so containers are never missing."""
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def _is_placeholder(value: Any) -> bool:
    """Missing-value markers other than ``None``, which is a legal map value."""
    return value is not None and _is_missing(value)


def _frame_dtype(m: Map2D) -> type | None:
    # pandas turns None into NaN in inferred columns
    return object if any(entry.value is None for entry in m) else None


def to_frame(m: Map2D, fill_value: Any = np.nan, sort: bool = False) -> pd.DataFrame:
    """Convert a map into a wide DataFrame.

    Parameters
    ----------
    m : Map2D
        The map to convert.
    fill_value : Any, optional
        Placeholder for pairs that are not present. Default is ``NaN``.
        Stored values are never replaced by the placeholder. pandas still
        infers column dtypes, so an int column holding a placeholder comes
        out as floats; a map storing ``None`` is converted with ``object``
        dtype so that ``None`` survives.
    sort : bool, optional
        Sort the index and the columns. Requires mutually comparable keys
        in each dimension. Default is False.

    Returns
    -------
    pandas.DataFrame
        One row per row key and one column per column key. An empty map
        gives an empty frame.
    """
    if m.is_empty():
        return pd.DataFrame()
    rows = m.row_map_view()
    col_keys = list(dict.fromkeys(col for inner in rows.values() for col in inner))
    data = [[inner.get(col, fill_value) for col in col_keys] for inner in rows.values()]
    df = pd.DataFrame(
        data,
        index=pd.Index(list(rows), tupleize_cols=False),
        columns=pd.Index(col_keys, tupleize_cols=False),
        dtype=_frame_dtype(m),
    )
    if sort:
        df = df.sort_index(axis=0).sort_index(axis=1)
    logger.debug("Built %dx%d frame from %d entries", *df.shape, m.size())
    return df


def from_frame(df: pd.DataFrame, dropna: bool = True) -> Map2D:
    """Build a map from a wide DataFrame.

    Every cell becomes a ``(index label, column label, value)`` triple.

    Parameters
    ----------
    df : pandas.DataFrame
        Source frame. Index and column labels become row and column keys.
    dropna : bool, optional
        Skip cells holding a missing-value placeholder (``NaN``, ``NaT``,
        ``pd.NA``). ``None`` is a legal map value and is always kept, so
        ``from_frame(to_frame(m))`` restores stored ``None`` values. A stored
        ``NaN`` is indistinguishable from the default placeholder and is
        skipped. Default is True.

    Returns
    -------
    Map2D
        A new map.

    Raises
    ------
    ValueError
        If a cell that is kept has a ``None`` index or column label.
    """
    result = create_instance()
    for col, column in df.items():
        for row, value in column.items():
            if dropna and _is_placeholder(value):
                continue
            result.put(row, col, value)
    logger.debug("Read %d entries from %dx%d frame", result.size(), *df.shape)
    return result


def to_long_frame(
    m: Map2D,
    row_name: str = "row",
    col_name: str = "col",
    value_name: str = "value",
) -> pd.DataFrame:
    """Convert a map into a long DataFrame with one record per triple.

    Parameters
    ----------
    m : Map2D
        The map to convert.
    row_name, col_name, value_name : str, optional
        Names of the three output columns.

    Returns
    -------
    pandas.DataFrame
        Columns ``[row_name, col_name, value_name]``; record order is
        unspecified. A map storing ``None`` is converted with ``object``
        dtype so that values come back unchanged from
        :func:`from_long_frame`.

    Raises
    ------
    ValueError
        If the three column names are not distinct.
    """
    names = [row_name, col_name, value_name]
    if len(set(names)) != len(names):
        raise ValueError(f"Column names must be distinct, got {names}")
    return pd.DataFrame(
        [tuple(entry) for entry in m.entries()], columns=names, dtype=_frame_dtype(m)
    )


def from_long_frame(
    df: pd.DataFrame,
    row_name: str = "row",
    col_name: str = "col",
    value_name: str = "value",
) -> Map2D:
    """Build a map from a long DataFrame.

    Records are read in frame order, so for a repeated ``(row, col)`` pair
    the last record wins.

    Parameters
    ----------
    df : pandas.DataFrame
        Source frame with at least the three named columns.
    row_name, col_name, value_name : str, optional
        Names of the columns holding row keys, column keys and values.

    Returns
    -------
    Map2D
        A new map.

    Raises
    ------
    KeyError
        If any of the three columns is missing.
    ValueError
        If a record has a missing row or column key.
    """
    missing = [name for name in (row_name, col_name, value_name) if name not in df.columns]
    if missing:
        raise KeyError(f"Missing columns: {missing}")
    result = create_instance()
    for row, col, value in zip(df[row_name], df[col_name], df[value_name]):
        if _is_missing(row) or _is_missing(col):
            raise ValueError(f"Missing key in record: row={row!r}, col={col!r}")
        result.put(row, col, value)
    logger.debug("Read %d entries from %d records", result.size(), len(df))
    return result
