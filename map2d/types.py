"""Type aliases for map2d.

This module defines the key aliases and the entry record used throughout
the package. The container itself lives in core.py.
"""

from collections.abc import Hashable
from typing import Any, NamedTuple

# Type aliases for row and column identifiers
RowKey = Hashable
"""Alias for row identifiers of a :class:`~map2d.core.Map2D`.

Any hashable works: ints for matrix-like use, strings or tuples for labels.
"""

ColKey = Hashable
"""Alias for column identifiers of a :class:`~map2d.core.Map2D`.

Column identifiers are independent of row identifiers, so the same label may
appear in both dimensions.
"""


class Entry(NamedTuple):
    """A single ``(row, col, value)`` triple stored in a map."""

    row: RowKey
    col: ColKey
    value: Any
