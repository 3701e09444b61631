"""Core container for map2d.

This module defines the building block the rest of the package works with:
- Map2D: a mapping keyed by ``(row, col)`` pairs with row and column views
- create_instance: stateless factory returning a fresh, empty Map2D

Storage is a dict of dicts (row -> col -> value). A row is present in the
outer dict exactly while it holds at least one entry, and the number of
pairs is tracked incrementally so that size queries never walk the storage.
"""

import logging
from collections.abc import Callable, Hashable, Iterator, Mapping, MutableMapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from .types import Entry

R = TypeVar("R", bound=Hashable)
C = TypeVar("C", bound=Hashable)
V = TypeVar("V")
R2 = TypeVar("R2", bound=Hashable)
C2 = TypeVar("C2", bound=Hashable)
V2 = TypeVar("V2")

logger = logging.getLogger(__name__)


class Map2D(Generic[R, C, V]):
    """A two-key map from ``(row, col)`` pairs to values.

    Conceptually a set of ``(row, col, value)`` triples in which each
    ``(row, col)`` pair occurs at most once; putting an existing pair again
    replaces its value. Row and column identifiers must be hashable, values
    may be anything, including ``None``.

    All view methods return read-only snapshots
    (:class:`types.MappingProxyType` over a fresh dict). They never share
    storage with the map: later changes to the map are not reflected in a
    view, and views cannot be written to.

    The map is not thread-safe. Guard it with a lock if it is shared between
    threads.

    Examples
    --------
    >>> m = Map2D()
    >>> m.put("A", "x", 1)
    >>> m.put("A", "y", 2)
    >>> m.put("B", "x", 3)
    >>> m.size()
    3
    >>> dict(m.column_view("x"))
    {'A': 1, 'B': 3}
    """

    def __init__(self) -> None:
        self._data: dict[R, dict[C, V]] = {}
        self._size = 0

    @classmethod
    def from_row_map(cls, mapping: Mapping[R, Mapping[C, V]]) -> "Map2D[R, C, V]":
        """Build a map from a nested ``row -> col -> value`` mapping.

        Parameters
        ----------
        mapping : Mapping[R, Mapping[C, V]]
            Nested mapping, e.g. the result of :meth:`row_map_view`. Rows
            with an empty inner mapping contribute nothing.

        Returns
        -------
        Map2D
            A new map holding every triple of ``mapping``.
        """
        result = cls()
        for row, inner in mapping.items():
            result.put_all_to_row(inner, row)
        return result

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def put(self, row: R, col: C, value: V) -> V | None:
        """Store ``value`` under ``(row, col)``.

        Parameters
        ----------
        row : R
            Row identifier. Must not be ``None``.
        col : C
            Column identifier. Must not be ``None``.
        value : V
            Value to store. ``None`` is a legal value.

        Returns
        -------
        V or None
            The value previously stored under the pair, or ``None`` if the
            pair was not present.

        Raises
        ------
        ValueError
            If ``row`` or ``col`` is ``None``.
        """
        if row is None or col is None:
            raise ValueError(
                f"row and col must not be None, got row={row!r}, col={col!r}"
            )
        inner = self._data.get(row)
        if inner is None:
            # Build the inner dict before attaching it so an unhashable
            # column never leaves an empty row behind.
            self._data[row] = {col: value}
            self._size += 1
            return None
        if col not in inner:
            inner[col] = value
            self._size += 1
            return None
        previous = inner[col]
        inner[col] = value
        return previous

    def remove(self, row: R, col: C) -> V | None:
        """Remove the pair ``(row, col)`` and return its value.

        Removing a pair that is not present does nothing and returns
        ``None``. When the last entry of a row is removed the row itself
        disappears, so :meth:`contains_row` becomes false.
        """
        inner = self._data.get(row)
        if inner is None or col not in inner:
            return None
        value = inner.pop(col)
        self._size -= 1
        if not inner:
            del self._data[row]
        return value

    def clear(self) -> None:
        """Remove every entry."""
        self._data.clear()
        self._size = 0
        logger.debug("Cleared %s", type(self).__name__)

    def put_all(self, source: "Map2D[R, C, V]") -> "Map2D[R, C, V]":
        """Copy every triple of ``source`` into this map.

        Existing pairs are overwritten. ``source`` is read through a
        snapshot, so ``m.put_all(m)`` is safe.

        Returns
        -------
        Map2D
            ``self``, to allow chaining.
        """
        rows = source.row_map_view()
        for row, inner in rows.items():
            for col, value in inner.items():
                self.put(row, col, value)
        logger.debug("Copied %d entries into %s", source.size(), type(self).__name__)
        return self

    def put_all_to_row(self, source: Mapping[C, V], row: R) -> "Map2D[R, C, V]":
        """Store every ``col -> value`` of ``source`` under ``row``; return ``self``."""
        for col, value in source.items():
            self.put(row, col, value)
        return self

    def put_all_to_column(self, source: Mapping[R, V], col: C) -> "Map2D[R, C, V]":
        """Store every ``row -> value`` of ``source`` under ``col``; return ``self``."""
        for row, value in source.items():
            self.put(row, col, value)
        return self

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, row: R, col: C) -> V | None:
        """Return the value stored under ``(row, col)``, or ``None``.

        A ``None`` result does not prove the pair is absent, because ``None``
        can be stored as a value. Use :meth:`contains_key` to test presence.
        """
        return self.get_or_default(row, col, None)

    def get_or_default(self, row: R, col: C, default: V) -> V:
        """Return the value under ``(row, col)``, or ``default`` if absent."""
        inner = self._data.get(row)
        if inner is None:
            return default
        return inner.get(col, default)

    def contains_key(self, row: R, col: C) -> bool:
        """True if the pair ``(row, col)`` is present."""
        inner = self._data.get(row)
        return inner is not None and col in inner

    def contains_row(self, row: R) -> bool:
        """True if ``row`` holds at least one entry."""
        return bool(self._data.get(row))

    def contains_column(self, col: C) -> bool:
        """True if any row holds an entry for ``col``.

        This scans every row.
        """
        return any(col in inner for inner in self._data.values())

    def contains_value(self, value: V) -> bool:
        """True if any pair holds a value equal to ``value``.

        This scans every entry.
        """
        return any(value in inner.values() for inner in self._data.values())

    def size(self) -> int:
        """Number of ``(row, col)`` pairs."""
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def non_empty(self) -> bool:
        return self._size > 0

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def row_view(self, row: R) -> Mapping[C, V]:
        """Read-only snapshot of one row.

        Parameters
        ----------
        row : R
            Row identifier.

        Returns
        -------
        Mapping[C, V]
            ``col -> value`` for every entry of ``row``. Empty if the row is
            unknown.
        """
        inner = self._data.get(row)
        if inner is None:
            return MappingProxyType({})
        return MappingProxyType(dict(inner))

    def column_view(self, col: C) -> Mapping[R, V]:
        """Read-only snapshot of one column.

        Parameters
        ----------
        col : C
            Column identifier.

        Returns
        -------
        Mapping[R, V]
            ``row -> value`` for every row holding an entry at ``col``.
        """
        return MappingProxyType(
            {row: inner[col] for row, inner in self._data.items() if col in inner}
        )

    def row_map_view(self) -> Mapping[R, Mapping[C, V]]:
        """Read-only snapshot of the whole map in row-major form.

        Every inner mapping is a read-only copy of its own.
        """
        return MappingProxyType(
            {row: MappingProxyType(dict(inner)) for row, inner in self._data.items()}
        )

    def column_map_view(self) -> Mapping[C, Mapping[R, V]]:
        """Read-only snapshot of the whole map in column-major form.

        This is the transpose of :meth:`row_map_view`: for every stored
        triple, ``column_map_view()[col][row] == row_map_view()[row][col]``.
        """
        columns: dict[C, dict[R, V]] = {}
        for row, inner in self._data.items():
            for col, value in inner.items():
                columns.setdefault(col, {})[row] = value
        return MappingProxyType(
            {col: MappingProxyType(rows) for col, rows in columns.items()}
        )

    def fill_map_from_row(
        self, target: MutableMapping[C, V], row: R
    ) -> "Map2D[R, C, V]":
        """Copy the entries of ``row`` into ``target``; return ``self``.

        Nothing is copied if the row is unknown.
        """
        inner = self._data.get(row)
        if inner is not None:
            target.update(inner)
        return self

    def fill_map_from_column(
        self, target: MutableMapping[R, V], col: C
    ) -> "Map2D[R, C, V]":
        """Copy the entries at ``col`` into ``target`` keyed by row; return ``self``."""
        for row, inner in self._data.items():
            if col in inner:
                target[row] = inner[col]
        return self

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def copy_with_conversion(
        self,
        row_function: Callable[[R], R2],
        column_function: Callable[[C], C2],
        value_function: Callable[[V], V2],
    ) -> "Map2D[R2, C2, V2]":
        """Return a new map with every triple converted element-wise.

        Each ``(row, col, value)`` is inserted into the result as
        ``(row_function(row), column_function(col), value_function(value))``
        using :meth:`put`. The functions are expected to be pure.

        If two pairs are mapped onto the same new pair, the one processed
        last wins. Iteration order is unspecified, so which one that is is
        unspecified too.

        Parameters
        ----------
        row_function : Callable[[R], R2]
            Conversion for row identifiers.
        column_function : Callable[[C], C2]
            Conversion for column identifiers.
        value_function : Callable[[V], V2]
            Conversion for values.

        Returns
        -------
        Map2D[R2, C2, V2]
            An independent map; later changes to ``self`` do not affect it.

        Raises
        ------
        ValueError
            If a conversion yields ``None`` for a row or column.
        """
        result: Map2D[R2, C2, V2] = create_instance()
        for row, inner in self._data.items():
            new_row = row_function(row)
            for col, value in inner.items():
                new_col = column_function(col)
                if result.contains_key(new_row, new_col):
                    logger.debug(
                        "Conversion collision on (%r, %r), keeping value from (%r, %r)",
                        new_row,
                        new_col,
                        row,
                        col,
                    )
                result.put(new_row, new_col, value_function(value))
        return result

    def copy(self) -> "Map2D[R, C, V]":
        """Shallow copy: new storage, same value objects."""
        clone = type(self)()
        clone._data = {row: dict(inner) for row, inner in self._data.items()}
        clone._size = self._size
        return clone

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def entries(self) -> list[Entry]:
        """All stored triples as :class:`~map2d.types.Entry` records."""
        return [
            Entry(row, col, value)
            for row, inner in self._data.items()
            for col, value in inner.items()
        ]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, key: Any) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.contains_key(*key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map2D):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, {self._data!r})"


def create_instance() -> Map2D[Any, Any, Any]:
    """Return a new, empty :class:`Map2D`.

    Every call builds a fresh instance; nothing is shared between them.
    """
    return Map2D()
