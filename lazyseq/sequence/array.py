"""
ArraySequence - array-backed variant
====================================

Wraps a finite indexable collection (list, tuple, ...) by reference together
with the slices take / skip / reverse applied to it. The index window is a
built-in ``range`` rebuilt from the collection's current length, and slicing
a ``range`` is O(1), so take / skip / reverse / count / first / last never
iterate.

NOTE: The collection is not copied. Each traversal sees it as it is at that
      moment, so elements appended or removed after the sequence was built
      are reflected.
"""

from __future__ import annotations

from collections import abc
from collections.abc import Iterator

from .core import Sequence


class ArraySequence[T](Sequence[T]):
    """Sequence over a finite indexable collection."""

    __slots__ = ("_items", "_slices")

    def __init__(self, items: abc.Sequence[T], slices: tuple[slice, ...] = (), /) -> None:
        self._items = items
        self._slices = slices
        super().__init__(self._iterate)

    @property
    def _window(self) -> range:
        window = range(len(self._items))
        for part in self._slices:
            window = window[part]
        return window

    def _narrow(self, part: slice) -> ArraySequence[T]:
        return ArraySequence(self._items, (*self._slices, part))

    def _iterate(self) -> Iterator[T]:
        items = self._items
        for index in self._window:
            yield items[index]

    def __repr__(self) -> str:
        return f"ArraySequence(count={len(self._window)})"

    def take(self, n: int, /) -> ArraySequence[T]:
        return self._narrow(slice(None, max(n, 0)))

    def skip(self, n: int, /) -> ArraySequence[T]:
        return self._narrow(slice(max(n, 0), None))

    def reverse(self) -> ArraySequence[T]:
        return self._narrow(slice(None, None, -1))

    def count(self) -> int:
        return len(self._window)

    def first(self) -> T | None:
        window = self._window
        if not window:
            return None
        return self._items[window[0]]

    def last(self) -> T | None:
        window = self._window
        if not window:
            return None
        return self._items[window[-1]]

    def to_array(self) -> list[T]:
        """A new list; the wrapped collection is never handed out."""
        items = self._items
        return [items[index] for index in self._window]


__all__ = ("ArraySequence",)
