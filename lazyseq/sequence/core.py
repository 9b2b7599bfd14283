"""
Sequence - lazy pipeline
========================

A Sequence is a description of how to produce values, not a container.
It wraps a zero-argument callable returning a fresh iterator (the cursor);
every transformation builds a new generator function closed over its
upstream and wraps it in a new Sequence.

Contracts:
- Transformations never mutate the receiver and never pull more upstream
  elements than their own laziness needs.
- Nothing is memoised: every terminal call re-runs the whole chain, so
  side-effecting callbacks run again on each traversal.
- Stage state (take's counter, distinct's seen-set, skip_while's flag) lives
  in the generator frame of one traversal and is never shared.
- group_by, sort and reverse materialise at call time. group_by on an
  infinite sequence never returns.
"""

from __future__ import annotations

import functools
import itertools
import logging
import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Error, Ok, Result

from .._errors import EmptySequenceError
from .._helpers import MISSING, Buckets, SeenSet, fit_arity
from .._types import Comparer, CursorFactory, Predicate, Reducer, Selector, Zipper
from ..optional import Optional

if typing.TYPE_CHECKING:
    from .array import ArraySequence
    from .grouping import Grouping

logger = logging.getLogger(__name__)


def _pair[T, U](left: T, right: U) -> tuple[T, U]:
    return (left, right)


class Sequence[T]:
    """
    Lazy, re-iterable, possibly infinite stream of values.

    Callbacks marked index-aware receive ``(element, index)`` when they
    accept two positional parameters and ``(element,)`` otherwise.
    """

    __slots__ = ("_cursor",)

    def __init__(self, cursor: CursorFactory[T], /) -> None:
        """Create Sequence from a fn returning a fresh iterator per traversal."""
        self._cursor = cursor

    def __iter__(self) -> Iterator[T]:
        return iter(self._cursor())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<lazy>)"

    # ------------------------------------------------------------------------
    # Lazy transformations
    # ------------------------------------------------------------------------

    def map[U](self, func: Selector[T, U], /) -> Sequence[U]:
        """Transform each element. Index-aware."""
        fitted = fit_arity(func, minimum=1, maximum=2)

        def cursor() -> Iterator[U]:
            for index, item in enumerate(self):
                yield fitted(item, index)

        return Sequence(cursor)

    def flat_map[U](self, func: Selector[T, Iterable[U]], /) -> Sequence[U]:
        """Map each element to a sub-sequence and flatten in order. Index-aware."""
        fitted = fit_arity(func, minimum=1, maximum=2)

        def cursor() -> Iterator[U]:
            for index, item in enumerate(self):
                yield from fitted(item, index)

        return Sequence(cursor)

    def filter(self, predicate: Predicate[T], /) -> Sequence[T]:
        """Keep elements satisfying ``predicate``. Index-aware."""
        fitted = fit_arity(predicate, minimum=1, maximum=2)

        def cursor() -> Iterator[T]:
            for index, item in enumerate(self):
                if fitted(item, index):
                    yield item

        return Sequence(cursor)

    def distinct(self) -> Sequence[T]:
        """Drop repeated values; the first occurrence wins."""

        def cursor() -> Iterator[T]:
            seen = SeenSet()
            for item in self:
                if seen.add(item):
                    yield item

        return Sequence(cursor)

    def distinct_by[K](self, key: Selector[T, K], /) -> Sequence[T]:
        """Drop elements whose key was already produced. Index-aware."""
        fitted = fit_arity(key, minimum=1, maximum=2)

        def cursor() -> Iterator[T]:
            seen = SeenSet()
            for index, item in enumerate(self):
                if seen.add(fitted(item, index)):
                    yield item

        return Sequence(cursor)

    def take(self, n: int, /) -> Sequence[T]:
        """
        First ``n`` elements.

        Stops pulling upstream as soon as the n-th element is produced, so
        it is safe on infinite sequences.
        """

        def cursor() -> Iterator[T]:
            if n <= 0:
                return
            taken = 0
            for item in self:
                yield item
                taken += 1
                if taken >= n:
                    return

        return Sequence(cursor)

    def skip(self, n: int, /) -> Sequence[T]:
        """Everything after the first ``n`` elements."""

        def cursor() -> Iterator[T]:
            return itertools.islice(self, max(n, 0), None)

        return Sequence(cursor)

    def take_while(self, predicate: Predicate[T], /) -> Sequence[T]:
        """Elements up to (excluding) the first one failing ``predicate``. Index-aware."""
        fitted = fit_arity(predicate, minimum=1, maximum=2)

        def cursor() -> Iterator[T]:
            for index, item in enumerate(self):
                if not fitted(item, index):
                    return
                yield item

        return Sequence(cursor)

    def skip_while(self, predicate: Predicate[T], /) -> Sequence[T]:
        """
        Drop leading elements satisfying ``predicate``. Index-aware.

        Once an element fails the predicate, everything after it is kept.
        """
        fitted = fit_arity(predicate, minimum=1, maximum=2)

        def cursor() -> Iterator[T]:
            skipping = True
            for index, item in enumerate(self):
                if skipping and fitted(item, index):
                    continue
                skipping = False
                yield item

        return Sequence(cursor)

    def concat(self, other: Iterable[T], /) -> Sequence[T]:
        """All of self, then all of ``other``."""

        def cursor() -> Iterator[T]:
            yield from self
            yield from other

        return Sequence(cursor)

    def zip[U, V](self, other: Iterable[U], zipper: Zipper[T, U, V] | None = None, /) -> Sequence[V]:
        """
        Pair elements by position; stops at the shorter side.

        Without ``zipper`` each pair is a 2-tuple.
        """
        combine: Zipper[T, U, typing.Any] = zipper if zipper is not None else _pair

        def cursor() -> Iterator[V]:
            for left, right in zip(self, other):
                yield combine(left, right)

        return Sequence(cursor)

    def default_with(self, default: T, /) -> Sequence[T]:
        """Yield ``default`` alone if self is empty, otherwise pass through."""

        def cursor() -> Iterator[T]:
            empty = True
            for item in self:
                empty = False
                yield item
            if empty:
                yield default

        return Sequence(cursor)

    # ------------------------------------------------------------------------
    # Eager transformations (materialise, return array-backed sequences)
    # ------------------------------------------------------------------------

    def group_by[K](self, key: Selector[T, K], /) -> ArraySequence[Grouping[K, T]]:
        """
        Group elements by key, in order of first key occurrence. Index-aware.
        Keys need not be hashable.

        Consumes the whole sequence immediately.
        """
        from .array import ArraySequence
        from .grouping import Grouping

        fitted = fit_arity(key, minimum=1, maximum=2)
        groups: Buckets[K, T] = Buckets()
        count = 0
        for index, item in enumerate(self):
            groups.add(fitted(item, index), item)
            count += 1

        logger.debug("group_by: %d elements into %d groups", count, len(groups))
        return ArraySequence([Grouping(k, ArraySequence(values)) for k, values in groups])

    def sort(
        self,
        compare: Comparer[T] | None = None,
        /,
        *,
        key: Callable[[T], typing.Any] | None = None,
    ) -> ArraySequence[T]:
        """
        Stable sort.

        ``compare(a, b)`` returns negative/zero/positive; ``key`` works as in
        ``sorted``. With neither, natural ordering is used.
        """
        from .array import ArraySequence

        if compare is not None and key is not None:
            raise ValueError("sort() takes either compare or key, not both")
        if compare is not None:
            key = functools.cmp_to_key(compare)

        items = self.to_array()
        items.sort(key=key)
        logger.debug("sort: materialised %d elements", len(items))
        return ArraySequence(items)

    def reverse(self) -> Sequence[T]:
        """Elements in reverse order."""
        from .array import ArraySequence

        items = self.to_array()
        items.reverse()
        logger.debug("reverse: materialised %d elements", len(items))
        return ArraySequence(items)

    # ------------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------------

    def for_each(self, func: Callable[..., typing.Any], /) -> None:
        """Run ``func`` on every element. Index-aware."""
        fitted = fit_arity(func, minimum=1, maximum=2)
        for index, item in enumerate(self):
            fitted(item, index)

    @typing.overload
    def reduce(self, reducer: Reducer[T, T], /) -> T: ...

    @typing.overload
    def reduce[A](self, reducer: Reducer[A, T], initial: A, /) -> A: ...

    def reduce(self, reducer: Reducer[typing.Any, T], initial: typing.Any = MISSING, /) -> typing.Any:
        """
        Left fold.

        The reducer receives ``(accumulator, element, index, source)``, trimmed
        to what it accepts (at least two). Without ``initial`` the first
        element seeds the accumulator and folding starts at index 1.

        Raises EmptySequenceError when the sequence is empty and no initial
        value was given.
        """
        fitted = fit_arity(reducer, minimum=2, maximum=4)
        iterator = iter(self)

        if initial is MISSING:
            accumulator = next(iterator, MISSING)
            if accumulator is MISSING:
                raise EmptySequenceError("reduce")
            start = 1
        else:
            accumulator = initial
            start = 0

        for index, item in enumerate(iterator, start):
            accumulator = fitted(accumulator, item, index, self)
        return accumulator

    def try_reduce(
        self,
        reducer: Reducer[typing.Any, T],
        initial: typing.Any = MISSING,
        /,
    ) -> Result[typing.Any, EmptySequenceError]:
        """reduce() returning Error(EmptySequenceError) instead of raising."""
        try:
            return Ok(self.reduce(reducer, initial))
        except EmptySequenceError as e:
            return Error(e)

    def first(self) -> T | None:
        """First element, or None if empty."""
        for item in self:
            return item
        return None

    def last(self) -> T | None:
        """Last element, or None if empty."""
        result: T | None = None
        for item in self:
            result = item
        return result

    def first_optional(self) -> Optional[T]:
        """First element as an Optional (Absent if empty or if it is None)."""
        return Optional.of(self.first())

    def last_optional(self) -> Optional[T]:
        """Last element as an Optional (Absent if empty or if it is None)."""
        return Optional.of(self.last())

    def count(self) -> int:
        return sum(1 for _ in self)

    def to_array(self) -> list[T]:
        """Materialise into a new list."""
        return list(self)


__all__ = ("Sequence",)
