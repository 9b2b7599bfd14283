"""
Building sequences.

``of`` inspects its argument and picks a path; ``from_array``,
``from_generator`` and ``from_iterable`` are the explicit versions for callers
who already know what they hold.

NOTE: This module defines ``range``; the builtin is not used here.
"""

from __future__ import annotations

import itertools
import logging
import typing
from collections import abc
from collections.abc import Iterable, Iterator

from .._errors import UnrecognizedSourceError
from .._helpers import MISSING
from .._types import CursorFactory
from ..sequence import ArraySequence, Sequence
from ..typeinfo import typeinfo

logger = logging.getLogger(__name__)


def of[T](source: typing.Any = MISSING, /, *, strict: bool = False) -> Sequence[T]:
    """
    Adapt ``source`` into a Sequence.

    - missing / None -> empty sequence
    - a Sequence -> returned as is
    - list, tuple, range, other indexable collections -> array-backed
    - zero-arg callable -> called on every traversal for a fresh iterator
    - any other iterable -> iterated via ``iter()`` on every traversal

    Anything else gives an empty sequence (logged at WARNING), or raises
    UnrecognizedSourceError when ``strict`` is set.

    NOTE: One-shot iterators (generator objects, files) only produce
          elements on the first traversal. Pass the generator function
          instead to get a re-iterable sequence.
    """
    info = typeinfo(source)
    if info.is_null_or_undefined:
        return empty()
    if isinstance(source, Sequence):
        return source
    if info.is_array:
        return from_array(source)
    if info.is_function:
        return from_generator(source)
    if info.is_iterable:
        return from_iterable(source)

    if strict:
        raise UnrecognizedSourceError(type(source))
    logger.warning("seq.of: cannot iterate %s, using an empty sequence", type(source).__qualname__)
    return empty()


def from_array[T](items: abc.Sequence[T], /) -> ArraySequence[T]:
    """Array-backed sequence over ``items`` (not copied)."""
    return ArraySequence(items)


def from_generator[T](factory: CursorFactory[T], /) -> Sequence[T]:
    """Sequence calling ``factory()`` for a fresh iterator on each traversal."""
    return Sequence(factory)


def from_iterable[T](iterable: Iterable[T], /) -> Sequence[T]:
    """Sequence calling ``iter(iterable)`` on each traversal."""

    def cursor() -> Iterator[T]:
        return iter(iterable)

    return Sequence(cursor)


def empty[T]() -> Sequence[T]:
    def cursor() -> Iterator[T]:
        return iter(())

    return Sequence(cursor)


def just[T](value: T, /) -> Sequence[T]:
    """Sequence of exactly one element."""

    def cursor() -> Iterator[T]:
        yield value

    return Sequence(cursor)


def repeat[T](value: T, n: int, /) -> Sequence[T]:
    """``value`` repeated ``n`` times (nothing if n <= 0)."""

    def cursor() -> Iterator[T]:
        return itertools.repeat(value, max(n, 0))

    return Sequence(cursor)


def range[N: (int, float)](start: N, stop: N, /) -> Sequence[N]:
    """start, start + 1, ... while below ``stop``. Empty if start >= stop."""

    def cursor() -> Iterator[N]:
        current = start
        while current < stop:
            yield current
            current += 1

    return Sequence(cursor)


def infinite() -> Sequence[int]:
    """0, 1, 2, ... without end. Bound it with take() or take_while()."""

    def cursor() -> Iterator[int]:
        return itertools.count()

    return Sequence(cursor)


__all__ = (
    "of",
    "from_array",
    "from_generator",
    "from_iterable",
    "empty",
    "just",
    "repeat",
    "range",
    "infinite",
)
