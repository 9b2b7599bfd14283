"""
Aggregates over numeric and string sequences.

Every function accepts a Sequence or any iterable (normalised through
``seq.of``). ``max``, ``min`` and ``average`` have no neutral element and
raise EmptySequenceError on empty input; the ``try_*`` variants return a
kungfu Result instead.

NOTE: This module defines ``sum``, ``max`` and ``min``; builtins are reached
      through the ``builtins`` module.
"""

from __future__ import annotations

import builtins
import operator
from collections.abc import Iterable

from kungfu import Error, Ok, Result

from .._errors import EmptySequenceError
from .._types import DEFAULT_SEPARATOR, Reducer
from ..sequence import Sequence
from .construct import of

type Numbers = Sequence[float] | Iterable[float]


def _fold(subject: Numbers, reducer: Reducer[float, float], operation: str) -> float:
    try:
        return of(subject).reduce(reducer)
    except EmptySequenceError as e:
        raise EmptySequenceError(operation) from e


def _attempt(subject: Numbers, reducer: Reducer[float, float], operation: str) -> Result[float, EmptySequenceError]:
    try:
        return Ok(_fold(subject, reducer, operation))
    except EmptySequenceError as e:
        return Error(e)


def _max(left: float, right: float) -> float:
    return builtins.max(left, right)


def _min(left: float, right: float) -> float:
    return builtins.min(left, right)


def _running_mean(mean: float, value: float, index: int) -> float:
    # mean of the first index + 1 elements
    return mean * (index / (index + 1)) + value / (index + 1)


def sum(subject: Numbers, /) -> float:
    """Total; 0 for an empty sequence."""
    return of(subject).reduce(operator.add, 0)


def max(subject: Numbers, /) -> float:
    """Largest element. Raises EmptySequenceError if empty."""
    return _fold(subject, _max, "max")


def min(subject: Numbers, /) -> float:
    """Smallest element. Raises EmptySequenceError if empty."""
    return _fold(subject, _min, "min")


def average(subject: Numbers, /) -> float:
    """
    Arithmetic mean, computed as a running weighted mean so no running
    total is kept. Raises EmptySequenceError if empty.
    """
    return _fold(subject, _running_mean, "average")


def try_max(subject: Numbers, /) -> Result[float, EmptySequenceError]:
    return _attempt(subject, _max, "max")


def try_min(subject: Numbers, /) -> Result[float, EmptySequenceError]:
    return _attempt(subject, _min, "min")


def try_average(subject: Numbers, /) -> Result[float, EmptySequenceError]:
    return _attempt(subject, _running_mean, "average")


def join(subject: Sequence[str] | Iterable[str], /, separator: str = DEFAULT_SEPARATOR) -> str:
    """Materialise and concatenate with ``separator`` (default: nothing)."""
    return separator.join(of(subject).to_array())


__all__ = (
    "sum",
    "max",
    "min",
    "average",
    "join",
    "try_max",
    "try_min",
    "try_average",
)
