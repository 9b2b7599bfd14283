from __future__ import annotations

from dataclasses import dataclass

from .array import ArraySequence


@dataclass(frozen=True, slots=True)
class Grouping[K, T]:
    """One group produced by Sequence.group_by: a key and its elements, in order."""

    key: K
    values: ArraySequence[T]


__all__ = ("Grouping",)
