"""
Core type definitions for lazyseq.

Type aliases shared across the library.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value (index passed when accepted)
type Predicate[T] = Callable[..., bool]

# Selector = function that extracts a key or projects an element
type Selector[T, K] = Callable[..., K]

# Reducer = (accumulator, element[, index[, source]]) -> accumulator
type Reducer[A, T] = Callable[..., A]

# Comparer = (left, right) -> negative / zero / positive
type Comparer[T] = Callable[[T, T], float]

# Zipper = pairwise combiner used by Sequence.zip
type Zipper[T, U, V] = Callable[[T, U], V]

# CursorFactory = zero-arg callable producing a fresh iterator per traversal
type CursorFactory[T] = Callable[[], Iterator[T]]

# Anything seq.of() understands
type Source[T] = Iterable[T] | CursorFactory[T]

# ============================================================================
# Defaults
# ============================================================================

DEFAULT_SEPARATOR = ""

__all__ = (
    # Type aliases
    "Predicate",
    "Selector",
    "Reducer",
    "Comparer",
    "Zipper",
    "CursorFactory",
    "Source",
    # Defaults
    "DEFAULT_SEPARATOR",
)
