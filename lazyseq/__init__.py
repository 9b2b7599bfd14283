"""
Lazy, composable sequences and an explicit Optional.

Building blocks:
- seq: factory namespace (of, range, infinite, ...) and aggregates (sum, average, join, ...)
- Sequence: lazy pipeline, re-run from scratch on every terminal call
- Optional: Present(value) / Absent with normalising map / flat_map / combine
- typeinfo: runtime shape inspection used to normalise inputs

Architecture:
- Every transformation returns a new Sequence wrapping a generator function
- Eager stages (group_by, sort, reverse) return array-backed sequences
- Fail-fast operations raise; try_* / to_result variants return kungfu Results
"""

import logging

# Core types
from ._types import DEFAULT_SEPARATOR, Comparer, CursorFactory, Predicate, Reducer, Selector, Source, Zipper

# Type inspection
from .typeinfo import TypeInfo, typeinfo

# Optional
from .optional import NONE, Absent, Optional, Otherwise, Present

# Sequence
from .sequence import ArraySequence, Grouping, Sequence

# Factory namespace (seq.of, seq.range, seq.sum, ...)
from . import seq

# Errors
from ._errors import EmptySequenceError, UnrecognizedSourceError, UnwrapError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Comparer",
    "CursorFactory",
    "Predicate",
    "Reducer",
    "Selector",
    "Source",
    "Zipper",
    "DEFAULT_SEPARATOR",
    # Type inspection
    "TypeInfo",
    "typeinfo",
    # Optional
    "Optional",
    "Present",
    "Absent",
    "NONE",
    "Otherwise",
    # Sequence
    "Sequence",
    "ArraySequence",
    "Grouping",
    # Factory namespace
    "seq",
    # Errors
    "EmptySequenceError",
    "UnrecognizedSourceError",
    "UnwrapError",
)
