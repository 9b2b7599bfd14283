"""
Sequence types
==============

- Sequence: generator-backed lazy pipeline
- ArraySequence: array-backed variant with O(1) count / take / skip / reverse
- Grouping: (key, values) pairs produced by group_by
"""

from .core import Sequence
from .array import ArraySequence
from .grouping import Grouping

__all__ = (
    "Sequence",
    "ArraySequence",
    "Grouping",
)
