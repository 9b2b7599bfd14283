"""
Sequence factory namespace.

Recommended import:
    from lazyseq import seq

    seq.of([3, 1, 2]).sort().to_array()      # [1, 2, 3]
    seq.infinite().take(3).to_array()        # [0, 1, 2]
    seq.sum(seq.range(1, 5))                 # 10
    seq.join(seq.of("abc").reverse(), "-")   # "c-b-a"
"""

from .construct import (
    empty,
    from_array,
    from_generator,
    from_iterable,
    infinite,
    just,
    of,
    range,
    repeat,
)
from .aggregate import (
    average,
    join,
    max,
    min,
    sum,
    try_average,
    try_max,
    try_min,
)

__all__ = (
    # Construction
    "of",
    "from_array",
    "from_generator",
    "from_iterable",
    "empty",
    "just",
    "repeat",
    "range",
    "infinite",
    # Aggregates
    "sum",
    "max",
    "min",
    "average",
    "join",
    "try_max",
    "try_min",
    "try_average",
)
