"""Internal helpers for lazyseq.

Common functions used across multiple modules.
These are not part of the public API."""

from __future__ import annotations

import inspect
import sys
import typing
from collections.abc import Callable, Iterator

class _Missing:
    """Marker for "argument not supplied", distinct from None."""

    __slots__ = ()

    _instance: typing.ClassVar[_Missing | None] = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

MISSING: typing.Final = _Missing()

def positional_arity(func: Callable[..., typing.Any]) -> int | None:
    """
    Number of required positional parameters ``func`` takes.

    Parameters with a default are not counted, so ``str.strip`` and ``round``
    are one-argument callables here. ``*args`` counts as ``sys.maxsize``;
    None means not inspectable (most C builtins and builtin types).
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return sys.maxsize
        if (
            param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
            and param.default is inspect.Parameter.empty
        ):
            count += 1
    return count

def fit_arity[R](
    func: Callable[..., R],
    *,
    minimum: int,
    maximum: int,
) -> Callable[..., R]:
    """
    Adapt ``func`` so it can always be called with ``maximum`` arguments.

    Trailing arguments the callback does not require are dropped, so both
    ``lambda x: ...`` and ``lambda x, i: ...`` work as index-aware callbacks,
    and an optional second parameter never receives the index.
    Callables that cannot be inspected get ``minimum`` arguments, except
    ``*args`` callables which get everything.
    """
    arity = positional_arity(func)
    if arity is None:
        arity = minimum

    take = max(minimum, min(arity, maximum))
    if take >= maximum:
        return func

    def fitted(*args: typing.Any) -> R:
        return func(*args[:take])

    return fitted

class SeenSet:
    """
    Membership tracker for distinct().

    Hashable values go through a set; unhashable ones (lists, dicts) fall
    back to an equality scan.
    """

    __slots__ = ("_hashable", "_unhashable")

    def __init__(self) -> None:
        self._hashable: set[typing.Any] = set()
        self._unhashable: list[typing.Any] = []

    def add(self, value: typing.Any) -> bool:
        """Record value. Returns True if it was not seen before."""
        try:
            if value in self._hashable:
                return False
            self._hashable.add(value)
        except TypeError:
            if value in self._unhashable:
                return False
            self._unhashable.append(value)
        return True

class Buckets[K, V]:
    """
    Ordered key -> list of values, for group_by().

    Keys keep first-seen order. Hashable keys are found through a dict;
    unhashable ones fall back to an equality scan, as in SeenSet.
    """

    __slots__ = ("_entries", "_index", "_unhashable")

    def __init__(self) -> None:
        self._entries: list[tuple[K, list[V]]] = []
        self._index: dict[typing.Any, list[V]] = {}
        self._unhashable: list[tuple[K, list[V]]] = []

    def _bucket(self, key: K) -> list[V]:
        try:
            bucket = self._index.get(key)
        except TypeError:
            for seen, values in self._unhashable:
                if seen == key:
                    return values
            bucket = []
            self._unhashable.append((key, bucket))
            self._entries.append((key, bucket))
            return bucket

        if bucket is None:
            bucket = self._index[key] = []
            self._entries.append((key, bucket))
        return bucket

    def add(self, key: K, value: V) -> None:
        self._bucket(key).append(value)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[K, list[V]]]:
        return iter(self._entries)

__all__ = (
    "MISSING",
    "positional_arity",
    "fit_arity",
    "SeenSet",
    "Buckets",
)
