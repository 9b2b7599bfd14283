"""
Optional - explicit absence
===========================

Two variants:
- Present(value): a value is available
- Absent: no value (one shared instance, ``NONE``)

Every derived Optional goes back through ``Optional.of``, so None never ends
up inside a Present and Optionals never nest.

Example:
    from lazyseq import Optional

    page = Optional.of(params.get("from")).map(int).default_if_none(0)
    total = Optional.of(3).combine(Optional.of(4), lambda a, b: a + b)  # Present(7)
"""

from __future__ import annotations

import typing
from abc import ABC, abstractmethod
from collections.abc import Callable

from kungfu import Error, Ok, Result

from ._errors import UnwrapError


class Otherwise:
    """Second half of ``if_has_value(...).otherwise(...)``."""

    __slots__ = ("_pending",)

    def __init__(self, *, pending: bool) -> None:
        self._pending = pending

    def otherwise(self, none: Callable[[], typing.Any], /) -> None:
        """Run ``none`` if the optional had no value."""
        if self._pending:
            none()


class Optional[T](ABC):
    """
    A value that may legitimately be missing.

    Build with ``Optional.of`` / ``Optional.none``; match with
    ``case Present(v)`` and ``case Absent()``.
    """

    __slots__ = ()

    @staticmethod
    def of[V](value: V | Optional[V] | None) -> Optional[V]:
        """
        Normalise ``value`` into an Optional.

        None and Absent become Absent, a Present is returned unchanged,
        anything else is wrapped.
        """
        if value is None or isinstance(value, Absent):
            return NONE
        if isinstance(value, Present):
            return value
        return Present(value)

    @staticmethod
    def none[V]() -> Optional[V]:
        """The canonical Absent instance."""
        return NONE

    @staticmethod
    def is_optional(value: typing.Any) -> bool:
        return isinstance(value, Optional)

    @staticmethod
    def from_result[V, E](result: Result[V, E]) -> Optional[V]:
        """Ok(v) -> Optional.of(v), Error(_) -> Absent."""
        match result:
            case Ok(value):
                return Optional.of(value)
            case Error(_):
                return NONE
        raise TypeError(f"Expected a Result, got {type(result).__qualname__}")

    # Access

    @property
    @abstractmethod
    def has_value(self) -> bool: ...

    @property
    @abstractmethod
    def value(self) -> T:
        """Forced unwrap. Raises UnwrapError on Absent."""

    @abstractmethod
    def value_or_raise(self, error: BaseException | None = None) -> T:
        """Forced unwrap raising ``error`` (or UnwrapError) on Absent."""

    @abstractmethod
    def value_or_default(self, default: T) -> T: ...

    @abstractmethod
    def equals(self, other: typing.Any) -> bool:
        """Compare with ``Optional.of(other)``."""

    # Composition

    @abstractmethod
    def map[U](self, f: Callable[[T], U | None], /) -> Optional[U]: ...

    @abstractmethod
    def flat_map[U](self, f: Callable[[T], Optional[U]], /) -> Optional[U]: ...

    @abstractmethod
    def default_if_none(self, default: T | None) -> Optional[T]: ...

    @abstractmethod
    def combine[U, V](self, other: Optional[U], f: Callable[[T, U], V | None], /) -> Optional[V]: ...

    @abstractmethod
    def flat_combine[U, V](self, other: Optional[U], f: Callable[[T, U], Optional[V]], /) -> Optional[V]: ...

    # Branching

    @abstractmethod
    def if_has_value(self, some: Callable[[T], typing.Any], /) -> Otherwise: ...

    @abstractmethod
    def to_result[E](self, error: Callable[[], E]) -> Result[T, E]:
        """
        Present -> Ok(value), Absent -> Error(error()).

        NOTE: error is a thunk so it is only built when needed.
        """


class Present[T](Optional[T]):
    """Optional holding a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T, /) -> None:
        if value is None or isinstance(value, Optional):
            raise ValueError("Present cannot wrap None or another Optional; use Optional.of()")
        self._value = value

    @property
    def has_value(self) -> bool:
        return True

    @property
    def value(self) -> T:
        return self._value

    def value_or_raise(self, error: BaseException | None = None) -> T:
        return self._value

    def value_or_default(self, default: T) -> T:
        return self._value

    def equals(self, other: typing.Any) -> bool:
        return Optional.of(other).map(lambda right: self._value == right).value_or_default(False)

    def map[U](self, f: Callable[[T], U | None], /) -> Optional[U]:
        return Optional.of(f(self._value))

    def flat_map[U](self, f: Callable[[T], Optional[U]], /) -> Optional[U]:
        return Optional.of(f(self._value))

    def default_if_none(self, default: T | None) -> Optional[T]:
        return self

    def combine[U, V](self, other: Optional[U], f: Callable[[T, U], V | None], /) -> Optional[V]:
        return self.flat_map(lambda t: other.map(lambda u: f(t, u)))

    def flat_combine[U, V](self, other: Optional[U], f: Callable[[T, U], Optional[V]], /) -> Optional[V]:
        return self.flat_map(lambda t: other.flat_map(lambda u: f(t, u)))

    def if_has_value(self, some: Callable[[T], typing.Any], /) -> Otherwise:
        some(self._value)
        return Otherwise(pending=False)

    def to_result[E](self, error: Callable[[], E]) -> Result[T, E]:
        return Ok(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return isinstance(other, Present) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Present, self._value))

    def __repr__(self) -> str:
        return f"Present({self._value!r})"


class Absent(Optional[typing.Any]):
    """Optional without a value. There is exactly one instance: ``NONE``."""

    __slots__ = ()

    _instance: typing.ClassVar[Absent | None] = None

    def __new__(cls) -> Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def has_value(self) -> bool:
        return False

    @property
    def value(self) -> typing.Any:
        raise UnwrapError()

    def value_or_raise(self, error: BaseException | None = None) -> typing.Any:
        if error is not None:
            raise error
        raise UnwrapError()

    def value_or_default[D](self, default: D) -> D:
        return default

    def equals(self, other: typing.Any) -> bool:
        return not Optional.of(other).has_value

    def map[U](self, f: Callable[[typing.Any], U | None], /) -> Optional[U]:
        return NONE

    def flat_map[U](self, f: Callable[[typing.Any], Optional[U]], /) -> Optional[U]:
        return NONE

    def default_if_none[D](self, default: D | None) -> Optional[D]:
        return Optional.of(default)

    def combine[U, V](self, other: Optional[U], f: Callable[[typing.Any, U], V | None], /) -> Optional[V]:
        return NONE

    def flat_combine[U, V](self, other: Optional[U], f: Callable[[typing.Any, U], Optional[V]], /) -> Optional[V]:
        return NONE

    def if_has_value(self, some: Callable[[typing.Any], typing.Any], /) -> Otherwise:
        return Otherwise(pending=True)

    def to_result[E](self, error: Callable[[], E]) -> Result[typing.Any, E]:
        return Error(error())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return other is self

    def __hash__(self) -> int:
        return hash(Absent)

    def __repr__(self) -> str:
        return "Absent()"


NONE: typing.Final[Absent] = Absent()


__all__ = ("Absent", "NONE", "Optional", "Otherwise", "Present")
