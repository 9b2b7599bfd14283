"""
Runtime shape inspection.

TypeInfo answers "what kind of value is this?" for the handful of shapes
seq.of() has to tell apart (missing, arrays, functions, iterables), plus the
primitive/boxed distinctions that come with them.

Example:
    from lazyseq import typeinfo

    typeinfo([1, 2]).is_array                              # True
    typeinfo([1, "a"]).is_array_of(lambda t: t.is_number)  # False
    typeinfo("abc").map(len).is_primitive_number           # True
"""

from __future__ import annotations

import numbers
import typing
from collections import abc
from collections.abc import Callable

from ._helpers import MISSING

_PRIMITIVE_NUMBERS: typing.Final = (int, float, complex)
_NOT_ARRAYS: typing.Final = (str, bytes, bytearray)


class TypeInfo[T]:
    """Inspection queries over a single subject. Never raises."""

    __slots__ = ("_subject",)
    __match_args__ = ("subject",)

    def __init__(self, subject: T, /) -> None:
        self._subject = subject

    @staticmethod
    def from_args(*args: typing.Any) -> list[TypeInfo[typing.Any]]:
        """Wrap every positional argument in its own TypeInfo."""
        return [TypeInfo(arg) for arg in args]

    @property
    def subject(self) -> T:
        """The inspected value."""
        return self._subject

    # Missing values

    @property
    def is_null(self) -> bool:
        return self._subject is None

    @property
    def is_undefined(self) -> bool:
        """True for the MISSING marker ("argument not supplied")."""
        return self._subject is MISSING

    @property
    def is_null_or_undefined(self) -> bool:
        return self.is_null or self.is_undefined

    # Primitives and their boxed counterparts

    @property
    def is_primitive(self) -> bool:
        return (
            self.is_null_or_undefined
            or self.is_primitive_boolean
            or self.is_primitive_number
            or self.is_primitive_string
            or self.is_symbol
        )

    @property
    def is_primitive_boolean(self) -> bool:
        return type(self._subject) is bool

    @property
    def is_boolean_object(self) -> bool:
        # bool cannot be subclassed in CPython, so this only fires for exotic runtimes
        return isinstance(self._subject, bool) and not self.is_primitive_boolean

    @property
    def is_boolean(self) -> bool:
        return self.is_primitive_boolean or self.is_boolean_object

    @property
    def is_primitive_number(self) -> bool:
        return type(self._subject) in _PRIMITIVE_NUMBERS

    @property
    def is_number_object(self) -> bool:
        """Decimal, Fraction, IntEnum members and other non-builtin numbers."""
        return (
            isinstance(self._subject, numbers.Number)
            and not isinstance(self._subject, bool)
            and not self.is_primitive_number
        )

    @property
    def is_number(self) -> bool:
        return self.is_primitive_number or self.is_number_object

    @property
    def is_primitive_string(self) -> bool:
        return type(self._subject) is str

    @property
    def is_string_object(self) -> bool:
        return isinstance(self._subject, str) and not self.is_primitive_string

    @property
    def is_string(self) -> bool:
        return self.is_primitive_string or self.is_string_object

    @property
    def is_symbol(self) -> bool:
        return type(self._subject) is bytes

    # Structured values

    @property
    def is_object(self) -> bool:
        return not (self.is_primitive or self.is_function)

    @property
    def is_function(self) -> bool:
        return callable(self._subject) and not isinstance(self._subject, type)

    @property
    def is_array(self) -> bool:
        return isinstance(self._subject, abc.Sequence) and not isinstance(self._subject, _NOT_ARRAYS)

    def is_array_of(self, predicate: Callable[[TypeInfo[typing.Any]], bool]) -> bool:
        """
        True if the subject is an array and every element's TypeInfo
        satisfies ``predicate``. An empty array qualifies.
        """
        if not self.is_array:
            return False
        subject = typing.cast(abc.Sequence[typing.Any], self._subject)
        return all(predicate(TypeInfo(item)) for item in subject)

    @property
    def is_iterable(self) -> bool:
        return not self.is_null_or_undefined and isinstance(self._subject, abc.Iterable)

    def is_object_of_type(self, cls: type) -> bool:
        """False when ``cls`` is not a class (or tuple of classes)."""
        if self.is_null_or_undefined:
            return False
        try:
            return isinstance(self._subject, cls)
        except TypeError:
            return False

    # Composition

    def map[U](self, selector: Callable[[T], U], /) -> TypeInfo[U]:
        """Inspect ``selector(subject)`` instead."""
        return TypeInfo(selector(self._subject))

    def flat_map[U](self, selector: Callable[[T], TypeInfo[U]], /) -> TypeInfo[U]:
        """Like map(), for selectors that already return a TypeInfo."""
        return selector(self._subject)

    def __repr__(self) -> str:
        return f"TypeInfo({self._subject!r})"


def typeinfo[T](subject: T, /) -> TypeInfo[T]:
    """Inspect ``subject``."""
    return TypeInfo(subject)


__all__ = ("TypeInfo", "typeinfo")
