"""Typed arguments for chained substitution.

Each argument kind fixes the conversion characters a directive may end
with when that value is substituted. The set of kinds is closed:

    =========  ===================  =====================
    Kind       Default for          Accepted conversions
    =========  ===================  =====================
    String     str                  s
    Char       (explicit)           c
    Int        int, bool            d i
    UInt       (explicit)           u x X o
    Float      float                f F e E g G
    Pointer    (explicit)           p
    =========  ===================  =====================

Plain Python values are mapped to their default kind by as_argument(),
a singledispatch overload set. Kinds without a Python counterpart are
written explicitly at the call site:

    >>> (Formatter("%c=%#x") % Char("A") % UInt(255)).materialize()
    'A=0xff'

"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from functools import singledispatch
from typing import ClassVar

from chainfmt.charsets import (
    CHAR_CONVERSIONS,
    FLOAT_CONVERSIONS,
    POINTER_CONVERSIONS,
    SIGNED_CONVERSIONS,
    STRING_CONVERSIONS,
    UNSIGNED_CONVERSIONS,
)


@dataclass(frozen=True, slots=True)
class Argument:
    """Base for all argument kinds.

    Attributes:
        value: The value handed to the native formatter
    """

    accepted: ClassVar[frozenset[str]] = frozenset()

    value: object


@dataclass(frozen=True, slots=True)
class String(Argument):
    accepted: ClassVar[frozenset[str]] = STRING_CONVERSIONS

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"String expects str, got {type(self.value).__name__}")


@dataclass(frozen=True, slots=True)
class Char(Argument):
    """A single character, given as a 1-character string or a code point."""

    accepted: ClassVar[frozenset[str]] = CHAR_CONVERSIONS

    value: str | int

    def __post_init__(self) -> None:
        if isinstance(self.value, str) and len(self.value) != 1:
            raise ValueError(f"Char expects a single character, got {self.value!r}")


@dataclass(frozen=True, slots=True)
class Int(Argument):
    accepted: ClassVar[frozenset[str]] = SIGNED_CONVERSIONS

    value: int


@dataclass(frozen=True, slots=True)
class UInt(Argument):
    """An unsigned integer of ``bits`` width.

    Negative values wrap modulo ``2**bits``, as a C cast to unsigned does.

    Example:
        >>> UInt(-1).value
        4294967295
    """

    accepted: ClassVar[frozenset[str]] = UNSIGNED_CONVERSIONS

    value: int
    bits: int = 32

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"bits must be positive, got {self.bits}")
        object.__setattr__(self, "value", self.value % (1 << self.bits))


@dataclass(frozen=True, slots=True)
class Float(Argument):
    accepted: ClassVar[frozenset[str]] = FLOAT_CONVERSIONS

    value: float

    @classmethod
    def single(cls, value: float) -> Float:
        """Round ``value`` through IEEE 754 single precision."""
        return cls(struct.unpack("f", struct.pack("f", value))[0])


@dataclass(frozen=True, slots=True)
class Pointer(Argument):
    """An opaque address; ``None`` or 0 is the null pointer."""

    accepted: ClassVar[frozenset[str]] = POINTER_CONVERSIONS

    value: int | None

    def __post_init__(self) -> None:
        if self.value is not None and self.value < 0:
            raise ValueError(f"Pointer address must be non-negative, got {self.value}")

    @classmethod
    def of(cls, obj: object) -> Pointer:
        """Pointer to a Python object, using its id() as the address."""
        return cls(id(obj))


@singledispatch
def as_argument(value: object) -> Argument:
    """Map a value to its argument kind.

    Raises:
        TypeError: No argument kind exists for the value's type
    """
    raise TypeError(f"no format conversion for {type(value).__name__} values")


@as_argument.register
def _(value: Argument) -> Argument:
    return value


@as_argument.register
def _(value: str) -> Argument:
    return String(value)


@as_argument.register
def _(value: int) -> Argument:
    return Int(value)


@as_argument.register
def _(value: float) -> Argument:
    return Float(value)


__all__ = [
    "Argument",
    "Char",
    "Float",
    "Int",
    "Pointer",
    "String",
    "UInt",
    "as_argument",
]
