"""Conversion of fixed-width integers to machine integer kinds and other widths."""

from __future__ import annotations

import operator
from enum import Enum

from fixuint.base import UintBase


class IntKind(Enum):
    """Machine integer kinds a Uint can be converted to."""

    BOOL = ("bool", 1, False)
    I8 = ("i8", 8, True)
    U8 = ("u8", 8, False)
    I16 = ("i16", 16, True)
    U16 = ("u16", 16, False)
    I32 = ("i32", 32, True)
    U32 = ("u32", 32, False)
    I64 = ("i64", 64, True)
    U64 = ("u64", 64, False)
    ISIZE = ("isize", 64, True)
    USIZE = ("usize", 64, False)
    I128 = ("i128", 128, True)
    U128 = ("u128", 128, False)

    def __init__(self, label: str, width: int, signed: bool) -> None:
        self.label = label
        self.width = width
        self.signed = signed

    @property
    def capacity(self) -> int:
        """Number of value bits the kind can hold."""
        return self.width - 1 if self.signed else self.width

    @property
    def maximum(self):
        """Largest representable value."""
        if self is IntKind.BOOL:
            return True
        return (1 << self.capacity) - 1

    def wrap(self, value: int):
        """The low bits of ``value`` reinterpreted as this kind."""
        if self is IntKind.BOOL:
            return bool(value & 1)
        low = value & ((1 << self.width) - 1)
        if self.signed and low >> (self.width - 1):
            low -= 1 << self.width
        return low


def _type_name(wrapped) -> str:
    if isinstance(wrapped, bool):
        return "bool"
    if isinstance(wrapped, UintBase):
        return f"Uint<{wrapped.bits}>"
    return "the target integer type"


class FromUintError(ValueError):
    """The Uint value is too large for the target type."""

    def __init__(self, bits: int, wrapped, saturated) -> None:
        super().__init__(
            f"Uint<{bits}> value is too large for {_type_name(wrapped)}"
        )
        self.bits = bits
        self.wrapped = wrapped
        self.saturated = saturated


class ToFieldError(ValueError):
    """The number is equal to or larger than the target field modulus."""

    def __init__(self) -> None:
        super().__init__(
            "Number is equal or larger than the target field modulus."
        )


class IntTarget(UintBase):
    """Checked, wrapping and saturating conversion to other integer types.

    A target is an IntKind or an int giving the bit width of another Uint.
    """

    __slots__ = ()

    def try_to(self, target):
        """The value as ``target``; raises FromUintError if it does not fit."""
        if isinstance(target, IntKind):
            return self._to_kind(target)
        width = operator.index(target)
        top = (1 << width) - 1
        if self.value > top:
            raise FromUintError(
                width, type(self)(width, self.value & top), type(self).max(width)
            )
        return type(self)(width, self.value)

    def _to_kind(self, kind: IntKind):
        if self.bits == 0:
            return False if kind is IntKind.BOOL else 0
        if self.value.bit_length() > kind.capacity:
            raise FromUintError(self.bits, kind.wrap(self.value), kind.maximum)
        if kind is IntKind.BOOL:
            return self.value != 0
        return self.value

    def to(self, target):
        """The value as ``target``; raises FromUintError if it does not fit."""
        return self.try_to(target)

    def wrapping_to(self, target):
        """The value as ``target``, keeping only the bits that fit."""
        try:
            return self.try_to(target)
        except FromUintError as error:
            return error.wrapped

    def saturating_to(self, target):
        """The value as ``target``, clamped to its maximum."""
        try:
            return self.try_to(target)
        except FromUintError as error:
            return error.saturated