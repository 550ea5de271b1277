"""Fixed-width unsigned integer value and the limb helpers it is built on."""

from __future__ import annotations

import operator
from typing import Iterable

LIMB_BITS = 64
_LIMB_MAX = (1 << LIMB_BITS) - 1


def nlimbs(bits: int) -> int:
    """Number of 64-bit limbs needed to hold ``bits`` bits."""
    return (bits + 63) // 64


def nbytes(bits: int) -> int:
    """Number of bytes needed to hold ``bits`` bits."""
    return (bits + 7) // 8


def mask(bits: int) -> int:
    """Mask applied to the highest limb of a ``bits``-bit integer."""
    if bits == 0:
        return 0
    remainder = bits % LIMB_BITS
    return _LIMB_MAX if remainder == 0 else (1 << remainder) - 1


def _check_bits(bits: int) -> int:
    bits = operator.index(bits)
    if bits < 0:
        raise ValueError(f"bit width must be non-negative, got {bits}")
    return bits


def _limbs_to_int(limbs: Iterable[int]) -> tuple[int, int]:
    """Combine little-endian limbs into an integer; returns (value, count)."""
    items = [operator.index(limb) for limb in limbs]
    value = 0
    for limb in reversed(items):
        if not 0 <= limb <= _LIMB_MAX:
            raise ValueError(f"limb {limb} does not fit 64 bits")
        value = (value << LIMB_BITS) | limb
    return value, len(items)


class UintBase:
    """An immutable unsigned integer of a fixed bit width, modulo 2**bits."""

    __slots__ = ("_bits", "_value")

    def __init__(self, bits: int, value: int) -> None:
        bits = _check_bits(bits)
        value = operator.index(value)
        if value < 0:
            raise ValueError("Uint values cannot be negative")
        if value >> bits:
            raise ValueError(f"Value too large for Uint<{bits}>")
        self._bits = bits
        self._value = value

    # -- construction -------------------------------------------------------

    def _new(self, value: int):
        """A value of the same type and width; ``value`` must already fit."""
        return type(self)(self._bits, value)

    def _wrap(self, value: int):
        """A value of the same type and width, reduced modulo 2**bits."""
        return type(self)(self._bits, value & self._max_value)

    @classmethod
    def zero(cls, bits: int):
        """The value zero."""
        return cls(bits, 0)

    @classmethod
    def max(cls, bits: int):
        """The largest value, 2**bits - 1."""
        bits = _check_bits(bits)
        return cls(bits, (1 << bits) - 1)

    @classmethod
    def from_limbs(cls, bits: int, limbs: Iterable[int]):
        """Build from exactly ``nlimbs(bits)`` little-endian limbs."""
        bits = _check_bits(bits)
        value, count = _limbs_to_int(limbs)
        if count != nlimbs(bits):
            raise ValueError(
                f"Uint<{bits}> needs {nlimbs(bits)} limbs, got {count}"
            )
        if value >> bits:
            raise ValueError("Value too large for this Uint")
        return cls(bits, value)

    @classmethod
    def overflowing_from_limbs_slice(cls, bits: int, limbs: Iterable[int]):
        """Build from any number of limbs; returns (truncated value, overflowed)."""
        bits = _check_bits(bits)
        value, _ = _limbs_to_int(limbs)
        top = (1 << bits) - 1
        return cls(bits, value & top), value > top

    @classmethod
    def from_limbs_slice(cls, bits: int, limbs: Iterable[int]):
        """Build from any number of limbs; raises if the value does not fit."""
        result, overflow = cls.overflowing_from_limbs_slice(bits, limbs)
        if overflow:
            raise ValueError("Value too large for this Uint")
        return result

    @classmethod
    def checked_from_limbs_slice(cls, bits: int, limbs: Iterable[int]):
        """Build from any number of limbs, or None if the value does not fit."""
        result, overflow = cls.overflowing_from_limbs_slice(bits, limbs)
        return None if overflow else result

    @classmethod
    def wrapping_from_limbs_slice(cls, bits: int, limbs: Iterable[int]):
        """Build from any number of limbs, truncating to the bit width."""
        return cls.overflowing_from_limbs_slice(bits, limbs)[0]

    @classmethod
    def saturating_from_limbs_slice(cls, bits: int, limbs: Iterable[int]):
        """Build from any number of limbs, saturating at the maximum."""
        result, overflow = cls.overflowing_from_limbs_slice(bits, limbs)
        return cls.max(bits) if overflow else result

    # -- inspection ---------------------------------------------------------

    @property
    def bits(self) -> int:
        """Bit width of the type."""
        return self._bits

    @property
    def value(self) -> int:
        """The number as a Python int."""
        return self._value

    @property
    def limb_count(self) -> int:
        """Number of 64-bit limbs of the type."""
        return nlimbs(self._bits)

    @property
    def top_mask(self) -> int:
        """Mask for the highest limb."""
        return mask(self._bits)

    @property
    def _max_value(self) -> int:
        return (1 << self._bits) - 1

    def as_limbs(self) -> tuple[int, ...]:
        """The little-endian 64-bit limbs."""
        return tuple(
            (self._value >> (LIMB_BITS * i)) & _LIMB_MAX
            for i in range(nlimbs(self._bits))
        )

    def is_zero(self) -> bool:
        """Whether the value is zero."""
        return self._value == 0

    # -- protocol -----------------------------------------------------------

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UintBase):
            return NotImplemented
        return self._bits == other._bits and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._bits, self._value))

    def _compare_value(self, other: object):
        if not isinstance(other, UintBase):
            return NotImplemented
        if other._bits != self._bits:
            raise TypeError(
                f"cannot compare Uint<{self._bits}> with Uint<{other._bits}>"
            )
        return other._value

    def __lt__(self, other: object) -> bool:
        rhs = self._compare_value(other)
        return rhs if rhs is NotImplemented else self._value < rhs

    def __le__(self, other: object) -> bool:
        rhs = self._compare_value(other)
        return rhs if rhs is NotImplemented else self._value <= rhs

    def __gt__(self, other: object) -> bool:
        rhs = self._compare_value(other)
        return rhs if rhs is NotImplemented else self._value > rhs

    def __ge__(self, other: object) -> bool:
        rhs = self._compare_value(other)
        return rhs if rhs is NotImplemented else self._value >= rhs

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._bits}, {self._value:#x})"