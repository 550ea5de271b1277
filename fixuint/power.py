"""Exponentiation of fixed-width integers."""

from __future__ import annotations

import math
import operator

from fixuint.base import UintBase

_LN2_1P5 = 0.5849625007211562
_EXP2_63 = 9223372036854775808.0
_U64_MAX = (1 << 64) - 1


def _exponent(exp) -> int:
    value = operator.index(exp)
    if value < 0:
        raise ValueError("exponent must be non-negative")
    return value


class Power(UintBase):
    """Integer powers with overflow handling modulo 2**bits."""

    __slots__ = ()

    def overflowing_pow(self, exp):
        """Wrapped power and whether the exact power exceeds the bit width."""
        e = _exponent(exp)
        if self.bits == 0:
            return self._new(self.value), False
        top = self._max_value
        base = self.value
        result = 1
        overflow = False
        base_overflow = False
        while e:
            if e & 1:
                product = result * base
                overflow = overflow or product > top or base_overflow
                result = product & top
            square = base * base
            base_overflow = base_overflow or square > top
            base = square & top
            e >>= 1
        return self._new(result), overflow

    def checked_pow(self, exp):
        """The power, or None if it does not fit."""
        result, overflow = self.overflowing_pow(exp)
        return None if overflow else result

    def wrapping_pow(self, exp):
        """The power modulo 2**bits."""
        e = _exponent(exp)
        if self.bits == 0:
            return self._new(self.value)
        return self._new(pow(self.value, e, 1 << self.bits))

    def pow(self, exp):
        """The power modulo 2**bits."""
        return self.wrapping_pow(exp)

    def saturating_pow(self, exp):
        """The power, or the maximum value if it does not fit."""
        result, overflow = self.overflowing_pow(exp)
        return type(self).max(self.bits) if overflow else result

    @classmethod
    def approx_pow2(cls, bits: int, exp: float):
        """Approximate 2**exp rounded to an integer, or None if it does not fit."""
        exp = float(exp)
        if math.isnan(exp):
            return cls.zero(bits)
        if exp < _LN2_1P5:
            if exp < -1.0:
                return cls.zero(bits)
            return cls(bits, 1) if bits > 0 else None
        if exp > bits:
            return None

        fract, whole = math.modf(exp)
        shift = int(whole)
        leading = min(int(2.0**fract * _EXP2_63), _U64_MAX)

        if shift >= 63:
            if leading >> bits:
                return None
            value = leading << (shift - 63)
            if value >> bits:
                return None
            return cls(bits, value)

        down = 63 - shift
        rounded = (leading >> down) + ((leading >> (down - 1)) & 1)
        if rounded >> bits:
            return None
        return cls(bits, rounded)