"""Multiplication and division of fixed-width integers."""

from __future__ import annotations

import operator
from typing import Iterable

from fixuint.base import UintBase


class MulDiv(UintBase):
    """Products, quotients and remainders modulo 2**bits."""

    __slots__ = ()

    def _operand(self, rhs) -> int:
        if not isinstance(rhs, UintBase):
            raise TypeError(
                f"expected Uint<{self.bits}>, got {type(rhs).__name__}"
            )
        if rhs.bits != self.bits:
            raise TypeError(
                f"cannot combine Uint<{self.bits}> with Uint<{rhs.bits}>"
            )
        return rhs.value

    # -- multiplication -----------------------------------------------------

    def overflowing_mul(self, rhs):
        """Wrapped product and whether the exact product exceeds the bit width."""
        product = self.value * self._operand(rhs)
        return self._wrap(product), product > self._max_value

    def checked_mul(self, rhs):
        """The product, or None if it does not fit."""
        result, overflow = self.overflowing_mul(rhs)
        return None if overflow else result

    def saturating_mul(self, rhs):
        """The product, or the maximum value if it does not fit."""
        result, overflow = self.overflowing_mul(rhs)
        return type(self).max(self.bits) if overflow else result

    def wrapping_mul(self, rhs):
        """The product modulo 2**bits."""
        return self._wrap(self.value * self._operand(rhs))

    def inv_ring(self):
        """The inverse modulo 2**bits, or None if it does not exist."""
        if self.bits == 0 or self.value & 1 == 0:
            return None
        return self._new(pow(self.value, -1, 1 << self.bits))

    def widening_mul(self, rhs):
        """The full product, sized to the sum of both bit widths."""
        if not isinstance(rhs, UintBase):
            raise TypeError(f"expected a Uint, got {type(rhs).__name__}")
        return type(self)(self.bits + rhs.bits, self.value * rhs.value)

    @classmethod
    def product(cls, bits: int, values: Iterable):
        """The wrapping product of ``values``; one for an empty sequence."""
        if bits == 0:
            return cls.zero(bits)
        top = (1 << bits) - 1
        result = 1
        for item in values:
            if isinstance(item, UintBase) and item.bits != bits:
                raise TypeError(
                    f"cannot combine Uint<{bits}> with Uint<{item.bits}>"
                )
            result = (result * operator.index(item)) & top
        return cls(bits, result)

    def __mul__(self, rhs):
        if not isinstance(rhs, UintBase):
            return NotImplemented
        return self.wrapping_mul(rhs)

    # -- division -----------------------------------------------------------

    def div_rem(self, rhs):
        """Quotient and remainder; raises ZeroDivisionError for a zero divisor."""
        divisor = self._operand(rhs)
        if divisor == 0:
            raise ZeroDivisionError("Division by zero")
        quotient, remainder = divmod(self.value, divisor)
        return self._new(quotient), self._new(remainder)

    def checked_div(self, rhs):
        """The quotient, or None if ``rhs`` is zero."""
        if self._operand(rhs) == 0:
            return None
        return self.div_rem(rhs)[0]

    def checked_rem(self, rhs):
        """The remainder, or None if ``rhs`` is zero."""
        if self._operand(rhs) == 0:
            return None
        return self.div_rem(rhs)[1]

    def div_ceil(self, rhs):
        """The quotient rounded up."""
        quotient, remainder = self.div_rem(rhs)
        if remainder.value == 0:
            return quotient
        return self._wrap(quotient.value + 1)

    def wrapping_div(self, rhs):
        """The quotient rounded down."""
        return self.div_rem(rhs)[0]

    def wrapping_rem(self, rhs):
        """The remainder."""
        return self.div_rem(rhs)[1]

    def __floordiv__(self, rhs):
        if not isinstance(rhs, UintBase):
            return NotImplemented
        return self.wrapping_div(rhs)

    def __mod__(self, rhs):
        if not isinstance(rhs, UintBase):
            return NotImplemented
        return self.wrapping_rem(rhs)