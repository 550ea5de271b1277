"""Conversion of fixed-width integers to and from digits in an arbitrary base."""

from __future__ import annotations

import operator
from typing import Iterable, Iterator

from fixuint.base import UintBase


class BaseConvertError(ValueError):
    """Digits could not be converted to a Uint."""


class BaseOverflowError(BaseConvertError):
    """The value is too large to fit the target type."""

    def __init__(self) -> None:
        super().__init__("The value is too large to fit the target type")


class InvalidBaseError(BaseConvertError):
    """The requested number base is less than two."""

    def __init__(self, base: int) -> None:
        super().__init__(f"The requested number base {base} is less than two")
        self.base = base


class InvalidDigitError(BaseConvertError):
    """A digit is out of range for the requested base."""

    def __init__(self, digit: int, base: int) -> None:
        super().__init__(f"digit {digit} is out of range for base {base}")
        self.digit = digit
        self.base = base


def _check_base(base) -> int:
    base = operator.index(base)
    if base < 2:
        raise InvalidBaseError(base)
    return base


def _check_digit(digit, base: int) -> int:
    digit = operator.index(digit)
    if not 0 <= digit < base:
        raise InvalidDigitError(digit, base)
    return digit


def _spigot(value: int, base: int) -> Iterator[int]:
    while value:
        value, digit = divmod(value, base)
        yield digit


class Digits(UintBase):
    """Digit extraction and construction from digits in any base of two or more."""

    __slots__ = ()

    def to_base_le(self, base) -> Iterator[int]:
        """Digits in ``base``, least significant first; none for zero.

        Raises InvalidBaseError if ``base`` is less than two.
        """
        return _spigot(self.value, _check_base(base))

    def to_base_be(self, base) -> Iterator[int]:
        """Digits in ``base``, most significant first; none for zero.

        Raises InvalidBaseError if ``base`` is less than two.
        """
        digits = list(self.to_base_le(base))
        return reversed(digits)

    @classmethod
    def from_base_le(cls, bits: int, base, digits: Iterable[int]):
        """Build from digits in ``base``, least significant first.

        Raises InvalidBaseError, InvalidDigitError or BaseOverflowError.
        """
        base = _check_base(base)
        top = (1 << bits) - 1
        result = 0
        power = 1
        remaining = iter(digits)
        for digit in remaining:
            digit = _check_digit(digit, base)
            result += digit * power
            if result > top:
                raise BaseOverflowError()
            power *= base
            if power > top:
                break
        for digit in remaining:
            if _check_digit(digit, base) != 0:
                raise BaseOverflowError()
        return cls(bits, result)

    @classmethod
    def from_base_be(cls, bits: int, base, digits: Iterable[int]):
        """Build from digits in ``base``, most significant first.

        Raises InvalidBaseError, InvalidDigitError or BaseOverflowError.
        """
        base = _check_base(base)
        top = (1 << bits) - 1
        result = 0
        for digit in digits:
            digit = _check_digit(digit, base)
            result = result * base + digit
            if result > top:
                raise BaseOverflowError()
        return cls(bits, result)