"""Construction of fixed-width integers from Python integers and other widths."""

from __future__ import annotations

from fixuint.base import UintBase


class ToUintError(ValueError):
    """A value cannot be represented exactly as a Uint of the given width."""

    def __init__(self, message: str, bits: int) -> None:
        super().__init__(message)
        self.bits = bits


class ValueTooLargeError(ToUintError):
    """The value exceeds the bit width; ``wrapped`` holds it modulo 2**bits."""

    def __init__(self, bits: int, wrapped) -> None:
        super().__init__(f"Value is too large for Uint<{bits}>", bits)
        self.wrapped = wrapped


class ValueNegativeError(ToUintError):
    """The value is negative; ``wrapped`` holds it modulo 2**bits."""

    def __init__(self, bits: int, wrapped) -> None:
        super().__init__(
            f"Negative values cannot be represented as Uint<{bits}>", bits
        )
        self.wrapped = wrapped


class NotANumberError(ToUintError):
    """NaN has no integer value."""

    def __init__(self, bits: int) -> None:
        super().__init__(
            f"'Not a number' (NaN) cannot be represented as Uint<{bits}>", bits
        )


class IntConversion(UintBase):
    """Checked, saturating and wrapping construction from integers."""

    __slots__ = ()

    @classmethod
    def try_from(cls, bits: int, value):
        """Build from an int or a Uint of any width.

        Raises ValueTooLargeError or ValueNegativeError if the value does not
        fit; the error carries the value wrapped modulo 2**bits.
        """
        if isinstance(value, UintBase):
            number = value.value
        elif isinstance(value, int):
            number = int(value)
        else:
            raise TypeError(
                f"cannot convert {type(value).__name__} to Uint<{bits}>"
            )
        top = (1 << bits) - 1
        if number < 0:
            raise ValueNegativeError(bits, cls(bits, number & top))
        if number > top:
            raise ValueTooLargeError(bits, cls(bits, number & top))
        return cls(bits, number)

    @classmethod
    def from_value(cls, bits: int, value):
        """Build from a value that must fit; raises ValueError otherwise."""
        try:
            return cls.try_from(bits, value)
        except ToUintError as error:
            raise ValueError(f"Uint conversion error: {error}") from error

    @classmethod
    def saturating_from(cls, bits: int, value):
        """Build, clamping to the maximum when too large and to zero when negative."""
        try:
            return cls.try_from(bits, value)
        except ValueTooLargeError:
            return cls.max(bits)
        except (ValueNegativeError, NotANumberError):
            return cls.zero(bits)

    @classmethod
    def wrapping_from(cls, bits: int, value):
        """Build, reducing the value modulo 2**bits; NaN becomes zero."""
        try:
            return cls.try_from(bits, value)
        except (ValueTooLargeError, ValueNegativeError) as error:
            return error.wrapped
        except NotANumberError:
            return cls.zero(bits)