"""Conversion of fixed-width integers to and from byte strings."""

from __future__ import annotations

from typing import Iterable, Union

from fixuint.base import UintBase, nbytes

ByteSource = Union[bytes, bytearray, memoryview, Iterable[int]]


def _as_bytes(data: ByteSource) -> bytes:
    return bytes(data)


class ByteConv(UintBase):
    """Little- and big-endian byte representations."""

    __slots__ = ()

    def to_le_bytes(self) -> bytes:
        """Little-endian bytes, exactly ``nbytes(bits)`` long."""
        return self.value.to_bytes(nbytes(self.bits), "little")

    def to_be_bytes(self) -> bytes:
        """Big-endian bytes, exactly ``nbytes(bits)`` long."""
        return self.value.to_bytes(nbytes(self.bits), "big")

    def to_le_bytes_trimmed(self) -> bytes:
        """Little-endian bytes with trailing zero bytes removed."""
        length = (self.value.bit_length() + 7) // 8
        return self.value.to_bytes(length, "little")

    def to_be_bytes_trimmed(self) -> bytes:
        """Big-endian bytes with leading zero bytes removed."""
        length = (self.value.bit_length() + 7) // 8
        return self.value.to_bytes(length, "big")

    @classmethod
    def try_from_le_slice(cls, bits: int, data: ByteSource):
        """Read a little-endian number of any length, or None if it does not fit."""
        value = int.from_bytes(_as_bytes(data), "little")
        if value >> bits:
            return None
        return cls(bits, value)

    @classmethod
    def try_from_be_slice(cls, bits: int, data: ByteSource):
        """Read a big-endian number of any length, or None if it does not fit."""
        value = int.from_bytes(_as_bytes(data), "big")
        if value >> bits:
            return None
        return cls(bits, value)

    @classmethod
    def _check_length(cls, bits: int, data: bytes) -> None:
        expected = nbytes(bits)
        if len(data) != expected:
            raise ValueError(
                f"Uint<{bits}> needs exactly {expected} bytes, got {len(data)}"
            )

    @classmethod
    def from_le_bytes(cls, bits: int, data: ByteSource):
        """Read exactly ``nbytes(bits)`` little-endian bytes."""
        raw = _as_bytes(data)
        cls._check_length(bits, raw)
        result = cls.try_from_le_slice(bits, raw)
        if result is None:
            raise ValueError("Value too large for Uint")
        return result

    @classmethod
    def from_be_bytes(cls, bits: int, data: ByteSource):
        """Read exactly ``nbytes(bits)`` big-endian bytes."""
        raw = _as_bytes(data)
        cls._check_length(bits, raw)
        result = cls.try_from_be_slice(bits, raw)
        if result is None:
            raise ValueError("Value too large for Uint")
        return result