import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fixuint.digits import (
    BaseConvertError,
    BaseOverflowError,
    Digits,
    InvalidBaseError,
    InvalidDigitError,
)

N_LIMBS = [
    0xA8EC92344438AAF4,
    0x9819EBDBD1FAAAB1,
    0x573B1A7064C19C1A,
    0xC85EF7D79691FE79,
]
N_DECIMAL = (
    90630363884335538722706632492458228784305343302099024356772372330524102404852
)
BIG_BASE = 10000000000000000000
N_DIGITS_LE = [
    2372330524102404852,
    534330209902435677,
    7066324924582287843,
    630363884335538722,
    9,
]

SIZES = [0, 1, 2, 63, 64, 65, 127, 128, 129, 256, 384, 512, 4096]


def _n():
    return Digits.from_limbs(256, N_LIMBS)


def test_constant_matches_decimal():
    assert _n().value == N_DECIMAL


def test_to_base_le():
    assert list(Digits(64, 123456789).to_base_le(10)) == [9, 8, 7, 6, 5, 4, 3, 2, 1]
    assert list(_n().to_base_le(BIG_BASE)) == N_DIGITS_LE


def test_from_base_le():
    assert Digits.from_base_le(64, 10, [9, 8, 7, 6, 5, 4, 3, 2, 1]) == Digits(
        64, 123456789
    )
    assert Digits.from_base_le(256, BIG_BASE, N_DIGITS_LE) == _n()


def test_to_base_be():
    assert list(Digits(64, 123456789).to_base_be(10)) == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert list(_n().to_base_be(BIG_BASE)) == list(reversed(N_DIGITS_LE))


def test_from_base_be():
    assert Digits.from_base_be(64, 10, [1, 2, 3, 4, 5, 6, 7, 8, 9]) == Digits(
        64, 123456789
    )
    assert Digits.from_base_be(256, BIG_BASE, list(reversed(N_DIGITS_LE))) == _n()


def test_from_base_be_overflow():
    assert Digits.from_base_be(0, 10, []) == Digits.zero(0)
    assert Digits.from_base_be(0, 10, [0]) == Digits.zero(0)
    with pytest.raises(BaseOverflowError):
        Digits.from_base_be(0, 10, [1])
    with pytest.raises(BaseOverflowError):
        Digits.from_base_be(1, 10, [1, 0, 0])


def test_from_base_le_zero_width():
    assert Digits.from_base_le(0, 10, [0, 0, 0]) == Digits.zero(0)
    with pytest.raises(BaseOverflowError):
        Digits.from_base_le(0, 10, [0, 1])


def test_from_base_le_overflow():
    with pytest.raises(BaseOverflowError):
        Digits.from_base_le(8, 10, [6, 5, 2])
    assert Digits.from_base_le(8, 10, [5, 5, 2]) == Digits(8, 255)


def test_from_base_le_trailing_zeros_accepted():
    assert Digits.from_base_le(8, 2, [1] + [0] * 20) == Digits(8, 1)
    with pytest.raises(BaseOverflowError):
        Digits.from_base_le(8, 2, [0] * 9 + [1])


def test_invalid_base():
    with pytest.raises(InvalidBaseError) as info:
        Digits.from_base_le(64, 1, [0])
    assert info.value.base == 1
    with pytest.raises(InvalidBaseError):
        Digits.from_base_be(64, 0, [])
    with pytest.raises(InvalidBaseError):
        Digits(64, 5).to_base_le(1)
    with pytest.raises(InvalidBaseError):
        Digits(64, 5).to_base_be(0)


def test_invalid_digit():
    with pytest.raises(InvalidDigitError) as info:
        Digits.from_base_be(64, 10, [1, 10])
    assert (info.value.digit, info.value.base) == (10, 10)
    assert str(info.value) == "digit 10 is out of range for base 10"
    with pytest.raises(InvalidDigitError):
        Digits.from_base_le(64, 10, [3, 11])


def test_invalid_digit_after_overflow_point():
    with pytest.raises(InvalidDigitError):
        Digits.from_base_le(1, 10, [1, 12])


def test_error_hierarchy():
    with pytest.raises(BaseConvertError):
        Digits.from_base_be(1, 10, [5])
    with pytest.raises(ValueError):
        Digits.from_base_be(64, 1, [])


def test_error_messages():
    assert str(BaseOverflowError()) == "The value is too large to fit the target type"
    assert str(InvalidBaseError(1)) == "The requested number base 1 is less than two"


def test_zero_has_no_digits():
    assert list(Digits.zero(128).to_base_le(10)) == []
    assert list(Digits.zero(128).to_base_be(10)) == []


@pytest.mark.parametrize("bits", SIZES)
@settings(max_examples=30)
@given(data=st.data(), base=st.integers(min_value=2, max_value=BIG_BASE))
def test_roundtrip(bits, data, base):
    value = data.draw(st.integers(min_value=0, max_value=(1 << bits) - 1))
    number = Digits(bits, value)
    assert Digits.from_base_le(bits, base, number.to_base_le(base)) == number
    assert Digits.from_base_be(bits, base, number.to_base_be(base)) == number
    assert list(number.to_base_be(base)) == list(reversed(list(number.to_base_le(base))))