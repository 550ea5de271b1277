import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixuint.toint import FromUintError, IntKind, IntTarget


def test_documented_to_examples():
    assert IntTarget(12, 300).to(IntKind.I16) == 300
    assert IntTarget(12, 300).to(256) == IntTarget(256, 300)


def test_documented_wrapping_examples():
    assert IntTarget(12, 300).wrapping_to(IntKind.I8) == 44
    assert IntTarget(32, 255).wrapping_to(IntKind.I8) == -1
    assert IntTarget(256, 0x1337CAFEC0D3).wrapping_to(32) == IntTarget(32, 0xCAFEC0D3)


def test_documented_saturating_examples():
    assert IntTarget(12, 300).saturating_to(IntKind.I16) == 300
    assert IntTarget(32, 255).saturating_to(IntKind.I8) == 127
    assert IntTarget(256, 0x1337CAFEC0D3).saturating_to(32) == IntTarget.max(32)


def test_overflow_raises():
    with pytest.raises(FromUintError) as info:
        IntTarget(32, 255).to(IntKind.I8)
    assert info.value.bits == 32
    assert info.value.saturated == IntKind.I8.maximum
    assert "Uint<32>" in str(info.value)


def test_bool_conversion():
    assert IntTarget(8, 1).to(IntKind.BOOL) is True
    assert IntTarget(8, 0).to(IntKind.BOOL) is False
    assert IntTarget(0, 0).to(IntKind.BOOL) is False
    with pytest.raises(FromUintError) as info:
        IntTarget(8, 2).to(IntKind.BOOL)
    assert info.value.wrapped is False
    assert info.value.saturated is True


def test_zero_width_converts_to_zero():
    for kind in (IntKind.U8, IntKind.I128, IntKind.U128):
        assert IntTarget(0, 0).to(kind) == 0


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_u64_round_trip(n):
    assert IntTarget(64, n).to(IntKind.U64) == n
    assert IntTarget(64, n).to(IntKind.USIZE) == n


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_i64_signed_limits(n):
    value = IntTarget(64, n)
    if n < 2**63:
        assert value.to(IntKind.I64) == n
    else:
        with pytest.raises(FromUintError):
            value.to(IntKind.I64)
        assert value.saturating_to(IntKind.I64) == IntKind.I64.maximum
        wrapped = value.wrapping_to(IntKind.I64)
        assert wrapped < 0
        assert wrapped % 2**64 == n


@given(st.integers(min_value=0, max_value=2**256 - 1))
def test_u128_wrapping_keeps_low_bits(n):
    value = IntTarget(256, n)
    wrapped = value.wrapping_to(IntKind.U128)
    assert 0 <= wrapped < 2**128
    assert (n - wrapped) % 2**128 == 0
    if n < 2**128:
        assert value.to(IntKind.U128) == n
    else:
        assert value.saturating_to(IntKind.U128) == IntKind.U128.maximum


@given(st.integers(min_value=0, max_value=2**128 - 1))
def test_i128_limit(n):
    value = IntTarget(128, n)
    if n.bit_length() > 127:
        with pytest.raises(FromUintError):
            value.to(IntKind.I128)
    else:
        assert value.to(IntKind.I128) == n


@given(st.integers(min_value=0, max_value=2**100 - 1))
def test_uint_width_round_trip(n):
    widened = IntTarget(100, n).to(256)
    assert widened.to(100) == IntTarget(100, n)
    narrowed = IntTarget(100, n).wrapping_to(64)
    assert narrowed.bits == 64
    assert (n - narrowed.value) % 2**64 == 0