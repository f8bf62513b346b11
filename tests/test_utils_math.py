import pytest
from hypothesis import given, strategies as st

from dlmm.errors import LBError, LBErrorCode
from dlmm.safe_math import IntKind
from dlmm.u128x128_math import Rounding
from dlmm.u64x64_math import MAX_EXPONENTIAL, ONE
from dlmm.utils_math import (
    safe_mul_div_cast,
    safe_mul_div_cast_from_u256_to_u64,
    safe_mul_div_cast_from_u64_to_u64,
    safe_mul_shr_cast,
    safe_pow_cast,
    safe_shl_div_cast,
)

U64 = st.integers(0, (1 << 64) - 1)


def test_pow_zero_exponent_fits_u128():
    assert safe_pow_cast(ONE * 2, 0, IntKind.U128) == ONE


def test_pow_cast_failure():
    with pytest.raises(LBError) as info:
        safe_pow_cast(ONE * 2, 0, IntKind.U64)
    assert info.value.code is LBErrorCode.TypeCastFailed


def test_pow_overflow():
    with pytest.raises(LBError) as info:
        safe_pow_cast(ONE * 2, MAX_EXPONENTIAL, IntKind.U128)
    assert info.value.code is LBErrorCode.MathOverflow


def test_mul_div_rounding():
    assert safe_mul_div_cast(7, 1, 2, Rounding.UP, IntKind.U64) == 4
    assert safe_mul_div_cast(7, 1, 2, Rounding.DOWN, IntKind.U64) == 3


def test_mul_div_zero_denominator():
    with pytest.raises(LBError) as info:
        safe_mul_div_cast(1, 1, 0, Rounding.DOWN, IntKind.U64)
    assert info.value.code is LBErrorCode.MathOverflow


@given(U64, st.integers(1, (1 << 64) - 1))
def test_u64_mul_div_identity(x, d):
    assert safe_mul_div_cast_from_u64_to_u64(x, d, d) == x


def test_u64_mul_div_cast_failure():
    with pytest.raises(LBError) as info:
        safe_mul_div_cast_from_u64_to_u64((1 << 64) - 1, 2, 1)
    assert info.value.code is LBErrorCode.TypeCastFailed


def test_u64_mul_div_zero_denominator():
    with pytest.raises(LBError) as info:
        safe_mul_div_cast_from_u64_to_u64(10, 20, 0)
    assert info.value.code is LBErrorCode.MathOverflow


@given(U64, st.integers(1, 1 << 200))
def test_u256_mul_div_identity(x, d):
    assert safe_mul_div_cast_from_u256_to_u64(x, d, d) == x


def test_u256_mul_div_errors():
    with pytest.raises(LBError) as info:
        safe_mul_div_cast_from_u256_to_u64(5, 1 << 100, 1)
    assert info.value.code is LBErrorCode.TypeCastFailed
    with pytest.raises(LBError) as info:
        safe_mul_div_cast_from_u256_to_u64(5, 1, 0)
    assert info.value.code is LBErrorCode.MathOverflow


@given(U64)
def test_mul_shr_by_one_is_identity(x):
    assert safe_mul_shr_cast(x, ONE, 64, Rounding.DOWN, IntKind.U64) == x


@given(U64)
def test_shl_div_by_one_is_identity(x):
    assert safe_shl_div_cast(x, ONE, 64, Rounding.DOWN, IntKind.U64) == x


def test_shl_div_zero_divisor():
    with pytest.raises(LBError) as info:
        safe_shl_div_cast(1, 0, 64, Rounding.UP, IntKind.U64)
    assert info.value.code is LBErrorCode.MathOverflow