import pytest
from hypothesis import given, strategies as st

from dlmm.errors import LBError, LBErrorCode
from dlmm.price_math import get_price_from_id
from dlmm.u64x64_math import MAX_EXPONENTIAL, ONE, get_base


@pytest.mark.parametrize("bin_step", [1, 10, 100, 250])
def test_bin_zero_is_one(bin_step):
    assert get_price_from_id(0, bin_step) == ONE


@pytest.mark.parametrize("bin_step", [1, 25, 100])
def test_bin_one_matches_base(bin_step):
    price = get_price_from_id(1, bin_step)
    assert abs(price - get_base(bin_step)) <= 4


@given(st.integers(-1000, 1000), st.integers(1, 100))
def test_price_increases_with_bin_id(active_id, bin_step):
    assert get_price_from_id(active_id + 1, bin_step) > get_price_from_id(active_id, bin_step)


@given(st.integers(1, 2000), st.integers(1, 100))
def test_negative_id_is_reciprocal(active_id, bin_step):
    product = get_price_from_id(active_id, bin_step) * get_price_from_id(-active_id, bin_step)
    target = ONE * ONE
    assert abs(product - target) < target // 10**9


def test_exponent_limit_overflows():
    with pytest.raises(LBError) as info:
        get_price_from_id(MAX_EXPONENTIAL, 1)
    assert info.value.code is LBErrorCode.MathOverflow


def test_price_out_of_range_overflows():
    with pytest.raises(LBError) as info:
        get_price_from_id(100_000, 100)
    assert info.value.code is LBErrorCode.MathOverflow


def test_bin_step_out_of_range():
    with pytest.raises(LBError) as info:
        get_price_from_id(0, 1 << 16)
    assert info.value.code is LBErrorCode.MathOverflow