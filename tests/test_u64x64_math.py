from hypothesis import given, strategies as st

from dlmm.constants import BASIS_POINT_MAX
from dlmm.u64x64_math import (
    MAX_EXPONENTIAL,
    ONE,
    PRECISION,
    U128_MAX,
    from_decimal,
    get_base,
    power,
    to_decimal,
)


def test_zero_exponent_is_one():
    assert power(get_base(1), 0) == ONE
    assert power(ONE // 3, 0) == ONE


def test_exponent_limit():
    base = get_base(1)
    assert power(base, MAX_EXPONENTIAL) is None
    assert power(base, -MAX_EXPONENTIAL) is None


def test_power_below_one_is_exact():
    half = ONE // 2
    assert power(half, 1) == half
    assert power(half, 2) == half // 2


def test_power_of_zero_base_is_none():
    assert power(0, 1) is None


def test_power_underflow_is_none():
    assert power(get_base(BASIS_POINT_MAX), -200) is None
    assert power(get_base(BASIS_POINT_MAX), 200) is None


@given(st.integers(min_value=1, max_value=100))
def test_power_one_is_close_to_base(bin_step):
    base = get_base(bin_step)
    assert abs(power(base, 1) - base) <= base >> 32


@given(st.integers(min_value=1, max_value=10), st.integers(min_value=1, max_value=2000))
def test_negative_exponent_inverts(bin_step, n):
    base = get_base(bin_step)
    up = power(base, n)
    down = power(base, -n)
    assert abs(((up * down) >> 64) - ONE) <= ONE >> 20


@given(st.integers(min_value=1, max_value=10), st.integers(min_value=0, max_value=2000))
def test_power_is_increasing(bin_step, n):
    base = get_base(bin_step)
    assert power(base, n + 1) > power(base, n)


def test_decimal_of_one():
    assert to_decimal(ONE) == PRECISION
    assert from_decimal(PRECISION) == ONE


def test_decimal_range():
    assert to_decimal(U128_MAX) is not None and to_decimal(U128_MAX) > PRECISION
    assert from_decimal(U128_MAX) is None


@given(st.integers(min_value=0, max_value=U128_MAX))
def test_decimal_round_trip(value):
    back = from_decimal(to_decimal(value))
    assert 0 <= value - back <= ONE // PRECISION + 1


def test_get_base_ends():
    assert get_base(0) == ONE
    assert get_base(BASIS_POINT_MAX) == 2 * ONE


@given(st.integers(min_value=0, max_value=2**16 - 2))
def test_get_base_increasing(bin_step):
    assert get_base(bin_step + 1) > get_base(bin_step)