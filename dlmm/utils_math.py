"""Checked fixed-point helpers that cast their result to a target width."""

from .errors import LBError, LBErrorCode
from .safe_math import IntKind, safe_div, safe_mul
from .u128x128_math import Rounding, mul_div, mul_shr, shl_div
from .u64x64_math import power


def _cast(value: int, kind: IntKind) -> int:
    if not kind.min <= value <= kind.max:
        raise LBError(LBErrorCode.TypeCastFailed)
    return value


def _require(value, ) -> int:
    if value is None:
        raise LBError(LBErrorCode.MathOverflow)
    return value


def safe_pow_cast(base: int, exp: int, kind: IntKind) -> int:
    """base ** exp in Q64.64, cast to kind."""
    return _cast(_require(power(base, exp)), kind)


def safe_mul_div_cast(
    x: int, y: int, denominator: int, rounding: Rounding, kind: IntKind
) -> int:
    """(x * y) / denominator, cast to kind."""
    return _cast(_require(mul_div(x, y, denominator, rounding)), kind)


def safe_mul_div_cast_from_u64_to_u64(x: int, y: int, denominator: int) -> int:
    """(x * y) / denominator computed in 128 bits, cast to u64."""
    for value in (x, y, denominator):
        IntKind.U64.check(value)
    product = safe_mul(x, y, IntKind.U128)
    return _cast(safe_div(product, denominator, IntKind.U128), IntKind.U64)


def safe_mul_div_cast_from_u256_to_u64(x: int, y: int, denominator: int) -> int:
    """(x * y) / denominator computed in 256 bits, cast to u64."""
    IntKind.U64.check(x)
    product = safe_mul(x, y, IntKind.U256)
    return _cast(safe_div(product, denominator, IntKind.U256), IntKind.U64)


def safe_mul_shr_cast(
    x: int, y: int, offset: int, rounding: Rounding, kind: IntKind
) -> int:
    """(x * y) >> offset, cast to kind."""
    return _cast(_require(mul_shr(x, y, offset, rounding)), kind)


def safe_shl_div_cast(
    x: int, y: int, offset: int, rounding: Rounding, kind: IntKind
) -> int:
    """(x << offset) / y, cast to kind."""
    return _cast(_require(shl_div(x, y, offset, rounding)), kind)