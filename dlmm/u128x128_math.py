"""Multiply-then-divide helpers on 128-bit values with 256-bit intermediates."""

from enum import Enum
from typing import Optional

U128_MAX = (1 << 128) - 1
U256_MAX = (1 << 256) - 1


class Rounding(Enum):
    UP = "up"
    DOWN = "down"


def _is_u128(value: int) -> bool:
    return 0 <= value <= U128_MAX


def mul_div(x: int, y: int, denominator: int, rounding: Rounding) -> Optional[int]:
    """(x * y) / denominator, or None when it cannot be represented in 128 bits."""
    if not (_is_u128(x) and _is_u128(y) and _is_u128(denominator)):
        return None
    if denominator == 0:
        return None
    prod = x * y
    if prod > U256_MAX:
        return None
    if rounding is Rounding.UP:
        result = -(-prod // denominator)
    else:
        result = prod // denominator
    return result if result <= U128_MAX else None


def mul_shr(x: int, y: int, offset: int, rounding: Rounding) -> Optional[int]:
    """(x * y) >> offset."""
    if not 0 <= offset < 128:
        return None
    return mul_div(x, y, 1 << offset, rounding)


def shl_div(x: int, y: int, offset: int, rounding: Rounding) -> Optional[int]:
    """(x << offset) / y."""
    if not 0 <= offset < 128:
        return None
    return mul_div(x, 1 << offset, y, rounding)