"""Liquidity of a bin under the constant sum formula."""

from .errors import LBError, LBErrorCode
from .safe_math import IntKind, safe_add, safe_mul, safe_shl
from .u64x64_math import SCALE_OFFSET


def get_liquidity(x: int, y: int, price: int) -> int:
    """Liquidity L = price * x + y, with price and the result in Q64.64."""
    IntKind.U64.check(x)
    IntKind.U64.check(y)
    IntKind.U128.check(price)
    px = safe_mul(price, x, IntKind.U256)
    shifted_y = safe_shl(y, SCALE_OFFSET, IntKind.U128)
    liquidity = safe_add(px, shifted_y, IntKind.U256)
    if liquidity > IntKind.U128.max:
        raise LBError(LBErrorCode.TypeCastFailed)
    return liquidity