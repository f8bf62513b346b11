"""Bin price computation."""

from .constants import BASIS_POINT_MAX
from .errors import LBError, LBErrorCode
from .safe_math import IntKind, safe_add, safe_div, safe_shl
from .u64x64_math import ONE, SCALE_OFFSET, power


def get_price_from_id(active_id: int, bin_step: int) -> int:
    """Price of a bin, (1 + bin_step / 10000) ** active_id, in Q64.64."""
    IntKind.U16.check(bin_step)
    IntKind.I32.check(active_id)
    bps = safe_div(
        safe_shl(bin_step, SCALE_OFFSET, IntKind.U128),
        BASIS_POINT_MAX,
        IntKind.U128,
    )
    base = safe_add(ONE, bps, IntKind.U128)
    price = power(base, active_id)
    if price is None:
        raise LBError(LBErrorCode.MathOverflow)
    return price