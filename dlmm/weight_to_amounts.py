"""Turn per-bin weights into token amounts to deposit into each bin."""

from typing import Optional, Sequence

from .errors import LBError, LBErrorCode
from .price_math import get_price_from_id
from .safe_math import IntKind, safe_add, safe_div, safe_mul, safe_shl
from .u64x64_math import SCALE_OFFSET
from .utils_math import (
    safe_mul_div_cast_from_u256_to_u64,
    safe_mul_div_cast_from_u64_to_u64,
)

U256 = IntKind.U256
Weights = Sequence[tuple[int, int]]


def _to_u64(value: int) -> int:
    if value > IntKind.U64.max:
        raise LBError(LBErrorCode.TypeCastFailed)
    return value


def _weight_per_price(weight: int, bin_id: int, bin_step: int) -> int:
    return safe_div(
        safe_shl(weight, SCALE_OFFSET * 2, U256),
        get_price_from_id(bin_id, bin_step),
        U256,
    )


def to_amount_bid_side(active_id: int, amount: int, weights: Weights) -> list[tuple[int, int]]:
    """Split amount of token Y over bins at or below the active bin by weight."""
    total_weight = 0
    for bin_id, weight in weights:
        # Bin ids are ascending, so the ask side starts here.
        if bin_id > active_id:
            break
        total_weight = safe_add(total_weight, weight, IntKind.U64)
    if total_weight == 0:
        raise LBError(LBErrorCode.InvalidInput)

    return [
        (
            bin_id,
            0
            if bin_id > active_id
            else safe_mul_div_cast_from_u64_to_u64(weight, amount, total_weight),
        )
        for bin_id, weight in weights
    ]


def to_amount_ask_side(
    active_id: int, amount: int, bin_step: int, weights: Weights
) -> list[tuple[int, int]]:
    """Split amount of token X over bins at or above the active bin by weight / price."""
    per_price = [
        0 if bin_id < active_id else _weight_per_price(weight, bin_id, bin_step)
        for bin_id, weight in weights
    ]
    total_weight = 0
    for value in per_price:
        total_weight = safe_add(total_weight, value, U256)
    if total_weight == 0:
        raise LBError(LBErrorCode.InvalidInput)

    return [
        (
            bin_id,
            0
            if bin_id < active_id
            else safe_mul_div_cast_from_u256_to_u64(amount, value, total_weight),
        )
        for (bin_id, _), value in zip(weights, per_price)
    ]


def _active_bin_index(active_id: int, weights: Weights) -> Optional[int]:
    for index, (bin_id, _) in enumerate(weights):
        if bin_id == active_id:
            return index
        if bin_id > active_id:
            break
    return None


def _active_bin_weights(
    active_weight: int, p0: int, amount_x: int, amount_y: int
) -> tuple[int, int]:
    if amount_x == 0 and amount_y == 0:
        # Equal split when the active bin holds nothing yet.
        wx0 = safe_div(
            safe_shl(active_weight, SCALE_OFFSET * 2, U256),
            safe_mul(p0, 2, U256),
            U256,
        )
        wy0 = safe_div(safe_shl(active_weight, SCALE_OFFSET, U256), 2, U256)
        return wx0, wy0

    wx0 = 0
    if amount_x != 0:
        ratio = safe_div(safe_shl(amount_y, SCALE_OFFSET, U256), amount_x, U256)
        wx0 = safe_div(
            safe_shl(active_weight, SCALE_OFFSET * 2, U256),
            safe_add(p0, ratio, U256),
            U256,
        )
    wy0 = 0
    if amount_y != 0:
        ratio = safe_div(safe_mul(p0, amount_x, U256), amount_y, U256)
        wy0 = safe_div(
            safe_shl(active_weight, SCALE_OFFSET * 2, U256),
            safe_add(safe_shl(1, SCALE_OFFSET, U256), ratio, U256),
            U256,
        )
    return wx0, wy0


def to_amount_both_side(
    active_id: int,
    bin_step: int,
    amount_x: int,
    amount_y: int,
    total_amount_x: int,
    total_amount_y: int,
    weights: Weights,
) -> list[tuple[int, int, int]]:
    """Split both tokens over bins on both sides of the active bin.

    amount_x and amount_y are what the active bin already holds; they decide
    the composition of the deposit into the active bin.
    """
    index = _active_bin_index(active_id, weights)
    active_weights: Optional[tuple[int, int]] = None
    if index is not None:
        active_bin_id, active_weight = weights[index]
        p0 = get_price_from_id(active_bin_id, bin_step)
        active_weights = _active_bin_weights(active_weight, p0, amount_x, amount_y)

    wx0, wy0 = active_weights if active_weights is not None else (0, 0)
    total_weight_x = wx0
    total_weight_y = wy0
    per_price = [
        _weight_per_price(weight, bin_id, bin_step) if bin_id > active_id else 0
        for bin_id, weight in weights
    ]
    for (bin_id, weight), value in zip(weights, per_price):
        if bin_id < active_id:
            total_weight_y = safe_add(
                total_weight_y, safe_shl(weight, SCALE_OFFSET, U256), U256
            )
        elif bin_id > active_id:
            total_weight_x = safe_add(total_weight_x, value, U256)

    ky = safe_div(safe_shl(total_amount_y, SCALE_OFFSET * 2, U256), total_weight_y, U256)
    kx = safe_div(safe_shl(total_amount_x, SCALE_OFFSET * 2, U256), total_weight_x, U256)
    k = min(kx, ky)

    amounts = []
    for (bin_id, weight), value in zip(weights, per_price):
        if bin_id < active_id:
            amount_y_in_bin = safe_mul(k, weight, U256) >> SCALE_OFFSET
            amounts.append((bin_id, 0, _to_u64(amount_y_in_bin)))
        elif bin_id > active_id:
            amount_x_in_bin = safe_mul(k, value, U256) >> (SCALE_OFFSET * 2)
            amounts.append((bin_id, _to_u64(amount_x_in_bin), 0))
        elif active_weights is not None:
            amount_x_in_bin = safe_mul(k, wx0, U256) >> (SCALE_OFFSET * 2)
            amount_y_in_bin = safe_mul(k, wy0, U256) >> (SCALE_OFFSET * 2)
            amounts.append((bin_id, _to_u64(amount_x_in_bin), _to_u64(amount_y_in_bin)))
    return amounts