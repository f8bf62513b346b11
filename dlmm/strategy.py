"""Deposit strategies that spread liquidity over a range of bins."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable

from .errors import LBError, LBErrorCode
from .safe_math import IntKind, safe_div, safe_sub
from .weight_to_amounts import (
    to_amount_ask_side,
    to_amount_bid_side,
    to_amount_both_side,
)

DEFAULT_MIN_WEIGHT = 200
DEFAULT_MAX_WEIGHT = 2000

# Size of the opaque per-strategy parameter blob.
STRATEGY_PARAMETERS_SIZE = 64

_U16_MASK = 0xFFFF

Weights = list[tuple[int, int]]


def _invalid() -> LBError:
    return LBError(LBErrorCode.InvalidStrategyParameters)


def _u16(value: int) -> int:
    return value & _U16_MASK


class StrategyType(IntEnum):
    """How liquidity is shaped over the chosen bins."""

    SPOT_ONE_SIDE = 0
    CURVE_ONE_SIDE = 1
    BID_ASK_ONE_SIDE = 2
    SPOT_BALANCED = 3
    CURVE_BALANCED = 4
    BID_ASK_BALANCED = 5
    SPOT_IMBALANCED = 6
    CURVE_IMBALANCED = 7
    BID_ASK_IMBALANCED = 8


@dataclass
class StrategyParameters:
    """Bin range, strategy shape and an opaque parameter blob."""

    min_bin_id: int = 0
    max_bin_id: int = 0
    strategy_type: StrategyType = StrategyType.SPOT_BALANCED
    parameters: bytes = field(default_factory=lambda: bytes(STRATEGY_PARAMETERS_SIZE))

    def __post_init__(self) -> None:
        self.parameters = bytes(self.parameters)
        if len(self.parameters) != STRATEGY_PARAMETERS_SIZE:
            raise ValueError(
                f"parameters must be {STRATEGY_PARAMETERS_SIZE} bytes, "
                f"got {len(self.parameters)}"
            )

    def validate_both_side(self, active_id: int) -> None:
        """Raise unless the active bin lies inside the strategy's range."""
        if not self.min_bin_id <= active_id <= self.max_bin_id:
            raise _invalid()

    def bin_count(self) -> int:
        """max_bin_id - min_bin_id, as an unsigned machine word."""
        diff = safe_sub(self.max_bin_id, self.min_bin_id, IntKind.I32)
        return diff & IntKind.USIZE.max


def to_weight_spot_balanced(min_bin_id: int, max_bin_id: int) -> Weights:
    """Equal weight of one for every bin in the range."""
    return [(bin_id, 1) for bin_id in range(min_bin_id, max_bin_id + 1)]


def to_weight_descending_order(min_bin_id: int, max_bin_id: int) -> Weights:
    """Weights falling by one per bin, ending at one on the last bin."""
    return [
        (bin_id, _u16(max_bin_id - bin_id + 1))
        for bin_id in range(min_bin_id, max_bin_id + 1)
    ]


def to_weight_ascending_order(min_bin_id: int, max_bin_id: int) -> Weights:
    """Weights rising by one per bin, starting at one on the first bin."""
    return [
        (bin_id, _u16(bin_id - min_bin_id + 1))
        for bin_id in range(min_bin_id, max_bin_id + 1)
    ]


def _weight_steps(min_bin_id: int, max_bin_id: int, active_id: int) -> tuple[int, int]:
    if not min_bin_id <= active_id <= max_bin_id:
        raise _invalid()
    diff_weight = safe_sub(DEFAULT_MAX_WEIGHT, DEFAULT_MIN_WEIGHT, IntKind.U16)
    below = 0
    if active_id > min_bin_id:
        span = _u16(safe_sub(active_id, min_bin_id, IntKind.I32))
        below = safe_div(diff_weight, span, IntKind.U16)
    above = 0
    if max_bin_id > active_id:
        span = _u16(safe_sub(max_bin_id, active_id, IntKind.I32))
        above = safe_div(diff_weight, span, IntKind.U16)
    return below, above


def _shaped_weights(
    min_bin_id: int,
    max_bin_id: int,
    active_id: int,
    peak: int,
    direction: int,
) -> Weights:
    below, above = _weight_steps(min_bin_id, max_bin_id, active_id)
    weights = []
    for bin_id in range(min_bin_id, max_bin_id + 1):
        if bin_id < active_id:
            delta = _u16(active_id - bin_id) * below
        elif bin_id > active_id:
            delta = _u16(bin_id - active_id) * above
        else:
            delta = 0
        weights.append((bin_id, _u16(peak + direction * delta)))
    return weights


def to_weight_curve(min_bin_id: int, max_bin_id: int, active_id: int) -> Weights:
    """Weights peaking at the active bin and falling linearly toward both ends."""
    return _shaped_weights(min_bin_id, max_bin_id, active_id, DEFAULT_MAX_WEIGHT, -1)


def to_weight_bid_ask(min_bin_id: int, max_bin_id: int, active_id: int) -> Weights:
    """Weights lowest at the active bin and rising linearly toward both ends."""
    return _shaped_weights(min_bin_id, max_bin_id, active_id, DEFAULT_MIN_WEIGHT, 1)


WeightFn = Callable[[int, int], Weights]

# Bid-side and ask-side weight shapes for the imbalanced strategies.
_IMBALANCED: dict[StrategyType, tuple[WeightFn, WeightFn]] = {
    StrategyType.SPOT_IMBALANCED: (to_weight_spot_balanced, to_weight_spot_balanced),
    StrategyType.CURVE_IMBALANCED: (to_weight_ascending_order, to_weight_descending_order),
    StrategyType.BID_ASK_IMBALANCED: (to_weight_descending_order, to_weight_ascending_order),
}


@dataclass
class LiquidityParameterByStrategy:
    """Two-sided deposit shaped by a strategy."""

    amount_x: int = 0
    amount_y: int = 0
    active_id: int = 0
    max_active_bin_slippage: int = 0
    strategy_parameters: StrategyParameters = field(default_factory=StrategyParameters)

    def _balanced_weights(self, active_id: int) -> Weights:
        params = self.strategy_parameters
        kind = params.strategy_type
        if kind is StrategyType.SPOT_BALANCED:
            return to_weight_spot_balanced(params.min_bin_id, params.max_bin_id)
        if kind is StrategyType.CURVE_BALANCED:
            return to_weight_curve(params.min_bin_id, params.max_bin_id, active_id)
        if kind is StrategyType.BID_ASK_BALANCED:
            return to_weight_bid_ask(params.min_bin_id, params.max_bin_id, active_id)
        raise _invalid()

    def to_amounts_into_bin(
        self,
        active_id: int,
        bin_step: int,
        amount_x_in_active_bin: int,
        amount_y_in_active_bin: int,
    ) -> list[tuple[int, int, int]]:
        """(bin_id, amount_x, amount_y) for every bin the strategy covers."""
        params = self.strategy_parameters
        min_bin_id, max_bin_id = params.min_bin_id, params.max_bin_id

        shapes = _IMBALANCED.get(params.strategy_type)
        if shapes is not None:
            bid_shape, ask_shape = shapes
            amounts: list[tuple[int, int, int]] = []
            if min_bin_id <= active_id:
                weights = bid_shape(min_bin_id, active_id)
                amounts.extend(
                    (bin_id, 0, amount)
                    for bin_id, amount in to_amount_bid_side(active_id, self.amount_y, weights)
                )
            if active_id < max_bin_id:
                weights = ask_shape(active_id + 1, max_bin_id)
                amounts.extend(
                    (bin_id, amount, 0)
                    for bin_id, amount in to_amount_ask_side(
                        active_id, self.amount_x, bin_step, weights
                    )
                )
            return amounts

        weights = self._balanced_weights(active_id)
        return to_amount_both_side(
            active_id,
            bin_step,
            amount_x_in_active_bin,
            amount_y_in_active_bin,
            self.amount_x,
            self.amount_y,
            weights,
        )


@dataclass
class LiquidityParameterByStrategyOneSide:
    """Deposit of a single token shaped by a one-sided strategy."""

    amount: int = 0
    active_id: int = 0
    max_active_bin_slippage: int = 0
    strategy_parameters: StrategyParameters = field(default_factory=StrategyParameters)

    def _weights(self, deposit_for_y: bool) -> Weights:
        params = self.strategy_parameters
        low, high = params.min_bin_id, params.max_bin_id
        kind = params.strategy_type
        if kind is StrategyType.SPOT_ONE_SIDE:
            return to_weight_spot_balanced(low, high)
        if kind is StrategyType.CURVE_ONE_SIDE:
            shape = to_weight_ascending_order if deposit_for_y else to_weight_descending_order
            return shape(low, high)
        if kind is StrategyType.BID_ASK_ONE_SIDE:
            shape = to_weight_descending_order if deposit_for_y else to_weight_ascending_order
            return shape(low, high)
        raise _invalid()

    def to_amounts_into_bin(
        self, active_id: int, bin_step: int, deposit_for_y: bool
    ) -> list[tuple[int, int]]:
        """(bin_id, amount) for every bin the strategy covers."""
        weights = self._weights(deposit_for_y)
        if deposit_for_y:
            return to_amount_bid_side(active_id, self.amount, weights)
        return to_amount_ask_side(active_id, self.amount, bin_step, weights)