"""Deposit and withdrawal parameters and how they map to per-bin amounts."""

from dataclasses import dataclass, field

from .constants import BASIS_POINT_MAX, MAX_BIN_PER_POSITION
from .errors import LBError, LBErrorCode
from .safe_math import IntKind, safe_div, safe_mul
from .weight_to_amounts import (
    to_amount_ask_side,
    to_amount_bid_side,
    to_amount_both_side,
)


@dataclass
class CompositeDepositInfo:
    """Outcome of a deposit into the active bin that swaps part of it."""

    liquidity_share: int = 0
    protocol_token_x_fee_amount: int = 0
    protocol_token_y_fee_amount: int = 0


@dataclass
class BinLiquidityDistribution:
    """Share of amount X and amount Y, in basis points, to put into one bin."""

    bin_id: int
    distribution_x: int
    distribution_y: int


@dataclass
class LiquidityParameter:
    """Amounts of both tokens and how they are spread over bins."""

    amount_x: int
    amount_y: int
    bin_liquidity_dist: list[BinLiquidityDistribution] = field(default_factory=list)


@dataclass
class BinLiquidityDistributionByWeight:
    """Relative weight of the liquidity placed into one bin."""

    bin_id: int = 0
    weight: int = 0


@dataclass
class LiquidityParameterByWeight:
    """Deposit described by per-bin weights instead of exact shares."""

    amount_x: int
    amount_y: int
    active_id: int
    max_active_bin_slippage: int
    bin_liquidity_dist: list[BinLiquidityDistributionByWeight] = field(
        default_factory=list
    )

    def _weights(self) -> list[tuple[int, int]]:
        return [(dist.bin_id, dist.weight) for dist in self.bin_liquidity_dist]

    def validate(self, active_id: int) -> None:
        """Raise LBError unless the parameter is usable at the given active bin."""
        bin_count = len(self.bin_liquidity_dist)
        if bin_count == 0 or bin_count > MAX_BIN_PER_POSITION:
            raise LBError(LBErrorCode.InvalidInput)

        if abs(active_id - self.active_id) > self.max_active_bin_slippage:
            raise LBError(LBErrorCode.ExceededBinSlippageTolerance)

        previous_bin_id = None
        for dist in self.bin_liquidity_dist:
            if dist.weight == 0:
                raise LBError(LBErrorCode.InvalidInput)
            if previous_bin_id is not None and dist.bin_id <= previous_bin_id:
                raise LBError(LBErrorCode.InvalidInput)
            previous_bin_id = dist.bin_id

        first_bin_id = self.bin_liquidity_dist[0].bin_id
        last_bin_id = self.bin_liquidity_dist[-1].bin_id
        if first_bin_id > active_id and self.amount_x == 0:
            raise LBError(LBErrorCode.InvalidInput)
        if last_bin_id < active_id and self.amount_y == 0:
            raise LBError(LBErrorCode.InvalidInput)

    def to_amounts_into_bin(
        self,
        active_id: int,
        bin_step: int,
        amount_x_in_active_bin: int,
        amount_y_in_active_bin: int,
    ) -> list[tuple[int, int, int]]:
        """(bin_id, amount_x, amount_y) for each bin; bin ids must be ascending."""
        if not self.bin_liquidity_dist:
            raise LBError(LBErrorCode.InvalidInput)
        weights = self._weights()

        if active_id > self.bin_liquidity_dist[-1].bin_id:
            return [
                (bin_id, 0, amount)
                for bin_id, amount in to_amount_bid_side(
                    active_id, self.amount_y, weights
                )
            ]

        if active_id < self.bin_liquidity_dist[0].bin_id:
            return [
                (bin_id, amount, 0)
                for bin_id, amount in to_amount_ask_side(
                    active_id, self.amount_x, bin_step, weights
                )
            ]

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
class CompressedBinDepositAmount:
    """Deposit into one bin, scaled down by the parameter's multiplier."""

    bin_id: int
    amount: int


@dataclass
class AddLiquiditySingleSidePreciseParameter:
    """One-sided deposit with an exact amount per bin."""

    bins: list[CompressedBinDepositAmount] = field(default_factory=list)
    decompress_multiplier: int = 1


@dataclass
class BinLiquidityReduction:
    """Portion of a bin's liquidity, in basis points, to withdraw."""

    bin_id: int
    bps_to_remove: int


def calculate_shares_to_remove(bps: int, share_in_bin: int) -> int:
    """Liquidity share to remove from a bin holding share_in_bin for bps basis points."""
    IntKind.U16.check(bps)
    IntKind.U128.check(share_in_bin)
    shares = safe_div(
        safe_mul(bps, share_in_bin, IntKind.U256), BASIS_POINT_MAX, IntKind.U256
    )
    if shares > IntKind.U128.max:
        raise LBError(LBErrorCode.TypeCastFailed)
    return shares