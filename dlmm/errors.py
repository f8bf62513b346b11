"""Error codes raised by the pool logic."""

from enum import IntEnum


class LBErrorCode(IntEnum):
    """Numeric error codes, numbered from 6000 in declaration order."""

    InvalidStartBinIndex = 6000
    InvalidBinId = 6001
    InvalidInput = 6002
    ExceededAmountSlippageTolerance = 6003
    ExceededBinSlippageTolerance = 6004
    CompositionFactorFlawed = 6005
    NonPresetBinStep = 6006
    ZeroLiquidity = 6007
    InvalidPosition = 6008
    BinArrayNotFound = 6009
    InvalidTokenMint = 6010
    InvalidAccountForSingleDeposit = 6011
    PairInsufficientLiquidity = 6012
    InvalidFeeOwner = 6013
    InvalidFeeWithdrawAmount = 6014
    InvalidAdmin = 6015
    IdenticalFeeOwner = 6016
    InvalidBps = 6017
    MathOverflow = 6018
    TypeCastFailed = 6019
    InvalidRewardIndex = 6020
    InvalidRewardDuration = 6021
    RewardInitialized = 6022
    RewardUninitialized = 6023
    IdenticalFunder = 6024
    RewardCampaignInProgress = 6025
    IdenticalRewardDuration = 6026
    InvalidBinArray = 6027
    NonContinuousBinArrays = 6028
    InvalidRewardVault = 6029
    NonEmptyPosition = 6030
    UnauthorizedAccess = 6031
    InvalidFeeParameter = 6032
    MissingOracle = 6033
    InsufficientSample = 6034
    InvalidLookupTimestamp = 6035
    BitmapExtensionAccountIsNotProvided = 6036
    CannotFindNonZeroLiquidityBinArrayId = 6037
    BinIdOutOfBound = 6038
    InsufficientOutAmount = 6039
    InvalidPositionWidth = 6040
    ExcessiveFeeUpdate = 6041
    PoolDisabled = 6042
    InvalidPoolType = 6043
    ExceedMaxWhitelist = 6044
    InvalidIndex = 6045
    RewardNotEnded = 6046
    MustWithdrawnIneligibleReward = 6047
    InvalidStrategyParameters = 6048
    LiquidityLocked = 6049
    InvalidLockReleaseSlot = 6050

    def message(self) -> str:
        """Human readable description of the error."""
        return _MESSAGES[self.name]


_MESSAGES = {
    "InvalidStartBinIndex": "Invalid start bin index",
    "InvalidBinId": "Invalid bin id",
    "InvalidInput": "Invalid input data",
    "ExceededAmountSlippageTolerance": "Exceeded amount slippage tolerance",
    "ExceededBinSlippageTolerance": "Exceeded bin slippage tolerance",
    "CompositionFactorFlawed": "Composition factor flawed",
    "NonPresetBinStep": "Non preset bin step",
    "ZeroLiquidity": "Zero liquidity",
    "InvalidPosition": "Invalid position",
    "BinArrayNotFound": "Bin array not found",
    "InvalidTokenMint": "Invalid token mint",
    "InvalidAccountForSingleDeposit": "Invalid account for single deposit",
    "PairInsufficientLiquidity": "Pair insufficient liquidity",
    "InvalidFeeOwner": "Invalid fee owner",
    "InvalidFeeWithdrawAmount": "Invalid fee withdraw amount",
    "InvalidAdmin": "Invalid admin",
    "IdenticalFeeOwner": "Identical fee owner",
    "InvalidBps": "Invalid basis point",
    "MathOverflow": "Math operation overflow",
    "TypeCastFailed": "Type cast error",
    "InvalidRewardIndex": "Invalid reward index",
    "InvalidRewardDuration": "Invalid reward duration",
    "RewardInitialized": "Reward already initialized",
    "RewardUninitialized": "Reward not initialized",
    "IdenticalFunder": "Identical funder",
    "RewardCampaignInProgress": "Reward campaign in progress",
    "IdenticalRewardDuration": "Reward duration is the same",
    "InvalidBinArray": "Invalid bin array",
    "NonContinuousBinArrays": "Bin arrays must be continuous",
    "InvalidRewardVault": "Invalid reward vault",
    "NonEmptyPosition": "Position is not empty",
    "UnauthorizedAccess": "Unauthorized access",
    "InvalidFeeParameter": "Invalid fee parameter",
    "MissingOracle": "Missing oracle account",
    "InsufficientSample": "Insufficient observation sample",
    "InvalidLookupTimestamp": "Invalid lookup timestamp",
    "BitmapExtensionAccountIsNotProvided": "Bitmap extension account is not provided",
    "CannotFindNonZeroLiquidityBinArrayId": "Cannot find non-zero liquidity binArrayId",
    "BinIdOutOfBound": "Bin id out of bound",
    "InsufficientOutAmount": "Insufficient amount in for minimum out",
    "InvalidPositionWidth": "Invalid position width",
    "ExcessiveFeeUpdate": "Excessive fee update",
    "PoolDisabled": "Pool disabled",
    "InvalidPoolType": "Invalid pool type",
    "ExceedMaxWhitelist": "Whitelist for wallet is full",
    "InvalidIndex": "Invalid index",
    "RewardNotEnded": "Reward not ended",
    "MustWithdrawnIneligibleReward": "Must withdraw ineligible reward",
    "InvalidStrategyParameters": "Invalid strategy parameters",
    "LiquidityLocked": "Liquidity locked",
    "InvalidLockReleaseSlot": "Invalid lock release slot",
}


class LBError(Exception):
    """Exception carrying one of the pool's error codes."""

    def __init__(self, code: LBErrorCode) -> None:
        super().__init__(code.message())
        self.code = code

    def __repr__(self) -> str:
        return f"LBError({self.code.name})"