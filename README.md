# dlmm

Pure-Python building blocks for a discretized-liquidity market maker, a pool in which liquidity
sits in price bins. The package has no dependencies outside the standard library.

## What is in it

- `dlmm.constants`: protocol limits such as `BASIS_POINT_MAX`, `MAX_BIN_PER_POSITION`,
  `MIN_BIN_ID` / `MAX_BIN_ID`, `MAX_FEE_RATE` and `MAX_PROTOCOL_SHARE`.
- `dlmm.errors`: `LBErrorCode`, an `IntEnum` of error codes numbered from 6000, each with a
  `message()`, and `LBError`, the exception raised throughout the package. Its `code` attribute
  holds the `LBErrorCode` member.
- `dlmm.safe_math`: checked arithmetic on fixed-width integer kinds (`IntKind.U16`, `I32`, `U64`,
  `U128`, `U256`, ...). `safe_add`, `safe_sub`, `safe_mul`, `safe_div`, `safe_rem`, `safe_shl`
  and `safe_shr` raise `LBError` with `MathOverflow` on overflow, division by zero or a bad
  shift. `IntKind.check(value)` does the same for a value out of range.
- `dlmm.u64x64_math`: Q64.64 fixed point. `power(base, exp)`, `to_decimal`, `from_decimal` and
  `get_base(bin_step)` return `None` when the result cannot be represented.
- `dlmm.u128x128_math`: `mul_div`, `mul_shr` and `shl_div` with 256-bit intermediates and
  `Rounding.UP` / `Rounding.DOWN`. They return `None` on failure.
- `dlmm.price_math.get_price_from_id(active_id, bin_step)`: the Q64.64 price of a bin,
  `(1 + bin_step / 10000) ** active_id`.
- `dlmm.bin_math.get_liquidity(x, y, price)`: constant-sum liquidity `L = price * x + y`.
- `dlmm.utils_math`: checked helpers that compute a result and cast it to an `IntKind`. They raise
  `MathOverflow` or `TypeCastFailed`.
- `dlmm.weight_to_amounts`: `to_amount_bid_side`, `to_amount_ask_side` and `to_amount_both_side`
  turn ascending `(bin_id, weight)` pairs into per-bin token amounts.
- `dlmm.liquidity`: deposit and withdrawal parameters.
  - `LiquidityParameterByWeight` has `validate(active_id)` and `to_amounts_into_bin(...)`.
  - `calculate_shares_to_remove(bps, share_in_bin)` gives the share to remove for a number of
    basis points.
  - There are also plain records for the other deposit shapes.
- `dlmm.strategy`: deposit shaping for spot, curve and bid/ask strategies, each balanced,
  imbalanced or one-sided.
  - The strategy kinds are in `StrategyType`, and `StrategyParameters` holds a strategy's settings.
  - `LiquidityParameterByStrategy` and `LiquidityParameterByStrategyOneSide` turn a deposit into
    per-bin amounts.
  - The weight generators are `to_weight_spot_balanced`, `to_weight_ascending_order`,
    `to_weight_descending_order`, `to_weight_curve` and `to_weight_bid_ask`.
- `dlmm.access`: admin key lists (`ADMINS`, `LAUNCH_POOL_CONFIG_ADMINS`), `PROGRAM_ID` and
  `FEE_OWNER`, together with the checks below.
  - `is_admin` and `is_launch_pool_admin` test a key against the admin lists.
  - `authorize_modify_position` and `authorize_claim_fee_position` work on a `PositionOwnership`.
- `dlmm.pubkey`: `b58encode` / `b58decode` and `Pubkey`, a 32-byte key with `from_base58`,
  `to_base58` and `default()`, which is the all-zero key.
- `dlmm.codec`: a little-endian field codec. `encode(schema, values)` and `decode(schema, data)`
  take a schema of `FieldType` scalars or `(FieldType, length)` arrays, and
  `discriminator(namespace, name)` gives an 8-byte SHA-256 tag.
- `dlmm.events`: frozen dataclasses for every program event (`Swap`, `AddLiquidity`, `ClaimFee`,
  `LbPairCreate`, ...).
  - Each event has `encode()`, `decode(data)` and `discriminator()`.
  - `decode_event(data)` picks the event class by its tag. A field named `from` in the event
    layout is spelt `from_`.
- `dlmm.params`: instruction arguments `InitPresetParametersIx`, `InitPermissionPairIx` and
  `FeeParameter`, each with `encode()` / `decode()`. `instruction_discriminator(name)` gives the
  tag for a known instruction name.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

The price of a bin:

```python
from dlmm.price_math import get_price_from_id
from dlmm.u64x64_math import to_decimal

price = get_price_from_id(100, 10)   # bin id 100, bin step 10 bps, Q64.64
print(to_decimal(price))             # price scaled by 10**12
```

Spreading a deposit over a range of bins:

```python
from dlmm.strategy import (
    LiquidityParameterByStrategy,
    StrategyParameters,
    StrategyType,
)

params = LiquidityParameterByStrategy(
    amount_x=1_000_000,
    amount_y=1_000_000,
    active_id=0,
    max_active_bin_slippage=3,
    strategy_parameters=StrategyParameters(
        min_bin_id=-5,
        max_bin_id=5,
        strategy_type=StrategyType.SPOT_BALANCED,
    ),
)
for bin_id, amount_x, amount_y in params.to_amounts_into_bin(0, 10, 0, 0):
    print(bin_id, amount_x, amount_y)
```

Errors:

```python
from dlmm.errors import LBError, LBErrorCode
from dlmm.strategy import to_weight_curve

try:
    to_weight_curve(0, 10, 20)
except LBError as err:
    assert err.code is LBErrorCode.InvalidStrategyParameters
    print(err.code.message())   # "Invalid strategy parameters"
```

Encoding and decoding an event:

```python
from dlmm.events import PositionClose, decode_event
from dlmm.pubkey import Pubkey

event = PositionClose(position=Pubkey.default(), owner=Pubkey.default())
assert decode_event(event.encode()) == event
```

## What it does not do

The package is a library of calculations and data layouts. It does not do the following:

- It keeps no pool state. There are no pair, bin array, position, oracle or reward accounts.
- It does not execute swaps, deposits, withdrawals, fee claims or reward updates against such
  state.
- It does not talk to a network or a node, sign or send transactions, or derive account
  addresses.
- It has no command-line interface.