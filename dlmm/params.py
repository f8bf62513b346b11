"""Instruction arguments for pool administration and their binary form."""

from dataclasses import dataclass, field, fields
from typing import Any

from .codec import FieldSpec, FieldType, decode, discriminator, encode

INSTRUCTION_NAMES = (
    "initialize_lb_pair",
    "initialize_permission_lb_pair",
    "initialize_bin_array_bitmap_extension",
    "initialize_bin_array",
    "add_liquidity",
    "add_liquidity_by_weight",
    "add_liquidity_by_strategy",
    "add_liquidity_by_strategy_one_side",
    "add_liquidity_one_side",
    "remove_liquidity",
    "initialize_position",
    "initialize_position_pda",
    "initialize_position_by_operator",
    "update_position_operator",
    "swap",
    "withdraw_protocol_fee",
    "update_fee_owner",
    "initialize_reward",
    "fund_reward",
    "update_reward_funder",
    "update_reward_duration",
    "claim_reward",
    "claim_fee",
    "close_position",
    "update_fee_parameters",
    "increase_oracle_length",
    "initialize_preset_parameter",
    "close_preset_parameter",
    "remove_all_liquidity",
    "toggle_pair_status",
    "update_whitelisted_wallet",
    "migrate_position",
    "migrate_bin_array",
    "update_fees_and_rewards",
    "withdraw_ineligible_reward",
    "set_activation_slot",
    "set_lock_release_slot",
    "add_liquidity_one_side_precise",
    "set_pre_activation_slot_duration",
    "set_pre_activation_swap_address",
)


def instruction_discriminator(name: str) -> bytes:
    """Eight-byte tag that prefixes the data of the named instruction."""
    if name not in INSTRUCTION_NAMES:
        raise ValueError(f"unknown instruction {name!r}")
    return discriminator("global", name)


def _wire(spec: FieldSpec) -> Any:
    return field(metadata={"wire": spec})


def _schema(cls: type) -> list[tuple[str, FieldSpec]]:
    return [(item.name, item.metadata["wire"]) for item in fields(cls)]


def _values(record: Any) -> dict[str, Any]:
    return {item.name: getattr(record, item.name) for item in fields(record)}


@dataclass(frozen=True)
class InitPresetParametersIx:
    """Fee and range settings for a new preset parameter account."""

    bin_step: int = _wire(FieldType.U16)
    base_factor: int = _wire(FieldType.U16)
    filter_period: int = _wire(FieldType.U16)
    decay_period: int = _wire(FieldType.U16)
    reduction_factor: int = _wire(FieldType.U16)
    variable_fee_control: int = _wire(FieldType.U32)
    max_volatility_accumulator: int = _wire(FieldType.U32)
    min_bin_id: int = _wire(FieldType.I32)
    max_bin_id: int = _wire(FieldType.I32)
    protocol_share: int = _wire(FieldType.U16)

    def encode(self) -> bytes:
        return encode(_schema(type(self)), _values(self))

    @classmethod
    def decode(cls, data: bytes) -> "InitPresetParametersIx":
        return cls(**decode(_schema(cls), data))


@dataclass(frozen=True)
class InitPermissionPairIx:
    """Settings for a pair created by a launch pool admin."""

    active_id: int = _wire(FieldType.I32)
    bin_step: int = _wire(FieldType.U16)
    base_factor: int = _wire(FieldType.U16)
    min_bin_id: int = _wire(FieldType.I32)
    max_bin_id: int = _wire(FieldType.I32)
    lock_duration_in_slot: int = _wire(FieldType.U64)

    def encode(self) -> bytes:
        return encode(_schema(type(self)), _values(self))

    @classmethod
    def decode(cls, data: bytes) -> "InitPermissionPairIx":
        return cls(**decode(_schema(cls), data))


@dataclass(frozen=True)
class FeeParameter:
    """New protocol share and base factor for a pair."""

    protocol_share: int = _wire(FieldType.U16)
    base_factor: int = _wire(FieldType.U16)

    def encode(self) -> bytes:
        return encode(_schema(type(self)), _values(self))

    @classmethod
    def decode(cls, data: bytes) -> "FeeParameter":
        return cls(**decode(_schema(cls), data))