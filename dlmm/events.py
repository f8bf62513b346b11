"""Events emitted by the pool program and their binary form."""

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar

from .codec import FieldSpec, FieldType, decode, discriminator, encode
from .pubkey import Pubkey

_DISCRIMINATOR_SIZE = 8
_REGISTRY: dict[bytes, type["Event"]] = {}


def _wire(spec: FieldSpec) -> Any:
    return field(metadata={"wire": spec})


@dataclass(frozen=True)
class Event:
    """Base of all events: an 8-byte tag followed by the fields in order."""

    NAMESPACE: ClassVar[str] = "event"

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _REGISTRY[cls.discriminator()] = cls

    def __post_init__(self) -> None:
        for item in fields(self):
            if isinstance(item.metadata["wire"], tuple):
                object.__setattr__(self, item.name, tuple(getattr(self, item.name)))

    @classmethod
    def _schema(cls) -> list[tuple[str, FieldSpec]]:
        return [(item.name, item.metadata["wire"]) for item in fields(cls)]

    @classmethod
    def discriminator(cls) -> bytes:
        """Tag that prefixes this event's encoded form."""
        return discriminator(cls.NAMESPACE, cls.__name__)

    def encode(self) -> bytes:
        values = {item.name: getattr(self, item.name) for item in fields(self)}
        return self.discriminator() + encode(self._schema(), values)

    @classmethod
    def decode(cls, data: bytes) -> "Event":
        """Parse an encoded event of this class; raise ValueError on a mismatch."""
        data = bytes(data)
        if data[:_DISCRIMINATOR_SIZE] != cls.discriminator():
            raise ValueError(f"data is not a {cls.__name__} event")
        return cls(**decode(cls._schema(), data[_DISCRIMINATOR_SIZE:]))


def decode_event(data: bytes) -> Event:
    """Parse any known event, chosen by its tag."""
    data = bytes(data)
    event_class = _REGISTRY.get(data[:_DISCRIMINATOR_SIZE])
    if event_class is None:
        raise ValueError("unknown event discriminator")
    return event_class.decode(data)


@dataclass(frozen=True)
class CompositionFee(Event):
    from_: Pubkey = _wire(FieldType.PUBKEY)
    bin_id: int = _wire(FieldType.I16)
    token_x_fee_amount: int = _wire(FieldType.U64)
    token_y_fee_amount: int = _wire(FieldType.U64)
    protocol_token_x_fee_amount: int = _wire(FieldType.U64)
    protocol_token_y_fee_amount: int = _wire(FieldType.U64)


@dataclass(frozen=True)
class AddLiquidity(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    from_: Pubkey = _wire(FieldType.PUBKEY)
    position: Pubkey = _wire(FieldType.PUBKEY)
    amounts: tuple[int, int] = _wire((FieldType.U64, 2))
    active_bin_id: int = _wire(FieldType.I32)


@dataclass(frozen=True)
class RemoveLiquidity(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    from_: Pubkey = _wire(FieldType.PUBKEY)
    position: Pubkey = _wire(FieldType.PUBKEY)
    amounts: tuple[int, int] = _wire((FieldType.U64, 2))
    active_bin_id: int = _wire(FieldType.I32)


@dataclass(frozen=True)
class Swap(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    from_: Pubkey = _wire(FieldType.PUBKEY)
    start_bin_id: int = _wire(FieldType.I32)
    end_bin_id: int = _wire(FieldType.I32)
    amount_in: int = _wire(FieldType.U64)
    amount_out: int = _wire(FieldType.U64)
    swap_for_y: bool = _wire(FieldType.BOOL)
    fee: int = _wire(FieldType.U64)
    protocol_fee: int = _wire(FieldType.U64)
    fee_bps: int = _wire(FieldType.U128)
    host_fee: int = _wire(FieldType.U64)


@dataclass(frozen=True)
class ClaimReward(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    position: Pubkey = _wire(FieldType.PUBKEY)
    owner: Pubkey = _wire(FieldType.PUBKEY)
    reward_index: int = _wire(FieldType.U64)
    total_reward: int = _wire(FieldType.U64)


@dataclass(frozen=True)
class FundReward(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    funder: Pubkey = _wire(FieldType.PUBKEY)
    reward_index: int = _wire(FieldType.U64)
    amount: int = _wire(FieldType.U64)


@dataclass(frozen=True)
class InitializeReward(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    reward_mint: Pubkey = _wire(FieldType.PUBKEY)
    funder: Pubkey = _wire(FieldType.PUBKEY)
    reward_index: int = _wire(FieldType.U64)
    reward_duration: int = _wire(FieldType.U64)


@dataclass(frozen=True)
class UpdateRewardDuration(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    reward_index: int = _wire(FieldType.U64)
    old_reward_duration: int = _wire(FieldType.U64)
    new_reward_duration: int = _wire(FieldType.U64)


@dataclass(frozen=True)
class UpdateRewardFunder(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    reward_index: int = _wire(FieldType.U64)
    old_funder: Pubkey = _wire(FieldType.PUBKEY)
    new_funder: Pubkey = _wire(FieldType.PUBKEY)


@dataclass(frozen=True)
class PositionClose(Event):
    position: Pubkey = _wire(FieldType.PUBKEY)
    owner: Pubkey = _wire(FieldType.PUBKEY)


@dataclass(frozen=True)
class ClaimFee(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    position: Pubkey = _wire(FieldType.PUBKEY)
    owner: Pubkey = _wire(FieldType.PUBKEY)
    fee_x: int = _wire(FieldType.U64)
    fee_y: int = _wire(FieldType.U64)


@dataclass(frozen=True)
class LbPairCreate(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    bin_step: int = _wire(FieldType.U16)
    token_x: Pubkey = _wire(FieldType.PUBKEY)
    token_y: Pubkey = _wire(FieldType.PUBKEY)


@dataclass(frozen=True)
class PositionCreate(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    position: Pubkey = _wire(FieldType.PUBKEY)
    owner: Pubkey = _wire(FieldType.PUBKEY)


@dataclass(frozen=True)
class FeeParameterUpdate(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    protocol_share: int = _wire(FieldType.U16)
    base_factor: int = _wire(FieldType.U16)


@dataclass(frozen=True)
class IncreaseObservation(Event):
    oracle: Pubkey = _wire(FieldType.PUBKEY)
    new_observation_length: int = _wire(FieldType.U64)


@dataclass(frozen=True)
class WithdrawIneligibleReward(Event):
    lb_pair: Pubkey = _wire(FieldType.PUBKEY)
    reward_mint: Pubkey = _wire(FieldType.PUBKEY)
    amount: int = _wire(FieldType.U64)


@dataclass(frozen=True)
class UpdatePositionOperator(Event):
    position: Pubkey = _wire(FieldType.PUBKEY)
    old_operator: Pubkey = _wire(FieldType.PUBKEY)
    new_operator: Pubkey = _wire(FieldType.PUBKEY)


@dataclass(frozen=True)
class UpdatePositionLockReleaseSlot(Event):
    position: Pubkey = _wire(FieldType.PUBKEY)
    current_slot: int = _wire(FieldType.U64)
    new_lock_release_slot: int = _wire(FieldType.U64)
    old_lock_release_slot: int = _wire(FieldType.U64)
    sender: Pubkey = _wire(FieldType.PUBKEY)