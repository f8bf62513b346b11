import pytest
from hypothesis import given, strategies as st

from dlmm.codec import discriminator
from dlmm.events import (
    AddLiquidity,
    ClaimFee,
    ClaimReward,
    CompositionFee,
    Event,
    FeeParameterUpdate,
    FundReward,
    IncreaseObservation,
    InitializeReward,
    LbPairCreate,
    PositionClose,
    PositionCreate,
    RemoveLiquidity,
    Swap,
    UpdatePositionLockReleaseSlot,
    UpdatePositionOperator,
    UpdateRewardDuration,
    UpdateRewardFunder,
    WithdrawIneligibleReward,
    decode_event,
)
from dlmm.pubkey import Pubkey

KEY_A = Pubkey(bytes([1]) * 32)
KEY_B = Pubkey(bytes([2]) * 32)
KEY_C = Pubkey(bytes([3]) * 32)

ALL_EVENTS = [
    CompositionFee, AddLiquidity, RemoveLiquidity, Swap, ClaimReward,
    FundReward, InitializeReward, UpdateRewardDuration, UpdateRewardFunder,
    PositionClose, ClaimFee, LbPairCreate, PositionCreate,
    FeeParameterUpdate, IncreaseObservation, WithdrawIneligibleReward,
    UpdatePositionOperator, UpdatePositionLockReleaseSlot,
]


def _swap(**overrides):
    values = dict(
        lb_pair=KEY_A, from_=KEY_B, start_bin_id=-5, end_bin_id=7,
        amount_in=1000, amount_out=990, swap_for_y=True, fee=10,
        protocol_fee=2, fee_bps=25, host_fee=1,
    )
    values.update(overrides)
    return Swap(**values)


def test_discriminator_uses_event_namespace():
    assert Swap.discriminator() == discriminator("event", "Swap")


def test_discriminators_are_unique():
    tags = set()
    for cls in ALL_EVENTS:
        tag = cls.discriminator()
        assert len(tag) == 8
        tags.add(tag)
    assert len(tags) == len(ALL_EVENTS)
    assert Swap.discriminator() in tags
    assert PositionClose.discriminator() != ClaimFee.discriminator()


def test_encode_starts_with_discriminator():
    assert _swap().encode()[:8] == Swap.discriminator()


def test_swap_encoded_length():
    assert len(_swap().encode()) == 137


def test_position_close_wire_bytes():
    data = PositionClose(position=KEY_A, owner=KEY_B).encode()
    assert data == PositionClose.discriminator() + bytes(KEY_A) + bytes(KEY_B)


def test_swap_round_trip():
    swap = _swap()
    assert Swap.decode(swap.encode()) == swap


def test_amounts_list_becomes_tuple():
    event = AddLiquidity(
        lb_pair=KEY_A, from_=KEY_B, position=KEY_C, amounts=[5, 6], active_bin_id=-3
    )
    assert event.amounts == (5, 6)
    assert AddLiquidity.decode(event.encode()) == event


def test_decode_event_dispatches_by_tag():
    event = ClaimFee(lb_pair=KEY_A, position=KEY_B, owner=KEY_C, fee_x=3, fee_y=4)
    decoded = decode_event(event.encode())
    assert isinstance(decoded, ClaimFee)
    assert decoded == event


def test_decode_event_unknown_tag():
    with pytest.raises(ValueError):
        decode_event(bytes(8) + bytes(KEY_A))


def test_decode_wrong_class_raises():
    data = PositionClose(position=KEY_A, owner=KEY_B).encode()
    with pytest.raises(ValueError):
        ClaimFee.decode(data)


def test_decode_truncated_raises():
    data = _swap().encode()
    with pytest.raises(ValueError):
        Swap.decode(data[:-1])


def test_decode_trailing_bytes_raises():
    data = _swap().encode()
    with pytest.raises(ValueError):
        Swap.decode(data + b"\x00")


def test_bin_id_out_of_i16_range():
    event = CompositionFee(
        from_=KEY_A, bin_id=40_000, token_x_fee_amount=0, token_y_fee_amount=0,
        protocol_token_x_fee_amount=0, protocol_token_y_fee_amount=0,
    )
    with pytest.raises(ValueError):
        event.encode()


def test_amounts_wrong_length_raises():
    event = AddLiquidity(
        lb_pair=KEY_A, from_=KEY_B, position=KEY_C, amounts=[1, 2, 3], active_bin_id=0
    )
    with pytest.raises(ValueError):
        event.encode()


def test_negative_u64_raises():
    with pytest.raises(ValueError):
        _swap(amount_in=-1).encode()


def test_lb_pair_create_and_lock_release_round_trip():
    created = LbPairCreate(lb_pair=KEY_A, bin_step=25, token_x=KEY_B, token_y=KEY_C)
    lock = UpdatePositionLockReleaseSlot(
        position=KEY_A, current_slot=10, new_lock_release_slot=20,
        old_lock_release_slot=5, sender=KEY_B,
    )
    assert decode_event(created.encode()) == created
    assert decode_event(lock.encode()) == lock


def test_every_event_is_an_event():
    names = set()
    for cls in ALL_EVENTS:
        assert issubclass(cls, Event)
        assert cls.discriminator() == discriminator("event", cls.__name__)
        names.add(cls.__name__)
    assert len(names) == 18


@given(
    start=st.integers(-(2**31), 2**31 - 1),
    amount=st.integers(0, 2**64 - 1),
    fee_bps=st.integers(0, 2**128 - 1),
    for_y=st.booleans(),
)
def test_swap_round_trip_property(start, amount, fee_bps, for_y):
    swap = _swap(start_bin_id=start, amount_out=amount, fee_bps=fee_bps, swap_for_y=for_y)
    assert decode_event(swap.encode()) == swap