import pytest
from hypothesis import given, strategies as st

from dlmm.codec import discriminator
from dlmm.params import (
    INSTRUCTION_NAMES,
    FeeParameter,
    InitPermissionPairIx,
    InitPresetParametersIx,
    instruction_discriminator,
)


def _preset(**overrides):
    values = dict(
        bin_step=25, base_factor=10_000, filter_period=30, decay_period=600,
        reduction_factor=5000, variable_fee_control=40_000,
        max_volatility_accumulator=350_000, min_bin_id=-443_636,
        max_bin_id=443_636, protocol_share=2_500,
    )
    values.update(overrides)
    return InitPresetParametersIx(**values)


def test_fee_parameter_wire_bytes():
    assert FeeParameter(protocol_share=1, base_factor=2).encode() == b"\x01\x00\x02\x00"


def test_fee_parameter_decode():
    assert FeeParameter.decode(b"\x01\x00\x02\x00") == FeeParameter(1, 2)


def test_fee_parameter_decode_wrong_length():
    with pytest.raises(ValueError):
        FeeParameter.decode(b"\x01\x00\x02")


def test_preset_encoded_length():
    assert len(_preset().encode()) == 28


def test_preset_round_trip():
    preset = _preset()
    assert InitPresetParametersIx.decode(preset.encode()) == preset


def test_preset_starts_with_bin_step_little_endian():
    assert _preset(bin_step=0x0102).encode()[:2] == b"\x02\x01"


def test_preset_overflow_raises():
    with pytest.raises(ValueError):
        _preset(bin_step=70_000).encode()


def test_permission_pair_length_and_round_trip():
    ix = InitPermissionPairIx(
        active_id=-100, bin_step=10, base_factor=8000,
        min_bin_id=-200, max_bin_id=200, lock_duration_in_slot=1_000_000,
    )
    data = ix.encode()
    assert len(data) == 24
    assert InitPermissionPairIx.decode(data) == ix


def test_permission_pair_negative_active_id_bytes():
    ix = InitPermissionPairIx(
        active_id=-1, bin_step=0, base_factor=0,
        min_bin_id=0, max_bin_id=0, lock_duration_in_slot=0,
    )
    assert ix.encode()[:4] == b"\xff\xff\xff\xff"


def test_instruction_discriminator_uses_global_namespace():
    assert instruction_discriminator("swap") == discriminator("global", "swap")


def test_instruction_discriminators_unique():
    tags = {instruction_discriminator(name) for name in INSTRUCTION_NAMES}
    assert len(tags) == len(INSTRUCTION_NAMES)


def test_unknown_instruction_raises():
    with pytest.raises(ValueError):
        instruction_discriminator("not_an_instruction")


@given(
    protocol_share=st.integers(0, 2**16 - 1),
    base_factor=st.integers(0, 2**16 - 1),
)
def test_fee_parameter_round_trip_property(protocol_share, base_factor):
    fee = FeeParameter(protocol_share=protocol_share, base_factor=base_factor)
    assert FeeParameter.decode(fee.encode()) == fee


@given(
    min_bin_id=st.integers(-(2**31), 2**31 - 1),
    control=st.integers(0, 2**32 - 1),
)
def test_preset_round_trip_property(min_bin_id, control):
    preset = _preset(min_bin_id=min_bin_id, variable_fee_control=control)
    assert InitPresetParametersIx.decode(preset.encode()) == preset