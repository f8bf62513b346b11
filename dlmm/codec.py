"""Little-endian binary layout for instruction and event payloads."""

import hashlib
from enum import Enum
from typing import Any, Iterable, Mapping, Union

from .pubkey import Pubkey


class FieldType(Enum):
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    BOOL = "bool"
    PUBKEY = "pubkey"

    @property
    def size(self) -> int:
        if self is FieldType.BOOL:
            return 1
        if self is FieldType.PUBKEY:
            return Pubkey.LENGTH
        return _INT_SPECS[self][0]


_INT_SPECS = {
    FieldType.U8: (1, False),
    FieldType.U16: (2, False),
    FieldType.U32: (4, False),
    FieldType.U64: (8, False),
    FieldType.U128: (16, False),
    FieldType.I8: (1, True),
    FieldType.I16: (2, True),
    FieldType.I32: (4, True),
    FieldType.I64: (8, True),
    FieldType.I128: (16, True),
}

# A field is a scalar type or a fixed-length array given as (type, length).
FieldSpec = Union[FieldType, tuple[FieldType, int]]
Schema = Iterable[tuple[str, FieldSpec]]


def _encode_value(spec: FieldSpec, value: Any) -> bytes:
    if isinstance(spec, tuple):
        item_type, length = spec
        items = list(value)
        if len(items) != length:
            raise ValueError(f"expected {length} items, got {len(items)}")
        return b"".join(_encode_value(item_type, item) for item in items)
    if spec is FieldType.BOOL:
        if not isinstance(value, bool):
            raise ValueError(f"expected a bool, got {value!r}")
        return b"\x01" if value else b"\x00"
    if spec is FieldType.PUBKEY:
        key = value if isinstance(value, Pubkey) else Pubkey(bytes(value))
        return bytes(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer for {spec.value}, got {value!r}")
    size, signed = _INT_SPECS[spec]
    try:
        return value.to_bytes(size, "little", signed=signed)
    except OverflowError:
        raise ValueError(f"{value} does not fit {spec.value}") from None


def _decode_value(spec: FieldSpec, data: bytes, offset: int) -> tuple[Any, int]:
    if isinstance(spec, tuple):
        item_type, length = spec
        items = []
        for _ in range(length):
            item, offset = _decode_value(item_type, data, offset)
            items.append(item)
        return tuple(items), offset
    end = offset + spec.size
    if end > len(data):
        raise ValueError("unexpected end of data")
    chunk = data[offset:end]
    if spec is FieldType.BOOL:
        if chunk not in (b"\x00", b"\x01"):
            raise ValueError(f"invalid bool byte {chunk[0]}")
        return chunk == b"\x01", end
    if spec is FieldType.PUBKEY:
        return Pubkey(chunk), end
    _, signed = _INT_SPECS[spec]
    return int.from_bytes(chunk, "little", signed=signed), end


def encode(schema: Schema, values: Mapping[str, Any]) -> bytes:
    """Serialise values field by field in schema order."""
    return b"".join(_encode_value(spec, values[name]) for name, spec in schema)


def decode(schema: Schema, data: bytes) -> dict[str, Any]:
    """Parse data laid out by schema; the data must be consumed exactly."""
    data = bytes(data)
    offset = 0
    result = {}
    for name, spec in schema:
        result[name], offset = _decode_value(spec, data, offset)
    if offset != len(data):
        raise ValueError(f"{len(data) - offset} trailing bytes")
    return result


def discriminator(namespace: str, name: str) -> bytes:
    """Eight-byte tag identifying an instruction or event."""
    return hashlib.sha256(f"{namespace}:{name}".encode()).digest()[:8]