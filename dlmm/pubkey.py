"""32-byte public keys and their base58 text form."""

from dataclasses import dataclass
from typing import ClassVar

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}


def b58encode(data: bytes) -> str:
    """Encode bytes in base58, keeping leading zero bytes as '1'."""
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    padding = len(data) - len(data.lstrip(b"\0"))
    return "1" * padding + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text; raise ValueError on characters outside the alphabet."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    padding = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\0" * padding + body


@dataclass(frozen=True, order=True)
class Pubkey:
    """An account address: exactly 32 bytes."""

    data: bytes
    LENGTH: ClassVar[int] = 32

    def __post_init__(self) -> None:
        raw = bytes(self.data)
        if len(raw) != self.LENGTH:
            raise ValueError(f"public key must be {self.LENGTH} bytes, got {len(raw)}")
        object.__setattr__(self, "data", raw)

    @classmethod
    def from_base58(cls, text: str) -> "Pubkey":
        return cls(b58decode(text))

    def to_base58(self) -> str:
        return b58encode(self.data)

    @classmethod
    def default(cls) -> "Pubkey":
        """The all-zero key."""
        return cls(bytes(cls.LENGTH))

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.to_base58()