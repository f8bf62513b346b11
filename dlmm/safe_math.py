"""Checked integer arithmetic with fixed-width overflow semantics."""

from enum import Enum

from .errors import LBError, LBErrorCode


class IntKind(Enum):
    """Fixed-width integer kinds that arithmetic is checked against."""

    U16 = "u16"
    I32 = "i32"
    U32 = "u32"
    U64 = "u64"
    I64 = "i64"
    U128 = "u128"
    I128 = "i128"
    USIZE = "usize"
    U256 = "u256"

    @property
    def bits(self) -> int:
        return _SPECS[self][0]

    @property
    def signed(self) -> bool:
        return _SPECS[self][1]

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def strict_shift(self) -> bool:
        """Whether shifting out set bits counts as an overflow."""
        return self is IntKind.U256

    def check(self, value: int) -> int:
        """Return value if it fits this kind, else raise MathOverflow."""
        if not self.min <= value <= self.max:
            raise LBError(LBErrorCode.MathOverflow)
        return value


_SPECS = {
    IntKind.U16: (16, False),
    IntKind.I32: (32, True),
    IntKind.U32: (32, False),
    IntKind.U64: (64, False),
    IntKind.I64: (64, True),
    IntKind.U128: (128, False),
    IntKind.I128: (128, True),
    IntKind.USIZE: (64, False),
    IntKind.U256: (256, False),
}


def _overflow() -> LBError:
    return LBError(LBErrorCode.MathOverflow)


def _trunc_div(lhs: int, rhs: int) -> int:
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def _wrap(value: int, kind: IntKind) -> int:
    value &= (1 << kind.bits) - 1
    if kind.signed and value > kind.max:
        value -= 1 << kind.bits
    return value


def safe_add(lhs: int, rhs: int, kind: IntKind) -> int:
    return kind.check(kind.check(lhs) + kind.check(rhs))


def safe_sub(lhs: int, rhs: int, kind: IntKind) -> int:
    return kind.check(kind.check(lhs) - kind.check(rhs))


def safe_mul(lhs: int, rhs: int, kind: IntKind) -> int:
    return kind.check(kind.check(lhs) * kind.check(rhs))


def safe_div(lhs: int, rhs: int, kind: IntKind) -> int:
    """Division truncating toward zero."""
    kind.check(lhs)
    if kind.check(rhs) == 0:
        raise _overflow()
    return kind.check(_trunc_div(lhs, rhs))


def safe_rem(lhs: int, rhs: int, kind: IntKind) -> int:
    """Remainder taking the sign of the dividend."""
    kind.check(lhs)
    if kind.check(rhs) == 0:
        raise _overflow()
    if kind.signed and lhs == kind.min and rhs == -1:
        raise _overflow()
    return lhs - rhs * _trunc_div(lhs, rhs)


def safe_shl(value: int, offset: int, kind: IntKind) -> int:
    kind.check(value)
    if offset < 0:
        raise _overflow()
    if kind.strict_shift:
        shifted = value << offset
        if shifted > kind.max:
            raise _overflow()
        return shifted
    if offset >= kind.bits:
        raise _overflow()
    return _wrap(value << offset, kind)


def safe_shr(value: int, offset: int, kind: IntKind) -> int:
    kind.check(value)
    if offset < 0:
        raise _overflow()
    if kind.strict_shift:
        if value & ((1 << offset) - 1):
            raise _overflow()
        return value >> offset
    if offset >= kind.bits:
        raise _overflow()
    return value >> offset