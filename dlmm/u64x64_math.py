"""Q64.64 fixed-point helpers: exponentiation and decimal conversion."""

from typing import Optional

from .constants import BASIS_POINT_MAX

# Precision when converting between decimal and fixed point: 10^12.
PRECISION = 1_000_000_000_000

# Number of fractional bits.
SCALE_OFFSET = 64

# 1.0 in Q64.64.
ONE = 1 << SCALE_OFFSET

# Exponents at or above this overflow Q64.64 even at the smallest bin step.
MAX_EXPONENTIAL = 0x80000

_EXPONENT_BITS = 19

U128_MAX = (1 << 128) - 1
_U256_MASK = (1 << 256) - 1


def _checked_mul(a: int, b: int) -> Optional[int]:
    product = a * b
    return product if product <= U128_MAX else None


def power(base: int, exp: int) -> Optional[int]:
    """base ** exp for a Q64.64 base, or None when the result is out of range."""
    if exp == 0:
        return ONE

    invert = exp < 0
    exp = abs(exp)
    if exp >= MAX_EXPONENTIAL:
        return None

    squared_base = base
    result = ONE

    # Invert a base >= 1 so repeated squaring shrinks instead of overflowing.
    if squared_base >= result:
        squared_base = U128_MAX // squared_base
        invert = not invert

    for bit in range(_EXPONENT_BITS):
        if bit:
            squared = _checked_mul(squared_base, squared_base)
            if squared is None:
                return None
            squared_base = squared >> SCALE_OFFSET
        if exp & (1 << bit):
            product = _checked_mul(result, squared_base)
            if product is None:
                return None
            result = product >> SCALE_OFFSET

    if result == 0:
        return None

    if invert:
        result = U128_MAX // result

    return result


def to_decimal(value: int) -> Optional[int]:
    """Convert a Q64.64 value to a decimal scaled by 10^12."""
    scaled = (value * PRECISION) >> SCALE_OFFSET
    return scaled if 0 <= scaled <= U128_MAX else None


def from_decimal(value: int) -> Optional[int]:
    """Convert a decimal scaled by 10^12 to Q64.64."""
    q_value = (value << SCALE_OFFSET) & _U256_MASK
    fp_value = q_value // PRECISION
    return fp_value if 0 <= fp_value <= U128_MAX else None


def get_base(bin_step: int) -> Optional[int]:
    """1 + bin_step / 10000 in Q64.64."""
    quotient = (bin_step << SCALE_OFFSET) & U128_MAX
    fraction = quotient // BASIS_POINT_MAX
    result = ONE + fraction
    return result if result <= U128_MAX else None