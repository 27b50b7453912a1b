"""Bit-level tools for IEEE 754 single precision numbers."""

from __future__ import annotations

import math
import struct
from enum import Enum

_FLOAT_BIAS = 127
_DOUBLE_BIAS = 1023
_MANTISSA_MASK = 0x7FFFFF
_FILLER_BITS = 29


class ByteOrder(Enum):
    """Byte order of a packed 8-byte double."""

    LSB_FIRST = "little"
    MSB_FIRST = "big"


def _bits(number: float) -> int:
    """The 32-bit pattern of ``number`` converted to single precision."""
    try:
        packed = struct.pack("<f", number)
    except OverflowError:
        packed = struct.pack("<f", math.copysign(math.inf, number))
    return int.from_bytes(packed, "little")


def _fields(number: float) -> tuple[int, int, int]:
    bits = _bits(number)
    return bits >> 31, (bits >> 23) & 0xFF, bits & _MANTISSA_MASK


def _compose(sign_bit: int, exp: int, mant: int) -> float:
    bits = ((sign_bit & 1) << 31) | ((exp & 0xFF) << 23) | (mant & _MANTISSA_MASK)
    return struct.unpack("<f", bits.to_bytes(4, "little"))[0]


def dump_float(number: float) -> str:
    """Sign, exponent and mantissa fields in hex, separated by tabs."""
    s, e, m = _fields(number)
    return f"{s:X}\t{e:X}\t{m:X}"


def float_to_double_packed(
    number: float, byte_order: ByteOrder = ByteOrder.LSB_FIRST
) -> bytes:
    """Pack a single precision value into the 8 bytes of a 64-bit double.

    The 23 mantissa bits fill the top of the 52-bit mantissa; the exponent is
    rebiased and kept to 11 bits.
    """
    s, e, m = _fields(number)
    exp = (e - _FLOAT_BIAS + _DOUBLE_BIAS) & 0x7FF
    word = (s << 63) | (exp << 52) | (m << _FILLER_BITS)
    return word.to_bytes(8, byte_order.value)


def double_packed_to_float(
    data: bytes, byte_order: ByteOrder = ByteOrder.LSB_FIRST
) -> float:
    """Unpack 8 bytes of a 64-bit double into a single precision value.

    The mantissa is truncated to 23 bits and the rebiased exponent is kept to
    8 bits, so out-of-range exponents wrap.
    """
    data = bytes(data)
    if len(data) != 8:
        raise ValueError(f"expected 8 bytes, got {len(data)}")
    word = int.from_bytes(data, byte_order.value)
    s = word >> 63
    exp = (word >> 52) & 0x7FF
    m = (word >> _FILLER_BITS) & _MANTISSA_MASK
    return _compose(s, exp - _DOUBLE_BIAS + _FLOAT_BIAS, m)


def is_nan(number: float) -> bool:
    """True for the quiet NaN pattern with top half 0x7FC0."""
    return (_bits(number) >> 16) == 0x7FC0


def is_inf(number: float) -> int:
    """1 for +infinity, -1 for -infinity, 0 otherwise."""
    bits = _bits(number)
    if (bits >> 16) & 0xFF != 0x80:
        return 0
    top = bits >> 24
    if top == 0x7F:
        return 1
    if top == 0xFF:
        return -1
    return 0


def is_pos_inf(number: float) -> bool:
    return (_bits(number) >> 16) == 0x7F80


def is_neg_inf(number: float) -> bool:
    return (_bits(number) >> 16) == 0xFF80


def sign(number: float) -> int:
    """The sign bit: 1 for negative, 0 otherwise."""
    return _fields(number)[0]


def exponent(number: float) -> int:
    """The unbiased exponent field."""
    return _fields(number)[1] - _FLOAT_BIAS


def mantissa(number: float) -> int:
    """The 23-bit mantissa field."""
    return _fields(number)[2]


def pow2(number: float, n: int) -> float:
    """Multiply by 2**n through the exponent; out of range gives signed infinity."""
    s, e, m = _fields(number)
    new_exp = e + n
    if 0 <= new_exp < 256:
        return _compose(s, new_exp, m)
    return -math.inf if s else math.inf


def pow2_fast(number: float, n: int) -> float:
    """Add ``n`` to the exponent field with no overflow check (wraps at 8 bits)."""
    s, e, m = _fields(number)
    return _compose(s, e + n, m)


def flip(number: float) -> float:
    """Negate the exponent field and complement the mantissa field."""
    s, e, m = _fields(number)
    return _compose(s, -e, _MANTISSA_MASK - m)