import math
import struct

import pytest

from mcukit.ieee754 import (
    ByteOrder,
    double_packed_to_float,
    dump_float,
    exponent,
    flip,
    float_to_double_packed,
    is_inf,
    is_nan,
    is_neg_inf,
    is_pos_inf,
    mantissa,
    pow2,
    pow2_fast,
    sign,
)


def f32(x):
    return struct.unpack("<f", struct.pack("<f", x))[0]


NORMALS = [f32(x) for x in (1.0, -2.5, 0.15625, 3.14159, -1234.5678, 6.0e-20)]


def test_dump_float_fields():
    assert dump_float(1.0) == "0\t7F\t0"
    assert dump_float(-2.0) == "1\t80\t0"


@pytest.mark.parametrize("value", NORMALS)
def test_packed_matches_native_double(value):
    assert float_to_double_packed(value) == struct.pack("<d", value)


@pytest.mark.parametrize("value", NORMALS)
def test_msb_first_is_reversed(value):
    lsb = float_to_double_packed(value)
    assert float_to_double_packed(value, ByteOrder.MSB_FIRST) == lsb[::-1]


@pytest.mark.parametrize("value", NORMALS + [0.0, math.inf, -math.inf])
def test_pack_unpack_round_trip(value):
    for order in ByteOrder:
        packed = float_to_double_packed(value, order)
        assert double_packed_to_float(packed, order) == value


def test_unpack_native_double():
    assert double_packed_to_float(struct.pack("<d", 2.5)) == 2.5
    assert double_packed_to_float(struct.pack(">d", -0.75), ByteOrder.MSB_FIRST) == -0.75


def test_unpack_truncates_mantissa():
    result = double_packed_to_float(struct.pack("<d", 0.1))
    assert result == pytest.approx(0.1, rel=1e-6)
    assert result <= 0.1


def test_unpack_wrong_length():
    with pytest.raises(ValueError):
        double_packed_to_float(b"\x00" * 7)


def test_nan_detection():
    assert is_nan(math.nan) is True
    assert is_nan(1.0) is False
    assert is_nan(math.inf) is False


def test_inf_detection():
    assert is_inf(math.inf) == 1
    assert is_inf(-math.inf) == -1
    assert is_inf(1.0) == 0
    assert is_pos_inf(math.inf) and not is_pos_inf(-math.inf)
    assert is_neg_inf(-math.inf) and not is_neg_inf(math.inf)


def test_out_of_range_becomes_infinity():
    assert is_pos_inf(1e300)
    assert is_neg_inf(-1e300)


def test_sign_bit():
    assert sign(-2.0) == 1
    assert sign(2.0) == 0


@pytest.mark.parametrize("k", [-10, -1, 0, 1, 3, 20])
def test_exponent_of_powers_of_two(k):
    assert exponent(2.0**k) == k
    assert mantissa(2.0**k) == 0


@pytest.mark.parametrize("value", NORMALS)
def test_fields_rebuild_value(value):
    rebuilt = (1 + mantissa(value) / 2**23) * 2.0 ** exponent(value)
    assert rebuilt == abs(value)
    assert sign(value) == (1 if value < 0 else 0)


def test_pow2_scales():
    assert pow2(1.5, 3) == 1.5 * 2**3
    assert pow2(-0.75, -2) == -0.75 / 2**2


def test_pow2_overflow_gives_signed_infinity():
    assert pow2(1.0, 200) == math.inf
    assert pow2(-1.0, 200) == -math.inf


def test_pow2_fast_scales():
    assert pow2_fast(3.0, 2) == 3.0 * 4
    assert pow2_fast(10.0, -1) == 10.0 / 2


@pytest.mark.parametrize("value", [1.0, 3.0, -0.75])
def test_flip_is_involution(value):
    assert flip(flip(value)) == value