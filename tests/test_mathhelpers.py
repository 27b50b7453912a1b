import math
import re

import pytest

from mcukit.mathhelpers import (
    days,
    hours,
    millis_to_clock,
    minutes,
    sci,
    seconds_to_clock,
    weeks,
)

VALUES = [1.0, 2.5, -3.75, 12345.678, 0.000123, -98765.4, 7.0e-9, 42.0]


def test_sci_special_values():
    assert sci(math.nan, 2) == "nan"
    assert sci(math.inf, 2) == "inf"


def test_sci_rounds_up():
    assert sci(1.999, 2) == "2.00E+00"


@pytest.mark.parametrize("value", VALUES)
def test_sci_parses_back(value):
    assert float(sci(value, 6)) == pytest.approx(value, rel=1e-5)


@pytest.mark.parametrize("value", VALUES)
def test_sci_shape(value):
    text = sci(value, 3)
    assert re.fullmatch(r"-?[1-9]\.\d{3}E[+-]\d\d", text)
    assert len(text) == (10 if value < 0 else 9)
    assert text.startswith("-") == (value < 0)


def test_sci_zero_digits_has_no_point():
    text = sci(123.0, 0)
    assert "." not in text
    assert float(text) == pytest.approx(100.0)


def test_sci_zero():
    assert float(sci(0.0, 2)) == 0.0


@pytest.mark.parametrize("seconds", [0, 59, 3661, 45296, 86399])
def test_seconds_to_clock_round_trip(seconds):
    h, m, s = map(int, seconds_to_clock(seconds, True).split(":"))
    assert h * 3600 + m * 60 + s == seconds
    assert seconds_to_clock(seconds) == seconds_to_clock(seconds, True)[:5]


def test_seconds_to_clock_drops_days():
    assert seconds_to_clock(86400 * 3 + 3661, True) == seconds_to_clock(3661, True)


@pytest.mark.parametrize("millis", [0, 999, 1001, 3_723_456, 86_399_999])
def test_millis_to_clock(millis):
    text = millis_to_clock(millis)
    clock, frac = text.split(".")
    assert clock == seconds_to_clock(millis // 1000, True)
    assert int(frac) == millis % 1000
    assert len(text) == 12


def test_negative_rejected():
    with pytest.raises(ValueError):
        seconds_to_clock(-1)
    with pytest.raises(ValueError):
        millis_to_clock(-1)


def test_unit_conversions():
    assert weeks(604800) == pytest.approx(1.0, rel=1e-9)
    assert days(86400) == pytest.approx(1.0, rel=1e-9)
    assert hours(3600) == pytest.approx(1.0, rel=1e-9)
    assert minutes(60) == pytest.approx(1.0, rel=1e-9)
    assert days(604800) == pytest.approx(7 * weeks(604800), rel=1e-9)