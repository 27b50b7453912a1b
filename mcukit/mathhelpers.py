"""Formatting helpers for scientific notation and clock times."""

from __future__ import annotations

import math

_SECONDS_PER_DAY = 86400


def sci(number: float, digits: int) -> str:
    """Format ``number`` as ``d.dddE+xx`` with ``digits`` decimals.

    NaN gives ``"nan"``; infinities of either sign give ``"inf"``.
    """
    if math.isnan(number):
        return "nan"
    if math.isinf(number):
        return "inf"

    parts = []
    if number < 0.0:
        parts.append("-")
        number = -number

    exp = 0
    while number >= 10.0:
        number /= 10
        exp += 1
    while number < 1 and number != 0.0:
        number *= 10
        exp -= 1

    rounding = 0.5
    for _ in range(digits):
        rounding *= 0.1
    number += rounding
    if number >= 10:
        exp += 1
        number /= 10

    d = int(number)
    remainder = number - d
    parts.append(str(d))
    if digits > 0:
        parts.append(".")
    for _ in range(digits):
        remainder *= 10.0
        d = int(remainder)
        parts.append(str(d))
        remainder -= d

    parts.append("E")
    parts.append("-" if exp < 0 else "+")
    parts.append(f"{abs(exp):02d}")
    return "".join(parts)


def seconds_to_clock(seconds: int, display_seconds: bool = False) -> str:
    """Time of day as ``HH:MM`` or ``HH:MM:SS``; whole days are dropped."""
    seconds = int(seconds)
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    seconds %= _SECONDS_PER_DAY
    hrs, rest = divmod(seconds, 3600)
    mins, secs = divmod(rest, 60)
    text = f"{hrs:02d}:{mins:02d}"
    if display_seconds:
        text += f":{secs:02d}"
    return text


def millis_to_clock(millis: int) -> str:
    """Time of day as ``HH:MM:SS.mmm``; whole days are dropped."""
    millis = int(millis)
    if millis < 0:
        raise ValueError("millis must not be negative")
    secs, ms = divmod(millis, 1000)
    return f"{seconds_to_clock(secs, True)}.{ms:03d}"


def weeks(seconds: float) -> float:
    return seconds * 1.653439153439e-6  # 1 / 604800


def days(seconds: float) -> float:
    return seconds * 1.157407407407e-5  # 1 / 86400


def hours(seconds: float) -> float:
    return seconds * 2.777777777778e-4  # 1 / 3600


def minutes(seconds: float) -> float:
    return seconds * 1.666666666667e-2  # 1 / 60