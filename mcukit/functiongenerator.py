"""Periodic waveform generators: sawtooth, triangle, square, sine and stair."""

from __future__ import annotations

import math


def _check_period(period: float) -> None:
    if period == 0:
        raise ValueError("period must be non-zero")


def _check_steps(steps: int) -> None:
    if steps < 2:
        raise ValueError("steps must be at least 2")


def _wrap(t: float, period: float) -> float:
    """Fold a non-negative time into one period."""
    return math.fmod(t, period) if t >= period else t


class FunctionGenerator:
    """A waveform generator with a fixed period, amplitude, phase and offset."""

    def __init__(
        self,
        period: float = 1.0,
        amplitude: float = 1.0,
        phase: float = 0.0,
        y_shift: float = 0.0,
    ) -> None:
        self.configure(period, amplitude, phase, y_shift)

    def configure(
        self,
        period: float = 1.0,
        amplitude: float = 1.0,
        phase: float = 0.0,
        y_shift: float = 0.0,
    ) -> None:
        """Set all waveform parameters at once."""
        _check_period(period)
        freq1 = 1 / period
        self._period = period
        self._freq0 = 2 * math.pi * freq1
        self._freq2 = 2 * freq1
        self._freq4 = 4 * freq1
        self._amplitude = amplitude
        self._phase = phase
        self._y_shift = y_shift

    @property
    def period(self) -> float:
        return self._period

    @property
    def amplitude(self) -> float:
        return self._amplitude

    @property
    def phase(self) -> float:
        return self._phase

    @property
    def y_shift(self) -> float:
        return self._y_shift

    def sawtooth(self, t: float) -> float:
        t += self._phase
        if t >= 0.0:
            t = _wrap(t, self._period)
            rv = self._amplitude * (-1.0 + t * self._freq2)
        else:
            t = _wrap(-t, self._period)
            rv = self._amplitude * (1.0 - t * self._freq2)
        return rv + self._y_shift

    def triangle(self, t: float) -> float:
        t = abs(t + self._phase)
        t = _wrap(t, self._period)
        if t * 2 < self._period:
            rv = self._amplitude * (-1.0 + t * self._freq4)
        else:
            rv = self._amplitude * (3.0 - t * self._freq4)
        return rv + self._y_shift

    def square(self, t: float) -> float:
        t += self._phase
        if t >= 0:
            t = _wrap(t, self._period)
            rv = self._amplitude if t + t < self._period else -self._amplitude
        else:
            t = _wrap(-t, self._period)
            rv = -self._amplitude if t * 2 < self._period else self._amplitude
        return rv + self._y_shift

    def sinus(self, t: float) -> float:
        t += self._phase
        return self._amplitude * math.sin(t * self._freq0) + self._y_shift

    def stair(self, t: float, steps: int = 8) -> float:
        _check_steps(steps)
        t += self._phase
        if t >= 0:
            t = _wrap(t, self._period)
            level = int(steps * t / self._period)
            return self._y_shift + self._amplitude * (-1.0 + 2.0 * level / (steps - 1))
        t = _wrap(-t, self._period)
        level = int(steps * t / self._period)
        return self._y_shift + self._amplitude * (1.0 - 2.0 * level / (steps - 1))


def fgsaw(
    t: float,
    period: float = 1.0,
    amplitude: float = 1.0,
    phase: float = 0.0,
    y_shift: float = 0.0,
) -> float:
    """Sawtooth wave sample at time ``t``."""
    _check_period(period)
    t += phase
    if t >= 0:
        t = _wrap(t, period)
        return y_shift + amplitude * (-1.0 + 2 * t / period)
    t = _wrap(-t, period)
    return y_shift + amplitude * (1.0 - 2 * t / period)


def fgtri(
    t: float,
    period: float = 1.0,
    amplitude: float = 1.0,
    phase: float = 0.0,
    y_shift: float = 0.0,
    duty_cycle: float = 0.50,
) -> float:
    """Triangle wave sample; ``duty_cycle`` is the rising fraction of the period."""
    _check_period(period)
    t = abs(t + phase)
    t = _wrap(t, period)
    if t < duty_cycle * period:
        return y_shift + amplitude * (-1.0 + 2 * t / (duty_cycle * period))
    return y_shift + amplitude * (-1.0 + 2 / (1 - duty_cycle) * (1 - t / period))


def fgsqr(
    t: float,
    period: float = 1.0,
    amplitude: float = 1.0,
    phase: float = 0.0,
    y_shift: float = 0.0,
    duty_cycle: float = 0.50,
) -> float:
    """Square wave sample; ``duty_cycle`` is the high fraction of the period."""
    _check_period(period)
    t += phase
    if t >= 0:
        t = _wrap(t, period)
        if t < duty_cycle * period:
            return y_shift + amplitude
        return y_shift - amplitude
    t = _wrap(-t, period)
    if t < duty_cycle * period:
        return y_shift - amplitude
    return y_shift + amplitude


def fgsin(
    t: float,
    period: float = 1.0,
    amplitude: float = 1.0,
    phase: float = 0.0,
    y_shift: float = 0.0,
) -> float:
    """Sine wave sample at time ``t``."""
    _check_period(period)
    t += phase
    return y_shift + amplitude * math.sin(2 * math.pi * t / period)


def fgstr(
    t: float,
    period: float = 1.0,
    amplitude: float = 1.0,
    phase: float = 0.0,
    y_shift: float = 0.0,
    steps: int = 8,
) -> float:
    """Stair wave sample with ``steps`` levels per period."""
    _check_period(period)
    _check_steps(steps)
    t += phase
    if t >= 0:
        t = _wrap(t, period)
        level = int(steps * t / period)
        return y_shift + amplitude * (-1.0 + 2.0 * level / (steps - 1))
    t = _wrap(-t, period)
    level = int(steps * t / period)
    return y_shift + amplitude * (1.0 - 2.0 * level / (steps - 1))