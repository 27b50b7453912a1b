"""Driver for the PCA9635 16-channel I2C LED driver."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from enum import IntEnum
from typing import Protocol

MODE1 = 0x00
MODE2 = 0x01
PWM_BASE = 0x82  # PWM0 with the auto-increment flag
GRPPWM = 0x12
GRPFREQ = 0x13
LEDOUT_BASE = 0x14  # 0x14..0x17

CHANNELS = 16


class _I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, length: int) -> bytes: ...


class LedMode(IntEnum):
    OFF = 0x00
    ON = 0x01
    PWM = 0x02
    GROUP_PWM = 0x03


def _check_channel(channel: int) -> int:
    channel = operator.index(channel)
    if not 0 <= channel < CHANNELS:
        raise ValueError(f"channel must be in 0..{CHANNELS - 1}, got {channel}")
    return channel


def _check_mode_reg(reg: int) -> int:
    if reg not in (MODE1, MODE2):
        raise ValueError(f"mode register must be MODE1 or MODE2, got {reg}")
    return reg


class PCA9635:
    """Sixteen PWM LED outputs; the constructor enables auto-increment and wakes the chip."""

    def __init__(self, bus: _I2CBus, address: int) -> None:
        self._bus = bus
        self._address = address
        self._write_reg(MODE1, 0x81)  # auto-increment, no sleep, all-call

    @property
    def address(self) -> int:
        return self._address

    def _write_reg(self, reg: int, value: int) -> None:
        self._bus.write(self._address, bytes((reg, operator.index(value))))

    def _read_reg(self, reg: int) -> int:
        self._bus.write(self._address, bytes((reg,)))
        data = self._bus.read(self._address, 1)
        if len(data) != 1:
            raise OSError(f"no data from register 0x{reg:02X}")
        return data[0]

    def set_led_driver_mode(self, channel: int, mode: LedMode | int) -> None:
        channel = _check_channel(channel)
        mode = LedMode(mode)
        reg = LEDOUT_BASE + (channel >> 2)
        shift = (channel & 0x03) * 2
        value = (self._read_reg(reg) & ~(0x03 << shift) & 0xFF) | (mode << shift)
        self._write_reg(reg, value)

    def led_driver_mode(self, channel: int) -> LedMode:
        channel = _check_channel(channel)
        reg = LEDOUT_BASE + (channel >> 2)
        shift = (channel & 0x03) * 2
        return LedMode((self._read_reg(reg) >> shift) & 0x03)

    def write1(self, channel: int, value: int) -> None:
        """Set the PWM value of one channel."""
        self.write_n(channel, (value,))

    def write3(self, channel: int, r: int, g: int, b: int) -> None:
        """Set three consecutive channels, typically an RGB LED."""
        self.write_n(channel, (r, g, b))

    def write_n(self, channel: int, values: Iterable[int]) -> None:
        """Set consecutive channels starting at ``channel``."""
        channel = _check_channel(channel)
        payload = bytes(values)
        if channel + len(payload) > CHANNELS:
            raise ValueError("values run past the last channel")
        self._bus.write(self._address, bytes((PWM_BASE + channel,)) + payload)

    def write_mode(self, reg: int, value: int) -> None:
        self._write_reg(_check_mode_reg(reg), value)

    def read_mode(self, reg: int) -> int:
        return self._read_reg(_check_mode_reg(reg))

    @property
    def group_pwm(self) -> int:
        """Group duty cycle register."""
        return self._read_reg(GRPPWM)

    @group_pwm.setter
    def group_pwm(self, value: int) -> None:
        self._write_reg(GRPPWM, value)

    @property
    def group_freq(self) -> int:
        """Group frequency register."""
        return self._read_reg(GRPFREQ)

    @group_freq.setter
    def group_freq(self, value: int) -> None:
        self._write_reg(GRPFREQ, value)