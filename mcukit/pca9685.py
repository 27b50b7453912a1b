"""Driver for the PCA9685 16-channel 12-bit I2C PWM controller."""

from __future__ import annotations

import operator
from typing import Protocol

MODE1 = 0x00
MODE2 = 0x01

# MODE1 bits
RESTART = 0x80
EXTCLK = 0x40
AUTOINCR = 0x20
SLEEP = 0x10
SUB1 = 0x08
SUB2 = 0x04
SUB3 = 0x02
ALLCALL = 0x01

# MODE2 bits
INVERT = 0x10
OCH = 0x08
OUTDRV = 0x04
OUTNE = 0x03

PRE_SCALE = 0xFE
LED0_ON_L = 0x06

MIN_FREQUENCY = 24
MAX_FREQUENCY = 1526
FULL = 0x1000

CHANNELS = 16


class _I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, length: int) -> bytes: ...


def _check_channel(channel: int) -> int:
    channel = operator.index(channel)
    if not 0 <= channel < CHANNELS:
        raise ValueError(f"channel must be in 0..{CHANNELS - 1}, got {channel}")
    return channel


def _check_mode_reg(reg: int) -> int:
    if reg not in (MODE1, MODE2):
        raise ValueError(f"mode register must be MODE1 or MODE2, got {reg}")
    return reg


class PCA9685:
    """Sixteen PWM channels with 12-bit on and off times."""

    def __init__(self, bus: _I2CBus, address: int) -> None:
        self._bus = bus
        self._address = address

    @property
    def address(self) -> int:
        return self._address

    def _write_reg(self, reg: int, value: int) -> None:
        self._bus.write(self._address, bytes((reg, operator.index(value))))

    def _read_bytes(self, reg: int, length: int) -> bytes:
        self._bus.write(self._address, bytes((reg,)))
        data = bytes(self._bus.read(self._address, length))
        if len(data) != length:
            raise OSError(f"expected {length} bytes from 0x{reg:02X}, got {len(data)}")
        return data

    def begin(self) -> None:
        """Enable auto-increment and all-call, with totem-pole outputs."""
        self._write_reg(MODE1, AUTOINCR | ALLCALL)
        self._write_reg(MODE2, OUTDRV)

    def write_mode(self, reg: int, value: int) -> None:
        self._write_reg(_check_mode_reg(reg), value)

    def read_mode(self, reg: int) -> int:
        return self._read_bytes(_check_mode_reg(reg), 1)[0]

    def set_pwm(self, channel: int, on_time: int, off_time: int) -> None:
        """Set the on and off times (0..4095) of one channel."""
        channel = _check_channel(channel)
        on_time = operator.index(on_time)
        off_time = operator.index(off_time)
        reg = LED0_ON_L + (channel << 2)
        self._bus.write(
            self._address,
            bytes(
                (
                    reg,
                    on_time & 0xFF,
                    (on_time >> 8) & 0x0F,
                    off_time & 0xFF,
                    (off_time >> 8) & 0x0F,
                )
            ),
        )

    def set_off_time(self, channel: int, off_time: int) -> None:
        """Set the off time of one channel, switching on at time 0."""
        self.set_pwm(channel, 0, off_time)

    def get_pwm(self, channel: int) -> tuple[int, int]:
        """The (on_time, off_time) registers of one channel."""
        channel = _check_channel(channel)
        data = self._read_bytes(LED0_ON_L + (channel << 2), 4)
        return data[0] + data[1] * 256, data[2] + data[3] * 256

    def set_frequency(self, freq: int) -> None:
        """Set the update frequency of all channels, clamped to 24..1526 Hz."""
        freq = min(max(operator.index(freq), MIN_FREQUENCY), MAX_FREQUENCY)
        self._write_reg(PRE_SCALE, 6104 // freq - 1)

    def set_on(self, channel: int) -> None:
        self.set_pwm(channel, FULL, 0x0000)

    def set_off(self, channel: int) -> None:
        self.set_pwm(channel, 0x0000, FULL)