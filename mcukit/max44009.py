"""Driver for the MAX44009 ambient light sensor."""

from __future__ import annotations

import math
import operator
from typing import Protocol

INTERRUPT_STATUS = 0x00
INTERRUPT_ENABLE = 0x01
CONFIGURATION = 0x02
LUX_READING_HIGH = 0x03
LUX_READING_LOW = 0x04
THRESHOLD_HIGH = 0x05
THRESHOLD_LOW = 0x06
THRESHOLD_TIMER = 0x07

CFG_CONTINUOUS = 0x80
CFG_MANUAL = 0x40
CFG_CDR = 0x08
CFG_TIMER = 0x07

LUX_PER_COUNT = 0.045
_COUNTS_PER_LUX = 22.2222222


class _I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, length: int) -> bytes: ...


class Max44009:
    """Lux readings, interrupt thresholds and measurement mode of a MAX44009."""

    def __init__(self, bus: _I2CBus, address: int) -> None:
        self._bus = bus
        self._address = address

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

    def lux(self) -> float:
        """Current light level in lux."""
        dhi = self._read_reg(LUX_READING_HIGH)
        dlo = self._read_reg(LUX_READING_LOW)
        exp = dhi >> 4
        mant = ((dhi & 0x0F) << 4) + (dlo & 0x0F)
        return (mant << exp) * LUX_PER_COUNT

    def _set_threshold(self, reg: int, value: float) -> None:
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"threshold must be a non-negative lux value, got {value}")
        mant = math.floor(value * _COUNTS_PER_LUX + 0.5)
        exp = 0
        while mant > 255:
            mant >>= 1
            exp += 1
        if exp > 15:
            raise ValueError(f"threshold {value} is out of range")
        self._write_reg(reg, (exp << 4) | ((mant >> 4) & 0x0F))

    def _get_threshold(self, reg: int) -> float:
        data = self._read_reg(reg)
        exp = (data & 0xF0) >> 4
        mant = ((data & 0x0F) << 4) + 0x0F
        return (mant << exp) * LUX_PER_COUNT

    @property
    def high_threshold(self) -> float:
        """Upper interrupt threshold in lux."""
        return self._get_threshold(THRESHOLD_HIGH)

    @high_threshold.setter
    def high_threshold(self, value: float) -> None:
        self._set_threshold(THRESHOLD_HIGH, value)

    @property
    def low_threshold(self) -> float:
        """Lower interrupt threshold in lux."""
        return self._get_threshold(THRESHOLD_LOW)

    @low_threshold.setter
    def low_threshold(self, value: float) -> None:
        self._set_threshold(THRESHOLD_LOW, value)

    @property
    def threshold_timer(self) -> int:
        """Threshold timer register, in steps of 100 ms."""
        return self._read_reg(THRESHOLD_TIMER)

    @threshold_timer.setter
    def threshold_timer(self, value: int) -> None:
        self._write_reg(THRESHOLD_TIMER, value)

    def enable_interrupt(self) -> None:
        self._write_reg(INTERRUPT_ENABLE, 1)

    def disable_interrupt(self) -> None:
        self._write_reg(INTERRUPT_ENABLE, 0)

    def interrupt_enabled(self) -> bool:
        return bool(self._read_reg(INTERRUPT_ENABLE) & 0x01)

    def interrupt_status(self) -> int:
        return self._read_reg(INTERRUPT_STATUS) & 0x01

    @property
    def configuration(self) -> int:
        """The raw configuration register."""
        return self._read_reg(CONFIGURATION)

    @configuration.setter
    def configuration(self, value: int) -> None:
        self._write_reg(CONFIGURATION, value)

    def set_automatic_mode(self) -> None:
        """Clear the continuous and manual bits."""
        config = self._read_reg(CONFIGURATION)
        config &= ~CFG_CONTINUOUS & 0xFF
        config &= ~CFG_MANUAL & 0xFF
        self._write_reg(CONFIGURATION, config)

    def set_continuous_mode(self) -> None:
        """Set the continuous bit and clear the manual bit."""
        config = self._read_reg(CONFIGURATION)
        config |= CFG_CONTINUOUS
        config &= ~CFG_MANUAL & 0xFF
        self._write_reg(CONFIGURATION, config)

    def set_manual_mode(self, cdr: int, tim: int) -> None:
        """Manual mode with current divisor ``cdr`` (0 or 1) and integration time ``tim`` (0..7).

        A non-zero ``cdr`` counts as 1; ``tim`` above 7 is clamped to 7.
        """
        cdr = 1 if cdr else 0
        tim = min(operator.index(tim), 7)
        if tim < 0:
            raise ValueError(f"tim must be in 0..7, got {tim}")
        config = self._read_reg(CONFIGURATION)
        config &= ~CFG_CONTINUOUS & 0xFF
        config |= CFG_MANUAL
        config &= 0xF0
        config |= (cdr << 3) | tim
        self._write_reg(CONFIGURATION, config)