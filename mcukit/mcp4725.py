"""Driver for the MCP4725 12-bit I2C digital-to-analog converter."""

from __future__ import annotations

import operator
from enum import IntEnum
from typing import Protocol

MAX_VALUE = 4095

REG_DAC = 0x40
REG_DAC_EEPROM = 0x60

GC_RESET = 0x06
GC_WAKEUP = 0x09

GENERAL_CALL_ADDRESS = 0x00


class _I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, length: int) -> bytes: ...


class PowerDownMode(IntEnum):
    NORMAL = 0x00
    PULLDOWN_1K = 0x01
    PULLDOWN_100K = 0x02
    PULLDOWN_500K = 0x03


def _check_value(value: int) -> int:
    value = operator.index(value)
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"value must be in 0..{MAX_VALUE}, got {value}")
    return value


class MCP4725:
    """A 12-bit DAC with a cached last value and power-down mode."""

    def __init__(self, bus: _I2CBus, address: int) -> None:
        self._bus = bus
        self._address = address
        self._last_value = 0
        self._power_down_mode = 0

    @property
    def address(self) -> int:
        return self._address

    @property
    def power_down_mode(self) -> int:
        return self._power_down_mode

    def begin(self) -> None:
        """Load the current DAC value and power-down mode from the chip."""
        self._last_value = self.read_dac()
        self._power_down_mode = self.read_power_down_mode_dac()

    def set_value(self, value: int) -> None:
        """Write ``value`` in fast mode unless it equals the cached value."""
        value = operator.index(value)
        if value == self._last_value:
            return
        value = _check_value(value)
        self._write_fast_mode(value)
        self._last_value = value

    def value(self) -> int:
        """The last value written, from the cache."""
        return self._last_value

    def write_dac(self, value: int, eeprom: bool = False) -> None:
        """Write ``value`` to the DAC register and optionally to EEPROM too."""
        value = _check_value(value)
        self._wait_ready()
        self._write_register_mode(value, REG_DAC_EEPROM if eeprom else REG_DAC)
        self._last_value = value

    def ready(self) -> bool:
        """False while an EEPROM write is still in progress."""
        return bool(self._read_register(1)[0] & 0x80)

    def read_dac(self) -> int:
        buffer = self._read_register(3)
        return (buffer[1] << 4) + (buffer[2] >> 4)

    def read_eeprom(self) -> int:
        self._wait_ready()
        buffer = self._read_register(5)
        return ((buffer[3] & 0x0F) << 8) + buffer[4]

    def write_power_down_mode(
        self, mode: PowerDownMode | int, eeprom: bool = False
    ) -> None:
        """Set the power-down mode, rewriting the cached value with it."""
        self._power_down_mode = operator.index(mode) & 0x03
        self.write_dac(self._last_value, eeprom)

    def read_power_down_mode_eeprom(self) -> int:
        self._wait_ready()
        buffer = self._read_register(4)
        return (buffer[3] >> 5) & 0x03

    def read_power_down_mode_dac(self) -> int:
        self._wait_ready()
        buffer = self._read_register(1)
        return (buffer[0] >> 1) & 0x03

    def power_on_reset(self) -> None:
        """General-call reset; the DAC reloads its value from EEPROM."""
        self._general_call(GC_RESET)
        self._last_value = self.read_dac()

    def power_on_wake_up(self) -> None:
        """General-call wake-up; the DAC power-down mode returns to normal."""
        self._general_call(GC_WAKEUP)
        self._power_down_mode = self.read_power_down_mode_dac()

    def _wait_ready(self) -> None:
        while not self.ready():
            pass

    def _write_fast_mode(self, value: int) -> None:
        high = ((value >> 8) & 0x0F) | (self._power_down_mode << 4)
        low = value & 0xFF
        self._bus.write(self._address, bytes((high & 0xFF, low)))

    def _write_register_mode(self, value: int, reg: int) -> None:
        high = (value >> 4) & 0xFF
        low = ((value & 0x0F) << 4) & 0xFF
        command = reg | (self._power_down_mode << 1)
        self._bus.write(self._address, bytes((command, high, low)))

    def _read_register(self, length: int) -> bytes:
        data = bytes(self._bus.read(self._address, length))
        if len(data) < length:
            raise OSError(f"expected {length} bytes, got {len(data)}")
        return data

    def _general_call(self, code: int) -> None:
        self._bus.write(GENERAL_CALL_ADDRESS, bytes((code,)))