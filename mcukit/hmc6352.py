"""Driver for the HMC6352 I2C digital compass."""

from __future__ import annotations

import operator
import time
from collections.abc import Callable
from enum import IntEnum
from typing import Protocol

GET_DATA = 0x41
WAKE = 0x57
SLEEP = 0x53
SAVE_OP_MODE = 0x4C
CALIBRATE_ON = 0x43
CALIBRATE_OFF = 0x45
UPDATE_OFFSETS = 0x4F
WRITE_RAM = 0x47
READ_RAM = 0x67
WRITE_EEPROM = 0x77
READ_EEPROM = 0x72

MIN_ADDRESS = 0x10
MAX_ADDRESS = 0xF6

RAM_OPERATIONAL_MODE = 0x74
RAM_OUTPUT_MODE = 0x4E
EEPROM_I2C_ADDRESS = 0
EEPROM_TIME_DELAY = 5
EEPROM_SUMMING = 6

_FREQUENCY_BITS = {1: 0x00, 5: 0x20, 10: 0x40, 20: 0x60}
_FACTORY_EEPROM = (66, 0, 0, 0, 0, 1, 4, 6, 0x50)


class _I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, length: int) -> bytes: ...


class HmcMode(IntEnum):
    STANDBY = 0
    QUERY = 1
    CONT = 2


class HMC6352:
    """Compass heading in tenths of a degree, plus RAM/EEPROM configuration.

    ``sleep`` takes seconds and is used for the datasheet delays.
    """

    def __init__(
        self,
        bus: _I2CBus,
        address: int,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self._bus = bus
        self._address = min(max(operator.index(address), MIN_ADDRESS), MAX_ADDRESS)
        self._delay = sleep

    @property
    def address(self) -> int:
        return self._address

    def heading(self) -> int:
        """Ask for a new reading and return it."""
        self.ask_heading()
        return self.read_heading()

    def ask_heading(self) -> None:
        self._cmd(GET_DATA)
        self._delay(0.006)

    def read_heading(self) -> int:
        data = bytes(self._bus.read(self._address, 2))
        if len(data) != 2:
            raise OSError(f"expected 2 bytes, got {len(data)}")
        return (data[0] << 8) + data[1]

    def wake_up(self) -> None:
        """Leave energy saving mode."""
        self._cmd(WAKE)
        self._delay(0.0001)

    def sleep(self) -> None:
        """Enter energy saving mode."""
        self._cmd(SLEEP)
        self._delay(0.00001)

    def factory_reset(self) -> None:
        """Restore the factory EEPROM contents."""
        self.write_ram(RAM_OPERATIONAL_MODE, 0x50)
        for address, data in enumerate(_FACTORY_EEPROM):
            self._write_cmd(WRITE_EEPROM, address, data)
        self._cmd(SAVE_OP_MODE)
        self._delay(0.000125)

    def set_operational_mode(
        self, mode: HmcMode | int, freq: int, periodic_reset: bool
    ) -> int:
        """Store the operational mode; takes effect after a restart.

        ``freq`` is 1, 5, 10 or 20 Hz. Returns the control byte written.
        """
        if freq not in _FREQUENCY_BITS:
            raise ValueError(f"freq must be 1, 5, 10 or 20, got {freq}")
        mode = HmcMode(mode)
        omcb = _FREQUENCY_BITS[freq]
        if periodic_reset:
            omcb |= 0x10
        omcb |= mode
        self._write_cmd(WRITE_RAM, RAM_OPERATIONAL_MODE, omcb)
        self._cmd(SAVE_OP_MODE)
        self._delay(0.000125)
        return omcb

    def operational_mode(self) -> int:
        return self._read_cmd(READ_RAM, RAM_OPERATIONAL_MODE)

    def set_output_mode(self, mode: int) -> None:
        """Select heading (0) or one of the raw output modes (1..4)."""
        mode = operator.index(mode)
        if not 0 <= mode <= 4:
            raise ValueError(f"output mode must be in 0..4, got {mode}")
        self._write_cmd(WRITE_RAM, RAM_OUTPUT_MODE, mode)

    def output_mode(self) -> int:
        return self._read_cmd(READ_RAM, RAM_OUTPUT_MODE)

    def calibration_on(self) -> None:
        self._cmd(CALIBRATE_ON)
        self._delay(0.00001)

    def calibration_off(self) -> None:
        self._cmd(CALIBRATE_OFF)
        self._delay(0.015)

    def set_i2c_address(self, address: int) -> None:
        address = operator.index(address)
        if not MIN_ADDRESS <= address <= MAX_ADDRESS:
            raise ValueError(
                f"address must be in {MIN_ADDRESS:#x}..{MAX_ADDRESS:#x}, got {address:#x}"
            )
        self._write_cmd(WRITE_EEPROM, EEPROM_I2C_ADDRESS, address)

    def i2c_address(self) -> int:
        return self._read_cmd(READ_EEPROM, EEPROM_I2C_ADDRESS)

    def write_eeprom(self, address: int, data: int) -> None:
        self._write_cmd(WRITE_EEPROM, address, data)

    def read_eeprom(self, address: int) -> int:
        return self._read_cmd(READ_EEPROM, address)

    def write_ram(self, address: int, data: int) -> None:
        self._write_cmd(WRITE_RAM, address, data)

    def read_ram(self, address: int) -> int:
        return self._read_cmd(READ_RAM, address)

    def set_time_delay(self, msec: int) -> None:
        self._write_cmd(WRITE_EEPROM, EEPROM_TIME_DELAY, msec)

    def time_delay(self) -> int:
        return self._read_cmd(READ_EEPROM, EEPROM_TIME_DELAY)

    def set_measurement_summing(self, ms: int) -> None:
        """Set the summing count, clamped to at most 16."""
        self._write_cmd(WRITE_EEPROM, EEPROM_SUMMING, min(operator.index(ms), 16))

    def measurement_summing(self) -> int:
        return self._read_cmd(READ_EEPROM, EEPROM_SUMMING)

    def save_op_mode(self) -> None:
        self._cmd(SAVE_OP_MODE)
        self._delay(0.000125)

    def update_offsets(self) -> None:
        self._cmd(UPDATE_OFFSETS)
        self._delay(0.006)

    def _cmd(self, command: int) -> None:
        self._bus.write(self._address, bytes((command,)))
        self._delay(0.010)

    def _read_cmd(self, command: int, address: int) -> int:
        self._bus.write(self._address, bytes((command, operator.index(address))))
        self._delay(0.00007)
        data = self._bus.read(self._address, 1)
        if len(data) != 1:
            raise OSError("no data from HMC6352")
        return data[0]

    def _write_cmd(self, command: int, address: int, data: int) -> None:
        self._bus.write(
            self._address,
            bytes((command, operator.index(address), operator.index(data))),
        )
        self._delay(0.00007)