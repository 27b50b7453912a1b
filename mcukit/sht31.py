"""Driver for the SHT31 I2C temperature and humidity sensor."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol

READ_STATUS = 0xF32D
CLEAR_STATUS = 0x3041
SOFT_RESET = 0x30A2
HARD_RESET = 0x0006
MEASUREMENT_FAST = 0x2416
MEASUREMENT_SLOW = 0x2400
HEAT_ON = 0x306D
HEAT_OFF = 0x3066

VALID_ADDRESSES = (0x44, 0x45)

_FAST_DELAY = 0.004
_SLOW_DELAY = 0.015
_RESET_DELAY = 0.001
_SLOW_MEASUREMENT_MS = 15


class _I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, length: int) -> bytes: ...


def _millis() -> int:
    return time.monotonic_ns() // 1_000_000


class SHT31:
    """Temperature in degrees Celsius and relative humidity in percent.

    ``clock`` returns the current time in milliseconds; ``sleep`` takes seconds.
    """

    def __init__(
        self,
        bus: _I2CBus,
        clock: Callable[[], int] = _millis,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self._bus = bus
        self._clock = clock
        self._sleep = sleep
        self._address = 0
        self._last_read = 0
        self._last_request = 0
        self.temperature = 0.0
        self.humidity = 0.0

    @property
    def address(self) -> int:
        return self._address

    def begin(self, address: int) -> None:
        """Select the sensor at 0x44 or 0x45 and soft-reset it."""
        if address not in VALID_ADDRESSES:
            raise ValueError(f"address must be 0x44 or 0x45, got {address:#x}")
        self._address = address
        self.reset()

    def read(self, fast: bool = True) -> None:
        """Measure and update ``temperature`` and ``humidity``."""
        if fast:
            self._write_cmd(MEASUREMENT_FAST)
            self._sleep(_FAST_DELAY)
        else:
            self._write_cmd(MEASUREMENT_SLOW)
            self._sleep(_SLOW_DELAY)
        self._store(self._read_bytes(6))

    def read_status(self) -> int:
        """The 16-bit status register."""
        self._write_cmd(READ_STATUS)
        data = self._read_bytes(3)
        return (data[0] << 8) | data[1]

    def last_read(self) -> int:
        """Clock time in milliseconds of the last completed measurement."""
        return self._last_read

    def reset(self) -> None:
        self._write_cmd(SOFT_RESET)
        self._sleep(_RESET_DELAY)

    def heat_on(self) -> None:
        """Switch the heater on; use it for a few minutes at most."""
        self._write_cmd(HEAT_ON)

    def heat_off(self) -> None:
        self._write_cmd(HEAT_OFF)

    def request_data(self) -> None:
        """Start a slow measurement without waiting for it."""
        self._write_cmd(MEASUREMENT_SLOW)
        self._last_request = self._clock()

    def data_ready(self) -> bool:
        """True once a requested measurement has had time to finish."""
        return self._clock() - self._last_request > _SLOW_MEASUREMENT_MS

    def read_data(self) -> None:
        """Fetch the result of :meth:`request_data`."""
        self._store(self._read_bytes(6))

    def _store(self, data: bytes) -> None:
        raw = (data[0] << 8) + data[1]
        self.temperature = raw * (175.0 / 65535) - 45
        raw = (data[3] << 8) + data[4]
        self.humidity = raw * (100.0 / 65535)
        self._last_read = self._clock()

    def _write_cmd(self, cmd: int) -> None:
        self._bus.write(self._address, bytes((cmd >> 8, cmd & 0xFF)))

    def _read_bytes(self, length: int) -> bytes:
        data = bytes(self._bus.read(self._address, length))
        if len(data) < length:
            raise OSError(f"expected {length} bytes, got {len(data)}")
        return data