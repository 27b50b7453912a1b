"""Driver for the MS5611 barometric pressure and temperature sensor."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol

CMD_RESET = 0x1E
CMD_CONVERT_D1 = 0x40
CMD_CONVERT_D2 = 0x50
CMD_ADC_READ = 0x00
CMD_PROM_READ = 0xA0

_CONVERSION_DELAYS_MS = (1, 2, 3, 5, 10)
_PROM_SCALE = (
    1,
    32768,
    65536,
    3.90625e-3,
    7.8125e-3,
    256,
    1.1920928955e-7,
)


class _I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, length: int) -> bytes: ...


class MS5611:
    """Reads temperature in 0.01 C and pressure in Pa with second-order compensation."""

    def __init__(
        self,
        bus: _I2CBus,
        address: int,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self._bus = bus
        self._address = address
        self._sleep = sleep
        self._temperature = -999
        self._pressure = -999
        self._c = list(_PROM_SCALE)
        self.init()

    @property
    def address(self) -> int:
        return self._address

    def init(self) -> None:
        """Reset the sensor and load the calibration coefficients."""
        self._reset()
        self._c = [
            scale * self._read_prom(reg) for reg, scale in enumerate(_PROM_SCALE)
        ]

    def read(self, bits: int = 8) -> None:
        """Measure; ``bits`` 8..12 selects oversampling from 256 to 4096."""
        self._convert(CMD_CONVERT_D1, bits)
        d1 = self._read_adc()
        self._convert(CMD_CONVERT_D2, bits)
        d2 = self._read_adc()

        c = self._c
        dt = d2 - c[5]
        temperature = int(2000 + dt * c[6])
        offset = c[2] + dt * c[4]
        sens = c[1] + dt * c[3]

        if temperature < 2000:
            t2 = dt * dt * 4.6566128731e-10
            t = temperature - 2000
            offset2 = 2.5 * t * t
            sens2 = 1.25 * t * t * t
            if temperature < -1500:
                t = temperature + 1500
                t = t * t
                offset2 += 7 * t
                sens2 += 5.5 * t
            temperature = int(temperature - t2)
            offset -= offset2
            sens -= sens2

        self._temperature = temperature
        self._pressure = int((d1 * sens * 4.76837158205e-7 - offset) * 3.051757813e-5)

    def temperature(self) -> int:
        """Last temperature in 0.01 degrees Celsius; -999 before a read."""
        return self._temperature

    def pressure(self) -> int:
        """Last pressure in Pa (0.01 mbar); -999 before a read."""
        return self._pressure

    def _command(self, command: int) -> None:
        self._bus.write(self._address, bytes((command & 0xFF,)))

    def _read_bytes(self, length: int) -> bytes:
        data = bytes(self._bus.read(self._address, length))
        if len(data) < length:
            raise OSError(f"expected {length} bytes, got {len(data)}")
        return data

    def _reset(self) -> None:
        self._command(CMD_RESET)
        self._sleep(0.003)

    def _convert(self, command: int, bits: int) -> None:
        bits = min(max(bits, 8), 12)
        step = bits - 8
        self._command(command + 2 * step)
        self._sleep(_CONVERSION_DELAYS_MS[step] / 1000)

    def _read_prom(self, reg: int) -> int:
        reg = min(reg, 7)
        self._command(CMD_PROM_READ + reg * 2)
        return int.from_bytes(self._read_bytes(2), "big")

    def _read_adc(self) -> int:
        self._command(CMD_ADC_READ)
        return int.from_bytes(self._read_bytes(3), "big")