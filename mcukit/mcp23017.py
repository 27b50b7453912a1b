"""Driver for the MCP23017 16-bit I2C port expander."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Protocol

DDR_A = 0x00  # data direction register, port A
DDR_B = 0x01
PUR_A = 0x0C  # pull-up resistors, port A
PUR_B = 0x0D
IOCR = 0x0A  # IO control register
GPIO_A = 0x12
GPIO_B = 0x13

LOW = 0
HIGH = 1


class _I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, length: int) -> bytes: ...


class PinMode(Enum):
    INPUT = 0
    OUTPUT = 1
    INPUT_PULLUP = 2


def _check_pin(pin: int) -> int:
    pin = operator.index(pin)
    if not 0 <= pin <= 15:
        raise ValueError(f"pin must be in 0..15, got {pin}")
    return pin


def _check_port(port: int) -> int:
    port = operator.index(port)
    if port not in (0, 1):
        raise ValueError(f"port must be 0 or 1, got {port}")
    return port


class MCP23017:
    """Sixteen GPIO lines in two 8-bit ports, A (pins 0..7) and B (pins 8..15)."""

    def __init__(self, bus: _I2CBus, address: int) -> None:
        self._bus = bus
        self._address = address

    @property
    def address(self) -> int:
        return self._address

    def _write_reg(self, reg: int, value: int) -> None:
        self._bus.write(self._address, bytes((reg, value & 0xFF)))

    def _read_reg(self, reg: int) -> int:
        self._bus.write(self._address, bytes((reg,)))
        data = self._bus.read(self._address, 1)
        if len(data) < 1:
            raise OSError(f"no data from register 0x{reg:02X}")
        return data[0]

    def begin(self) -> None:
        """Disable address increment and enable all pull-up resistors."""
        self._write_reg(IOCR, 0b00100000)
        self._write_reg(PUR_A, 0xFF)
        self._write_reg(PUR_B, 0xFF)

    @staticmethod
    def _split(pin: int, reg_a: int, reg_b: int) -> tuple[int, int]:
        if pin > 7:
            return reg_b, pin - 8
        return reg_a, pin

    def pin_mode(self, pin: int, mode: PinMode | int) -> None:
        """Set one pin to input (with or without pull-up) or output."""
        pin = _check_pin(pin)
        mode = PinMode(mode)
        reg, bit = self._split(pin, DDR_A, DDR_B)
        value = self._read_reg(reg)
        mask = 1 << bit
        if mode is PinMode.OUTPUT:
            value &= ~mask
        else:
            value |= mask
        self._write_reg(reg, value)

    def digital_write(self, pin: int, value: int) -> None:
        pin = _check_pin(pin)
        reg, bit = self._split(pin, GPIO_A, GPIO_B)
        current = self._read_reg(reg)
        mask = 1 << bit
        current = current | mask if value else current & ~mask
        self._write_reg(reg, current)

    def digital_read(self, pin: int) -> int:
        """HIGH (1) or LOW (0)."""
        pin = _check_pin(pin)
        reg, bit = self._split(pin, GPIO_A, GPIO_B)
        return HIGH if self._read_reg(reg) & (1 << bit) else LOW

    def pin_mode8(self, port: int, value: int) -> None:
        """Write a whole direction register; a set bit makes the pin an input."""
        port = _check_port(port)
        self._write_reg(DDR_B if port else DDR_A, value)

    def write8(self, port: int, value: int) -> None:
        port = _check_port(port)
        self._write_reg(GPIO_B if port else GPIO_A, value)

    def read8(self, port: int) -> int:
        port = _check_port(port)
        return self._read_reg(GPIO_B if port else GPIO_A)