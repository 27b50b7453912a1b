"""Driver for the PCF8574 8-bit I2C quasi-bidirectional port expander."""

from __future__ import annotations

import operator
from typing import Protocol

LOW = 0
HIGH = 1


class _I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, length: int) -> bytes: ...


def _check_pin(pin: int) -> int:
    pin = operator.index(pin)
    if not 0 <= pin <= 7:
        raise ValueError(f"pin must be in 0..7, got {pin}")
    return pin


class PCF8574:
    """Eight I/O lines; the last byte written and the last byte read are cached."""

    def __init__(self, bus: _I2CBus, address: int) -> None:
        self._bus = bus
        self._address = address
        self._data_in = 0
        self._data_out = 0xFF
        self._button_mask = 0xFF

    @property
    def address(self) -> int:
        return self._address

    @property
    def button_mask(self) -> int:
        """Mask used by :meth:`read_button8` when no mask is given."""
        return self._button_mask

    @button_mask.setter
    def button_mask(self, mask: int) -> None:
        self._button_mask = operator.index(mask) & 0xFF

    def begin(self, value: int = 0xFF) -> None:
        """Put all lines into a known state."""
        self.write8(value)

    def read8(self) -> int:
        """Read all eight lines at once."""
        data = self._bus.read(self._address, 1)
        if len(data) != 1:
            raise OSError("no data from PCF8574")
        self._data_in = data[0]
        return self._data_in

    def read(self, pin: int) -> int:
        """Read one line: 1 when high, 0 when low."""
        pin = _check_pin(pin)
        self.read8()
        return 1 if self._data_in & (1 << pin) else 0

    def value(self) -> int:
        """The last byte read, from the cache."""
        return self._data_in

    def write8(self, value: int) -> None:
        """Write all eight lines at once."""
        self._data_out = operator.index(value) & 0xFF
        self._bus.write(self._address, bytes((self._data_out,)))

    def write(self, pin: int, value: int) -> None:
        """Set one line; ``value`` LOW clears it, anything else sets it."""
        pin = _check_pin(pin)
        if value == LOW:
            out = self._data_out & ~(1 << pin)
        else:
            out = self._data_out | (1 << pin)
        self.write8(out)

    def value_out(self) -> int:
        """The last byte written, from the cache."""
        return self._data_out

    def read_button8(self, mask: int | None = None) -> int:
        """Read the lines with the ``mask`` lines raised, then restore the output."""
        if mask is None:
            mask = self._button_mask
        saved = self._data_out
        self.write8(operator.index(mask) | saved)
        try:
            self.read8()
        finally:
            self.write8(saved)
        return self._data_in

    def read_button(self, pin: int) -> int:
        """Read one line with it raised first, then restore the output."""
        pin = _check_pin(pin)
        saved = self._data_out
        self.write(pin, HIGH)
        try:
            return self.read(pin)
        finally:
            self.write8(saved)

    def toggle(self, pin: int) -> None:
        pin = _check_pin(pin)
        self.toggle_mask(1 << pin)

    def toggle_mask(self, mask: int) -> None:
        """Invert the lines selected by ``mask``."""
        self.write8(self._data_out ^ operator.index(mask))

    def shift_right(self, n: int = 1) -> None:
        """Shift the output right by ``n`` (1..7); other ``n`` does nothing."""
        if n == 0 or n > 7:
            return
        self.write8(self._data_out >> n)

    def shift_left(self, n: int = 1) -> None:
        """Shift the output left by ``n`` (1..7); other ``n`` does nothing."""
        if n == 0 or n > 7:
            return
        self.write8(self._data_out << n)

    def rotate_right(self, n: int = 1) -> None:
        r = operator.index(n) & 7
        out = self._data_out
        self.write8((out >> r) | (out << (8 - r)))

    def rotate_left(self, n: int = 1) -> None:
        self.rotate_right(8 - (operator.index(n) & 7))