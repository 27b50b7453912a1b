"""Compact fixed-size storage for 4-bit values."""

from __future__ import annotations

import operator


class NibbleArray:
    """A fixed-length array of nibbles, two per byte.

    Even indices live in the high nibble of a byte, odd indices in the low
    nibble. Stored values are masked to their lowest four bits.
    """

    def __init__(self, size: int) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._data = bytearray((size + 1) // 2)

    def _position(self, index: int) -> int:
        index = operator.index(index)
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("nibble index out of range")
        return index

    def __getitem__(self, index: int) -> int:
        index = self._position(index)
        byte = self._data[index >> 1]
        if index & 1:
            return byte & 0x0F
        return byte >> 4

    def __setitem__(self, index: int, value: int) -> None:
        index = self._position(index)
        nibble = operator.index(value) & 0x0F
        slot = index >> 1
        if index & 1:
            self._data[slot] = (self._data[slot] & 0xF0) | nibble
        else:
            self._data[slot] = (self._data[slot] & 0x0F) | (nibble << 4)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"NibbleArray({list(self)!r})"