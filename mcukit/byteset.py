"""A set of the integers 0..255 stored as a 256-bit mask, with a cursor."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator

_LOWEST = 0
_HIGHEST = 255
_FULL = (1 << (_HIGHEST + 1)) - 1


def _check(value: int) -> int:
    value = operator.index(value)
    if not _LOWEST <= value <= _HIGHEST:
        raise ValueError(f"value must be in {_LOWEST}..{_HIGHEST}, got {value}")
    return value


class ByteSet:
    """A mutable set of integers in 0..255.

    Besides normal iteration, ``first``/``next``/``prev``/``last`` walk the
    elements with an internal cursor and return -1 when there is no element.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._bits = 0
        self._current = -1
        for value in values:
            self.add(value)

    @classmethod
    def _from_bits(cls, bits: int) -> ByteSet:
        result = cls()
        result._bits = bits & _FULL
        return result

    def add(self, value: int) -> None:
        self._bits |= 1 << _check(value)

    def discard(self, value: int) -> None:
        self._bits &= ~(1 << _check(value))

    def toggle(self, value: int) -> None:
        """Add ``value`` if absent, remove it if present."""
        self._bits ^= 1 << _check(value)

    def invert(self) -> None:
        """Replace the set by its complement within 0..255."""
        self._bits ^= _FULL

    def clear(self) -> None:
        self._bits = 0

    def copy(self) -> ByteSet:
        """A new set with the same elements and a fresh cursor."""
        return self._from_bits(self._bits)

    def __contains__(self, value: object) -> bool:
        try:
            value = _check(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        return bool(self._bits >> value & 1)

    def __len__(self) -> int:
        return self._bits.bit_count()

    def __iter__(self) -> Iterator[int]:
        bits = self._bits
        while bits:
            low = bits & -bits
            yield low.bit_length() - 1
            bits ^= low

    def is_empty(self) -> bool:
        return self._bits == 0

    def is_full(self) -> bool:
        return self._bits == _FULL

    def _find_next(self, start: int) -> int:
        if start > _HIGHEST:
            self._current = -1
            return -1
        rest = self._bits >> start
        if rest == 0:
            self._current = -1
            return -1
        self._current = start + (rest & -rest).bit_length() - 1
        return self._current

    def _find_prev(self, start: int) -> int:
        if start < _LOWEST:
            self._current = -1
            return -1
        rest = self._bits & ((1 << (start + 1)) - 1)
        if rest == 0:
            self._current = -1
            return -1
        self._current = rest.bit_length() - 1
        return self._current

    def first(self) -> int:
        """Smallest element, or -1; moves the cursor there."""
        return self._find_next(_LOWEST)

    def next(self) -> int:
        """Element after the cursor, or -1 when the cursor is exhausted."""
        if self._current < 0:
            return -1
        return self._find_next(self._current + 1)

    def prev(self) -> int:
        """Element before the cursor, or -1 when the cursor is exhausted."""
        if self._current < 0:
            return -1
        return self._find_prev(self._current - 1)

    def last(self) -> int:
        """Largest element, or -1; moves the cursor there."""
        return self._find_prev(_HIGHEST)

    def __or__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return self._from_bits(self._bits | other._bits)

    def __sub__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return self._from_bits(self._bits & ~other._bits)

    def __and__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return self._from_bits(self._bits & other._bits)

    def __ior__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        self._bits |= other._bits
        return self

    def __isub__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        self._bits &= ~other._bits
        return self

    def __iand__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        self._bits &= other._bits
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return self._bits == other._bits

    def __le__(self, other: object) -> bool:
        """True when every element of this set is in ``other``."""
        if not isinstance(other, ByteSet):
            return NotImplemented
        return self._bits & ~other._bits == 0

    def __repr__(self) -> str:
        return f"ByteSet({list(self)!r})"