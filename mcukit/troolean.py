"""Three-valued logic: true, false and unknown (Kleene)."""

from __future__ import annotations

import operator

UNKNOWN = -1

_NAMES = {0: "false", 1: "true", UNKNOWN: "unknown"}


def _normalize(value: object) -> int:
    if value is None:
        return UNKNOWN
    if isinstance(value, Troolean):
        return value._value
    if isinstance(value, bool):
        return 1 if value else 0
    number = operator.index(value)  # type: ignore[arg-type]
    if number == 0:
        return 0
    if number == UNKNOWN:
        return UNKNOWN
    return 1


def _operand(value: object) -> int | None:
    if isinstance(value, (Troolean, bool, int)):
        return _normalize(value)
    return None


class Troolean:
    """A truth value that may be true, false or unknown.

    Built from ``None`` (unknown), a bool, another Troolean, or an int where
    0 is false, -1 is unknown and anything else is true.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Troolean | bool | int | None = None) -> None:
        self._value = _normalize(value)

    def __str__(self) -> str:
        return _NAMES[self._value]

    def __repr__(self) -> str:
        return f"Troolean({_NAMES[self._value]})"

    def __eq__(self, other: object) -> bool:
        value = _operand(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        """Only true counts as true; unknown counts as false."""
        return self._value == 1

    def __invert__(self) -> Troolean:
        if self._value == UNKNOWN:
            return Troolean(UNKNOWN)
        return Troolean(1 - self._value)

    def __and__(self, other: object) -> Troolean:
        value = _operand(other)
        if value is None:
            return NotImplemented
        if self._value == 0 or value == 0:
            return Troolean(0)
        if self._value == 1 and value == 1:
            return Troolean(1)
        return Troolean(UNKNOWN)

    __rand__ = __and__

    def __or__(self, other: object) -> Troolean:
        value = _operand(other)
        if value is None:
            return NotImplemented
        if self._value == 1 or value == 1:
            return Troolean(1)
        if self._value == 0 and value == 0:
            return Troolean(0)
        return Troolean(UNKNOWN)

    __ror__ = __or__

    def is_true(self) -> bool:
        return self._value == 1

    def is_false(self) -> bool:
        return self._value == 0

    def is_unknown(self) -> bool:
        return self._value == UNKNOWN