"""Print sinks that capture output into a buffer, a string or a byte count."""

from __future__ import annotations

BUFFER_SIZE = 256


def _to_bytes(data: str | bytes | bytearray | memoryview | int) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, int):
        if not 0 <= data <= 0xFF:
            raise ValueError("a single byte must be in 0..255")
        return bytes((data,))
    return bytes(data)


class PrintCharArray:
    """Captures written bytes in a fixed buffer holding up to 255 bytes."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, data: str | bytes | int) -> int:
        """Store as many bytes as fit; returns how many were stored."""
        room = BUFFER_SIZE - 1 - len(self._buffer)
        chunk = _to_bytes(data)[: max(room, 0)]
        self._buffer.extend(chunk)
        return len(chunk)

    def clear(self) -> None:
        self._buffer.clear()

    def free(self) -> int:
        return BUFFER_SIZE - len(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def buffer(self) -> bytes:
        return bytes(self._buffer)


class PrintSize:
    """Counts the bytes written to it without storing them."""

    def __init__(self) -> None:
        self._total = 0

    def write(self, data: str | bytes | int) -> int:
        n = len(_to_bytes(data))
        self._total += n
        return n

    def total(self) -> int:
        return self._total


class PrintString:
    """Captures written bytes into a growing string."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, data: str | bytes | int) -> int:
        chunk = _to_bytes(data)
        self._buffer.extend(chunk)
        return len(chunk)

    def clear(self) -> None:
        self._buffer.clear()

    def text(self) -> str:
        return self._buffer.decode("utf-8", errors="replace")