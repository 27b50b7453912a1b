"""A stopwatch counting in milliseconds, microseconds or seconds."""

from __future__ import annotations

import time
from collections.abc import Callable
from enum import Enum


class State(Enum):
    RESET = 0
    RUNNING = 1
    STOPPED = 2


class Resolution(Enum):
    MILLIS = 0
    MICROS = 1
    SECONDS = 2


_NS_PER_TICK = {
    Resolution.MICROS: 1_000,
    Resolution.MILLIS: 1_000_000,
    Resolution.SECONDS: 1_000_000_000,
}


class StopWatch:
    """Measures elapsed time across start/stop cycles.

    ``clock`` returns a monotonic time in integer nanoseconds.
    """

    def __init__(
        self,
        resolution: Resolution = Resolution.MILLIS,
        clock: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        self._resolution = Resolution(resolution)
        self._clock = clock
        self.reset()

    def _now(self) -> int:
        return self._clock() // _NS_PER_TICK[self._resolution]

    def reset(self) -> None:
        self._state = State.RESET
        self._start_time = 0
        self._stop_time = 0

    def start(self) -> None:
        """Start or resume; does nothing while running."""
        if self._state in (State.RESET, State.STOPPED):
            self._state = State.RUNNING
            now = self._now()
            self._start_time += now - self._stop_time
            self._stop_time = now

    def stop(self) -> None:
        """Stop; does nothing unless running."""
        if self._state is State.RUNNING:
            self._stop_time = self._now()
            self._state = State.STOPPED

    def value(self) -> int:
        """Elapsed time in ticks of the resolution."""
        if self._state is State.RUNNING:
            self._stop_time = self._now()
        return self._stop_time - self._start_time

    def elapsed(self) -> int:
        return self.value()

    def is_running(self) -> bool:
        return self._state is State.RUNNING

    def state(self) -> State:
        return self._state

    def resolution(self) -> Resolution:
        return self._resolution