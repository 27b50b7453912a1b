"""Running average over a circular buffer of the most recent values."""

from __future__ import annotations

import math
import operator


class RunningAverage:
    """Keeps the last ``size`` values and statistics over them."""

    def __init__(self, size: int) -> None:
        size = operator.index(size)
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        self._values = [0.0] * size
        self.clear()

    def clear(self) -> None:
        """Forget all values and reset the all-time minimum and maximum."""
        self._count = 0
        self._index = 0
        self._sum = 0.0
        self._min = math.nan
        self._max = math.nan
        self._values = [0.0] * self._size

    def add_value(self, value: float) -> None:
        """Add a value, overwriting the oldest one once the buffer is full."""
        value = float(value)
        self._sum -= self._values[self._index]
        self._values[self._index] = value
        self._sum += value
        self._index = (self._index + 1) % self._size

        if self._count == 0:
            self._min = self._max = value
        elif value < self._min:
            self._min = value
        elif value > self._max:
            self._max = value

        if self._count < self._size:
            self._count += 1

    def fill_value(self, value: float, number: int) -> None:
        """Clear, then add ``value`` ``number`` times."""
        self.clear()
        for _ in range(number):
            self.add_value(value)

    def _filled(self) -> list[float]:
        return self._values[: self._count]

    def average(self) -> float:
        """Average recomputed from the buffer; NaN when empty."""
        if self._count == 0:
            return math.nan
        return sum(self._filled()) / self._count

    def fast_average(self) -> float:
        """Average from the running sum; NaN when empty."""
        if self._count == 0:
            return math.nan
        return self._sum / self._count

    def standard_deviation(self) -> float:
        """Sample standard deviation; NaN with fewer than two values."""
        if self._count < 2:
            return math.nan
        mean = self.fast_average()
        squares = sum((x - mean) ** 2 for x in self._filled())
        return math.sqrt(squares / (self._count - 1))

    def standard_error(self) -> float:
        """Standard error of the mean; NaN with fewer than two values."""
        deviation = self.standard_deviation()
        if math.isnan(deviation):
            return math.nan
        n = self._count if self._count >= 30 else self._count - 1
        return deviation / math.sqrt(n)

    def minimum(self) -> float:
        """Smallest value added since the last clear; NaN when none."""
        return self._min

    def maximum(self) -> float:
        """Largest value added since the last clear; NaN when none."""
        return self._max

    def min_in_buffer(self) -> float:
        if self._count == 0:
            return math.nan
        return min(self._filled())

    def max_in_buffer(self) -> float:
        if self._count == 0:
            return math.nan
        return max(self._filled())

    def is_full(self) -> bool:
        return self._count == self._size

    def element(self, index: int) -> float:
        """Value at buffer position ``index``; NaN when not yet filled."""
        if not 0 <= index < self._count:
            return math.nan
        return self._values[index]

    def size(self) -> int:
        return self._size

    def count(self) -> int:
        return self._count