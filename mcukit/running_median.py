"""Running median over a circular buffer of the most recent values."""

from __future__ import annotations

import math
import operator

MEDIAN_MIN_SIZE = 1
MEDIAN_MAX_SIZE = 19


class RunningMedian:
    """Keeps the last ``size`` values (1..19) and order statistics over them."""

    def __init__(self, size: int) -> None:
        size = operator.index(size)
        self._size = min(max(size, MEDIAN_MIN_SIZE), MEDIAN_MAX_SIZE)
        self._values = [0.0] * self._size
        self.clear()

    def clear(self) -> None:
        self._count = 0
        self._index = 0
        self._sorted_cache: list[float] | None = None

    def add(self, value: float) -> None:
        """Add a value, overwriting the oldest one once the buffer is full."""
        self._values[self._index] = float(value)
        self._index = (self._index + 1) % self._size
        if self._count < self._size:
            self._count += 1
        self._sorted_cache = None

    def _sorted(self) -> list[float]:
        if self._sorted_cache is None:
            self._sorted_cache = sorted(self._values[: self._count])
        return self._sorted_cache

    def median(self) -> float:
        """Middle value; the mean of the two middle values for an even count."""
        if self._count == 0:
            return math.nan
        ordered = self._sorted()
        mid = self._count // 2
        if self._count & 1:
            return ordered[mid]
        return (ordered[mid] + ordered[mid - 1]) / 2

    def average(self, n_medians: int | None = None) -> float:
        """Mean of all values, or of the ``n_medians`` values around the median."""
        if self._count == 0:
            return math.nan
        if n_medians is None:
            return sum(self._values[: self._count]) / self._count
        if n_medians <= 0:
            return math.nan
        n = min(n_medians, self._count)
        start = (self._count - n) // 2
        return sum(self._sorted()[start : start + n]) / n

    def highest(self) -> float:
        return self.sorted_element(self._count - 1)

    def lowest(self) -> float:
        return self.sorted_element(0)

    def element(self, n: int) -> float:
        """The ``n``-th value in time order, oldest first; NaN if absent."""
        if not 0 <= n < self._count:
            return math.nan
        pos = self._index + n
        if pos >= self._count:
            pos -= self._count
        return self._values[pos]

    def sorted_element(self, n: int) -> float:
        """The ``n``-th value in ascending order; NaN if absent."""
        if not 0 <= n < self._count:
            return math.nan
        return self._sorted()[n]

    def predict(self, n: int) -> float:
        """Largest change of the median after ``n`` more additions.

        ``n`` must be below half the current count, otherwise NaN.
        """
        if self._count == 0 or n < 0 or n >= self._count // 2:
            return math.nan
        med = self.median()
        ordered = self._sorted()
        mid = self._count // 2
        if self._count & 1:
            return max(med - ordered[mid - n], ordered[mid + n] - med)
        f1 = (ordered[mid - n] + ordered[mid - n - 1]) / 2
        f2 = (ordered[mid + n] + ordered[mid + n - 1]) / 2
        return max(med - f1, f2 - med) / 2

    def size(self) -> int:
        return self._size

    def count(self) -> int:
        return self._count