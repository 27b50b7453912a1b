import math
import statistics

import pytest

from mcukit.running_median import MEDIAN_MAX_SIZE, MEDIAN_MIN_SIZE, RunningMedian


def _filled(size, values):
    rm = RunningMedian(size)
    for v in values:
        rm.add(v)
    return rm


def test_size_is_constrained():
    assert RunningMedian(50).size() == MEDIAN_MAX_SIZE
    assert RunningMedian(0).size() == MEDIAN_MIN_SIZE
    assert RunningMedian(7).size() == 7


def test_empty_is_nan():
    rm = RunningMedian(5)
    results = [
        rm.median(),
        rm.average(),
        rm.average(3),
        rm.highest(),
        rm.lowest(),
        rm.element(0),
        rm.predict(0),
    ]
    assert [str(r) for r in results] == ["nan"] * 7
    assert rm.count() == 0


def test_odd_median():
    rm = _filled(5, [5.0, 1.0, 3.0])
    assert rm.median() == 3.0


@pytest.mark.parametrize(
    "values",
    [[4.0, 1.0, 8.0, 2.0], [9.0, -2.0, 3.5, 7.0, 0.5, 6.0], [1.0]],
)
def test_median_matches_statistics(values):
    rm = _filled(10, values)
    assert rm.median() == pytest.approx(statistics.median(values))


def test_wraps_and_keeps_time_order():
    rm = _filled(3, [10.0, 20.0, 30.0, 40.0])
    assert rm.count() == 3
    assert [rm.element(i) for i in range(3)] == [20.0, 30.0, 40.0]
    assert math.isnan(rm.element(3))
    assert rm.median() == 30.0


def test_element_before_full():
    values = [3.0, 1.0, 2.0]
    rm = _filled(5, values)
    assert [rm.element(i) for i in range(3)] == values


def test_sorted_access():
    values = [7.0, -1.0, 4.0, 2.0]
    rm = _filled(6, values)
    assert [rm.sorted_element(i) for i in range(4)] == sorted(values)
    assert rm.lowest() == min(values)
    assert rm.highest() == max(values)


def test_average_all_and_trimmed():
    values = [1.0, 2.0, 3.0, 100.0, 4.0]
    rm = _filled(5, values)
    assert rm.average() == pytest.approx(statistics.mean(values))
    assert rm.average(3) == pytest.approx(statistics.mean([2.0, 3.0, 4.0]))
    assert rm.average(50) == pytest.approx(rm.average())
    assert math.isnan(rm.average(0))


def test_median_updates_after_add():
    rm = _filled(5, [1.0, 2.0, 3.0])
    first = rm.median()
    rm.add(10.0)
    assert rm.median() == pytest.approx(statistics.median([1.0, 2.0, 3.0, 10.0]))
    assert rm.median() != first


def test_predict():
    rm = _filled(9, [5.0, 1.0, 9.0, 3.0, 7.0])
    assert rm.predict(0) == 0.0
    assert rm.predict(1) >= 0.0
    assert math.isnan(rm.predict(2))


def test_clear():
    rm = _filled(5, [1.0, 2.0])
    rm.clear()
    assert rm.count() == 0
    assert math.isnan(rm.median())
    rm.add(6.0)
    assert rm.median() == 6.0