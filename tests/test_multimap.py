import pytest

from mcukit.multimap import multi_map

IN = [11, 22, 33]
OUT = [111, 222, 555]


def test_integer_example():
    assert multi_map(12, IN, OUT) == 121


def test_float_example():
    result = multi_map(12.0, [11.0, 22.0, 33.0], [111.0, 222.0, 555.0])
    assert result == pytest.approx(121.0909, abs=1e-3)


def test_clamps_outside_range():
    assert multi_map(0, IN, OUT) == OUT[0]
    assert multi_map(11, IN, OUT) == OUT[0]
    assert multi_map(100, IN, OUT) == OUT[-1]
    assert multi_map(33, IN, OUT) == OUT[-1]


def test_exact_points():
    for x, y in zip(IN, OUT):
        assert multi_map(x, IN, OUT) == y


def test_monotonic_between_points():
    fin = [0.0, 1.0, 4.0, 10.0]
    fout = [0.0, 5.0, 6.0, 20.0]
    xs = [k / 4 for k in range(-4, 45)]
    ys = [multi_map(x, fin, fout) for x in xs]
    assert ys == sorted(ys)
    assert all(fout[0] <= y <= fout[-1] for y in ys)


def test_integer_division_truncates_toward_zero():
    assert multi_map(1, [0, 3], [0, -2]) == 0


def test_single_point_table():
    assert multi_map(5, [3], [7]) == 7


def test_length_mismatch():
    with pytest.raises(ValueError):
        multi_map(1, [1, 2], [1])


def test_empty_table():
    with pytest.raises(ValueError):
        multi_map(1, [], [])