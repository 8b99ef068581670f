import numpy as np
import pytest

from tseries import Settings, Timeseries


@pytest.fixture
def ts():
    return Timeseries([1, 2, 3], [100.0, 50.0, 100.0])


def test_difference(ts):
    empty = Timeseries()
    assert empty.difference().equal(empty)
    assert ts.slice(1, 2).difference().equal(empty)
    assert ts.difference().equal(Timeseries([2, 3], [-50.0, 50.0]))


def test_difference_is_a_new_series(ts):
    diff = ts.difference()
    diff.xs[0] = 42.0
    assert ts.xs[1] == 2.0


def test_difference_length_and_values():
    rng = np.random.default_rng(0)
    ys = rng.normal(size=25)
    ts = Timeseries(np.arange(25.0), ys)
    diff = ts.difference()
    assert len(diff) == 24
    np.testing.assert_array_equal(diff.ys, ys[1:] - ys[:-1])
    np.testing.assert_array_equal(diff.xs, ts.xs[1:])


def test_moving_average_identity():
    rng = np.random.default_rng(1)
    ts = Timeseries(np.sort(rng.uniform(size=30)), rng.normal(size=30))
    assert ts.moving_average(1).equal(ts)
    assert Timeseries().moving_average(1).equal(Timeseries())


def test_moving_average_values():
    ts = Timeseries([1, 2, 3, 4], [1.0, 2.0, 3.0, 4.0])
    result = ts.moving_average(2)
    np.testing.assert_array_equal(result.xs, [2, 3, 4])
    np.testing.assert_allclose(result.ys, [1.5, 2.5, 3.5])
    full = ts.moving_average(4)
    assert full.equal(Timeseries([4], [2.5]))


@pytest.mark.parametrize("window", [1, 2, 3, 7, 20])
def test_moving_average_windows(window):
    rng = np.random.default_rng(window)
    ys = rng.normal(size=20)
    ts = Timeseries(np.arange(20.0), ys)
    result = ts.moving_average(window)
    assert len(result) == 20 - window + 1
    for i, (x, y) in enumerate(result):
        assert x == ts.xs[i + window - 1]
        assert y == pytest.approx(np.mean(ys[i : i + window]))


def test_moving_average_oversized_window(ts):
    assert ts.moving_average(4).equal(Timeseries())
    settings = Settings()
    settings.moving_average.oversized_window = "raise"
    with pytest.raises(ValueError):
        ts.moving_average(4, settings=settings)
    assert len(ts.moving_average(3, settings=settings)) == 1


@pytest.mark.parametrize("window", [0, -2, 1.5, True])
def test_moving_average_bad_window(ts, window):
    with pytest.raises(ValueError):
        ts.moving_average(window)
