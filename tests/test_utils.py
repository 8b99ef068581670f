import logging
from datetime import datetime, timezone

import pytest

from tseries.config import Settings
from tseries.types import LinearFit, Point, Sample
from tseries.utils import configure_logging, get_logger, parse_time, to_seconds


def test_types():
    s: Sample = {"x": 1.0, "y": 2.0}
    assert s["x"] == 1.0
    p = Point(1.0, 2.0)
    x, y = p
    assert (x, y) == (1.0, 2.0)
    fit = LinearFit(1.0, 2.0, 0.0)
    assert fit.predict(3.0) == 7.0


def test_parse_time():
    assert parse_time("1:02:03.5") == pytest.approx(3723.5)
    assert parse_time("02:03") == pytest.approx(123)
    assert parse_time("45") == pytest.approx(45)
    for bad in ("bad", "", "1:2:3:4"):
        with pytest.raises(ValueError):
            parse_time(bad)


def test_to_seconds():
    assert to_seconds(3) == 3.0
    assert to_seconds(2.5) == 2.5
    assert to_seconds("00:01:30") == 90.0
    moment = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert to_seconds(moment) == moment.timestamp()
    assert to_seconds(datetime(2024, 1, 1)) == moment.timestamp()
    assert to_seconds("2024-01-01T00:00:00Z") == moment.timestamp()
    with pytest.raises(ValueError):
        to_seconds("yesterday")
    with pytest.raises(TypeError):
        to_seconds(None)


def test_logging():
    logger = get_logger("test")
    logger2 = get_logger("test")
    assert logger is logger2
    assert len(logger.handlers) == 1
    logger.debug("debug message")


def test_configure_logging():
    settings = Settings()
    settings.logging.level = "debug"
    logger = configure_logging(settings)
    assert logger.name == "tseries"
    assert logger.level == logging.DEBUG
    assert len(configure_logging(settings).handlers) == 1


def test_clock_strings_are_durations():
    assert to_seconds("12:00:00") == 43200.0
    noon = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
    assert to_seconds("2024-01-01T12:00:00Z") == noon.timestamp()
    assert to_seconds("12:00:00") != noon.timestamp()
