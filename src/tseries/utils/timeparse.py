"""Utilities for turning time expressions into x-axis coordinates."""

from __future__ import annotations

from datetime import datetime, timezone
from numbers import Real


def parse_time(text: str) -> float:
    """Parse ``text`` as a time value in seconds.

    Accepted formats are:

    * ``HH:MM:SS``
    * ``MM:SS``
    * ``SS``

    Fractional seconds are supported.  ``ValueError`` is raised on
    malformed input.
    """

    parts = text.strip().split(":")
    if not parts or not parts[0]:
        raise ValueError("empty time string")

    try:
        parts_f = [float(p) for p in parts]
    except ValueError as exc:
        raise ValueError(f"invalid time value: {text!r}") from exc

    if len(parts_f) == 1:
        seconds = parts_f[0]
    elif len(parts_f) == 2:
        minutes, seconds = parts_f
        seconds += minutes * 60
    elif len(parts_f) == 3:
        hours, minutes, seconds = parts_f
        seconds += minutes * 60 + hours * 3600
    else:
        raise ValueError("too many components in time string")
    return seconds


def _epoch_seconds(moment: datetime) -> float:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.timestamp()


def to_seconds(value: float | int | datetime | str) -> float:
    """Convert ``value`` to a float x-coordinate.

    Numbers pass through unchanged.  ``datetime`` objects become POSIX
    seconds, naive values being read as UTC.  Strings are tried as a
    clock expression (see :func:`parse_time`) and then as ISO-8601.

    The two string forms live on different axes: an ISO-8601 string is an
    absolute instant in epoch seconds, whereas a clock string is a duration
    counted from zero (``"12:00:00"`` is 43200.0, not noon of any day).
    Clock strings therefore only make sense for offset-based x-axes.
    """

    if isinstance(value, datetime):
        return _epoch_seconds(value)
    if isinstance(value, Real):
        return float(value)
    if isinstance(value, str):
        try:
            return parse_time(value)
        except ValueError:
            pass
        try:
            return _epoch_seconds(datetime.fromisoformat(value.strip().replace("Z", "+00:00")))
        except ValueError as exc:
            raise ValueError(f"Unrecognised time value: {value!r}") from exc
    raise TypeError(f"cannot use {type(value).__name__} as an x-coordinate")
