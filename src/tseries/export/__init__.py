"""Conversions between :class:`~tseries.Timeseries` and other containers."""

from .frames import from_frame, from_series, to_frame, to_series

__all__ = ["from_frame", "from_series", "to_frame", "to_series"]
