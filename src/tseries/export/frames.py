"""Utilities for converting series to and from pandas objects.

The helpers copy data in both directions; a pandas object built from a
series never aliases the series' arrays.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from ..series import Timeseries


def to_frame(ts: Timeseries, *, x: str = "x", y: str = "y") -> pd.DataFrame:
    """Return a :class:`~pandas.DataFrame` with one row per point."""

    ts.len()
    return pd.DataFrame({x: ts.xs.copy(), y: ts.ys.copy()})


def from_frame(df: pd.DataFrame, *, x: str = "x", y: str = "y") -> Timeseries:
    """Build a series from the ``x`` and ``y`` columns of ``df``.

    Row order is kept as is; call :meth:`Timeseries.sort` if the frame is
    not ordered by ``x``.
    """

    return Timeseries(df[x].to_numpy(dtype=float), df[y].to_numpy(dtype=float))


def to_series(ts: Timeseries, name: str | None = None) -> pd.Series:
    """Return the values as a :class:`~pandas.Series` indexed by x."""

    ts.len()
    return pd.Series(ts.ys.copy(), index=pd.Index(ts.xs.copy(), name="x"), name=name)


def from_series(series: pd.Series) -> Timeseries:
    """Build a series from a :class:`~pandas.Series`.

    A :class:`~pandas.DatetimeIndex` is converted to POSIX seconds, naive
    timestamps being read as UTC.
    """

    index = series.index
    if isinstance(index, pd.DatetimeIndex):
        if index.tz is not None:
            index = index.tz_convert("UTC").tz_localize(None)
        xs = (index - pd.Timestamp(0)) / pd.Timedelta(seconds=1)
        xs = np.asarray(xs, dtype=float)
    else:
        xs = index.to_numpy(dtype=float)
    return Timeseries(xs, series.to_numpy(dtype=float))
