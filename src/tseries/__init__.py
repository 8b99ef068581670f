"""tseries: ordered numeric time series.

Range queries, differencing, moving averages and least-squares fitting on
paired ``xs``/``ys`` arrays.
"""

from .config import Settings, load_settings
from .core.regression import mean_squared_error
from .errors import EmptySeries, IndexOutOfRange, LengthMismatch, TimeseriesError
from .series import Timeseries
from .types import LinearFit, Point, Sample

__all__ = [
    "Timeseries",
    "Point",
    "Sample",
    "LinearFit",
    "mean_squared_error",
    "TimeseriesError",
    "LengthMismatch",
    "EmptySeries",
    "IndexOutOfRange",
    "Settings",
    "load_settings",
]
