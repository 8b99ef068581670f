"""Numeric kernels operating on parallel ``xs``/``ys`` arrays."""

from .regression import mean_squared_error, simple_linear_regression
from .search import check_lengths, find_pivot
from .transforms import difference, moving_average

__all__ = [
    "check_lengths",
    "find_pivot",
    "difference",
    "moving_average",
    "simple_linear_regression",
    "mean_squared_error",
]
