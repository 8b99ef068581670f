"""Least-squares line fitting and residual error.

The fit uses the centred normal equations

.. math::

   \\beta = \\frac{\\sum (x_i - \\bar x)(y_i - \\bar y)}{\\sum (x_i - \\bar x)^2},
   \\qquad \\alpha = \\bar y - \\beta \\bar x

which stay exact for exactly representable linear data.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from ..errors import EmptySeries
from ..types import LinearFit
from .search import check_lengths

logger = logging.getLogger(__name__)


def mean_squared_error(
    x: Sequence[float] | np.ndarray,
    y: Sequence[float] | np.ndarray,
    weights: Sequence[float] | np.ndarray | None,
    alpha: float,
    beta: float,
) -> float:
    """Return the weighted mean squared residual of ``y`` against a line.

    Computes ``sum(w * (alpha + beta * x - y) ** 2) / sum(w)``.  ``weights``
    of ``None`` gives every point a weight of one.

    Raises
    ------
    LengthMismatch
        If ``x``, ``y`` and (when given) ``weights`` differ in length.
    EmptySeries
        If there are no points.
    ValueError
        If the weights sum to zero.
    """

    check_lengths(x, y, weights)
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    if x_arr.size == 0:
        raise EmptySeries("mean_squared_error")

    residuals = alpha + beta * x_arr - y_arr
    squared = residuals * residuals
    if weights is None:
        return float(np.mean(squared))

    w = np.asarray(weights, dtype=float)
    total = np.sum(w)
    if total == 0:
        raise ValueError("weights must not sum to zero")
    return float(np.sum(w * squared) / total)


def simple_linear_regression(xs: np.ndarray, ys: np.ndarray) -> LinearFit:
    """Fit ``y = alpha + beta * x`` by ordinary least squares.

    Returns ``LinearFit(alpha, beta, rmse)`` where ``rmse`` is the root of the
    unweighted mean squared residual of the fitted line.  An empty input
    raises :class:`EmptySeries`.  When the x-values have no spread (a single
    point, or all equal) the slope is undefined and every field is ``nan``.
    """

    n = check_lengths(xs, ys)
    if n == 0:
        raise EmptySeries("simple_linear_regression")

    x_mean = np.mean(xs)
    y_mean = np.mean(ys)
    dx = xs - x_mean
    sxx = float(np.dot(dx, dx))
    if sxx == 0.0:
        logger.debug("zero x-variance over %d points; fit is undefined", n)
        nan = float("nan")
        return LinearFit(nan, nan, nan)

    beta = float(np.dot(dx, ys - y_mean)) / sxx
    alpha = float(y_mean - beta * x_mean)
    rmse = math.sqrt(mean_squared_error(xs, ys, None, alpha, beta))
    return LinearFit(alpha, beta, rmse)
