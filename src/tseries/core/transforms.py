"""Series-to-series transforms: first differences and moving averages."""

from __future__ import annotations

import logging

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from ..config import Settings

logger = logging.getLogger(__name__)


def _empty() -> tuple[np.ndarray, np.ndarray]:
    return np.empty(0, dtype=float), np.empty(0, dtype=float)


def difference(xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return the first differences of ``ys``.

    Each output point carries the x-coordinate of the later sample of its
    pair.  Fewer than two samples yield empty arrays.
    """

    if ys.shape[0] < 2:
        return _empty()
    return xs[1:].copy(), np.diff(ys)


def moving_average(
    xs: np.ndarray,
    ys: np.ndarray,
    window: int,
    *,
    settings: Settings | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Compute the simple moving average of ``ys`` over ``window`` samples.

    The result has ``len(ys) - window + 1`` elements; element ``i`` is
    stamped with ``xs[i + window - 1]``, the last x-coordinate it covers.
    Every mean is taken directly over its own window rather than from a
    running total, so ``window=1`` reproduces the input exactly.

    Parameters
    ----------
    xs, ys:
        Parallel one-dimensional arrays.
    window:
        Number of samples per mean.  ``ValueError`` is raised unless it is a
        positive integer.
    settings:
        Optional :class:`~tseries.config.Settings`.  Its
        ``moving_average.oversized_window`` decides whether a window longer
        than the series gives empty arrays (``"empty"``) or ``ValueError``
        (``"raise"``).
    """

    if isinstance(window, bool) or not isinstance(window, (int, np.integer)):
        raise ValueError("window must be an integer")
    if window <= 0:
        raise ValueError("window must be positive")

    n = ys.shape[0]
    if window > n:
        if settings is None:
            settings = Settings()
        if settings.moving_average.oversized_window == "raise":
            raise ValueError(f"window {window} larger than series of length {n}")
        logger.debug("moving average window %d exceeds series length %d", window, n)
        return _empty()

    means = sliding_window_view(ys, window).mean(axis=1)
    return xs[window - 1 :].copy(), means
