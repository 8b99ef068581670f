"""Binary search over a sorted x-axis."""

from __future__ import annotations

from typing import Sized

import numpy as np

from ..errors import LengthMismatch


def check_lengths(xs: Sized, ys: Sized, weights: Sized | None = None) -> int:
    """Return the shared length of the sequences or raise :class:`LengthMismatch`."""

    n = len(xs)
    if len(ys) != n:
        raise LengthMismatch(n, len(ys))
    if weights is not None and len(weights) != n:
        raise LengthMismatch(n, len(ys), len(weights), what="x, y and weights")
    return n


def find_pivot(xs: np.ndarray, x: float) -> int:
    """Return the smallest index ``i`` with ``xs[i] >= x``.

    ``len(xs)`` is returned when every element is smaller than ``x``.  The
    array must be sorted in non-decreasing order; this is not checked.
    """

    return int(np.searchsorted(xs, x, side="left"))
