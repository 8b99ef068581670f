"""Common type helpers for tseries.

This module defines the lightweight record containers exchanged with
callers.  The canonical storage of a series is a pair of parallel arrays;
the types below are the structured-record view of the same data.
"""

from __future__ import annotations

from typing import NamedTuple, TypedDict


class Sample(TypedDict):
    """Plain mapping form of a single data point."""

    x: float
    y: float


class Point(NamedTuple):
    """A single ``(x, y)`` record of a series."""

    x: float
    y: float


class LinearFit(NamedTuple):
    """Result of a least-squares fit of ``y = alpha + beta * x``."""

    alpha: float
    beta: float
    rmse: float

    def predict(self, x: float) -> float:
        """Return the fitted value at ``x``."""

        return self.alpha + self.beta * x
