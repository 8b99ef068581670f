"""The :class:`Timeseries` container.

A series is a pair of parallel ``float64`` arrays, ``xs`` and ``ys``.  Range
queries assume ``xs`` is sorted in non-decreasing order; call :meth:`sort`
after appending points out of order.  The order is not checked.

Storage rules
-------------
* The constructor copies its input.
* :meth:`slice`, :meth:`after`, :meth:`before` and :meth:`between` return
  views sharing memory with the parent, so element writes through either are
  visible in both.
* Growing a series (:meth:`append`, :meth:`extend`) reallocates its arrays.
  Appending to a view never touches the parent, and views taken before the
  parent grew keep the old storage.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Iterator, Mapping, Sequence

import numpy as np

from .config import Settings
from .core import regression, search, transforms
from .errors import EmptySeries, IndexOutOfRange
from .types import LinearFit, Point, Sample
from .utils.timeparse import to_seconds

logger = logging.getLogger(__name__)

XValue = float | int | datetime | str


def _as_array(values: Iterable[float] | np.ndarray | None) -> np.ndarray:
    if values is None:
        return np.empty(0, dtype=float)
    if not isinstance(values, np.ndarray):
        values = list(values)
    arr = np.array(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError("series data must be one-dimensional")
    return arr


class Timeseries:
    """Ordered numeric time series stored as parallel ``xs``/``ys`` arrays."""

    __slots__ = ("xs", "ys")
    __hash__ = None  # mutable

    def __init__(
        self,
        xs: Iterable[float] | np.ndarray | None = None,
        ys: Iterable[float] | np.ndarray | None = None,
    ) -> None:
        self.xs = _as_array(xs)
        self.ys = _as_array(ys)
        search.check_lengths(self.xs, self.ys)

    @classmethod
    def _view(cls, xs: np.ndarray, ys: np.ndarray) -> "Timeseries":
        ts = cls.__new__(cls)
        ts.xs = xs
        ts.ys = ys
        return ts

    # ------------------------------------------------------------------
    # Record representation
    # ------------------------------------------------------------------

    @classmethod
    def from_points(cls, points: Iterable[Point | tuple[XValue, float]]) -> "Timeseries":
        """Build a series from ``(x, y)`` records."""

        xs: list[float] = []
        ys: list[float] = []
        for x, y in points:
            xs.append(to_seconds(x))
            ys.append(float(y))
        return cls(xs, ys)

    @classmethod
    def from_records(cls, records: Iterable[Sample | Mapping[str, float]]) -> "Timeseries":
        """Build a series from mappings with ``x`` and ``y`` keys."""

        return cls.from_points((rec["x"], rec["y"]) for rec in records)

    def points(self) -> Iterator[Point]:
        """Yield every point in order."""

        n = len(self)
        for i in range(n):
            yield Point(float(self.xs[i]), float(self.ys[i]))

    def to_records(self) -> list[Sample]:
        return [{"x": p.x, "y": p.y} for p in self.points()]

    def __iter__(self) -> Iterator[Point]:
        return self.points()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(xs={self.xs.tolist()!r}, ys={self.ys.tolist()!r})"

    # ------------------------------------------------------------------
    # Length and equality
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return search.check_lengths(self.xs, self.ys)

    def len(self) -> int:
        """Return the number of points, raising :class:`LengthMismatch` if the
        arrays disagree."""

        return len(self)

    def equal(self, other: "Timeseries") -> bool:
        """Return ``True`` if both series hold exactly the same points.

        No tolerance is applied; ``nan`` never compares equal.
        """

        if len(self) != len(other):
            return False
        return bool(np.array_equal(self.xs, other.xs) and np.array_equal(self.ys, other.ys))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeseries):
            return NotImplemented
        return self.equal(other)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, x: XValue, y: float) -> None:
        """Append ``y`` at ``x`` to the end of the series.

        The series is not re-sorted; call :meth:`sort` when inserting out of
        order.
        """

        self.extend([to_seconds(x)], [y])

    def append_point(self, point: Point | tuple[XValue, float]) -> None:
        x, y = point
        self.append(x, y)

    def extend(self, xs: Sequence[XValue] | np.ndarray, ys: Sequence[float] | np.ndarray) -> None:
        """Append several points at once."""

        search.check_lengths(xs, ys)
        search.check_lengths(self.xs, self.ys)
        if not isinstance(xs, np.ndarray):
            xs = [to_seconds(x) for x in xs]
        # convert both before rebinding so a bad value leaves the series intact
        new_xs = _as_array(xs)
        new_ys = _as_array(ys)
        self.xs = np.concatenate([self.xs, new_xs])
        self.ys = np.concatenate([self.ys, new_ys])

    def sort(self) -> None:
        """Sort the series in place by ascending x, keeping ties in order.

        Both arrays are permuted by the same stable ordering, so every
        ``(x, y)`` pair stays together.  Views of this series observe the new
        order.
        """

        n = len(self)
        order = np.argsort(self.xs, kind="stable")
        logger.debug("sorting %d points", n)
        self.xs[:] = self.xs[order]
        self.ys[:] = self.ys[order]

    def copy(self) -> "Timeseries":
        """Return an independent copy of the series."""

        search.check_lengths(self.xs, self.ys)
        return type(self)(self.xs, self.ys)

    # ------------------------------------------------------------------
    # Slicing and range queries
    # ------------------------------------------------------------------

    def slice(self, start: int, end: int) -> "Timeseries":
        """Return a view of the points in ``[start, end)``."""

        n = len(self)
        if not 0 <= start <= end <= n:
            raise IndexOutOfRange((start, end), n)
        return self._view(self.xs[start:end], self.ys[start:end])

    def find_pivot(self, x: XValue) -> int:
        """Return the index of the first point with an x-coordinate ``>= x``.

        ``len(self)`` is returned if there is none.  The series must be
        sorted.
        """

        search.check_lengths(self.xs, self.ys)
        return search.find_pivot(self.xs, to_seconds(x))

    def after(self, x: XValue) -> "Timeseries":
        """Return a view of the points at or after ``x``.  The series must be
        sorted.

        ``x`` goes through :func:`~tseries.utils.timeparse.to_seconds`: a
        ``datetime`` or ISO-8601 string becomes POSIX seconds, while a clock
        string such as ``"12:00"`` is a duration (720 seconds), not a time of
        day.  Use clock strings only on series whose x-axis is an offset.
        """

        return self.slice(self.find_pivot(x), len(self))

    def before(self, x: XValue) -> "Timeseries":
        """Return a view of the points strictly before ``x``.  The series must
        be sorted."""

        return self.slice(0, self.find_pivot(x))

    def between(self, start: XValue, end: XValue) -> "Timeseries":
        """Return a view of the points in ``[start, end)``."""

        return self.after(start).before(end)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def difference(self) -> "Timeseries":
        """Return the first differences as a new series of length ``n - 1``."""

        search.check_lengths(self.xs, self.ys)
        return self._view(*transforms.difference(self.xs, self.ys))

    def moving_average(self, window: int, *, settings: Settings | None = None) -> "Timeseries":
        """Return the simple moving average over ``window`` points.

        See :func:`tseries.core.transforms.moving_average`.
        """

        search.check_lengths(self.xs, self.ys)
        return self._view(*transforms.moving_average(self.xs, self.ys, window, settings=settings))

    # ------------------------------------------------------------------
    # Indexed access and statistics
    # ------------------------------------------------------------------

    def at(self, i: int) -> Point:
        """Return the point at index ``i``."""

        n = len(self)
        if n == 0:
            raise EmptySeries("at")
        if not 0 <= i < n:
            raise IndexOutOfRange(i, n)
        return Point(float(self.xs[i]), float(self.ys[i]))

    def first(self) -> Point:
        if len(self) == 0:
            raise EmptySeries("first")
        return Point(float(self.xs[0]), float(self.ys[0]))

    def last(self) -> Point:
        if len(self) == 0:
            raise EmptySeries("last")
        return Point(float(self.xs[-1]), float(self.ys[-1]))

    def simple_linear_regression(self) -> LinearFit:
        """Fit ``y = alpha + beta * x`` to the series.

        See :func:`tseries.core.regression.simple_linear_regression` for the
        empty and zero-variance conventions.
        """

        return regression.simple_linear_regression(self.xs, self.ys)

    mean_squared_error = staticmethod(regression.mean_squared_error)


__all__ = ["Timeseries"]
