"""Exception types raised by tseries."""

from __future__ import annotations


class TimeseriesError(Exception):
    """Base class for all tseries faults."""


class LengthMismatch(TimeseriesError, ValueError):
    """Raised when paired sequences do not have the same length."""

    def __init__(self, *lengths: int, what: str = "xs and ys"):
        self.lengths = tuple(lengths)
        sizes = ", ".join(str(n) for n in self.lengths)
        super().__init__(f"{what} must have the same length (got {sizes})")


class EmptySeries(TimeseriesError, ValueError):
    """Raised when an operation needs at least one element."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} requires a non-empty series")


class IndexOutOfRange(TimeseriesError, IndexError):
    """Raised when an index or slice bound falls outside the series."""

    def __init__(self, index: int | tuple[int, int], length: int):
        self.index = index
        self.length = length
        if isinstance(index, tuple):
            msg = f"slice [{index[0]}, {index[1]}) out of range for length {length}"
        else:
            msg = f"index {index} out of range for length {length}"
        super().__init__(msg)


__all__ = ["TimeseriesError", "LengthMismatch", "EmptySeries", "IndexOutOfRange"]
