"""Small helpers shared across tseries."""

from .logging import configure_logging, get_logger
from .timeparse import parse_time, to_seconds

__all__ = ["configure_logging", "get_logger", "parse_time", "to_seconds"]
