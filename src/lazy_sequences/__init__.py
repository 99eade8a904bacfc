"""Lazy Sequences - produce elements on demand with the yield pattern."""

__version__ = "0.1.0"

from .cancellation import CancellationToken, CancellationTokenSource
from .consumers import consume_within, take, take_until
from .exceptions import LazySequenceError, SourceUnavailable, TimeoutExceeded
from .producers import DaysOfWeek, count_to, get_lines
from .readers import CancellableTextSource, read_all_with_cancellation

__all__ = [
    # Producers
    "count_to",
    "DaysOfWeek",
    "get_lines",
    # Consumers
    "consume_within",
    "take",
    "take_until",
    # Cancellation
    "CancellationToken",
    "CancellationTokenSource",
    "CancellableTextSource",
    "read_all_with_cancellation",
    # Errors
    "LazySequenceError",
    "SourceUnavailable",
    "TimeoutExceeded",
]
