"""Exception types raised by producers and consumers."""

from pathlib import Path
from typing import Union


class LazySequenceError(Exception):
    """Base class for lazy sequence errors."""


class SourceUnavailable(LazySequenceError, OSError):
    """A line source could not be opened or a read against it failed."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Source unavailable: {self.path} ({reason})")

    def __str__(self) -> str:
        return f"Source unavailable: {self.path} ({self.reason})"


class TimeoutExceeded(LazySequenceError, TimeoutError):
    """A consumer ran past its wall-clock budget while pulling elements."""

    def __init__(self, consumed: int, budget_seconds: float):
        self.consumed = consumed
        self.budget_seconds = budget_seconds
        super().__init__(
            f"Budget of {budget_seconds:.3f}s exceeded after {consumed:,} elements"
        )

    def __str__(self) -> str:
        return (
            f"Budget of {self.budget_seconds:.3f}s exceeded "
            f"after {self.consumed:,} elements"
        )
