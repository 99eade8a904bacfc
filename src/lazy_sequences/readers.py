"""Eager reading with forced cancellation.

An eager read has no suspension point, so it cannot stop cooperatively. The
only way to abort it is to close the source it is reading from, from another
thread, and let the next read fail.
"""

import logging
import threading
from pathlib import Path
from typing import List, Optional, Union

from .cancellation import CancellationTokenSource
from .exceptions import SourceUnavailable
from .protocols import LoggerProtocol

logger = logging.getLogger(__name__)


class CancellableTextSource:
    """
    Line-oriented text source that may be closed from any thread.

    Once closed, every read raises SourceUnavailable instead of returning data.
    The underlying file is closed exactly once.
    """

    def __init__(
        self,
        path: Union[str, Path],
        encoding: str = "utf-8",
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Open the text source.

        Args:
            path: Path to the text source
            encoding: Text encoding of the source
            logger: Logger instance (defaults to module logger)

        Raises:
            SourceUnavailable: If the source cannot be opened
        """
        self.path = Path(path)
        self._logger = logger or logging.getLogger(__name__)
        self._close_lock = threading.Lock()
        self._closed = threading.Event()

        try:
            self._handle = open(self.path, "r", encoding=encoding)
        except OSError as e:
            raise SourceUnavailable(self.path, f"cannot open: {e}") from e

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and close the source."""
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def readline(self) -> str:
        """Read the next line, or an empty string at end of source.

        Raises:
            SourceUnavailable: If the source is closed or the read fails
        """
        if self._closed.is_set():
            raise SourceUnavailable(self.path, "source was closed")
        try:
            return self._handle.readline()
        except (OSError, ValueError) as e:
            raise SourceUnavailable(self.path, f"read failed: {e}") from e

    def read_to_end(self) -> str:
        """Read everything that remains in the source into memory.

        Returns:
            The remaining text, line terminators included

        Raises:
            SourceUnavailable: If the source is closed before the read completes
        """
        self._logger.info(f"Reading {self.path} into memory...")
        lines: List[str] = []
        while True:
            line = self.readline()
            if not line:
                break
            lines.append(line)

        self._logger.info(f"Read {len(lines):,} lines from {self.path}")
        return "".join(lines)

    def close(self) -> None:
        """Close the source. Safe to call from any thread, more than once."""
        with self._close_lock:
            if self._closed.is_set():
                return
            self._closed.set()
            self._handle.close()
        self._logger.debug(f"Closed {self.path}")


def read_all_with_cancellation(
    path: Union[str, Path],
    cancel_after_ms: int,
    encoding: str = "utf-8",
) -> str:
    """Eagerly read a text source, closing it if the read outlasts the budget.

    Args:
        path: Path to the text source
        cancel_after_ms: Milliseconds before the source is forcibly closed
        encoding: Text encoding of the source

    Returns:
        The full text of the source

    Raises:
        SourceUnavailable: If the source cannot be opened, or was closed by
            the cancellation before the read completed
    """
    if cancel_after_ms < 0:
        raise ValueError("cancel_after_ms must not be negative")

    with CancellableTextSource(path, encoding) as source:
        with CancellationTokenSource(cancel_after_ms / 1000) as cts:
            cts.token.register(source.close)
            try:
                return source.read_to_end()
            except SourceUnavailable:
                logger.warning(
                    f"Eager read of {path} cancelled after {cancel_after_ms} ms"
                )
                raise
