"""Timer-driven cancellation signal.

A ``CancellationTokenSource`` owns a ``CancellationToken``. Callbacks registered
on the token run once, on whichever thread calls ``cancel()``; when the source
is created with a delay that is the timer thread.
"""

import logging
import threading
from typing import Callable, List, Optional

from .protocols import LoggerProtocol

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class CancellationToken:
    """Observes cancellation requested through a CancellationTokenSource."""

    def __init__(self, source: "CancellationTokenSource"):
        self._source = source

    @property
    def is_cancellation_requested(self) -> bool:
        return self._source.is_cancelled

    def register(self, callback: Callback) -> None:
        """Run callback when cancellation is requested.

        If cancellation was already requested the callback runs immediately
        on the calling thread.
        """
        self._source._register(callback)


class CancellationTokenSource:
    """
    Signals cancellation to registered callbacks, optionally after a delay.

    Uses context manager pattern: leaving the block disposes the pending timer,
    so no cancellation fires afterwards.
    """

    def __init__(
        self,
        delay_seconds: Optional[float] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize the token source.

        Args:
            delay_seconds: Cancel automatically after this many seconds
                (None disables the timer)
            logger: Logger instance (defaults to module logger)
        """
        if delay_seconds is not None and delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative")

        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._callbacks: List[Callback] = []
        self._cancelled = False
        self._timer: Optional[threading.Timer] = None
        self.token = CancellationToken(self)

        if delay_seconds is not None:
            self._timer = threading.Timer(delay_seconds, self.cancel)
            self._timer.daemon = True
            self._timer.start()
            self._logger.debug(f"Cancellation scheduled in {delay_seconds * 1000:.0f} ms")

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and dispose the timer."""
        self.dispose()

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Request cancellation and run registered callbacks in order.

        Calling cancel() more than once has no further effect. Every callback
        runs even if an earlier one fails. The first failure is re-raised and
        later failures are logged.
        """
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            callbacks, self._callbacks = self._callbacks, []

        self._logger.info(f"Cancellation requested, running {len(callbacks)} callbacks")

        first_error: Optional[BaseException] = None
        for callback in callbacks:
            try:
                callback()
            except Exception as e:
                if first_error is None:
                    first_error = e
                else:
                    self._logger.error(f"Cancellation callback failed: {e}", exc_info=True)

        if first_error is not None:
            raise first_error

    def dispose(self) -> None:
        """Stop the pending timer, if any."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _register(self, callback: Callback) -> None:
        with self._lock:
            if not self._cancelled:
                self._callbacks.append(callback)
                return
        callback()
