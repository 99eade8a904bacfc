"""Lazy sequence producers.

Each producer is a generator: nothing runs until the first ``next()``, each
element is produced on demand, and once the generator is exhausted, fails or
is closed every further ``next()`` raises ``StopIteration``.
"""

import logging
from pathlib import Path
from typing import Iterator, Union

from .exceptions import SourceUnavailable

logger = logging.getLogger(__name__)


def count_to(limit: int) -> Iterator[int]:
    """Generator that counts from 1 to limit.

    Args:
        limit: Upper bound (inclusive). Nothing is produced when limit <= 0.

    Yields:
        Integers 1, 2, ..., limit
    """
    count = 0
    while count < limit:
        count += 1
        yield count


class DaysOfWeek:
    """Iterable over the names of the week, starting on Sunday."""

    def __iter__(self) -> Iterator[str]:
        yield "Sunday"
        yield "Monday"
        yield "Tuesday"
        yield "Wednesday"
        yield "Thursday"
        yield "Friday"
        yield "Saturday"


def get_lines(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[str]:
    """Generator that reads a text source one line at a time.

    The source is opened on the first ``next()`` and closed exactly once: at end
    of file, when the generator is closed early, or when a read fails.

    Args:
        path: Path to the text source
        encoding: Text encoding of the source

    Yields:
        Lines in file order, without line terminators

    Raises:
        SourceUnavailable: If the source cannot be opened or a read fails
    """
    try:
        handle = open(path, "r", encoding=encoding)
    except OSError as e:
        raise SourceUnavailable(path, f"cannot open: {e}") from e

    logger.debug(f"Opened line source {path}")
    lines_read = 0

    with handle:
        while True:
            try:
                line = handle.readline()
            except (OSError, ValueError) as e:
                # ValueError covers reads on a closed handle and undecodable bytes
                raise SourceUnavailable(
                    path, f"read failed after {lines_read:,} lines: {e}"
                ) from e

            if not line:
                logger.debug(f"Reached end of {path} after {lines_read:,} lines")
                return

            lines_read += 1
            yield line.rstrip("\r\n")
