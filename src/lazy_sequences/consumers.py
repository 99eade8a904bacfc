"""Consumers that pull from lazy sequences and stop early.

Every consumer closes the producer it was given before returning or raising,
so a producer holding a resource releases it as soon as the consumer stops.
"""

import itertools
import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, List, Optional, TypeVar

from .exceptions import TimeoutExceeded

logger = logging.getLogger(__name__)

T = TypeVar("T")


@contextmanager
def _pulling(sequence: Iterable[T]) -> Iterator[Iterator[T]]:
    """Yield an iterator over sequence and close it on exit."""
    iterator = iter(sequence)
    try:
        yield iterator
    finally:
        close = getattr(iterator, "close", None)
        if close is not None:
            close()


def consume_within(
    sequence: Iterable[T],
    budget_seconds: float,
    on_item: Optional[Callable[[T], None]] = None,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """
    Pull every element of a sequence within a wall-clock budget.

    The deadline is checked after each element has been handled, so an
    element that was pulled is always counted.

    Args:
        sequence: Lazy sequence to consume
        budget_seconds: Seconds allowed for the whole traversal
        on_item: Called with each element as it is pulled
        clock: Monotonic clock returning seconds

    Returns:
        Number of elements consumed

    Raises:
        TimeoutExceeded: If the deadline passes before the sequence ends
    """
    deadline = clock() + budget_seconds
    consumed = 0

    with _pulling(sequence) as iterator:
        for item in iterator:
            if on_item is not None:
                on_item(item)
            consumed += 1

            if clock() > deadline:
                logger.info(
                    f"Budget of {budget_seconds}s exceeded after {consumed:,} elements"
                )
                raise TimeoutExceeded(consumed, budget_seconds)

    logger.debug(f"Consumed {consumed:,} elements within {budget_seconds}s")
    return consumed


def take_until(
    sequence: Iterable[T],
    predicate: Callable[[T], bool],
    on_item: Optional[Callable[[T], None]] = None,
) -> List[T]:
    """
    Pull elements until one satisfies predicate.

    Args:
        sequence: Lazy sequence to consume
        predicate: Stop condition; the matching element is included
        on_item: Called with each element as it is pulled

    Returns:
        Elements pulled, in order
    """
    taken: List[T] = []
    with _pulling(sequence) as iterator:
        for item in iterator:
            if on_item is not None:
                on_item(item)
            taken.append(item)
            if predicate(item):
                break
    return taken


def take(sequence: Iterable[T], count: int) -> List[T]:
    """
    Pull at most count elements.

    Args:
        sequence: Lazy sequence to consume
        count: Maximum number of elements to pull

    Returns:
        Up to count elements, in order
    """
    if count < 0:
        raise ValueError("count must not be negative")

    with _pulling(sequence) as iterator:
        return list(itertools.islice(iterator, count))
