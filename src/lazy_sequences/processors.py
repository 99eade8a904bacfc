"""Turn a lazy line stream into fixed-size pandas frames.

Only one batch of lines and one frame are alive at a time, so a source of any
size is processed in memory proportional to batch_size.
"""

import itertools
import logging
from typing import Iterable, Iterator, List

import pandas as pd

logger = logging.getLogger(__name__)


def batch_lines(lines: Iterable[str], batch_size: int) -> Iterator[List[str]]:
    """Group lines into lists of batch_size, the last one possibly shorter.

    Raises:
        ValueError: If batch_size is not positive
    """
    if batch_size <= 0:
        raise ValueError("batch_size must be positive")
    return _batches(iter(lines), batch_size)


def _batches(lines: Iterator[str], batch_size: int) -> Iterator[List[str]]:
    while True:
        batch = list(itertools.islice(lines, batch_size))
        if not batch:
            return
        yield batch


def line_frames(lines: Iterable[str], batch_size: int = 1000) -> Iterator[pd.DataFrame]:
    """
    Build one DataFrame per batch of lines.

    Args:
        lines: Lazy line stream, usually from get_lines
        batch_size: Lines per frame

    Yields:
        DataFrames with line_number (continuous across frames), text, length
        and batch_number columns
    """
    first_line = 1
    for batch_number, batch in enumerate(batch_lines(lines, batch_size), 1):
        df = pd.DataFrame(
            {
                "line_number": range(first_line, first_line + len(batch)),
                "text": pd.Series(batch, dtype="object"),
            }
        )
        df["length"] = df["text"].str.len().astype("int64")
        df["batch_number"] = batch_number

        first_line += len(batch)
        logger.debug(f"Frame {batch_number}: lines {df['line_number'].iloc[0]:,}-{first_line - 1:,}")
        yield df
