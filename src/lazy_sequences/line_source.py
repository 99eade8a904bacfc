"""Generate large line sources using Faker library."""

import itertools
import logging
import os
from pathlib import Path
from typing import Dict, Iterator, Union

from faker import Faker

logger = logging.getLogger(__name__)


class LineSourceGenerator:
    """Generate a large text source with a sentinel line for testing."""

    def __init__(self, seed: int = 42, pool_size: int = 1000):
        """Initialize the line source generator.

        Args:
            seed: Random seed for reproducibility
            pool_size: Number of distinct sentences to draw lines from
        """
        if pool_size <= 0:
            raise ValueError("pool_size must be positive")
        self.faker = Faker()
        self.faker.seed_instance(seed)
        self.pool_size = pool_size

    def generate_lines(
        self, total_lines: int, sentinel: str, sentinel_line: int = 10
    ) -> Iterator[str]:
        """Generate lines lazily, with the sentinel alone on one line.

        Faker is slow per call, so lines cycle through a fixed pool of
        sentences instead of generating each one.

        Args:
            total_lines: Number of lines to generate
            sentinel: Text placed on line sentinel_line
            sentinel_line: 1-based line number of the sentinel

        Yields:
            Lines without terminators
        """
        _check_sentinel_line(total_lines, sentinel_line)

        pool = [self.faker.sentence(nb_words=10) for _ in range(self.pool_size)]
        sentences = itertools.cycle(pool)

        for line_number in range(1, total_lines + 1):
            if line_number == sentinel_line:
                yield sentinel
            else:
                yield next(sentences)

            if line_number % 100000 == 0:
                logger.debug(f"Generated {line_number:,} lines...")

    def write(
        self,
        path: Union[str, Path],
        total_lines: int,
        sentinel: str,
        sentinel_line: int = 10,
    ) -> Dict:
        """Write a generated line source to disk.

        Args:
            path: Destination file
            total_lines: Number of lines to write
            sentinel: Text placed on line sentinel_line
            sentinel_line: 1-based line number of the sentinel

        Returns:
            Dictionary with num_lines, file_size_bytes and file_path
        """
        _check_sentinel_line(total_lines, sentinel_line)

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Writing {total_lines:,} lines to {path}...")

        lines = self.generate_lines(total_lines, sentinel, sentinel_line)
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.writelines(f"{line}\n" for line in lines)

        file_size = os.path.getsize(path)
        logger.info(f"Wrote {total_lines:,} lines ({file_size / (1024 * 1024):.2f} MB) to {path}")

        return {
            "num_lines": total_lines,
            "file_size_bytes": file_size,
            "file_path": str(path),
        }


def _check_sentinel_line(total_lines: int, sentinel_line: int) -> None:
    if not 1 <= sentinel_line <= total_lines:
        raise ValueError("sentinel_line must fall within total_lines")
