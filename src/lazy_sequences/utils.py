"""Utility classes for profiling read strategies."""

import gc
import logging
import os
import time
import tracemalloc
from pathlib import Path
from typing import Callable, Dict, Optional, Union

import psutil

from .processors import line_frames
from .producers import get_lines
from .protocols import LoggerProtocol
from .readers import CancellableTextSource


class MemoryProfiler:
    """
    Profiles memory usage for operations.

    Single Responsibility: Track and report memory statistics.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        """
        Initialize memory profiler.

        Args:
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)

    def profile(self, operation_name: str, operation_func: Callable[[], object]) -> Dict:
        """
        Profile memory usage of an operation.

        Args:
            operation_name: Name of the operation
            operation_func: Function to execute

        Returns:
            Dictionary with memory statistics and the operation's result
        """
        gc.collect()

        tracemalloc.start()
        try:
            start_time = time.perf_counter()
            result = operation_func()
            elapsed_time = time.perf_counter() - start_time
            current_mem, peak_mem = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        process = psutil.Process(os.getpid())
        mem_info = process.memory_info()

        self._logger.debug(
            f"{operation_name}: {elapsed_time:.3f}s, peak {self.format_bytes(peak_mem)}"
        )

        return {
            "operation": operation_name,
            "result": result,
            "elapsed_time": elapsed_time,
            "current_memory": current_mem,
            "peak_memory": peak_mem,
            "rss": mem_info.rss,
            "vms": mem_info.vms,
            "memory_percent": process.memory_percent(),
        }

    @staticmethod
    def format_bytes(bytes_value: float) -> str:
        """Format bytes to human-readable format."""
        for unit in ["B", "KB", "MB", "GB"]:
            if bytes_value < 1024.0:
                return f"{bytes_value:.2f} {unit}"
            bytes_value /= 1024.0
        return f"{bytes_value:.2f} TB"


class ReadStrategyComparator:
    """
    Compares lazy line-by-line reading against an eager read of the same source.

    Single Responsibility: Compare read strategies by time and peak memory.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        """
        Initialize comparator.

        Args:
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)
        self.profiler = MemoryProfiler(logger)

    def compare(
        self,
        path: Union[str, Path],
        encoding: str = "utf-8",
        batch_size: int = 1000,
    ) -> Dict[str, Dict]:
        """
        Profile every strategy over the same source.

        Args:
            path: Path to the text source
            encoding: Text encoding of the source
            batch_size: Lines per frame for the framed strategy

        Returns:
            Dictionary with "lazy", "framed" and "eager" profiling statistics.
            The lazy and framed results are line counts, the eager result the
            text length.
        """
        self._logger.info(f"Comparing read strategies on {path}")

        def read_lazily() -> int:
            return sum(1 for _ in get_lines(path, encoding))

        def read_eagerly() -> int:
            with CancellableTextSource(path, encoding, self._logger) as source:
                return len(source.read_to_end())

        def read_framed() -> int:
            frames = line_frames(get_lines(path, encoding), batch_size)
            return sum(len(df) for df in frames)

        lazy_stats = self.profiler.profile("Lazy read", read_lazily)
        framed_stats = self.profiler.profile("Lazy framed read", read_framed)
        eager_stats = self.profiler.profile("Eager read", read_eagerly)

        fmt = MemoryProfiler.format_bytes
        self._logger.info(
            f"Peak Memory Usage:\n"
            f"  Lazy:   {fmt(lazy_stats['peak_memory'])}\n"
            f"  Framed: {fmt(framed_stats['peak_memory'])}\n"
            f"  Eager:  {fmt(eager_stats['peak_memory'])}"
        )
        self._logger.info(
            f"Execution Time:\n"
            f"  Lazy:   {lazy_stats['elapsed_time']:.2f} seconds\n"
            f"  Framed: {framed_stats['elapsed_time']:.2f} seconds\n"
            f"  Eager:  {eager_stats['elapsed_time']:.2f} seconds"
        )

        return {"lazy": lazy_stats, "framed": framed_stats, "eager": eager_stats}
