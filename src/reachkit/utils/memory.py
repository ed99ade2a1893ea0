"""
Memory guard for long-running traversals.

Samples the resident set size of the current process and fails a traversal
whose memory growth exceeds a configured ceiling.
"""

import gc
import logging
import os
import time
from typing import Optional

import psutil  # type: ignore # Missing stubs

logger = logging.getLogger(__name__)

MB = 1024 * 1024


class MemoryManager:
    """Memory management utilities for graph traversals."""

    def __init__(self, max_memory_mb: Optional[float] = None, check_interval: float = 0.1):
        """
        Initialize memory manager.

        Args:
            max_memory_mb: Allowed growth over the starting footprint in megabytes,
                or None to only track peak usage
            check_interval: Minimum number of seconds between two samples
        """
        self.max_memory = max_memory_mb * MB if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.monotonic()
        self._check_interval = check_interval

    def check_memory(self) -> None:
        """
        Check if memory growth since construction exceeds the limit.

        Samples are rate limited by the check interval. A sample over the limit
        triggers one reclaim step before the traversal is failed.

        Raises:
            MemoryError: If growth is still above the limit after reclaiming
        """
        now = time.monotonic()
        if now - self._last_check < self._check_interval:
            return
        self._last_check = now

        if not self.max_memory or self._growth() <= self.max_memory:
            return

        growth = self._reclaim()
        if growth > self.max_memory:
            logger.warning(
                "Traversal memory limit exceeded: %.1fMB over %.1fMB",
                growth / MB,
                self.max_memory / MB,
            )
            raise MemoryError(
                f"Memory growth {growth / MB:.1f}MB exceeds limit of {self.max_memory / MB:.1f}MB"
            )

    def _growth(self) -> int:
        """Sample resident memory, update the peak and return growth in bytes."""
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        return current - self.start_memory

    def _reclaim(self) -> int:
        """Run a full garbage collection, then resample growth in bytes."""
        gc.collect()
        return self._growth()

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / MB


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    mem_info = process.memory_info()
    return int(mem_info.rss)
