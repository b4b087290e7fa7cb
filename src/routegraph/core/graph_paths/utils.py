"""
Utility functions for path finding operations.
"""

import gc
import logging
import os
import time
from contextlib import contextmanager
from heapq import heappop, heappush
from typing import Callable, Dict, Generator, List, Optional, Tuple

import psutil

from ..exceptions import SearchTimeoutError
from .models import PerformanceMetrics
from .types import SearchLimits

logger = logging.getLogger(__name__)


class PriorityQueue:
    """
    Min-priority queue with decrease-key.

    Entries with equal priority are extracted in insertion order: every push takes
    the next value of a monotonically increasing counter, which is the secondary
    sort key. The queue is unbounded unless ``maxsize`` is given.
    """

    def __init__(self, maxsize: Optional[int] = None):
        self._queue: List[Tuple[int, int, str]] = []
        self._entry_finder: Dict[str, Tuple[int, int]] = {}
        self._counter = 0  # Unique counter to break ties
        self._maxsize = maxsize

    def add_or_update(self, item: str, priority: int) -> None:
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            # Only update if new priority is lower (better)
            if priority >= old_priority:
                return
        elif self._maxsize is not None and len(self._entry_finder) >= self._maxsize:
            raise MemoryError(f"Priority queue exceeded {self._maxsize} entries")

        # Stale heap entries are skipped on pop
        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, (priority, self._counter, item))
        self._counter += 1

    def pop(self) -> Optional[Tuple[int, str]]:
        """Remove and return the item with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            if self._entry_finder.get(item) == (priority, count):
                del self._entry_finder[item]
                return (priority, item)
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


class MemoryManager:
    """Memory management utilities for graph algorithms."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.monotonic()
        self._check_interval = 0.1  # Check memory every 100ms

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        if not self.max_memory:
            return

        current_time = time.monotonic()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            gc.collect()
            current = get_memory_usage()
            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Peak memory usage in bytes."""
        return self._peak_memory


class SearchGuard:
    """
    Enforces the limits of one search and records its metrics.

    Every expansion step calls ``tick``; it counts explored nodes and raises once
    the deadline or the memory budget is exceeded.
    """

    def __init__(
        self, operation: str, limits: SearchLimits, clock: Callable[[], float] = time.monotonic
    ):
        self.limits = limits
        self._clock = clock
        self.metrics = PerformanceMetrics(operation=operation, start_time=time.time())
        self.memory_manager = MemoryManager(limits.max_memory_mb)
        self._deadline = clock() + limits.timeout if limits.timeout is not None else None

    def tick(self) -> None:
        self.metrics.nodes_explored += 1
        if self._deadline is not None and self._clock() > self._deadline:
            raise SearchTimeoutError(
                f"{self.metrics.operation} exceeded timeout of {self.limits.timeout}s "
                f"after exploring {self.metrics.nodes_explored} nodes"
            )
        self.memory_manager.check_memory()

    def record_path(self) -> None:
        self.metrics.paths_found += 1

    def exhausted(self) -> bool:
        """True once ``max_paths`` accepted paths have been recorded."""
        max_paths = self.limits.max_paths
        return max_paths is not None and self.metrics.paths_found >= max_paths


@contextmanager
def guarded_search(
    operation: str, limits: SearchLimits, clock: Callable[[], float] = time.monotonic
) -> Generator[SearchGuard, None, None]:
    """Context manager creating a ``SearchGuard`` and logging its metrics on exit."""
    guard = SearchGuard(operation, limits, clock=clock)
    try:
        yield guard
    finally:
        guard.metrics.end_time = time.time()
        guard.metrics.max_memory_used = guard.memory_manager.peak_memory
        logger.debug(f"Search metrics: {guard.metrics.to_dict()}")
