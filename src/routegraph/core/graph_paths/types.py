"""Type definitions and search configuration for graph path finding."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PathType(Enum):
    """Enumeration of path finding types."""

    SHORTEST = "shortest"  # Dijkstra, non-negative weights only
    ALL = "all"  # Every simple path
    WITHIN_DISTANCE = "within_distance"  # Simple paths with total weight <= budget
    FEWEST_STOPS = "fewest_stops"  # Simple path with the smallest hop count
    WAYPOINTS = "waypoints"  # Simple path visiting waypoints in order


class WaypointMode(Enum):
    """Termination policy of the ordered-waypoint search."""

    FIRST = "first"  # First accepted path in traversal order
    SHORTEST = "shortest"  # Minimum-distance accepted path, ties by first found


@dataclass(frozen=True)
class SearchLimits:
    """
    Optional bounds applied to a single search.

    Full simple-path enumeration is exponential in the worst case, so long-running
    callers can cap the work a query does. All limits default to ``None``
    (unbounded).

    Attributes:
        max_paths: Stop after this many accepted paths
        timeout: Raise ``SearchTimeoutError`` after this many seconds
        max_memory_mb: Raise ``MemoryError`` when process memory grows by more
            than this many megabytes during the search
    """

    max_paths: Optional[int] = None
    timeout: Optional[float] = None
    max_memory_mb: Optional[float] = None

    def __post_init__(self):
        """Validate limits after initialization."""
        if self.max_paths is not None:
            if isinstance(self.max_paths, bool) or not isinstance(self.max_paths, int):
                raise TypeError("max_paths must be an integer")
            if self.max_paths <= 0:
                raise ValueError("max_paths must be positive")
        if self.timeout is not None:
            if not isinstance(self.timeout, (int, float)):
                raise TypeError("timeout must be a numeric value")
            if self.timeout <= 0:
                raise ValueError("timeout must be positive")
        if self.max_memory_mb is not None:
            if not isinstance(self.max_memory_mb, (int, float)):
                raise TypeError("max_memory_mb must be a numeric value")
            if self.max_memory_mb <= 0:
                raise ValueError("max_memory_mb must be positive")


DEFAULT_LIMITS = SearchLimits()
