"""Graph path finding functionality."""

from typing import Iterable, List, Optional, Sequence, Union

from ..graph import Graph
from .algorithms.all_paths import AllPathsFinder
from .algorithms.constrained import DistanceBoundedFinder, FewestStopsFinder, WaypointPathFinder
from .algorithms.shortest_path import ShortestPathFinder
from .base import PathFinder
from .models import (
    UNREACHABLE,
    PathResult,
    PathValidationError,
    PerformanceMetrics,
    StopsResult,
)
from .types import DEFAULT_LIMITS, PathType, SearchLimits, WaypointMode

__all__ = [
    "DEFAULT_LIMITS",
    "PathFinder",
    "PathFinding",
    "PathResult",
    "PathType",
    "PathValidationError",
    "PerformanceMetrics",
    "SearchLimits",
    "StopsResult",
    "UNREACHABLE",
    "WaypointMode",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def shortest_path(
        graph: Graph,
        start_node: str,
        end_node: str,
        excluded: Optional[Iterable[str]] = None,
        limits: Optional[SearchLimits] = None,
    ) -> PathResult:
        """Find the minimum-distance path, optionally avoiding ``excluded`` nodes."""
        finder = ShortestPathFinder(graph, limits)
        return finder.find_path(start_node, end_node, excluded=excluded)

    @staticmethod
    def all_paths(
        graph: Graph,
        start_node: str,
        end_node: str,
        limits: Optional[SearchLimits] = None,
    ) -> List[PathResult]:
        """Find every simple path, in traversal order."""
        return AllPathsFinder(graph, limits).find_all(start_node, end_node)

    @staticmethod
    def paths_within_distance(
        graph: Graph,
        start_node: str,
        end_node: str,
        max_distance: int,
        limits: Optional[SearchLimits] = None,
    ) -> List[PathResult]:
        """Find every simple path whose total weight is at most ``max_distance``."""
        finder = DistanceBoundedFinder(graph, limits)
        return finder.find_all(start_node, end_node, max_distance=max_distance)

    @staticmethod
    def fewest_stops(
        graph: Graph,
        start_node: str,
        end_node: str,
        limits: Optional[SearchLimits] = None,
    ) -> StopsResult:
        """Find the simple path with the fewest hops."""
        return FewestStopsFinder(graph, limits).find_path(start_node, end_node)

    @staticmethod
    def through_waypoints(
        graph: Graph,
        start_node: str,
        waypoints: Sequence[str],
        end_node: str,
        mode: Union[WaypointMode, str] = WaypointMode.FIRST,
        limits: Optional[SearchLimits] = None,
    ) -> PathResult:
        """Find a path visiting ``waypoints`` in order before reaching ``end_node``."""
        finder = WaypointPathFinder(graph, limits)
        return finder.find_path(start_node, end_node, waypoints=waypoints, mode=mode)

    @classmethod
    def find_paths(
        cls,
        graph: Graph,
        start_node: str,
        end_node: str,
        path_type: PathType = PathType.SHORTEST,
        **kwargs,
    ) -> Union[PathResult, StopsResult, List[PathResult]]:
        """Generic path finding interface dispatching on ``path_type``."""
        if path_type is PathType.SHORTEST:
            return cls.shortest_path(graph, start_node, end_node, **kwargs)
        if path_type is PathType.ALL:
            return cls.all_paths(graph, start_node, end_node, **kwargs)
        if path_type is PathType.WITHIN_DISTANCE:
            return cls.paths_within_distance(graph, start_node, end_node, **kwargs)
        if path_type is PathType.FEWEST_STOPS:
            return cls.fewest_stops(graph, start_node, end_node, **kwargs)
        if path_type is PathType.WAYPOINTS:
            waypoints = kwargs.pop("waypoints", ())
            return cls.through_waypoints(graph, start_node, waypoints, end_node, **kwargs)
        raise ValueError(f"Unsupported path type: {path_type}")
