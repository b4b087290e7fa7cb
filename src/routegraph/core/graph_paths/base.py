import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional

from ..exceptions import NodeNotFoundError
from ..graph import Graph
from .types import DEFAULT_LIMITS, SearchLimits


class PathFinder[T](ABC):
    """Abstract base class for path finding algorithms."""

    operation = "path_search"

    def __init__(
        self,
        graph: Graph,
        limits: Optional[SearchLimits] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize finder with graph, optional search limits and the clock timeouts use."""
        self.graph = graph
        self.limits = limits or DEFAULT_LIMITS
        self.clock = clock

    @abstractmethod
    def find_path(self, start_node: str, end_node: str, **kwargs: Any) -> T:
        """Find a path between nodes."""

    def validate_nodes(self, start_node: str, end_node: str) -> None:
        """Validate that nodes exist in graph."""
        if not self.graph.has_node(start_node):
            raise NodeNotFoundError(f"Start node '{start_node}' not found")
        if not self.graph.has_node(end_node):
            raise NodeNotFoundError(f"End node '{end_node}' not found")

    def validate_waypoints(self, waypoints: Iterable[str]) -> None:
        """Validate that every waypoint exists in graph."""
        for waypoint in waypoints:
            if not self.graph.has_node(waypoint):
                raise NodeNotFoundError(f"Waypoint '{waypoint}' not found")
