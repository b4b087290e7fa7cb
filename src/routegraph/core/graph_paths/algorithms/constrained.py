"""
Constrained variants of simple-path enumeration.

All three finders reuse the backtracking traversal from ``all_paths``:

- ``DistanceBoundedFinder`` prunes a branch as soon as its cumulative weight would
  exceed the budget, and records paths reaching the end within the budget.
- ``FewestStopsFinder`` enumerates every simple path and keeps the one with the
  fewest hops (first enumerated on ties). This is a brute-force scan, not a
  breadth-first shortcut.
- ``WaypointPathFinder`` accepts a path only when it reaches the end node after
  visiting the waypoints as an ordered, not necessarily contiguous, subsequence.
  By default it returns the first such path in traversal order, which is neither
  the shortest nor the one with the fewest hops.
"""

import logging
from typing import Generator, Optional, Sequence, Tuple, Union

from ..base import PathFinder
from ..models import PathResult, StopsResult
from ..types import WaypointMode
from ..utils import guarded_search
from .all_paths import AllPathsFinder, TraversalPolicy, traverse

logger = logging.getLogger(__name__)


class DistanceBudgetPolicy(TraversalPolicy):
    """Prunes branches whose cumulative weight exceeds ``max_distance``."""

    def __init__(self, max_distance: int):
        if isinstance(max_distance, bool) or not isinstance(max_distance, int):
            raise TypeError("max_distance must be an integer")
        if max_distance < 0:
            raise ValueError("max_distance must be non-negative")
        self.max_distance = max_distance

    def keep(self, distance: int) -> bool:
        return distance <= self.max_distance


class WaypointPolicy(TraversalPolicy):
    """
    Tracks how many waypoints the current path has matched, in order.

    The state is the index of the next unmatched waypoint. Entering a node equal to
    that waypoint advances the index; a path is accepted once the index reaches the
    end of the list.
    """

    def __init__(self, waypoints: Sequence[str]):
        self.waypoints: Tuple[str, ...] = tuple(waypoints)

    def initial_state(self) -> int:
        return 0

    def enter(self, state: int, node: str) -> int:
        if state < len(self.waypoints) and node == self.waypoints[state]:
            return state + 1
        return state

    def accept(self, state: int) -> bool:
        return state == len(self.waypoints)


class DistanceBoundedFinder(AllPathsFinder):
    """Enumerates simple paths whose total weight stays within a budget."""

    operation = "paths_within_distance"

    def policy(self, max_distance: int, **kwargs) -> TraversalPolicy:
        return DistanceBudgetPolicy(max_distance)


class FewestStopsFinder(PathFinder[StopsResult]):
    """Finds the simple path with the smallest hop count by full enumeration."""

    operation = "fewest_stops"

    def find_path(self, start_node: str, end_node: str, **kwargs) -> StopsResult:
        """
        Find the path with the fewest hops between two nodes.

        Returns:
            The fewest-hop path, or ``StopsResult.not_found()`` when unreachable

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph
        """
        self.validate_nodes(start_node, end_node)

        best: Optional[Sequence[str]] = None
        with guarded_search(self.operation, self.limits, self.clock) as guard:
            for nodes, _ in traverse(self.graph, start_node, end_node, TraversalPolicy(), guard):
                # Strict comparison keeps the first enumerated path on ties
                if best is None or len(nodes) < len(best):
                    best = nodes

        if best is None:
            logger.debug(f"No path exists between {start_node} and {end_node}")
            return StopsResult.not_found()
        return StopsResult(nodes=tuple(best), stops=len(best) - 1)


class WaypointPathFinder(AllPathsFinder):
    """Finds a simple path that visits waypoints in order before reaching the end."""

    operation = "through_waypoints"

    def policy(self, waypoints: Sequence[str] = (), **kwargs) -> TraversalPolicy:
        return WaypointPolicy(waypoints)

    def find_paths(
        self, start_node: str, end_node: str, **kwargs
    ) -> Generator[PathResult, None, None]:
        """
        Lazily enumerate every path satisfying the waypoint order.

        Raises:
            NodeNotFoundError: If an endpoint or a waypoint is not in the graph
        """
        self.validate_nodes(start_node, end_node)
        self.validate_waypoints(kwargs.get("waypoints", ()))
        return super().find_paths(start_node, end_node, **kwargs)

    def find_path(
        self,
        start_node: str,
        end_node: str,
        waypoints: Sequence[str] = (),
        mode: Union[WaypointMode, str] = WaypointMode.FIRST,
        **kwargs,
    ) -> PathResult:
        """
        Find a path from ``start_node`` to ``end_node`` through ``waypoints`` in order.

        Args:
            start_node: Node to start from
            end_node: Node to reach
            waypoints: Nodes to visit in this order; an empty list matches any path
            mode: ``FIRST`` returns the first accepted path in traversal order;
                ``SHORTEST`` returns the minimum-distance accepted path

        Returns:
            The selected path, or ``PathResult.not_found()``
        """
        mode = WaypointMode(mode)
        if mode is WaypointMode.FIRST:
            return super().find_path(start_node, end_node, waypoints=waypoints, **kwargs)

        best = PathResult.not_found()
        for result in self.find_paths(start_node, end_node, waypoints=waypoints, **kwargs):
            if not best.found or result.distance < best.distance:
                best = result
        return best
