"""
Shortest path search using Dijkstra's algorithm.

Weights are non-negative integers (enforced by the graph on insertion), which is
what Dijkstra's correctness relies on. An optional set of excluded nodes is removed
from the search space entirely: excluded nodes never enter the frontier and are
never reached by relaxation, so no returned path contains one.

Tie-breaking: the frontier orders entries by ``(distance, insertion counter)`` and
neighbors are relaxed in insertion order, so among equal-distance candidates the
first one pushed is extracted first and keeps its predecessor. Only a strictly
shorter distance replaces a predecessor.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Set

from ..base import PathFinder
from ..models import PathResult
from ..utils import PriorityQueue, guarded_search

logger = logging.getLogger(__name__)


class ShortestPathFinder(PathFinder[PathResult]):
    """Single-source Dijkstra with an optional node-exclusion set."""

    operation = "shortest_path"

    def find_path(
        self,
        start_node: str,
        end_node: str,
        excluded: Optional[Iterable[str]] = None,
        **kwargs,
    ) -> PathResult:
        """
        Find the minimum-distance path between two nodes.

        Args:
            start_node: Node to start from
            end_node: Node to reach
            excluded: Nodes the path must not contain; unknown ids are ignored

        Returns:
            The shortest path, or ``PathResult.not_found()`` when ``end_node`` is
            unreachable or either endpoint is excluded

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph
        """
        self.validate_nodes(start_node, end_node)
        excluded_nodes: Set[str] = set(excluded or ())

        if start_node in excluded_nodes or end_node in excluded_nodes:
            logger.debug(f"Endpoint excluded, no path between {start_node} and {end_node}")
            return PathResult.not_found()

        with guarded_search(self.operation, self.limits, self.clock) as guard:
            return self._dijkstra(start_node, end_node, excluded_nodes, guard)

    def _dijkstra(self, start_node, end_node, excluded_nodes, guard) -> PathResult:
        logger.debug(f"Starting Dijkstra's algorithm from {start_node} to {end_node}")

        distances: Dict[str, float] = {
            node: math.inf for node in self.graph.get_nodes() if node not in excluded_nodes
        }
        distances[start_node] = 0
        previous: Dict[str, str] = {}
        settled: Set[str] = set()

        pq = PriorityQueue()
        pq.add_or_update(start_node, 0)

        while not pq.empty():
            current = pq.pop()
            if current is None:
                break
            current_dist, current_node = current
            guard.tick()
            settled.add(current_node)

            if current_node == end_node:
                path = self._reconstruct(previous, start_node, end_node)
                logger.debug(f"Found path {path} with distance {current_dist}")
                guard.record_path()
                return PathResult(nodes=tuple(path), distance=current_dist)

            for neighbor, weight in self.graph.get_neighbors(current_node):
                if neighbor in excluded_nodes or neighbor in settled:
                    continue
                new_dist = current_dist + weight
                if new_dist < distances[neighbor]:
                    distances[neighbor] = new_dist
                    previous[neighbor] = current_node
                    pq.add_or_update(neighbor, new_dist)

        logger.debug(f"No path exists between {start_node} and {end_node}")
        return PathResult.not_found()

    @staticmethod
    def _reconstruct(previous: Dict[str, str], start_node: str, end_node: str) -> List[str]:
        path = [end_node]
        while path[-1] != start_node:
            path.append(previous[path[-1]])
        path.reverse()
        return path
