"""
Simple-path enumeration by backtracking depth-first search.

The traversal is an explicit-stack DFS: each stack frame holds the neighbor iterator
of one node on the current path, so search depth is not bounded by the interpreter's
recursion limit. A node is added to the current path on entry and removed on
backtrack; no node repeats within one path. Path and visited state are local to one
enumeration call.

Neighbors are explored in insertion order, which fixes the order paths are produced
in. The search never extends a path past the end node: it cannot be revisited, so
no longer path could end there.

Variants plug in a ``TraversalPolicy`` deciding which branches to prune and which
paths reaching the end node to accept.
"""

import logging
from typing import Any, Generator, Hashable, Iterator, List, Set, Tuple

from ..base import PathFinder
from ..models import PathResult
from ..utils import SearchGuard, guarded_search

logger = logging.getLogger(__name__)


class TraversalPolicy:
    """
    Acceptance and pruning rules for one enumeration.

    The default policy accepts every simple path and prunes nothing.
    """

    def initial_state(self) -> Hashable:
        """Per-path state before the start node is entered."""
        return None

    def enter(self, state: Any, node: str) -> Any:
        """State after ``node`` is appended to the path."""
        return state

    def keep(self, distance: int) -> bool:
        """Whether a branch whose cumulative weight would be ``distance`` is explored."""
        return True

    def accept(self, state: Any) -> bool:
        """Whether a path reaching the end node in ``state`` is recorded."""
        return True


def traverse(
    graph: Any,
    start_node: str,
    end_node: str,
    policy: TraversalPolicy,
    guard: SearchGuard,
) -> Iterator[Tuple[List[str], int]]:
    """
    Yield ``(nodes, distance)`` for every simple path accepted by ``policy``.

    Stops early once ``guard`` reports that ``max_paths`` paths were accepted.
    """
    guard.tick()
    start_state = policy.enter(policy.initial_state(), start_node)
    if start_node == end_node:
        if policy.accept(start_state):
            guard.record_path()
            yield [start_node], 0
        return

    path: List[str] = [start_node]
    on_path: Set[str] = {start_node}
    stack = [(iter(graph.get_neighbors(start_node)), 0, start_state)]

    while stack:
        neighbors, distance, state = stack[-1]
        descended = False

        for neighbor, weight in neighbors:
            if neighbor in on_path:
                continue
            new_distance = distance + weight
            if not policy.keep(new_distance):
                continue

            guard.tick()
            new_state = policy.enter(state, neighbor)

            if neighbor == end_node:
                if policy.accept(new_state):
                    guard.record_path()
                    yield path + [neighbor], new_distance
                    if guard.exhausted():
                        logger.debug(f"Path limit {guard.limits.max_paths} reached")
                        return
                continue

            path.append(neighbor)
            on_path.add(neighbor)
            stack.append((iter(graph.get_neighbors(neighbor)), new_distance, new_state))
            descended = True
            break

        if not descended:
            stack.pop()
            on_path.discard(path.pop())


class AllPathsFinder(PathFinder[PathResult]):
    """Enumerates every simple path between two nodes with its total weight."""

    operation = "all_paths"

    def policy(self, **kwargs) -> TraversalPolicy:
        return TraversalPolicy()

    def find_paths(
        self, start_node: str, end_node: str, **kwargs
    ) -> Generator[PathResult, None, None]:
        """
        Lazily enumerate accepted paths in traversal order.

        Nodes are validated before the iterator is returned, so structural errors
        surface at call time rather than on first iteration.

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph
        """
        self.validate_nodes(start_node, end_node)
        policy = self.policy(**kwargs)
        return self._iter_paths(start_node, end_node, policy)

    def _iter_paths(
        self, start_node: str, end_node: str, policy: TraversalPolicy
    ) -> Generator[PathResult, None, None]:
        logger.debug(f"Starting {self.operation} search from {start_node} to {end_node}")
        with guarded_search(self.operation, self.limits, self.clock) as guard:
            for nodes, distance in traverse(self.graph, start_node, end_node, policy, guard):
                yield PathResult(nodes=tuple(nodes), distance=distance)

    def find_all(self, start_node: str, end_node: str, **kwargs) -> List[PathResult]:
        """Enumerate every accepted path into a list."""
        return list(self.find_paths(start_node, end_node, **kwargs))

    def find_path(self, start_node: str, end_node: str, **kwargs) -> PathResult:
        """Return the first accepted path in traversal order, or the "no path" sentinel."""
        paths = self.find_paths(start_node, end_node, **kwargs)
        try:
            return next(paths, PathResult.not_found())
        finally:
            paths.close()

