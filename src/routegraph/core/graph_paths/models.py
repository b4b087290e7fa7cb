"""
Data models for graph path finding.

This module provides the result types returned by every search:
- PathResult: Node sequence paired with its total edge weight
- StopsResult: Node sequence paired with its hop count
- PerformanceMetrics: Per-query search statistics
- PathValidationError: Exception for path validation failures

A result with an empty node sequence means "no path found". This is a normal
outcome, not an error: ``PathResult.not_found()`` carries distance ``0`` and
``StopsResult.not_found()`` carries ``UNREACHABLE`` stops.

Example:
    >>> result = PathResult(nodes=("A", "C", "B"), distance=3)
    >>> result.hops
    2
    >>> result.validate(graph)  # Ensures the path is consistent with the graph
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Sequence, Set, Tuple, Union

if TYPE_CHECKING:
    from ..graph import Graph

UNREACHABLE = math.inf


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Consecutive nodes that are not adjacent
    - Repeated nodes
    - A stored metric that no choice of edges produces
    """


def _check_simple_path(nodes: Sequence[str], graph: "Graph") -> None:
    seen: Set[str] = set()
    for node in nodes:
        if not graph.has_node(node):
            raise PathValidationError(f"Node {node} not in graph")
        if node in seen:
            raise PathValidationError(f"Cycle detected at node {node}")
        seen.add(node)

    for i in range(len(nodes) - 1):
        if not graph.has_edge(nodes[i], nodes[i + 1]):
            raise PathValidationError(
                f"Path discontinuity between {nodes[i]} and {nodes[i + 1]}: no connecting edge"
            )


def achievable_distances(nodes: Sequence[str], graph: "Graph") -> Set[int]:
    """Every total weight reachable by picking one parallel edge per hop."""
    totals = {0}
    for i in range(len(nodes) - 1):
        weights = {
            edge.weight for edge in graph.get_neighbors(nodes[i]) if edge.to_entity == nodes[i + 1]
        }
        totals = {total + weight for total in totals for weight in weights}
    return totals


@dataclass(frozen=True)
class PathResult:
    """
    A simple path and its cumulative edge weight.

    Attributes:
        nodes: Node sequence from start to end, empty when no path was found
        distance: Sum of the weights of the edges taken
    """

    nodes: Tuple[str, ...]
    distance: int

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.nodes, tuple):
            object.__setattr__(self, "nodes", tuple(self.nodes))
        if isinstance(self.distance, bool) or not isinstance(self.distance, int):
            raise TypeError("distance must be an integer")
        if self.distance < 0:
            raise ValueError("distance cannot be negative")
        if not self.nodes and self.distance != 0:
            raise ValueError("an empty path must have distance 0")

    @classmethod
    def not_found(cls) -> "PathResult":
        """The "no path" sentinel."""
        return cls(nodes=(), distance=0)

    @property
    def found(self) -> bool:
        return bool(self.nodes)

    @property
    def hops(self) -> int:
        """Number of edges in the path."""
        return max(len(self.nodes) - 1, 0)

    def __bool__(self) -> bool:
        return self.found

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self.nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes)

    def __getitem__(self, index: int) -> str:
        return self.nodes[index]

    def validate(self, graph: "Graph") -> None:
        """
        Validate the path against a graph.

        Checks that every node exists, no node repeats, consecutive nodes are joined
        by an edge, and ``distance`` is the total of one edge weight per hop.

        Raises:
            PathValidationError: If any validation check fails
        """
        if not self.nodes:
            return
        _check_simple_path(self.nodes, graph)
        if self.distance not in achievable_distances(self.nodes, graph):
            raise PathValidationError(
                f"Weight mismatch: stored distance {self.distance} is not the total of the "
                f"edges between {' -> '.join(self.nodes)}"
            )


@dataclass(frozen=True)
class StopsResult:
    """
    A simple path and its hop count.

    Attributes:
        nodes: Node sequence from start to end, empty when no path was found
        stops: Number of edges taken, ``UNREACHABLE`` when no path was found
    """

    nodes: Tuple[str, ...]
    stops: Union[int, float]

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.nodes, tuple):
            object.__setattr__(self, "nodes", tuple(self.nodes))
        if not self.nodes:
            if self.stops != UNREACHABLE:
                raise ValueError("an empty path must have UNREACHABLE stops")
        elif self.stops != len(self.nodes) - 1:
            raise ValueError(
                f"stops must equal the hop count {len(self.nodes) - 1}, got {self.stops}"
            )

    @classmethod
    def not_found(cls) -> "StopsResult":
        """The "no path" sentinel."""
        return cls(nodes=(), stops=UNREACHABLE)

    @property
    def found(self) -> bool:
        return bool(self.nodes)

    def __bool__(self) -> bool:
        return self.found

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes)

    def validate(self, graph: "Graph") -> None:
        """Validate node existence, adjacency and simplicity of the path."""
        if self.nodes:
            _check_simple_path(self.nodes, graph)


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of nodes expanded during search
        paths_found: Number of paths accepted during search
        max_memory_used: Peak memory usage during operation (bytes)
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0
    paths_found: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")
        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "paths_found": self.paths_found,
            "max_memory_used": self.max_memory_used,
        }
