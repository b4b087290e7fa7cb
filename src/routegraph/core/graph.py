"""
Core graph data structure with an adjacency list representation.

This module provides the Graph class that stores named locations and the weighted,
undirected roads between them. Every edge is stored symmetrically: inserting
``(a, b, w)`` appends a neighbor record ``b, w`` under ``a`` and ``a, w`` under ``b``.
Repeated insertions of the same pair add parallel edges (the store is a multigraph);
there is no deduplication and no update.

Alongside the adjacency list the graph keeps a per-node list of places of interest.
A node exists from the first time it appears as an edge endpoint or as the key of a
place of interest; there is no separate node-creation step.

The graph only grows. Edge-weight updates and node removal are unsupported and raise
``NotSupportedError`` so that callers cannot mistake them for working operations.
"""

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .exceptions import (
    EdgeNotFoundError,
    InvalidWeightError,
    NodeNotFoundError,
    NotSupportedError,
    ValidationError,
)
from .models import Edge

logger = logging.getLogger(__name__)

EdgeSpec = Tuple[str, str, int]


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    adjacency: Dict[str, List[Edge]] = field(default_factory=dict)
    places_of_interest: Dict[str, List[str]] = field(default_factory=dict)
    edges: List[Edge] = field(default_factory=list)


def validate_node_id(node: str) -> None:
    """Check that a node identifier is a non-empty string."""
    if not isinstance(node, str):
        raise ValidationError(f"node identifier must be a string, got {type(node).__name__}")
    if not node.strip():
        raise ValidationError("node identifier must be a non-empty string")


def validate_weight(weight: int) -> None:
    """Check that an edge weight is a non-negative integer."""
    # bool is a subclass of int but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidWeightError(f"weight must be an integer, got {weight!r}")
    if weight < 0:
        raise InvalidWeightError(f"weight must be non-negative, got {weight}")


class Graph:
    """
    Undirected weighted multigraph of named locations.

    Attributes:
        _state (GraphState): Adjacency list, places of interest and inserted edges
        _state_lock (RLock): Lock guarding mutation of the state
    """

    def __init__(self, edges: Optional[Iterable[EdgeSpec]] = None):
        """
        Initialize graph from an optional iterable of ``(a, b, weight)`` triples.

        Args:
            edges: Edges to insert, in order. Insertion order determines neighbor
                order and therefore the traversal order of every search.
        """
        self._state = GraphState()
        self._state_lock = RLock()
        for source, destination, weight in edges or ():
            self.add_edge(source, destination, weight)

    def _ensure_node(self, node: str) -> List[Edge]:
        return self._state.adjacency.setdefault(node, [])

    def add_edge(self, source: str, destination: str, weight: int) -> None:
        """
        Add an undirected edge between two nodes.

        Args:
            source: One endpoint
            destination: The other endpoint
            weight: Non-negative integer weight

        Raises:
            ValidationError: If a node identifier is empty or not a string
            InvalidWeightError: If the weight is negative or not an integer
        """
        validate_node_id(source)
        validate_node_id(destination)
        validate_weight(weight)

        edge = Edge(from_entity=source, to_entity=destination, weight=weight)
        with self._state_lock:
            self._ensure_node(source).append(edge)
            self._ensure_node(destination).append(edge.reversed())
            self._state.edges.append(edge)
        logger.debug(f"Added edge {source} <-> {destination} (weight {weight})")

    def add_edges_batch(self, edges: Iterable[EdgeSpec]) -> None:
        """Add multiple edges, validating all of them before inserting any."""
        edges = list(edges)
        for source, destination, weight in edges:
            validate_node_id(source)
            validate_node_id(destination)
            validate_weight(weight)
        with self._state_lock:
            for source, destination, weight in edges:
                self.add_edge(source, destination, weight)

    def add_node(self, node: str) -> None:
        """
        Add a node without edges. Existing nodes are left unchanged.

        Raises:
            ValidationError: If the node identifier is empty or not a string
        """
        validate_node_id(node)
        with self._state_lock:
            self._ensure_node(node)

    def add_place_of_interest(self, node: str, label: str) -> None:
        """
        Attach a place-of-interest label to a node, creating the node if absent.

        Raises:
            ValidationError: If the node identifier or label is empty
        """
        validate_node_id(node)
        if not isinstance(label, str) or not label.strip():
            raise ValidationError("place of interest label must be a non-empty string")
        with self._state_lock:
            self._ensure_node(node)
            self._state.places_of_interest.setdefault(node, []).append(label)
        logger.debug(f"Added place of interest '{label}' at {node}")

    def update_edge_weight(self, source: str, destination: str, weight: int) -> None:
        """Edge weights are fixed once inserted."""
        raise NotSupportedError(
            f"Updating the weight of edge {source} <-> {destination} is not supported"
        )

    def remove_node(self, node: str) -> None:
        """Nodes cannot be removed once referenced."""
        raise NotSupportedError(f"Removing node '{node}' is not supported")

    def require_node(self, node: str) -> None:
        """Raise ``NodeNotFoundError`` unless the node exists."""
        if not self.has_node(node):
            raise NodeNotFoundError(f"Node '{node}' not found in the graph")

    def get_neighbors(self, node: str) -> List[Edge]:
        """
        Get the neighbor records of a node in insertion order.

        Each record unpacks as ``(destination, weight)``.

        Raises:
            NodeNotFoundError: If the node was never referenced
        """
        with self._state_lock:
            try:
                return list(self._state.adjacency[node])
            except KeyError:
                raise NodeNotFoundError(f"Node '{node}' not found in the graph") from None

    def get_edge_weight(self, from_node: str, to_node: str) -> int:
        """Get the lightest weight among the edges joining two nodes."""
        weights = [
            edge.weight for edge in self.get_neighbors(from_node) if edge.to_entity == to_node
        ]
        self.require_node(to_node)
        if not weights:
            raise EdgeNotFoundError(f"No edge exists between '{from_node}' and '{to_node}'")
        return min(weights)

    def has_edge(self, from_node: str, to_node: str) -> bool:
        """Check if at least one edge joins two nodes."""
        with self._state_lock:
            return any(
                edge.to_entity == to_node for edge in self._state.adjacency.get(from_node, ())
            )

    def get_degree(self, node: str) -> int:
        """Get the number of neighbor records of a node."""
        return len(self.get_neighbors(node))

    def has_node(self, node: str) -> bool:
        """Check if a node exists in the graph."""
        with self._state_lock:
            return node in self._state.adjacency

    def get_nodes(self) -> List[str]:
        """Get all nodes in the order they were first referenced."""
        with self._state_lock:
            return list(self._state.adjacency)

    def get_edges(self) -> Iterator[Edge]:
        """Get every inserted edge once, in insertion order."""
        with self._state_lock:
            edges = list(self._state.edges)
        yield from edges

    def get_edge_count(self) -> int:
        """Get the number of undirected edges, counting parallel edges separately."""
        with self._state_lock:
            return len(self._state.edges)

    def get_places_of_interest(self, node: str) -> List[str]:
        """
        Get the place-of-interest labels attached to a node.

        Raises:
            NodeNotFoundError: If the node was never referenced
        """
        self.require_node(node)
        with self._state_lock:
            return list(self._state.places_of_interest.get(node, []))

    def find_places(self, label: str) -> List[str]:
        """Get the nodes carrying a place-of-interest label."""
        with self._state_lock:
            return [
                node for node, labels in self._state.places_of_interest.items() if label in labels
            ]

    def get_places_index(self) -> Dict[str, List[str]]:
        """Get a copy of the full node-to-labels mapping."""
        with self._state_lock:
            return {node: list(labels) for node, labels in self._state.places_of_interest.items()}

    def __contains__(self, node: object) -> bool:
        return isinstance(node, str) and self.has_node(node)

    def __len__(self) -> int:
        """Return the number of nodes."""
        with self._state_lock:
            return len(self._state.adjacency)

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeSpec]) -> "Graph":
        """Create a Graph instance from ``(a, b, weight)`` triples."""
        return cls(edges)
