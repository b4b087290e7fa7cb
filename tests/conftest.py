"""Shared test fixtures."""

import pytest

from routegraph.core.graph import Graph

ROAD_EDGES = [
    ("A", "B", 4),
    ("A", "C", 2),
    ("B", "C", 1),
    ("B", "D", 5),
    ("C", "D", 8),
    ("C", "E", 10),
    ("D", "E", 2),
    ("D", "Z", 6),
    ("E", "Z", 3),
]


@pytest.fixture
def road_graph() -> Graph:
    """Fixture providing the reference road network (edges listed in ROAD_EDGES)."""
    return Graph(ROAD_EDGES)


@pytest.fixture
def split_graph() -> Graph:
    """Fixture providing two disconnected components and an isolated node."""
    graph = Graph([("A", "B", 1), ("B", "C", 2), ("X", "Y", 3)])
    graph.add_place_of_interest("Lonely", "Hermitage")
    return graph
