"""
Tests for path finding result models.
"""

import pytest

from routegraph.core.graph import Graph
from routegraph.core.graph_paths.models import (
    UNREACHABLE,
    PathResult,
    PathValidationError,
    PerformanceMetrics,
    StopsResult,
    achievable_distances,
)


def test_path_result_properties():
    """Test PathResult accessors."""
    result = PathResult(nodes=("A", "C", "B"), distance=3)

    assert result.found
    assert bool(result)
    assert result.hops == 2
    assert len(result) == 3
    assert list(result) == ["A", "C", "B"]
    assert result[0] == "A"
    assert result[-1] == "B"


def test_path_result_coerces_nodes_to_tuple():
    """Test that node lists are stored immutably."""
    result = PathResult(nodes=["A", "B"], distance=1)
    assert result.nodes == ("A", "B")
    assert hash(result) == hash(PathResult(nodes=("A", "B"), distance=1))


def test_path_result_sentinel():
    """Test the "no path" sentinel."""
    result = PathResult.not_found()
    assert result.nodes == ()
    assert result.distance == 0
    assert result.hops == 0
    assert not result


def test_path_result_is_frozen():
    """Test that results cannot be modified after creation."""
    result = PathResult(nodes=("A",), distance=0)
    with pytest.raises(AttributeError):
        result.distance = 5


@pytest.mark.parametrize(
    "nodes, distance, error",
    [
        (("A", "B"), -1, ValueError),
        (("A", "B"), 1.5, TypeError),
        (("A", "B"), True, TypeError),
        ((), 4, ValueError),
    ],
)
def test_path_result_invalid(nodes, distance, error):
    """Test PathResult initialization checks."""
    with pytest.raises(error):
        PathResult(nodes=nodes, distance=distance)


def test_path_validation(road_graph):
    """Test path validation against a graph."""
    PathResult(nodes=("A", "C", "B"), distance=3).validate(road_graph)
    PathResult.not_found().validate(road_graph)

    with pytest.raises(PathValidationError, match="Path discontinuity between A and Z"):
        PathResult(nodes=("A", "Z"), distance=1).validate(road_graph)

    with pytest.raises(PathValidationError, match="Cycle detected at node A"):
        PathResult(nodes=("A", "B", "A"), distance=8).validate(road_graph)

    with pytest.raises(PathValidationError, match="Weight mismatch"):
        PathResult(nodes=("A", "C", "B"), distance=4).validate(road_graph)

    with pytest.raises(PathValidationError, match="Node Q not in graph"):
        PathResult(nodes=("A", "Q"), distance=1).validate(road_graph)


def test_achievable_distances_with_parallel_edges():
    """Test distance combinations over parallel edges."""
    graph = Graph([("A", "B", 1), ("A", "B", 2), ("B", "C", 10), ("B", "C", 20)])
    assert achievable_distances(("A", "B", "C"), graph) == {11, 12, 21, 22}
    assert achievable_distances(("A",), graph) == {0}


def test_stops_result():
    """Test StopsResult invariants."""
    result = StopsResult(nodes=("A", "B", "D", "Z"), stops=3)
    assert result.found
    assert len(result) == 4
    assert list(result) == ["A", "B", "D", "Z"]

    sentinel = StopsResult.not_found()
    assert sentinel.stops == UNREACHABLE
    assert not sentinel

    with pytest.raises(ValueError, match="stops must equal the hop count"):
        StopsResult(nodes=("A", "B"), stops=2)
    with pytest.raises(ValueError, match="UNREACHABLE"):
        StopsResult(nodes=(), stops=0)


def test_stops_result_validation(road_graph):
    """Test StopsResult validation against a graph."""
    StopsResult(nodes=("A", "B", "D", "Z"), stops=3).validate(road_graph)
    with pytest.raises(PathValidationError):
        StopsResult(nodes=("A", "Z"), stops=1).validate(road_graph)


def test_performance_metrics():
    """Test metrics bookkeeping."""
    metrics = PerformanceMetrics(operation="all_paths", start_time=10.0)
    assert metrics.duration == 0.0

    metrics.end_time = 10.5
    metrics.nodes_explored = 7
    assert metrics.duration == pytest.approx(500.0)
    assert metrics.to_dict()["nodes_explored"] == 7

    with pytest.raises(ValueError, match="operation must be a non-empty string"):
        PerformanceMetrics(operation=" ", start_time=0.0)
    with pytest.raises(ValueError, match="end_time cannot be before start_time"):
        PerformanceMetrics(operation="x", start_time=5.0, end_time=1.0)
