"""
Tests for distance-bounded, fewest-stops and ordered-waypoint searches.
"""

import pytest

from routegraph.core.exceptions import NodeNotFoundError
from routegraph.core.graph import Graph
from routegraph.core.graph_paths import (
    UNREACHABLE,
    PathFinding,
    PathResult,
    PathType,
    SearchLimits,
    StopsResult,
    WaypointMode,
)
from routegraph.core.graph_paths.algorithms import (
    DistanceBoundedFinder,
    WaypointPathFinder,
    WaypointPolicy,
)


# Distance-bounded paths


def test_within_distance_filters_all_paths(road_graph):
    """Test that bounded results are exactly the enumerated paths within budget."""
    all_paths = PathFinding.all_paths(road_graph, "A", "Z")
    for budget in range(0, 35):
        bounded = PathFinding.paths_within_distance(road_graph, "A", "Z", budget)
        assert bounded == [path for path in all_paths if path.distance <= budget]


def test_within_distance_reference_budget(road_graph):
    """Test the reference budgets on the road network."""
    assert PathFinding.paths_within_distance(road_graph, "A", "Z", 10) == []

    paths = PathFinding.paths_within_distance(road_graph, "A", "Z", 15)
    assert [path.nodes for path in paths] == [
        ("A", "B", "D", "E", "Z"),
        ("A", "B", "D", "Z"),
        ("A", "C", "B", "D", "E", "Z"),
        ("A", "C", "B", "D", "Z"),
        ("A", "C", "D", "E", "Z"),
        ("A", "C", "E", "Z"),
    ]
    assert all(path.distance <= 15 for path in paths)


def test_within_distance_zero_budget(road_graph):
    """Test that a zero budget admits only the trivial path."""
    assert PathFinding.paths_within_distance(road_graph, "A", "A", 0) == [
        PathResult(nodes=("A",), distance=0)
    ]
    assert PathFinding.paths_within_distance(road_graph, "A", "B", 0) == []


def test_within_distance_invalid_budget(road_graph):
    """Test budget validation."""
    with pytest.raises(ValueError, match="max_distance must be non-negative"):
        PathFinding.paths_within_distance(road_graph, "A", "Z", -1)
    with pytest.raises(TypeError, match="max_distance must be an integer"):
        PathFinding.paths_within_distance(road_graph, "A", "Z", 2.5)


def test_within_distance_unknown_node(road_graph):
    """Test that unknown nodes are reported before the budget is used."""
    with pytest.raises(NodeNotFoundError):
        DistanceBoundedFinder(road_graph).find_paths("A", "Q", max_distance=5)


# Fewest stops


def test_fewest_stops_reference(road_graph):
    """Test that the first enumerated three-hop path is returned."""
    result = PathFinding.fewest_stops(road_graph, "A", "Z")
    assert result == StopsResult(nodes=("A", "B", "D", "Z"), stops=3)
    result.validate(road_graph)


def test_fewest_stops_is_minimum_over_all_paths(road_graph):
    """Test that no enumerated path has fewer hops."""
    nodes = road_graph.get_nodes()
    for start in nodes:
        for end in nodes:
            result = PathFinding.fewest_stops(road_graph, start, end)
            hops = [path.hops for path in PathFinding.all_paths(road_graph, start, end)]
            assert result.stops == min(hops)


def test_fewest_stops_same_node(road_graph):
    """Test start == end."""
    assert PathFinding.fewest_stops(road_graph, "E", "E") == StopsResult(nodes=("E",), stops=0)


def test_fewest_stops_unreachable(split_graph):
    """Test the stop-count sentinel."""
    result = PathFinding.fewest_stops(split_graph, "A", "X")
    assert result == StopsResult.not_found()
    assert result.stops == UNREACHABLE
    assert not result.found


def test_fewest_stops_prefers_hops_over_weight():
    """Test that weight does not influence the stop count search."""
    graph = Graph([("A", "B", 1), ("B", "C", 1), ("A", "C", 50)])
    assert PathFinding.fewest_stops(graph, "A", "C").nodes == ("A", "C")
    assert PathFinding.shortest_path(graph, "A", "C").nodes == ("A", "B", "C")


def test_fewest_stops_unknown_node(road_graph):
    """Test unknown endpoints."""
    with pytest.raises(NodeNotFoundError, match="Start node 'Q' not found"):
        PathFinding.fewest_stops(road_graph, "Q", "Z")


# Ordered waypoints


def test_waypoints_empty_matches_first_path(road_graph):
    """Test that an empty waypoint list degenerates to the first enumerated path."""
    result = PathFinding.through_waypoints(road_graph, "A", [], "Z")
    assert result == PathFinding.all_paths(road_graph, "A", "Z")[0]


def test_waypoints_first_found(road_graph):
    """Test that the first accepted path is returned, not the shortest."""
    result = PathFinding.through_waypoints(road_graph, "A", ["E"], "Z")
    assert result == PathResult(nodes=("A", "B", "C", "D", "E", "Z"), distance=18)


def test_waypoints_shortest_mode(road_graph):
    """Test the optimal mode over every accepted path."""
    result = PathFinding.through_waypoints(road_graph, "A", ["E"], "Z", mode="shortest")
    assert result == PathResult(nodes=("A", "C", "B", "D", "E", "Z"), distance=13)


def test_waypoints_order_matters(road_graph):
    """Test that waypoints must be visited in the given order."""
    d_then_c = PathFinding.through_waypoints(road_graph, "A", ["D", "C"], "Z")
    c_then_d = PathFinding.through_waypoints(road_graph, "A", ["C", "D"], "Z")

    assert d_then_c.nodes == ("A", "B", "D", "C", "E", "Z")
    assert c_then_d.nodes == ("A", "B", "C", "D", "E", "Z")


def test_waypoints_form_a_subsequence(road_graph):
    """Test that every accepted path contains the waypoints in order."""
    finder = WaypointPathFinder(road_graph)
    waypoints = ["B", "E"]
    paths = list(finder.find_paths("A", "Z", waypoints=waypoints))

    assert paths
    for path in paths:
        positions = [path.nodes.index(waypoint) for waypoint in waypoints]
        assert positions == sorted(positions)


def test_waypoints_start_and_end(road_graph):
    """Test waypoints equal to the endpoints."""
    assert PathFinding.through_waypoints(road_graph, "A", ["A"], "Z").found
    assert PathFinding.through_waypoints(road_graph, "A", ["Z"], "Z").found
    assert PathFinding.through_waypoints(road_graph, "A", ["A"], "A").nodes == ("A",)
    assert not PathFinding.through_waypoints(road_graph, "A", ["B"], "A").found


def test_waypoints_impossible(road_graph, split_graph):
    """Test that unsatisfiable waypoint lists yield no path."""
    # Z cannot be visited before another node and still end at Z
    result = PathFinding.through_waypoints(road_graph, "A", ["Z", "E"], "Z")
    assert result == PathResult.not_found()
    # A simple path cannot revisit a node
    assert not PathFinding.through_waypoints(road_graph, "A", ["B", "B"], "Z").found
    assert not PathFinding.through_waypoints(split_graph, "A", ["X"], "C").found


def test_waypoints_unknown_waypoint(road_graph):
    """Test that unknown waypoints are structural errors."""
    with pytest.raises(NodeNotFoundError, match="Waypoint 'Q' not found"):
        PathFinding.through_waypoints(road_graph, "A", ["Q"], "Z")


def test_waypoints_invalid_mode(road_graph):
    """Test mode validation."""
    with pytest.raises(ValueError):
        PathFinding.through_waypoints(road_graph, "A", [], "Z", mode="fastest")


def test_waypoint_policy_state():
    """Test waypoint index tracking."""
    policy = WaypointPolicy(["B", "D"])
    state = policy.initial_state()
    state = policy.enter(state, "A")
    assert state == 0
    state = policy.enter(state, "D")
    assert state == 0
    state = policy.enter(state, "B")
    assert state == 1
    assert not policy.accept(state)
    assert policy.accept(policy.enter(state, "D"))


# Generic interface


def test_find_paths_dispatch(road_graph):
    """Test the generic path finding interface."""
    assert PathFinding.find_paths(road_graph, "A", "Z").distance == 13
    assert len(PathFinding.find_paths(road_graph, "A", "Z", PathType.ALL)) == 13
    assert (
        len(PathFinding.find_paths(road_graph, "A", "Z", PathType.WITHIN_DISTANCE, max_distance=15))
        == 6
    )
    assert PathFinding.find_paths(road_graph, "A", "Z", PathType.FEWEST_STOPS).stops == 3
    result = PathFinding.find_paths(
        road_graph, "A", "Z", PathType.WAYPOINTS, waypoints=["E"], mode=WaypointMode.SHORTEST
    )
    assert result.distance == 13


def test_limits_apply_to_constrained_searches(road_graph):
    """Test that max_paths bounds the paths considered by each variant."""
    limits = SearchLimits(max_paths=1)
    bounded = PathFinding.paths_within_distance(road_graph, "A", "Z", 15, limits=limits)
    assert [path.nodes for path in bounded] == [("A", "B", "D", "E", "Z")]

    # Only the first enumerated path is considered
    stops = PathFinding.fewest_stops(road_graph, "A", "Z", limits=limits)
    assert stops.nodes == ("A", "B", "C", "D", "E", "Z")
