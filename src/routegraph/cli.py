"""Command Line Interface for routegraph.

This module is a thin front end over the path finding engine: it builds a graph,
parses arguments into node identifiers and integers, runs one query and prints the
result. All routing logic lives in ``routegraph.core``.

The CLI supports the following commands:
    - shortest: Shortest path, optionally avoiding nodes
    - all-paths: Every simple path between two nodes
    - within: Every simple path within a distance budget
    - fewest-stops: Path with the fewest hops
    - waypoints: Path visiting waypoints in order
    - places: Places of interest at a node
    - nodes: List every node

The graph defaults to the built-in sample network. A graph definition can be given
with ``--graph`` either as a JSON string or as a file path prefixed with '@'.

Example Usage:
    python -m routegraph shortest Negombo Kandy
    python -m routegraph shortest Negombo Kandy --avoid Kurunagala
    python -m routegraph --graph @data/roads.json within A Z 10
    python -m routegraph waypoints Negombo Kandy --via Galagedara --mode shortest
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .core.exceptions import (
    GraphOperationError,
    InvalidOperationError,
    ResourceNotFoundError,
    ValidationError,
)
from .core.graph import Graph
from .core.graph_paths import PathFinding, PathResult, SearchLimits, StopsResult, WaypointMode
from .core.loader import load_graph, parse_json_input, sample_graph


def format_path(result: PathResult) -> str:
    """Render a distance result on one line."""
    if not result.found:
        return "No path found"
    return f"{' -> '.join(result.nodes)} (distance {result.distance})"


def format_stops(result: StopsResult) -> str:
    """Render a stop-count result on one line."""
    if not result.found:
        return "No path found"
    return f"{' -> '.join(result.nodes)} ({result.stops} stops)"


def format_paths(results: Sequence[PathResult]) -> List[str]:
    if not results:
        return ["No path found"]
    lines = [f"{i}. {format_path(result)}" for i, result in enumerate(results, 1)]
    lines.append(f"{len(results)} path(s) found")
    return lines


def build_graph(graph_arg: Optional[str]) -> Graph:
    """Build the graph selected on the command line."""
    if graph_arg is None:
        return sample_graph()
    return load_graph(parse_json_input(graph_arg))


def build_limits(args: argparse.Namespace) -> Optional[SearchLimits]:
    max_paths = getattr(args, "max_paths", None)
    timeout = getattr(args, "timeout", None)
    if max_paths is None and timeout is None:
        return None
    return SearchLimits(max_paths=max_paths, timeout=timeout)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="routegraph", description="Route graph queries")
    parser.add_argument(
        "--graph", help="JSON string or @filename containing a graph definition"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    shortest = subparsers.add_parser("shortest", help="Shortest path between two nodes")
    shortest.add_argument("start")
    shortest.add_argument("end")
    shortest.add_argument("--avoid", nargs="+", default=[], help="Nodes the path must avoid")

    all_paths = subparsers.add_parser("all-paths", help="Every simple path between two nodes")
    all_paths.add_argument("start")
    all_paths.add_argument("end")

    within = subparsers.add_parser("within", help="Simple paths within a distance budget")
    within.add_argument("start")
    within.add_argument("end")
    within.add_argument("max_distance", type=int)

    fewest = subparsers.add_parser("fewest-stops", help="Path with the fewest hops")
    fewest.add_argument("start")
    fewest.add_argument("end")

    waypoints = subparsers.add_parser("waypoints", help="Path visiting waypoints in order")
    waypoints.add_argument("start")
    waypoints.add_argument("end")
    waypoints.add_argument("--via", nargs="+", default=[], help="Waypoints in visiting order")
    waypoints.add_argument(
        "--mode", choices=[mode.value for mode in WaypointMode], default=WaypointMode.FIRST.value
    )

    for enumerating in (all_paths, within, fewest, waypoints):
        enumerating.add_argument("--max-paths", type=int, help="Stop after this many paths")
        enumerating.add_argument("--timeout", type=float, help="Abort after this many seconds")

    places = subparsers.add_parser("places", help="Places of interest at a node")
    places.add_argument("node")

    subparsers.add_parser("nodes", help="List every node")

    return parser


def run(args: argparse.Namespace) -> List[str]:
    """Execute one parsed command and return the lines to print."""
    graph = build_graph(args.graph)
    limits = build_limits(args)

    if args.command == "shortest":
        result = PathFinding.shortest_path(graph, args.start, args.end, excluded=args.avoid)
        return [format_path(result)]

    if args.command == "all-paths":
        return format_paths(PathFinding.all_paths(graph, args.start, args.end, limits=limits))

    if args.command == "within":
        results = PathFinding.paths_within_distance(
            graph, args.start, args.end, args.max_distance, limits=limits
        )
        return format_paths(results)

    if args.command == "fewest-stops":
        return [format_stops(PathFinding.fewest_stops(graph, args.start, args.end, limits=limits))]

    if args.command == "waypoints":
        result = PathFinding.through_waypoints(
            graph, args.start, args.via, args.end, mode=args.mode, limits=limits
        )
        return [format_path(result)]

    if args.command == "places":
        labels = graph.get_places_of_interest(args.node)
        return [f"- {label}" for label in labels] or [f"No places of interest at {args.node}"]

    if args.command == "nodes":
        return [f"- {node} ({graph.get_degree(node)} roads)" for node in graph.get_nodes()]

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        lines = run(args)
    except (
        ResourceNotFoundError,
        ValidationError,
        InvalidOperationError,
        GraphOperationError,
        MemoryError,
        ValueError,
    ) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0
