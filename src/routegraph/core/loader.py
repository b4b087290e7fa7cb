"""
Building graphs from graph definition documents.

Graph definitions can be passed as parsed dictionaries, JSON strings, or file paths
prefixed with ``@`` (the form the command line accepts). Documents are validated
against ``GRAPH_DEFINITION_SCHEMA`` before any edge is inserted.
"""

import json
import logging
import os
from typing import Any, Dict

from ..utils.validation.schema import SchemaValidator
from .exceptions import ValidationError
from .graph import Graph

logger = logging.getLogger(__name__)

# Demonstration road network between towns in western and central Sri Lanka
SAMPLE_EDGES = [
    ("Negombo", "Marawila", 4),
    ("Negombo", "Kuliyapitiya", 2),
    ("Marawila", "Kuliyapitiya", 1),
    ("Marawila", "Kurunagala", 5),
    ("Kuliyapitiya", "Kurunagala", 8),
    ("Kuliyapitiya", "Galagedara", 10),
    ("Kurunagala", "Galagedara", 2),
    ("Kurunagala", "Kandy", 6),
    ("Galagedara", "Kandy", 3),
]

SAMPLE_PLACES = {
    "Negombo": ["Negombo Lagoon", "St. Mary's Church"],
    "Kurunagala": ["Ethagala Rock"],
    "Kandy": ["Temple of the Tooth", "Kandy Lake"],
}


def sample_graph() -> Graph:
    """Build the demonstration network with its places of interest."""
    graph = Graph(SAMPLE_EDGES)
    for node, labels in SAMPLE_PLACES.items():
        for label in labels:
            graph.add_place_of_interest(node, label)
    return graph


def load_graph(data: Dict[str, Any]) -> Graph:
    """
    Build a graph from a parsed graph definition.

    Args:
        data: Document with an ``edges`` list and an optional ``places`` mapping

    Returns:
        Graph with edges inserted in document order

    Raises:
        ValidationError: If the document does not match the schema
    """
    errors = SchemaValidator().errors(data)
    if errors:
        raise ValidationError("Invalid graph definition: " + "; ".join(errors))

    graph = Graph()
    graph.add_edges_batch(
        (edge["source"], edge["destination"], edge["weight"]) for edge in data["edges"]
    )
    for node, labels in data.get("places", {}).items():
        graph.add_node(node)
        for label in labels:
            graph.add_place_of_interest(node, label)

    logger.debug(f"Loaded graph with {len(graph)} nodes and {graph.get_edge_count()} edges")
    return graph


def parse_json_input(json_str: str) -> Any:
    """
    Parse JSON input from either a string or a file.

    Args:
        json_str: Either a JSON string or a file path prefixed with '@'.
            Relative paths are resolved against the current directory.

    Raises:
        ValidationError: If the JSON is invalid or the file is not found
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValidationError(f"File not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Invalid JSON in {file_path}: {e}") from e

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON input: {e}") from e


def load_graph_file(path: str) -> Graph:
    """Build a graph from a JSON graph definition file."""
    return load_graph(parse_json_input(f"@{path}"))
