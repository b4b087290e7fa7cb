"""Core graph functionality."""

from .exceptions import (
    EdgeNotFoundError,
    GraphOperationError,
    InvalidOperationError,
    InvalidWeightError,
    NodeNotFoundError,
    NotSupportedError,
    ResourceNotFoundError,
    SearchTimeoutError,
    ValidationError,
)
from .graph import Graph
from .loader import load_graph, load_graph_file, sample_graph
from .models import Edge

__all__ = [
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphOperationError",
    "InvalidOperationError",
    "InvalidWeightError",
    "NodeNotFoundError",
    "NotSupportedError",
    "ResourceNotFoundError",
    "SearchTimeoutError",
    "ValidationError",
    "load_graph",
    "load_graph_file",
    "sample_graph",
]
