"""
Routegraph - routing queries over small weighted road networks

This package answers routing questions over an undirected graph of named
locations with non-negative integer road lengths. It includes:

- A graph store with per-node places of interest
- Shortest paths with Dijkstra's algorithm, optionally avoiding nodes
- Enumeration of simple paths, unbounded or within a distance budget
- Fewest-hop paths and paths through an ordered list of waypoints
- A thin command line front end
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Routegraph requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import Graph
from .core.graph_paths import PathFinding, PathResult, SearchLimits, StopsResult

__all__ = [
    "Graph",
    "PathFinding",
    "PathResult",
    "SearchLimits",
    "StopsResult",
]
