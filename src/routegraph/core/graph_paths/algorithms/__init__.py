"""Path finding algorithm implementations."""

from .all_paths import AllPathsFinder, TraversalPolicy, traverse
from .constrained import (
    DistanceBoundedFinder,
    DistanceBudgetPolicy,
    FewestStopsFinder,
    WaypointPathFinder,
    WaypointPolicy,
)
from .shortest_path import ShortestPathFinder

__all__ = [
    "AllPathsFinder",
    "DistanceBoundedFinder",
    "DistanceBudgetPolicy",
    "FewestStopsFinder",
    "ShortestPathFinder",
    "TraversalPolicy",
    "WaypointPathFinder",
    "WaypointPolicy",
    "traverse",
]
