"""
Edge model for the route graph.

An undirected edge is stored as two directed neighbor records, one under each
endpoint. ``Edge`` is that directed record: ``from_entity`` is the node the record
is stored under and ``to_entity`` is the neighbor it leads to.
"""

from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class Edge:
    """
    Directed neighbor record of an undirected weighted edge.

    Attributes:
        from_entity (str): Node the record is stored under
        to_entity (str): Neighbor reached by following the edge
        weight (int): Non-negative edge weight
    """

    from_entity: str
    to_entity: str
    weight: int

    def __iter__(self) -> Iterator[Union[str, int]]:
        """Unpack as a ``(destination, weight)`` pair."""
        yield self.to_entity
        yield self.weight

    def reversed(self) -> "Edge":
        """Return the mirror record stored under the other endpoint."""
        return Edge(from_entity=self.to_entity, to_entity=self.from_entity, weight=self.weight)
