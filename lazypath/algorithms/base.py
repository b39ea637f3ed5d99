"""Shared types for the search algorithms.

Graphs are implicit: the algorithms never see an adjacency structure, only
provider callables that generate the outgoing transitions of a node on demand.
Node values must be hashable and compare by value, since they key the result
map; generating the same logical state twice must yield equal values.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, NamedTuple, Tuple, TypeVar

T = TypeVar("T")

Dist = int


class Edge(NamedTuple, Generic[T]):
    """Outgoing directed edge of a node being expanded.

    Edge providers may return ``Edge`` objects or plain ``(node, weight)``
    tuples; both unpack the same way.

    Attributes:
        end_node: The node this edge leads to.
        weight: Edge weight. Must be non-negative for Dijkstra.
    """

    end_node: T
    weight: Dist

    @classmethod
    def of(cls, end_node: T, weight: Dist) -> "Edge[T]":
        """Create an edge to ``end_node`` with the given weight."""
        return cls(end_node, weight)


NeighborProvider = Callable[[T], Iterable[T]]
EdgeProvider = Callable[[T], Iterable[Tuple[T, Dist]]]
TargetPredicate = Callable[[T], bool]


def never(_node: object) -> bool:
    """Target predicate that matches no node; used for full traversals."""
    return False


class PathNotFoundError(LookupError):
    """No node satisfying the target predicate is reachable from the sources."""
