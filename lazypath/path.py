"""Result record shared by the search algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Generic, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class Path(Generic[T]):
    """
    A shortest path found by a search, stored as a predecessor chain.

    Each Path links to the Path of the node it was reached from, so paths found
    in one search share their common prefixes. The node sequence is only built
    when ``nodes`` is first accessed.

    Attributes:
        end_node (T):
            The last node of the path.
        dist (int):
            Sum of the edge weights along the path, or the number of edges for
            unweighted searches.
        prev (Optional[Path[T]]):
            The path without its last node; None for a source node, whose
            ``dist`` is 0.
    """

    end_node: T
    dist: int
    prev: Optional[Path[T]] = field(default=None, repr=False)

    @cached_property
    def nodes(self) -> Tuple[T, ...]:
        """
        Return the nodes along the path, from the source node to ``end_node``.

        Returns:
            A tuple of nodes; computed once and cached on the instance.
        """
        seq = []
        path: Optional[Path[T]] = self
        while path is not None:
            seq.append(path.end_node)
            path = path.prev
        seq.reverse()
        return tuple(seq)

    @property
    def src_node(self) -> T:
        """
        Return the first node of the path (the source node)."""
        path = self
        while path.prev is not None:
            path = path.prev
        return path.end_node

    def __iter__(self) -> Iterator[T]:
        return iter(self.nodes)

    def __len__(self) -> int:
        """Return the number of nodes on the path (one more than its edge count)."""
        return len(self.nodes)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.dist < other.dist

    def __eq__(self, other: Any) -> bool:
        """
        Check equality by comparing end node, distance and node sequence.

        Returns NotImplemented if `other` is not a Path.
        """
        if not isinstance(other, Path):
            return NotImplemented
        if self is other:
            return True
        return (
            self.end_node == other.end_node
            and self.dist == other.dist
            and self.nodes == other.nodes
        )

    def __hash__(self) -> int:
        return hash((self.end_node, self.dist))

    def __repr__(self) -> str:
        return f"Path({list(self.nodes)}, dist={self.dist})"
