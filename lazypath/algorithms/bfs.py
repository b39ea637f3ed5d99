"""Breadth-first search over implicit graphs.

The graph is given by a neighbor provider: for each node ``u`` it returns the
end nodes of the outgoing edges of ``u``. The provider is called at most once
per node, when the search advances from that node, so nodes and edges can be
generated on the fly. With a target predicate the search stops at the first
(nearest) matching node, which makes it usable on huge or infinite state
spaces, e.g. the states and moves of a combinatorial puzzle.

Distances count edges. Multiple source nodes act as a single virtual source.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterable, Optional

from lazypath.algorithms.base import (
    NeighborProvider,
    PathNotFoundError,
    T,
    TargetPredicate,
    never,
)
from lazypath.config import SEARCH_CONFIG
from lazypath.logging import get_logger
from lazypath.path import Path

logger = get_logger(__name__)


def _bfs(
    sources: Iterable[T],
    neighbors: NeighborProvider[T],
    is_target: TargetPredicate[T],
    results: Dict[T, Path[T]],
) -> Optional[Path[T]]:
    queue: Deque[Path[T]] = deque()
    for source in sources:
        if source not in results:
            path = Path(source, 0)
            results[source] = path
            queue.append(path)

    logger.debug("BFS started from %d source node(s)", len(queue))

    expanded = 0
    while queue:
        path = queue.popleft()
        if is_target(path.end_node):
            logger.debug(
                "BFS reached target at dist %d: %d discovered, %d expanded",
                path.dist,
                len(results),
                expanded,
            )
            return path

        for neighbor in neighbors(path.end_node):
            if neighbor not in results:
                next_path = Path(neighbor, path.dist + 1, path)
                results[neighbor] = next_path
                queue.append(next_path)

        expanded += 1
        if SEARCH_CONFIG.should_log_progress(expanded):
            logger.debug(
                "BFS progress: %d expanded, %d discovered, frontier %d, dist %d",
                expanded,
                len(results),
                len(queue),
                path.dist,
            )

    logger.debug(
        "BFS exhausted: %d discovered, %d expanded", len(results), expanded
    )
    return None


def run(source: T, neighbors: NeighborProvider[T]) -> Dict[T, Path[T]]:
    """Find shortest paths to all nodes reachable from ``source``.

    Args:
        source: The source node.
        neighbors: Neighbor provider; returns the end nodes of the outgoing
            edges of a node.

    Returns:
        A dict mapping each reachable node (including ``source``) to a
        shortest Path.
    """
    return run_from_any([source], neighbors)


def run_from_any(
    sources: Iterable[T], neighbors: NeighborProvider[T]
) -> Dict[T, Path[T]]:
    """Find shortest paths to all nodes reachable from any of ``sources``.

    Args:
        sources: The source nodes.
        neighbors: Neighbor provider.

    Returns:
        A dict mapping each reachable node to a shortest Path from its
        nearest source node.
    """
    results: Dict[T, Path[T]] = {}
    _bfs(sources, neighbors, never, results)
    return results


def find_path(
    source: T, neighbors: NeighborProvider[T], is_target: TargetPredicate[T]
) -> Optional[Path[T]]:
    """Find a shortest path from ``source`` to the nearest target node.

    Args:
        source: The source node.
        neighbors: Neighbor provider.
        is_target: Returns True for target nodes. If several nodes match, a
            path to one of the nearest is returned. For a single target node
            ``t``, pass ``t.__eq__`` or ``lambda n: n == t``.

    Returns:
        A shortest Path to the nearest target node, or None if no target node
        is reachable.
    """
    return find_path_from_any([source], neighbors, is_target)


def find_path_from_any(
    sources: Iterable[T],
    neighbors: NeighborProvider[T],
    is_target: TargetPredicate[T],
) -> Optional[Path[T]]:
    """Find a shortest path from any of ``sources`` to the nearest target node.

    A source node that is itself a target is returned with distance 0.

    Returns:
        A shortest Path, or None if no target node is reachable.
    """
    return _bfs(sources, neighbors, is_target, {})


def dist(
    source: T, neighbors: NeighborProvider[T], is_target: TargetPredicate[T]
) -> int:
    """Return the number of edges on a shortest path to the nearest target.

    Raises:
        PathNotFoundError: If no target node is reachable from ``source``.
    """
    return dist_from_any([source], neighbors, is_target)


def dist_from_any(
    sources: Iterable[T],
    neighbors: NeighborProvider[T],
    is_target: TargetPredicate[T],
) -> int:
    """Multi-source form of :func:`dist`.

    Raises:
        PathNotFoundError: If no target node is reachable from the sources.
    """
    sources = list(sources)
    path = find_path_from_any(sources, neighbors, is_target)
    if path is None:
        raise PathNotFoundError(
            f"No target node is reachable from source node(s) {sources!r}."
        )
    return path.dist
