"""Dijkstra's shortest-path algorithm over implicit graphs.

The graph is given by an edge provider: for each node ``u`` it returns the
outgoing edges of ``u`` as ``(node, weight)`` pairs (``Edge`` objects or plain
tuples). Only non-negative weights are supported; negative weights are not
detected and give wrong distances. Use ``bellman_ford`` for those.

Notes:
    The frontier is a binary heap with lazy deletion: relaxing a node pushes a
    new entry instead of decreasing a key, and entries superseded by a shorter
    Path are discarded when popped. Each node is therefore expanded (and its
    edge provider called) at most once.

    With a target predicate the search stops as soon as a target node is
    popped, so, as with BFS, huge or infinite graphs can be searched if a
    target is reachable. Ties between equal distances are broken in push
    order.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, Iterable, List, Optional, Tuple

from lazypath.algorithms.base import (
    Dist,
    EdgeProvider,
    PathNotFoundError,
    T,
    TargetPredicate,
    never,
)
from lazypath.config import SEARCH_CONFIG
from lazypath.logging import get_logger
from lazypath.path import Path

logger = get_logger(__name__)


def _dijkstra(
    sources: Iterable[T],
    edges: EdgeProvider[T],
    is_target: TargetPredicate[T],
    results: Dict[T, Path[T]],
) -> Optional[Path[T]]:
    seq = count()
    min_pq: List[Tuple[Dist, int, Path[T]]] = []
    for source in sources:
        if source not in results:
            path = Path(source, 0)
            results[source] = path
            heappush(min_pq, (0, next(seq), path))

    logger.debug("Dijkstra started from %d source node(s)", len(min_pq))

    expanded = 0
    while min_pq:
        _, _, path = heappop(min_pq)
        node = path.end_node
        if results[node] is not path:
            # Stale entry: a shorter path to this node was found after the push
            continue

        if is_target(node):
            logger.debug(
                "Dijkstra reached target at dist %d: %d discovered, %d expanded",
                path.dist,
                len(results),
                expanded,
            )
            return path

        for neighbor, weight in edges(node):
            new_dist = path.dist + weight
            current = results.get(neighbor)
            if current is None or new_dist < current.dist:
                next_path = Path(neighbor, new_dist, path)
                results[neighbor] = next_path
                heappush(min_pq, (new_dist, next(seq), next_path))

        expanded += 1
        if SEARCH_CONFIG.should_log_progress(expanded):
            logger.debug(
                "Dijkstra progress: %d expanded, %d discovered, heap %d, dist %d",
                expanded,
                len(results),
                len(min_pq),
                path.dist,
            )

    logger.debug(
        "Dijkstra exhausted: %d discovered, %d expanded", len(results), expanded
    )
    return None


def run(source: T, edges: EdgeProvider[T]) -> Dict[T, Path[T]]:
    """Find shortest paths to all nodes reachable from ``source``.

    Args:
        source: The source node.
        edges: Edge provider; returns the outgoing ``(node, weight)`` edges of
            a node.

    Returns:
        A dict mapping each reachable node (including ``source``) to a
        shortest Path.
    """
    return run_from_any([source], edges)


def run_from_any(sources: Iterable[T], edges: EdgeProvider[T]) -> Dict[T, Path[T]]:
    """Find shortest paths to all nodes reachable from any of ``sources``.

    Returns:
        A dict mapping each reachable node to a shortest Path from its nearest
        source node. Unreachable nodes are absent.
    """
    results: Dict[T, Path[T]] = {}
    _dijkstra(sources, edges, never, results)
    return results


def find_path(
    source: T, edges: EdgeProvider[T], is_target: TargetPredicate[T]
) -> Optional[Path[T]]:
    """Find a shortest path from ``source`` to the nearest target node.

    Args:
        source: The source node.
        edges: Edge provider.
        is_target: Returns True for target nodes. If several nodes match, a
            path to one of the nearest is returned.

    Returns:
        A shortest Path to the nearest target node, or None if no target node
        is reachable.
    """
    return find_path_from_any([source], edges, is_target)


def find_path_from_any(
    sources: Iterable[T],
    edges: EdgeProvider[T],
    is_target: TargetPredicate[T],
) -> Optional[Path[T]]:
    """Find a shortest path from any of ``sources`` to the nearest target node.

    Returns:
        A shortest Path, or None if no target node is reachable.
    """
    return _dijkstra(sources, edges, is_target, {})


def dist(source: T, edges: EdgeProvider[T], is_target: TargetPredicate[T]) -> Dist:
    """Return the distance along a shortest path to the nearest target node.

    Raises:
        PathNotFoundError: If no target node is reachable from ``source``.
    """
    return dist_from_any([source], edges, is_target)


def dist_from_any(
    sources: Iterable[T],
    edges: EdgeProvider[T],
    is_target: TargetPredicate[T],
) -> Dist:
    """Multi-source form of :func:`dist`.

    Raises:
        PathNotFoundError: If no target node is reachable from the sources.
    """
    sources = list(sources)
    path = find_path_from_any(sources, edges, is_target)
    if path is None:
        raise PathNotFoundError(
            f"No target node is reachable from source node(s) {sources!r}."
        )
    return path.dist
