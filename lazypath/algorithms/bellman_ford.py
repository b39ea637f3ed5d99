"""Bellman-Ford shortest paths, queue-based (SPFA) variant.

Accepts the same edge providers as ``dijkstra`` but also supports negative
edge weights. It is considerably slower than Dijkstra, so prefer that when all
weights are non-negative.

Notes:
    The graph must not contain a cycle of negative total weight reachable from
    a source node. This is not checked: with such a cycle the search never
    terminates.

    A node may be relaxed, re-queued and expanded any number of times, so the
    edge provider can be called repeatedly for the same node. A node's
    distance is only final once the queue is empty, which is why a target
    predicate does not shorten the search and why the graph must be finite.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterable, Optional

from lazypath.algorithms.base import (
    Dist,
    EdgeProvider,
    PathNotFoundError,
    T,
    TargetPredicate,
)
from lazypath.config import SEARCH_CONFIG
from lazypath.logging import get_logger
from lazypath.path import Path

logger = get_logger(__name__)


def run(source: T, edges: EdgeProvider[T]) -> Dict[T, Path[T]]:
    """Find shortest paths to all nodes reachable from ``source``.

    Args:
        source: The source node.
        edges: Edge provider; returns the outgoing ``(node, weight)`` edges of
            a node. Weights may be negative.

    Returns:
        A dict mapping each reachable node (including ``source``) to a
        shortest Path.
    """
    return run_from_any([source], edges)


def run_from_any(sources: Iterable[T], edges: EdgeProvider[T]) -> Dict[T, Path[T]]:
    """Find shortest paths to all nodes reachable from any of ``sources``.

    Relaxes edges until no distance improves any more.

    Args:
        sources: The source nodes.
        edges: Edge provider.

    Returns:
        A dict mapping each reachable node to a shortest Path from the source
        nodes.
    """
    results: Dict[T, Path[T]] = {}
    queue: Deque[Path[T]] = deque()
    for source in sources:
        if source not in results:
            path = Path(source, 0)
            results[source] = path
            queue.append(path)

    logger.debug("Bellman-Ford started from %d source node(s)", len(queue))

    expanded = 0
    while queue:
        path = queue.popleft()
        if results[path.end_node] is not path:
            # Superseded by a shorter path that is queued as well
            continue

        for neighbor, weight in edges(path.end_node):
            new_dist = path.dist + weight
            current = results.get(neighbor)
            if current is None or new_dist < current.dist:
                next_path = Path(neighbor, new_dist, path)
                results[neighbor] = next_path
                queue.append(next_path)

        expanded += 1
        if SEARCH_CONFIG.should_log_progress(expanded):
            logger.debug(
                "Bellman-Ford progress: %d expanded, %d discovered, queue %d",
                expanded,
                len(results),
                len(queue),
            )

    logger.debug(
        "Bellman-Ford finished: %d discovered, %d expanded", len(results), expanded
    )
    return results


def find_path(
    source: T, edges: EdgeProvider[T], is_target: TargetPredicate[T]
) -> Optional[Path[T]]:
    """Find a shortest path from ``source`` to a nearest target node.

    Args:
        source: The source node.
        edges: Edge provider.
        is_target: Returns True for target nodes. If several nodes match, a
            path to one with minimum distance is returned.

    Returns:
        A shortest Path to a nearest target node, or None if no target node is
        reachable.
    """
    return find_path_from_any([source], edges, is_target)


def find_path_from_any(
    sources: Iterable[T],
    edges: EdgeProvider[T],
    is_target: TargetPredicate[T],
) -> Optional[Path[T]]:
    """Find a shortest path from any of ``sources`` to a nearest target node.

    The complete result map is computed first; the target predicate is only
    applied afterwards. Among equally near targets, the one discovered first
    wins.

    Returns:
        A shortest Path, or None if no target node is reachable.
    """
    results = run_from_any(sources, edges)
    targets = [p for p in results.values() if is_target(p.end_node)]
    return min(targets, key=lambda p: p.dist, default=None)


def dist(source: T, edges: EdgeProvider[T], is_target: TargetPredicate[T]) -> Dist:
    """Return the distance along a shortest path to a nearest target node.

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
