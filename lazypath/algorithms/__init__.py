"""Shortest-path searches over implicit graphs.

- ``bfs``: unweighted graphs, distance is the number of edges.
- ``dijkstra``: non-negative edge weights.
- ``bellman_ford``: arbitrary edge weights without negative cycles.

All three modules expose ``run``, ``run_from_any``, ``find_path``,
``find_path_from_any``, ``dist`` and ``dist_from_any``.
"""

from lazypath.algorithms import bellman_ford, bfs, dijkstra
from lazypath.algorithms.base import Edge, PathNotFoundError

__all__ = ["bfs", "dijkstra", "bellman_ford", "Edge", "PathNotFoundError"]
