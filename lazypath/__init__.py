"""lazypath: shortest-path search over implicit graphs.

Nodes and edges are generated on demand by caller-supplied provider functions,
so the searched graph can be huge or even infinite.

Primary API:
    bfs, dijkstra, bellman_ford - search modules with a common interface
    Path - search result, a predecessor chain ending at a node
    Edge - ``(end_node, weight)`` pair returned by edge providers
    PathNotFoundError - raised by ``dist`` when no target is reachable

Example:
    from lazypath import bfs

    path = bfs.find_path(0, lambda n: [n + 1, 2 * n], lambda n: n == 128)
    path.nodes  # (0, 1, 2, 4, 8, 16, 32, 64, 128)
"""

from __future__ import annotations

from lazypath import logging
from lazypath.algorithms import bellman_ford, bfs, dijkstra
from lazypath.algorithms.base import Edge, PathNotFoundError
from lazypath.config import SEARCH_CONFIG, SearchConfig
from lazypath.path import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Algorithms
    "bfs",
    "dijkstra",
    "bellman_ford",
    # Types
    "Path",
    "Edge",
    "PathNotFoundError",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "logging",
]
