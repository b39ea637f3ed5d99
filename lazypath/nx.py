"""Provider adapters for NetworkX graphs.

The search algorithms work on implicit graphs given by provider callables.
These helpers wrap an existing NetworkX graph so it can be searched the same
way as a generated state space.

Example:
    >>> import networkx as nx
    >>> from lazypath.algorithms import dijkstra
    >>> from lazypath.nx import edges_from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=2)
    >>> G.add_edge("B", "C", weight=3)
    >>> dijkstra.dist("A", edges_from_networkx(G), lambda n: n == "C")
    5
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Hashable, Iterable, List, Union

from lazypath.algorithms.base import Dist, Edge

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def neighbors_from_networkx(G: NxGraph) -> Callable[[Hashable], Iterable[Hashable]]:
    """Build a neighbor provider from a NetworkX graph.

    For directed graphs the neighbors of a node are its successors. Nodes that
    are not in the graph have no neighbors.

    Args:
        G: NetworkX graph of any type.

    Returns:
        Neighbor provider suitable for ``bfs``.
    """
    adj = G.adj

    def neighbors(node: Hashable) -> List[Hashable]:
        if node not in adj:
            return []
        return list(adj[node])

    return neighbors


def edges_from_networkx(
    G: NxGraph, weight: str = "weight", default: Dist = 1
) -> Callable[[Hashable], List[Edge]]:
    """Build an edge provider from a NetworkX graph.

    For multigraphs only the cheapest of the parallel edges between two nodes
    is reported.

    Args:
        G: NetworkX graph of any type.
        weight: Edge attribute holding the weight.
        default: Weight of edges without the ``weight`` attribute.

    Returns:
        Edge provider suitable for ``dijkstra`` and ``bellman_ford``.
    """
    adj = G.adj
    multigraph = G.is_multigraph()

    def edges(node: Hashable) -> List[Edge]:
        if node not in adj:
            return []
        result: List[Edge] = []
        for neighbor, data in adj[node].items():
            if multigraph:
                cost = min(attr.get(weight, default) for attr in data.values())
            else:
                cost = data.get(weight, default)
            result.append(Edge(neighbor, cost))
        return result

    return edges
