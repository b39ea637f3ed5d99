"""Cross-checks between the searches and NetworkX on seeded random graphs."""

import random
from collections import Counter

import networkx as nx
import pytest

from lazypath.algorithms import bellman_ford, bfs, dijkstra

SEEDS = range(12)


def random_weights(seed, num_nodes=40, num_edges=120, low=0, high=9, dag=False):
    """Return {(u, v): weight} for a random directed graph on 0..num_nodes-1."""
    rng = random.Random(seed)
    weights = {}
    while len(weights) < num_edges:
        u, v = rng.randrange(num_nodes), rng.randrange(num_nodes)
        if u == v or (dag and u > v):
            continue
        weights[(u, v)] = rng.randint(low, high)
    return weights


def edge_provider(weights):
    adj = {}
    for (u, v), w in weights.items():
        adj.setdefault(u, []).append((v, w))
    return lambda n: adj.get(n, [])


def neighbor_provider(weights):
    adj = {}
    for u, v in weights:
        adj.setdefault(u, []).append(v)
    return lambda n: adj.get(n, [])


def to_networkx(weights):
    G = nx.DiGraph()
    G.add_node(0)
    for (u, v), w in weights.items():
        G.add_edge(u, v, weight=w)
    return G


def assert_consistent(results, weights):
    for node, path in results.items():
        nodes = path.nodes
        assert nodes[-1] == node
        assert path.dist == sum(weights[(u, v)] for u, v in zip(nodes, nodes[1:]))


@pytest.mark.parametrize("seed", SEEDS)
def test_bfs_matches_unit_weight_dijkstra(seed):
    weights = random_weights(seed)
    unit = {edge: 1 for edge in weights}

    bfs_results = bfs.run(0, neighbor_provider(weights))
    dijkstra_results = dijkstra.run(0, edge_provider(unit))

    assert bfs_results.keys() == dijkstra_results.keys()
    for node, path in bfs_results.items():
        assert path.dist == dijkstra_results[node].dist
        assert len(path.nodes) == len(dijkstra_results[node].nodes)
    assert_consistent(bfs_results, unit)


@pytest.mark.parametrize("seed", SEEDS)
def test_dijkstra_matches_bellman_ford_and_networkx(seed):
    weights = random_weights(seed)
    edges = edge_provider(weights)

    dijkstra_results = dijkstra.run(0, edges)
    bellman_ford_results = bellman_ford.run(0, edges)
    expected = nx.single_source_dijkstra_path_length(to_networkx(weights), 0)

    assert {n: p.dist for n, p in dijkstra_results.items()} == expected
    assert {n: p.dist for n, p in bellman_ford_results.items()} == expected
    assert_consistent(dijkstra_results, weights)
    assert_consistent(bellman_ford_results, weights)


@pytest.mark.parametrize("seed", SEEDS)
def test_bellman_ford_negative_weights_match_networkx(seed):
    weights = random_weights(seed, low=-9, high=9, dag=True)

    results = bellman_ford.run(0, edge_provider(weights))
    expected = nx.single_source_bellman_ford_path_length(to_networkx(weights), 0)

    assert {n: p.dist for n, p in results.items()} == expected
    assert_consistent(results, weights)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("module", [bfs, dijkstra, bellman_ford])
def test_multi_source_is_minimum_of_single_sources(seed, module):
    weights = random_weights(seed, low=1)
    provider = neighbor_provider(weights) if module is bfs else edge_provider(weights)
    targets = set(range(30, 40))
    is_target = lambda n: n in targets

    single = [module.find_path(s, provider, is_target) for s in (0, 1)]
    combined = module.find_path_from_any([0, 1], provider, is_target)

    found = [p.dist for p in single if p is not None]
    if found:
        assert combined is not None
        assert combined.dist == min(found)
        assert combined.end_node in targets
    else:
        assert combined is None


@pytest.mark.parametrize("seed", SEEDS)
def test_dijkstra_expands_each_node_once(seed):
    weights = random_weights(seed, num_edges=200)
    provider = edge_provider(weights)
    calls = Counter()

    def edges(node):
        calls[node] += 1
        return provider(node)

    results = dijkstra.run(0, edges)
    assert set(calls) == set(results)
    assert max(calls.values()) == 1


@pytest.mark.parametrize("seed", SEEDS)
def test_nodes_is_idempotent(seed):
    results = dijkstra.run(0, edge_provider(random_weights(seed)))

    for path in results.values():
        first = path.nodes
        second = path.nodes
        assert first is second
        assert first == second


def test_unreachable_target_on_finite_graph():
    weights = random_weights(0)
    is_target = lambda n: n == -1

    assert bfs.find_path(0, neighbor_provider(weights), is_target) is None
    assert dijkstra.find_path(0, edge_provider(weights), is_target) is None
    assert bellman_ford.find_path(0, edge_provider(weights), is_target) is None
