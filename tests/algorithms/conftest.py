"""Sample graphs for the algorithm tests.

Graphs are plain adjacency dicts; tests turn them into providers with
``lambda n: graph.get(n, [])``.
"""

import pytest

from lazypath.algorithms.base import Edge


@pytest.fixture
def letters_graph():
    # A -> B, C, D; B -> E; C -> E; D -> G; E -> D, F, G; F -> B, G
    return {
        "A": ["B", "C", "D"],
        "B": ["E"],
        "C": ["E"],
        "D": ["G"],
        "E": ["D", "F", "G"],
        "F": ["B", "G"],
    }


@pytest.fixture
def weighted_letters_graph():
    # Same shape as letters_graph
    return {
        "A": [Edge("B", 1), Edge("C", 1), Edge("D", 1)],
        "B": [Edge("E", 2)],
        "C": [Edge("E", 3)],
        "D": [Edge("G", 4)],
        "E": [Edge("D", 5), Edge("F", 5), Edge("G", 5)],
        "F": [Edge("B", 6), Edge("G", 6)],
    }


@pytest.fixture
def negative_letters_graph():
    # Same shape as letters_graph, negative weights but no negative cycle
    return {
        "A": [Edge("B", 1), Edge("C", 1), Edge("D", 1)],
        "B": [Edge("E", 2)],
        "C": [Edge("E", -3)],
        "D": [Edge("G", 4)],
        "E": [Edge("D", 5), Edge("F", 5), Edge("G", 5)],
        "F": [Edge("B", -6), Edge("G", -6)],
    }


@pytest.fixture
def detour_graph():
    # Metric:
    #        [10]      [1]
    #   A ───────► B ──────► C ──[1]──► E
    #   │          ▲         ▲          ▲
    #   │   [5]    │ [3]     │ [9]      │ [11]
    #   └────────► D ────────┴──────────┘
    return {
        "A": [("B", 10), ("D", 5)],
        "B": [("C", 1)],
        "C": [("E", 1)],
        "D": [("B", 3), ("C", 9), ("E", 11)],
    }


@pytest.fixture
def maze():
    # '#' is a wall, '.' is an open tile
    return [
        "..#.......#.........",
        ".##.#####.#.#######.",
        "....#...#...#.....#.",
        "###.#.#.#####.###.#.",
        "....#.#.......#...#.",
        ".####.#########.###.",
        "......#.......#.....",
        ".######.#####.#####.",
        "........#...........",
    ]
