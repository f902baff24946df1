"""Sample graphs shared by the algorithm tests.

Each fixture returns ``(nodes, edges)`` with edges as ``Edge`` objects.
"""

import pytest

from graphsolve.types.dto import Edge


@pytest.fixture
def water_network():
    # Capacity (directed):
    #
    #      [10]     [4]     [10]
    #   A──────►B──────►D──────►F
    #   │       │╲              ▲
    #   │    [2]│ ╲[8]          │
    #   │       ▼  ╲            │
    #   └──────►C──►E───────────┘
    #     [8]    [9]    [10]
    nodes = ["A", "B", "C", "D", "E", "F"]
    edges = [
        Edge("A", "B", capacity=10),
        Edge("A", "C", capacity=8),
        Edge("B", "C", capacity=2),
        Edge("B", "D", capacity=4),
        Edge("B", "E", capacity=8),
        Edge("C", "E", capacity=9),
        Edge("D", "F", capacity=10),
        Edge("E", "F", capacity=10),
    ]
    return nodes, edges


@pytest.fixture
def site_links():
    # Cost (undirected):
    #   A-B 4, A-C 8, B-C 3, B-D 5, C-D 2, C-E 7, D-E 6
    nodes = ["A", "B", "C", "D", "E"]
    edges = [
        Edge("A", "B", cost=4),
        Edge("A", "C", cost=8),
        Edge("B", "C", cost=3),
        Edge("B", "D", cost=5),
        Edge("C", "D", cost=2),
        Edge("C", "E", cost=7),
        Edge("D", "E", cost=6),
    ]
    return nodes, edges


@pytest.fixture
def road_map():
    # Distance (undirected), the classic six-node Dijkstra example.
    nodes = ["1", "2", "3", "4", "5", "6"]
    edges = [
        Edge("1", "2", distance=7),
        Edge("1", "3", distance=9),
        Edge("1", "6", distance=14),
        Edge("2", "3", distance=10),
        Edge("2", "4", distance=15),
        Edge("3", "4", distance=11),
        Edge("3", "6", distance=2),
        Edge("4", "5", distance=6),
        Edge("5", "6", distance=9),
    ]
    return nodes, edges


@pytest.fixture
def zigzag():
    # Capacity 1 everywhere. The first DFS path S->A->B->T blocks both direct
    # routes; the second path must cancel flow on A->B.
    #
    #     S──►A──►T
    #     │   │   ▲
    #     ▼   ▼   │
    #     B◄──┘   │
    #     └───────┘
    nodes = ["S", "A", "B", "T"]
    edges = [
        Edge("S", "A", capacity=1),
        Edge("S", "B", capacity=1),
        Edge("A", "B", capacity=1),
        Edge("A", "T", capacity=1),
        Edge("B", "T", capacity=1),
    ]
    return nodes, edges


@pytest.fixture
def two_islands():
    # A─B   C─D   (no link between the pairs)
    nodes = ["A", "B", "C", "D"]
    edges = [
        Edge("A", "B", cost=1, distance=1, capacity=1),
        Edge("C", "D", cost=1, distance=1, capacity=1),
    ]
    return nodes, edges
