"""Cross-checks against NetworkX on random graphs.

Random graphs use distinct unordered node pairs so that duplicate handling does
not differ between the solvers and NetworkX.
"""

import math
import random
from itertools import combinations

import networkx as nx
import pytest

from graphsolve.algorithms.max_flow import max_flow
from graphsolve.algorithms.mst import minimum_spanning_tree
from graphsolve.algorithms.spf import shortest_path
from graphsolve.graph.convert import to_networkx

SEEDS = range(15)


def random_graph(seed, *, n_nodes=8, density=0.4, max_weight=20, connected=False):
    rng = random.Random(seed)
    nodes = [f"n{i}" for i in range(n_nodes)]
    pairs = [p for p in combinations(nodes, 2) if rng.random() < density]
    if connected:
        chain = set(zip(nodes, nodes[1:]))
        pairs = sorted(sorted(chain | set(pairs)), key=lambda p: rng.random())
    edges = []
    for u, v in pairs:
        if rng.random() < 0.5:
            u, v = v, u
        edges.append((u, v, rng.randint(0, max_weight)))
    return nodes, edges


@pytest.mark.parametrize("seed", SEEDS)
def test_max_flow_matches_networkx(seed):
    nodes, edges = random_graph(seed, density=0.5)
    src, dst = nodes[0], nodes[-1]
    result = max_flow(nodes, edges, src, dst)

    g = to_networkx(nodes, edges, directed=True, weight_field="capacity")
    assert result.max_flow == nx.maximum_flow_value(g, src, dst, capacity="capacity")
    assert result.max_flow == nx.minimum_cut_value(g, src, dst, capacity="capacity")
    assert sum(e.capacity for e in result.min_cut) == result.max_flow


@pytest.mark.parametrize("seed", SEEDS)
def test_max_flow_respects_capacity_and_conservation(seed):
    nodes, edges = random_graph(seed, density=0.5)
    src, dst = nodes[0], nodes[-1]
    result = max_flow(nodes, edges, src, dst)

    balance = {node: 0 for node in nodes}
    for e in result.flow_edges:
        assert 0 <= e.flow <= e.capacity
        balance[e.source] -= e.flow
        balance[e.target] += e.flow

    for node in nodes:
        if node not in (src, dst):
            assert balance[node] == 0
    assert balance[dst] == result.max_flow
    assert balance[src] == -result.max_flow


@pytest.mark.parametrize("seed", SEEDS)
def test_mst_matches_kruskal(seed):
    nodes, edges = random_graph(seed, connected=True)
    result = minimum_spanning_tree(nodes, edges)

    g = to_networkx(nodes, edges, weight_field="cost")
    kruskal = nx.minimum_spanning_tree(g, weight="cost", algorithm="kruskal")
    assert result.connected
    assert len(result.mst_edges) == len(nodes) - 1
    assert result.total_cost == sum(e.weight for e in result.mst_edges)
    assert result.total_cost == kruskal.size(weight="cost")

    tree = nx.Graph([(e.source, e.target) for e in result.mst_edges])
    assert nx.is_tree(tree) and set(tree.nodes) == set(nodes)


@pytest.mark.parametrize("seed", SEEDS)
def test_mst_disconnected_spans_first_component(seed):
    nodes, edges = random_graph(seed, density=0.15)
    result = minimum_spanning_tree(nodes, edges)

    g = to_networkx(nodes, edges, weight_field="cost")
    component = nx.node_connected_component(g, nodes[0])
    assert result.connected == (len(component) == len(nodes))
    assert set(result.unreached) == set(nodes) - component
    assert len(result.mst_edges) == len(component) - 1


@pytest.mark.parametrize("seed", SEEDS)
def test_shortest_path_matches_bellman_ford(seed):
    nodes, edges = random_graph(seed, density=0.3)
    src = nodes[0]
    g = to_networkx(nodes, edges, weight_field="distance")

    for dst in nodes:
        result = shortest_path(nodes, edges, src, dst)
        if nx.has_path(g, src, dst):
            expected = nx.bellman_ford_path_length(g, src, dst, weight="distance")
            assert result.distance == expected
            assert result.path[0] == src and result.path[-1] == dst
            assert sum(s.distance for s in result.segments) == result.distance
        else:
            assert math.isinf(result.distance)
            assert not result.path_exists


@pytest.mark.parametrize("seed", SEEDS)
def test_shortest_path_distance_grows_with_weights(seed):
    nodes, edges = random_graph(seed, density=0.4)
    src, dst = nodes[0], nodes[-1]
    rng = random.Random(seed)
    heavier = [(u, v, w + rng.randint(0, 5)) for u, v, w in edges]

    before = shortest_path(nodes, edges, src, dst).distance
    after = shortest_path(nodes, heavier, src, dst).distance
    assert after >= before
