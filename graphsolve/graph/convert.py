"""Conversion between node/edge lists and NetworkX graphs.

``to_networkx`` follows the same last-write-wins rule as the solvers: adding a
second edge for an existing pair overwrites its weight attribute.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple, Union

import networkx as nx

from graphsolve.types.base import NodeID
from graphsolve.types.dto import Edge
from graphsolve.validation import normalize_nodes, validate_edges

NxGraph = Union[nx.Graph, nx.DiGraph]


def to_networkx(
    nodes: Iterable[NodeID],
    edges: Iterable[Any],
    *,
    directed: bool = False,
    weight_field: str = "distance",
    weight_attr: Optional[str] = None,
) -> NxGraph:
    """Convert node and edge lists to a NetworkX graph.

    Self-loops are dropped from directed graphs, matching the max-flow solver
    which never routes flow over them.

    Args:
        nodes: Declared node identifiers.
        edges: Edge descriptions accepted by the solvers.
        directed: Build an ``nx.DiGraph`` instead of an ``nx.Graph``.
        weight_field: Field that receives a bare weight during coercion.
        weight_attr: NetworkX edge attribute for the weight. Defaults to
            ``weight_field``.

    Returns:
        The NetworkX graph with every declared node present.
    """
    declared = normalize_nodes(nodes, allow_empty=True)
    prefer = weight_field if directed else None
    valid_edges = validate_edges(edges, declared, weight_field, prefer=prefer)
    attr = weight_attr or weight_field

    graph: NxGraph = nx.DiGraph() if directed else nx.Graph()
    graph.add_nodes_from(declared)
    for edge in valid_edges:
        if directed and edge.is_self_loop:
            continue
        graph.add_edge(edge.source, edge.target, **{attr: edge.resolve_weight(prefer)})
    return graph


def from_networkx(
    graph: NxGraph,
    *,
    weight_attr: str = "weight",
    weight_field: str = "distance",
    default_weight: Optional[float] = None,
) -> Tuple[List[NodeID], List[Edge]]:
    """Convert a NetworkX graph to node and edge lists.

    Args:
        graph: Any NetworkX graph; multigraph parallel edges are emitted in
            iteration order and therefore collapse last-write-wins in the solvers.
        weight_attr: Edge attribute holding the weight.
        weight_field: ``Edge`` field that receives the weight.
        default_weight: Weight for edges lacking ``weight_attr``.

    Returns:
        ``(nodes, edges)`` in NetworkX iteration order.

    Raises:
        ValueError: If an edge has no weight and no default is given.
    """
    nodes = list(graph.nodes)
    edges: List[Edge] = []
    for u, v, data in graph.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        if weight is None:
            raise ValueError(f"Edge {u!r}->{v!r} has no '{weight_attr}' attribute.")
        edges.append(Edge(u, v, **{weight_field: weight}))
    return nodes, edges
