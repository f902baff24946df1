"""Undirected adjacency construction for the MST and shortest-path solvers."""

from __future__ import annotations

from typing import Any, Dict, Iterable

from graphsolve.types.base import NodeID, Weight
from graphsolve.validation import normalize_nodes, validate_edges

#: Node -> neighbor -> weight.
AdjacencyMap = Dict[NodeID, Dict[NodeID, Weight]]


def build_adjacency(
    nodes: Iterable[NodeID],
    edges: Iterable[Any],
    *,
    weight_field: str = "distance",
) -> AdjacencyMap:
    """Build an undirected adjacency map from node and edge lists.

    Every declared node gets an entry, including isolated ones. Each edge is
    written in both directions with the same weight; a later edge between the
    same pair of nodes overwrites an earlier one.

    Args:
        nodes: Declared node identifiers. Duplicates collapse.
        edges: Edges as ``Edge`` objects, mappings or ``(source, target, weight)``
            triples.
        weight_field: Field that receives a bare weight during coercion.

    Returns:
        The adjacency map, keyed in node declaration order.

    Raises:
        UnknownNodeError: If an edge references an undeclared node.
        MalformedEdgeError: If an edge has no usable weight.

    Examples:
        >>> adj = build_adjacency(["A", "B", "C"], [("A", "B", 3)])
        >>> adj["B"]
        {'A': 3}
        >>> adj["C"]
        {}
    """
    declared = normalize_nodes(nodes, allow_empty=True)
    valid_edges = validate_edges(edges, declared, weight_field)

    adjacency: AdjacencyMap = {node: {} for node in declared}
    for edge in valid_edges:
        weight = edge.weight
        adjacency[edge.source][edge.target] = weight
        adjacency[edge.target][edge.source] = weight
    return adjacency
