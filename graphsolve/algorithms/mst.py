"""Minimum spanning tree via Prim's algorithm.

Each round scans the full edge list rather than a priority queue over the
frontier. That keeps selection order fully determined by the input: among
equally cheap crossing edges, the one listed first wins.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Set

from graphsolve.logging import get_logger
from graphsolve.types.base import NodeID, ResultStatus, Weight
from graphsolve.types.dto import Edge, MstResult
from graphsolve.validation import normalize_nodes, validate_edges

logger = get_logger(__name__)


def minimum_spanning_tree(nodes: Iterable[NodeID], edges: Iterable[Any]) -> MstResult:
    """Compute a minimum-cost spanning tree, treating edges as undirected.

    The tree grows from the first declared node. An empty node list yields an
    empty, zero-cost result, but edges are validated first: with no declared
    nodes any edge names an undeclared node and raises ``UnknownNodeError``.
    If the graph is disconnected, the tree covering the first node's
    component is returned with ``status`` set to ``ResultStatus.DISCONNECTED``
    and the remaining nodes in ``unreached``.

    Args:
        nodes: Declared node identifiers.
        edges: Cost edges as ``Edge`` objects, mappings or
            ``(source, target, cost)`` triples.

    Returns:
        MstResult with edges in selection order, each as supplied by the caller.

    Raises:
        UnknownNodeError: If an edge references an undeclared node.
        MalformedEdgeError: If an edge has no usable weight.
    """
    declared = normalize_nodes(nodes, allow_empty=True)
    valid_edges = validate_edges(edges, declared, "cost")
    if not declared:
        return MstResult(total_cost=0, mst_edges=())

    visited: Set[NodeID] = {declared[0]}
    mst_edges: List[Edge] = []
    total_cost: Weight = 0

    while len(visited) < len(declared):
        best: Optional[Edge] = None
        for edge in valid_edges:
            if (edge.source in visited) == (edge.target in visited):
                continue
            if best is None or edge.weight < best.weight:
                best = edge
        if best is None:
            break
        visited.add(best.target if best.source in visited else best.source)
        mst_edges.append(best)
        total_cost += best.weight

    unreached = tuple(node for node in declared if node not in visited)
    status = ResultStatus.DISCONNECTED if unreached else ResultStatus.OK
    if unreached:
        logger.debug("Spanning tree stops with %d unreached nodes", len(unreached))
    return MstResult(
        total_cost=total_cost,
        mst_edges=tuple(mst_edges),
        status=status,
        unreached=unreached,
    )
