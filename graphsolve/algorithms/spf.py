"""Shortest-path-first (SPF) computation via Dijkstra's algorithm.

Uses the classic unvisited-set formulation with a linear scan for the next
node. Ties on distance go to the node declared first, which makes the chosen
path a function of the input order alone.

Notes:
    The search stops as soon as the target is selected, or when every
    remaining node is at infinite distance.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional

from graphsolve.graph.builder import build_adjacency
from graphsolve.logging import get_logger
from graphsolve.types.base import NodeID, ResultStatus, Weight
from graphsolve.types.dto import PathResult, PathSegment
from graphsolve.validation import normalize_nodes, require_endpoint

logger = get_logger(__name__)


def shortest_path(
    nodes: Iterable[NodeID],
    edges: Iterable[Any],
    source: NodeID,
    target: NodeID,
) -> PathResult:
    """Compute the shortest undirected path between two nodes.

    Args:
        nodes: Declared node identifiers.
        edges: Distance edges as ``Edge`` objects, mappings or
            ``(source, target, distance)`` triples.
        source: Start node.
        target: End node.

    Returns:
        PathResult. When ``target`` is unreachable, ``distance`` is
        ``math.inf``, ``path`` is empty and ``status`` is
        ``ResultStatus.DISCONNECTED``.

    Raises:
        EmptyGraphError: If ``nodes`` is empty.
        MissingEndpointError: If ``source`` or ``target`` is missing.
        UnknownNodeError: If an endpoint or edge node is undeclared.
        MalformedEdgeError: If an edge has no usable weight.
    """
    declared = normalize_nodes(nodes)
    require_endpoint("source", source, declared)
    require_endpoint("target", target, declared)
    adjacency = build_adjacency(declared, edges, weight_field="distance")

    distances: Dict[NodeID, Weight] = {node: math.inf for node in declared}
    distances[source] = 0
    previous: Dict[NodeID, NodeID] = {}
    # dict keeps declaration order for the tie-break
    unvisited: Dict[NodeID, None] = dict.fromkeys(declared)

    while unvisited:
        current: Optional[NodeID] = None
        current_distance: Weight = math.inf
        for node in unvisited:
            if distances[node] < current_distance:
                current_distance = distances[node]
                current = node

        if current is None or current == target:
            break
        del unvisited[current]

        for neighbor, weight in adjacency[current].items():
            candidate = current_distance + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = current

    distance = distances[target]
    if math.isinf(distance):
        logger.debug("No path from %s to %s", source, target)
        return PathResult(
            distance=distance,
            path=(),
            path_exists=False,
            status=ResultStatus.DISCONNECTED,
        )

    path = _reconstruct_path(previous, source, target)
    segments = tuple(PathSegment(u, v, adjacency[u][v]) for u, v in zip(path, path[1:]))
    return PathResult(
        distance=distance,
        path=tuple(path),
        path_exists=True,
        segments=segments,
    )


def _reconstruct_path(
    previous: Dict[NodeID, NodeID], source: NodeID, target: NodeID
) -> List[NodeID]:
    path = [target]
    while path[-1] != source:
        path.append(previous[path[-1]])
    path.reverse()
    return path
