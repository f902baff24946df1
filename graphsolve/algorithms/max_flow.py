"""Maximum-flow computation via Ford-Fulkerson augmentation.

Augmenting paths are found by depth-first search over the residual graph, in
the order residual pairs were created. This is the classical method, not the
Edmonds-Karp BFS variant, so the number of augmentations depends on capacity
magnitudes. ``SolverConfig.max_augmentations`` bounds it.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from graphsolve.config import SOLVER_CONFIG
from graphsolve.errors import IterationLimitError
from graphsolve.graph.residual import ResidualGraph
from graphsolve.logging import get_logger
from graphsolve.types.base import NodeID, NodePair, Weight
from graphsolve.types.dto import Edge, FlowEdge, FlowResult
from graphsolve.validation import normalize_nodes, require_endpoint, validate_edges

logger = get_logger(__name__)


def max_flow(
    nodes: Iterable[NodeID],
    edges: Iterable[Any],
    source: NodeID,
    sink: NodeID,
    *,
    max_augmentations: Optional[int] = None,
) -> FlowResult:
    """Compute the maximum flow from ``source`` to ``sink``.

    Edges are directed: capacity runs from an edge's source to its target
    only. When two edges share the same ordered pair, the later capacity
    replaces the earlier one. Self-loops never carry flow.

    Args:
        nodes: Declared node identifiers.
        edges: Capacity edges as ``Edge`` objects, mappings or
            ``(source, target, capacity)`` triples.
        source: Node the flow leaves from.
        sink: Node the flow arrives at.
        max_augmentations: Per-call bound on augmenting paths. Defaults to
            ``SOLVER_CONFIG.max_augmentations``.

    Returns:
        FlowResult with the total flow, per-edge flows in input order, the
        source side of the final residual graph and the min-cut edges.

    Raises:
        EmptyGraphError: If ``nodes`` is empty.
        MissingEndpointError: If ``source`` or ``sink`` is missing.
        UnknownNodeError: If an endpoint or edge node is undeclared.
        MalformedEdgeError: If an edge has no usable capacity.
        IterationLimitError: If more augmenting paths are needed than allowed.

    Examples:
        >>> result = max_flow(["A", "B", "C"], [("A", "B", 5), ("B", "C", 3)], "A", "C")
        >>> result.max_flow
        3
    """
    declared = normalize_nodes(nodes)
    require_endpoint("source", source, declared)
    require_endpoint("sink", sink, declared)
    valid_edges = validate_edges(edges, declared, "capacity", prefer="capacity")
    limit = SOLVER_CONFIG.resolve_limit(max_augmentations)

    residual = ResidualGraph.from_edges(valid_edges)
    total: Weight = 0
    augmentations = 0

    # s == t: conservation forces the only feasible flow value to zero.
    if source != sink:
        while True:
            path = residual.find_augmenting_path(source, sink)
            if path is None:
                break
            if limit is not None and augmentations >= limit:
                raise IterationLimitError(
                    f"Max flow from '{source}' to '{sink}' needs more than "
                    f"{limit} augmenting paths."
                )
            amount = residual.bottleneck(path)
            residual.augment(path, amount)
            total += amount
            augmentations += 1
            logger.debug("Augmenting path %s carries %s", path, amount)

    logger.debug(
        "Max flow %s -> %s: %s after %d augmentations", source, sink, total, augmentations
    )
    return _build_result(valid_edges, residual, source, sink, total, augmentations)


def _build_result(
    edges: List[Edge],
    residual: ResidualGraph,
    source: NodeID,
    sink: NodeID,
    total: Weight,
    augmentations: int,
) -> FlowResult:
    """Derive per-edge flow, reachability and min-cut from the final residual graph.

    Flow on an edge is the capacity it has lost: ``capacity - residual(u, v)``
    clipped at zero. Without an antiparallel edge this equals the capacity
    pushed back onto ``(v, u)``; with one, it is the net flow in the edge's
    direction. Only the last edge for each ordered pair seeded the residual
    graph, so earlier duplicates report zero flow.
    """
    winner: Dict[NodePair, int] = {}
    for index, edge in enumerate(edges):
        winner[(edge.source, edge.target)] = index

    flow_edges: List[FlowEdge] = []
    for index, edge in enumerate(edges):
        capacity = edge.resolve_weight("capacity")
        flow: Weight = 0
        if not edge.is_self_loop and winner[(edge.source, edge.target)] == index:
            flow = max(0, capacity - residual.capacity(edge.source, edge.target))
        flow_edges.append(FlowEdge(edge.source, edge.target, capacity, flow))

    reachable = frozenset(residual.reachable_from(source))
    min_cut: List[FlowEdge] = []
    if source != sink:
        for index, flow_edge in enumerate(flow_edges):
            if (
                winner[(flow_edge.source, flow_edge.target)] == index
                and flow_edge.capacity > 0
                and flow_edge.source in reachable
                and flow_edge.target not in reachable
            ):
                min_cut.append(flow_edge)

    return FlowResult(
        max_flow=total,
        flow_edges=tuple(flow_edges),
        reachable=reachable,
        min_cut=tuple(min_cut),
        augmentations=augmentations,
    )
