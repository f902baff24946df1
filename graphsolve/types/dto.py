"""Edge input type and immutable result containers.

All result objects are frozen dataclasses so a result can be shared freely
after a solver returns. Each offers ``to_dict()`` for JSON output.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

from graphsolve.errors import MalformedEdgeError
from graphsolve.types.base import WEIGHT_FIELDS, NodeID, ResultStatus, Weight


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two nodes.

    The weight lives in one of three optional fields whose meaning depends on
    the algorithm: ``capacity`` for max-flow, ``cost`` for spanning trees and
    ``distance`` for shortest paths.

    Attributes:
        source: Source node identifier.
        target: Target node identifier.
        cost: Optional cost weight.
        distance: Optional distance weight.
        capacity: Optional capacity weight.
    """

    source: NodeID
    target: NodeID
    cost: Optional[Weight] = None
    distance: Optional[Weight] = None
    capacity: Optional[Weight] = None

    @property
    def weight(self) -> Weight:
        """Return the first present field among cost, distance and capacity.

        Presence means "not None", so an explicit zero is returned as zero.

        Raises:
            MalformedEdgeError: If no weight field is set.
        """
        return self.resolve_weight()

    def resolve_weight(self, prefer: Optional[str] = None) -> Weight:
        """Return the weight, trying ``prefer`` before the default order.

        Args:
            prefer: Field name to check first (for example ``"capacity"``).

        Raises:
            MalformedEdgeError: If no weight field is set.
        """
        order = WEIGHT_FIELDS if prefer is None else (prefer,) + WEIGHT_FIELDS
        for name in order:
            value = getattr(self, name)
            if value is not None:
                return value
        raise MalformedEdgeError(
            f"Edge {self.source!r}->{self.target!r} has no cost, distance or capacity."
        )

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"source": self.source, "target": self.target}
        for name in WEIGHT_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data


@dataclass(frozen=True)
class FlowEdge:
    """Flow placed on one input edge by the max-flow solver.

    Attributes:
        source: Source node of the original edge.
        target: Target node of the original edge.
        capacity: Capacity of the original edge.
        flow: Flow carried from source to target.
    """

    source: NodeID
    target: NodeID
    capacity: Weight
    flow: Weight

    @property
    def utilization(self) -> float:
        """Fraction of capacity in use (0.0 for zero-capacity edges)."""
        if self.capacity <= 0:
            return 0.0
        return self.flow / self.capacity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "capacity": self.capacity,
            "flow": self.flow,
            "utilization": self.utilization,
        }


@dataclass(frozen=True)
class FlowResult:
    """Result of a max-flow computation.

    Attributes:
        max_flow: Total flow from source to sink.
        flow_edges: One entry per input edge, in input order.
        reachable: Nodes reachable from the source in the final residual graph.
        min_cut: Input edges leading from ``reachable`` to the rest of the graph.
            Their capacities sum to ``max_flow``.
        augmentations: Number of augmenting paths used.
    """

    max_flow: Weight
    flow_edges: Tuple[FlowEdge, ...]
    reachable: FrozenSet[NodeID] = field(default_factory=frozenset)
    min_cut: Tuple[FlowEdge, ...] = ()
    augmentations: int = 0

    @property
    def active_edges(self) -> Tuple[FlowEdge, ...]:
        """Edges carrying strictly positive flow."""
        return tuple(e for e in self.flow_edges if e.flow > 0)

    @property
    def total_capacity(self) -> Weight:
        return sum(e.capacity for e in self.flow_edges)

    @property
    def efficiency(self) -> float:
        """Max flow as a fraction of the summed edge capacity."""
        total = self.total_capacity
        if total <= 0:
            return 0.0
        return self.max_flow / total

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_flow": self.max_flow,
            "flow_edges": [e.to_dict() for e in self.flow_edges],
            "active_edges": len(self.active_edges),
            "efficiency": self.efficiency,
            "reachable": sorted(self.reachable, key=str),
            "min_cut": [e.to_dict() for e in self.min_cut],
            "augmentations": self.augmentations,
        }


@dataclass(frozen=True)
class MstResult:
    """Result of a minimum spanning tree computation.

    Attributes:
        total_cost: Sum of the weights of ``mst_edges``.
        mst_edges: Chosen edges in selection order, as supplied by the caller.
        status: ``OK`` when the tree spans every node, ``DISCONNECTED`` otherwise.
        unreached: Nodes not spanned when the graph is disconnected.
    """

    total_cost: Weight
    mst_edges: Tuple[Edge, ...]
    status: ResultStatus = ResultStatus.OK
    unreached: Tuple[NodeID, ...] = ()

    @property
    def connected(self) -> bool:
        return self.status is ResultStatus.OK

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_cost": self.total_cost,
            "mst_edges": [e.to_dict() for e in self.mst_edges],
            "status": self.status.name.lower(),
            "unreached": list(self.unreached),
        }


@dataclass(frozen=True)
class PathSegment:
    """One hop of a shortest path."""

    source: NodeID
    target: NodeID
    distance: Weight

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "distance": self.distance,
        }


@dataclass(frozen=True)
class PathResult:
    """Result of a shortest-path computation.

    Attributes:
        distance: Shortest distance, ``math.inf`` when the target is unreachable.
        path: Nodes from source to target, empty when unreachable.
        path_exists: True exactly when ``distance`` is finite.
        status: ``OK`` or ``DISCONNECTED``.
        segments: Per-hop breakdown of ``path``.
    """

    distance: Weight
    path: Tuple[NodeID, ...]
    path_exists: bool
    status: ResultStatus = ResultStatus.OK
    segments: Tuple[PathSegment, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            # JSON has no infinity
            "distance": None if math.isinf(self.distance) else self.distance,
            "path": list(self.path),
            "path_exists": self.path_exists,
            "status": self.status.name.lower(),
            "segments": [s.to_dict() for s in self.segments],
        }
