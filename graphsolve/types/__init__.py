"""Types and data structures for graph algorithm inputs and results."""

from graphsolve.types.base import (
    WEIGHT_FIELDS,
    Algorithm,
    NodeID,
    NodePair,
    ResultStatus,
    Weight,
)
from graphsolve.types.dto import (
    Edge,
    FlowEdge,
    FlowResult,
    MstResult,
    PathResult,
    PathSegment,
)

__all__ = [
    "WEIGHT_FIELDS",
    "Algorithm",
    "NodeID",
    "NodePair",
    "ResultStatus",
    "Weight",
    "Edge",
    "FlowEdge",
    "FlowResult",
    "MstResult",
    "PathResult",
    "PathSegment",
]
