"""graphsolve: maximum flow, minimum spanning trees and shortest paths.

Each computation is a pure function over a node list and an edge list. Nothing
is retained between calls.

Primary API:
    max_flow() - Ford-Fulkerson maximum flow between two nodes
    minimum_spanning_tree() - Prim minimum spanning tree
    shortest_path() - Dijkstra shortest path between two nodes
    Edge - Weighted edge with optional cost/distance/capacity fields
    Scenario - YAML/text scenario loading and dispatch

Example:
    from graphsolve import max_flow, shortest_path

    nodes = ["A", "B", "C"]
    flow = max_flow(nodes, [("A", "B", 10), ("B", "C", 4)], "A", "C")
    assert flow.max_flow == 4

    route = shortest_path(nodes, [("A", "B", 2), ("B", "C", 3)], "A", "C")
    assert route.path == ("A", "B", "C")
"""

from __future__ import annotations

from graphsolve import cli, logging
from graphsolve._version import __version__
from graphsolve.algorithms import max_flow, minimum_spanning_tree, shortest_path
from graphsolve.config import SOLVER_CONFIG, SolverConfig
from graphsolve.errors import (
    EmptyGraphError,
    GraphValidationError,
    IterationLimitError,
    MalformedEdgeError,
    MissingEndpointError,
    UnknownAlgorithmError,
    UnknownNodeError,
)
from graphsolve.graph import build_adjacency, from_networkx, to_networkx
from graphsolve.scenario import Scenario
from graphsolve.types.base import Algorithm, ResultStatus
from graphsolve.types.dto import (
    Edge,
    FlowEdge,
    FlowResult,
    MstResult,
    PathResult,
    PathSegment,
)

__all__ = [
    # Version
    "__version__",
    # Algorithms (primary API)
    "max_flow",
    "minimum_spanning_tree",
    "shortest_path",
    "build_adjacency",
    # Types
    "Algorithm",
    "ResultStatus",
    "Edge",
    "FlowEdge",
    "FlowResult",
    "MstResult",
    "PathResult",
    "PathSegment",
    "Scenario",
    # Errors
    "GraphValidationError",
    "EmptyGraphError",
    "MissingEndpointError",
    "UnknownNodeError",
    "MalformedEdgeError",
    "UnknownAlgorithmError",
    "IterationLimitError",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
