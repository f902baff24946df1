"""Graph representations used by the solvers.

Provides the undirected adjacency builder (`builder`), the residual capacity
graph for max-flow (`residual`) and NetworkX conversion helpers (`convert`).
"""

from graphsolve.graph.builder import AdjacencyMap, build_adjacency
from graphsolve.graph.convert import from_networkx, to_networkx
from graphsolve.graph.residual import ResidualGraph

__all__ = [
    "AdjacencyMap",
    "build_adjacency",
    "ResidualGraph",
    "from_networkx",
    "to_networkx",
]
