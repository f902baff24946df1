"""Graph algorithms: Ford-Fulkerson max flow, Prim MST and Dijkstra SPF."""

from graphsolve.algorithms.max_flow import max_flow
from graphsolve.algorithms.mst import minimum_spanning_tree
from graphsolve.algorithms.spf import shortest_path

__all__ = ["max_flow", "minimum_spanning_tree", "shortest_path"]
