"""Base aliases and enums shared by the graph algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Hashable, Tuple, Union

from graphsolve.errors import UnknownAlgorithmError

#: Node identifier. Strings in practice; any hashable value is accepted.
NodeID = Hashable

#: Numeric edge weight (capacity, cost or distance depending on the algorithm).
Weight = Union[int, float]

#: Ordered node pair used as a residual-graph key.
NodePair = Tuple[NodeID, NodeID]

#: Optional weight fields on an edge, in resolution order.
WEIGHT_FIELDS: Tuple[str, ...] = ("cost", "distance", "capacity")


class Algorithm(IntEnum):
    """The three supported graph computations."""

    MAX_FLOW = 1
    MINIMUM_SPANNING_TREE = 2
    SHORTEST_PATH = 3

    @property
    def weight_field(self) -> str:
        """Edge field that holds this algorithm's weight."""
        return _WEIGHT_FIELD[self]

    @property
    def needs_endpoints(self) -> bool:
        """Whether the algorithm takes a source and a target/sink."""
        return self is not Algorithm.MINIMUM_SPANNING_TREE

    @classmethod
    def from_string(cls, value: str) -> "Algorithm":
        """Parse an algorithm name or alias.

        Accepts member names in any case (``"max_flow"``) and the short aliases
        ``flow``, ``mst``, ``spf``, ``dijkstra``, ``prim`` and
        ``ford_fulkerson``. Hyphens are treated as underscores.

        Args:
            value: Algorithm name.

        Returns:
            The corresponding Algorithm member.

        Raises:
            UnknownAlgorithmError: If the name matches nothing.
        """
        key = str(value).strip().lower().replace("-", "_")
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls[key.upper()]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise UnknownAlgorithmError(
                f"Invalid algorithm '{value}'. Valid values are: {valid}"
            ) from None


_WEIGHT_FIELD = {
    Algorithm.MAX_FLOW: "capacity",
    Algorithm.MINIMUM_SPANNING_TREE: "cost",
    Algorithm.SHORTEST_PATH: "distance",
}

_ALIASES = {
    "flow": Algorithm.MAX_FLOW,
    "maxflow": Algorithm.MAX_FLOW,
    "ford_fulkerson": Algorithm.MAX_FLOW,
    "mst": Algorithm.MINIMUM_SPANNING_TREE,
    "prim": Algorithm.MINIMUM_SPANNING_TREE,
    "spf": Algorithm.SHORTEST_PATH,
    "dijkstra": Algorithm.SHORTEST_PATH,
}


class ResultStatus(IntEnum):
    """Outcome of an MST or shortest-path computation."""

    #: Every requested node was reached.
    OK = 1
    #: The graph does not connect everything the computation needed.
    DISCONNECTED = 2
