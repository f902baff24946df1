"""Residual capacity graph used by the Ford-Fulkerson solver."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Set

from graphsolve.types.base import NodeID, NodePair, Weight
from graphsolve.types.dto import Edge


class ResidualGraph:
    """Remaining capacity per ordered node pair.

    Capacities are stored in a dict keyed by ``(u, v)`` tuples. A second index
    keeps, for every node, its outgoing pairs in the order they were first
    created; the augmenting-path search walks neighbors in that order.

    Pairs that were never written have an implicit capacity of zero.
    """

    def __init__(self) -> None:
        self._capacity: Dict[NodePair, Weight] = {}
        self._out: Dict[NodeID, Dict[NodeID, None]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "ResidualGraph":
        """Seed a residual graph from directed capacity edges.

        Self-loops are skipped. A later edge for the same ordered pair replaces
        the capacity of an earlier one.
        """
        residual = cls()
        for edge in edges:
            if edge.is_self_loop:
                continue
            residual.set_capacity(edge.source, edge.target, edge.resolve_weight("capacity"))
        return residual

    def __contains__(self, pair: object) -> bool:
        return pair in self._capacity

    def __len__(self) -> int:
        return len(self._capacity)

    def capacity(self, u: NodeID, v: NodeID) -> Weight:
        return self._capacity.get((u, v), 0)

    def set_capacity(self, u: NodeID, v: NodeID, value: Weight) -> None:
        self._capacity[(u, v)] = value
        self._out.setdefault(u, {})[v] = None

    def add_capacity(self, u: NodeID, v: NodeID, delta: Weight) -> None:
        self.set_capacity(u, v, self.capacity(u, v) + delta)

    def neighbors(self, u: NodeID) -> Iterator[NodeID]:
        """Yield targets of pairs starting at ``u`` in creation order."""
        return iter(self._out.get(u, ()))

    def find_augmenting_path(self, source: NodeID, sink: NodeID) -> Optional[List[NodeID]]:
        """Depth-first search for a source-sink path over positive residual pairs.

        The search is iterative: ``stack`` holds one neighbor iterator per node
        on the current ``path``. Visited nodes stay visited after backtracking.

        Returns:
            The node sequence from ``source`` to ``sink``, or None.
        """
        if source == sink:
            return [source]
        visited: Set[NodeID] = {source}
        path: List[NodeID] = [source]
        stack: List[Iterator[NodeID]] = [self.neighbors(source)]
        while stack:
            u = path[-1]
            for v in stack[-1]:
                if v in visited or self.capacity(u, v) <= 0:
                    continue
                visited.add(v)
                path.append(v)
                if v == sink:
                    return path
                stack.append(self.neighbors(v))
                break
            else:
                stack.pop()
                path.pop()
        return None

    def bottleneck(self, path: List[NodeID]) -> Weight:
        """Smallest residual capacity along consecutive pairs of ``path``."""
        return min(self.capacity(u, v) for u, v in zip(path, path[1:]))

    def augment(self, path: List[NodeID], amount: Weight) -> None:
        """Push ``amount`` along ``path``: forward pairs shrink, reverse pairs grow."""
        for u, v in zip(path, path[1:]):
            self.add_capacity(u, v, -amount)
            self.add_capacity(v, u, amount)

    def reachable_from(self, source: NodeID) -> Set[NodeID]:
        """Nodes reachable from ``source`` over positive residual pairs."""
        seen: Set[NodeID] = {source}
        stack = [source]
        while stack:
            u = stack.pop()
            for v in self.neighbors(u):
                if v not in seen and self.capacity(u, v) > 0:
                    seen.add(v)
                    stack.append(v)
        return seen
