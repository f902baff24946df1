"""Scenario definition: one graph, one algorithm, optional endpoints.

A scenario can be written in YAML::

    name: pipes
    algorithm: max_flow
    nodes: A, B, C            # or a list: [A, B, C]
    edges: |                  # or a list of [source, target, value] / mappings
      A B 10
      B C 4
    source: A
    sink: C                   # ``target`` is accepted as well

Node identifiers are always converted to strings so that ``nodes: [1, 2]``
and ``edges: [[1, 2, 7]]`` refer to the same vertices as the text format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from graphsolve.algorithms import max_flow, minimum_spanning_tree, shortest_path
from graphsolve.errors import GraphValidationError, MalformedEdgeError
from graphsolve.io import parse_edges, parse_nodes
from graphsolve.logging import get_logger
from graphsolve.types.base import Algorithm
from graphsolve.types.dto import Edge, FlowResult, MstResult, PathResult
from graphsolve.validation import coerce_edge

Result = Union[FlowResult, MstResult, PathResult]

_ALLOWED_KEYS = {"name", "algorithm", "nodes", "edges", "source", "target", "sink"}


def _as_node_id(value: Any) -> Any:
    """Convert YAML scalars (ints, booleans) to string node identifiers."""
    if value is None or isinstance(value, str):
        return value
    return str(value)


@dataclass
class Scenario:
    """A graph plus the computation to run on it.

    Typical usage example:

        scenario = Scenario.from_file("pipes.yaml")
        result = scenario.run()
    """

    algorithm: Algorithm
    nodes: List[str]
    edges: List[Edge] = field(default_factory=list)
    source: Optional[str] = None
    target: Optional[str] = None
    name: Optional[str] = None

    _logger = get_logger(__name__)

    def run(self) -> Result:
        """Run the scenario's algorithm.

        Returns:
            FlowResult, MstResult or PathResult depending on ``algorithm``.

        Raises:
            GraphValidationError: If the graph or endpoints are invalid.
        """
        self._logger.info(
            "Running %s on %d nodes and %d edges",
            self.algorithm.name.lower(),
            len(self.nodes),
            len(self.edges),
        )
        if self.algorithm is Algorithm.MAX_FLOW:
            return max_flow(self.nodes, self.edges, self.source, self.target)
        if self.algorithm is Algorithm.MINIMUM_SPANNING_TREE:
            return minimum_spanning_tree(self.nodes, self.edges)
        return shortest_path(self.nodes, self.edges, self.source, self.target)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "algorithm": self.algorithm.name.lower(),
            "nodes": list(self.nodes),
            "edges": [e.to_dict() for e in self.edges],
        }
        if self.algorithm.needs_endpoints:
            data["source"] = self.source
            data["target"] = self.target
        return data

    @classmethod
    def from_text(
        cls,
        algorithm: Union[Algorithm, str],
        nodes: str,
        edges: str,
        source: Optional[str] = None,
        target: Optional[str] = None,
        name: Optional[str] = None,
    ) -> "Scenario":
        """Build a scenario from the comma-separated node and line-based edge formats."""
        if not isinstance(algorithm, Algorithm):
            algorithm = Algorithm.from_string(algorithm)
        return cls(
            algorithm=algorithm,
            nodes=parse_nodes(nodes),
            edges=parse_edges(edges, algorithm),
            source=source,
            target=target,
            name=name,
        )

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "Scenario":
        """Build a scenario from a YAML document.

        Raises:
            GraphValidationError: On unknown keys, a missing algorithm,
                conflicting ``target``/``sink`` or badly shaped sections.
            MalformedEdgeError: If an edge entry cannot be interpreted.
        """
        data = yaml.safe_load(yaml_str)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise GraphValidationError("The provided YAML must map to a dictionary at top-level.")

        unknown = set(map(str, data)) - _ALLOWED_KEYS
        if unknown:
            raise GraphValidationError(
                f"Unrecognized top-level key(s) in scenario: {', '.join(sorted(unknown))}. "
                f"Allowed keys are {sorted(_ALLOWED_KEYS)}"
            )
        if "algorithm" not in data:
            raise GraphValidationError("Scenario must define an 'algorithm'.")
        algorithm = Algorithm.from_string(data["algorithm"])

        if "target" in data and "sink" in data and data["target"] != data["sink"]:
            raise GraphValidationError("'target' and 'sink' must not disagree.")
        target = data.get("target", data.get("sink"))

        scenario = cls(
            algorithm=algorithm,
            nodes=_load_nodes(data.get("nodes")),
            edges=_load_edges(data.get("edges"), algorithm),
            source=_as_node_id(data.get("source")),
            target=_as_node_id(target),
            name=data.get("name"),
        )
        cls._logger.debug(
            "Loaded scenario %r: %d nodes, %d edges",
            scenario.name,
            len(scenario.nodes),
            len(scenario.edges),
        )
        return scenario

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Scenario":
        """Read and parse a YAML scenario file."""
        path = Path(path)
        scenario = cls.from_yaml(path.read_text(encoding="utf-8"))
        if scenario.name is None:
            scenario.name = path.stem
        return scenario


def _load_nodes(section: Any) -> List[str]:
    if section is None:
        return []
    if isinstance(section, str):
        return parse_nodes(section)
    if isinstance(section, list):
        return [_as_node_id(node) for node in section]
    raise GraphValidationError("'nodes' must be a list or a comma-separated string")


def _load_edges(section: Any, algorithm: Algorithm) -> List[Edge]:
    if section is None:
        return []
    if isinstance(section, str):
        return parse_edges(section, algorithm)
    if not isinstance(section, list):
        raise GraphValidationError("'edges' must be a list or an edge-list text block")

    edges: List[Edge] = []
    for index, entry in enumerate(section):
        if isinstance(entry, Mapping):
            entry = dict(entry)
            for key in ("source", "target"):
                if key in entry:
                    entry[key] = _as_node_id(entry[key])
        elif isinstance(entry, list):
            if len(entry) != 3:
                raise MalformedEdgeError(
                    f"Edge #{index}: expected [source, target, value], got {entry!r}"
                )
            entry = (_as_node_id(entry[0]), _as_node_id(entry[1]), entry[2])
        edges.append(coerce_edge(entry, algorithm.weight_field, index))
    return edges
