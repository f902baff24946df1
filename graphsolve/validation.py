"""Fail-fast input checks shared by the graph solvers.

Every solver calls into this module before touching the graph, so invalid
input never produces a partial computation.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from graphsolve.errors import (
    EmptyGraphError,
    GraphValidationError,
    MalformedEdgeError,
    MissingEndpointError,
    UnknownNodeError,
)
from graphsolve.types.base import WEIGHT_FIELDS, NodeID
from graphsolve.types.dto import Edge


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def normalize_nodes(nodes: Iterable[NodeID], *, allow_empty: bool = False) -> List[NodeID]:
    """Return declared nodes in order with duplicates collapsed.

    Args:
        nodes: Node identifiers in caller order.
        allow_empty: Accept an empty sequence instead of raising.

    Returns:
        Unique node identifiers, first occurrence wins.

    Raises:
        EmptyGraphError: If no nodes were given and ``allow_empty`` is False.
        GraphValidationError: If an identifier is None or an empty string.
    """
    unique = list(dict.fromkeys(nodes))
    for node in unique:
        if _is_blank(node):
            raise GraphValidationError(f"Invalid node identifier: {node!r}")
    if not unique and not allow_empty:
        raise EmptyGraphError("At least one node is required.")
    return unique


def require_endpoint(role: str, node: Optional[NodeID], declared: Sequence[NodeID]) -> None:
    """Check that an endpoint is given and declared.

    Args:
        role: Human-readable role used in error messages ("source", "sink", ...).
        node: The endpoint supplied by the caller.
        declared: Normalized node list.

    Raises:
        MissingEndpointError: If the endpoint is None or blank.
        UnknownNodeError: If the endpoint is not in ``declared``.
    """
    if _is_blank(node):
        raise MissingEndpointError(f"A {role} node is required.")
    if node not in declared:
        raise UnknownNodeError(f"{role.capitalize()} node '{node}' is not a declared node.")


def check_weight(value: Any, where: str) -> None:
    """Reject weights that are not finite non-negative numbers.

    Raises:
        MalformedEdgeError: If the value is not usable as a weight.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedEdgeError(f"{where}: weight {value!r} is not a number.")
    if math.isnan(value) or math.isinf(value):
        raise MalformedEdgeError(f"{where}: weight {value!r} is not finite.")
    if value < 0:
        raise MalformedEdgeError(f"{where}: negative weight {value!r} is not supported.")


def coerce_edge(obj: Any, weight_field: str, index: int = 0) -> Edge:
    """Turn an edge description into an ``Edge``.

    Accepted forms:
      - an ``Edge`` instance (returned unchanged);
      - a mapping with ``source``, ``target`` and any of ``cost``,
        ``distance``, ``capacity`` or ``weight``;
      - a ``(source, target, weight)`` sequence.

    A bare ``weight`` (mapping key or third tuple item) is stored under
    ``weight_field``.

    Args:
        obj: Edge description.
        weight_field: Field that receives a bare weight.
        index: Position in the input, used in error messages.

    Returns:
        The coerced edge.

    Raises:
        MalformedEdgeError: If the description cannot be interpreted.
    """
    if isinstance(obj, Edge):
        return obj
    where = f"Edge #{index}"
    if isinstance(obj, Mapping):
        if "source" not in obj or "target" not in obj:
            raise MalformedEdgeError(f"{where}: missing 'source' or 'target' in {dict(obj)!r}.")
        fields = {name: obj[name] for name in WEIGHT_FIELDS if obj.get(name) is not None}
        if obj.get("weight") is not None:
            fields.setdefault(weight_field, obj["weight"])
        return Edge(obj["source"], obj["target"], **fields)
    if isinstance(obj, (list, tuple)):
        if len(obj) != 3:
            raise MalformedEdgeError(
                f"{where}: expected (source, target, weight), got {len(obj)} items."
            )
        source, target, weight = obj
        return Edge(source, target, **{weight_field: weight})
    raise MalformedEdgeError(f"{where}: unsupported edge description {obj!r}.")


def validate_edges(
    edges: Iterable[Any],
    declared: Sequence[NodeID],
    weight_field: str,
    *,
    prefer: Optional[str] = None,
) -> List[Edge]:
    """Coerce and validate every edge against the declared nodes.

    Args:
        edges: Edge descriptions in caller order.
        declared: Normalized node list.
        weight_field: Field that receives a bare weight during coercion.
        prefer: Weight field the calling algorithm reads first.

    Returns:
        Validated edges in input order.

    Raises:
        MalformedEdgeError: On missing endpoints or unusable weights.
        UnknownNodeError: If an edge endpoint is not declared.
    """
    declared_set = set(declared)
    result: List[Edge] = []
    for index, obj in enumerate(edges):
        edge = coerce_edge(obj, weight_field, index)
        where = f"Edge #{index} ({edge.source!r}->{edge.target!r})"
        if _is_blank(edge.source) or _is_blank(edge.target):
            raise MalformedEdgeError(f"{where}: source and target are required.")
        for endpoint in (edge.source, edge.target):
            if endpoint not in declared_set:
                raise UnknownNodeError(f"{where}: node '{endpoint}' is not declared.")
        try:
            weight = edge.resolve_weight(prefer)
        except MalformedEdgeError as exc:
            raise MalformedEdgeError(f"{where}: {exc}") from None
        check_weight(weight, where)
        result.append(edge)
    return result
