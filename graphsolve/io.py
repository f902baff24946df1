"""Parsers for the plain-text node and edge formats.

Nodes are written as a comma-separated list (``"A, B, C"``). Edges are written
one per line as ``SOURCE TARGET VALUE``; the value becomes the capacity, cost
or distance of the edge depending on the algorithm.
"""

from __future__ import annotations

import re
from typing import List, Union

from graphsolve.errors import MalformedEdgeError
from graphsolve.types.base import Algorithm, Weight
from graphsolve.types.dto import Edge

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_nodes(text: str) -> List[str]:
    """Split a comma-separated node list, trimming items and dropping blanks.

    Examples:
        >>> parse_nodes(" A, B,,C ")
        ['A', 'B', 'C']
    """
    return [item.strip() for item in text.split(",") if item.strip()]


def parse_number(token: str) -> Weight:
    """Parse a plain decimal integer or float.

    Only ASCII digits, an optional sign, decimal point and exponent are
    accepted. Python literal extras such as ``1_000``, ``inf`` or ``nan`` are
    not numbers in the edge format.

    Raises:
        ValueError: If the token is not numeric.
    """
    if _INTEGER.fullmatch(token):
        return int(token)
    if _DECIMAL.fullmatch(token):
        return float(token)
    raise ValueError(f"Not a number: {token!r}")


def parse_edges(text: str, algorithm: Union[Algorithm, str]) -> List[Edge]:
    """Parse an edge list with one ``SOURCE TARGET VALUE`` line per edge.

    Blank lines are skipped and surrounding whitespace is ignored.

    Args:
        text: Edge list text.
        algorithm: Algorithm (or its name) that decides which edge field
            receives the value.

    Returns:
        Edges in line order.

    Raises:
        MalformedEdgeError: If a line does not have exactly three tokens or the
            value is not a number. The message names the 1-based line number.
        UnknownAlgorithmError: If ``algorithm`` is an unknown name.
    """
    if not isinstance(algorithm, Algorithm):
        algorithm = Algorithm.from_string(algorithm)
    field = algorithm.weight_field

    edges: List[Edge] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        tokens = line.split()
        if len(tokens) != 3:
            raise MalformedEdgeError(f"Invalid edge format on line {lineno}: '{line}'")
        source, target, value = tokens
        try:
            weight = parse_number(value)
        except ValueError:
            raise MalformedEdgeError(
                f"Invalid edge value on line {lineno}: '{value}' is not a number"
            ) from None
        edges.append(Edge(source, target, **{field: weight}))
    return edges
