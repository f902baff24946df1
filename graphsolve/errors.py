"""Exceptions raised by graphsolve.

Validation errors derive from ``ValueError`` so callers that already guard
input handling with ``except ValueError`` keep working.
"""

from __future__ import annotations


class GraphValidationError(ValueError):
    """Base class for caller-correctable input problems."""


class EmptyGraphError(GraphValidationError):
    """Raised when an operation needs at least one node and got none."""


class MissingEndpointError(GraphValidationError):
    """Raised when a required source, sink or target is missing or empty."""


class UnknownNodeError(GraphValidationError):
    """Raised when an endpoint or edge references an undeclared node."""


class MalformedEdgeError(GraphValidationError):
    """Raised for edges that lack endpoints or carry an unusable weight."""


class UnknownAlgorithmError(GraphValidationError):
    """Raised when an algorithm name cannot be resolved."""


class IterationLimitError(RuntimeError):
    """Raised when max-flow augmentation exceeds its configured bound."""
