"""
WEIGHTGRAPH ERRORS - Exception hierarchy

One base error with specific subclasses carrying context attributes.
Depends only on the ontology, so every other core module can import it.
"""
from typing import Any

from core.ontology import ViolationKind


class GraphError(Exception):
    """Base exception for graph operations."""
    pass


class NodeNotFoundError(GraphError):
    """Raised when a node reference does not resolve to a declared node."""
    kind = ViolationKind.NODE_NOT_FOUND

    def __init__(self, node_name: str):
        self.node_name = node_name
        super().__init__(f"Node not found: {node_name}")


class InvalidWeightError(GraphError):
    """Raised when an edge's cost does not resolve to a finite, non-negative number."""
    kind = ViolationKind.INVALID_WEIGHT

    def __init__(self, edge_name: str, weight: Any, reason: str = "not a number"):
        self.edge_name = edge_name
        self.weight = weight
        self.reason = reason
        super().__init__(f"Invalid weight on edge {edge_name!r}: {weight!r} ({reason})")


class GraphValidationError(GraphError):
    """Raised when unwrapping a failed construction result."""
    def __init__(self, failure):
        self.failure = failure
        super().__init__(getattr(failure, "message", str(failure)))
