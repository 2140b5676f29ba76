"""
WEIGHTGRAPH ONTOLOGY - The Dictionary of the System

If schemas.py is the Grammar (how a graph description is shaped),
ontology.py is the Dictionary (the words we can use to talk about it).

This module defines:
- ViolationKind: every way a graph description or query can be rejected
- WeightMode: whether edge costs are consulted at all
- NO_WEIGHT: the sentinel returned when no weight applies

DESIGN PHILOSOPHY (Physics vs Policy):
- PHYSICS: An edge cannot point at a node that was never declared
- POLICY: What an edge "costs" is up to the caller's strategy

This module encodes the vocabulary for both.
"""
from enum import Enum


# =============================================================================
# SENTINELS
# =============================================================================

# Returned by path-weight queries on unweighted graphs and for unreachable targets
NO_WEIGHT = -1


# =============================================================================
# ENUMS (The Vocabulary)
# =============================================================================

class ViolationKind(str, Enum):
    """Kinds of failures, construction-time and query-time."""
    # Construction-time (aggregated into a ValidationFailure)
    SHAPE_VIOLATION = "ShapeViolation"          # Raw input does not match the shape contract
    DUPLICATE_NODE_NAME = "DuplicateNodeName"   # Two or more nodes share a name
    DUPLICATE_EDGE_NAME = "DuplicateEdgeName"   # Two or more edges share a name
    HANGING_EDGE = "HangingEdge"                # Edge endpoint names an undeclared node
    # Query-time (raised as exceptions)
    INVALID_WEIGHT = "InvalidWeight"            # Cost did not resolve to a finite number
    NODE_NOT_FOUND = "NodeNotFound"             # Node reference does not resolve


class WeightMode(str, Enum):
    """Whether edge weights are consulted."""
    UNWEIGHTED = "unweighted"
    WEIGHTED = "weighted"


FAILURE_MESSAGES = {
    ViolationKind.SHAPE_VIOLATION: "Error validating graph structure on creation",
    ViolationKind.DUPLICATE_NODE_NAME: "Node names must be unique",
    ViolationKind.DUPLICATE_EDGE_NAME: "Edge names must be unique",
    ViolationKind.HANGING_EDGE: "Edges must point to existing nodes",
}

MISSING_STRUCTURE_MESSAGE = "Graph constructor should be provided with structure argument"
