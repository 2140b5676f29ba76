"""
WEIGHTGRAPH CORE - Central exports for core functionality.

This module provides access to:
- Graph construction (create_graph, Graph, Ok/Err results)
- Structural validation (StructureValidator, validate_shape)
- Cost strategies (CostStrategy, WeightResolver)
- The distance index and path resolution
"""

# Data model
from core.ontology import NO_WEIGHT, ViolationKind, WeightMode
from core.schemas import (
    Node,
    Edge,
    GraphStructure,
    DistanceEntry,
    validate_shape,
    parse_structure,
)

# Validation
from core.results import Ok, Err, ValidationFailure, Violation
from core.structure_validator import (
    StructureValidator,
    Valid,
    Invalid,
    validate_structure,
)

# Graph
from core.errors import (
    GraphError,
    NodeNotFoundError,
    InvalidWeightError,
    GraphValidationError,
)
from core.graph_model import GraphModel, ByName, ByValue
from core.weights import (
    CostStrategy,
    CallableCostStrategy,
    DefaultCostStrategy,
    UnitCostStrategy,
    WeightResolver,
    parse_weight_mode,
)
from core.distance_index import DistanceIndex
from core.path_resolver import PathResolver
from core.graph import Graph, create_graph, create_graph_from_structure

__all__ = [
    # Data model
    "NO_WEIGHT",
    "ViolationKind",
    "WeightMode",
    "Node",
    "Edge",
    "GraphStructure",
    "DistanceEntry",
    "validate_shape",
    "parse_structure",
    # Validation
    "Ok",
    "Err",
    "ValidationFailure",
    "Violation",
    "StructureValidator",
    "Valid",
    "Invalid",
    "validate_structure",
    # Graph
    "GraphModel",
    "GraphError",
    "NodeNotFoundError",
    "InvalidWeightError",
    "GraphValidationError",
    "ByName",
    "ByValue",
    "CostStrategy",
    "CallableCostStrategy",
    "DefaultCostStrategy",
    "UnitCostStrategy",
    "WeightResolver",
    "parse_weight_mode",
    "DistanceIndex",
    "PathResolver",
    "Graph",
    "create_graph",
    "create_graph_from_structure",
]
