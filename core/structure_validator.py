"""
WEIGHTGRAPH STRUCTURE VALIDATOR - The Gatekeeper

This module enforces the physics of a graph description. If the
structure is invalid, it is rejected BEFORE any graph is built.

Checks Implemented (run in this order):
1. Shape: raw input matches the declared Node/Edge/GraphStructure contract
2. Node-name uniqueness: no two nodes share a name
3. Edge-name uniqueness: no two edges share a name
4. Referential integrity: every edge endpoint names a declared node

Design Philosophy:
- Each check collects EVERY offending identifier, so a caller can fix
  all problems of that kind in one pass
- The first check that finds anything stops the sequence (there is no
  point checking edge endpoints against an invalid node set)
- Pure: no side effects, no logging
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from core.ontology import (
    FAILURE_MESSAGES,
    MISSING_STRUCTURE_MESSAGE,
    ViolationKind,
)
from core.results import ValidationFailure, Violation
from core.schemas import Edge, GraphStructure, check_shape


# =============================================================================
# VALIDATION RESULTS
# =============================================================================

@dataclass(frozen=True)
class Valid:
    """The description passed every check; carries the typed structure."""
    structure: GraphStructure

    @property
    def valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """The description failed; carries the failure of the first failing check."""
    failure: ValidationFailure

    @property
    def valid(self) -> bool:
        return False


ValidationResult = Union[Valid, Invalid]


# =============================================================================
# STRUCTURE VALIDATOR
# =============================================================================

class StructureValidator:
    """
    Structural validators for graph descriptions.

    The individual checks are static so they can be reused on their own;
    validate() runs them in sequence.
    """

    @staticmethod
    def find_duplicate_names(items: Iterable[Any]) -> List[str]:
        """
        Collect every `name` that appears more than once.

        Each duplicated name is listed exactly once, in the order its
        second occurrence was seen.
        """
        seen = set()
        doubles: Dict[str, None] = {}
        for item in items:
            if item.name in seen:
                doubles[item.name] = None
            else:
                seen.add(item.name)
        return list(doubles)

    @staticmethod
    def find_hanging_edges(node_names: Iterable[str], edges: Sequence[Edge]) -> List[str]:
        """
        Find edges whose `from` or `to` does not name a declared node.

        Returns:
            Names of the offending edges, in declaration order
        """
        known = set(node_names)
        return [
            edge.name for edge in edges
            if edge.from_ not in known or edge.to not in known
        ]

    @staticmethod
    def _fail(kind: ViolationKind, details: List[Any], message: Optional[str] = None) -> Invalid:
        return Invalid(ValidationFailure(
            message=message or FAILURE_MESSAGES[kind],
            violations=[Violation(kind=kind, details=details)],
        ))

    @staticmethod
    def validate(raw: Any) -> ValidationResult:
        """
        Run all structural checks over a raw graph description.

        Args:
            raw: Mapping with `nodes` and `edges`, or a GraphStructure

        Returns:
            Valid(structure) or Invalid(failure)
        """
        # 1. Shape
        structure, shape_violations = check_shape(raw)
        if shape_violations:
            message = MISSING_STRUCTURE_MESSAGE if raw is None else None
            return StructureValidator._fail(
                ViolationKind.SHAPE_VIOLATION, shape_violations, message
            )

        # 2. Node-name uniqueness
        doubles = StructureValidator.find_duplicate_names(structure.nodes)
        if doubles:
            return StructureValidator._fail(ViolationKind.DUPLICATE_NODE_NAME, doubles)

        # 3. Edge-name uniqueness
        doubles = StructureValidator.find_duplicate_names(structure.edges)
        if doubles:
            return StructureValidator._fail(ViolationKind.DUPLICATE_EDGE_NAME, doubles)

        # 4. Referential integrity
        hanging = StructureValidator.find_hanging_edges(
            (node.name for node in structure.nodes), structure.edges
        )
        if hanging:
            return StructureValidator._fail(ViolationKind.HANGING_EDGE, hanging)

        return Valid(structure)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def validate_structure(raw: Any) -> ValidationResult:
    """Convenience function to validate a graph description."""
    return StructureValidator.validate(raw)


def is_valid_structure(raw: Any) -> bool:
    """Quick check if a graph description passes every structural check."""
    return StructureValidator.validate(raw).valid
