"""
Tagged results for graph construction.

Construction never returns a half-built object: it returns Ok(graph) or
Err(failure), and callers inspect which one they got.
"""
from dataclasses import dataclass, field
from typing import Any, Generic, List, TypeVar, Union

from core.errors import GraphValidationError
from core.ontology import ViolationKind

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Violation:
    """One failed check, with every offending identifier it found."""
    kind: ViolationKind
    details: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class ValidationFailure:
    """Why a graph description was rejected."""
    message: str
    violations: List[Violation]

    @property
    def kinds(self) -> List[ViolationKind]:
        return [v.kind for v in self.violations]

    def to_dict(self) -> dict:
        """Plain-data form: {message, violations: [{kind, details}]}."""
        return {
            "message": self.message,
            "violations": [
                {"kind": v.kind.value, "details": list(v.details)}
                for v in self.violations
            ],
        }


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        """Raise GraphValidationError carrying the failure."""
        raise GraphValidationError(self.error)


Result = Union[Ok[T], Err[E]]
