"""
WEIGHTGRAPH WEIGHTS - Cost Strategies and the Weight Resolver

Turns an edge into a number. How that number is computed is a strategy
chosen once, at graph construction:

- DefaultCostStrategy: the edge's own `weight`, which must already be numeric
- CallableCostStrategy: a caller-supplied calculator over the whole edge
- UnitCostStrategy: every edge costs 1 (unweighted graphs; weights untouched)

The WeightResolver wraps a strategy and enforces that whatever comes out
is a finite, non-negative number.

Usage:
    mode, strategy = parse_weight_mode({"calculator": lambda e: e.weight["km"]})
    resolver = WeightResolver(strategy)
    resolver.resolve(edge)      # bare edge
    resolver.resolve([edge])    # bucket-wrapped edge, same result
"""
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, Optional, Sequence, Tuple, Union
import math
import numbers

from core.errors import InvalidWeightError
from core.ontology import WeightMode
from core.schemas import Edge

Cost = Union[int, float]


# =============================================================================
# COST STRATEGIES
# =============================================================================

class CostStrategy(ABC):
    """Computes the cost of traversing a single edge."""

    @abstractmethod
    def compute_cost(self, edge: Edge) -> Cost:
        raise NotImplementedError


class DefaultCostStrategy(CostStrategy):
    """Use the edge's `weight` field as-is."""

    def compute_cost(self, edge: Edge) -> Cost:
        return edge.weight


class UnitCostStrategy(CostStrategy):
    """Every edge costs one hop. Never reads `weight`."""

    def compute_cost(self, edge: Edge) -> Cost:
        return 1


class CallableCostStrategy(CostStrategy):
    """Adapter for a plain `calculator(edge) -> number` function."""

    def __init__(self, calculator: Callable[[Edge], Cost]):
        self._calculator = calculator

    def compute_cost(self, edge: Edge) -> Cost:
        return self._calculator(edge)

    def __repr__(self) -> str:
        return f"CallableCostStrategy({self._calculator!r})"


# =============================================================================
# WEIGHT MODE PARSING
# =============================================================================

def _is_off(weighted: Any) -> bool:
    if weighted is None or weighted is False or weighted == "":
        return True
    if isinstance(weighted, numbers.Real) and not isinstance(weighted, bool):
        return weighted == 0 or math.isnan(weighted)
    return False


def _find_calculator(weighted: Any) -> Optional[Callable[[Edge], Cost]]:
    if isinstance(weighted, Mapping):
        calculator = weighted.get("calculator")
    else:
        calculator = getattr(weighted, "calculator", None)
    return calculator if callable(calculator) else None


def parse_weight_mode(weighted: Any) -> Tuple[WeightMode, Optional[CostStrategy]]:
    """
    Interpret the `weighted` construction argument.

    - False, None, "", 0, NaN -> (UNWEIGHTED, None)
    - a CostStrategy -> (WEIGHTED, that strategy)
    - a callable, or anything carrying a callable `calculator`
      -> (WEIGHTED, CallableCostStrategy)
    - anything else (True, {}, [], "foo", -1, ...) -> (WEIGHTED, None),
      meaning the default numeric strategy

    Returns:
        (mode, custom strategy or None)
    """
    if _is_off(weighted):
        return WeightMode.UNWEIGHTED, None
    if isinstance(weighted, CostStrategy):
        return WeightMode.WEIGHTED, weighted
    if callable(weighted):
        return WeightMode.WEIGHTED, CallableCostStrategy(weighted)

    calculator = _find_calculator(weighted)
    if calculator is not None:
        return WeightMode.WEIGHTED, CallableCostStrategy(calculator)
    return WeightMode.WEIGHTED, None


# =============================================================================
# WEIGHT RESOLVER
# =============================================================================

EdgeLike = Union[Edge, Sequence[Edge]]


def unwrap_edge(edge: EdgeLike) -> Edge:
    """Accept a bare Edge or a one-element sequence holding one."""
    if isinstance(edge, Edge):
        return edge
    if isinstance(edge, (list, tuple)) and len(edge) == 1 and isinstance(edge[0], Edge):
        return edge[0]
    raise TypeError(f"Expected an Edge or a one-element sequence of Edge, got {edge!r}")


class WeightResolver:
    """
    Resolves an edge to a finite, non-negative cost.

    Strategy faults (exceptions raised inside a custom calculator) are not
    caught here; they reach the caller unchanged.
    """

    def __init__(self, strategy: Optional[CostStrategy] = None):
        self._strategy = strategy if strategy is not None else DefaultCostStrategy()

    @classmethod
    def for_mode(cls, mode: WeightMode, strategy: Optional[CostStrategy] = None) -> "WeightResolver":
        """Build the resolver matching a parsed weight mode."""
        if mode == WeightMode.UNWEIGHTED:
            return cls(UnitCostStrategy())
        return cls(strategy)

    @property
    def strategy(self) -> CostStrategy:
        return self._strategy

    @property
    def is_custom(self) -> bool:
        return not isinstance(self._strategy, (DefaultCostStrategy, UnitCostStrategy))

    def resolve(self, edge: EdgeLike) -> Cost:
        """
        Compute the cost of one edge.

        Raises:
            InvalidWeightError: If the cost is not a finite, non-negative number
            TypeError: If `edge` is neither an Edge nor a one-element bucket
        """
        edge = unwrap_edge(edge)
        cost = self._strategy.compute_cost(edge)

        if isinstance(cost, bool) or not isinstance(cost, numbers.Real):
            raise InvalidWeightError(edge.name, cost, "not a number")
        if not math.isfinite(cost):
            raise InvalidWeightError(edge.name, cost, "not finite")
        if cost < 0:
            raise InvalidWeightError(edge.name, cost, "negative")
        return cost

    def __repr__(self) -> str:
        return f"WeightResolver(strategy={self._strategy!r})"
