"""
WEIGHTGRAPH GRAPH - The Public Face

Ties the pieces together:

    raw structure --StructureValidator--> GraphStructure
                  --GraphModel---------> lookups / adjacency
                  --WeightResolver-----> per-edge cost
                  --DistanceIndex------> per-node resolved neighbors
                  --PathResolver-------> weight_of_path / shortest_path

Usage:
    result = create_graph(
        {"nodes": [{"name": "A"}, {"name": "B"}],
         "edges": [{"name": "A->B", "from": "A", "to": "B", "weight": 10}]},
        directed=True,
        weighted=True,
    )
    if result.is_ok:
        graph = result.value
        graph.weight_of_path("A", "B")   # 10
    else:
        print(result.error.to_dict())
"""
from typing import Any, Tuple, Union
import logging

from core.distance_index import DistanceIndex
from core.graph_model import GraphModel, NodeRef
from core.ontology import WeightMode
from core.path_resolver import PathResolver
from core.results import Err, Ok, ValidationFailure
from core.schemas import Edge, GraphStructure, Node
from core.structure_validator import Invalid, StructureValidator
from core.weights import Cost, CostStrategy, WeightResolver, parse_weight_mode

logger = logging.getLogger(__name__)


class Graph:
    """
    A validated, immutable graph with a prebuilt distance index.

    Do not instantiate directly; use create_graph(), which never hands
    out a Graph for an invalid structure.
    """

    def __init__(self, model: GraphModel, resolver: WeightResolver, index: DistanceIndex):
        self._model = model
        self._resolver = resolver
        self._index = index
        self._paths = PathResolver(model, index)

    @classmethod
    def from_config(cls, structure: Any, config) -> Union[Ok["Graph"], Err[ValidationFailure]]:
        """Build from a GraphConfig (directed / weighted flags)."""
        return create_graph(structure, directed=config.directed, weighted=config.weighted)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._model.nodes

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._model.edges

    @property
    def directed(self) -> bool:
        return self._model.directed

    @property
    def weight_mode(self) -> WeightMode:
        return self._model.weight_mode

    @property
    def weighted(self) -> bool:
        return self._model.weighted

    @property
    def distance_index(self) -> DistanceIndex:
        """The read-only per-node neighbor/cost index."""
        return self._index

    @property
    def weight_resolver(self) -> WeightResolver:
        return self._resolver

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_node(self, name: str):
        return self._model.get_node(name)

    def get_edge(self, name: str):
        return self._model.get_edge(name)

    def outbound_edges(self, ref: NodeRef) -> Tuple[Edge, ...]:
        return self._model.outbound_edges(ref)

    def inbound_edges(self, ref: NodeRef) -> Tuple[Edge, ...]:
        return self._model.inbound_edges(ref)

    def is_terminal(self, ref: NodeRef) -> bool:
        return self._model.is_terminal(ref)

    def weight_of_path(self, source: NodeRef, target: NodeRef) -> Cost:
        return self._paths.weight_of_path(source, target)

    def shortest_path(self, source: NodeRef, target: NodeRef) -> Tuple[str, ...]:
        return self._paths.shortest_path(source, target)

    def __len__(self) -> int:
        return len(self._model)

    def __contains__(self, name: str) -> bool:
        return name in self._model

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={self._model.node_count}, edges={self._model.edge_count}, "
            f"directed={self.directed}, mode={self.weight_mode.value})"
        )


# =============================================================================
# FACTORY FUNCTIONS
# =============================================================================

def create_graph(
    structure: Any,
    directed: bool = False,
    weighted: Any = False,
) -> Union[Ok[Graph], Err[ValidationFailure]]:
    """
    Validate a graph description and build a Graph from it.

    Args:
        structure: {"nodes": [...], "edges": [...]} or a GraphStructure
        directed: Whether edges are one-way
        weighted: Falsy (False, None, "", 0) for unweighted; a CostStrategy,
            a calculator callable, or anything carrying a `calculator`
            for a custom cost; any other value for the raw numeric weight

    Returns:
        Ok(Graph), or Err(ValidationFailure) listing every offending
        identifier of the first check that failed

    Raises:
        InvalidWeightError: If a weighted edge's cost does not resolve
        Exception: Whatever a custom calculator raises, unchanged
    """
    result = StructureValidator.validate(structure)
    if isinstance(result, Invalid):
        logger.debug("Graph structure rejected: %s", result.failure.kinds[0].value)
        return Err(result.failure)

    mode, strategy = parse_weight_mode(weighted)
    model = GraphModel(result.structure, directed=directed, weight_mode=mode)
    resolver = WeightResolver.for_mode(mode, strategy)
    index = DistanceIndex.build(model, resolver)

    return Ok(Graph(model, resolver, index))


def create_graph_from_structure(
    structure: GraphStructure,
    directed: bool = False,
    weighted: Union[bool, CostStrategy] = False,
) -> Graph:
    """
    Build a Graph, raising GraphValidationError instead of returning Err.

    For callers that treat an invalid structure as a programming error.
    """
    return create_graph(structure, directed=directed, weighted=weighted).unwrap()
