"""
WEIGHTGRAPH GRAPH MODEL - The Validated Container

Holds a validated graph description and answers lookup and adjacency
queries over it. Built on rustworkx, with the same bridge pattern as a
name-keyed graph database:

  Python Layer (Business Logic)
  - Uses node names: "A", "B"
  - Calls: model.outbound_edges("A"), model.is_terminal(node)

  Bridge Layer (This File)
  - _node_map: Dict[str, int]  (name -> index)
  - _edge_pos: Dict[str, int]  (edge name -> declaration position)

  Rust Layer (rustworkx.PyDiGraph)
  - Uses integer indices; out_edges / in_edges / out_degree

The model is immutable: there are no add/remove/update methods. Any
structural change means building a new model.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union
import logging

import rustworkx as rx

from core.errors import NodeNotFoundError
from core.ontology import WeightMode
from core.schemas import Edge, GraphStructure, Node

logger = logging.getLogger(__name__)


# =============================================================================
# NODE REFERENCES
# =============================================================================

@dataclass(frozen=True)
class ByName:
    """Reference a node by its name."""
    name: str


@dataclass(frozen=True)
class ByValue:
    """Reference a node by a Node value (matched on its name)."""
    node: Node

    @property
    def name(self) -> str:
        return self.node.name


NodeRef = Union[str, Node, ByName, ByValue]


def as_node_ref(ref: NodeRef) -> Union[ByName, ByValue]:
    """Normalise a plain name or Node into an explicit reference."""
    if isinstance(ref, (ByName, ByValue)):
        return ref
    if isinstance(ref, str):
        return ByName(ref)
    if isinstance(ref, Node):
        return ByValue(ref)
    raise TypeError(f"Expected a node name or Node, got {type(ref).__name__}")


# =============================================================================
# GRAPH MODEL
# =============================================================================

class GraphModel:
    """
    Immutable, validated container of nodes and edges.

    Construct only from a GraphStructure that already passed the
    StructureValidator; the model does not re-check uniqueness or
    referential integrity.

    Thread Safety:
        Read-only after __init__, so concurrent queries need no locking.
    """

    def __init__(
        self,
        structure: GraphStructure,
        directed: bool = False,
        weight_mode: WeightMode = WeightMode.UNWEIGHTED,
    ):
        self._nodes: Tuple[Node, ...] = tuple(structure.nodes)
        self._edges: Tuple[Edge, ...] = tuple(structure.edges)
        self._directed = bool(directed)
        self._weight_mode = weight_mode

        # Multigraph: parallel edges between the same pair are distinct by name
        self._graph: rx.PyDiGraph = rx.PyDiGraph(multigraph=True)

        indices = self._graph.add_nodes_from(list(self._nodes))
        self._node_map: Dict[str, int] = {
            node.name: idx for node, idx in zip(self._nodes, indices)
        }
        self._edge_map: Dict[str, Edge] = {edge.name: edge for edge in self._edges}
        self._edge_pos: Dict[str, int] = {
            edge.name: pos for pos, edge in enumerate(self._edges)
        }

        self._graph.add_edges_from([
            (self._node_map[edge.from_], self._node_map[edge.to], edge)
            for edge in self._edges
        ])

        logger.debug(
            "Graph model built: %d nodes, %d edges, directed=%s, mode=%s",
            len(self._nodes), len(self._edges), self._directed, self._weight_mode.value,
        )

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """Nodes in declaration order."""
        return self._nodes

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Edges in declaration order."""
        return self._edges

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weight_mode(self) -> WeightMode:
        return self._weight_mode

    @property
    def weighted(self) -> bool:
        return self._weight_mode == WeightMode.WEIGHTED

    @property
    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return self._graph.num_edges()

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def get_node(self, name: str) -> Optional[Node]:
        """Look up a node by name; None if absent."""
        idx = self._node_map.get(name)
        if idx is None:
            return None
        return self._graph[idx]

    def get_edge(self, name: str) -> Optional[Edge]:
        """Look up an edge by name; None if absent."""
        return self._edge_map.get(name)

    def has_node(self, name: str) -> bool:
        """Check if a node exists."""
        return name in self._node_map

    def resolve(self, ref: NodeRef) -> Node:
        """
        Resolve any node reference to the graph's own Node.

        Raises:
            NodeNotFoundError: If no declared node has that name
            TypeError: If `ref` is not a name, Node, ByName or ByValue
        """
        name = as_node_ref(ref).name
        node = self.get_node(name)
        if node is None:
            raise NodeNotFoundError(name)
        return node

    # =========================================================================
    # ADJACENCY
    # =========================================================================

    def _ordered(self, edge_list) -> Tuple[Edge, ...]:
        edges = [data for _, _, data in edge_list]
        edges.sort(key=lambda e: self._edge_pos[e.name])
        return tuple(edges)

    def outbound_edges(self, ref: NodeRef) -> Tuple[Edge, ...]:
        """
        Edges whose `from` is the referenced node, in declaration order.

        Raises:
            NodeNotFoundError: If the reference does not resolve
        """
        node = self.resolve(ref)
        return self._ordered(self._graph.out_edges(self._node_map[node.name]))

    def inbound_edges(self, ref: NodeRef) -> Tuple[Edge, ...]:
        """
        Edges whose `to` is the referenced node, in declaration order.

        Raises:
            NodeNotFoundError: If the reference does not resolve
        """
        node = self.resolve(ref)
        return self._ordered(self._graph.in_edges(self._node_map[node.name]))

    def is_terminal(self, ref: NodeRef) -> bool:
        """True if the referenced node has no outbound edges."""
        node = self.resolve(ref)
        return self._graph.out_degree(self._node_map[node.name]) == 0

    # =========================================================================
    # INTERNAL UTILITIES
    # =========================================================================

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        """Return number of nodes."""
        return self.node_count

    def __contains__(self, name: str) -> bool:
        """Check if node exists."""
        return name in self._node_map

    def __repr__(self) -> str:
        return f"GraphModel(nodes={self.node_count}, edges={self.edge_count}, directed={self._directed})"
