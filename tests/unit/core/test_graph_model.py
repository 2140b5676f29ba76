"""
Unit tests for core/graph_model.py - GraphModel

Tests the validated container:
- Node and edge lookup
- Outbound/inbound adjacency in declaration order
- NodeRef polymorphism (name, Node, ByName, ByValue)
- Terminal-node detection
- Error handling for unknown references
"""
import pytest

from core.errors import NodeNotFoundError
from core.graph_model import (
    ByName,
    ByValue,
    GraphModel,
    as_node_ref,
)
from core.ontology import WeightMode
from core.schemas import Node, parse_structure


@pytest.fixture
def model(diamond_structure):
    return GraphModel(parse_structure(diamond_structure), directed=True)


# =============================================================================
# LOOKUP TESTS
# =============================================================================

def test_get_node_returns_node(model):
    assert model.get_node("B") == Node(name="B")


def test_get_node_absent_returns_none(model):
    """An unknown name is "not found", not an error."""
    assert model.get_node("Z") is None


def test_get_edge_returns_edge(model):
    edge = model.get_edge("B->C")

    assert edge.from_ == "B"
    assert edge.to == "C"
    assert edge.weight == 2


def test_get_edge_absent_returns_none(model):
    assert model.get_edge("nope") is None


def test_counts_and_containment(model):
    assert model.node_count == 4
    assert model.edge_count == 5
    assert len(model) == 4
    assert "A" in model
    assert "Z" not in model
    assert model.has_node("D")


def test_defaults_are_undirected_unweighted(two_node_structure):
    model = GraphModel(parse_structure(two_node_structure))

    assert model.directed is False
    assert model.weight_mode == WeightMode.UNWEIGHTED
    assert model.weighted is False


# =============================================================================
# ADJACENCY TESTS
# =============================================================================

def test_outbound_edges_in_declaration_order(model):
    """
    Validate that outbound edges come back in declaration order.

    Verifies:
    - A has A->B then A->C
    - B has B->C then B->D
    """
    assert [e.name for e in model.outbound_edges("A")] == ["A->B", "A->C"]
    assert [e.name for e in model.outbound_edges("B")] == ["B->C", "B->D"]


def test_inbound_edges_in_declaration_order(model):
    assert [e.name for e in model.inbound_edges("C")] == ["A->C", "B->C"]
    assert [e.name for e in model.inbound_edges("D")] == ["C->D", "B->D"]
    assert model.inbound_edges("A") == ()


def test_parallel_edges_are_kept():
    """Two edges between the same pair are distinct by name."""
    model = GraphModel(parse_structure({
        "nodes": [{"name": "A"}, {"name": "B"}],
        "edges": [
            {"name": "slow", "from": "A", "to": "B", "weight": 9},
            {"name": "fast", "from": "A", "to": "B", "weight": 1},
        ],
    }))

    assert [e.name for e in model.outbound_edges("A")] == ["slow", "fast"]


def test_self_loop_is_outbound_and_inbound():
    model = GraphModel(parse_structure({
        "nodes": [{"name": "A"}],
        "edges": [{"name": "loop", "from": "A", "to": "A", "weight": 1}],
    }))

    assert [e.name for e in model.outbound_edges("A")] == ["loop"]
    assert [e.name for e in model.inbound_edges("A")] == ["loop"]
    assert not model.is_terminal("A")


@pytest.mark.parametrize("ref", [
    "A",
    Node(name="A"),
    ByName("A"),
    ByValue(Node(name="A")),
])
def test_node_ref_forms_agree(model, ref):
    """
    Validate that every NodeRef form resolves to the same result.
    """
    assert [e.name for e in model.outbound_edges(ref)] == ["A->B", "A->C"]
    assert model.inbound_edges(ref) == ()
    assert model.is_terminal(ref) is False


def test_is_terminal(model):
    assert model.is_terminal("D")
    assert not model.is_terminal("A")


def test_outbound_edges_unknown_node_raises(model):
    """
    Validate that adjacency queries on an unknown node raise NodeNotFoundError.
    """
    with pytest.raises(NodeNotFoundError) as exc_info:
        model.outbound_edges("Z")

    assert exc_info.value.node_name == "Z"


def test_node_value_not_in_graph_raises(model):
    with pytest.raises(NodeNotFoundError):
        model.inbound_edges(Node(name="Z"))


def test_as_node_ref_rejects_other_types():
    with pytest.raises(TypeError):
        as_node_ref(42)


def test_resolve_returns_graph_owned_node(model):
    """A ByValue reference resolves to the graph's own Node."""
    outside = Node(name="C")
    resolved = model.resolve(outside)

    assert resolved == outside
    assert resolved is model.get_node("C")


def test_model_has_no_mutators(model):
    """The model exposes no way to add or remove nodes or edges."""
    for name in ("add_node", "add_edge", "remove_node", "remove_edge", "update_node"):
        assert not hasattr(model, name)
    assert isinstance(model.nodes, tuple)
    assert isinstance(model.edges, tuple)
