"""
Unit tests for core/distance_index.py - DistanceIndex
"""
import logging

import polars as pl
import pytest

from core.distance_index import DistanceIndex
from core.errors import InvalidWeightError, NodeNotFoundError
from core.graph_model import GraphModel
from core.ontology import WeightMode
from core.schemas import DistanceEntry, parse_structure
from core.weights import CallableCostStrategy, WeightResolver


def _build(structure, directed=True, strategy=None, mode=WeightMode.WEIGHTED):
    model = GraphModel(parse_structure(structure), directed=directed, weight_mode=mode)
    return DistanceIndex.build(model, WeightResolver.for_mode(mode, strategy))


def test_every_node_gets_a_bucket(chain_structure):
    """
    Validate that nodes without outbound edges get an empty bucket,
    not a missing entry.
    """
    index = _build(chain_structure)

    assert list(index) == ["A", "B", "C", "D"]
    assert index["C"] == ()
    assert index["D"] == ()


def test_buckets_hold_resolved_direct_costs(diamond_structure):
    index = _build(diamond_structure)

    assert index["A"] == (DistanceEntry("B", 1), DistanceEntry("C", 4))
    assert index["B"] == (DistanceEntry("C", 2), DistanceEntry("D", 5))
    assert index.neighbors("C") == ("D",)


def test_index_is_direct_edges_only(chain_structure):
    """No multi-hop entries are precomputed."""
    index = _build(chain_structure)

    assert index.cost("A", "B") == 3
    assert index.cost("A", "C") is None


def test_custom_strategy_used_for_costs():
    structure = {
        "nodes": [{"name": "A"}, {"name": "B"}],
        "edges": [{"name": "A->B", "from": "A", "to": "B", "weight": {"age": 3, "height": 5}}],
    }
    strategy = CallableCostStrategy(lambda e: e.weight["age"] + 2 + e.weight["height"])

    index = _build(structure, strategy=strategy)

    assert index.cost("A", "B") == 10


def test_undirected_index_holds_outbound_edges_only(chain_structure):
    """
    Validate that `directed` does not change the index.

    Verifies:
    - Buckets match the directed build entry for entry
    - C (no outbound edges) keeps an empty bucket
    """
    index = _build(chain_structure, directed=False)

    assert index.as_dict() == _build(chain_structure, directed=True).as_dict()
    assert index["B"] == (DistanceEntry("C", 4),)
    assert index["C"] == ()


def test_undirected_self_loop_indexed_once():
    index = _build({
        "nodes": [{"name": "A"}],
        "edges": [{"name": "loop", "from": "A", "to": "A", "weight": 2}],
    }, directed=False)

    assert index["A"] == (DistanceEntry("A", 2),)


def test_unweighted_index_uses_unit_costs():
    """Weights are never consulted in unweighted mode, even if malformed."""
    index = _build({
        "nodes": [{"name": "A"}, {"name": "B"}],
        "edges": [{"name": "A->B", "from": "A", "to": "B", "weight": "heavy"}],
    }, mode=WeightMode.UNWEIGHTED)

    assert index["A"] == (DistanceEntry("B", 1),)


def test_invalid_weight_raises_at_build():
    with pytest.raises(InvalidWeightError) as exc_info:
        _build({
            "nodes": [{"name": "A"}, {"name": "B"}],
            "edges": [{"name": "A->B", "from": "A", "to": "B", "weight": "heavy"}],
        })

    assert exc_info.value.edge_name == "A->B"


def test_unknown_bucket_raises(chain_structure):
    index = _build(chain_structure)

    with pytest.raises(NodeNotFoundError):
        index.bucket("Z")
    assert "Z" not in index


def test_index_is_read_only(chain_structure):
    index = _build(chain_structure)

    with pytest.raises(TypeError):
        index._buckets["A"] = ()


def test_as_dict_snapshot(chain_structure):
    index = _build(chain_structure)

    assert index.as_dict() == {
        "A": [{"B": 3}],
        "B": [{"C": 4}],
        "C": [],
        "D": [],
    }


def test_build_logs_index_at_debug(chain_structure, caplog):
    with caplog.at_level(logging.DEBUG, logger="core.distance_index"):
        _build(chain_structure)

    assert any("Distance index built" in r.getMessage() for r in caplog.records)


def test_to_polars(diamond_structure):
    """
    Validate the Polars export: one row per entry, empty buckets omitted.
    """
    df = _build(diamond_structure).to_polars()

    assert isinstance(df, pl.DataFrame)
    assert df.columns == ["node", "neighbor", "cost"]
    assert df.height == 5
    assert df.filter(pl.col("node") == "A")["neighbor"].to_list() == ["B", "C"]


def test_to_polars_empty_index():
    df = _build({"nodes": [{"name": "A"}]}).to_polars()

    assert df.height == 0
    assert df.schema["cost"] == pl.Float64
