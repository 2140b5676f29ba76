"""
Pytest configuration and shared fixtures for the weightgraph test suite.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def two_node_structure():
    """A -> B with a plain numeric weight of 10."""
    return {
        "nodes": [{"name": "A"}, {"name": "B"}],
        "edges": [
            {"name": "A->B", "from": "A", "to": "B", "weight": 10},
        ],
    }


@pytest.fixture
def chain_structure():
    """A -> B (3), B -> C (4), plus a disconnected D."""
    return {
        "nodes": [{"name": "A"}, {"name": "B"}, {"name": "C"}, {"name": "D"}],
        "edges": [
            {"name": "A->B", "from": "A", "to": "B", "weight": 3},
            {"name": "B->C", "from": "B", "to": "C", "weight": 4},
        ],
    }


@pytest.fixture
def diamond_structure():
    """
    A -> B (1), A -> C (4), B -> C (2), C -> D (1), B -> D (5).

    Cheapest A..D is A -> B -> C -> D with cost 4.
    """
    return {
        "nodes": [{"name": n} for n in ("A", "B", "C", "D")],
        "edges": [
            {"name": "A->B", "from": "A", "to": "B", "weight": 1},
            {"name": "A->C", "from": "A", "to": "C", "weight": 4},
            {"name": "B->C", "from": "B", "to": "C", "weight": 2},
            {"name": "C->D", "from": "C", "to": "D", "weight": 1},
            {"name": "B->D", "from": "B", "to": "D", "weight": 5},
        ],
    }
