"""
WEIGHTGRAPH SCHEMAS - The Grammar of the System

If ontology.py is the Dictionary (defining the words we can use),
schemas.py is the Grammar (defining how a graph description is shaped).

This module defines the data structures that flow through the graph:
- Node: a named vertex
- Edge: a named connection between two node names, carrying a weight
- GraphStructure: the declarative {nodes, edges} description
- DistanceEntry: one resolved {neighbor, cost} pair in the distance index
- validate_shape / parse_structure: the shape contract for raw input
- Serialization helpers for structures received as bytes

Design Principles:
1. STRICT TYPING: msgspec.Struct with no silent type coercion
2. FROZEN: a validated structure is never mutated after construction
3. KW_ONLY: Enforce keyword arguments to prevent positional mix-ups
4. NAMES, NOT OBJECTS: edges reference nodes by name
"""
import msgspec
from typing import Any, List, Optional, Tuple, Union

from core.ontology import MISSING_STRUCTURE_MESSAGE


# =============================================================================
# GRAPH ELEMENTS
# =============================================================================

class Node(msgspec.Struct, frozen=True, kw_only=True):
    """A named vertex. The name is the identity key within a graph."""
    name: str


class Edge(msgspec.Struct, frozen=True, kw_only=True):
    """
    A named connection from one node name to another.

    `from` is a Python keyword, so the attribute is `from_`; on the wire
    (dicts, JSON, msgpack) the field is still called "from".

    `weight` is either a plain number (default cost strategy) or an
    arbitrary structured value that only a custom cost strategy reads.
    """
    name: str
    from_: str = msgspec.field(name="from")
    to: str
    weight: Any = None


class GraphStructure(msgspec.Struct, frozen=True, kw_only=True):
    """The declarative graph description: ordered nodes and ordered edges."""
    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...] = ()


class DistanceEntry(msgspec.Struct, frozen=True):
    """One direct neighbor of a node, with the resolved cost of reaching it."""
    neighbor: str
    cost: Union[int, float]


class _Envelope(msgspec.Struct):
    """Top-level shape only; elements are checked one by one."""
    nodes: List[Any]
    edges: List[Any] = msgspec.field(default_factory=list)


# =============================================================================
# SHAPE CONTRACT
# =============================================================================

def _convert(item: Any, target: type) -> Any:
    if isinstance(item, target):
        return item
    return msgspec.convert(item, target)


def _locate(message: str, prefix: str) -> str:
    """Re-anchor a msgspec error path under `prefix` (e.g. `$.nodes[2]`)."""
    if " - at `$" in message:
        return message.replace("`$", f"`{prefix}", 1)
    return f"{message} - at `{prefix}`"


def _check_elements(items: List[Any], target: type, field: str) -> Tuple[List[Any], List[str]]:
    converted = []
    violations = []
    for i, item in enumerate(items):
        try:
            converted.append(_convert(item, target))
        except msgspec.ValidationError as e:
            violations.append(_locate(str(e), f"$.{field}[{i}]"))
    return converted, violations


def check_shape(raw: Any) -> Tuple[Optional[GraphStructure], List[str]]:
    """Return (structure, []) for a well-shaped input, else (None, violations)."""
    if raw is None:
        return None, [MISSING_STRUCTURE_MESSAGE]
    if isinstance(raw, GraphStructure):
        return raw, []

    try:
        envelope = msgspec.convert(raw, _Envelope)
    except msgspec.ValidationError as e:
        return None, [str(e)]

    nodes, node_violations = _check_elements(envelope.nodes, Node, "nodes")
    edges, edge_violations = _check_elements(envelope.edges, Edge, "edges")
    violations = node_violations + edge_violations
    if violations:
        return None, violations

    return GraphStructure(nodes=tuple(nodes), edges=tuple(edges)), []


def validate_shape(raw: Any) -> List[str]:
    """
    Check a raw graph description against the shape contract.

    Every offending element is reported, not just the first, each as a
    message carrying its location (e.g. "... - at `$.edges[1].from`").

    Returns:
        List of violation messages; empty when the shape is valid
    """
    return check_shape(raw)[1]


def parse_structure(raw: Any) -> GraphStructure:
    """
    Convert a raw graph description into typed, frozen structs.

    Raises:
        msgspec.ValidationError: If the shape is invalid (all violations
            are joined into the message)
    """
    structure, violations = check_shape(raw)
    if violations:
        raise msgspec.ValidationError("; ".join(violations))
    return structure


# =============================================================================
# SERIALIZATION HELPERS
# =============================================================================

# Pre-compiled encoders/decoders, reused across calls
_json_encoder = msgspec.json.Encoder()
_json_decoder = msgspec.json.Decoder(type=GraphStructure)

_msgpack_encoder = msgspec.msgpack.Encoder()
_msgpack_decoder = msgspec.msgpack.Decoder(type=GraphStructure)


def serialize_structure(structure: GraphStructure) -> bytes:
    """Serialize a GraphStructure to JSON bytes."""
    return _json_encoder.encode(structure)


def deserialize_structure(data: bytes) -> GraphStructure:
    """
    Deserialize JSON bytes to a GraphStructure.

    Only the shape is checked here; uniqueness and referential integrity
    are the StructureValidator's job.
    """
    return _json_decoder.decode(data)


def serialize_structure_msgpack(structure: GraphStructure) -> bytes:
    """Serialize a GraphStructure to msgpack bytes (more compact than JSON)."""
    return _msgpack_encoder.encode(structure)


def deserialize_structure_msgpack(data: bytes) -> GraphStructure:
    """Deserialize msgpack bytes to a GraphStructure."""
    return _msgpack_decoder.decode(data)
