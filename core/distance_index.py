"""
WEIGHTGRAPH DISTANCE INDEX - Resolved Direct-Edge Adjacency

For every node, the ordered list of neighbors reachable over ONE edge,
each with the cost the WeightResolver assigned to that edge. Built once,
eagerly, right after the model is validated; never updated afterwards.

Multi-hop distances are NOT precomputed here. The PathResolver walks
these buckets on demand.

The index follows declared edge direction whatever `directed` says; the
PathResolver walks edges backwards for undirected graphs.
"""
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple
import logging

import polars as pl

from core.errors import NodeNotFoundError
from core.graph_model import GraphModel
from core.schemas import DistanceEntry
from core.weights import Cost, WeightResolver

logger = logging.getLogger(__name__)

Bucket = Tuple[DistanceEntry, ...]


class DistanceIndex:
    """
    Read-only mapping of node name -> bucket of DistanceEntry.

    Every declared node has a bucket; nodes without outbound edges have
    an empty one.
    """

    def __init__(self, buckets: Dict[str, Bucket]):
        self._buckets: Mapping[str, Bucket] = MappingProxyType(dict(buckets))

    @classmethod
    def build(cls, model: GraphModel, resolver: WeightResolver) -> "DistanceIndex":
        """
        Build the index from a validated model.

        Costs are resolved here, so InvalidWeightError (or a custom
        calculator's own exception) surfaces at construction.
        """
        pending: Dict[str, List[DistanceEntry]] = {}

        for node in model.nodes:
            if node.name in pending:
                continue
            pending[node.name] = [
                DistanceEntry(edge.to, resolver.resolve([edge]))
                for edge in model.outbound_edges(node)
            ]

        index = cls({name: tuple(entries) for name, entries in pending.items()})
        logger.debug("Distance index built: %s", index.as_dict())
        return index

    # =========================================================================
    # QUERIES
    # =========================================================================

    def bucket(self, name: str) -> Bucket:
        """
        Direct neighbors of `name`, in edge declaration order.

        Raises:
            NodeNotFoundError: If `name` was never indexed
        """
        try:
            return self._buckets[name]
        except KeyError:
            raise NodeNotFoundError(name) from None

    def neighbors(self, name: str) -> Tuple[str, ...]:
        return tuple(entry.neighbor for entry in self.bucket(name))

    def cost(self, source: str, target: str) -> Optional[Cost]:
        """Cost of the first direct entry source -> target, or None."""
        for entry in self.bucket(source):
            if entry.neighbor == target:
                return entry.cost
        return None

    def as_dict(self) -> Dict[str, List[Dict[str, Cost]]]:
        """Plain-data snapshot: {node: [{neighbor: cost}, ...]}."""
        return {
            name: [{entry.neighbor: entry.cost} for entry in bucket]
            for name, bucket in self._buckets.items()
        }

    def items(self):
        return self._buckets.items()

    def to_polars(self) -> pl.DataFrame:
        """
        Export the index to a Polars DataFrame.

        One row per entry: node, neighbor, cost. Nodes with empty buckets
        do not appear.
        """
        rows = [
            (name, entry.neighbor, float(entry.cost))
            for name, bucket in self._buckets.items()
            for entry in bucket
        ]
        return pl.DataFrame(
            {
                "node": [r[0] for r in rows],
                "neighbor": [r[1] for r in rows],
                "cost": [r[2] for r in rows],
            },
            schema={"node": pl.Utf8, "neighbor": pl.Utf8, "cost": pl.Float64},
        )

    def __getitem__(self, name: str) -> Bucket:
        return self.bucket(name)

    def __contains__(self, name: str) -> bool:
        return name in self._buckets

    def __iter__(self) -> Iterator[str]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"DistanceIndex(nodes={len(self._buckets)})"
