"""
WEIGHTGRAPH PATH RESOLVER - What Does It Cost To Get There?

Answers path-weight queries over a GraphModel and its DistanceIndex:

1. Unweighted graph: always NO_WEIGHT, whatever the arguments.
2. Direct edge from -> to: the cost of the first such edge declared.
3. Otherwise: heap-based Dijkstra over the indexed costs. Resolved costs
   are non-negative, so the first time the target is popped its cost is
   final. Unreachable target: NO_WEIGHT.

Undirected graphs also walk every edge from `to` back to `from`, at the
cost the index holds for it. The index itself stays outbound-only.

Complexity:
    O(E log V) over the nodes reachable from the source.
"""
from typing import Dict, List, Optional, Tuple
import heapq

from core.distance_index import DistanceIndex
from core.graph_model import GraphModel, NodeRef
from core.ontology import NO_WEIGHT
from core.weights import Cost

# (neighbor, cost, declaration position of the edge walked)
Step = Tuple[str, Cost, int]


class PathResolver:
    """Path-weight queries for one (immutable) graph."""

    def __init__(self, model: GraphModel, index: DistanceIndex):
        self._model = model

        costs: Dict[str, Cost] = {}
        for node in model.nodes:
            for edge, entry in zip(model.outbound_edges(node), index.bucket(node.name)):
                costs[edge.name] = entry.cost

        # Built in edge declaration order, so each list is sorted by position
        self._steps: Dict[str, List[Step]] = {node.name: [] for node in model.nodes}
        for pos, edge in enumerate(model.edges):
            cost = costs[edge.name]
            self._steps[edge.from_].append((edge.to, cost, pos))
            if not model.directed and edge.from_ != edge.to:
                self._steps[edge.to].append((edge.from_, cost, pos))

    def _direct(self, source: str, target: str) -> Optional[Cost]:
        for neighbor, cost, _ in self._steps[source]:
            if neighbor == target:
                return cost
        return None

    def _search(self, source: str, target: str) -> Tuple[Dict[str, Cost], Dict[str, str]]:
        """
        Single-source Dijkstra from `source`, stopping once `target` is settled.

        Equal-cost routes to a node are broken by the declaration position
        of the edge that reaches it: the earlier-declared edge wins, as long
        as both routes are seen before that node is settled.

        Returns:
            (settled costs, predecessor map); the source has no predecessor
        """
        dist: Dict[str, Cost] = {source: 0}
        prev: Dict[str, str] = {}
        via: Dict[str, int] = {}
        settled: Dict[str, Cost] = {}
        seq = 0
        pq: List[Tuple[Cost, int, str]] = [(0, seq, source)]

        while pq:
            d_u, _, u = heapq.heappop(pq)
            if u in settled:
                continue
            settled[u] = d_u
            if u == target:
                break

            for v, cost, pos in self._steps[u]:
                if v in settled:
                    continue
                alt = d_u + cost
                if v not in dist or alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    via[v] = pos
                    seq += 1
                    heapq.heappush(pq, (alt, seq, v))
                elif alt == dist[v] and pos < via[v]:
                    prev[v] = u
                    via[v] = pos

        return settled, prev

    def weight_of_path(self, source: NodeRef, target: NodeRef) -> Cost:
        """
        Cost of travelling from `source` to `target`.

        Returns:
            The direct-edge cost if there is one, else the lowest multi-hop
            cost, else NO_WEIGHT. Always NO_WEIGHT on unweighted graphs.

        Raises:
            NodeNotFoundError: If either reference does not resolve
                (weighted graphs only)
        """
        if not self._model.weighted:
            return NO_WEIGHT

        src = self._model.resolve(source).name
        tgt = self._model.resolve(target).name

        direct = self._direct(src, tgt)
        if direct is not None:
            return direct

        settled, _ = self._search(src, tgt)
        return settled.get(tgt, NO_WEIGHT)

    def shortest_path(self, source: NodeRef, target: NodeRef) -> Tuple[str, ...]:
        """
        Node names along the route weight_of_path() prices.

        On unweighted graphs every edge costs one hop, so this is the
        fewest-hops route.

        Returns:
            (source, ..., target), or () if the target is unreachable

        Raises:
            NodeNotFoundError: If either reference does not resolve
        """
        src = self._model.resolve(source).name
        tgt = self._model.resolve(target).name

        if self._direct(src, tgt) is not None:
            return (src, tgt)

        settled, prev = self._search(src, tgt)
        if tgt not in settled:
            return ()

        path = [tgt]
        while path[-1] != src:
            path.append(prev[path[-1]])
        return tuple(reversed(path))
