"""Single-source shortest paths over non-negative weighted graphs."""

from __future__ import annotations

import heapq
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from .errors import InvalidIndexError, InvalidWeightError, check_index

logger = logging.getLogger(__name__)

UNREACHABLE = math.inf

Distance = Union[int, float]
Edge = Tuple[int, Distance]
Adjacency = Union[Sequence[Sequence[Edge]], Mapping[int, Sequence[Edge]]]


@dataclass
class ShortestPathResult:
    """Distances and predecessor links produced by :func:`dijkstra`."""

    source: int
    distances: List[Distance]
    predecessors: List[Optional[int]]
    settled: int

    def _check(self, target: int) -> int:
        return check_index(target, len(self.distances), "node")

    def is_reachable(self, target: int) -> bool:
        return self.distances[self._check(target)] != UNREACHABLE

    def path_to(self, target: int) -> List[int]:
        """Return the nodes from ``source`` to ``target``, or ``[]`` if unreachable."""

        if not self.is_reachable(target):
            return []
        path = [target]
        while path[-1] != self.source:
            path.append(self.predecessors[path[-1]])
        path.reverse()
        return path


def _edges_by_node(adjacency: Adjacency, node_count: int) -> List[List[Edge]]:
    """Validate ``adjacency`` and return a normalized copy indexed by node."""

    raw: List[Sequence[Edge]] = [()] * node_count
    if isinstance(adjacency, Mapping):
        for node, node_edges in adjacency.items():
            raw[check_index(node, node_count, "node")] = node_edges
    else:
        if len(adjacency) > node_count:
            raise InvalidIndexError(len(adjacency) - 1, node_count, "node")
        for node, node_edges in enumerate(adjacency):
            raw[node] = node_edges

    edges: List[List[Edge]] = []
    for node, node_edges in enumerate(raw):
        checked: List[Edge] = []
        for neighbor, weight in node_edges:
            neighbor = check_index(neighbor, node_count, "neighbor")
            # NaN fails every comparison, so test for the valid range.
            if not weight >= 0:
                raise InvalidWeightError(node, neighbor, weight)
            checked.append((neighbor, weight))
        edges.append(checked)
    return edges


def dijkstra(adjacency: Adjacency, node_count: int, source: int) -> ShortestPathResult:
    """Run Dijkstra's algorithm from ``source``.

    ``adjacency`` is either a sequence indexed by node or a mapping from node
    to its outgoing ``(neighbor, weight)`` pairs. Nodes without an entry have
    no outgoing edges. All weights must be non-negative.

    The frontier is a binary heap with lazy deletion: improved distances are
    pushed as new entries and outdated ones are skipped when popped.
    """

    if node_count < 0:
        raise ValueError("node_count must be non-negative")
    source = check_index(source, node_count, "source")
    edges = _edges_by_node(adjacency, node_count)

    distances: List[Distance] = [UNREACHABLE] * node_count
    predecessors: List[Optional[int]] = [None] * node_count
    distances[source] = 0
    frontier: List[Tuple[Distance, int]] = [(0, source)]
    settled = 0

    while frontier:
        distance, node = heapq.heappop(frontier)
        if distance > distances[node]:
            continue
        settled += 1
        for neighbor, weight in edges[node]:
            candidate = distance + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                predecessors[neighbor] = node
                heapq.heappush(frontier, (candidate, neighbor))

    logger.debug("Settled %d of %d nodes from source %d", settled, node_count, source)
    return ShortestPathResult(
        source=source,
        distances=distances,
        predecessors=predecessors,
        settled=settled,
    )


def shortest_path(adjacency: Adjacency, node_count: int, source: int) -> List[Distance]:
    """Return the shortest distance from ``source`` to every node.

    Unreachable nodes hold :data:`UNREACHABLE`.
    """

    return dijkstra(adjacency, node_count, source).distances
