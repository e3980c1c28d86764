"""
Dijkstra's algorithm over an AdjacencyView, using MinHeap with lazy deletion.

Invariant: a popped heap entry is valid iff its priority equals the current
best known distance of its node. Every improvement pushes a new entry; the
older entries for that node are skipped when they surface.

Only ids present in the adjacency view are relaxed into; an arc to any
other id is a dead end.

Weights must be non-negative. This is not checked here (see PathEngine).
"""

from __future__ import annotations

import logging
import math

from pathengine.algorithms.heap import MinHeap
from pathengine.algorithms.results import Predecessor, ShortestPathTree
from pathengine.graph.model import AdjacencyView, NodeId

logger = logging.getLogger(__name__)


def dijkstra(adjacency: AdjacencyView, source: NodeId) -> ShortestPathTree:
    """
    Single-source shortest distances.

    Args:
        adjacency: Adjacency view built for this run
        source: Start node id

    Returns:
        ShortestPathTree with a distance for every node in the view (inf if
        unreachable) and a predecessor tree rooted at source
    """
    distances = {node: math.inf for node in adjacency}
    predecessors: dict[NodeId, Predecessor | None] = {node: None for node in adjacency}
    distances[source] = 0.0

    heap: MinHeap[NodeId] = MinHeap()
    heap.push(source, 0.0)
    stale = 0

    while not heap.is_empty():
        u, d = heap.pop()
        if d > distances[u]:
            stale += 1
            continue

        for nb in adjacency.neighbors(u):
            if nb.node not in distances:
                continue
            alt = d + nb.weight
            if alt < distances[nb.node]:
                distances[nb.node] = alt
                predecessors[nb.node] = Predecessor(u, nb.edge_id)
                heap.push(nb.node, alt)

    logger.debug(f"Dijkstra from {source!r}: {stale} stale entries discarded")
    return ShortestPathTree(source=source, distances=distances, predecessors=predecessors)
