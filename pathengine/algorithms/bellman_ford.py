"""
Bellman-Ford with negative-cycle detection.

Handles negative weights. In undirected mode a single negative edge is
itself a negative cycle (u -> v -> u), and is reported as one. Arcs to ids
not in node_ids are dead ends, as in the other solvers.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from pathengine.algorithms.results import BellmanFordResult, Predecessor
from pathengine.graph.model import AdjacencyView, NodeId

logger = logging.getLogger(__name__)


def bellman_ford(
    adjacency: AdjacencyView,
    node_ids: Iterable[NodeId],
    source: NodeId,
) -> BellmanFordResult:
    """
    Single-source shortest distances allowing negative weights.

    Runs at most |V| - 1 relaxation passes over the outgoing edges of every
    node with a finite distance, stopping early after a pass that changes
    nothing. One more sweep then checks whether any edge can still be
    relaxed, which means a negative cycle is reachable from source.

    Args:
        adjacency: Adjacency view built for this run
        node_ids: All node ids of the graph, in iteration order
        source: Start node id

    Returns:
        BellmanFordResult. If has_negative_cycle is set, distances and
        predecessors of nodes reachable from the cycle are unreliable.
    """
    order = list(node_ids)
    if source not in order:
        order.append(source)

    distances = {node: math.inf for node in order}
    predecessors: dict[NodeId, Predecessor | None] = {node: None for node in order}
    distances[source] = 0.0

    passes = 0
    for _ in range(len(order) - 1):
        passes += 1
        if not _relax_all(adjacency, order, distances, predecessors):
            break

    has_negative_cycle = _can_relax(adjacency, order, distances)
    logger.debug(
        f"Bellman-Ford from {source!r}: {passes} pass(es), "
        f"negative cycle={has_negative_cycle}"
    )
    return BellmanFordResult(
        source=source,
        distances=distances,
        predecessors=predecessors,
        has_negative_cycle=has_negative_cycle,
    )


def _relax_all(
    adjacency: AdjacencyView,
    order: list[NodeId],
    distances: dict[NodeId, float],
    predecessors: dict[NodeId, Predecessor | None],
) -> bool:
    """One relaxation pass; True if any distance improved."""
    updated = False
    for u in order:
        du = distances[u]
        if du == math.inf:
            continue
        for nb in adjacency.neighbors(u):
            if nb.node not in distances:
                continue
            alt = du + nb.weight
            if alt < distances[nb.node]:
                distances[nb.node] = alt
                predecessors[nb.node] = Predecessor(u, nb.edge_id)
                updated = True
    return updated


def _can_relax(
    adjacency: AdjacencyView,
    order: list[NodeId],
    distances: dict[NodeId, float],
) -> bool:
    for u in order:
        du = distances[u]
        if du == math.inf:
            continue
        for nb in adjacency.neighbors(u):
            if nb.node in distances and du + nb.weight < distances[nb.node]:
                return True
    return False
