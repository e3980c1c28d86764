"""
A* search with a Euclidean heuristic on node positions.

Missing positions count as the origin. On graphs without coordinates the
heuristic is zero everywhere and the search behaves like Dijkstra; with
positions that overestimate real edge costs the result may be suboptimal.
Both are accepted, not errors.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

import numpy as np

from pathengine.algorithms.heap import MinHeap
from pathengine.algorithms.results import AStarResult, Predecessor
from pathengine.config import DEFAULT_POSITION
from pathengine.graph.model import AdjacencyView, NodeId

logger = logging.getLogger(__name__)


def euclidean_heuristic(
    nodes: list[NodeId],
    positions: Mapping[NodeId, tuple[float, float]],
    goal: NodeId,
) -> dict[NodeId, float]:
    """Straight-line distance from every node to the goal."""
    if not nodes:
        return {}
    coords = np.array(
        [positions.get(node, DEFAULT_POSITION) for node in nodes], dtype=np.float64
    )
    gx, gy = positions.get(goal, DEFAULT_POSITION)
    h = np.hypot(coords[:, 0] - gx, coords[:, 1] - gy)
    return dict(zip(nodes, h.tolist()))


def a_star(
    adjacency: AdjacencyView,
    source: NodeId,
    goal: NodeId,
    positions: Mapping[NodeId, tuple[float, float]],
) -> AStarResult:
    """
    Find a path from source to goal ordered by f = g + h.

    The open set maps each node pending expansion to the f of its live heap
    entry. A node is pushed when it is not pending or when its f drops below
    the pending one; heap entries whose priority no longer matches the open
    set are stale and skipped on pop, so no node is expanded twice for the
    same g. Search stops when the goal is popped. Arcs to ids outside the
    adjacency view are dead ends, so a goal that is not a node is never found.

    Args:
        adjacency: Adjacency view built for this run
        source: Start node id
        goal: Goal node id
        positions: Node id -> (x, y)

    Returns:
        AStarResult; found is False when the open set empties first
    """
    nodes = list(adjacency)
    if source not in adjacency:
        nodes.append(source)
    h = euclidean_heuristic(nodes, positions, goal)

    g_score = {node: math.inf for node in nodes}
    g_score[source] = 0.0
    came_from: dict[NodeId, Predecessor] = {}
    via_weight: dict[NodeId, float] = {}

    open_heap: MinHeap[NodeId] = MinHeap()
    open_set = {source: h[source]}
    open_heap.push(source, h[source])
    expanded = 0

    while not open_heap.is_empty():
        current, f = open_heap.pop()
        if open_set.get(current) != f:
            continue
        del open_set[current]
        expanded += 1

        if current == goal:
            chain, cost = _chain(came_from, via_weight, source, goal)
            logger.debug(f"A* reached {goal!r} after expanding {expanded} node(s)")
            return AStarResult(
                source=source,
                goal=goal,
                found=True,
                predecessors=chain,
                g_score=g_score,
                cost=cost,
                expanded=expanded,
            )

        for nb in adjacency.neighbors(current):
            if nb.node not in g_score:
                continue
            tentative = g_score[current] + nb.weight
            if tentative < g_score[nb.node]:
                came_from[nb.node] = Predecessor(current, nb.edge_id)
                via_weight[nb.node] = nb.weight
                g_score[nb.node] = tentative
                f_new = tentative + h[nb.node]
                if f_new < open_set.get(nb.node, math.inf):
                    open_set[nb.node] = f_new
                    open_heap.push(nb.node, f_new)

    logger.debug(f"A* exhausted open set without reaching {goal!r}")
    return AStarResult(
        source=source, goal=goal, found=False, g_score=g_score, expanded=expanded
    )


def _chain(
    came_from: dict[NodeId, Predecessor],
    via_weight: dict[NodeId, float],
    source: NodeId,
    goal: NodeId,
) -> tuple[dict[NodeId, Predecessor | None], float]:
    """
    Keep only the predecessor links on the goal's chain, with its total cost.

    With an overestimating heuristic a node's g can drop after its
    successors were reached, so the chain cost (not the goal's g) is the
    cost of the path actually returned.
    """
    chain: dict[NodeId, Predecessor | None] = {source: None}
    cost = 0.0
    current = goal
    while current != source and current in came_from and current not in chain:
        pred = came_from[current]
        chain[current] = pred
        cost += via_weight[current]
        current = pred.node
    return chain, cost
