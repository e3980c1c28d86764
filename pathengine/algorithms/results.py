"""
Result types shared by the solvers.

All maps are created fresh by each solver call and owned by the returned
result; nothing is shared between runs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import NamedTuple

from pathengine.graph.model import EdgeId, NodeId


class Predecessor(NamedTuple):
    """How a node was reached on the current best path."""

    node: NodeId
    edge_id: EdgeId


# Node id -> Predecessor; the source and unreached nodes map to None
PredecessorMap = dict[NodeId, "Predecessor | None"]

# Node id -> best known distance; +inf when unreached
DistanceMap = dict[NodeId, float]


@dataclass
class ShortestPathTree:
    """
    Single-source result of Dijkstra.

    Attributes:
        source: Node the search started from
        distances: Best distance per node (inf if unreachable)
        predecessors: Predecessor per node (None for source/unreachable)
    """

    source: NodeId
    distances: DistanceMap = field(default_factory=dict)
    predecessors: PredecessorMap = field(default_factory=dict)

    def distance_to(self, node: NodeId) -> float:
        return self.distances.get(node, math.inf)

    def is_reachable(self, node: NodeId) -> bool:
        return math.isfinite(self.distance_to(node))


@dataclass
class BellmanFordResult(ShortestPathTree):
    """
    Single-source result of Bellman-Ford.

    When has_negative_cycle is True, distances and predecessors of nodes
    reachable from the cycle are meaningless and no path may be drawn
    from them.
    """

    has_negative_cycle: bool = False


@dataclass
class AStarResult:
    """
    Source-goal result of A*.

    Attributes:
        source: Start node
        goal: Goal node
        found: Whether the goal was reached
        predecessors: Chain from goal back to source (empty when not found)
        g_score: Best known cost from source for every node touched
        cost: Total weight of the returned path (inf when not found)
        expanded: Number of nodes expanded from the open set
    """

    source: NodeId
    goal: NodeId
    found: bool
    predecessors: PredecessorMap = field(default_factory=dict)
    g_score: DistanceMap = field(default_factory=dict)
    cost: float = math.inf
    expanded: int = 0


@dataclass
class Path:
    """
    An ordered path.

    Attributes:
        nodes: Node ids from source to target
        edges: Edge ids, edges[i] joins nodes[i] and nodes[i + 1]
    """

    nodes: list[NodeId]
    edges: list[EdgeId]

    def __len__(self) -> int:
        return len(self.edges)

    def __str__(self) -> str:
        return " -> ".join(str(n) for n in self.nodes)
