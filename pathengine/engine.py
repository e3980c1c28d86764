"""
Path engine: the entry point the surrounding application calls.

Each run validates the request, rebuilds the adjacency view from the graph's
current nodes and edges, runs the selected solver, reconstructs the path and
logs the outcome. Runs are synchronous and hold no state between calls; the
caller must not edit the graph while a run is in progress.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass

from pathengine.algorithms import (
    BellmanFordResult,
    Path,
    ShortestPathTree,
    a_star,
    bellman_ford,
    canonical_name,
    dijkstra,
    reconstruct_path,
)
from pathengine.config import DEFAULT_ALGORITHM, REJECT_NEGATIVE_WEIGHTS
from pathengine.errors import InvalidArgumentError, NegativeWeightError, NodeNotFoundError
from pathengine.graph.model import AdjacencyView, Graph, NodeId

logger = logging.getLogger(__name__)

# Algorithms that are only correct on non-negative weights
NON_NEGATIVE_ONLY = ("dijkstra", "astar")


@dataclass
class PathResult:
    """
    Outcome of one source-target query.

    Attributes:
        algorithm: Canonical algorithm name
        source: Start node id
        target: End node id
        distance: Path cost; inf whenever there is no path, nan if
            undefined (negative cycle)
        path: Ordered path, or None when there is none to draw
        has_negative_cycle: Bellman-Ford only; check before trusting
            distance or path
        elapsed_ms: Wall time spent in the run (milliseconds)
    """

    algorithm: str
    source: NodeId
    target: NodeId
    distance: float
    path: Path | None
    has_negative_cycle: bool = False
    elapsed_ms: float = 0.0

    @property
    def found(self) -> bool:
        """Whether a usable path exists."""
        return self.path is not None and not self.has_negative_cycle

    def summary(self) -> str:
        """One-line human-readable description of the outcome."""
        label = _DISPLAY_NAMES.get(self.algorithm, self.algorithm)
        if self.has_negative_cycle:
            return f"{label}: negative-weight cycle detected; shortest path is undefined"
        if not self.found:
            return f"{label}: no path from {self.source!r} to {self.target!r} (distance: inf)"
        return (
            f"{label}: shortest path from {self.source!r} to {self.target!r} "
            f"= {self.distance:g} (nodes: {self.path})"
        )


_DISPLAY_NAMES = {
    "dijkstra": "Dijkstra",
    "astar": "A*",
    "bellman-ford": "Bellman-Ford",
}


class PathEngine:
    """
    Runs shortest-path queries against a caller-owned Graph.

    The engine handles:
    - Validating the algorithm, source and target
    - Building a fresh adjacency view for every run
    - Optionally rejecting negative weights for Dijkstra and A*
    - Reconstructing and logging the resulting path
    """

    def __init__(self, reject_negative_weights: bool = REJECT_NEGATIVE_WEIGHTS) -> None:
        """
        Initialize the engine.

        Args:
            reject_negative_weights: Raise NegativeWeightError instead of
                running Dijkstra / A* on a graph with a negative weight
        """
        self._reject_negative = reject_negative_weights

    def run(
        self,
        graph: Graph,
        source: NodeId | None,
        target: NodeId | None,
        algorithm: str | None = None,
    ) -> PathResult:
        """
        Compute the shortest path from source to target.

        Args:
            graph: Graph to search (read only during the run)
            source: Start node id
            target: End node id
            algorithm: dijkstra, astar or bellman-ford (default from config)

        Returns:
            PathResult; "no path" and "negative cycle" are results, not errors

        Raises:
            InvalidArgumentError: If source/target is missing or the
                algorithm is unknown
            NodeNotFoundError: If source/target is not in the graph
            NegativeWeightError: If rejecting negative weights and the
                algorithm cannot handle them
        """
        name = canonical_name(algorithm or DEFAULT_ALGORITHM)
        self._check_endpoints(graph, source, target)
        adjacency = self._prepare(graph, name)

        start_ms = time.perf_counter() * 1000

        if name == "astar":
            res = a_star(adjacency, source, target, graph.positions())
            path = reconstruct_path(res.predecessors, source, target) if res.found else None
            distance = res.cost if path is not None else math.inf
            result = PathResult(name, source, target, distance, path)
        else:
            tree = self._solve_tree(graph, adjacency, name, source)
            result = self._tree_result(name, tree, target)

        result.elapsed_ms = time.perf_counter() * 1000 - start_ms

        if result.has_negative_cycle:
            logger.warning(result.summary())
        else:
            logger.info(result.summary())
        return result

    def shortest_path_tree(
        self,
        graph: Graph,
        source: NodeId | None,
        algorithm: str | None = None,
    ) -> ShortestPathTree:
        """
        Distances and predecessors from source to every node.

        Only single-source algorithms (dijkstra, bellman-ford) apply. A
        BellmanFordResult must be checked for has_negative_cycle.

        Raises:
            InvalidArgumentError: If source is missing or the algorithm is
                not single-source
            NodeNotFoundError: If source is not in the graph
        """
        name = canonical_name(algorithm or DEFAULT_ALGORITHM)
        if name == "astar":
            raise InvalidArgumentError("A* needs a goal; use run() instead")
        if source is None or source == "":
            raise InvalidArgumentError("A source node is required")
        if source not in graph.nodes:
            raise NodeNotFoundError(source)

        adjacency = self._prepare(graph, name)
        return self._solve_tree(graph, adjacency, name, source)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _check_endpoints(graph: Graph, source: NodeId | None, target: NodeId | None) -> None:
        if source is None or source == "" or target is None or target == "":
            raise InvalidArgumentError("Both a source and a target node are required")
        for node_id in (source, target):
            if node_id not in graph.nodes:
                raise NodeNotFoundError(node_id)

    def _prepare(self, graph: Graph, name: str) -> AdjacencyView:
        dangling = graph.dangling_edges()
        if dangling:
            ids = ", ".join(repr(e.id) for e in dangling)
            logger.warning(f"Edge(s) referencing unknown nodes: {ids}")

        adjacency = graph.adjacency()

        if self._reject_negative and name in NON_NEGATIVE_ONLY:
            negative = adjacency.first_negative()
            if negative is not None:
                _, nb = negative
                raise NegativeWeightError(_DISPLAY_NAMES[name], nb.edge_id, nb.weight)

        return adjacency

    @staticmethod
    def _solve_tree(
        graph: Graph,
        adjacency: AdjacencyView,
        name: str,
        source: NodeId,
    ) -> ShortestPathTree:
        if name == "bellman-ford":
            return bellman_ford(adjacency, graph.nodes.keys(), source)
        return dijkstra(adjacency, source)

    @staticmethod
    def _tree_result(name: str, tree: ShortestPathTree, target: NodeId) -> PathResult:
        if isinstance(tree, BellmanFordResult) and tree.has_negative_cycle:
            return PathResult(
                name, tree.source, target, math.nan, None, has_negative_cycle=True
            )

        distance = tree.distance_to(target)
        path = None
        if math.isfinite(distance):
            path = reconstruct_path(tree.predecessors, tree.source, target)
        if path is None:
            distance = math.inf
        return PathResult(name, tree.source, target, distance, path)


def find_path(
    graph: Graph,
    source: NodeId | None,
    target: NodeId | None,
    algorithm: str | None = None,
) -> PathResult:
    """Run a single query with a default-configured PathEngine."""
    return PathEngine().run(graph, source, target, algorithm)
