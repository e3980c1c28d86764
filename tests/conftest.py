"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from pathengine.graph import Edge, Graph, Node

SAMPLE_NODES = [
    ("A", -200, -100),
    ("B", -50, -120),
    ("C", 80, -50),
    ("D", 150, 70),
    ("E", 0, 80),
    ("F", -140, 40),
]

SAMPLE_EDGES = [
    ("e1", "A", "B", 4),
    ("e2", "A", "C", 7),
    ("e3", "B", "C", 1),
    ("e4", "B", "F", 5),
    ("e5", "C", "D", 3),
    ("e6", "C", "E", 2),
    ("e7", "E", "D", 4),
    ("e8", "F", "E", 6),
]


def make_graph(nodes, edges, directed: bool = True) -> Graph:
    """Build a Graph from (id, x, y) and (id, from, to, weight) tuples."""
    return Graph.from_collections(
        [Node(id=n, label=str(n), x=x, y=y) for n, x, y in nodes],
        [Edge(id=e, source=u, target=v, weight=w) for e, u, v, w in edges],
        directed=directed,
    )


def random_graph(
    rng: np.random.Generator,
    n_nodes: int,
    n_edges: int,
    low: float = 0.0,
    high: float = 10.0,
    directed: bool = True,
) -> Graph:
    """Random graph with integer weights in [low, high] and grid positions."""
    nodes = [(i, float(rng.integers(0, 10)), float(rng.integers(0, 10))) for i in range(n_nodes)]
    edges = []
    for k in range(n_edges):
        u, v = rng.integers(0, n_nodes, size=2).tolist()
        edges.append((f"e{k}", u, v, float(rng.integers(int(low), int(high) + 1))))
    return make_graph(nodes, edges, directed=directed)


def brute_force_distance(graph: Graph, source, target) -> float:
    """Minimum weight over all simple paths (exhaustive search)."""
    if source == target:
        return 0.0
    adjacency = graph.adjacency()
    best = math.inf

    def walk(node, cost, visited):
        nonlocal best
        if node == target:
            best = min(best, cost)
            return
        for nb in adjacency.neighbors(node):
            if nb.node not in visited:
                walk(nb.node, cost + nb.weight, visited | {nb.node})

    walk(source, 0.0, {source})
    return best


def path_weight(graph: Graph, path) -> float:
    """Sum of edge weights along a reconstructed path."""
    return sum(graph.edges[eid].weight for eid in path.edges)


def has_reachable_negative_cycle(graph: Graph, source) -> bool:
    """Exhaustive check for a simple cycle of negative weight reachable from source."""
    adjacency = graph.adjacency()
    reachable = {source}
    stack = [source]
    while stack:
        u = stack.pop()
        for nb in adjacency.neighbors(u):
            if nb.node not in reachable:
                reachable.add(nb.node)
                stack.append(nb.node)

    def search(start, node, cost, visited):
        for nb in adjacency.neighbors(node):
            if nb.node == start and cost + nb.weight < 0:
                return True
            if nb.node not in visited and search(start, nb.node, cost + nb.weight, visited | {nb.node}):
                return True
        return False

    return any(search(start, start, 0.0, {start}) for start in reachable)


@pytest.fixture
def sample_graph() -> Graph:
    """Return the six-node directed demo graph."""
    return make_graph(SAMPLE_NODES, SAMPLE_EDGES)


@pytest.fixture
def negative_cycle_graph(sample_graph: Graph) -> Graph:
    """Demo graph plus D -> B = -100 (cycle B -> C -> D -> B totals -96)."""
    sample_graph.edges["e9"] = Edge(id="e9", source="D", target="B", weight=-100)
    return sample_graph


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for random graph tests."""
    return np.random.default_rng(20261019)
