"""
Shortest-path algorithms module.

Provides the solvers and their shared pieces:
- MinHeap: Binary min-heap with lazy deletion support
- dijkstra: Non-negative single-source distances
- a_star: Source-goal search with a Euclidean heuristic
- bellman_ford: Negative weights and negative-cycle detection
- reconstruct_path: Predecessor map -> ordered path
"""

from pathengine.algorithms.astar import a_star, euclidean_heuristic
from pathengine.algorithms.bellman_ford import bellman_ford
from pathengine.algorithms.dijkstra import dijkstra
from pathengine.algorithms.heap import HeapEntry, MinHeap
from pathengine.algorithms.path import reconstruct_path
from pathengine.algorithms.results import (
    AStarResult,
    BellmanFordResult,
    Path,
    Predecessor,
    ShortestPathTree,
)
from pathengine.errors import InvalidArgumentError

__all__ = [
    "AStarResult",
    "BellmanFordResult",
    "HeapEntry",
    "MinHeap",
    "Path",
    "Predecessor",
    "ShortestPathTree",
    "a_star",
    "bellman_ford",
    "dijkstra",
    "euclidean_heuristic",
    "reconstruct_path",
    "SOLVERS",
    "canonical_name",
    "get_solver",
]


SOLVERS = {
    "dijkstra": dijkstra,
    "astar": a_star,
    "bellman-ford": bellman_ford,
}

_ALIASES = {"a*": "astar", "a-star": "astar", "bellmanford": "bellman-ford"}


def canonical_name(name: str) -> str:
    """
    Normalise an algorithm name (case, underscores, common aliases).

    Raises:
        InvalidArgumentError: If the algorithm is unknown
    """
    key = str(name).strip().lower().replace("_", "-")
    key = _ALIASES.get(key, key)
    if key not in SOLVERS:
        available = ", ".join(SOLVERS.keys())
        raise InvalidArgumentError(f"Unknown algorithm '{name}'. Available: {available}")
    return key


def get_solver(name: str):
    """
    Get a solver function by name.

    Args:
        name: Algorithm identifier (dijkstra, astar, bellman-ford)

    Returns:
        The solver function

    Raises:
        InvalidArgumentError: If algorithm name is unknown
    """
    return SOLVERS[canonical_name(name)]
