"""
Exceptions raised by the shortest-path engine.

"No path" and "negative cycle" are ordinary results, never exceptions.
"""

from __future__ import annotations


class PathEngineError(Exception):
    """Base class for all engine errors."""


class InvalidArgumentError(PathEngineError, ValueError):
    """A required argument is missing or has an unusable value."""


class NodeNotFoundError(PathEngineError, KeyError):
    """A node id (or label) does not exist in the graph."""

    def __init__(self, node_id: object) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Node {self.node_id!r} not found in graph"


class InvalidWeightError(PathEngineError, ValueError):
    """An edge weight is not a finite real number."""


class NegativeWeightError(PathEngineError, ValueError):
    """A negative edge weight was given to an algorithm that cannot handle it."""

    def __init__(self, algorithm: str, edge_id: object, weight: float) -> None:
        super().__init__(
            f"{algorithm} requires non-negative weights; "
            f"edge {edge_id!r} has weight {weight}"
        )
        self.algorithm = algorithm
        self.edge_id = edge_id
        self.weight = weight


class GraphFormatError(PathEngineError, ValueError):
    """A graph document could not be interpreted."""
