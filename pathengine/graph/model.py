"""
Graph model: nodes, edges and the adjacency view the solvers consume.

The Graph is a long-lived value edited by the caller. The AdjacencyView is
derived from it right before each solver run and never cached, so edits made
between runs are always reflected.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import NamedTuple

from pathengine.config import DEFAULT_POSITION, EDGE_ID_PREFIX
from pathengine.errors import InvalidWeightError, NodeNotFoundError

logger = logging.getLogger(__name__)

NodeId = str | int
EdgeId = str | int


@dataclass
class Node:
    """
    A graph node.

    Attributes:
        id: Unique identifier within the graph
        label: Display label
        x: Optional horizontal coordinate (A* heuristic only)
        y: Optional vertical coordinate (A* heuristic only)
    """

    id: NodeId
    label: str
    x: float | None = None
    y: float | None = None

    @property
    def position(self) -> tuple[float, float]:
        """Coordinates with missing components replaced by the default."""
        default_x, default_y = DEFAULT_POSITION
        return (
            float(self.x) if self.x is not None else default_x,
            float(self.y) if self.y is not None else default_y,
        )


@dataclass
class Edge:
    """
    A weighted edge between two node ids.

    Attributes:
        id: Unique identifier within the graph
        source: Id of the node the edge leaves (``from``)
        target: Id of the node the edge enters (``to``)
        weight: Real-valued weight, possibly negative
    """

    id: EdgeId
    source: NodeId
    target: NodeId
    weight: float


class Neighbor(NamedTuple):
    """One outgoing entry of the adjacency view."""

    node: NodeId
    weight: float
    edge_id: EdgeId


class AdjacencyView(Mapping):
    """
    Read-only mapping from node id to its ordered outgoing neighbors.

    Keys are the graph's node ids. Lookups of other ids (e.g. a dangling
    edge target) yield no neighbors through ``neighbors()`` instead of
    raising.
    """

    def __init__(self, lists: dict[NodeId, list[Neighbor]]) -> None:
        self._lists = {node: tuple(nbs) for node, nbs in lists.items()}

    def __getitem__(self, node: NodeId) -> tuple[Neighbor, ...]:
        return self._lists[node]

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._lists)

    def __len__(self) -> int:
        return len(self._lists)

    def __repr__(self) -> str:
        return f"AdjacencyView({self._lists!r})"

    def neighbors(self, node: NodeId) -> tuple[Neighbor, ...]:
        return self._lists.get(node, ())

    def arcs(self) -> Iterator[tuple[NodeId, Neighbor]]:
        """Every (source, neighbor) pair, in insertion order."""
        for node, nbs in self._lists.items():
            for nb in nbs:
                yield node, nb

    def first_negative(self) -> tuple[NodeId, Neighbor] | None:
        """First arc with a negative weight, or None."""
        for node, nb in self.arcs():
            if nb.weight < 0:
                return node, nb
        return None


def finite_weight(value: object) -> float | None:
    """Coerce a weight to float; None if it is not a finite real number."""
    if isinstance(value, bool):
        return None
    try:
        weight = float(value)
    except (TypeError, ValueError):
        return None
    return weight if math.isfinite(weight) else None


def build_adjacency(
    nodes: Iterable[Node],
    edges: Iterable[Edge],
    directed: bool,
) -> AdjacencyView:
    """
    Build the adjacency view for one solver run.

    Every node gets an entry (possibly empty). Edges whose weight is not a
    finite number are skipped. In undirected mode each surviving edge is
    inserted in both directions under the same edge id.

    The keys are exactly the given node ids. Endpoints are not validated: an
    arc leaving an unknown id is left out (nothing can reach it), and an arc
    entering one stays in its source's list. The solvers never relax into
    an id that is not a key, so a dangling endpoint is an unreachable dead
    end rather than a relay.

    Args:
        nodes: Node collection
        edges: Edge collection
        directed: False to treat every edge as bidirectional

    Returns:
        Fresh AdjacencyView
    """
    lists: dict[NodeId, list[Neighbor]] = {node.id: [] for node in nodes}
    dropped = 0

    for edge in edges:
        weight = finite_weight(edge.weight)
        if weight is None:
            dropped += 1
            continue
        if edge.source in lists:
            lists[edge.source].append(Neighbor(edge.target, weight, edge.id))
        if not directed and edge.target in lists:
            lists[edge.target].append(Neighbor(edge.source, weight, edge.id))

    if dropped:
        logger.warning(f"Skipped {dropped} edge(s) with non-finite weight")

    return AdjacencyView(lists)


def node_positions(nodes: Iterable[Node]) -> dict[NodeId, tuple[float, float]]:
    """Map each node id to its (x, y), defaulting missing coordinates."""
    return {node.id: node.position for node in nodes}


@dataclass
class Graph:
    """
    Nodes, edges and an orientation flag.

    Node and edge ids are unique (dict keys). The edit methods validate
    endpoints and weights; ``nodes``/``edges`` may still be filled directly
    when the caller wants to bypass those checks.

    Attributes:
        nodes: Node id -> Node, in insertion order
        edges: Edge id -> Edge, in insertion order
        directed: False to treat every edge as bidirectional
    """

    nodes: dict[NodeId, Node] = field(default_factory=dict)
    edges: dict[EdgeId, Edge] = field(default_factory=dict)
    directed: bool = True

    @classmethod
    def from_collections(
        cls,
        nodes: Iterable[Node],
        edges: Iterable[Edge],
        directed: bool = True,
    ) -> Graph:
        return cls(
            nodes={node.id: node for node in nodes},
            edges={edge.id: edge for edge in edges},
            directed=directed,
        )

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def add_node(
        self,
        label: str,
        x: float | None = None,
        y: float | None = None,
        node_id: NodeId | None = None,
    ) -> Node:
        """
        Add a node, deriving a free id from the label when none is given.

        A taken label-derived id gets a numeric suffix: ``A``, ``A_1``,
        ``A_2``... An explicit ``node_id`` that is already taken raises
        ValueError.
        """
        if node_id is None:
            node_id = label
            count = 1
            while node_id in self.nodes:
                node_id = f"{label}_{count}"
                count += 1
        elif node_id in self.nodes:
            raise ValueError(f"Node id {node_id!r} already exists")

        node = Node(id=node_id, label=label, x=x, y=y)
        self.nodes[node_id] = node
        logger.debug(f"Added node {node_id!r}")
        return node

    def add_edge(
        self,
        source: NodeId,
        target: NodeId,
        weight: float,
        edge_id: EdgeId | None = None,
    ) -> Edge:
        """
        Add an edge between existing nodes.

        Endpoints resolve by node id first, then by label.

        Raises:
            NodeNotFoundError: If an endpoint matches no node
            InvalidWeightError: If weight is not a finite number
            ValueError: If edge_id is already taken
        """
        source_id = self.resolve(source)
        target_id = self.resolve(target)

        value = finite_weight(weight)
        if value is None:
            raise InvalidWeightError(f"Edge weight must be a finite number, got {weight!r}")

        if edge_id is None:
            edge_id = self._next_edge_id()
        elif edge_id in self.edges:
            raise ValueError(f"Edge id {edge_id!r} already exists")

        edge = Edge(id=edge_id, source=source_id, target=target_id, weight=value)
        self.edges[edge_id] = edge
        logger.debug(f"Added edge {edge_id!r}: {source_id!r} -> {target_id!r} (weight={value})")
        return edge

    def remove_node(self, node_id: NodeId) -> None:
        """Remove a node and every edge touching it."""
        if node_id not in self.nodes:
            raise NodeNotFoundError(node_id)
        del self.nodes[node_id]
        incident = [
            eid for eid, e in self.edges.items() if node_id in (e.source, e.target)
        ]
        for eid in incident:
            del self.edges[eid]

    def remove_edge(self, edge_id: EdgeId) -> None:
        if edge_id not in self.edges:
            raise KeyError(edge_id)
        del self.edges[edge_id]

    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()

    def set_directed(self, directed: bool) -> None:
        self.directed = directed

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def resolve(self, ref: NodeId) -> NodeId:
        """Return the id of the node whose id, or failing that label, is ref."""
        if ref in self.nodes:
            return ref
        for node in self.nodes.values():
            if node.label == ref:
                return node.id
        raise NodeNotFoundError(ref)

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self.nodes

    def dangling_edges(self) -> list[Edge]:
        """Edges with an endpoint that is not in the node set."""
        return [
            e for e in self.edges.values()
            if e.source not in self.nodes or e.target not in self.nodes
        ]

    def adjacency(self) -> AdjacencyView:
        """Fresh adjacency view for the current nodes, edges and orientation."""
        return build_adjacency(self.nodes.values(), self.edges.values(), self.directed)

    def positions(self) -> dict[NodeId, tuple[float, float]]:
        return node_positions(self.nodes.values())

    def _next_edge_id(self) -> str:
        n = len(self.edges) + 1
        while f"{EDGE_ID_PREFIX}{n}" in self.edges:
            n += 1
        return f"{EDGE_ID_PREFIX}{n}"
