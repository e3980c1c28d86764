"""
Graph model module.

Provides the graph value and its derived adjacency view:
- Graph, Node, Edge: Caller-owned graph data
- AdjacencyView, Neighbor: Per-run outgoing-neighbor lists
- build_adjacency: Derive the adjacency view
- load_graph: Read a graph from JSON
"""

from pathengine.graph.loader import graph_from_dict, load_graph
from pathengine.graph.model import (
    AdjacencyView,
    Edge,
    EdgeId,
    Graph,
    Neighbor,
    Node,
    NodeId,
    build_adjacency,
    node_positions,
)

__all__ = [
    "AdjacencyView",
    "Edge",
    "EdgeId",
    "Graph",
    "Neighbor",
    "Node",
    "NodeId",
    "build_adjacency",
    "node_positions",
    "graph_from_dict",
    "load_graph",
]
