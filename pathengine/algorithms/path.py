"""
Path reconstruction from a predecessor map.

Works the same on Dijkstra, A* and Bellman-Ford output.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pathengine.algorithms.results import Path, Predecessor
from pathengine.graph.model import NodeId

logger = logging.getLogger(__name__)


def reconstruct_path(
    predecessors: Mapping[NodeId, Predecessor | None],
    source: NodeId,
    target: NodeId,
) -> Path | None:
    """
    Walk predecessor links back from target and return the path in order.

    The walk is iterative and stops at the source, at a broken link, or when
    a node repeats (a predecessor cycle left behind by a negative cycle).

    Args:
        predecessors: Node id -> Predecessor (or None)
        source: Start node
        target: End node

    Returns:
        Path from source to target, or None when target has no
        predecessor (and is not the source) or the chain never reaches
        the source
    """
    if target == source:
        return Path(nodes=[source], edges=[])
    if predecessors.get(target) is None:
        return None

    nodes: list[NodeId] = [target]
    edges = []
    seen = {target}
    current = target

    while current != source:
        pred = predecessors.get(current)
        if pred is None:
            logger.debug(f"Predecessor chain from {target!r} breaks at {current!r}")
            return None
        if pred.node in seen:
            logger.debug(f"Predecessor chain from {target!r} loops at {pred.node!r}")
            return None
        edges.append(pred.edge_id)
        nodes.append(pred.node)
        seen.add(pred.node)
        current = pred.node

    nodes.reverse()
    edges.reverse()
    return Path(nodes=nodes, edges=edges)
