"""
Read graphs from JSON documents.

Expected shape:

    {
        "directed": true,
        "nodes": [{"id": "A", "label": "A", "x": -200, "y": -100}, ...],
        "edges": [{"id": "e1", "from": "A", "to": "B", "weight": 4}, ...]
    }

Ids and endpoints must be strings or integers. Weights are coerced with
float(); anything that is not a finite number (including booleans) is kept
as NaN so adjacency construction drops it. Endpoints are not checked
against the node set.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pathengine.errors import GraphFormatError
from pathengine.graph.model import Edge, Graph, Node, finite_weight

logger = logging.getLogger(__name__)


def _coerce_weight(value: Any) -> float:
    weight = finite_weight(value)
    return float("nan") if weight is None else weight


def _check_id(value: Any, what: str) -> Any:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise GraphFormatError(f"{what} must be a string or integer, got {value!r}")
    return value


def _get_list(data: dict[str, Any], key: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise GraphFormatError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _coerce_coord(value: Any, field_name: str, node_id: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise GraphFormatError(f"Node {node_id!r}: {field_name} must be numeric, got {value!r}") from e


def graph_from_dict(data: dict[str, Any]) -> Graph:
    """
    Build a Graph from an already-parsed document.

    Raises:
        GraphFormatError: If the document is not an object, nodes/edges are not
            lists, required keys are missing, or ids are invalid or repeat
    """
    if not isinstance(data, dict):
        raise GraphFormatError("Graph document must be a JSON object")

    graph = Graph(directed=bool(data.get("directed", True)))

    for i, raw in enumerate(_get_list(data, "nodes")):
        if not isinstance(raw, dict) or "id" not in raw:
            raise GraphFormatError(f"Node #{i} has no 'id'")
        node_id = _check_id(raw["id"], f"Node #{i} id")
        if node_id in graph.nodes:
            raise GraphFormatError(f"Duplicate node id {node_id!r}")
        graph.nodes[node_id] = Node(
            id=node_id,
            label=str(raw.get("label", node_id)),
            x=_coerce_coord(raw.get("x"), "x", node_id),
            y=_coerce_coord(raw.get("y"), "y", node_id),
        )

    for i, raw in enumerate(_get_list(data, "edges")):
        if not isinstance(raw, dict):
            raise GraphFormatError(f"Edge #{i} must be an object")
        missing = [k for k in ("from", "to", "weight") if k not in raw]
        if missing:
            raise GraphFormatError(f"Edge #{i} is missing {', '.join(missing)}")
        edge_id = _check_id(raw.get("id", f"e{i + 1}"), f"Edge #{i} id")
        if edge_id in graph.edges:
            raise GraphFormatError(f"Duplicate edge id {edge_id!r}")
        graph.edges[edge_id] = Edge(
            id=edge_id,
            source=_check_id(raw["from"], f"Edge #{i} 'from'"),
            target=_check_id(raw["to"], f"Edge #{i} 'to'"),
            weight=_coerce_weight(raw["weight"]),
        )

    return graph


def load_graph(path: str | Path) -> Graph:
    """
    Load a graph from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        GraphFormatError: If the file is not UTF-8 JSON or not a valid graph
            document
    """
    path = Path(path)
    logger.info(f"Loading graph from {path}...")
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise GraphFormatError(f"{path}: invalid JSON ({e})") from e
        except UnicodeDecodeError as e:
            raise GraphFormatError(f"{path}: not UTF-8 text ({e})") from e

    graph = graph_from_dict(data)
    logger.info(f"Loaded {len(graph.nodes):,} nodes and {len(graph.edges):,} edges")
    return graph
