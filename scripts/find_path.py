#!/usr/bin/env python3
"""
Shortest-path CLI - run Dijkstra, A* or Bellman-Ford on a graph file.

Usage:
    python scripts/find_path.py --sample --start A --target D
    python scripts/find_path.py --sample --start A --target D --algorithm astar
    python scripts/find_path.py --graph roads.json --start Home --target Work --undirected
    python scripts/find_path.py --graph neg.json --start A --target D --algorithm bellman-ford

Graph files are JSON:
    {"directed": true,
     "nodes": [{"id": "A", "label": "A", "x": 0, "y": 0}, ...],
     "edges": [{"id": "e1", "from": "A", "to": "B", "weight": 4}, ...]}

Exit codes:
    0 - path found
    1 - no path (or negative cycle)
    2 - invalid input
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathengine.config import (  # noqa: E402
    ALGORITHMS,
    DEFAULT_ALGORITHM,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from pathengine.engine import PathEngine  # noqa: E402
from pathengine.errors import NodeNotFoundError, PathEngineError  # noqa: E402
from pathengine.graph import graph_from_dict, load_graph  # noqa: E402

# Six-node demo graph with canvas coordinates
SAMPLE_GRAPH = {
    "directed": True,
    "nodes": [
        {"id": "A", "label": "A", "x": -200, "y": -100},
        {"id": "B", "label": "B", "x": -50, "y": -120},
        {"id": "C", "label": "C", "x": 80, "y": -50},
        {"id": "D", "label": "D", "x": 150, "y": 70},
        {"id": "E", "label": "E", "x": 0, "y": 80},
        {"id": "F", "label": "F", "x": -140, "y": 40},
    ],
    "edges": [
        {"id": "e1", "from": "A", "to": "B", "weight": 4},
        {"id": "e2", "from": "A", "to": "C", "weight": 7},
        {"id": "e3", "from": "B", "to": "C", "weight": 1},
        {"id": "e4", "from": "B", "to": "F", "weight": 5},
        {"id": "e5", "from": "C", "to": "D", "weight": 3},
        {"id": "e6", "from": "C", "to": "E", "weight": 2},
        {"id": "e7", "from": "E", "to": "D", "weight": 4},
        {"id": "e8", "from": "F", "to": "E", "weight": 6},
    ],
}


def lookup_node(graph, ref: str):
    """Resolve a CLI node reference by id, label, or integer id."""
    try:
        return graph.resolve(ref)
    except NodeNotFoundError:
        if ref.lstrip("-").isdigit():
            return graph.resolve(int(ref))
        raise


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a shortest path in a weighted graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--graph",
        type=Path,
        help="Path to a JSON graph file",
    )
    source.add_argument(
        "--sample",
        action="store_true",
        help="Use the built-in six-node demo graph",
    )

    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Source node id",
    )
    parser.add_argument(
        "--target",
        type=str,
        required=True,
        help="Target node id",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=list(ALGORITHMS),
        help=f"Algorithm to run (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--undirected",
        action="store_true",
        help="Treat every edge as bidirectional",
    )
    parser.add_argument(
        "--allow-negative",
        action="store_true",
        help="Run Dijkstra / A* even if some weights are negative",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    try:
        graph = graph_from_dict(SAMPLE_GRAPH) if args.sample else load_graph(args.graph)
    except (OSError, PathEngineError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.undirected:
        graph.set_directed(False)

    engine = PathEngine(reject_negative_weights=not args.allow_negative)
    try:
        start = lookup_node(graph, args.start)
        target = lookup_node(graph, args.target)
        result = engine.run(graph, start, target, args.algorithm)
    except PathEngineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("\n" + "=" * 60)
    print(result.summary())
    print("=" * 60)

    if not result.found:
        return 1

    print("\nPath taken:")
    for i, node_id in enumerate(result.path.nodes):
        marker = " (START)" if i == 0 else " (TARGET)" if i == len(result.path.nodes) - 1 else ""
        via = f"  via {result.path.edges[i - 1]}" if i > 0 else ""
        print(f"  {i}. {node_id}{marker}{via}")

    print(f"\nTotal cost: {result.distance:g}")
    print(f"Solve time: {result.elapsed_ms:.2f}ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
