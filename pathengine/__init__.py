"""
Graph Shortest-Path Engine.

Computes distances and reconstructs paths over weighted node/edge
collections using Dijkstra, A* and Bellman-Ford.
"""

__version__ = "0.1.0"
