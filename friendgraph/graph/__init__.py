"""
Graph module for friendgraph.

This module provides the NetworkX-backed adjacency graph and helpers
for building one from relationships or edge-list files.
"""

from friendgraph.graph.adjacency import AdjacencyGraph
from friendgraph.graph.builder import (
    build_graph_from_edges,
    load_graph_from_file,
    parse_edge_list,
)

__all__ = [
    "AdjacencyGraph",
    "build_graph_from_edges",
    "load_graph_from_file",
    "parse_edge_list",
]
