"""
friendgraph

In-memory undirected graph of entities and their relationships, with
breadth-first reachability and shortest-path queries.
"""

from friendgraph.models import Edge, NodeNotFoundError
from friendgraph.graph import AdjacencyGraph, build_graph_from_edges
from friendgraph.traversal import is_reachable, shortest_path

__all__ = [
    "AdjacencyGraph",
    "Edge",
    "NodeNotFoundError",
    "build_graph_from_edges",
    "is_reachable",
    "shortest_path",
]
__version__ = "0.1.0"
