"""
Traversal module for friendgraph.

Breadth-first queries over an AdjacencyGraph: reachability, shortest
path, distance and connected component membership.
"""

from friendgraph.traversal.search import (
    distance,
    is_reachable,
    reachable_from,
    shortest_path,
)

__all__ = [
    "distance",
    "is_reachable",
    "reachable_from",
    "shortest_path",
]
