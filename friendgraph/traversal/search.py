"""
Graph Traversal for friendgraph

This module implements breadth-first queries over an AdjacencyGraph:
reachability, shortest path by edge count, distance, and the set of
nodes reachable from a source.

Design Decisions:
    - Breadth-first search, so nodes are discovered in non-decreasing
      distance from the source and the first path found is shortest
    - Read-only: only has_node and neighbors are used on the graph
    - All search state (visited set, frontier, predecessors) is local
      to one call, so concurrent queries on an unchanging graph are safe
    - "No path" is None, never an empty list

Academic Context:
    Input: An AdjacencyGraph and one or two node identifiers
    Transformation: Breadth-first expansion with a visited set
    Output: A boolean, a path, a distance or a set of nodes
    Limitation: When several shortest paths exist, which one is
                returned depends on neighbor iteration order
"""

from collections import deque
from typing import Hashable, Iterator, Optional

from friendgraph.graph.adjacency import AdjacencyGraph
from friendgraph.models import NodeNotFoundError


def _breadth_first(
    graph: AdjacencyGraph, source: Hashable
) -> Iterator[tuple[Hashable, Hashable]]:
    """
    Yield (node, discovered_from) pairs in breadth-first discovery order.

    The source itself is not yielded. Each node is yielded at most once,
    so the search ends after every reachable node has been expanded.
    """
    visited = {source}
    frontier = deque([source])

    while frontier:
        current = frontier.popleft()
        for neighbor in graph.neighbors(current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            frontier.append(neighbor)
            yield neighbor, current


def _require_endpoints(graph: AdjacencyGraph, *node_ids: Hashable) -> None:
    for node_id in node_ids:
        if not graph.has_node(node_id):
            raise NodeNotFoundError(node_id)


def is_reachable(graph: AdjacencyGraph, source: Hashable, target: Hashable) -> bool:
    """
    Check whether any path connects two nodes.

    A node is always reachable from itself. The search stops as soon
    as the target is discovered.

    Args:
        graph: The graph to search
        source: Start node
        target: Node to look for

    Returns:
        True if target can be reached from source

    Raises:
        NodeNotFoundError: If source or target is absent

    Example:
        >>> graph = build_graph_from_edges([("A", "B")], nodes=["C"])
        >>> is_reachable(graph, "A", "B"), is_reachable(graph, "A", "C")
        (True, False)
    """
    _require_endpoints(graph, source, target)

    if source == target:
        return True

    for node, _ in _breadth_first(graph, source):
        if node == target:
            return True

    return False


def shortest_path(
    graph: AdjacencyGraph, source: Hashable, target: Hashable
) -> Optional[list[Hashable]]:
    """
    Find a path with the fewest edges between two nodes.

    Every node discovered by the search remembers the node it was
    discovered from. Once the target is discovered, those back
    references are followed from target to source and reversed.

    Args:
        graph: The graph to search
        source: Start node
        target: End node

    Returns:
        The nodes along the path, source and target included, or None
        if target is unreachable. A node's path to itself is [source].

    Raises:
        NodeNotFoundError: If source or target is absent

    Example:
        >>> graph = build_graph_from_edges([("A", "B"), ("B", "C"), ("C", "D")])
        >>> shortest_path(graph, "A", "D")
        ['A', 'B', 'C', 'D']
    """
    _require_endpoints(graph, source, target)

    if source == target:
        return [source]

    predecessors: dict[Hashable, Hashable] = {}

    for node, parent in _breadth_first(graph, source):
        predecessors[node] = parent
        if node == target:
            return _reconstruct_path(predecessors, source, target)

    return None


def _reconstruct_path(
    predecessors: dict[Hashable, Hashable], source: Hashable, target: Hashable
) -> list[Hashable]:
    path = [target]
    while path[-1] != source:
        path.append(predecessors[path[-1]])
    path.reverse()
    return path


def distance(
    graph: AdjacencyGraph, source: Hashable, target: Hashable
) -> Optional[int]:
    """
    Return the number of edges on a shortest path, or None if there is none.

    Raises:
        NodeNotFoundError: If source or target is absent
    """
    path = shortest_path(graph, source, target)
    if path is None:
        return None
    return len(path) - 1


def reachable_from(graph: AdjacencyGraph, source: Hashable) -> set[Hashable]:
    """
    Get every node in the same connected component as source.

    Args:
        graph: The graph to search
        source: Start node

    Returns:
        The set of reachable nodes, including source itself

    Raises:
        NodeNotFoundError: If source is absent
    """
    _require_endpoints(graph, source)

    reached = {source}
    reached.update(node for node, _ in _breadth_first(graph, source))
    return reached
