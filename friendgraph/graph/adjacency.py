"""
Adjacency Graph for friendgraph

This module provides the mutable, undirected, unweighted graph that the
traversal algorithms run against. Nodes are opaque hashable identifiers
and edges are symmetric, duplicate-free relationships between them.

Design Decisions:
    - Wraps a NetworkX Graph, whose adjacency mapping keeps both sides
      of every edge in step within a single call
    - The NetworkX graph is private; callers only get immutable copies
    - Operations that must read a missing node's neighbors raise
      NodeNotFoundError instead of creating placeholder nodes
    - Removals and predicates treat missing nodes as a normal case

Graph Properties:
    - Undirected: has_edge(a, b) == has_edge(b, a) at all times
    - Self-loops are stored if requested but carry no special meaning
    - An edge exists only while both of its endpoints exist
"""

from typing import Hashable, Iterator

import networkx as nx

from friendgraph.models import Edge, NodeNotFoundError


class AdjacencyGraph:
    """
    An in-memory graph of entities and their symmetric relationships.

    Wraps a NetworkX Graph to provide a narrow interface for:
    - Adding, checking and removing nodes
    - Creating, checking and removing edges
    - Reading a node's neighbors without exposing mutable state

    Usage:
        graph = AdjacencyGraph()
        graph.add_node("Ada")
        graph.add_node("Grace")
        graph.create_edge("Ada", "Grace")
        assert graph.has_edge("Grace", "Ada")
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._graph: nx.Graph = nx.Graph()

    @property
    def node_count(self) -> int:
        """Return the number of nodes in the graph."""
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        """Return the number of edges in the graph (self-loops count once)."""
        return self._graph.number_of_edges()

    def __len__(self) -> int:
        return self.node_count

    def __contains__(self, node_id: object) -> bool:
        return self.has_node(node_id)

    def __repr__(self) -> str:
        return f"AdjacencyGraph(nodes={self.node_count}, edges={self.edge_count})"

    def add_node(self, node_id: Hashable) -> None:
        """
        Add a node with no neighbors.

        Re-adding an existing node is a no-op: its edges are kept.

        Args:
            node_id: The node identifier (any hashable value except None)
        """
        if node_id not in self._graph:
            self._graph.add_node(node_id)

    def has_node(self, node_id: object) -> bool:
        """
        Check whether a node is in the graph.

        Unhashable values are never nodes, so they report False.
        """
        return node_id in self._graph

    def remove_node(self, node_id: Hashable) -> None:
        """
        Remove a node and every edge touching it.

        Does nothing if the node is absent.

        Args:
            node_id: The node to remove
        """
        if self.has_node(node_id):
            self._graph.remove_node(node_id)

    def create_edge(self, a: Hashable, b: Hashable) -> None:
        """
        Connect two existing nodes.

        Both sides of the relationship are recorded together. Creating
        an edge that already exists leaves the graph unchanged.

        Args:
            a: One endpoint
            b: The other endpoint

        Raises:
            NodeNotFoundError: If a or b has not been added
        """
        self._require(a)
        self._require(b)
        self._graph.add_edge(a, b)

    def has_edge(self, a: Hashable, b: Hashable) -> bool:
        """
        Check whether two nodes are connected.

        Returns False if either node is absent.
        """
        if not (self.has_node(a) and self.has_node(b)):
            return False
        return self._graph.has_edge(a, b)

    def remove_edge(self, a: Hashable, b: Hashable) -> None:
        """
        Disconnect two nodes.

        Does nothing if the edge, or either node, does not exist.
        """
        if self.has_edge(a, b):
            self._graph.remove_edge(a, b)

    def neighbors(self, node_id: Hashable) -> frozenset[Hashable]:
        """
        Get the nodes directly connected to a node.

        The result is an immutable snapshot, so the graph may be changed
        while iterating over it.

        Args:
            node_id: The node whose neighbors to return

        Returns:
            A frozenset of neighbor identifiers

        Raises:
            NodeNotFoundError: If the node is absent
        """
        self._require(node_id)
        return frozenset(self._graph.adj[node_id])

    def degree(self, node_id: Hashable) -> int:
        """Return how many neighbors a node has."""
        self._require(node_id)
        return len(self._graph.adj[node_id])

    def nodes(self) -> Iterator[Hashable]:
        """
        Iterate over all node identifiers.

        Yields:
            Each node in the graph (in no particular order)
        """
        yield from self._graph.nodes

    def edges(self) -> Iterator[Edge]:
        """
        Iterate over all edges, each undirected edge exactly once.

        Yields:
            An Edge per relationship
        """
        for a, b in self._graph.edges():
            yield Edge(a, b)

    def clear(self) -> None:
        """Remove all nodes and edges from the graph."""
        self._graph.clear()

    def _require(self, node_id: Hashable) -> None:
        if not self.has_node(node_id):
            raise NodeNotFoundError(node_id)
