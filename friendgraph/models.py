"""
Core Data Models for friendgraph

This module defines the canonical data structures shared by the graph
and traversal layers:
- Edge: An undirected relationship between two node identifiers
- NodeNotFoundError: Raised when an operation needs a node that is absent

Node identifiers themselves are not wrapped: any hashable value except
None (e.g. a person's name) is used directly as a node.
"""

from dataclasses import dataclass
from typing import Hashable


class NodeNotFoundError(LookupError):
    """
    Raised when an operation requires a node that is not in the graph.

    Only operations that must read a node's neighbors raise this
    (create_edge, neighbors, degree and the traversal functions).
    Predicates and removals treat a missing node as a normal case.

    Attributes:
        node_id: The identifier that was looked up
    """

    def __init__(self, node_id: Hashable) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Node not found: {self.node_id!r}"


@dataclass(frozen=True)
class Edge:
    """
    Represents an undirected relationship between two nodes.

    Edges compare and hash without regard to endpoint order, so
    Edge("Ada", "Grace") == Edge("Grace", "Ada").

    Attributes:
        a: One endpoint
        b: The other endpoint (may equal a for a self-loop)
    """

    a: Hashable
    b: Hashable

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or (
            self.a == other.b and self.b == other.a
        )

    def __hash__(self) -> int:
        return hash(frozenset((self.a, self.b)))

    @property
    def is_self_loop(self) -> bool:
        """Check if both endpoints are the same node."""
        return self.a == self.b

    def endpoints(self) -> tuple[Hashable, Hashable]:
        """Return the endpoints as a plain tuple."""
        return (self.a, self.b)
