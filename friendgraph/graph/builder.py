"""
Graph Builders for friendgraph

This module constructs AdjacencyGraph instances from plain inputs:
an iterable of relationships, or an edge-list text file.

Edge-list Format:
    - One entry per line, fields separated by whitespace
    - One field declares an isolated node: "Lina"
    - Two fields declare an edge: "Ada Grace"
    - "#" at the start of a line or after whitespace starts a comment,
      so names such as "C#" are kept whole; blank lines are ignored

Academic Context:
    Input: Pairs of node identifiers (in memory or as text)
    Transformation: Node creation followed by edge creation
    Output: A populated AdjacencyGraph
    Limitation: Names in edge-list files cannot contain whitespace
                or start with "#"
"""

import re
from pathlib import Path
from typing import Hashable, Iterable, Union

from friendgraph.graph.adjacency import AdjacencyGraph
from friendgraph.models import Edge


# Marker that starts a comment in edge-list files
COMMENT_PREFIX = "#"
_COMMENT_PATTERN = re.compile(rf"(?:^|\s){re.escape(COMMENT_PREFIX)}.*$")

EdgeLike = Union[Edge, tuple[Hashable, Hashable]]


def build_graph_from_edges(
    edges: Iterable[EdgeLike],
    nodes: Iterable[Hashable] = (),
) -> AdjacencyGraph:
    """
    Build an AdjacencyGraph from relationships and isolated nodes.

    Endpoints are added as nodes before their edge is created, so
    unlike AdjacencyGraph.create_edge this never raises
    NodeNotFoundError.

    Args:
        edges: Edges or (a, b) pairs
        nodes: Extra nodes to add even if they have no edges

    Returns:
        A graph containing every given node and edge

    Example:
        >>> graph = build_graph_from_edges([("A", "B"), ("B", "C")], nodes=["D"])
        >>> graph.node_count, graph.edge_count
        (4, 2)
    """
    graph = AdjacencyGraph()

    for node_id in nodes:
        graph.add_node(node_id)

    for edge in edges:
        a, b = edge.endpoints() if isinstance(edge, Edge) else edge
        graph.add_node(a)
        graph.add_node(b)
        graph.create_edge(a, b)

    return graph


def parse_edge_list(text: str, source: str = "<string>") -> AdjacencyGraph:
    """
    Build an AdjacencyGraph from edge-list text.

    Args:
        text: Edge-list content (see module docstring for the format)
        source: Name used in error messages

    Returns:
        The graph described by the text

    Raises:
        ValueError: If a line has more than two fields
    """
    edges: list[tuple[str, str]] = []
    nodes: list[str] = []

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = _COMMENT_PATTERN.sub("", raw_line).strip()
        if not line:
            continue

        fields = line.split()
        if len(fields) == 1:
            nodes.append(fields[0])
        elif len(fields) == 2:
            edges.append((fields[0], fields[1]))
        else:
            raise ValueError(
                f"{source}:{line_no}: expected 1 or 2 names, got {len(fields)}"
            )

    return build_graph_from_edges(edges, nodes=nodes)


def load_graph_from_file(path: Path | str) -> AdjacencyGraph:
    """
    Build an AdjacencyGraph from an edge-list file.

    Args:
        path: Path to a UTF-8 edge-list file

    Returns:
        The graph described by the file

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is not a file or a line is malformed
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if not path.is_file():
        raise ValueError(f"Not a file: {path}")

    return parse_edge_list(path.read_text(encoding="utf-8"), source=str(path))
