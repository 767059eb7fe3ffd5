"""
friendgraph CLI

Command-line interface for querying relationship graphs stored as
edge-list files. Each command loads the file into an AdjacencyGraph,
answers one question, and exits; nothing is written back.

Commands:
    fgraph summary <file>                  Show node/edge counts and degrees
    fgraph neighbors <file> <node>         List a node's direct neighbors
    fgraph reach <file> <source> <target>  Check whether two nodes are connected
    fgraph path <file> <source> <target>   Show a shortest path between two nodes

Usage:
    $ fgraph summary friends.txt
    $ fgraph path friends.txt Ada Eve
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from friendgraph import __version__
from friendgraph.graph import AdjacencyGraph, load_graph_from_file
from friendgraph.models import NodeNotFoundError
from friendgraph.traversal import is_reachable, shortest_path

# Initialize Typer app and Rich console
app = typer.Typer(
    name="fgraph",
    help="friendgraph: query relationship graphs from edge-list files",
    add_completion=False,
)
console = Console()


# Rows shown by `summary` unless --all is given
DEFAULT_SUMMARY_LIMIT = 10


def _graph_file_argument():
    return typer.Argument(
        ...,
        help="Path to the edge-list file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    )


def _load(path: Path) -> AdjacencyGraph:
    try:
        return load_graph_from_file(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def summary(
    path: Path = _graph_file_argument(),
    show_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Show every node, not just the most connected ones",
    ),
) -> None:
    """
    Show node and edge counts and the most connected nodes.
    """
    graph = _load(path)

    console.print(f"\n[bold blue]Graph:[/bold blue] {escape(str(path))}\n")
    console.print(f"   Nodes: [cyan]{graph.node_count}[/cyan]")
    console.print(f"   Edges: [cyan]{graph.edge_count}[/cyan]")

    if graph.node_count == 0:
        return

    ranked = sorted(graph.nodes(), key=lambda n: (-graph.degree(n), str(n)))
    limit = None if show_all else DEFAULT_SUMMARY_LIMIT

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Node")
    table.add_column("Degree", justify="right")
    for node_id in ranked[:limit]:
        table.add_row(escape(str(node_id)), str(graph.degree(node_id)))

    console.print()
    console.print(table)

    if limit is not None and len(ranked) > limit:
        console.print(f"   ... and {len(ranked) - limit} more (use --all)")


@app.command()
def neighbors(
    path: Path = _graph_file_argument(),
    node: str = typer.Argument(..., help="Node whose neighbors to list"),
) -> None:
    """
    List the nodes directly connected to a node.
    """
    graph = _load(path)

    try:
        found = sorted(graph.neighbors(node))
    except NodeNotFoundError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if not found:
        console.print(f"[yellow]{escape(node)} has no neighbors.[/yellow]")
        return

    console.print(f"\n[bold]{escape(node)}[/bold] is connected to {len(found)} node(s):")
    for neighbor in found:
        console.print(f"   • {escape(str(neighbor))}")


@app.command()
def reach(
    path: Path = _graph_file_argument(),
    source: str = typer.Argument(..., help="Start node"),
    target: str = typer.Argument(..., help="Node to look for"),
) -> None:
    """
    Check whether any path connects two nodes.
    """
    graph = _load(path)

    try:
        reachable = is_reachable(graph, source, target)
    except NodeNotFoundError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    source_text, target_text = escape(source), escape(target)
    if reachable:
        console.print(f"[green]✓ {target_text} is reachable from {source_text}[/green]")
    else:
        console.print(
            f"[yellow]✗ {target_text} is not reachable from {source_text}[/yellow]"
        )


@app.command()
def path(
    graph_file: Path = _graph_file_argument(),
    source: str = typer.Argument(..., help="Start node"),
    target: str = typer.Argument(..., help="End node"),
) -> None:
    """
    Show a shortest path between two nodes.

    When several paths share the minimum length, any one of them may
    be shown.
    """
    graph = _load(graph_file)

    try:
        found = shortest_path(graph, source, target)
    except NodeNotFoundError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if found is None:
        console.print(
            f"[yellow]No path between {escape(source)} and {escape(target)}.[/yellow]"
        )
        return

    console.print(f"\n[bold]Path:[/bold] {' → '.join(escape(str(n)) for n in found)}")
    console.print(f"[bold]Edges:[/bold] {len(found) - 1}")


# Version command
@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
    ),
) -> None:
    """
    friendgraph: query relationship graphs from edge-list files.
    """
    if version:
        console.print(f"[bold]friendgraph[/bold] version {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


if __name__ == "__main__":
    app()
