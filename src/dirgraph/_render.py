"""Text and Rich rendering of directed graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.console import Console

    from ._graph import DirectedGraph, VertexId, Weight


def format_graph(graph: DirectedGraph[Any]) -> str:
    """Format a graph as plain text, one tab-indented line per edge.

    Example:
        >>> graph = DirectedGraph[str]()
        >>> a, b = graph.add_vertex("a"), graph.add_vertex("b")
        >>> graph.connect(a, b, 0.5)
        >>> print(format_graph(graph))
        Graph of 2 vertices:
        \t (VertexId(0):a) -(weight: 0.5)-> (VertexId(1):b)

    """
    lines = [f"Graph of {len(graph)} vertices:"]
    lines.extend(
        f"\t ({_label(graph, edge.source)}) -(weight: {edge.weight})-> ({_label(graph, edge.target)})"
        for edge in graph.all_edges()
    )
    return "\n".join(lines)


def _label(graph: DirectedGraph[Any], vertex_id: VertexId) -> str:
    return f"{vertex_id}:{graph.vertex_value(vertex_id)}"


def render_graph(graph: DirectedGraph[Any], console: Console) -> None:
    """Render the edges of a graph as a Rich table.

    Args:
        graph: Graph to render.
        console: Rich Console to output to.

    """
    if graph.edge_count == 0:
        console.print(f"[dim]Graph of {len(graph)} vertices, no edges[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("From", style="bold")
    table.add_column("To", style="bold")
    table.add_column("Weight", justify="right")

    for edge in graph.all_edges():
        weight_style = "red" if edge.weight < 0 else "green"
        table.add_row(
            escape(_label(graph, edge.source)),
            escape(_label(graph, edge.target)),
            f"[{weight_style}]{edge.weight}[/{weight_style}]",
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(graph)} vertices, {graph.edge_count} edges[/dim]")


def render_distances(
    graph: DirectedGraph[Any],
    distances: Mapping[VertexId, Weight],
    console: Console,
) -> None:
    """Render longest-path distances as a Rich table.

    Args:
        graph: Graph the distances were computed on.
        distances: Result of ``DirectedGraph.longest_distance_from``.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Vertex", style="dim")
    table.add_column("Value")
    table.add_column("Distance", justify="right")

    for vertex_id, distance in distances.items():
        table.add_row(str(vertex_id), escape(str(graph.vertex_value(vertex_id))), str(distance))

    console.print(table)
