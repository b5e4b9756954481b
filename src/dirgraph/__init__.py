"""Generic weighted directed graph with traversal and path analysis."""

__all__ = [
    "AdjacencyTable",
    "CyclicGraphError",
    "CyclicOrEmptyGraphError",
    "DirectedGraph",
    "Edge",
    "GraphError",
    "InvalidVertexError",
    "Vertex",
    "VertexId",
    "VertexStore",
    "Weight",
    "breadth_first",
    "configure_logging",
    "depth_first",
    "format_graph",
    "longest_distances",
    "render_distances",
    "render_graph",
    "topological_order",
]

from ._errors import CyclicGraphError, CyclicOrEmptyGraphError, GraphError, InvalidVertexError
from ._graph import (
    AdjacencyTable,
    DirectedGraph,
    Edge,
    Vertex,
    VertexId,
    VertexStore,
    Weight,
    breadth_first,
    depth_first,
    longest_distances,
    topological_order,
)
from ._logging import configure_logging
from ._render import format_graph, render_distances, render_graph
