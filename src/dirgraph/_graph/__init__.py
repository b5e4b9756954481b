"""Graph module providing the directed graph and its algorithms.

This module contains:
- DirectedGraph[V]: A generic, weighted directed graph built incrementally
- Storage types: VertexId, Vertex, Edge, VertexStore, AdjacencyTable
- Algorithms: depth_first, breadth_first, topological_order, longest_distances
"""

from ._algorithms import breadth_first, depth_first, longest_distances, topological_order
from ._directed_graph import DirectedGraph
from ._storage import AdjacencyTable, Edge, Vertex, VertexId, VertexStore, Weight

__all__ = [
    "AdjacencyTable",
    "DirectedGraph",
    "Edge",
    "Vertex",
    "VertexId",
    "VertexStore",
    "Weight",
    "breadth_first",
    "depth_first",
    "longest_distances",
    "topological_order",
]
