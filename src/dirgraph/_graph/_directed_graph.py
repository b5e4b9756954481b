"""Generic weighted directed graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dirgraph._errors import CyclicGraphError

from ._algorithms import breadth_first, depth_first, longest_distances, topological_order
from ._storage import AdjacencyTable, Edge, Vertex, VertexId, VertexStore

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._storage import Weight


class DirectedGraph[V]:
    """A directed graph with weighted edges, grown one vertex and edge at a time.

    Vertices are addressed by the ``VertexId`` returned from ``add_vertex``.
    Ids are dense, monotonic and never reused; an id issued by one graph is
    rejected by every other graph.

    The graph is not thread-safe. It must not be mutated while an iterator
    returned by one of the traversal methods is still being consumed.

    Example:
        >>> graph = DirectedGraph[str]()
        >>> a = graph.add_vertex("a")
        >>> b = graph.add_vertex("b")
        >>> graph.connect(a, b, 2.5)
        >>> [graph.vertex_value(v) for v in graph.depth_first_iter(a)]
        ['a', 'b']

    """

    __slots__ = ("_adjacency", "_store")

    def __init__(self) -> None:
        self._store: VertexStore[V] = VertexStore()
        self._adjacency = AdjacencyTable()

    # --- construction ---

    def add_vertex(self, value: V) -> VertexId:
        """Add a vertex holding ``value``.

        Args:
            value: Caller-supplied payload stored as-is.

        Returns:
            The id of the new vertex.

        """
        vertex_id = self._store.add(value)
        self._adjacency.add_row()
        return vertex_id

    def connect(self, source: VertexId, target: VertexId, weight: Weight = 1.0) -> None:
        """Add a directed edge from ``source`` to ``target``.

        Duplicate edges and self-loops are kept as given.

        Args:
            source: Vertex the edge leaves.
            target: Vertex the edge enters.
            weight: Edge weight; negative values are allowed.

        Raises:
            InvalidVertexError: If either endpoint is not a vertex of this graph.
                The graph is left unchanged.

        """
        self._store.check(source)
        self._store.check(target)
        self._adjacency.append(Edge(source, target, weight))

    # --- accessors ---

    def vertex(self, vertex_id: VertexId) -> Vertex[V]:
        return self._store.get(vertex_id)

    def vertex_value(self, vertex_id: VertexId) -> V:
        """Get the value stored at ``vertex_id``.

        Raises:
            InvalidVertexError: If the id is not a vertex of this graph.

        """
        return self._store.get(vertex_id).value

    def edges(self, vertex_id: VertexId) -> tuple[Edge, ...]:
        """Get the outgoing edges of ``vertex_id`` in insertion order.

        Raises:
            InvalidVertexError: If the id is not a vertex of this graph.

        """
        self._store.check(vertex_id)
        return self._adjacency.outgoing(vertex_id)

    def successors(self, vertex_id: VertexId) -> tuple[VertexId, ...]:
        """Get the targets of the outgoing edges of ``vertex_id``, in edge order."""
        return tuple(edge.target for edge in self.edges(vertex_id))

    def check_vertex(self, vertex_id: VertexId) -> None:
        """Raise InvalidVertexError unless ``vertex_id`` is a vertex of this graph."""
        self._store.check(vertex_id)

    @property
    def vertices(self) -> list[VertexId]:
        """All vertex ids in ascending order."""
        return self._store.ids()

    def all_edges(self) -> Iterator[Edge]:
        """Iterate every edge, grouped by source vertex in id order."""
        return iter(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._adjacency.edge_count

    @property
    def is_empty(self) -> bool:
        return len(self._store) == 0

    def roots(self) -> list[VertexId]:
        """Get vertices with no incoming edges, in ascending id order."""
        targets = {edge.target for edge in self._adjacency}
        return [vertex_id for vertex_id in self.vertices if vertex_id not in targets]

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle."""
        try:
            for _ in topological_order(self):
                pass
        except CyclicGraphError:
            return True
        return False

    # --- queries ---

    def depth_first_iter(self, start: VertexId) -> Iterator[VertexId]:
        """Iterate vertices reachable from ``start`` in depth-first preorder."""
        return depth_first(self, start)

    def breadth_first_iter(self, start: VertexId) -> Iterator[VertexId]:
        """Iterate vertices reachable from ``start`` in breadth-first order."""
        return breadth_first(self, start)

    def topologically_ordered_iter(self, *, strict: bool = True) -> Iterator[VertexId]:
        """Iterate all vertices so that every edge points forward.

        Args:
            strict: If True, raise CyclicGraphError once the acyclic part has been
                yielded. If False, stop silently and leave the cyclic part out.

        """
        return topological_order(self, strict=strict)

    def longest_distance_from(self, source: VertexId) -> dict[VertexId, Weight]:
        """Compute the longest path length from ``source`` to each reachable vertex.

        Raises:
            CyclicOrEmptyGraphError: If the graph is empty or a cycle is reachable
                from ``source``.
            InvalidVertexError: If ``source`` is not a vertex of this graph.

        """
        return longest_distances(self, source)

    # --- dunder ---

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._store)

    def __contains__(self, vertex_id: object) -> bool:
        return isinstance(vertex_id, VertexId) and self._store.owns(vertex_id)

    def __iter__(self) -> Iterator[Vertex[V]]:
        return iter(self._store)

    def __str__(self) -> str:
        from dirgraph._render import format_graph  # noqa: PLC0415

        return format_graph(self)

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={len(self)}, edges={self.edge_count})"
