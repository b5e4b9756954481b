"""Traversal, ordering and path algorithms over a directed graph."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any

from dirgraph._errors import CyclicGraphError, CyclicOrEmptyGraphError

if TYPE_CHECKING:
    from collections.abc import Generator, Iterator, Sequence

    from ._directed_graph import DirectedGraph
    from ._storage import VertexId, Weight

logger = logging.getLogger(__name__)


def depth_first(graph: DirectedGraph[Any], start: VertexId) -> Iterator[VertexId]:
    """Iterate vertices reachable from ``start`` in depth-first preorder.

    Uses an explicit stack, so deep graphs do not hit the recursion limit.
    Successors are pushed in reverse edge order so the first-connected
    neighbor is visited first.

    Args:
        graph: The graph to traverse.
        start: Vertex to start from; always yielded first.

    Returns:
        Iterator yielding each reachable vertex exactly once.

    Raises:
        InvalidVertexError: If ``start`` is not a vertex of ``graph``. Raised
            immediately, not on first iteration.

    """
    graph.check_vertex(start)
    return _depth_first(graph, start)


def _depth_first(graph: DirectedGraph[Any], start: VertexId) -> Generator[VertexId]:
    visited: set[VertexId] = set()
    stack = [start]
    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        yield vertex
        stack.extend(reversed(graph.successors(vertex)))


def breadth_first(graph: DirectedGraph[Any], start: VertexId) -> Iterator[VertexId]:
    """Iterate vertices reachable from ``start`` in breadth-first (level) order.

    Raises:
        InvalidVertexError: If ``start`` is not a vertex of ``graph``.

    """
    graph.check_vertex(start)
    return _breadth_first(graph, start)


def _breadth_first(graph: DirectedGraph[Any], start: VertexId) -> Generator[VertexId]:
    visited: set[VertexId] = set()
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        if vertex in visited:
            continue
        visited.add(vertex)
        yield vertex
        queue.extend(graph.successors(vertex))


def topological_order(graph: DirectedGraph[Any], *, strict: bool = True) -> Generator[VertexId]:
    """Iterate all vertices so that for every edge (u -> v), u comes before v.

    Kahn's algorithm; vertices with no predecessors are seeded in ascending
    id order, so the result is deterministic.

    Args:
        graph: The graph to order.
        strict: What to do when a cycle prevents ordering every vertex.
            True raises CyclicGraphError after the acyclic part has been
            yielded; False stops silently, leaving the cyclic part out.

    Raises:
        CyclicGraphError: If ``strict`` and the graph contains a cycle.

    Example:
        >>> graph = DirectedGraph[str]()
        >>> a, b = graph.add_vertex("a"), graph.add_vertex("b")
        >>> graph.connect(b, a)
        >>> [graph.vertex_value(v) for v in topological_order(graph)]
        ['b', 'a']

    """
    return _kahn(graph, graph.vertices, strict=strict)


def _kahn(graph: DirectedGraph[Any], vertices: Sequence[VertexId], *, strict: bool) -> Generator[VertexId]:
    """Order ``vertices`` topologically, ignoring edges that leave the set."""
    members = set(vertices)

    # Every edge counts, so duplicates and self-loops raise the in-degree too
    indegree = dict.fromkeys(vertices, 0)
    for vertex in vertices:
        for target in graph.successors(vertex):
            if target in members:
                indegree[target] += 1

    queue = deque(vertex for vertex in vertices if indegree[vertex] == 0)
    emitted: list[VertexId] = []

    while queue:
        vertex = queue.popleft()
        emitted.append(vertex)
        yield vertex
        for target in graph.successors(vertex):
            if target not in members:
                continue
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)

    remaining = len(vertices) - len(emitted)
    if remaining:
        logger.debug("Topological order stopped with %d of %d vertices unordered", remaining, len(vertices))
        if strict:
            raise CyclicGraphError(tuple(emitted), remaining)


def longest_distances(graph: DirectedGraph[Any], source: VertexId) -> dict[VertexId, Weight]:
    """Compute the longest path length from ``source`` to every reachable vertex.

    Orders the vertices reachable from ``source`` topologically and relaxes
    each outgoing edge once in that order. Since every predecessor of a vertex
    is settled before the vertex itself, a single pass is enough and negative
    weights need no special handling.

    Args:
        graph: The graph to analyze.
        source: Vertex the paths start from.

    Returns:
        Mapping from each vertex reachable from ``source`` to the largest
        weight sum over all paths reaching it, in topological order.
        ``source`` maps to 0. Unreachable vertices are absent.

    Raises:
        CyclicOrEmptyGraphError: If the graph is empty or a cycle is reachable
            from ``source``.
        InvalidVertexError: If ``source`` is not a vertex of ``graph``.

    """
    if graph.is_empty:
        msg = "Cannot compute longest distances in an empty graph"
        raise CyclicOrEmptyGraphError(msg)
    graph.check_vertex(source)

    reachable = sorted(_depth_first(graph, source))
    logger.debug("Computing longest distances from %s over %d reachable vertices", source, len(reachable))

    try:
        order = list(_kahn(graph, reachable, strict=True))
    except CyclicGraphError as exc:
        msg = f"Cannot compute longest distances from {source}: a cycle is reachable from it"
        raise CyclicOrEmptyGraphError(msg) from exc

    distances: dict[VertexId, Weight] = {source: 0}
    for vertex in order:
        if vertex not in distances:
            continue
        base = distances[vertex]
        for edge in graph.edges(vertex):
            candidate = base + edge.weight
            if edge.target not in distances or candidate > distances[edge.target]:
                distances[edge.target] = candidate

    return {vertex: distances[vertex] for vertex in order if vertex in distances}
