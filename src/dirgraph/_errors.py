"""Exceptions raised by graph construction and queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._graph import VertexId


class GraphError(ValueError):
    """Base class for all graph errors."""


class InvalidVertexError(GraphError):
    """A vertex id does not belong to the graph it was used with."""

    def __init__(self, vertex_id: VertexId, reason: str = "does not exist in this graph") -> None:
        self.vertex_id = vertex_id
        super().__init__(f"{vertex_id} {reason}")


class CyclicGraphError(GraphError):
    """Topological ordering hit a cycle.

    Attributes:
        emitted: Vertices that were ordered before the cycle was detected.

    """

    def __init__(self, emitted: tuple[VertexId, ...], remaining: int) -> None:
        self.emitted = emitted
        self.remaining = remaining
        super().__init__(f"Cycle detected in graph: {remaining} vertices could not be ordered")


class CyclicOrEmptyGraphError(GraphError):
    """Longest-path computation requires a non-empty graph with no reachable cycle."""
