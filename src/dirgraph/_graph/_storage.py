"""Vertex and edge storage backing a directed graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import TYPE_CHECKING

from dirgraph._errors import InvalidVertexError

if TYPE_CHECKING:
    from collections.abc import Iterator

type Weight = int | float

# Each store draws a fresh token so ids issued by one graph are rejected by another.
_owner_tokens = count(1)


@dataclass(frozen=True, slots=True, order=True)
class VertexId:
    """Opaque handle identifying a vertex within exactly one graph.

    Attributes:
        index: Dense position of the vertex in its graph (0, 1, 2, ...).
        owner: Token of the store that issued the id.

    """

    index: int
    owner: int = field(default=0, repr=False)

    def __str__(self) -> str:
        return f"VertexId({self.index})"


@dataclass(frozen=True, slots=True)
class Vertex[V]:
    id: VertexId
    value: V


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted connection from ``source`` to ``target``."""

    source: VertexId
    target: VertexId
    weight: Weight


class VertexStore[V]:
    """Arena of vertices indexed by ``VertexId.index``."""

    __slots__ = ("_token", "_vertices")

    def __init__(self) -> None:
        self._token = next(_owner_tokens)
        self._vertices: list[Vertex[V]] = []

    def add(self, value: V) -> VertexId:
        """Append a vertex holding ``value`` and return its new id."""
        vertex_id = VertexId(len(self._vertices), self._token)
        self._vertices.append(Vertex(vertex_id, value))
        return vertex_id

    def owns(self, vertex_id: VertexId) -> bool:
        """Check whether ``vertex_id`` was issued by this store."""
        return vertex_id.owner == self._token and 0 <= vertex_id.index < len(self._vertices)

    def check(self, vertex_id: VertexId) -> None:
        """Raise InvalidVertexError unless ``vertex_id`` was issued by this store."""
        if vertex_id.owner != self._token and 0 <= vertex_id.index < len(self._vertices):
            raise InvalidVertexError(vertex_id, "was issued by another graph")
        if not self.owns(vertex_id):
            raise InvalidVertexError(vertex_id)

    def get(self, vertex_id: VertexId) -> Vertex[V]:
        self.check(vertex_id)
        return self._vertices[vertex_id.index]

    def ids(self) -> list[VertexId]:
        return [vertex.id for vertex in self._vertices]

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex[V]]:
        return iter(self._vertices)


class AdjacencyTable:
    """Ordered outgoing edges for each vertex, indexed by ``VertexId.index``.

    Callers are responsible for validating ids against the matching VertexStore.
    """

    __slots__ = ("_edge_count", "_rows")

    def __init__(self) -> None:
        self._rows: list[list[Edge]] = []
        self._edge_count = 0

    def add_row(self) -> None:
        """Reserve an empty edge list for a newly added vertex."""
        self._rows.append([])

    def append(self, edge: Edge) -> None:
        self._rows[edge.source.index].append(edge)
        self._edge_count += 1

    def outgoing(self, vertex_id: VertexId) -> tuple[Edge, ...]:
        """Outgoing edges of ``vertex_id`` in insertion order."""
        return tuple(self._rows[vertex_id.index])

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __iter__(self) -> Iterator[Edge]:
        for row in self._rows:
            yield from row
