"""Shared graph fixtures."""

import pytest

from dirgraph import DirectedGraph, VertexId

EXAMPLE_EDGES = [
    ("zero", "one", 5),
    ("zero", "two", 3),
    ("one", "three", 6),
    ("one", "two", 2),
    ("two", "four", 4),
    ("two", "five", 2),
    ("two", "three", 7),
    ("three", "five", 1),
    ("three", "four", -1),
    ("four", "five", -2),
]


def build_graph(
    names: list[str],
    edges: list[tuple[str, str, float]],
) -> tuple[DirectedGraph[str], dict[str, VertexId]]:
    """Build a graph from vertex names and (source, target, weight) triples."""
    graph = DirectedGraph[str]()
    ids = {name: graph.add_vertex(name) for name in names}
    for source, target, weight in edges:
        graph.connect(ids[source], ids[target], weight)
    return graph, ids


@pytest.fixture
def example() -> tuple[DirectedGraph[str], dict[str, VertexId]]:
    """The six-vertex weighted DAG with negative weights."""
    return build_graph(["zero", "one", "two", "three", "four", "five"], EXAMPLE_EDGES)


@pytest.fixture
def cyclic() -> tuple[DirectedGraph[str], dict[str, VertexId]]:
    """A graph where a -> d is acyclic but b <-> c is a cycle fed by a."""
    return build_graph(
        ["a", "b", "c", "d"],
        [("a", "b", 1), ("b", "c", 1), ("c", "b", 1), ("a", "d", 1)],
    )
