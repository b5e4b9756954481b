"""Longest paths in a small weighted DAG.

Builds a six-vertex graph with some negative weights, prints it, walks it in
every supported order and reports the longest distance from ``one`` to each
vertex it can reach.
"""

from collections.abc import Iterable

from rich.console import Console

import dirgraph as dg

dg.configure_logging(verbose=True)
console = Console()

graph = dg.DirectedGraph[str]()

zero = graph.add_vertex("zero")
one = graph.add_vertex("one")
two = graph.add_vertex("two")
three = graph.add_vertex("three")
four = graph.add_vertex("four")
five = graph.add_vertex("five")

graph.connect(zero, one, 5)
graph.connect(zero, two, 3)
graph.connect(one, three, 6)
graph.connect(one, two, 2)
graph.connect(two, four, 4)
graph.connect(two, five, 2)
graph.connect(two, three, 7)
graph.connect(three, five, 1)
graph.connect(three, four, -1)
graph.connect(four, five, -2)

print(graph)
dg.render_graph(graph, console)


def names(vertex_ids: Iterable[dg.VertexId]) -> str:
    return " -> ".join(graph.vertex_value(v) for v in vertex_ids)


console.print(f"[cyan]Depth first:[/cyan]   {names(graph.depth_first_iter(zero))}")
console.print(f"[cyan]Breadth first:[/cyan] {names(graph.breadth_first_iter(zero))}")
console.print(f"[cyan]Topological:[/cyan]   {names(graph.topologically_ordered_iter())}")

distances = graph.longest_distance_from(one)
dg.render_distances(graph, distances, console)
