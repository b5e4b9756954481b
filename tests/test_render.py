"""Tests for graph rendering and logging setup."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import pytest
from rich.console import Console
from rich.logging import RichHandler

from dirgraph import DirectedGraph, configure_logging, format_graph, render_distances, render_graph


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=120, color_system=None)


class TestFormatGraph:
    """Tests for the plain-text graph format."""

    def test_empty_graph(self) -> None:
        assert format_graph(DirectedGraph[str]()) == "Graph of 0 vertices:"

    def test_one_line_per_edge(self) -> None:
        graph = DirectedGraph[str]()
        a, b = graph.add_vertex("a"), graph.add_vertex("b")
        graph.connect(a, b, 0.5)
        graph.connect(b, a, -1)
        assert format_graph(graph) == (
            "Graph of 2 vertices:\n"
            "\t (VertexId(0):a) -(weight: 0.5)-> (VertexId(1):b)\n"
            "\t (VertexId(1):b) -(weight: -1)-> (VertexId(0):a)"
        )

    def test_str_uses_format(self, example) -> None:
        graph, _ = example
        assert str(graph) == format_graph(graph)
        assert str(graph).count("\n") == 10


class TestRichRendering:
    """Tests for Rich table output."""

    def test_render_graph(self, example, console: Console) -> None:
        graph, _ = example
        render_graph(graph, console)
        output = console.export_text()
        assert "VertexId(0):zero" in output
        assert "VertexId(5):five" in output
        assert "-2" in output
        assert "Total: 6 vertices, 10 edges" in output

    def test_render_graph_without_edges(self, console: Console) -> None:
        graph = DirectedGraph[str]()
        graph.add_vertex("lonely")
        render_graph(graph, console)
        assert "Graph of 1 vertices, no edges" in console.export_text()

    def test_render_values_with_markup(self, console: Console) -> None:
        graph = DirectedGraph[str]()
        a, b = graph.add_vertex("[bold]a[/bold]"), graph.add_vertex("b")
        graph.connect(a, b, 1)
        render_graph(graph, console)
        assert "[bold]a[/bold]" in console.export_text()

    def test_render_distances(self, example, console: Console) -> None:
        graph, ids = example
        render_distances(graph, graph.longest_distance_from(ids["one"]), console)
        output = console.export_text()
        assert "three" in output
        assert "10" in output
        assert "zero" not in output


@contextmanager
def preserved_root_logger() -> Iterator[logging.Logger]:
    """Restore the root logger's handlers and level on exit."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        yield root
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


class TestConfigureLogging:
    """Tests for the Rich logging setup."""

    def test_installs_rich_handler(self, console: Console) -> None:
        with preserved_root_logger() as root:
            configure_logging(console=console)
            assert any(isinstance(handler, RichHandler) for handler in root.handlers)
            assert root.level == logging.INFO

    def test_verbose_emits_debug_records(self, console: Console) -> None:
        with preserved_root_logger():
            configure_logging(verbose=True, console=console)
            graph = DirectedGraph[str]()
            graph.add_vertex("a")
            graph.longest_distance_from(graph.vertices[0])
        assert "Computing longest distances" in console.export_text()
