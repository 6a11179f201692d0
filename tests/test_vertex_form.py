import pytest

from eulergraph.core.adjacency import AdjacencyStore
from eulergraph.core.generator import generate_euler
from eulergraph.errors import OutputError
from eulergraph.io.vertex_form import (
    parse_vertex_form,
    read_vertex_form,
    save_vertex_form,
    to_vertex_form,
)


class TestVertexForm:
    """Vertex-form writer and reader."""

    def test_directed_triangle_lines(self, directed_triangle):
        text = to_vertex_form(directed_triangle)
        assert [line.rstrip() for line in text.splitlines()] == ["0 : 1", "1 : 2", "2 : 0"]
        assert text.endswith("\n")

    def test_exact_layout(self, cycle_store):
        assert to_vertex_form(cycle_store) == "0 : 1 3 \n1 : 0 2 \n2 : 1 3 \n3 : 0 2 \n"

    def test_isolated_vertex_line(self):
        G = AdjacencyStore.from_edges(3, [(0, 1)])
        assert to_vertex_form(G).splitlines()[2] == "2 : "

    def test_save_and_read(self, tmpdir_fixture):
        G = generate_euler(9, 0.5, directed=True, seed=4)
        path = tmpdir_fixture / "graph.txt"
        assert save_vertex_form(G, path) == 9
        G2 = read_vertex_form(path, directed=True)
        assert G2 == G

    def test_read_without_trailing_space(self):
        G = parse_vertex_form(["0 : 1", "1 : 2", "2 : 0", ""], directed=True)
        assert G.edges() == [(0, 1), (1, 2), (2, 0)]

    def test_unwritable_destination(self, cycle_store, tmpdir_fixture):
        path = tmpdir_fixture / "missing" / "graph.txt"
        with pytest.raises(OutputError) as info:
            save_vertex_form(cycle_store, path)
        assert info.value.path == str(path)
        assert "Cannot open file" in str(info.value)
        # the graph is still intact and can be written elsewhere
        assert cycle_store.number_of_edges() == 4
        assert save_vertex_form(cycle_store, tmpdir_fixture / "graph.txt") == 4

    def test_malformed_lines(self):
        with pytest.raises(ValueError):
            parse_vertex_form(["0 1 2"])
        with pytest.raises(ValueError):
            parse_vertex_form(["0 : x"])
        with pytest.raises(ValueError):
            parse_vertex_form(["0 : 5", "1 : 0"])
