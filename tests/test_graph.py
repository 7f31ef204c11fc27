import pytest

from bicomponents.graph import Graph, GraphFormatError, load_graph, parse_graph


def test_add_edge_assigns_sequential_ids():
    g = Graph(4)
    assert g.add_edge(0, 1) == 0
    assert g.add_edge(1, 2) == 1
    assert g.add_edge(2, 3) == 2
    assert g.num_edges == 3
    assert g.edges == [(0, 1), (1, 2), (2, 3)]


def test_add_edge_ignores_duplicates_loops_and_out_of_range():
    g = Graph(3)
    g.add_edge(0, 1)
    assert g.add_edge(1, 0) is None
    assert g.add_edge(0, 1) is None
    assert g.add_edge(2, 2) is None
    assert g.add_edge(-1, 1) is None
    assert g.add_edge(0, 3) is None
    assert g.num_edges == 1


def test_neighbors_newest_first():
    g = Graph(3)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    assert list(g.neighbors(0)) == [(2, 1), (1, 0)]
    assert list(g.neighbors(1)) == [(0, 0)]


def test_has_edge_is_symmetric_and_degree_counts():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    assert g.has_edge(1, 0)
    assert g.has_edge(0, 2)
    assert not g.has_edge(1, 2)
    assert g.degree(0) == 2
    assert g.degree(3) == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_parse_graph_converts_to_zero_based():
    g = parse_graph(["3\n", "1 2\n", "2 3\n"])
    assert g.num_nodes == 3
    assert g.edges == [(0, 1), (1, 2)]
    assert g.input_edges == 2


def test_parse_graph_counts_rejected_lines_and_skips_junk():
    g = parse_graph(["3 nodes here\n", "1 2\n", "2 1\n", "# comment\n", "\n", "3 3\n", "1 9\n"])
    assert g.edges == [(0, 1)]
    assert g.input_edges == 4


def test_parse_graph_ignores_trailing_fields():
    g = parse_graph(["2\n", "1 2 7.5\n"])
    assert g.edges == [(0, 1)]


def test_parse_graph_skips_leading_blank_lines():
    g = parse_graph(["\n", "   \n", "2\n", "1 2\n"])
    assert g.num_nodes == 2
    assert g.num_edges == 1


@pytest.mark.parametrize("lines", [[], ["\n"], ["abc\n", "1 2\n"], ["-3\n"]])
def test_parse_graph_bad_header(lines):
    with pytest.raises(GraphFormatError):
        parse_graph(lines)


def test_load_graph_from_file(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text("4\n1 2\n2 3\n3 4\n4 1\n", encoding="utf-8")
    g = load_graph(path)
    assert g.num_nodes == 4
    assert g.num_edges == 4
    assert g.has_edge(3, 0)


def test_load_graph_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_graph(tmp_path / "missing.txt")