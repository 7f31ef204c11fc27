import pytest

from bicomponents.bridges import bridge_components, find_bridges, format_bridge_report
from bicomponents.graph import Graph
from bicomponents.jen_schmidt import jen_schmidt_biconnected_components
from bicomponents.jen_schmidt_parallel import connected_components


def build(n, edges):
    graph = Graph(n)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


TWO_TRIANGLES = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3), (5, 6)]


def test_triangle_has_no_bridges():
    assert find_bridges(build(3, [(0, 1), (1, 2), (2, 0)])) == []


def test_path_bridges_in_finishing_order():
    assert find_bridges(build(3, [(0, 1), (1, 2)])) == [(1, 2), (0, 1)]


def test_bridges_match_single_edge_biconnected_components():
    graph = build(8, TWO_TRIANGLES)
    result = jen_schmidt_biconnected_components(graph)
    singles = {
        frozenset(graph.edges[component[0]])
        for component in result.components
        if len(component) == 1
    }
    assert {frozenset(b) for b in find_bridges(graph)} == singles


@pytest.mark.parametrize("index", range(2))
def test_removing_a_bridge_disconnects(index):
    graph = build(8, TWO_TRIANGLES)
    bridges = find_bridges(graph)
    cut = frozenset(bridges[index])
    reduced = build(8, [e for e in TWO_TRIANGLES if frozenset(e) != cut])
    assert len(connected_components(reduced)) == len(connected_components(graph)) + 1


def test_components_partition_the_nodes():
    graph = build(8, TWO_TRIANGLES)
    components = bridge_components(graph, find_bridges(graph))
    flat = [node for group in components for node in group]
    assert sorted(flat) == list(range(8))
    assert all(group == sorted(group) for group in components)
    assert [group[0] for group in components] == sorted(group[0] for group in components)


def test_components_of_triangle_with_tail():
    graph = build(4, [(0, 1), (1, 2), (2, 0), (2, 3)])
    assert bridge_components(graph, find_bridges(graph)) == [[0, 1, 2], [3]]


def test_report_without_bridges():
    graph = build(3, [(0, 1), (1, 2), (2, 0)])
    bridges = find_bridges(graph)
    text = format_bridge_report(bridge_components(graph, bridges), bridges)
    assert text.startswith("Bridges (critical edges):\nTotal bridges: 0\n")
    assert "\nBiconnected Components: 1\n" in text
    assert "Component 1 (size 3): 0 1 2 \n" in text


def test_report_lists_each_bridge():
    graph = build(3, [(0, 1), (1, 2)])
    bridges = find_bridges(graph)
    text = format_bridge_report(bridge_components(graph, bridges), bridges)
    for u, v in bridges:
        assert f"{u} -- {v}\n" in text
    assert f"Total bridges: {len(bridges)}\n" in text


def test_report_truncates_components_and_nodes():
    big = list(range(12))
    components = [big] + [[100 + i] for i in range(24)]
    text = format_bridge_report(components, [])
    assert "Component 1 (size 12): 0 1 2 3 4 5 6 7 8 9 ... (and 2 more)\n" in text
    assert text.count("Component ") == 20
    assert text.endswith("... (and 5 more components)\n")