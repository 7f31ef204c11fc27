import random

import pytest

from bicomponents.graph import Graph, parse_graph
from bicomponents.tarjan_vishkin import (
    format_components,
    tarjan_vishkin_biconnected_components,
)
from bicomponents.tarjan_vishkin_parallel import (
    tarjan_vishkin_biconnected_components_parallel,
)


def _random_graph(seed: int, nodes: int, edges: int) -> Graph:
    rng = random.Random(seed)
    graph = Graph(nodes)
    for _ in range(edges):
        graph.add_edge(rng.randrange(nodes), rng.randrange(nodes))
    return graph


@pytest.mark.parametrize("seed", [11, 12, 13])
@pytest.mark.parametrize("max_workers", [None, 1, 4])
def test_matches_sequential(seed, max_workers):
    graph = _random_graph(seed, 350, 800)
    expected = tarjan_vishkin_biconnected_components(graph)
    got = tarjan_vishkin_biconnected_components_parallel(graph, max_workers)
    assert got == expected


def test_formatted_output_matches_sequential():
    graph = parse_graph(["6\n", "1 2\n", "2 3\n", "3 1\n", "3 4\n", "4 5\n", "5 6\n", "6 4\n"])
    expected = format_components(tarjan_vishkin_biconnected_components(graph))
    got = format_components(tarjan_vishkin_biconnected_components_parallel(graph, 2))
    assert got == expected


def test_components_partition_edges():
    graph = _random_graph(14, 200, 500)
    result = tarjan_vishkin_biconnected_components_parallel(graph, 3)
    members = sorted(edge for component in result.components for edge in component)
    assert members == list(range(graph.num_edges))


def test_preorder_is_permutation():
    graph = _random_graph(15, 120, 200)
    result = tarjan_vishkin_biconnected_components_parallel(graph, 2)
    assert sorted(result.preorder) == list(range(graph.num_nodes))
    assert all(low <= pre for low, pre in zip(result.low, result.preorder))


def test_every_edge_is_oriented_along_a_graph_edge():
    graph = _random_graph(16, 80, 160)
    result = tarjan_vishkin_biconnected_components_parallel(graph, 2)
    assert all(graph.has_edge(u, v) for u, v in result.edges)


def test_graph_without_edges():
    result = tarjan_vishkin_biconnected_components_parallel(Graph(4), 2)
    assert result.components == []
    assert format_components(result) == "Found 0 biconnected components:\n"


def test_rejects_zero_workers():
    with pytest.raises(ValueError):
        tarjan_vishkin_biconnected_components_parallel(Graph(3), 0)