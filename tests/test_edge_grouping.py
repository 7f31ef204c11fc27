import random

import pytest

from bicomponents.disjoint_set import DisjointSet
from bicomponents.edge_grouping import process_edges_parallel
from bicomponents.graph import Graph
from bicomponents.tarjan_vishkin import tarjan_vishkin_biconnected_components


def _random_graph(seed: int, nodes: int, edges: int) -> Graph:
    rng = random.Random(seed)
    graph = Graph(nodes)
    for _ in range(edges):
        graph.add_edge(rng.randrange(nodes), rng.randrange(nodes))
    return graph


def _run(graph: Graph, max_workers):
    reference = tarjan_vishkin_biconnected_components(graph)
    ds = DisjointSet(graph.num_edges)
    merges = process_edges_parallel(
        graph, reference.preorder, reference.low, reference.edges, ds, max_workers
    )
    return reference, ds, merges


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
@pytest.mark.parametrize("max_workers", [1, 2, 8])
def test_groups_match_sequential(seed, max_workers):
    graph = _random_graph(seed, 400, 900)
    reference, ds, _ = _run(graph, max_workers)
    assert [tuple(group) for group in ds.groups()] == reference.components


@pytest.mark.parametrize("seed", [5, 6])
def test_merge_count_matches_group_count(seed):
    graph = _random_graph(seed, 300, 700)
    _, ds, merges = _run(graph, 4)
    assert merges == graph.num_edges - len(ds.groups())


def test_groups_partition_edges():
    graph = _random_graph(7, 250, 600)
    _, ds, _ = _run(graph, 3)
    members = sorted(edge for group in ds.groups() for edge in group)
    assert members == list(range(graph.num_edges))


def test_graph_without_edges_merges_nothing():
    graph = Graph(5)
    _, ds, merges = _run(graph, 2)
    assert merges == 0
    assert ds.groups() == []


def test_rejects_zero_workers():
    graph = _random_graph(8, 10, 20)
    reference = tarjan_vishkin_biconnected_components(graph)
    with pytest.raises(ValueError):
        process_edges_parallel(
            graph,
            reference.preorder,
            reference.low,
            reference.edges,
            DisjointSet(graph.num_edges),
            0,
        )


def test_rejects_mismatched_disjoint_set():
    graph = _random_graph(9, 10, 20)
    reference = tarjan_vishkin_biconnected_components(graph)
    with pytest.raises(ValueError):
        process_edges_parallel(
            graph,
            reference.preorder,
            reference.low,
            reference.edges,
            DisjointSet(graph.num_edges + 1),
            2,
        )