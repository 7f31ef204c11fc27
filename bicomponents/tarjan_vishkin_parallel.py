"""Edge-union biconnected components with the edge merging spread over threads."""

from __future__ import annotations

from .disjoint_set import DisjointSet
from .edge_grouping import process_edges_parallel
from .graph import Graph
from .tarjan_vishkin import TarjanVishkinResult, _number_vertices


def tarjan_vishkin_biconnected_components_parallel(
    graph: Graph, max_workers: int | None = None
) -> TarjanVishkinResult:
    """Find biconnected components, merging edges on a pool of threads.

    The depth-first numbering runs in node order as in the single-threaded
    search, so the result is the same as that search's: components ordered by
    representative edge id, each with its edge ids ascending.
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be at least 1: {max_workers}")
    preorder, low, edges = _number_vertices(graph)
    ds = DisjointSet(graph.num_edges)
    process_edges_parallel(graph, preorder, low, edges, ds, max_workers)
    return TarjanVishkinResult(
        components=[tuple(group) for group in ds.groups()],
        edges=list(edges),
        preorder=preorder,
        low=low,
    )