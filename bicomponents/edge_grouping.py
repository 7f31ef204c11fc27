"""Merging edges into biconnected components, with the work split between threads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from .disjoint_set import DisjointSet
from .graph import Graph
from .tarjan_vishkin import _unions_at

CHUNK_SIZE = 128


def _chunks(count: int, size: int) -> list[range]:
    return [range(start, min(start + size, count)) for start in range(0, count, size)]


def process_edges_parallel(
    graph: Graph,
    preorder: list[int],
    low: list[int],
    edges: list[tuple[int, int]],
    ds: DisjointSet,
    max_workers: int | None = None,
) -> int:
    """Merge in ``ds`` the edges that share a biconnected component.

    Nodes are examined in blocks of CHUNK_SIZE by a pool of threads. The merges
    found are then applied in node order, so the resulting sets and their
    representatives match a single-threaded pass. Returns how many merges
    joined two separate sets.
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be at least 1: {max_workers}")
    if len(ds) != graph.num_edges:
        raise ValueError(
            f"disjoint set has {len(ds)} elements but the graph has "
            f"{graph.num_edges} edges"
        )

    def pairs_in(block: range) -> list[tuple[int, int]]:
        return [
            pair
            for u in block
            for pair in _unions_at(graph, u, preorder, low, edges)
        ]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        found = list(pool.map(pairs_in, _chunks(graph.num_nodes, CHUNK_SIZE)))

    return sum(
        ds.union(edge_id, other_id) for block in found for edge_id, other_id in block
    )