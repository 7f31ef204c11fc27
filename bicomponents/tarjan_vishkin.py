"""Biconnected components by preorder and low numbers with edge unions."""

from __future__ import annotations

from dataclasses import dataclass, field

from .disjoint_set import DisjointSet
from .graph import Graph

UNRECORDED = (-1, -1)


@dataclass
class TarjanVishkinResult:
    """Biconnected components as tuples of edge ids.

    ``edges`` holds, per edge id, the endpoints in the direction the search
    classified the edge: parent to child for tree edges, descendant to
    ancestor for back edges.
    """

    components: list[tuple[int, ...]] = field(default_factory=list)
    edges: list[tuple[int, int]] = field(default_factory=list)
    preorder: list[int] = field(default_factory=list)
    low: list[int] = field(default_factory=list)


def _number_vertices(
    graph: Graph,
) -> tuple[list[int], list[int], list[tuple[int, int]]]:
    """Depth-first numbering from every unvisited node in turn.

    Returns preorder numbers (from 0), low numbers and oriented edges.
    """
    n = graph.num_nodes
    preorder: list[int | None] = [None] * n
    low = [0] * n
    edges: list[tuple[int, int]] = [UNRECORDED] * graph.num_edges
    clock = 0

    for root in range(n):
        if preorder[root] is not None:
            continue
        preorder[root] = low[root] = clock
        clock += 1
        frames = [(root, -1, graph.neighbors(root))]
        while frames:
            u, parent, neighbours = frames[-1]
            for v, edge_id in neighbours:
                if v == parent:
                    continue
                if preorder[v] is None:
                    edges[edge_id] = (u, v)
                    preorder[v] = low[v] = clock
                    clock += 1
                    frames.append((v, u, graph.neighbors(v)))
                    break
                if preorder[v] < preorder[u]:
                    edges[edge_id] = (u, v)
                    low[u] = min(low[u], preorder[v])
            else:
                frames.pop()
                if frames:
                    p = frames[-1][0]
                    low[p] = min(low[p], low[u])

    return [number for number in preorder if number is not None], low, edges


def _unions_at(
    graph: Graph,
    u: int,
    preorder: list[int],
    low: list[int],
    edges: list[tuple[int, int]],
) -> list[tuple[int, int]]:
    """Return the pairs of edge ids, both oriented out of u, to be merged."""
    pairs: list[tuple[int, int]] = []
    outgoing = [(v, e) for v, e in graph.neighbors(u) if edges[e][0] == u]
    for v, edge_id in outgoing:
        if low[v] >= preorder[u] and preorder[u] < preorder[v]:
            continue
        for w, other_id in outgoing:
            if other_id == edge_id:
                continue
            if (
                preorder[w] < preorder[u]
                and preorder[w] < preorder[v]
                and low[v] <= preorder[w]
            ) or (
                preorder[v] < preorder[u]
                and preorder[v] < preorder[w]
                and low[w] <= preorder[v]
            ):
                pairs.append((edge_id, other_id))
    return pairs


def tarjan_vishkin_biconnected_components(graph: Graph) -> TarjanVishkinResult:
    """Find biconnected components by merging edges in a disjoint set.

    Components are ordered by their representative edge id, each holding its
    edge ids in ascending order.
    """
    preorder, low, edges = _number_vertices(graph)
    ds = DisjointSet(graph.num_edges)
    for u in range(graph.num_nodes):
        for edge_id, other_id in _unions_at(graph, u, preorder, low, edges):
            ds.union(edge_id, other_id)
    return TarjanVishkinResult(
        components=[tuple(group) for group in ds.groups()],
        edges=list(edges),
        preorder=preorder,
        low=low,
    )


def format_components(result: TarjanVishkinResult) -> str:
    """Render every component largest first, listing its nodes in order."""
    ordered = sorted(result.components, key=len, reverse=True)
    out = [f"Found {len(ordered)} biconnected components:\n"]
    for number, component in enumerate(ordered, start=1):
        nodes = sorted(
            {
                node
                for edge_id in component
                if edge_id >= 0
                for node in result.edges[edge_id]
                if node >= 0
            }
        )
        text = "".join(f"{node} " for node in nodes)
        out.append(f"Component {number}: Size: {len(component)}, Nodes: {text}\n")
    return "".join(out)