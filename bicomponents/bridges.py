"""Bridges of a graph, and the pieces left when they are removed."""

from __future__ import annotations

from collections.abc import Sequence

from .disjoint_set import DisjointSet
from .graph import Graph

MAX_COMPONENTS_SHOWN = 20
MAX_NODES_SHOWN = 10


def _in_insertion_order(graph: Graph, u: int) -> list[int]:
    """Neighbours of u, oldest edge first."""
    return [v for v, _ in reversed(list(graph.neighbors(u)))]


def find_bridges(graph: Graph) -> list[tuple[int, int]]:
    """Return the bridges of a graph as (parent, child) pairs of the search.

    The search starts from every unvisited node in ascending order and walks
    neighbours oldest edge first. Bridges are listed in the order the search
    finishes with their lower endpoint.
    """
    n = graph.num_nodes
    disc: list[int | None] = [None] * n
    low = [0] * n
    bridges: list[tuple[int, int]] = []
    clock = 0

    for root in range(n):
        if disc[root] is not None:
            continue
        clock += 1
        disc[root] = low[root] = clock
        frames = [(root, -1, iter(_in_insertion_order(graph, root)))]
        while frames:
            u, parent, neighbours = frames[-1]
            for v in neighbours:
                if disc[v] is None:
                    clock += 1
                    disc[v] = low[v] = clock
                    frames.append((v, u, iter(_in_insertion_order(graph, v))))
                    break
                if v != parent:
                    low[u] = min(low[u], disc[v])
            else:
                frames.pop()
                if frames:
                    p = frames[-1][0]
                    low[p] = min(low[p], low[u])
                    if low[u] > disc[p]:
                        bridges.append((p, u))
    return bridges


def bridge_components(
    graph: Graph, bridges: Sequence[tuple[int, int]]
) -> list[list[int]]:
    """Group the nodes joined by edges that are not bridges.

    Groups are ordered by their smallest node, members ascending.
    """
    cut = {frozenset(bridge) for bridge in bridges}
    ds = DisjointSet(graph.num_nodes)
    for u in range(graph.num_nodes):
        for v, _ in graph.neighbors(u):
            if u < v and frozenset((u, v)) not in cut:
                ds.union(u, v)
    return sorted(ds.groups(), key=lambda group: group[0])


def format_bridge_report(
    components: Sequence[Sequence[int]], bridges: Sequence[tuple[int, int]]
) -> str:
    """Render the bridges, then the largest components with their first nodes."""
    out = ["Bridges (critical edges):\n"]
    out.extend(f"{u} -- {v}\n" for u, v in bridges)
    out.append(f"Total bridges: {len(bridges)}\n")
    out.append(f"\nBiconnected Components: {len(components)}\n")

    ordered = sorted(components, key=len, reverse=True)
    shown = ordered[:MAX_COMPONENTS_SHOWN]
    for number, component in enumerate(shown, start=1):
        head = list(component[:MAX_NODES_SHOWN])
        text = "".join(f"{node} " for node in head)
        line = f"Component {number} (size {len(component)}): {text}"
        if len(component) > len(head):
            line += f"... (and {len(component) - len(head)} more)"
        out.append(line + "\n")
    if len(components) > len(shown):
        out.append(f"... (and {len(components) - len(shown)} more components)\n")
    return "".join(out)