"""Biconnected components found one connected component per worker."""

from __future__ import annotations

from collections import deque
from concurrent.futures import ThreadPoolExecutor

from .graph import Graph
from .jen_schmidt import EdgeComponentResult


def connected_components(graph: Graph) -> list[list[int]]:
    """Return the connected components of a graph as lists of nodes.

    Components are ordered by their smallest node, and each list holds its
    nodes in breadth-first order from that node.
    """
    assigned = [False] * graph.num_nodes
    components: list[list[int]] = []
    for start in range(graph.num_nodes):
        if assigned[start]:
            continue
        assigned[start] = True
        order = [start]
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v, _ in graph.neighbors(u):
                if not assigned[v]:
                    assigned[v] = True
                    order.append(v)
                    queue.append(v)
        components.append(order)
    return components


def _components_from(
    graph: Graph,
    root: int,
    recorded: list[tuple[int, int] | None],
) -> tuple[list[tuple[int, ...]], set[int]]:
    """Search one connected component from its root.

    Only edges of this component are written to ``recorded``, so searches of
    different components never touch the same entries.
    """
    disc: dict[int, int] = {}
    low: dict[int, int] = {}
    parent: dict[int, int | None] = {root: None}
    tree_edge: dict[int, int] = {}
    edge_stack: list[int] = []
    components: list[tuple[int, ...]] = []
    articulation: set[int] = set()
    clock = 0

    def discover(node: int) -> None:
        nonlocal clock
        disc[node] = low[node] = clock
        clock += 1

    def close_component(edge_id: int) -> None:
        members = [edge_id]
        while True:
            popped = edge_stack.pop()
            if popped == edge_id:
                break
            members.append(popped)
        components.append(tuple(members))

    discover(root)
    root_children = 0
    frames = [(root, graph.neighbors(root))]
    while frames:
        u, neighbours = frames[-1]
        descended = False
        for v, edge_id in neighbours:
            if recorded[edge_id] is None:
                recorded[edge_id] = (u, v)
            if v not in disc:
                if u == root:
                    root_children += 1
                parent[v] = u
                tree_edge[v] = edge_id
                edge_stack.append(edge_id)
                discover(v)
                frames.append((v, graph.neighbors(v)))
                descended = True
                break
            if v != parent[u]:
                low[u] = min(low[u], disc[v])
                if disc[v] < disc[u]:
                    edge_stack.append(edge_id)
        if descended:
            continue
        frames.pop()
        if not frames:
            continue
        p = frames[-1][0]
        if low[u] >= disc[p]:
            if p != root:
                articulation.add(p)
            close_component(tree_edge[u])
        low[p] = min(low[p], low[u])
    if root_children > 1:
        articulation.add(root)
    return components, articulation


def jen_schmidt_biconnected_components_parallel(
    graph: Graph, max_workers: int | None = None
) -> EdgeComponentResult:
    """Find biconnected components, searching connected components concurrently.

    Components are reported grouped by connected component, in the order of
    the connected components' smallest nodes.
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be at least 1: {max_workers}")
    recorded: list[tuple[int, int] | None] = [None] * graph.num_edges
    roots = [nodes[0] for nodes in connected_components(graph)]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        outcomes = list(
            pool.map(lambda root: _components_from(graph, root, recorded), roots)
        )

    components: list[tuple[int, ...]] = []
    articulation: set[int] = set()
    for found, points in outcomes:
        components.extend(found)
        articulation |= points

    return EdgeComponentResult(
        components=components,
        articulation_points=frozenset(articulation),
        edges=[edge if edge is not None else (0, 0) for edge in recorded],
    )


def format_components_by_nodes(result: EdgeComponentResult) -> str:
    """Render every component largest first, listing its nodes in order."""
    ordered = sorted(result.components, key=len, reverse=True)
    out = [f"Found {len(ordered)} biconnected components:\n"]
    for number, component in enumerate(ordered, start=1):
        nodes = sorted({node for edge_id in component for node in result.edges[edge_id]})
        text = "".join(f"{node} " for node in nodes)
        out.append(f"Component {number}: Size: {len(component)}, Nodes: {text}\n")
    return "".join(out)