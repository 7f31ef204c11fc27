"""Biconnected components by depth-first search with an edge stack."""

from __future__ import annotations

from dataclasses import dataclass, field

from .graph import Graph

MAX_COMPONENTS_SHOWN = 100
MAX_EDGES_SHOWN = 10


@dataclass
class EdgeComponentResult:
    """Biconnected components as lists of edge ids.

    ``edges`` holds, per edge id, the endpoints in the direction the search
    first met the edge.
    """

    components: list[tuple[int, ...]] = field(default_factory=list)
    articulation_points: frozenset[int] = frozenset()
    edges: list[tuple[int, int]] = field(default_factory=list)


def jen_schmidt_biconnected_components(graph: Graph) -> EdgeComponentResult:
    """Find the biconnected components and articulation points of a graph."""
    n = graph.num_nodes
    disc: list[int | None] = [None] * n
    low = [0] * n
    parent: list[int | None] = [None] * n
    tree_edge: list[int | None] = [None] * n
    recorded: list[tuple[int, int] | None] = [None] * graph.num_edges
    edge_stack: list[int] = []
    components: list[tuple[int, ...]] = []
    articulation: set[int] = set()
    clock = 0

    def close_component(edge_id: int) -> None:
        members = [edge_id]
        while True:
            popped = edge_stack.pop()
            if popped == edge_id:
                break
            members.append(popped)
        components.append(tuple(members))

    for root in range(n):
        if disc[root] is not None:
            continue
        clock += 1
        disc[root] = low[root] = clock
        root_children = 0
        frames = [(root, graph.neighbors(root))]
        while frames:
            u, neighbours = frames[-1]
            descended = False
            for v, edge_id in neighbours:
                if recorded[edge_id] is None:
                    recorded[edge_id] = (u, v)
                if disc[v] is None:
                    if u == root:
                        root_children += 1
                    parent[v] = u
                    tree_edge[v] = edge_id
                    edge_stack.append(edge_id)
                    clock += 1
                    disc[v] = low[v] = clock
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

    return EdgeComponentResult(
        components=components,
        articulation_points=frozenset(articulation),
        edges=[edge if edge is not None else (0, 0) for edge in recorded],
    )


def format_components(result: EdgeComponentResult) -> str:
    """Render components largest first, listing a few edges of each."""
    ordered = sorted(result.components, key=len, reverse=True)
    out = [f"Found {len(ordered)} biconnected components:\n"]
    shown = ordered[:MAX_COMPONENTS_SHOWN]
    for number, component in enumerate(shown, start=1):
        head = component[:MAX_EDGES_SHOWN]
        text = "".join(
            "({}-{}) ".format(*result.edges[edge_id]) for edge_id in head
        )
        line = f"Component {number}: Size: {len(component)}, Edges: {text}"
        if len(head) < len(component):
            line += f"... (and {len(component) - len(head)} more)"
        out.append(line + "\n")
    if len(shown) < len(ordered):
        out.append(
            f"... (showing only {len(shown)} out of {len(ordered)} components)\n"
        )
    return "".join(out)