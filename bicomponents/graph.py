"""Undirected simple graphs with numbered edges, and the edge-list file format."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike
from typing import Union

_HEADER = re.compile(r"\s*([+-]?\d+)")
_EDGE_LINE = re.compile(r"\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)")


class GraphFormatError(ValueError):
    """Raised when an edge-list file cannot be read as a graph."""


class Graph:
    """An undirected graph without loops or parallel edges.

    Every accepted edge gets the next edge id, starting at 0. Neighbours are
    reported most recently added first.
    """

    def __init__(self, num_nodes: int) -> None:
        if num_nodes < 0:
            raise ValueError(f"number of nodes must not be negative: {num_nodes}")
        self.num_nodes = num_nodes
        self.edges: list[tuple[int, int]] = []
        self.input_edges = 0
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(num_nodes)]
        self._neighbor_sets: list[set[int]] = [set() for _ in range(num_nodes)]

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def _valid(self, node: int) -> bool:
        return 0 <= node < self.num_nodes

    def add_edge(self, u: int, v: int) -> int | None:
        """Add the edge u-v and return its id.

        Out-of-range endpoints, loops and edges already present are ignored,
        and None is returned for them.
        """
        if not (self._valid(u) and self._valid(v)) or u == v:
            return None
        if v in self._neighbor_sets[u]:
            return None
        edge_id = len(self.edges)
        self.edges.append((u, v))
        self._adjacency[u].append((v, edge_id))
        self._adjacency[v].append((u, edge_id))
        self._neighbor_sets[u].add(v)
        self._neighbor_sets[v].add(u)
        return edge_id

    def neighbors(self, u: int) -> Iterator[tuple[int, int]]:
        """Yield (neighbour, edge id) pairs of u, newest edge first."""
        return reversed(self._adjacency[u])

    def has_edge(self, u: int, v: int) -> bool:
        return v in self._neighbor_sets[u]

    def degree(self, u: int) -> int:
        return len(self._adjacency[u])

    def __repr__(self) -> str:
        return f"Graph(num_nodes={self.num_nodes}, num_edges={self.num_edges})"


def parse_graph(lines: Iterable[str]) -> Graph:
    """Build a graph from an edge list.

    The first number is the node count; the rest of its line is ignored. Each
    following line that starts with two integers names a 1-based edge. Lines
    that do not are skipped. ``input_edges`` counts the edge lines read,
    including those the graph rejected.
    """
    iterator = iter(lines)
    graph: Graph | None = None
    for line in iterator:
        if not line.strip():
            continue
        match = _HEADER.match(line)
        if match is None:
            raise GraphFormatError("cannot read the number of nodes")
        num_nodes = int(match.group(1))
        if num_nodes < 0:
            raise GraphFormatError(f"negative number of nodes: {num_nodes}")
        graph = Graph(num_nodes)
        break
    if graph is None:
        raise GraphFormatError("cannot read the number of nodes")

    for line in iterator:
        match = _EDGE_LINE.match(line)
        if match is None:
            continue
        u, v = int(match.group(1)), int(match.group(2))
        graph.add_edge(u - 1, v - 1)
        graph.input_edges += 1
    return graph


def load_graph(path: Union[str, PathLike]) -> Graph:
    """Read a graph from an edge-list file."""
    with open(path, encoding="utf-8") as handle:
        return parse_graph(handle)