"""Greedy maximal cliques that cover a graph, started from high-degree nodes."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable, Collection, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from .graph import Graph

MAX_CLIQUES_SHOWN = 100
MAX_NODES_SHOWN = 20

_T = TypeVar("_T")


def _exchange_sorted(items: Iterable[_T], key: Callable[[_T], int]) -> list[_T]:
    """Order items by key, largest first, by pairwise exchanges.

    Equal keys are not kept in their original order; the exchange pattern
    fixes where they end up, and callers rely on that exact order.
    """
    ordered = list(items)
    for i in range(len(ordered)):
        for j in range(i + 1, len(ordered)):
            if key(ordered[i]) < key(ordered[j]):
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered


def _joins(graph: Graph, node: int, clique: Sequence[int]) -> bool:
    return all(graph.has_edge(node, member) for member in clique)


def greedy_maximal_clique(
    graph: Graph, start: int, visited: Collection[int] = frozenset()
) -> tuple[int, ...]:
    """Grow a clique from ``start`` by adding nodes in ascending order.

    Nodes in ``visited`` are never added. The clique lists ``start`` first,
    then the other nodes in the order they were added.
    """
    if not 0 <= start < graph.num_nodes:
        raise IndexError(f"node out of range: {start}")
    clique = [start]
    for node in range(graph.num_nodes):
        if (
            node != start
            and node not in visited
            and graph.has_edge(start, node)
            and _joins(graph, node, clique)
        ):
            clique.append(node)

    expanded = True
    while expanded:
        expanded = False
        members = set(clique)
        for node in range(graph.num_nodes):
            if node not in members and node not in visited and _joins(graph, node, clique):
                clique.append(node)
                expanded = True
                break
    return tuple(clique)


def is_maximal_clique(
    graph: Graph, clique: Sequence[int], visited: Collection[int] = frozenset()
) -> bool:
    """Tell whether no node outside ``clique`` and ``visited`` could join it."""
    members = set(clique)
    return not any(
        node not in members and node not in visited and _joins(graph, node, clique)
        for node in range(graph.num_nodes)
    )


def _drop_contained(cliques: Iterable[tuple[int, ...]]) -> list[tuple[int, ...]]:
    """Keep each clique unless an earlier kept one contains all its nodes."""
    kept: list[tuple[int, ...]] = []
    kept_sets: list[set[int]] = []
    for clique in cliques:
        members = set(clique)
        if any(
            len(clique) <= len(other) and members <= other_set
            for other, other_set in zip(kept, kept_sets)
        ):
            continue
        kept.append(clique)
        kept_sets.append(members)
    return kept


def slota_madduri_maximal_cliques(
    graph: Graph, max_workers: int | None = None
) -> list[tuple[int, ...]]:
    """Cover the graph with greedy maximal cliques.

    Nodes are taken in order of decreasing degree; each node not yet covered
    starts a clique among the uncovered nodes. Workers claim nodes one at a
    time and grow each clique while holding the shared lock, so the result
    is the same for any number of workers. Cliques contained in an earlier
    one are dropped.
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be at least 1: {max_workers}")
    workers = max_workers or min(32, (os.cpu_count() or 1) + 4)

    order = _exchange_sorted(range(graph.num_nodes), key=graph.degree)
    pending = iter(enumerate(order))
    visited: set[int] = set()
    found: dict[int, tuple[int, ...]] = {}
    lock = threading.Lock()

    def work() -> None:
        while True:
            with lock:
                item = next(pending, None)
                if item is None:
                    return
                position, node = item
                if node in visited:
                    continue
                clique = greedy_maximal_clique(graph, node, visited)
                if is_maximal_clique(graph, clique, visited):
                    found[position] = clique
                visited.update(clique)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        for future in [pool.submit(work) for _ in range(workers)]:
            future.result()

    return _drop_contained(found[position] for position in sorted(found))


def format_cliques(cliques: Sequence[Sequence[int]]) -> str:
    """Render cliques largest first, listing the first nodes of each."""
    ordered = _exchange_sorted(cliques, key=len)
    out = [f"Found {len(ordered)} maximal cliques:\n"]
    shown = ordered[:MAX_CLIQUES_SHOWN]
    for number, clique in enumerate(shown, start=1):
        head = clique[:MAX_NODES_SHOWN]
        text = "".join(f"{node} " for node in head)
        line = f"Clique {number}: Size: {len(clique)}, Nodes: {text}"
        if len(head) < len(clique):
            line += f"... (and {len(clique) - len(head)} more)"
        out.append(line + "\n")
    if len(shown) < len(ordered):
        out.append(f"... (showing only {len(shown)} out of {len(ordered)} cliques)\n")
    return "".join(out)