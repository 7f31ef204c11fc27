"""Command line entry point: load an edge list and run one of the algorithms."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass

from .bridges import bridge_components, find_bridges, format_bridge_report
from .cliques import format_cliques, slota_madduri_maximal_cliques
from .graph import Graph, GraphFormatError, load_graph
from .jen_schmidt import format_components as format_edge_components
from .jen_schmidt import jen_schmidt_biconnected_components
from .jen_schmidt_parallel import (
    format_components_by_nodes,
    jen_schmidt_biconnected_components_parallel,
)
from .tarjan_vishkin import format_components as format_tv_components
from .tarjan_vishkin import tarjan_vishkin_biconnected_components
from .tarjan_vishkin_parallel import tarjan_vishkin_biconnected_components_parallel

DEFAULT_PATH = "datasets/custom.txt"


@dataclass(frozen=True)
class _Job:
    banner: str
    compute: Callable[[], object]
    render: Callable[[object], str]
    cpu_clock: bool = False
    wall_fallback: bool = False
    general_format: bool = False


def _positive(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text}") from exc
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bicomponents",
        description="Find biconnected components, bridges or cliques of a graph.",
    )
    parser.add_argument("filename", nargs="?", default=DEFAULT_PATH)
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=(
            "tarjan-vishkin",
            "tarjan-vishkin-parallel",
            "jen-schmidt",
            "jen-schmidt-parallel",
            "cliques",
            "bridges",
        ),
        default="tarjan-vishkin",
    )
    parser.add_argument("-t", "--threads", type=_positive, default=None)
    return parser


def _job(algorithm: str, graph: Graph, threads: int | None) -> _Job:
    workers = threads or os.cpu_count() or 1
    if algorithm == "tarjan-vishkin":
        return _Job(
            "Running sequential Tarjan-Vishkin computation...",
            lambda: tarjan_vishkin_biconnected_components(graph),
            format_tv_components,
            cpu_clock=True,
            wall_fallback=True,
        )
    if algorithm == "tarjan-vishkin-parallel":
        return _Job(
            f"Running parallel Tarjan-Vishkin computation with {workers} threads...",
            lambda: tarjan_vishkin_biconnected_components_parallel(graph, workers),
            format_tv_components,
            wall_fallback=True,
        )
    if algorithm == "jen-schmidt":
        return _Job(
            "Running sequential Jen-Schmidt computation...",
            lambda: jen_schmidt_biconnected_components(graph),
            format_edge_components,
            cpu_clock=True,
        )
    if algorithm == "jen-schmidt-parallel":
        return _Job(
            f"Running parallel Jen-Schmidt computation with {workers} threads...",
            lambda: jen_schmidt_biconnected_components_parallel(graph, workers),
            format_components_by_nodes,
        )
    if algorithm == "cliques":
        return _Job(
            f"Running parallel computation with {workers} threads...",
            lambda: slota_madduri_maximal_cliques(graph, workers),
            format_cliques,
        )

    def compute_bridges() -> tuple[list[list[int]], list[tuple[int, int]]]:
        bridges = find_bridges(graph)
        return bridge_components(graph, bridges), bridges

    return _Job(
        "Running sequential computation...",
        compute_bridges,
        lambda outcome: format_bridge_report(*outcome),
        general_format=True,
    )


def _timing_line(label: str, job: _Job, measured: float, wall: int) -> str:
    if job.general_format:
        return f"{label}: {measured:g} seconds"
    if job.wall_fallback and wall > 1 and abs(wall - measured) > 1.0:
        return f"{label}: {wall / 60.0:.2f} minutes ({float(wall):.2f} seconds)"
    return f"{label}: {measured:.5f} seconds"


class _Stopwatch:
    def __init__(self, cpu_clock: bool) -> None:
        self._clock = time.process_time if cpu_clock else time.perf_counter
        self._start = self._clock()
        self._wall_start = int(time.time())

    def read(self) -> tuple[float, int]:
        return self._clock() - self._start, int(time.time()) - self._wall_start


def main(argv: list[str] | None = None) -> int:
    """Run the chosen algorithm on an edge-list file and print a report."""
    args = _build_parser().parse_args(argv)
    filename = args.filename
    cpu_clock = args.algorithm in ("tarjan-vishkin", "jen-schmidt")
    total = _Stopwatch(cpu_clock)

    print(f"Loading graph from {filename}...")
    try:
        graph = load_graph(filename)
    except OSError:
        print(f"Error opening file {filename}", file=sys.stderr)
        print(f"Failed to load graph from {filename}", file=sys.stderr)
        return 1
    except (GraphFormatError, UnicodeDecodeError):
        print("Error reading number of nodes", file=sys.stderr)
        print(f"Failed to load graph from {filename}", file=sys.stderr)
        return 1

    print(f"Initializing graph with {graph.num_nodes} nodes...")
    print("Loading edges...")
    print(f"Graph loaded: {graph.num_nodes} nodes, {graph.input_edges} edges")
    print(f"Graph loaded from {filename} with {graph.num_nodes} nodes")

    job = _job(args.algorithm, graph, args.threads)
    print(job.banner)
    watch = _Stopwatch(job.cpu_clock)
    outcome = job.compute()
    print(_timing_line("Computation time", job, *watch.read()))
    print(job.render(outcome), end="")
    print(_timing_line("Total execution time", job, *total.read()))
    return 0


if __name__ == "__main__":
    sys.exit(main())