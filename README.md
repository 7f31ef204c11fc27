# bicomponents

Find the biconnected components of an undirected graph, the bridges that
separate it, and a greedy cover of it by maximal cliques. Several algorithms
sit side by side so their results and running times can be compared.
Nothing outside the standard library is needed.

## Installing

```
pip install .
```

## Graph files

The first number in the file is the node count; the rest of that line is
ignored. Each following line that starts with two integers names an edge
between two 1-based nodes:

```
5
1 2
2 3
3 1
3 4
4 5
```

Once loaded, nodes are numbered from 0 and each accepted edge gets the next
edge id, starting at 0. Self-loops, repeated edges and edges naming a node
out of range are ignored; lines that do not start with two integers are
skipped. `Graph.input_edges` counts every edge line read, including the
ignored ones. A file without a node count, or with a negative one, raises
`bicomponents.graph.GraphFormatError` (a `ValueError`).

## Command line

```
bicomponents path/to/graph.txt
bicomponents path/to/graph.txt --algorithm jen-schmidt-parallel --threads 4
```

The file name defaults to `datasets/custom.txt`. Options:

- `-a`, `--algorithm`: one of `tarjan-vishkin` (the default),
  `tarjan-vishkin-parallel`, `jen-schmidt`, `jen-schmidt-parallel`,
  `cliques`, `bridges`.
- `-t`, `--threads`: number of worker threads for the threaded algorithms;
  defaults to the number of CPUs.

The command prints loading progress, the computation time, the report of the
chosen algorithm and the total time. The single-threaded `tarjan-vishkin` and
`jen-schmidt` runs are timed by CPU time, the others by elapsed time. If the
file cannot be opened or has no node count, it prints an error to standard
error and exits with status 1.

## Algorithms

- `bicomponents.jen_schmidt.jen_schmidt_biconnected_components(graph)`:
  a depth-first search that keeps edges on a stack and closes a component at
  each articulation point. Returns an `EdgeComponentResult` with
  `components` (tuples of edge ids), `articulation_points` and `edges` (the
  endpoints of each edge in the direction the search met it).
- `bicomponents.jen_schmidt_parallel.jen_schmidt_biconnected_components_parallel(graph, max_workers=None)`:
  the same search run on each connected component in a thread pool;
  components come grouped by connected component, in order of their smallest
  node. `connected_components(graph)` gives those connected components.
- `bicomponents.tarjan_vishkin.tarjan_vishkin_biconnected_components(graph)`:
  preorder and low numbers from a depth-first search, then edges merged in a
  `DisjointSet`. Returns a `TarjanVishkinResult` with `components` (ordered
  by representative edge id, edge ids ascending), `edges`, `preorder` and
  `low`.
- `bicomponents.tarjan_vishkin_parallel.tarjan_vishkin_biconnected_components_parallel(graph, max_workers=None)`:
  the same, with the edge merging computed in blocks of nodes on a thread
  pool (`bicomponents.edge_grouping.process_edges_parallel`). Its result
  equals the single-threaded one.
- `bicomponents.bridges.find_bridges(graph)` and
  `bridge_components(graph, bridges)`: the bridges as (parent, child) pairs,
  and the groups of nodes joined by the other edges.
- `bicomponents.cliques.slota_madduri_maximal_cliques(graph, max_workers=None)`:
  nodes taken by decreasing degree each grow a greedy clique among the nodes
  not yet covered; cliques contained in an earlier one are dropped. The
  result does not depend on the number of workers.
  `greedy_maximal_clique` and `is_maximal_clique` are available on their own.

`bicomponents.disjoint_set.DisjointSet` (union by rank with path
compression, plus a lock-guarded `union_locked`) can be used by itself.

## Reports

Each algorithm has a function that renders the text the command prints:

- `jen_schmidt.format_components`: components largest first, at most 100,
  with up to 10 edges each as `(u-v)`.
- `jen_schmidt_parallel.format_components_by_nodes` and
  `tarjan_vishkin.format_components`: every component largest first, with
  its nodes in ascending order.
- `bridges.format_bridge_report`: the bridges, then up to 20 components with
  up to 10 nodes each.
- `cliques.format_cliques`: cliques largest first, at most 100, with up to
  20 nodes each.

## Library use

```python
from bicomponents.graph import Graph, load_graph
from bicomponents.tarjan_vishkin import (
    format_components,
    tarjan_vishkin_biconnected_components,
)
from bicomponents.bridges import bridge_components, find_bridges, format_bridge_report
from bicomponents.cliques import format_cliques, slota_madduri_maximal_cliques

graph = Graph(5)
for u, v in [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4)]:
    graph.add_edge(u, v)

result = tarjan_vishkin_biconnected_components(graph)
print(format_components(result))

bridges = find_bridges(graph)
print(format_bridge_report(bridge_components(graph, bridges), bridges))

print(format_cliques(slota_madduri_maximal_cliques(graph, max_workers=4)))

graph = load_graph("path/to/graph.txt")
```

## What it does not do

The command runs one algorithm on one file and prints to standard output. It
does not run batches over a directory of graphs, write result files, or
build summary or scaling reports across runs. The threaded variants use
Python threads, so they organise the work concurrently but are not expected
to run faster than the single-threaded ones.

## Running the tests

```
pip install ".[test]"
pytest
```