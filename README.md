# graphalgo

A small library of classic algorithms on undirected, weighted graphs. Each
algorithm takes a `Graph` and returns a new `Graph` that holds the resulting
tree:

- `bfs(graph, start)`: breadth-first search tree rooted at `start`
- `dfs(graph, start)`: depth-first search tree rooted at `start`
- `dijkstra(graph, start)`: shortest-path tree from `start` (non-negative
  weights only)
- `prim(graph)`: minimum spanning tree of the component that holds vertex 0
- `kruskal(graph)`: minimum spanning forest built with union-find

All five live in `graphalgo.algorithms`. Vertices that cannot be reached are
left without edges in the returned tree.

## The graph

`graphalgo.graph.Graph(num_vertices)` has a fixed number of vertices,
numbered from 0. Every edge is undirected and carries an integer weight
(default 1).

- `add_edge(src, dest, weight=1)` and `remove_edge(src, dest)`
- `neighbors(vertex)`: a tuple of `Neighbor(vertex, weight)` entries, newest
  edge first
- `edges()`: yields `(u, v, weight)` once per edge, with `u < v`
- `has_edge(src, dest)`
- `num_vertices`: a read-only property
- `format()` returns the adjacency-list listing; `print_graph()` writes it to
  standard output

## Supporting containers

`graphalgo.structures` holds the containers the algorithms use:

- `Queue(capacity)`: bounded FIFO with `enqueue`, `dequeue`, `peek`
- `Stack(capacity=100)`: bounded LIFO with `push`, `pop`, `top`
- `PriorityQueue(capacity=100)`: bounded binary min-heap with `insert`,
  `extract_min`, `peek_min`, `decrease_key`
- `UnionFind(size)`: disjoint sets with `find`, `unite`, `connected`, using
  path compression and union by rank

Each supports `len()`, and the bounded ones have `is_empty()` and
`is_full()` (the priority queue has `is_empty()` only).

## Errors

Every failure raises `graphalgo.errors.GraphError`: a non-positive vertex
count, an out-of-range vertex index, adding an edge that already exists,
removing one that does not, an invalid start vertex, a negative weight passed
to `dijkstra`, and overflow or underflow of a bounded container.

## Installation

```
pip install .
```

## Usage

```python
from graphalgo.graph import Graph
from graphalgo.algorithms import dijkstra, kruskal

g = Graph(4)
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 2)
g.add_edge(0, 2, 5)
g.add_edge(2, 3, 1)

tree = dijkstra(g, 0)
print(tree.format())

mst = kruskal(g)
print(sorted(mst.edges()))
```

## Demo

To build a sample six-vertex graph and print the tree each algorithm
produces from it:

```
graphalgo-demo
```

The same command is available as `python -m graphalgo.cli`.

## What it does not do

The demo command always runs on its built-in sample graph; it takes no
options besides `--help` and cannot read a graph from a file. Graphs are
held in memory only and cannot be saved or loaded.

## Tests

```
pip install .[test]
pytest
```