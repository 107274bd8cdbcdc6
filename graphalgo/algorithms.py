"""Traversal, shortest-path and spanning-tree algorithms on :class:`Graph`."""

from __future__ import annotations

from .errors import GraphError
from .graph import Graph
from .structures import PriorityQueue, Queue, UnionFind

_DIJKSTRA_INF = 100_000_000
_PRIM_INF = 1_000_000_000


def _check_start(graph: Graph, start: int) -> None:
    if not 0 <= start < graph.num_vertices:
        raise GraphError("Invalid start vertex")


def _heap_capacity(graph: Graph) -> int:
    # Every relaxation inserts once, so the adjacency size bounds the heap.
    return 1 + sum(len(graph.neighbors(u)) for u in range(graph.num_vertices))


def bfs(graph: Graph, start: int) -> Graph:
    """Return the breadth-first search tree rooted at ``start``."""
    _check_start(graph, start)
    n = graph.num_vertices
    tree = Graph(n)
    visited = [False] * n
    queue = Queue(n)
    queue.enqueue(start)
    visited[start] = True
    while not queue.is_empty():
        current = queue.dequeue()
        for neighbor in graph.neighbors(current):
            if not visited[neighbor.vertex]:
                visited[neighbor.vertex] = True
                tree.add_edge(current, neighbor.vertex, neighbor.weight)
                queue.enqueue(neighbor.vertex)
    return tree


def dfs(graph: Graph, start: int) -> Graph:
    """Return the depth-first search tree rooted at ``start``."""
    _check_start(graph, start)
    n = graph.num_vertices
    tree = Graph(n)
    visited = [False] * n
    visited[start] = True
    pending = [(start, iter(graph.neighbors(start)))]
    while pending:
        u, remaining = pending[-1]
        for neighbor in remaining:
            v = neighbor.vertex
            if not visited[v]:
                visited[v] = True
                tree.add_edge(u, v, neighbor.weight)
                pending.append((v, iter(graph.neighbors(v))))
                break
        else:
            pending.pop()
    return tree


def dijkstra(graph: Graph, start: int) -> Graph:
    """Return the shortest-path tree from ``start``; weights must be non-negative."""
    _check_start(graph, start)
    if any(weight < 0 for _, _, weight in _all_adjacency(graph)):
        raise GraphError("Dijkstra cannot handle negative edge weights")

    n = graph.num_vertices
    distance = [_DIJKSTRA_INF] * n
    parent = [-1] * n
    processed = [False] * n
    distance[start] = 0

    heap = PriorityQueue(_heap_capacity(graph))
    heap.insert(start, 0)
    while not heap.is_empty():
        u = heap.extract_min()
        if processed[u]:
            continue
        processed[u] = True
        for neighbor in graph.neighbors(u):
            v = neighbor.vertex
            candidate = distance[u] + neighbor.weight
            if not processed[v] and candidate < distance[v]:
                distance[v] = candidate
                parent[v] = u
                heap.insert(v, candidate)

    tree = Graph(n)
    for v, p in enumerate(parent):
        if p != -1:
            tree.add_edge(p, v, distance[v] - distance[p])
    return tree


def prim(graph: Graph) -> Graph:
    """Return a minimum spanning tree of the component holding vertex 0."""
    n = graph.num_vertices
    in_tree = [False] * n
    key = [_PRIM_INF] * n
    parent = [-1] * n
    key[0] = 0

    heap = PriorityQueue(_heap_capacity(graph))
    heap.insert(0, 0)
    while not heap.is_empty():
        u = heap.extract_min()
        if in_tree[u]:
            continue
        in_tree[u] = True
        for neighbor in graph.neighbors(u):
            v = neighbor.vertex
            if not in_tree[v] and neighbor.weight < key[v]:
                key[v] = neighbor.weight
                parent[v] = u
                heap.insert(v, neighbor.weight)

    tree = Graph(n)
    for v in range(1, n):
        if parent[v] != -1:
            tree.add_edge(parent[v], v, key[v])
    return tree


def kruskal(graph: Graph) -> Graph:
    """Return a minimum spanning forest built with union-find."""
    n = graph.num_vertices
    tree = Graph(n)
    ordered = sorted(graph.edges(), key=lambda edge: edge[2])
    components = UnionFind(n)
    added = 0
    for u, v, weight in ordered:
        if added >= n - 1:
            break
        if components.find(u) != components.find(v):
            components.unite(u, v)
            tree.add_edge(u, v, weight)
            added += 1
    return tree


def _all_adjacency(graph: Graph):
    for u in range(graph.num_vertices):
        for neighbor in graph.neighbors(u):
            yield u, neighbor.vertex, neighbor.weight