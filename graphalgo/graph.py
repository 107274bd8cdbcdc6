"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import GraphError


@dataclass(frozen=True)
class Neighbor:
    """One entry of an adjacency list: the vertex reached and the edge weight."""

    vertex: int
    weight: int


class Graph:
    """An undirected graph on vertices ``0 .. num_vertices-1``.

    Each vertex keeps its neighbours newest first, so traversals visit the
    most recently added edge of a vertex before the older ones.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices <= 0:
            raise GraphError("Number of vertices must be positive")
        self._adjacency: list[deque[Neighbor]] = [
            deque() for _ in range(num_vertices)
        ]

    @property
    def num_vertices(self) -> int:
        """Number of vertices in the graph."""
        return len(self._adjacency)

    def _check_vertices(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < len(self._adjacency):
                raise GraphError("Invalid vertex index")

    def add_edge(self, src: int, dest: int, weight: int = 1) -> None:
        """Add an undirected edge; raise if it already exists."""
        self._check_vertices(src, dest)
        if any(entry.vertex == dest for entry in self._adjacency[src]):
            raise GraphError("Edge already exists")
        self._adjacency[src].appendleft(Neighbor(dest, weight))
        self._adjacency[dest].appendleft(Neighbor(src, weight))

    def _remove_single(self, origin: int, target: int) -> None:
        entries = self._adjacency[origin]
        for entry in entries:
            if entry.vertex == target:
                entries.remove(entry)
                return
        raise GraphError("Edge not found")

    def remove_edge(self, src: int, dest: int) -> None:
        """Remove the undirected edge between ``src`` and ``dest``."""
        self._check_vertices(src, dest)
        self._remove_single(src, dest)
        self._remove_single(dest, src)

    def neighbors(self, vertex: int) -> tuple[Neighbor, ...]:
        """Return the adjacency list of ``vertex``, newest edge first."""
        self._check_vertices(vertex)
        return tuple(self._adjacency[vertex])

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(u, v, weight)`` once for each edge between distinct vertices, with ``u < v``."""
        for u, entries in enumerate(self._adjacency):
            for entry in entries:
                if u < entry.vertex:
                    yield u, entry.vertex, entry.weight

    def has_edge(self, src: int, dest: int) -> bool:
        """Return whether an edge joins ``src`` and ``dest``."""
        self._check_vertices(src, dest)
        return any(entry.vertex == dest for entry in self._adjacency[src])

    def _lines(self) -> Iterator[str]:
        yield "Graph adjacency list:"
        for index, entries in enumerate(self._adjacency):
            links = "".join(
                f" -> (v: {entry.vertex}, w: {entry.weight})" for entry in entries
            )
            yield f"Vertex {index}:{links}"

    def format(self) -> str:
        """Return the adjacency-list listing printed by :meth:`print_graph`."""
        return "\n".join(self._lines())

    def print_graph(self) -> None:
        """Write the adjacency lists to standard output, one vertex per line."""
        out = sys.stdout
        for line in self._lines():
            out.write(line)
            out.write("\n")
        out.flush()