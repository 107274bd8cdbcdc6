"""Command that runs every algorithm on a small demonstration graph."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .algorithms import bfs, dfs, dijkstra, kruskal, prim
from .graph import Graph


def build_demo_graph() -> Graph:
    """Return the six-vertex weighted graph used by the demonstration."""
    graph = Graph(6)
    for src, dest, weight in (
        (0, 1, 2),
        (0, 2, 4),
        (1, 2, 1),
        (1, 3, 7),
        (2, 4, 3),
        (3, 4, 2),
        (3, 5, 1),
        (4, 5, 5),
    ):
        graph.add_edge(src, dest, weight)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration graph and the trees each algorithm builds."""
    parser = argparse.ArgumentParser(
        prog="graphalgo",
        description="Run BFS, DFS, Dijkstra, Prim and Kruskal on a sample graph.",
    )
    parser.parse_args(argv)

    graph = build_demo_graph()
    print("Original Graph:")
    graph.print_graph()

    sections = (
        ("BFS Tree from vertex 0:", lambda: bfs(graph, 0)),
        ("DFS Tree from vertex 0:", lambda: dfs(graph, 0)),
        ("Dijkstra Shortest Path Tree from vertex 0:", lambda: dijkstra(graph, 0)),
        ("Prim's Minimum Spanning Tree:", lambda: prim(graph)),
        ("Kruskal's Minimum Spanning Tree:", lambda: kruskal(graph)),
    )
    for title, build in sections:
        print(f"\n{title}")
        build().print_graph()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())