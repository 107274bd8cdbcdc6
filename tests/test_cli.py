import pytest

from graphalgo.algorithms import bfs, dfs, dijkstra, kruskal, prim
from graphalgo.cli import build_demo_graph, main


def test_demo_graph_shape():
    g = build_demo_graph()
    assert g.num_vertices == 6
    assert len(list(g.edges())) == 8
    assert g.has_edge(4, 5)
    assert g.has_edge(3, 5)


def test_main_returns_zero(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Original Graph:\nGraph adjacency list:\n")


def test_main_prints_every_section_in_order(capsys):
    main([])
    out = capsys.readouterr().out
    titles = [
        "Original Graph:",
        "BFS Tree from vertex 0:",
        "DFS Tree from vertex 0:",
        "Dijkstra Shortest Path Tree from vertex 0:",
        "Prim's Minimum Spanning Tree:",
        "Kruskal's Minimum Spanning Tree:",
    ]
    positions = [out.index(title) for title in titles]
    assert positions == sorted(positions)


def test_main_output_holds_each_tree(capsys):
    main([])
    out = capsys.readouterr().out
    g = build_demo_graph()
    expected = [
        g.format(),
        bfs(g, 0).format(),
        dfs(g, 0).format(),
        dijkstra(g, 0).format(),
        prim(g).format(),
        kruskal(g).format(),
    ]
    assert out == "\n\n".join(
        [expected[0]]
        + [
            f"{title}\n{body}"
            for title, body in zip(
                [
                    "BFS Tree from vertex 0:",
                    "DFS Tree from vertex 0:",
                    "Dijkstra Shortest Path Tree from vertex 0:",
                    "Prim's Minimum Spanning Tree:",
                    "Kruskal's Minimum Spanning Tree:",
                ],
                expected[1:],
            )
        ]
    ).replace(expected[0], "Original Graph:\n" + expected[0], 1) + "\n"


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2