[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphalgo"
version = "0.1.0"
description = "Undirected weighted graphs with BFS, DFS, Dijkstra, Prim and Kruskal, plus the small data structures they use."
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bfs", "dfs", "dijkstra", "prim", "kruskal", "minimum spanning tree", "union-find"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphalgo-demo = "graphalgo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
