[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "routefinder"
version = "0.1.0"
description = "Graph and data-structure toolkit with a Dijkstra shortest-route finder for coordinate maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "dijkstra", "shortest-path", "red-black-tree", "priority-queue", "bfs", "dfs", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
routefinder = "routefinder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["routefinder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
