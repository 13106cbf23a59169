"""A directed graph on 1-based integer vertices with BFS and DFS."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import TextIO


class EdgeError(LookupError):
    """Raised when an edge or vertex does not exist in the graph."""

    def __init__(self, message: str = "Edge/Vertex does not exist in the graph.") -> None:
        super().__init__(message)


class VertexError(ValueError):
    """Raised when adding a vertex that is already in the graph."""

    def __init__(self, vertex: int) -> None:
        super().__init__(f"Vertex {vertex} in the graph.")
        self.vertex = vertex


class Graph:
    """A directed graph stored as adjacency lists; vertices are numbered from 1."""

    def __init__(self, vertex_count: int = 0) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
        self._sorted: list[int] = []

    def copy(self) -> Graph:
        """Return an independent copy of the graph and its stored ordering."""
        clone = Graph()
        clone._adjacency = [list(neighbours) for neighbours in self._adjacency]
        clone._sorted = list(self._sorted)
        return clone

    def _grow(self, size: int) -> None:
        if size > len(self._adjacency):
            self._adjacency.extend([] for _ in range(size - len(self._adjacency)))

    def _index(self, vertex: int) -> int:
        if vertex < 1 or vertex > len(self._adjacency):
            raise EdgeError()
        return vertex - 1

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge from ``u`` to ``v``, growing the graph as needed."""
        if u < 1 or v < 1:
            raise EdgeError()
        self._grow(max(u, v))
        self._adjacency[u - 1].append(v - 1)

    def remove_edge(self, u: int, v: int) -> None:
        """Remove one edge from ``u`` to ``v``."""
        neighbours = self._adjacency[self._index(u)]
        try:
            neighbours.remove(v - 1)
        except ValueError:
            raise EdgeError() from None

    def edge_in(self, u: int, v: int) -> bool:
        """Return True if there is an edge from ``u`` to ``v``."""
        size = len(self._adjacency)
        if not (1 <= u <= size and 1 <= v <= size):
            return False
        return (v - 1) in self._adjacency[u - 1]

    def delete_vertex(self, u: int) -> None:
        """Drop every edge leaving ``u`` and one edge into ``u`` from each vertex."""
        index = self._index(u)
        self._adjacency[index].clear()
        for other, neighbours in enumerate(self._adjacency):
            if other != index and index in neighbours:
                neighbours.remove(index)

    def add_vertex(self, u: int) -> None:
        """Add vertex ``u``; the graph grows to hold every vertex up to ``u``."""
        if u - 1 < len(self._adjacency):
            raise VertexError(u)
        self._grow(u)

    def breadth_first_search(self, s: int) -> dict[int, tuple[int, int]]:
        """Map each vertex reachable from ``s`` to (distance, parent); the source's parent is -1."""
        source = self._index(s)
        distance = {source: 0}
        parent = {source: -1}
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for v in self._adjacency[u]:
                if v not in distance:
                    distance[v] = distance[u] + 1
                    parent[v] = u
                    queue.append(v)
        return {
            vertex + 1: (distance[vertex], parent[vertex] + 1 if parent[vertex] != -1 else -1)
            for vertex in sorted(distance)
        }

    def depth_first_search(self, sort: bool = False) -> dict[int, tuple[int, int, int]]:
        """Map each vertex to (discovery, finish, parent); roots have parent -1.

        With ``sort`` set, the topological ordering is stored for ``get_ordering``.
        """
        size = len(self._adjacency)
        discovery = [0] * size
        finish = [0] * size
        parent = [-1] * size
        finished: list[int] = []
        time = 0

        for root in range(size):
            if discovery[root]:
                continue
            time += 1
            discovery[root] = time
            stack: list[tuple[int, Iterator[int]]] = [(root, iter(self._adjacency[root]))]
            while stack:
                u, neighbours = stack[-1]
                for v in neighbours:
                    if not discovery[v]:
                        parent[v] = u
                        time += 1
                        discovery[v] = time
                        stack.append((v, iter(self._adjacency[v])))
                        break
                else:
                    stack.pop()
                    time += 1
                    finish[u] = time
                    finished.append(u)

        if sort:
            self._sorted = [vertex + 1 for vertex in reversed(finished)]

        return {
            vertex + 1: (
                discovery[vertex],
                finish[vertex],
                parent[vertex] + 1 if parent[vertex] != -1 else -1,
            )
            for vertex in range(size)
        }

    def get_ordering(self) -> list[int]:
        """Return the topological ordering stored by the last sorting DFS."""
        return list(self._sorted)

    def format_adjacency_list(self) -> str:
        """Render the adjacency lists, one vertex per line."""
        lines = []
        for vertex, neighbours in enumerate(self._adjacency, start=1):
            arrows = "".join(f"{neighbour + 1} -> " for neighbour in neighbours)
            lines.append(f"{vertex}: {arrows}/\n")
        return "".join(lines)

    @classmethod
    def read(cls, stream: TextIO) -> Graph:
        """Read ``n m`` followed by ``m`` edges ``u v`` from a text stream."""
        tokens = iter(stream.read().split())
        try:
            vertex_count = int(next(tokens))
            edge_count = int(next(tokens))
            graph = cls(vertex_count)
            for _ in range(edge_count):
                u = int(next(tokens))
                v = int(next(tokens))
                graph.add_edge(u, v)
        except StopIteration:
            raise ValueError("unexpected end of graph input") from None
        return graph