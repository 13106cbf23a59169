"""A weighted directed graph of located vertices with Dijkstra's shortest path."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import TextIO

from routefinder.priority_queue import PriorityQueue

Coord = tuple[float, float]


def _tokens(lines: Sequence[str]) -> Iterator[tuple[int, int, str]]:
    for line_no, line in enumerate(lines):
        for column, token in enumerate(line.split()):
            yield line_no, column, token


def _parse_edge(parts: Sequence[str]) -> tuple[int, int, float] | None:
    if len(parts) < 3:
        return None
    try:
        return int(parts[0]), int(parts[1]), float(parts[2])
    except ValueError:
        return None


class WeightedGraph:
    """A directed graph whose vertices carry (x, y) coordinates and whose edges carry weights."""

    def __init__(self) -> None:
        self.coords: dict[int, Coord] = {}
        self.adjacency: dict[int, dict[int, float]] = {}
        self.size = 0

    def copy(self) -> WeightedGraph:
        """Return an independent copy of the graph."""
        clone = WeightedGraph()
        clone.coords = dict(self.coords)
        clone.adjacency = {node: dict(edges) for node, edges in self.adjacency.items()}
        clone.size = self.size
        return clone

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """Add or replace the edge from ``u`` to ``v``."""
        self.adjacency.setdefault(u, {})[v] = weight

    def edge_in(self, u: int, v: int) -> bool:
        """Return True if there is an edge from ``u`` to ``v``."""
        return v in self.adjacency.get(u, {})

    def add_vertex(self, node_id: int, x: float, y: float) -> None:
        """Place vertex ``node_id`` at (``x``, ``y``)."""
        self.coords[node_id] = (x, y)

    def id_from_coords(self, coord: Coord) -> int | None:
        """Return the id of a vertex at ``coord``, or None if there is none."""
        x, y = coord
        for node_id, (cx, cy) in self.coords.items():
            if cx == x and cy == y:
                return node_id
        return None

    def find_node(self, start: Coord, end: Coord) -> tuple[int, int]:
        """Return the ids of the vertices at ``start`` and ``end``."""
        start_id = self.id_from_coords(start)
        end_id = self.id_from_coords(end)
        if start_id is None or end_id is None:
            raise ValueError("Start or end coord not found")
        return start_id, end_id

    def _all_nodes(self) -> set[int]:
        nodes = set(self.coords) | set(self.adjacency)
        for edges in self.adjacency.values():
            nodes.update(edges)
        return nodes

    def _shortest_path_ids(self, source: int, target: int) -> list[int]:
        distance = {node: math.inf for node in self._all_nodes()}
        parent: dict[int, int | None] = dict.fromkeys(distance)
        queue = PriorityQueue()
        for node, estimate in distance.items():
            queue.insert(node, estimate)
        distance[source] = 0.0
        queue.decrease_key(source, 0.0)

        while not queue.is_empty():
            current, current_distance = queue.extract_min()
            if current == target:
                break
            for neighbour, weight in self.adjacency.get(current, {}).items():
                candidate = current_distance + weight
                if neighbour in queue and distance[neighbour] > candidate:
                    distance[neighbour] = candidate
                    parent[neighbour] = current
                    queue.decrease_key(neighbour, candidate)

        path = []
        node: int | None = target
        while node is not None:
            path.append(node)
            node = parent[node]
        path.reverse()
        return path

    def dijkstras(self, start: Coord, end: Coord) -> list[Coord]:
        """Return the coordinates along the shortest path from ``start`` to ``end``.

        When ``end`` cannot be reached the path holds only ``end``.
        """
        source, target = self.find_node(start, end)
        return [
            self.coords.get(node, (0.0, 0.0))
            for node in self._shortest_path_ids(source, target)
        ]

    def path_weight(self, path: Sequence[Coord]) -> float:
        """Return the summed weight of the edges along a coordinate path."""
        ids = []
        for coord in path:
            node = self.id_from_coords(coord)
            if node is None:
                raise ValueError(f"No vertex at coordinates {coord}")
            ids.append(node)
        return sum(
            self.adjacency.get(u, {}).get(v, 0.0) for u, v in zip(ids, ids[1:])
        )

    def format_adjacency_list(self) -> str:
        """Render each vertex's outgoing edges, one vertex per line."""
        lines = []
        for node, edges in self.adjacency.items():
            arrows = "".join(f" -> ({neighbour}, {weight:g}) " for neighbour, weight in edges.items())
            lines.append(f"{node}: {arrows}\n")
        return "".join(lines)

    @classmethod
    def read(cls, stream: TextIO) -> WeightedGraph:
        """Read a graph: ``n m``, then ``n`` lines ``id x y``, then ``m`` lines ``u v weight``.

        Edge lines that do not hold an edge are skipped but still counted.
        """
        lines = stream.read().splitlines()
        tokens = _tokens(lines)

        def take() -> tuple[int, int, str]:
            try:
                return next(tokens)
            except StopIteration:
                raise ValueError("unexpected end of graph input") from None

        _, _, token = take()
        vertex_count = int(token)
        line_no, column, token = take()
        edge_count = int(token)

        graph = cls()
        graph.size = vertex_count
        for _ in range(vertex_count):
            node_id = int(take()[2])
            x = float(take()[2])
            line_no, column, token = take()
            graph.add_vertex(node_id, x, float(token))

        edge_lines = [lines[line_no].split()[column + 1:]]
        edge_lines.extend(line.split() for line in lines[line_no + 1:line_no + 1 + edge_count])
        for parts in edge_lines:
            edge = _parse_edge(parts)
            if edge is not None:
                graph.add_edge(*edge)
        return graph

    @classmethod
    def read_file(cls, filename: str) -> WeightedGraph:
        """Read a graph from the file at ``filename``."""
        try:
            with open(filename, encoding="utf-8") as stream:
                return cls.read(stream)
        except OSError as exc:
            raise FileNotFoundError("file not found") from exc