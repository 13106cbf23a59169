"""A binary min-heap priority queue that supports decreasing a key."""

from __future__ import annotations

from collections.abc import Hashable


class PriorityQueue:
    """A min-priority queue of distinct node ids with float priorities."""

    def __init__(self) -> None:
        self._heap: list[tuple[Hashable, float]] = []
        self._position: dict[Hashable, int] = {}

    def copy(self) -> PriorityQueue:
        """Return an independent copy of the queue."""
        clone = PriorityQueue()
        clone._heap = list(self._heap)
        clone._position = dict(self._position)
        return clone

    def __getitem__(self, index: int) -> tuple[Hashable, float]:
        """Return the (node, priority) entry at heap slot ``index``."""
        if not isinstance(index, int) or index < 0 or index >= len(self._heap):
            raise IndexError("Index out of range")
        return self._heap[index]

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, node_id: Hashable) -> bool:
        return node_id in self._position

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return not self._heap

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._position[heap[i][0]] = i
        self._position[heap[j][0]] = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._heap[parent][1] <= self._heap[index][1]:
                break
            self._swap(parent, index)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._heap[child][1] < self._heap[smallest][1]:
                    smallest = child
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def insert(self, node_id: Hashable, priority: float) -> None:
        """Add ``node_id`` with ``priority``; each node may appear once."""
        if node_id in self._position:
            raise ValueError("Node already exists in priority queue")
        self._heap.append((node_id, priority))
        self._position[node_id] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> tuple[Hashable, float]:
        """Remove and return the (node, priority) entry with the lowest priority."""
        if not self._heap:
            raise IndexError("Priority queue is empty")
        smallest = self._heap[0]
        last = self._heap.pop()
        del self._position[smallest[0]]
        if self._heap:
            self._heap[0] = last
            self._position[last[0]] = 0
            self._sift_down(0)
        return smallest

    def decrease_key(self, node_id: Hashable, new_priority: float) -> None:
        """Lower the priority of ``node_id``; a higher or equal priority is ignored."""
        if node_id not in self._position:
            raise KeyError("Node not found in priority queue")
        index = self._position[node_id]
        if new_priority >= self._heap[index][1]:
            return
        self._heap[index] = (node_id, new_priority)
        self._sift_up(index)

    def format_heap(self) -> str:
        """Render the heap slots in order, one entry per line."""
        lines = ["Priority Queue (Min-Heap):", "-----------------------------------"]
        lines.extend(
            f"{index}: {node}, {priority:g}" for index, (node, priority) in enumerate(self._heap)
        )
        return "\n".join(lines) + "\n"