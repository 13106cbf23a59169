"""A doubly linked list with index-based insertion and removal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node | None = None
        self.prev: _Node | None = None


class DoublyLinkedList:
    """A sequence stored as a chain of nodes linked in both directions."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        if iterable is not None:
            for item in iterable:
                self.append(item)

    def prepend(self, data: Any) -> None:
        """Add ``data`` to the front of the list."""
        node = _Node(data)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def append(self, data: Any) -> None:
        """Add ``data`` to the end of the list."""
        node = _Node(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert(self, data: Any, index: int) -> None:
        """Insert ``data`` so that it ends up at position ``index``."""
        if index < 0 or index > self._size:
            raise IndexError("Index out of range")
        if index == 0:
            self.prepend(data)
            return
        if index == self._size:
            self.append(data)
            return
        before = self._node_at(index - 1)
        after = before.next
        node = _Node(data)
        node.prev = before
        node.next = after
        before.next = node
        if after is not None:
            after.prev = node
        self._size += 1

    def remove(self, index: int) -> None:
        """Remove the item at position ``index``."""
        node = self._node_at(index)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def search(self, data: Any) -> int:
        """Return the index of the first item equal to ``data``, or -1."""
        for index, item in enumerate(self):
            if item == data:
                return index
        return -1

    def _node_at(self, index: int) -> _Node:
        if not isinstance(index, int) or index < 0 or index >= self._size:
            raise IndexError("Index out of range")
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).data

    def __setitem__(self, index: int, value: Any) -> None:
        self._node_at(index).data = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoublyLinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def is_empty(self) -> bool:
        """Return True when the list holds no items."""
        return self._head is None

    def copy(self) -> DoublyLinkedList:
        """Return a new list with the same items."""
        return DoublyLinkedList(self)

    def concat(self, other: DoublyLinkedList) -> DoublyLinkedList:
        """Return a new list holding this list's items followed by ``other``'s."""
        result = self.copy()
        for item in other:
            result.append(item)
        return result

    def __str__(self) -> str:
        return ", ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"DoublyLinkedList([{', '.join(repr(item) for item in self)}])"