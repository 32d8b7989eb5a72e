"""A doubly linked list with direct access to its nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(eq=False)
class LinkedNode:
    """A node holding one item and links to its neighbours."""

    data: Any
    prev: "LinkedNode | None" = field(default=None, repr=False)
    next: "LinkedNode | None" = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list that appends at the tail."""

    def __init__(self) -> None:
        self._head: LinkedNode | None = None
        self._size = 0

    def head(self) -> LinkedNode | None:
        """The first node, or None when empty."""
        return self._head

    def _nodes(self) -> Iterator[LinkedNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def append(self, data: Any) -> LinkedNode:
        """Add data at the end and return its node."""
        node = LinkedNode(data)
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
            node.prev = tail
        self._size += 1
        return node

    def remove(self, node: LinkedNode) -> None:
        """Unlink a node; ValueError if it is not in this list."""
        for candidate in self._nodes():
            if candidate is node:
                if node.prev is None:
                    self._head = node.next
                else:
                    node.prev.next = node.next
                if node.next is not None:
                    node.next.prev = node.prev
                node.prev = node.next = None
                self._size -= 1
                return
        raise ValueError("trying to remove a node that is not in the list")

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for list of size {self._size}")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node.data
        raise IndexError(index)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())