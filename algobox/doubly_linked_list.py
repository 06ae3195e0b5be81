"""A doubly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class DoubleNode:
    """One cell of a doubly linked list."""

    value: Any
    prev: DoubleNode | None = field(default=None, repr=False)
    next: DoubleNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """Doubly linked list with head and tail references."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: DoubleNode | None = None
        self._tail: DoubleNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def nodes(self) -> Iterator[DoubleNode]:
        """Yield the nodes from head to tail."""
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _owns(self, node: DoubleNode) -> bool:
        return any(candidate is node for candidate in self.nodes())

    def push_front(self, value: Any) -> DoubleNode:
        """Insert a value at the head and return its node."""
        node = DoubleNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1
        return node

    def append(self, value: Any) -> DoubleNode:
        """Insert a value at the tail and return its node."""
        node = DoubleNode(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def insert_after(self, node: DoubleNode, value: Any) -> DoubleNode:
        """Insert a value right after the given node of this list."""
        if not self._owns(node):
            raise ValueError("node not in list")
        new = DoubleNode(value, node, node.next)
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new
        self._size += 1
        return new

    def remove(self, node: DoubleNode) -> None:
        """Remove the given node from this list."""
        if not self._owns(node):
            raise ValueError("node not in list")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1