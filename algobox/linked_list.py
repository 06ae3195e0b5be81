"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Callable, Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    value: Any
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """Singly linked list that keeps track of its head and its length."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _links(self) -> Iterator[tuple[Node | None, Node]]:
        previous = None
        for node in self.nodes():
            yield previous, node
            previous = node

    def _find(
        self, matches: Callable[[Node], bool], missing: str
    ) -> tuple[Node | None, Node]:
        for previous, node in self._links():
            if matches(node):
                return previous, node
        raise ValueError(missing)

    def _unlink(self, previous: Node | None, node: Node) -> None:
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        node.next = None
        self._size -= 1

    def _link_after(self, node: Node, value: Any) -> Node:
        new = Node(value, node.next)
        node.next = new
        self._size += 1
        return new

    def push_front(self, value: Any) -> Node:
        """Insert a value at the head and return its node."""
        node = Node(value, self._head)
        self._head = node
        self._size += 1
        return node

    def append(self, value: Any) -> Node:
        """Insert a value at the tail and return its node."""
        last = None
        for last in self.nodes():
            pass
        if last is None:
            return self.push_front(value)
        return self._link_after(last, value)

    def insert_after(self, after: Any, value: Any) -> Node:
        """Insert a value after the first node holding `after`."""
        _, node = self._find(lambda n: n.value == after, f"{after!r} not in list")
        return self._link_after(node, value)

    def insert_after_node(self, node: Node, value: Any) -> Node:
        """Insert a value right after the given node of this list."""
        _, found = self._find(lambda n: n is node, "node not in list")
        return self._link_after(found, value)

    def insert_before(self, value: Any, before: Any) -> Node:
        """Insert a value before the first node holding `before`."""
        previous, node = self._find(
            lambda n: n.value == before, f"{before!r} not in list"
        )
        new = Node(value, node)
        if previous is None:
            self._head = new
        else:
            previous.next = new
        self._size += 1
        return new

    def remove(self, value: Any) -> None:
        """Remove the first node holding the value."""
        previous, node = self._find(lambda n: n.value == value, f"{value!r} not in list")
        self._unlink(previous, node)

    def remove_node(self, node: Node) -> None:
        """Remove the given node from this list."""
        previous, found = self._find(lambda n: n is node, "node not in list")
        self._unlink(previous, found)

    def remove_at(self, position: int) -> Any:
        """Remove the node at a zero-based position and return its value."""
        if not 0 <= position < self._size:
            raise IndexError("linked list index out of range")
        previous, node = next(islice(self._links(), position, None))
        self._unlink(previous, node)
        return node.value

    def clear(self) -> None:
        """Remove every node."""
        node = self._head
        while node is not None:
            node.next, node = None, node.next
        self._head = None
        self._size = 0

    def middle(self) -> Any:
        """Value of the middle node; the second of two middles on even length."""
        if self._head is None:
            raise ValueError("middle of an empty list")
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.value

    def reverse(self) -> None:
        """Reverse the list in place, iteratively."""
        previous = None
        current = self._head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self._head = previous

    @classmethod
    def _reverse_from(cls, node: Node | None) -> Node | None:
        if node is None or node.next is None:
            return node
        rest = cls._reverse_from(node.next)
        node.next.next = node
        node.next = None
        return rest

    def reverse_recursive(self) -> None:
        """Reverse the list in place, recursively."""
        self._head = self._reverse_from(self._head)