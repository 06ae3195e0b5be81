"""A fixed-capacity binary min-heap with index-based operations."""

from __future__ import annotations


class HeapOverflowError(Exception):
    """Raised when inserting into a heap that is already full."""


class MinHeap:
    """Binary min-heap stored in a list, limited to a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list = []

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("heap index out of range")

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index:
            parent = (index - 1) // 2
            if items[parent] <= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def insert(self, key) -> None:
        """Add a key, raising HeapOverflowError when the heap is full."""
        if len(self._items) == self.capacity:
            raise HeapOverflowError("heap capacity reached")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def decrease_key(self, index: int, new_value) -> None:
        """Replace the key at index with a value no larger than it."""
        self._check_index(index)
        self._items[index] = new_value
        self._sift_up(index)

    def extract_min(self):
        """Remove and return the smallest key."""
        if not self._items:
            raise IndexError("extract from an empty heap")
        last = self._items.pop()
        if not self._items:
            return last
        root = self._items[0]
        self._items[0] = last
        self._sift_down(0)
        return root

    def delete_key(self, index: int) -> None:
        """Remove the key stored at index."""
        self._check_index(index)
        items = self._items
        while index:
            parent = (index - 1) // 2
            items[parent], items[index] = items[index], items[parent]
            index = parent
        self.extract_min()

    def peek(self):
        """Return the smallest key without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]