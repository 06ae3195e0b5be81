"""A stack that reports its largest element in constant time."""

from __future__ import annotations

from typing import Any


class MaxStack:
    """Stack that tracks the running maximum alongside every element."""

    def __init__(self) -> None:
        self._items: list[tuple[Any, Any]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Push a value."""
        if self._items and not value > self._items[-1][1]:
            maximum = self._items[-1][1]
        else:
            maximum = value
        self._items.append((value, maximum))

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()[0]

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def maximum(self) -> Any:
        """Return the largest value currently on the stack."""
        if not self._items:
            raise IndexError("maximum of an empty stack")
        return self._items[-1][1]