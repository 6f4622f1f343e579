"""FIFO queue backed by a dynamic array."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

__all__ = ["QueueEmptyError", "ArrayQueue"]


class QueueEmptyError(IndexError):
    """Raised when dequeuing from or reading the front of an empty queue."""


class ArrayQueue:
    """First-in, first-out container; the front is the oldest element."""

    def __init__(self) -> None:
        self._elements: deque[Any] = deque()

    def enqueue(self, elem: Any) -> None:
        """Append elem at the rear of the queue."""
        self._elements.append(elem)

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if not self._elements:
            raise QueueEmptyError("dequeue from empty queue")
        return self._elements.popleft()

    def front(self) -> Any:
        """Return the element at the front without removing it."""
        if not self._elements:
            raise QueueEmptyError("front of empty queue")
        return self._elements[0]

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return not self._elements

    def clear(self) -> None:
        """Remove every element."""
        self._elements.clear()

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._elements)

    def render(self) -> str:
        """Return a printable listing of the contents, front to end."""
        if not self._elements:
            return "(Queue Empty) \n"
        items = "".join(f"{elem} " for elem in self._elements)
        return (
            "Queue contents (front to end): \n"
            + items
            + "\n------------------------------ \n"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._elements)!r})"