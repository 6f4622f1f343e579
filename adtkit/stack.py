"""LIFO stacks backed by a dynamic array or by a doubly-linked list."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

__all__ = ["StackEmptyError", "Stack", "ArrayStack", "LinkedStack"]


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class Stack(ABC):
    """Abstract last-in, first-out container."""

    _EMPTY_TEXT = "(Stack Empty)\n"
    _ITEM_FORMAT = "{} \n"

    @abstractmethod
    def push(self, elem: Any) -> None:
        """Place elem on top of the stack."""

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the top element."""

    @abstractmethod
    def peek(self) -> Any:
        """Return the top element without removing it."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every element."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of elements held."""

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return len(self) == 0

    def render(self) -> str:
        """Return a printable listing of the contents, top to bottom."""
        if self.is_empty():
            return self._EMPTY_TEXT + "\n"
        items = "".join(self._ITEM_FORMAT.format(elem) for elem in self)
        return "Stack contents (top to bottom): \n" + items + "--- bottom --- \n\n"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class ArrayStack(Stack):
    """Stack stored in a contiguous list; the top is the list's end."""

    def __init__(self) -> None:
        self._elements: list[Any] = []

    def push(self, elem: Any) -> None:
        self._elements.append(elem)

    def pop(self) -> Any:
        if not self._elements:
            raise StackEmptyError("pop from empty stack")
        return self._elements.pop()

    def peek(self) -> Any:
        if not self._elements:
            raise StackEmptyError("peek at empty stack")
        return self._elements[-1]

    def clear(self) -> None:
        self._elements.clear()

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._elements)


class _Node:
    __slots__ = ("element", "next", "prev")

    def __init__(self, element: Any = None) -> None:
        self.element = element
        self.next: _Node | None = None
        self.prev: _Node | None = None


class LinkedStack(Stack):
    """Stack stored in a doubly-linked list with sentinels; the top follows the header."""

    _EMPTY_TEXT = "(Stack Empty)"
    _ITEM_FORMAT = "{} \n\n"

    def __init__(self) -> None:
        self._header = _Node()
        self._trailer = _Node()
        self._link_empty()
        self._size = 0

    def _link_empty(self) -> None:
        self._header.next = self._trailer
        self._trailer.prev = self._header

    def push(self, elem: Any) -> None:
        node = _Node(elem)
        first = self._header.next
        node.next = first
        node.prev = self._header
        first.prev = node
        self._header.next = node
        self._size += 1

    def pop(self) -> Any:
        if self._size == 0:
            raise StackEmptyError("pop from empty stack")
        node = self._header.next
        self._header.next = node.next
        node.next.prev = self._header
        self._size -= 1
        return node.element

    def peek(self) -> Any:
        if self._size == 0:
            raise StackEmptyError("peek at empty stack")
        return self._header.next.element

    def clear(self) -> None:
        self._link_empty()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._header.next
        while node is not self._trailer:
            yield node.element
            node = node.next