"""Last-in, first-out stacks backed by an array or by linked nodes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class AbstractStack(ABC):
    """The operations every stack provides."""

    @abstractmethod
    def push(self, item: Any) -> None:
        """Put item on top of the stack."""

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the top item."""

    @abstractmethod
    def peek(self) -> Any:
        """Return the top item without removing it."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of items on the stack."""

    def is_empty(self) -> bool:
        return len(self) == 0


class ArrayStack(AbstractStack):
    """A stack stored in a contiguous array."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class _Node:
    __slots__ = ("element", "next")

    def __init__(self, element: Any, next_: _Node | None) -> None:
        self.element = element
        self.next = next_


class LinkedListStack(AbstractStack):
    """A stack stored as a chain of nodes below a sentinel head."""

    def __init__(self) -> None:
        self._head = _Node(None, None)
        self._size = 0

    def push(self, item: Any) -> None:
        self._head.next = _Node(item, self._head.next)
        self._size += 1

    def pop(self) -> Any:
        top = self._head.next
        if top is None:
            raise IndexError("pop from empty stack")
        self._head.next = top.next
        self._size -= 1
        return top.element

    def peek(self) -> Any:
        if self._head.next is None:
            raise IndexError("peek at empty stack")
        return self._head.next.element

    def __len__(self) -> int:
        return self._size