"""A doubly linked list with sentinel nodes and movable positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .errors import IteratorMismatchError, IteratorOutOfBoundsError


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any = None, prev: _Node | None = None, next_: _Node | None = None) -> None:
        self.data = data
        self.prev = prev
        self.next = next_


class Position:
    """A place in a DoublyLinkedList, either on an element or at the end."""

    __slots__ = ("_owner", "_node")

    def __init__(self, owner: DoublyLinkedList, node: _Node) -> None:
        self._owner = owner
        self._node = node

    @property
    def value(self) -> Any:
        """The element at this position."""
        self._require_element()
        return self._node.data

    @value.setter
    def value(self, item: Any) -> None:
        self._require_element()
        self._node.data = item

    def next(self) -> Position:
        """Return the position one step towards the end."""
        if self._node.next is None:
            raise IteratorOutOfBoundsError("Out Of Bounds")
        return Position(self._owner, self._node.next)

    def prev(self) -> Position:
        """Return the position one step towards the front."""
        if self._node.prev is None:
            raise IteratorOutOfBoundsError("Out Of Bounds")
        return Position(self._owner, self._node.prev)

    def _require_element(self) -> None:
        if self._node.prev is None or self._node.next is None:
            raise IteratorOutOfBoundsError("Out Of Bounds")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._owner is other._owner and self._node is other._node

    def __hash__(self) -> int:
        return hash((id(self._owner), id(self._node)))

    def __repr__(self) -> str:
        if self._node.prev is None or self._node.next is None:
            return "Position(<boundary>)"
        return f"Position({self._node.data!r})"


class DoublyLinkedList:
    """A sequence with constant-time insertion and removal at any position."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._head = _Node()
        self._tail = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0
        for item in iterable:
            self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._tail:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail.prev
        while node is not self._head:
            yield node.data
            node = node.prev

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoublyLinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def copy(self) -> DoublyLinkedList:
        """Return a shallow copy of the list."""
        return DoublyLinkedList(self)

    def begin(self) -> Position:
        """Position of the first element, equal to end() when empty."""
        return Position(self, self._head.next)

    def end(self) -> Position:
        """Position just past the last element."""
        return Position(self, self._tail)

    def clear(self) -> None:
        """Remove every element."""
        node = self._head.next
        while node is not self._tail:
            following = node.next
            node.prev = node.next = None
            node = following
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def front(self) -> Any:
        if not self._size:
            raise IndexError("front of empty list")
        return self._head.next.data

    def back(self) -> Any:
        if not self._size:
            raise IndexError("back of empty list")
        return self._tail.prev.data

    def push_front(self, item: Any) -> None:
        self.insert(self.begin(), item)

    def push_back(self, item: Any) -> None:
        self.insert(self.end(), item)

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        item = self.front()
        self.erase(self.begin())
        return item

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        item = self.back()
        self.erase(self.end().prev())
        return item

    def insert(self, position: Position, item: Any) -> Position:
        """Insert item before position and return the new element's position."""
        node = self._node_of(position)
        if node.prev is None:
            raise IteratorOutOfBoundsError("Out Of Bounds")
        new_node = _Node(item, node.prev, node)
        node.prev.next = new_node
        node.prev = new_node
        self._size += 1
        return Position(self, new_node)

    def erase(self, position: Position) -> Position:
        """Remove the element at position and return the position after it."""
        node = self._node_of(position)
        if node.prev is None or node.next is None:
            raise IteratorOutOfBoundsError("Out Of Bounds")
        following = node.next
        node.prev.next = following
        following.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return Position(self, following)

    def erase_range(self, first: Position, last: Position) -> Position:
        """Remove the elements from first up to, but not including, last."""
        self._node_of(first)
        self._node_of(last)
        position = first
        while position != last:
            position = self.erase(position)
        return last

    def _node_of(self, position: Position) -> _Node:
        if position._owner is not self:
            raise IteratorMismatchError()
        return position._node