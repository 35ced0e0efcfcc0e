"""A growable array with explicit size and capacity."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any


class Vector:
    """An array whose storage grows geometrically as items are appended."""

    SPARE_CAPACITY = 16

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._slots: list[Any] = [None] * (size + self.SPARE_CAPACITY)

    def __len__(self) -> int:
        return self._size

    def _normalise(self, index: Any) -> int:
        index = operator.index(index)
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("vector index out of range")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._slots[self._normalise(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._slots[self._normalise(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[: self._size])

    def __repr__(self) -> str:
        return f"Vector({list(self)!r}, capacity={self.capacity})"

    @property
    def capacity(self) -> int:
        """Number of slots allocated."""
        return len(self._slots)

    def resize(self, new_size: int) -> None:
        """Change the size, growing storage to twice new_size when needed."""
        if new_size < 0:
            raise ValueError("size must not be negative")
        if new_size > self.capacity:
            self.reserve(new_size * 2)
        if new_size < self._size:
            self._slots[new_size : self._size] = [None] * (self._size - new_size)
        self._size = new_size

    def reserve(self, new_capacity: int) -> None:
        """Set the capacity; requests below the current size are ignored."""
        if new_capacity < self._size:
            return
        self._slots = self._slots[: self._size] + [None] * (new_capacity - self._size)

    def push_back(self, item: Any) -> None:
        if self._size == self.capacity:
            self.reserve(2 * self.capacity + 1)
        self._slots[self._size] = item
        self._size += 1

    def pop_back(self) -> Any:
        """Remove and return the last item."""
        if not self._size:
            raise IndexError("pop from empty vector")
        self._size -= 1
        item = self._slots[self._size]
        self._slots[self._size] = None
        return item

    def back(self) -> Any:
        if not self._size:
            raise IndexError("back of empty vector")
        return self._slots[self._size - 1]