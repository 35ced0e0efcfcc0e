"""A first-in, first-out queue and an interactive shell for it."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, TextIO


class Queue:
    """Items leave in the order they arrived."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(iterable)

    def enqueue(self, item: Any) -> None:
        """Add item at the back."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def __str__(self) -> str:
        return "".join(f"{item}->" for item in self._items)


class _TokenReader:
    """Reads single characters and integers from a stream, skipping whitespace."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""
        self._pos = 0

    def _peek(self) -> str | None:
        while self._pos >= len(self._buffer):
            line = self._stream.readline()
            if not line:
                return None
            self._buffer = line
            self._pos = 0
        return self._buffer[self._pos]

    def _skip_whitespace(self) -> None:
        while (ch := self._peek()) is not None and ch.isspace():
            self._pos += 1

    def read_char(self) -> str | None:
        """Return the next non-blank character, or None at end of input."""
        self._skip_whitespace()
        ch = self._peek()
        if ch is not None:
            self._pos += 1
        return ch

    def read_int(self) -> int | None:
        """Return the next integer, or None if none can be read."""
        self._skip_whitespace()
        text = ""
        ch = self._peek()
        if ch in ("+", "-"):
            text = ch
            self._pos += 1
        while (ch := self._peek()) is not None and ch.isdigit():
            text += ch
            self._pos += 1
        if not text.lstrip("+-"):
            return None
        return int(text)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive queue shell on standard input and output."""
    argparse.ArgumentParser(
        description="Interactive queue: e N enqueue, d dequeue, p peek, s size, x exit."
    ).parse_args(argv)
    reader = _TokenReader(sys.stdin)
    out = sys.stdout
    queue = Queue()
    while True:
        out.write("Enter operation: ")
        out.flush()
        op = reader.read_char()
        if op is None:
            break
        if op == "e":
            number = reader.read_int()
            if number is None:
                break
            queue.enqueue(number)
        elif op == "d":
            out.write("Queue is empty!\n" if queue.is_empty() else f"Removed {queue.dequeue()}\n")
        elif op == "p":
            out.write(
                "Queue is empty!\n" if queue.is_empty() else f"Front of the queue is {queue.peek()}\n"
            )
        elif op == "s":
            out.write(f"Size of queue is {len(queue)}\n")
        if op in ("x", "X"):
            out.write("Exiting")
            break
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())