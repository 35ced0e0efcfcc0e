"""A double-ended queue and an interactive shell for it."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

from .fifo import _TokenReader


class Deque:
    """Items can be added and removed at either end."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(iterable)

    def push_front(self, item: Any) -> None:
        self._items.appendleft(item)

    def push_back(self, item: Any) -> None:
        self._items.append(item)

    def pop_front(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("pop from empty deque")
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the back item."""
        if not self._items:
            raise IndexError("pop from empty deque")
        return self._items.pop()

    def peek_front(self) -> Any:
        if not self._items:
            raise IndexError("peek at empty deque")
        return self._items[0]

    def peek_back(self) -> Any:
        if not self._items:
            raise IndexError("peek at empty deque")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"

    def __str__(self) -> str:
        return "".join(f"{item}->" for item in self._items)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive deque shell on standard input and output."""
    argparse.ArgumentParser(
        description=(
            "Interactive deque: e/E N push front/back, p/P peek front/back, "
            "d/D pop front/back, S size, @ print, x exit."
        )
    ).parse_args(argv)
    reader = _TokenReader(sys.stdin)
    out = sys.stdout
    dq = Deque()

    def removed(pop: Any) -> Any:
        # An empty deque reports -1 as the removed value.
        try:
            return pop()
        except IndexError:
            return -1

    while True:
        out.write("Enter operation: ")
        out.flush()
        op = reader.read_char()
        if op is None:
            break
        if op in ("e", "E"):
            number = reader.read_int()
            if number is None:
                break
            if op == "e":
                dq.push_front(number)
            else:
                dq.push_back(number)
        elif op == "p":
            out.write(
                "Queue is empty!\n" if dq.is_empty() else f"Front of the queue is {dq.peek_front()}\n"
            )
        elif op == "P":
            out.write(
                "Queue is empty!\n" if dq.is_empty() else f"Back of the queue is {dq.peek_back()}\n"
            )
        elif op == "d":
            out.write(f"Removed number at front: {removed(dq.pop_front)}\n")
        elif op == "D":
            out.write(f"Removed number at back: {removed(dq.pop_back)}\n")
        elif op == "S":
            out.write(f"Size: {len(dq)}\n")
        elif op == "@":
            out.write(f"{dq}\n")
        if op in ("x", "X"):
            out.write("Exiting")
            break
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())