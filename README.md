# structlab

A small collection of classic data structures, written in plain Python
with no third-party dependencies.

| Module                  | What it provides                                             |
|-------------------------|--------------------------------------------------------------|
| `structlab.linked_list` | `DoublyLinkedList` with `Position` handles for insert/erase  |
| `structlab.vector`      | `Vector`, a growable array with explicit capacity            |
| `structlab.stack`       | `AbstractStack`, `ArrayStack` and `LinkedListStack`          |
| `structlab.fifo`        | `Queue`, a first-in first-out queue, and its shell           |
| `structlab.deque`       | `Deque`, a double-ended queue, and its shell                 |
| `structlab.errors`      | `IteratorOutOfBoundsError`, `IteratorMismatchError`          |

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Doubly linked list

```python
from structlab.linked_list import DoublyLinkedList

items = DoublyLinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
print(list(items))            # [0, 1, 2, 3, 4]
print(items.front(), items.back())

pos = items.begin().next()    # a Position pointing at 1
print(pos.value)              # 1
new_pos = items.insert(pos, 99)   # insert before pos, returns the new position
items.erase(items.begin())    # remove the first element
print(list(reversed(items)))
print(items.pop_front(), items.pop_back())
```

`begin()` gives the position of the first element (equal to `end()` when
the list is empty) and `end()` the position just past the last one.
Positions move with `next()` and `prev()`, and an element is read or
replaced through `position.value`.

- `insert(position, item)` puts `item` before `position` and returns the
  new element's position.
- `erase(position)` removes the element and returns the position after it.
- `erase_range(first, last)` removes the elements from `first` up to, but
  not including, `last`, and returns `last`.

Handing a list a position that belongs to another list raises
`IteratorMismatchError`; reading, erasing or moving past the list's
boundaries raises `IteratorOutOfBoundsError`. Both are subclasses of
`IndexError`. `front`, `back`, `pop_front` and `pop_back` on an empty list
raise `IndexError`.

Lists compare equal element by element, and `copy()` returns a shallow
copy.

### Vector

```python
from structlab.vector import Vector

v = Vector()                  # size 0, capacity 16
for n in range(5):
    v.push_back(n)
print(len(v), v.capacity, v.back())
v[0] = 10
v[-1]                         # negative indices count from the end
v.pop_back()                  # returns the removed item
v.reserve(64)
v.resize(3)
print(list(v))
```

A new `Vector(size)` holds `size` empty (`None`) slots plus 16 spare ones.
When `push_back` finds the storage full, capacity grows to
`2 * capacity + 1`; `resize` to a size beyond the capacity reserves twice
the new size. `reserve` below the current size does nothing. Indexing
outside the size, `pop_back` and `back` on an empty vector raise
`IndexError`; a negative size raises `ValueError`.

### Stacks

```python
from structlab.stack import ArrayStack, LinkedListStack

for stack in (ArrayStack(), LinkedListStack()):
    stack.push("a")
    stack.push("b")
    print(stack.peek(), len(stack), stack.is_empty())
    print(stack.pop())        # "b"
```

Both stacks implement the `AbstractStack` interface: `push`, `pop`,
`peek`, `is_empty` and `len()`. `pop` and `peek` on an empty stack raise
`IndexError`.

### Queue and deque

```python
from structlab.fifo import Queue
from structlab.deque import Deque

q = Queue([1, 2])
q.enqueue(3)
print(q.peek(), q.dequeue(), len(q))
print(q)                      # 2->3->

d = Deque()
d.push_front(1)
d.push_back(2)
print(d.peek_front(), d.peek_back())
print(d)                      # 1->2->
```

Both can be built from an iterable and iterated front to back. Removing
or peeking on an empty queue or deque raises `IndexError`.

## Interactive shells

Two commands let you drive a queue or a deque from the terminal. Each
prompts with `Enter operation: `, reads one operation character at a
time (whitespace is skipped), followed by an integer where the operation
needs one. `x` or `X` prints `Exiting` and stops; the end of input, or a
missing number after a push, also stops the shell. Other characters are
ignored.

```
structlab-queue
```

| Input   | Action                                                   |
|---------|----------------------------------------------------------|
| `e N`   | enqueue `N`                                              |
| `d`     | dequeue and show the removed value, or `Queue is empty!` |
| `p`     | show the front of the queue, or `Queue is empty!`        |
| `s`     | show the size                                            |

```
structlab-deque
```

| Input   | Action                                                   |
|---------|----------------------------------------------------------|
| `e N`   | push `N` at the front                                    |
| `E N`   | push `N` at the back                                     |
| `p`     | show the front, or `Queue is empty!`                     |
| `P`     | show the back, or `Queue is empty!`                      |
| `d`     | remove from the front and show it (`-1` when empty)      |
| `D`     | remove from the back and show it (`-1` when empty)       |
| `S`     | show the size                                            |
| `@`     | print the contents as `a->b->`                           |

## What it does not do

The package holds its structures in memory only; the shells keep nothing
between runs. There are no graph types, no singly linked list, and no
interactive shell for the linked list, vector or stacks.