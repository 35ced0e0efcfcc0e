"""Classic data structures: linked list, vector, stacks, queue and deque."""

__version__ = "0.1.0"

__all__ = ["deque", "errors", "fifo", "linked_list", "stack", "vector"]