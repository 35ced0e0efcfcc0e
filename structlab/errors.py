"""Exceptions raised when list positions are used incorrectly."""


class IteratorOutOfBoundsError(IndexError):
    """A position points outside the usable range of its list."""

    default_message = "Iterator out of bounds exception"

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class IteratorMismatchError(IteratorOutOfBoundsError):
    """A position belonging to one list was handed to another."""

    default_message = "Iterator mismatch exception"