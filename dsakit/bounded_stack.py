"""Fixed-capacity LIFO stack."""

from __future__ import annotations

from typing import Any, Iterator, List


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        if self.is_full():
            raise StackOverflowError("Stack Overflow")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflowError("Stack underflow")
        return self._items.pop()

    def peek(self, index: int) -> Any:
        """Return the item at 1-based ``index`` counted from the top."""
        if not 1 <= index <= len(self._items):
            raise IndexError("Invalid Index")
        return self._items[-index]

    def top(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflowError("Stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"BoundedStack({list(self)!r}, capacity={self.capacity})"