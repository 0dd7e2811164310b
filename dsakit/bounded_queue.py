"""Fixed-capacity FIFO queue whose slots are used once."""

from __future__ import annotations

from typing import Any, Iterator, List


class QueueFullError(Exception):
    """Raised when enqueuing into a queue with no free slot."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty queue."""


class BoundedQueue:
    """A FIFO queue backed by ``capacity`` slots.

    Slots are consumed in order and never reused, so at most ``capacity``
    items can be enqueued over the queue's lifetime, even after dequeues.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: List[Any] = []
        self._front = 0

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        if len(self._slots) == self.capacity:
            raise QueueFullError("Queue Full")
        self._slots.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is Empty")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front += 1
        return item

    def is_empty(self) -> bool:
        """Return True when no item is waiting."""
        return self._front == len(self._slots)

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"BoundedQueue({list(self)!r}, capacity={self.capacity})"