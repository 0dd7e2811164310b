"""Singly linked list with insertion, deletion and reversal operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A single link holding a value and a reference to the next link."""

    value: Any
    next: Optional["Node"] = None


def reverse_iterative(head: Optional[Node]) -> Optional[Node]:
    """Reverse the chain starting at ``head`` in place and return the new head."""
    previous: Optional[Node] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def reverse_recursive(head: Optional[Node]) -> Optional[Node]:
    """Reverse the chain starting at ``head`` recursively and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def reverse_groups(head: Optional[Node], k: int) -> Optional[Node]:
    """Reverse every consecutive run of ``k`` links and return the new head.

    A trailing run shorter than ``k`` is reversed as well.
    """
    if k < 1:
        raise ValueError("group size must be at least 1")
    new_head: Optional[Node] = None
    tail_of_previous: Optional[Node] = None
    current = head
    while current is not None:
        group_first = current
        previous: Optional[Node] = None
        for _ in range(k):
            if current is None:
                break
            following = current.next
            current.next = previous
            previous = current
            current = following
        if tail_of_previous is None:
            new_head = previous
        else:
            tail_of_previous.next = previous
        tail_of_previous = group_first
    return new_head


class LinkedList:
    """A singly linked list of arbitrary values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def node_at(self, index: int) -> Node:
        """Return the link at position ``index`` (negative counts from the end)."""
        if index < 0:
            index += len(self)
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node
        raise IndexError("list index out of range")

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the beginning and return its link."""
        self.head = Node(value, self.head)
        return self.head

    def append(self, value: Any) -> Node:
        """Insert ``value`` at the end and return its link."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        return node

    def insert_after(self, node: Optional[Node], value: Any) -> Node:
        """Insert ``value`` directly after ``node`` and return the new link."""
        if node is None:
            raise ValueError("node can not be null")
        new_node = Node(value, node.next)
        node.next = new_node
        return new_node

    def pop_front(self) -> Any:
        """Remove the first link and return its value."""
        if self.head is None:
            raise IndexError("list is empty")
        node = self.head
        self.head = node.next
        return node.value

    def pop_back(self) -> Any:
        """Remove the last link and return its value."""
        if self.head is None:
            raise IndexError("list is empty")
        if self.head.next is None:
            value = self.head.value
            self.head = None
            return value
        node = self.head
        while node.next.next is not None:
            node = node.next
        value = node.next.value
        node.next = None
        return value

    def remove_before(self, value: Any) -> Any:
        """Remove the link just before the first later link holding ``value``.

        Returns the removed value. Raises ValueError when no link holding
        ``value`` has a predecessor.
        """
        if self.head is None:
            raise ValueError(f"{value!r} has no predecessor in the list")
        before_previous: Optional[Node] = None
        previous = self.head
        current = self.head.next
        while current is not None:
            if current.value == value:
                if before_previous is None:
                    self.head = current
                else:
                    before_previous.next = current
                return previous.value
            before_previous, previous, current = previous, current, current.next
        raise ValueError(f"{value!r} has no predecessor in the list")

    def reverse(self) -> None:
        """Reverse the list in place iteratively."""
        self.head = reverse_iterative(self.head)

    def reverse_recursive(self) -> None:
        """Reverse the list in place recursively."""
        self.head = reverse_recursive(self.head)

    def reverse_in_groups(self, k: int) -> None:
        """Reverse every run of ``k`` consecutive elements in place."""
        self.head = reverse_groups(self.head, k)