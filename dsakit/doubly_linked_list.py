"""Doubly linked list with insertion at both ends."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Sequence


@dataclass(eq=False)
class DoublyNode:
    """A link holding a value and references to both neighbours."""

    value: Any
    prev: Optional["DoublyNode"] = None
    next: Optional["DoublyNode"] = None


class DoublyLinkedList:
    """A doubly linked list of arbitrary values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[DoublyNode] = None
        self.tail: Optional[DoublyNode] = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value} <=> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def append(self, value: Any) -> DoublyNode:
        """Insert ``value`` at the end and return its link."""
        node = DoublyNode(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        return node

    def push_front(self, value: Any) -> DoublyNode:
        """Insert ``value`` at the beginning and return its link."""
        node = DoublyNode(value, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        return node


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a list from integers, print it, prepend 0 and print it again."""
    parser = argparse.ArgumentParser(
        description="Build a doubly linked list and prepend a zero to it."
    )
    parser.add_argument("values", nargs="*", type=int, help="values to append")
    parser.add_argument(
        "--count",
        type=int,
        default=5,
        help="number of integers read from standard input when no values are given",
    )
    args = parser.parse_args(argv)

    values = args.values
    if not values:
        tokens = sys.stdin.read().split()[: args.count]
        if len(tokens) < args.count:
            parser.error(f"expected {args.count} integers on standard input")
        try:
            values = [int(token) for token in tokens]
        except ValueError as exc:
            parser.error(str(exc))

    items = DoublyLinkedList(values)
    print(items)
    items.push_front(0)
    print(items)
    return 0


if __name__ == "__main__":
    sys.exit(main())