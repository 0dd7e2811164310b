"""Breadth-first and depth-first traversal over an adjacency matrix."""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Sequence


def _neighbours(adjacency: Sequence[Sequence[int]], vertex: int) -> Iterator[int]:
    return (index for index, edge in enumerate(adjacency[vertex]) if edge)


def _check(adjacency: Sequence[Sequence[int]], start: int) -> None:
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"start vertex {start} out of range")


def bfs(adjacency: Sequence[Sequence[int]], start: int) -> List[int]:
    """Return vertices reachable from ``start`` in breadth-first order."""
    _check(adjacency, start)
    visited = {start}
    order = [start]
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        for neighbour in _neighbours(adjacency, vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                pending.append(neighbour)
    return order


def dfs(adjacency: Sequence[Sequence[int]], start: int) -> List[int]:
    """Return vertices reachable from ``start`` in depth-first order."""
    _check(adjacency, start)
    visited = {start}
    order = [start]
    stack = [_neighbours(adjacency, start)]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(_neighbours(adjacency, neighbour))
                break
        else:
            stack.pop()
    return order