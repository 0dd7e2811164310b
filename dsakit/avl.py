"""Self-balancing AVL search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Tuple


@dataclass(eq=False)
class AVLNode:
    """A tree node with its key, subtree height and children."""

    key: Any
    height: int = 1
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def _update_height(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


class AVLTree:
    """An AVL tree of distinct, mutually comparable keys."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Optional[AVLNode] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Insert ``key``; return False if it was already present."""
        self.root, inserted = self._insert(self.root, key)
        if inserted:
            self._size += 1
        return inserted

    def _insert(self, node: Optional[AVLNode], key: Any) -> Tuple[AVLNode, bool]:
        if node is None:
            return AVLNode(key), True
        if key < node.key:
            node.left, inserted = self._insert(node.left, key)
        elif key > node.key:
            node.right, inserted = self._insert(node.right, key)
        else:
            return node, False
        _update_height(node)
        return self._rebalance(node), inserted

    def _rebalance(self, node: AVLNode) -> AVLNode:
        factor = self.balance_factor(node)
        if factor == 2:
            if self.balance_factor(node.left) < 0:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if factor == -2:
            if self.balance_factor(node.right) > 0:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Return the number of levels in the tree (0 when empty)."""
        return _height(self.root)

    def balance_factor(self, node: Optional[AVLNode]) -> int:
        """Return left subtree height minus right subtree height."""
        if node is None:
            return 0
        return _height(node.left) - _height(node.right)

    def preorder(self) -> List[Any]:
        return list(self._walk(self.root, "pre"))

    def inorder(self) -> List[Any]:
        return list(self._walk(self.root, "in"))

    def postorder(self) -> List[Any]:
        return list(self._walk(self.root, "post"))

    def _walk(self, node: Optional[AVLNode], order: str) -> Iterator[Any]:
        if node is None:
            return
        if order == "pre":
            yield node.key
        yield from self._walk(node.left, order)
        if order == "in":
            yield node.key
        yield from self._walk(node.right, order)
        if order == "post":
            yield node.key