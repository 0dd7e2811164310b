"""Binary search tree with insertion, search and height-guided deletion."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

from dsakit.binary_tree import BinaryTree, TreeNode


def in_predecessor(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the rightmost node of the subtree rooted at ``node``."""
    while node is not None and node.right is not None:
        node = node.right
    return node


def in_successor(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the leftmost node of the subtree rooted at ``node``."""
    while node is not None and node.left is not None:
        node = node.left
    return node


def _height(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


class BinarySearchTree:
    """A binary search tree of distinct, mutually comparable keys."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    @classmethod
    def from_preorder(cls, values: Iterable[Any]) -> "BinarySearchTree":
        """Rebuild a tree from its preorder sequence of distinct keys."""
        keys = list(values)
        tree = cls()
        if not keys:
            return tree
        tree.root = TreeNode(keys[0])
        stack: List[TreeNode] = []
        node = tree.root
        remaining = iter(keys[1:])
        key = next(remaining, None)
        placed = 1
        while placed < len(keys):
            if key == node.value:
                raise ValueError(f"duplicate key {key!r}")
            if key < node.value:
                node.left = TreeNode(key)
                stack.append(node)
                node = node.left
            elif not stack or key < stack[-1].value:
                node.right = TreeNode(key)
                node = node.right
            else:
                node = stack.pop()
                continue
            placed += 1
            key = next(remaining, None)
        tree._size = placed
        inorder = tree.inorder()
        if any(not a < b for a, b in zip(inorder, inorder[1:])):
            raise ValueError("values are not the preorder of a binary search tree")
        return tree

    def insert(self, key: Any) -> bool:
        """Insert ``key``; return False if it was already present."""
        if self.root is None:
            self.root = TreeNode(key)
            self._size += 1
            return True
        node = self.root
        while True:
            if key == node.value:
                return False
            side = "left" if key < node.value else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, TreeNode(key))
                self._size += 1
                return True
            node = child

    def search(self, key: Any) -> Optional[TreeNode]:
        """Return the node holding ``key``, or None when absent."""
        node = self.root
        while node is not None:
            if key == node.value:
                return node
            node = node.left if key < node.value else node.right
        return None

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __len__(self) -> int:
        return self._size

    def delete(self, key: Any) -> bool:
        """Remove ``key``; return False if it was not present.

        An inner node takes the value of its in-order predecessor when its left
        subtree is taller, otherwise that of its in-order successor.
        """
        self.root, removed = self._delete(self.root, key)
        if removed:
            self._size -= 1
        return removed

    def _delete(self, node: Optional[TreeNode], key: Any) -> Tuple[Optional[TreeNode], bool]:
        if node is None:
            return None, False
        if key < node.value:
            node.left, removed = self._delete(node.left, key)
            return node, removed
        if key > node.value:
            node.right, removed = self._delete(node.right, key)
            return node, removed
        if node.left is None and node.right is None:
            return None, True
        if _height(node.left) > _height(node.right):
            replacement = in_predecessor(node.left)
            node.value = replacement.value
            node.left, _ = self._delete(node.left, replacement.value)
        else:
            replacement = in_successor(node.right)
            node.value = replacement.value
            node.right, _ = self._delete(node.right, replacement.value)
        return node, True

    def height(self) -> int:
        """Return the number of levels (0 for an empty tree)."""
        return _height(self.root)

    def preorder(self) -> List[Any]:
        return BinaryTree(self.root).preorder()

    def inorder(self) -> List[Any]:
        return BinaryTree(self.root).inorder()

    def postorder(self) -> List[Any]:
        return BinaryTree(self.root).postorder()