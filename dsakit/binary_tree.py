"""Binary tree built level by level, with recursive and iterative traversals."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding a value and its two children."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def _height(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


class BinaryTree:
    """A general binary tree of arbitrary values."""

    def __init__(self, root: Optional[TreeNode] = None) -> None:
        self.root = root

    @classmethod
    def from_level_order(cls, values: Iterable[Any], missing: Any = -1) -> "BinaryTree":
        """Build a tree from values given level by level.

        The first value is the root; afterwards each node in turn takes a left
        and then a right child, where ``missing`` means no child. Running out of
        values leaves the remaining children absent.
        """
        stream = iter(values)
        try:
            first = next(stream)
        except StopIteration:
            return cls()
        root = TreeNode(first)
        pending = deque([root])
        while pending:
            parent = pending.popleft()
            for side in ("left", "right"):
                value = next(stream, missing)
                if value != missing:
                    child = TreeNode(value)
                    setattr(parent, side, child)
                    pending.append(child)
        return cls(root)

    def preorder(self) -> List[Any]:
        """Visit, left, right."""
        return list(_preorder(self.root))

    def inorder(self) -> List[Any]:
        """Left, visit, right."""
        return list(_inorder(self.root))

    def postorder(self) -> List[Any]:
        """Left, right, visit."""
        return list(_postorder(self.root))

    def iterative_preorder(self) -> List[Any]:
        """Preorder traversal using an explicit stack."""
        result: List[Any] = []
        stack: List[TreeNode] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                result.append(node.value)
                stack.append(node)
                node = node.left
            else:
                node = stack.pop().right
        return result

    def iterative_inorder(self) -> List[Any]:
        """Inorder traversal using an explicit stack."""
        result: List[Any] = []
        stack: List[TreeNode] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                result.append(node.value)
                node = node.right
        return result

    def iterative_postorder(self) -> List[Any]:
        """Postorder traversal using an explicit stack."""
        result: List[Any] = []
        node = self.root
        if node is None:
            return result
        stack: List[TreeNode] = []
        last = node
        while True:
            while node.left is not None:
                stack.append(node)
                node = node.left
            while node.right is None or node.right is last:
                result.append(node.value)
                last = node
                if not stack:
                    return result
                node = stack.pop()
            stack.append(node)
            node = node.right

    def level_order(self) -> List[Any]:
        """Visit nodes level by level, left to right."""
        result: List[Any] = []
        if self.root is None:
            return result
        pending = deque([self.root])
        while pending:
            node = pending.popleft()
            result.append(node.value)
            pending.extend(child for child in (node.left, node.right) if child is not None)
        return result

    def _nodes(self) -> Iterator[TreeNode]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            stack.extend(child for child in (node.right, node.left) if child is not None)

    def height(self) -> int:
        """Return the number of levels (0 for an empty tree)."""
        return _height(self.root)

    def count(self) -> int:
        """Return the number of nodes."""
        return sum(1 for _ in self._nodes())

    def internal_nodes(self) -> int:
        """Return the number of nodes with two children."""
        return sum(
            1 for node in self._nodes() if node.left is not None and node.right is not None
        )

    def leaf_nodes(self) -> int:
        """Return the number of nodes with no children."""
        return sum(1 for node in self._nodes() if node.left is None and node.right is None)


def _joined(values: Iterable[Any]) -> str:
    return " ".join(str(value) for value in values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a tree from level-order integers and report its traversals."""
    parser = argparse.ArgumentParser(
        description="Build a binary tree level by level and print its traversals."
    )
    parser.add_argument(
        "values",
        nargs="*",
        type=int,
        help="level-order values; read from standard input when omitted",
    )
    parser.add_argument(
        "--missing", type=int, default=-1, help="value that marks an absent child"
    )
    args = parser.parse_args(argv)

    values = args.values
    if not values:
        try:
            values = [int(token) for token in sys.stdin.read().split()]
        except ValueError as exc:
            parser.error(str(exc))
    if not values:
        parser.error("at least a root value is required")

    tree = BinaryTree.from_level_order(values, args.missing)
    print(f"Preorder traversal (recursive): {_joined(tree.preorder())}")
    print(f"Preorder traversal (iterative): {_joined(tree.iterative_preorder())}")
    print(f"Inorder traversal (recursive): {_joined(tree.inorder())}")
    print(f"Inorder traversal (iterative): {_joined(tree.iterative_inorder())}")
    print(f"Postorder traversal (recursive): {_joined(tree.postorder())}")
    print(f"Postorder traversal (iterative): {_joined(tree.iterative_postorder())}")
    print(f"Level order traversal: {_joined(tree.level_order())}")
    print(f"Total nodes: {tree.count()}")
    print(f"Internal nodes (degree 2): {tree.internal_nodes()}")
    print(f"Leaf nodes: {tree.leaf_nodes()}")
    print(f"Height of tree: {tree.height()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())