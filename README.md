# dsakit

A small collection of classic data structures and traversal algorithms,
written in plain Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.linked_list` | `Node`, `LinkedList`, and the free functions `reverse_iterative`, `reverse_recursive`, `reverse_groups` |
| `dsakit.doubly_linked_list` | `DoublyNode`, `DoublyLinkedList`, and the `main` command |
| `dsakit.bounded_queue` | `BoundedQueue` with `QueueFullError` / `QueueEmptyError` |
| `dsakit.bounded_stack` | `BoundedStack` with `StackOverflowError` / `StackUnderflowError` |
| `dsakit.binary_tree` | `TreeNode`, `BinaryTree` (recursive and iterative traversals, level order, counts), and the `main` command |
| `dsakit.bst` | `BinarySearchTree`, `in_predecessor`, `in_successor` |
| `dsakit.avl` | `AVLNode`, `AVLTree` (self-balancing insert with rotations) |
| `dsakit.graph` | `bfs` and `dfs` over an adjacency matrix |

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Singly linked list

```python
from dsakit.linked_list import LinkedList

items = LinkedList([1, 2, 3, 4, 5, 6, 7, 8])
items.reverse_in_groups(2)
print(list(items))   # [2, 1, 4, 3, 6, 5, 8, 7]
print(items)         # 2->1->4->3->6->5->8->7->NULL

items.reverse()
items.push_front(0)
items.append(9)
items.insert_after(items.node_at(1), 42)
print(items.pop_front(), items.pop_back(), len(items))
```

`remove_before(value)` removes the element just before the first later
element equal to `value` and returns it; it raises `ValueError` when there
is no such element. `pop_front` and `pop_back` raise `IndexError` on an
empty list, and `insert_after(None, ...)` raises `ValueError`.

### Doubly linked list

```python
from dsakit.doubly_linked_list import DoublyLinkedList

items = DoublyLinkedList([1, 2, 3])
items.push_front(0)
print(items)                  # 0 <=> 1 <=> 2 <=> 3 <=> NULL
print(list(reversed(items)))  # [3, 2, 1, 0]
```

### Bounded queue and stack

```python
from dsakit.bounded_queue import BoundedQueue, QueueFullError
from dsakit.bounded_stack import BoundedStack

queue = BoundedQueue(2)
queue.enqueue(10)
queue.enqueue(20)
try:
    queue.enqueue(30)
except QueueFullError:
    print("queue is full")
print(queue.dequeue())   # 10

stack = BoundedStack(3)
stack.push("a")
stack.push("b")
print(stack.top())       # b
print(stack.peek(2))     # a  (1-based, counted from the top)
print(stack.pop())       # b
```

A `BoundedQueue` uses each of its `capacity` slots only once: after
`capacity` items have been enqueued it stays full, even if items have since
been dequeued. Both containers default to a capacity of 10.

### Trees

```python
from dsakit.binary_tree import BinaryTree
from dsakit.bst import BinarySearchTree
from dsakit.avl import AVLTree

tree = BinaryTree.from_level_order([1, 2, 3, -1, 4], missing=-1)
print(tree.level_order())                 # [1, 2, 3, 4]
print(tree.height(), tree.count(), tree.leaf_nodes())

bst = BinarySearchTree([10, 20, 5, 1, 25, 7, 15])
print(bst.inorder())     # [1, 5, 7, 10, 15, 20, 25]
bst.delete(10)
print(25 in bst, bst.height())

rebuilt = BinarySearchTree.from_preorder([50, 25, 15, 10, 20, 30, 75, 60, 55, 80])
print(rebuilt.inorder())

avl = AVLTree([10, 20, 15])
print(avl.preorder())    # [15, 10, 20]
```

`BinarySearchTree.delete` replaces an inner node with its in-order
predecessor when its left subtree is taller, otherwise with its in-order
successor. `from_preorder` raises `ValueError` on duplicate keys or on a
sequence that is not the preorder of a search tree.

### Graph traversal

```python
from dsakit.graph import bfs, dfs

adjacency = [
    [0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 1, 1, 1, 0, 0, 0],
    [0, 1, 0, 0, 1, 0, 0, 0],
    [0, 1, 0, 0, 1, 1, 0, 0],
    [0, 1, 1, 1, 0, 1, 0, 0],
    [0, 0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 0, 1, 0, 0],
]
print(bfs(adjacency, 2))   # [2, 1, 4, 3, 5, 6, 7]
print(dfs(adjacency, 1))   # [1, 2, 4, 3, 5, 6, 7]
```

Both raise `ValueError` when the matrix is not square and `IndexError`
when the start vertex is out of range.

## Command-line tools

Two small programs are installed with the package.

```
dsakit-doubly-list [VALUES ...] [--count N]
```

Builds a doubly linked list from the integers given on the command line, or,
when none are given, from the first `N` integers read from standard input
(`N` defaults to 5). It prints the list, prepends `0`, and prints it again.

```
dsakit-tree [VALUES ...] [--missing M]
```

Builds a binary tree level by level from the integers given on the command
line, or read from standard input when none are given; `M` (default `-1`)
marks a missing child. It prints the recursive and iterative preorder,
inorder and postorder traversals, the level order, the node counts and the
height.

## Limitations

`AVLTree` supports insertion and lookup only; it has no deletion. None of the
containers are thread-safe.