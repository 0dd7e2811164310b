"""Linked lists, bounded queues and stacks, binary, search and AVL trees, and graph traversal."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "binary_tree",
    "bounded_queue",
    "bounded_stack",
    "bst",
    "doubly_linked_list",
    "graph",
    "linked_list",
]