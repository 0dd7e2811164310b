import pytest

from dsakit.bst import BinarySearchTree, in_predecessor, in_successor

KEYS = [10, 20, 5, 1, 25, 7, 15]
PRE = [50, 25, 15, 10, 20, 30, 75, 60, 55, 80]


@pytest.fixture
def tree():
    return BinarySearchTree(KEYS)


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(KEYS)
    assert len(tree) == len(KEYS)


def test_preorder_pinned(tree):
    assert tree.preorder() == [10, 5, 1, 7, 20, 15, 25]


def test_postorder_consistent_with_rebuild(tree):
    rebuilt = BinarySearchTree.from_preorder(tree.preorder())
    assert rebuilt.postorder() == tree.postorder()
    assert rebuilt.inorder() == tree.inorder()


def test_search(tree):
    found = tree.search(25)
    assert found.value == 25
    assert tree.search(2) is None
    assert 25 in tree
    assert 2 not in tree


def test_duplicate_insert_ignored(tree):
    assert tree.insert(10) is False
    assert len(tree) == len(KEYS)
    assert tree.inorder() == sorted(KEYS)


def test_delete_leaf_and_root(tree):
    assert tree.delete(25) is True
    assert tree.inorder() == sorted(k for k in KEYS if k != 25)
    assert tree.delete(10) is True
    assert tree.root.value == 15
    assert tree.inorder() == sorted(k for k in KEYS if k not in (10, 25))
    assert len(tree) == len(KEYS) - 2


def test_delete_missing(tree):
    assert tree.delete(2) is False
    assert tree.inorder() == sorted(KEYS)
    assert len(tree) == len(KEYS)


def test_delete_everything(tree):
    for key in [7, 10, 1, 25, 20, 5, 15]:
        assert tree.delete(key) is True
        assert key not in tree
        values = tree.inorder()
        assert values == sorted(values)
    assert tree.root is None
    assert len(tree) == tree.height()


def test_delete_keeps_remaining_keys():
    keys = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]
    tree = BinarySearchTree(keys)
    removed = [30, 70, 50]
    for key in removed:
        tree.delete(key)
    assert tree.inorder() == sorted(set(keys) - set(removed))


def test_from_preorder_round_trip():
    tree = BinarySearchTree.from_preorder(PRE)
    assert tree.preorder() == PRE
    assert tree.inorder() == sorted(PRE)
    assert len(tree) == len(PRE)


def test_from_preorder_matches_insertion():
    inserted = BinarySearchTree(PRE)
    rebuilt = BinarySearchTree.from_preorder(PRE)
    assert rebuilt.postorder() == inserted.postorder()


def test_from_preorder_rejects_invalid():
    with pytest.raises(ValueError):
        BinarySearchTree.from_preorder([10, 5, 12, 7])


def test_from_preorder_rejects_duplicates():
    with pytest.raises(ValueError):
        BinarySearchTree.from_preorder([10, 5, 5])


def test_from_preorder_empty():
    tree = BinarySearchTree.from_preorder([])
    assert tree.root is None
    assert len(tree) == tree.height()


def test_height_of_sorted_insertions():
    tree = BinarySearchTree(range(6))
    assert tree.height() == len(tree)


def test_predecessor_and_successor(tree):
    below = [k for k in KEYS if k < tree.root.value]
    above = [k for k in KEYS if k > tree.root.value]
    assert in_predecessor(tree.root.left).value == max(below)
    assert in_successor(tree.root.right).value == min(above)
    assert in_predecessor(None) is None
    assert in_successor(None) is None