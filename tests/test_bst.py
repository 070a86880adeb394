import io

import pytest

from dsakit.bst import BinarySearchTree, main

VALUES = [50, 30, 70, 20, 40, 60, 80, 35, 30]


def _tree(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def test_inorder_is_sorted_with_duplicates():
    tree = _tree(VALUES)
    assert tree.inorder() == sorted(VALUES)
    assert len(tree) == len(VALUES)


def test_preorder_starts_and_postorder_ends_with_root():
    tree = _tree(VALUES)
    assert tree.preorder()[0] == VALUES[0]
    assert tree.postorder()[-1] == VALUES[0]
    assert sorted(tree.preorder()) == sorted(tree.postorder()) == sorted(VALUES)


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.height() == 0
    assert tree.inorder() == []
    with pytest.raises(ValueError):
        tree.minimum()


def test_height_of_degenerate_chain_equals_count():
    tree = _tree(range(25))
    assert tree.height() == 25
    assert tree.height() == len(tree)


def test_height_of_balanced_insertion_order():
    tree = _tree([4, 2, 6, 1, 3, 5, 7])
    assert tree.height() == 3


def test_minimum():
    assert _tree(VALUES).minimum() == min(VALUES)


def test_membership():
    tree = _tree(VALUES)
    assert all(value in tree for value in VALUES)
    assert 99 not in tree


def test_mirror_reverses_inorder_and_twice_restores():
    tree = _tree(VALUES)
    original = tree.inorder()
    tree.mirror()
    assert tree.inorder() == original[::-1]
    assert tree.minimum() == max(VALUES)
    tree.mirror()
    assert tree.inorder() == original


def test_main_session(monkeypatch, capsys):
    script = "1 5 y 3 n y 2 y 3 y 6 n\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Total number of nodes: 2" in out
    assert "Height of the tree: 2" in out
    assert "*INORDER*\n3\t5\t" in out