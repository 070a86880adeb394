import io
import math

import pytest

from dsakit.avl import AVLDictionary, main


def _filled(keys):
    tree = AVLDictionary()
    for key in keys:
        tree.insert(key, key.upper())
    return tree


def test_empty_tree_height_is_minus_one():
    tree = AVLDictionary()
    assert tree.height() == -1
    assert len(tree) == 0


def test_three_ascending_keys_rotate_to_middle_root():
    tree = _filled(["a", "b", "c"])
    assert [k for k, _ in tree.preorder()] == ["b", "a", "c"]
    assert tree.height() == 1


@pytest.mark.parametrize("order", ["ascending", "descending", "zigzag"])
def test_inorder_sorted_and_height_bounded(order):
    keys = [f"k{i:03d}" for i in range(200)]
    if order == "descending":
        keys.reverse()
    elif order == "zigzag":
        keys = keys[::2] + keys[1::2][::-1]
    tree = _filled(keys)
    assert [k for k, _ in tree.inorder()] == sorted(keys)
    assert len(tree) == len(keys)
    assert tree.height() <= 1.4405 * math.log2(len(keys) + 2)


def test_traversals_share_root_and_contents():
    keys = ["m", "d", "x", "a", "f", "q", "z", "e"]
    tree = _filled(keys)
    pre, post = tree.preorder(), tree.postorder()
    assert pre[0] == post[-1]
    assert sorted(pre) == sorted(post) == tree.inorder()


def test_duplicate_is_skipped():
    tree = AVLDictionary()
    assert tree.insert("apple", "fruit") is True
    assert tree.insert("apple", "other") is False
    assert len(tree) == 1
    assert tree.search("apple").meaning == "fruit"


def test_search_comparisons_within_height():
    keys = [f"w{i:02d}" for i in range(31)]
    tree = _filled(keys)
    for key in keys:
        result = tree.search(key)
        assert result.meaning == key.upper()
        assert 1 <= result.comparisons <= tree.height() + 1
    root_key = tree.preorder()[0][0]
    assert tree.search(root_key).comparisons == 1


def test_missing_keyword_raises():
    tree = _filled(["a", "b"])
    with pytest.raises(KeyError):
        tree.search("zzz")
    assert "zzz" not in tree
    assert "a" in tree


def test_main_runs_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("cat animal 1 dog pet 0 2 4 dog 0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "cat : animal\ndog : pet\n" in out
    assert "Found dog with meaning: pet" in out