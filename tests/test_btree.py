import random

import pytest

from gogu.btree import BTree


def test_btree_put_traverse_remove():
    tree = BTree()
    assert tree.is_empty()

    n = 100
    expected = {}
    for key in range(n):
        value = random.randint(0, 1_000_000)
        tree.put(key, value)
        expected[key] = value

    assert tree.size() == n

    seen = []

    def visit(key, value):
        assert tree.get(key) == value
        assert expected[key] == value
        seen.append(key)
        tree.remove(key)

    tree.traverse(visit)

    assert seen == list(range(n))
    assert tree.size() == 0
    assert tree.is_empty()


def test_btree_example_order():
    tree = BTree()
    assert tree.is_empty() is True

    tree.put(10, "foo")
    tree.put(-1, "baz")
    tree.put(2, "bar")
    tree.put(-4, "qux")

    assert tree.size() == 4
    collected = []
    tree.traverse(lambda key, value: collected.append(tree.get(key)))
    assert collected == ["qux", "baz", "bar", "foo"]


def test_btree_iteration_is_sorted():
    tree = BTree()
    keys = random.sample(range(1000), 200)
    for key in keys:
        tree.put(key, str(key))
    assert [key for key, _ in tree] == sorted(keys)
    assert all(value == str(key) for key, value in tree)


def test_btree_height_grows_on_split():
    tree = BTree()
    for key in range(3):
        tree.put(key, key)
    assert tree.height() == 0
    tree.put(3, 3)
    assert tree.height() == 1


def test_btree_get_missing_raises():
    tree = BTree()
    tree.put(1, "a")
    with pytest.raises(KeyError):
        tree.get(2)


def test_btree_overwrite_keeps_size():
    tree = BTree()
    tree.put(1, "a")
    tree.put(1, "b")
    assert tree.get(1) == "b"
    assert tree.size() == 1


def test_btree_remove_then_reinsert():
    tree = BTree()
    for key in range(10):
        tree.put(key, key * 2)
    tree.remove(5)
    assert tree.size() == 9
    assert 5 not in tree
    with pytest.raises(KeyError):
        tree.get(5)
    tree.remove(5)
    assert tree.size() == 9
    tree.put(5, 50)
    assert tree.get(5) == 50
    assert tree.size() == 10
    assert [key for key, _ in tree] == list(range(10))


def test_btree_remove_missing_is_ignored():
    tree = BTree()
    tree.put(1, "a")
    tree.remove(42)
    assert tree.size() == 1
    assert list(tree) == [(1, "a")]