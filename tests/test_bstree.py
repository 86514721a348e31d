import random
import threading

import pytest

from gogu.bstree import BsTree, Item, NodeNotFoundError


def _ascending():
    return BsTree(lambda a, b: a < b)


def test_random_upsert_get_traverse_delete():
    rng = random.Random(42)
    bst = _ascending()
    expected = {}
    for _ in range(100):
        key = rng.randrange(100)
        val = rng.randrange(1_000_000)
        bst.upsert(key, val)
        expected[key] = val

    assert bst.size() == len(expected)
    for key, val in expected.items():
        assert bst.get(key).val == val

    seen = []
    bst.traverse(lambda item: seen.append((item.key, item.val)))
    assert seen == sorted(expected.items())

    for key in expected:
        bst.delete(key)
    assert bst.size() == 0


def test_concurrent_upserts():
    bst = _ascending()
    expected = {}
    lock = threading.Lock()

    def worker(i):
        bst.upsert(i, i * 10)
        with lock:
            expected[i] = i * 10

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert bst.size() == 10
    assert [(item.key, item.val) for item in bst] == sorted(expected.items())
    for key in expected:
        bst.delete(key)
    assert bst.size() == 0


def test_example_order():
    bst = _ascending()
    bst.upsert(10, "foo")
    bst.upsert(-1, "baz")
    bst.upsert(2, "bar")
    bst.upsert(-4, "qux")
    assert bst.size() == 4
    tree = []
    bst.traverse(lambda item: tree.append(bst.get(item.key).val))
    assert tree == ["qux", "baz", "bar", "foo"]


def test_descending_comparator():
    bst = BsTree(lambda a, b: a > b)
    for key in [5, 1, 9, 3]:
        bst.upsert(key, str(key))
    assert [item.key for item in bst] == [9, 5, 3, 1]


def test_upsert_updates_existing():
    bst = _ascending()
    bst.upsert(1, "a")
    bst.upsert(1, "b")
    assert bst.size() == 1
    assert bst.get(1) == Item(1, "b")


def test_get_missing_raises():
    bst = _ascending()
    with pytest.raises(NodeNotFoundError):
        bst.get(3)
    bst.upsert(1, "a")
    with pytest.raises(NodeNotFoundError):
        bst.get(3)


def test_delete_missing_raises():
    bst = _ascending()
    bst.upsert(1, "a")
    with pytest.raises(NodeNotFoundError):
        bst.delete(2)
    assert bst.size() == 1


def test_delete_node_with_two_children():
    bst = _ascending()
    for key in [50, 30, 70, 20, 40, 60, 80]:
        bst.upsert(key, key)
    bst.delete(50)
    assert [item.key for item in bst] == [20, 30, 40, 60, 70, 80]
    with pytest.raises(NodeNotFoundError):
        bst.get(50)
    assert bst.get(60).val == 60
    assert bst.size() == 6