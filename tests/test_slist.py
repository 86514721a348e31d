import pytest

from gogu.slist import ListError, SList


def test_singly_linked_list():
    lst = SList(1)
    assert lst.head.value == 1

    lst.pop()
    with pytest.raises(ListError):
        lst.delete(lst.head)

    lst.append(2)
    lst.delete(lst.head)
    assert lst.head.value == 2

    lst.unshift(1)
    assert lst.head.value == 1

    lst.append(3)
    last = lst.find(3)
    lst.insert_after(last, 4)
    lst.append(5)

    lst.append(6)
    last = lst.find(6)
    lst.append(8)
    lst.insert_after(last, 7)
    lst.append(9)
    last = lst.find(9)

    lst.delete(last)
    assert list(lst) == [1, 2, 3, 4, 5, 6, 7, 8]

    lst.pop()
    assert list(lst) == [1, 2, 3, 4, 5, 6, 7]

    lst.shift()
    assert list(lst) == [2, 3, 4, 5, 6, 7]

    with pytest.raises(ListError):
        lst.replace(20, 10)
    assert lst.find(20) is None

    lst.replace(7, 8)
    assert lst.find(8).value == 8

    lst.unshift(1)
    lst.replace(8, 7)
    assert list(lst) == [1, 2, 3, 4, 5, 6, 7]

    assert lst.find(7).value == 7
    assert lst.find(22) is None


def test_example_sequence():
    lst = SList(1)
    for v in [2, 3, 4, 5, 6, 7, 8]:
        lst.append(v)
    collected = []
    lst.each(collected.append)
    assert collected == [1, 2, 3, 4, 5, 6, 7, 8]

    lst.pop()
    assert list(lst) == [1, 2, 3, 4, 5, 6, 7]

    lst.shift()
    assert list(lst) == [2, 3, 4, 5, 6, 7]

    with pytest.raises(ListError, match="requested node does not exists"):
        lst.replace(20, 10)
    assert lst.find(20) is None

    lst.replace(7, 8)
    assert lst.find(8).value == 8


def test_single_node_shift_and_pop_keep_node():
    lst = SList("a")
    lst.shift()
    lst.pop()
    assert list(lst) == ["a"]
    assert len(lst) == 1


def test_insert_after_missing_node_raises():
    lst = SList(1)
    with pytest.raises(ListError):
        lst.insert_after(None, 2)
    other = SList(5)
    with pytest.raises(ListError):
        lst.insert_after(other.head, 2)
    assert list(lst) == [1]


def test_delete_foreign_node_raises():
    lst = SList(1)
    lst.append(2)
    other = SList(3)
    other.append(4)
    with pytest.raises(ListError):
        lst.delete(other.find(4))
    assert list(lst) == [1, 2]


def test_delete_middle_node():
    lst = SList(1)
    for v in (2, 3, 4):
        lst.append(v)
    lst.delete(lst.find(3))
    assert list(lst) == [1, 2, 4]
    assert len(lst) == 3