import math

from gogu.filters import (
    filter_2d_map_collection,
    filter_items,
    filter_map,
    filter_map_collection,
    reject,
)


def test_filter_items():
    items = [1, 2, 3, 4, 5, 10, 20, 30, 40, 50]
    assert filter_items(items, lambda v: v >= 10) == [10, 20, 30, 40, 50]
    assert filter_items([12.2, 22.1, 10.01, 1, 20, 50], lambda v: v == 1.0) == [1]
    assert filter_items([2.0, 4.0, 6.0], lambda v: math.sqrt(v) >= 2) == [4.0, 6.0]
    assert filter_items(items, lambda v: v % 2 == 0) == [2, 4, 10, 20, 30, 40, 50]


def test_reject():
    items = [1, 2, 3, 4, 5, 10, 20, 30, 40, 50]
    assert reject(items, lambda v: v < 10) == [10, 20, 30, 40, 50]
    assert reject([1, 2, 3, 4, 5, 6, 10, 20, 30, 40, 50], lambda v: v >= 10) == [
        1, 2, 3, 4, 5, 6,
    ]


def test_filter_map():
    items = {1: "John", 2: "Doe", 3: "Fred"}
    assert filter_map(items, lambda v: v == "John") == {1: "John"}
    assert len(filter_map(items, lambda v: v == "Bernie")) == 0


def test_filter_map_collection():
    data = [{"bernie": 22}, {"robert": 30}]
    assert filter_map_collection(data, lambda v: v > 22) == [{"robert": 30}]
    assert len(filter_map_collection(data, lambda v: v == 30)) == 1


def test_filter_2d_map_collection():
    data = [
        {"bernie": {"age": 30, "ranking": 1}},
        {"robert": {"age": 20, "ranking": 5}},
    ]
    expected = [{"bernie": {"age": 30, "ranking": 1}}]
    result = filter_2d_map_collection(
        data, lambda v: v["age"] > 20 and v["ranking"] < 5
    )
    assert result == expected
    assert len(result) == 1
    other = filter_2d_map_collection(
        data, lambda v: v["age"] > 20 and v["ranking"] > 1
    )
    assert other == []