from gogu.generic import compare, equal, less


def test_compare_less_comparator():
    assert compare(1, 2, lambda a, b: a < b) == 1


def test_compare_greater_comparator():
    assert compare("a", "b", lambda a, b: a > b) == -1


def test_compare_equal_values():
    assert compare(3, 3, lambda a, b: a < b) == 0


def test_equal():
    assert equal(1, 1) is True
    assert equal("a", "b") is False
    assert equal("a", "A") is False


def test_less():
    assert less(1, 2) is True
    assert less("b", "a") is False