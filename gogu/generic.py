"""Small generic comparison helpers."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

CompFn = Callable[[T, T], bool]


def compare(a: T, b: T, comp: Callable[[T, T], bool]) -> int:
    """Return 1 if ``comp(a, b)``, -1 if ``comp(b, a)``, otherwise 0."""
    if comp(a, b):
        return 1
    if comp(b, a):
        return -1
    return 0


def equal(a: Any, b: Any) -> bool:
    """Return whether the two values are equal."""
    return a == b


def less(a: Any, b: Any) -> bool:
    """Return whether the first value is less than the second."""
    return a < b