"""Filtering helpers for sequences and mappings."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Mapping, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def filter_items(items: Iterable[T], fn: Callable[[T], bool]) -> list[T]:
    """Return the elements for which ``fn`` is true."""
    return [item for item in items if fn(item)]


def reject(items: Iterable[T], fn: Callable[[T], bool]) -> list[T]:
    """Return the elements for which ``fn`` is false."""
    return [item for item in items if not fn(item)]


def filter_map(mapping: Mapping[K, V], fn: Callable[[V], bool]) -> dict[K, V]:
    """Return the entries of ``mapping`` whose value satisfies ``fn``."""
    return {key: value for key, value in mapping.items() if fn(value)}


def filter_map_collection(
    collection: Iterable[Mapping[K, V]], fn: Callable[[V], bool]
) -> list[Mapping[K, V]]:
    """Keep each mapping once for every one of its values that satisfies ``fn``."""
    return [item for item in collection for value in item.values() if fn(value)]


def filter_2d_map_collection(
    collection: Iterable[Mapping[K, Mapping[K, V]]],
    fn: Callable[[Mapping[K, V]], bool],
) -> list[Mapping[K, Mapping[K, V]]]:
    """Keep each nested mapping once for every inner mapping satisfying ``fn``."""
    return [item for item in collection for value in item.values() if fn(value)]