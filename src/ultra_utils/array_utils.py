# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""List helpers: dedup, chunking, set algebra, grouping and aggregates.

All helpers return new lists and leave their input untouched. Elements do
not need to be hashable: dedup and set algebra fall back to equality checks
for unhashable values such as dicts and lists.
"""

from __future__ import annotations

import random
import statistics
from collections.abc import Callable, Hashable, Iterable, Sequence
from itertools import zip_longest
from typing import Any

__all__ = [
    "unique",
    "chunk",
    "shuffle",
    "flatten_list",
    "flatten_deep",
    "intersection",
    "difference",
    "union",
    "compact",
    "take",
    "take_last",
    "drop",
    "drop_last",
    "zip_lists",
    "transpose",
    "group_by",
    "count_by",
    "partition",
    "sort_by",
    "find_index",
    "find_last_index",
    "sample",
    "sample_size",
    "fill",
    "range_list",
    "max_value",
    "min_value",
    "sum_values",
    "mean",
    "median",
]

KeySpec = Callable[[Any], Any] | str


def _hash_key(item: Hashable) -> tuple[bool, Hashable]:
    return isinstance(item, bool), item


class _SeenSet:
    """
    Membership set that also accepts unhashable values.

    Booleans are kept apart from the numbers they compare equal to, so
    ``True`` and ``1`` are distinct elements.
    """

    def __init__(self, items: Iterable[Any] = ()):
        self._hashed: set[Any] = set()
        self._unhashed: list[Any] = []
        for item in items:
            self.add(item)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Hashable):
            try:
                return _hash_key(item) in self._hashed
            except TypeError:
                pass
        return item in self._unhashed

    def add(self, item: Any) -> None:
        if isinstance(item, Hashable):
            try:
                self._hashed.add(_hash_key(item))
                return
            except TypeError:
                pass
        self._unhashed.append(item)


def _key_fn(key: KeySpec) -> Callable[[Any], Any]:
    if callable(key):
        return key
    return lambda item: item.get(key) if isinstance(item, dict) else getattr(item, key, None)


# -----------------------------------------------------------------------------
# Shape
# -----------------------------------------------------------------------------


def unique(items: Iterable[Any]) -> list[Any]:
    """
    Each distinct element once, in first-seen order.

    Examples:
        >>> unique([1, 2, 2, 3, 1])
        [1, 2, 3]
        >>> unique([{"a": 1}, {"a": 1}])
        [{'a': 1}]
    """
    seen = _SeenSet()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def chunk(items: Sequence[Any], size: int) -> list[list[Any]]:
    """
    Split ``items`` into consecutive lists of ``size`` elements.

    The last chunk holds the remainder.

    Raises:
        ValueError: If ``size`` is smaller than 1.

    Examples:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size}")
    items = list(items)
    return [items[i : i + size] for i in range(0, len(items), size)]


def shuffle(items: Iterable[Any]) -> list[Any]:
    """Shuffled copy of ``items``."""
    result = list(items)
    random.shuffle(result)
    return result


def flatten_list(items: Iterable[Any]) -> list[Any]:
    """Flatten one level of nesting."""
    result: list[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            result.extend(item)
        else:
            result.append(item)
    return result


def flatten_deep(items: Iterable[Any]) -> list[Any]:
    """Flatten every level of nesting."""
    result: list[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            result.extend(flatten_deep(item))
        else:
            result.append(item)
    return result


# -----------------------------------------------------------------------------
# Set algebra (order preserving)
# -----------------------------------------------------------------------------


def intersection(first: Iterable[Any], *others: Iterable[Any]) -> list[Any]:
    """Unique elements of ``first`` present in every other list."""
    other_sets = [_SeenSet(other) for other in others]
    return [item for item in unique(first) if all(item in s for s in other_sets)]


def difference(first: Iterable[Any], *others: Iterable[Any]) -> list[Any]:
    """Elements of ``first`` missing from all other lists (duplicates kept)."""
    excluded = _SeenSet(item for other in others for item in other)
    return [item for item in first if item not in excluded]


def union(*lists: Iterable[Any]) -> list[Any]:
    return unique(item for items in lists for item in items)


def compact(items: Iterable[Any]) -> list[Any]:
    """Drop falsy values (``None``, ``0``, ``""``, ``False``, empty containers)."""
    return [item for item in items if item]


def take(items: Sequence[Any], count: int = 1) -> list[Any]:
    return list(items[: max(count, 0)])


def take_last(items: Sequence[Any], count: int = 1) -> list[Any]:
    if count <= 0:
        return []
    return list(items[-count:])


def drop(items: Sequence[Any], count: int = 1) -> list[Any]:
    return list(items[max(count, 0) :])


def drop_last(items: Sequence[Any], count: int = 1) -> list[Any]:
    if count <= 0:
        return list(items)
    return list(items[:-count])


def zip_lists(*lists: Iterable[Any]) -> list[list[Any]]:
    """Group elements by position, padding shorter lists with None."""
    return [list(group) for group in zip_longest(*lists)]


def transpose(matrix: Iterable[Iterable[Any]]) -> list[list[Any]]:
    """Swap rows and columns; ragged rows are padded with None."""
    return zip_lists(*matrix)


# -----------------------------------------------------------------------------
# Grouping and searching
# -----------------------------------------------------------------------------


def group_by(items: Iterable[Any], key: KeySpec) -> dict[Any, list[Any]]:
    """
    Group items by the result of ``key``.

    ``key`` is a callable or the name of a dict key / attribute.

    Examples:
        >>> group_by([1.2, 1.5, 2.1], int)
        {1: [1.2, 1.5], 2: [2.1]}
    """
    fn = _key_fn(key)
    groups: dict[Any, list[Any]] = {}
    for item in items:
        groups.setdefault(fn(item), []).append(item)
    return groups


def count_by(items: Iterable[Any], key: KeySpec) -> dict[Any, int]:
    return {k: len(v) for k, v in group_by(items, key).items()}


def partition(
    items: Iterable[Any], predicate: Callable[[Any], bool]
) -> tuple[list[Any], list[Any]]:
    """Split items into (matching, not matching)."""
    matched: list[Any] = []
    rejected: list[Any] = []
    for item in items:
        (matched if predicate(item) else rejected).append(item)
    return matched, rejected


def sort_by(items: Iterable[Any], key: KeySpec, reverse: bool = False) -> list[Any]:
    return sorted(items, key=_key_fn(key), reverse=reverse)


def find_index(items: Sequence[Any], predicate: Callable[[Any], bool]) -> int:
    for index, item in enumerate(items):
        if predicate(item):
            return index
    return -1


def find_last_index(items: Sequence[Any], predicate: Callable[[Any], bool]) -> int:
    for index in range(len(items) - 1, -1, -1):
        if predicate(items[index]):
            return index
    return -1


def sample(items: Sequence[Any]) -> Any:
    """Random element, or None for an empty sequence."""
    if not items:
        return None
    return random.choice(items)


def sample_size(items: Sequence[Any], count: int) -> list[Any]:
    """Up to ``count`` distinct positions picked at random."""
    return random.sample(list(items), min(max(count, 0), len(items)))


# -----------------------------------------------------------------------------
# Builders and aggregates
# -----------------------------------------------------------------------------


def fill(length: int, value: Any = None) -> list[Any]:
    return [value] * max(length, 0)


def range_list(start: int, stop: int | None = None, step: int = 1) -> list[int]:
    """``range_list(3) == [0, 1, 2]``, ``range_list(1, 7, 2) == [1, 3, 5]``."""
    if step == 0:
        raise ValueError("step cannot be zero")
    if stop is None:
        start, stop = 0, start
    return list(range(start, stop, step))


def max_value(items: Iterable[Any]) -> Any:
    return max(items, default=None)


def min_value(items: Iterable[Any]) -> Any:
    return min(items, default=None)


def sum_values(items: Iterable[Any]) -> Any:
    return sum(items)


def mean(items: Iterable[float]) -> float | None:
    values = list(items)
    if not values:
        return None
    return statistics.fmean(values)


def median(items: Iterable[float]) -> float | None:
    values = list(items)
    if not values:
        return None
    return statistics.median(values)
