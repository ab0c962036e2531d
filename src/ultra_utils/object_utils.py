# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""
Mapping helpers: deep merge, deep clone, dot paths and flattening.

Flattening
----------

``flatten`` turns a nested structure into a single-level dict whose keys are
the dot-joined paths of the leaves. List positions become numeric segments::

    >>> flatten({'server': {'hosts': ['a', 'b'], 'port': 80}})
    {'server.hosts.0': 'a', 'server.hosts.1': 'b', 'server.port': 80}

Empty nested dicts and lists are kept as leaves so that ``unflatten`` can
rebuild them, which makes ``unflatten(flatten(obj)) == obj`` hold for any
JSON-like mapping.

``unflatten`` creates a list (instead of a dict) at every path segment whose
*next* segment is a non-negative integer.

Deep merge
----------

``deep_merge(a, b, ...)`` folds the mappings from left to right. For every
key: two lists are concatenated, two mappings are merged recursively, and
anything else is resolved in favour of the right-hand value. The inputs are
never modified.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Mapping
from datetime import date
from typing import Any

__all__ = [
    "deep_merge",
    "deep_clone",
    "get_path",
    "set_path",
    "has_path",
    "omit",
    "pick",
    "filtered_dict",
    "deep_keys",
    "deep_values",
    "flatten",
    "unflatten",
    "invert",
    "map_values",
    "map_keys",
    "is_equal",
    "size",
    "from_pairs",
    "to_pairs",
]

_MISSING = object()


def _as_key_list(keys: Any) -> list[Any]:
    if isinstance(keys, (list, tuple, set, frozenset)):
        return list(keys)
    return [keys]


def _is_index(segment: str) -> bool:
    return segment.isdigit()


def _list_slot(current: list[Any], segment: str, path: str) -> int:
    """Return the index named by ``segment``, padding ``current`` with None up to it."""
    if not _is_index(segment):
        raise ValueError(f"Cannot use key {segment!r} on a list in path {path!r}")
    index = int(segment)
    while len(current) <= index:
        current.append(None)
    return index


# -----------------------------------------------------------------------------
# Merge and clone
# -----------------------------------------------------------------------------


def deep_merge(*objects: Mapping[str, Any]) -> dict[str, Any]:
    """
    Recursively merge mappings, right-hand values winning on conflicts.

    Examples:
        >>> deep_merge({'a': 1, 'b': {'c': 2}}, {'b': {'d': 3}, 'e': 4})
        {'a': 1, 'b': {'c': 2, 'd': 3}, 'e': 4}
        >>> deep_merge({'tags': ['x']}, {'tags': ['y']})
        {'tags': ['x', 'y']}
    """
    result: dict[str, Any] = {}
    for obj in objects:
        if obj is None:
            continue
        for key, value in obj.items():
            current = result.get(key, _MISSING)
            if isinstance(current, list) and isinstance(value, list):
                result[key] = current + deep_clone(value)
            elif isinstance(current, Mapping) and isinstance(value, Mapping):
                result[key] = deep_merge(current, value)
            else:
                result[key] = deep_clone(value)
    return result


def deep_clone(value: Any) -> Any:
    """
    Recursive copy of dicts, lists, tuples, sets and dates.

    Any other object (functions, class instances, ...) is returned by
    reference and treated as immutable.
    """
    if isinstance(value, dict):
        return {k: deep_clone(v) for k, v in value.items()}
    if isinstance(value, list):
        return [deep_clone(v) for v in value]
    if isinstance(value, tuple):
        return tuple(deep_clone(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return type(value)(deep_clone(v) for v in value)
    if isinstance(value, date):
        return copy.copy(value)
    return value


# -----------------------------------------------------------------------------
# Dot paths
# -----------------------------------------------------------------------------


def _step(current: Any, segment: str) -> Any:
    """Resolve one path segment, or return _MISSING."""
    if isinstance(current, Mapping):
        return current.get(segment, _MISSING)
    if isinstance(current, (list, tuple)) and _is_index(segment):
        index = int(segment)
        return current[index] if index < len(current) else _MISSING
    return _MISSING


def get_path(obj: Any, path: str, default: Any = None) -> Any:
    """
    Read the value at a dot-separated ``path``.

    Examples:
        >>> get_path({'a': {'b': [10, 20]}}, 'a.b.1')
        20
        >>> get_path({'a': 1}, 'a.b', 'fallback')
        'fallback'
    """
    current = obj
    for segment in path.split("."):
        current = _step(current, segment)
        if current is _MISSING:
            return default
    return current


def set_path(obj: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """
    Write ``value`` at ``path``, creating intermediate dicts as needed.

    Unlike the other helpers, this mutates ``obj`` and returns it.

    Raises:
        ValueError: If a non-numeric segment meets an existing list.
    """
    segments = path.split(".")
    current: Any = obj
    for segment, following in zip(segments, segments[1:]):
        if isinstance(current, list):
            index = _list_slot(current, segment, path)
            if not isinstance(current[index], (dict, list)):
                current[index] = [] if _is_index(following) else {}
            current = current[index]
        else:
            if not isinstance(current.get(segment), (dict, list)):
                current[segment] = [] if _is_index(following) else {}
            current = current[segment]

    last = segments[-1]
    if isinstance(current, list):
        current[_list_slot(current, last, path)] = value
    else:
        current[last] = value
    return obj


def has_path(obj: Any, path: str) -> bool:
    current = obj
    for segment in path.split("."):
        current = _step(current, segment)
        if current is _MISSING:
            return False
    return True


# -----------------------------------------------------------------------------
# Selection
# -----------------------------------------------------------------------------


def filtered_dict(
    data: Mapping[str, Any] | None,
    filter_fn: Callable[[str, Any], bool] | None = None,
) -> dict[str, Any]:
    """
    Return a dict filtered through ``filter_fn``.

    Args:
        data: Mapping with the original values (can be None).
        filter_fn: Optional callable receiving ``(key, value)`` and returning
            True if the pair should be kept. When None, the mapping is copied.
    """
    if not data:
        return {}
    if filter_fn is None:
        return dict(data)
    return {k: v for k, v in data.items() if filter_fn(k, v)}


def omit(obj: Mapping[str, Any], keys: Any) -> dict[str, Any]:
    """Copy of ``obj`` without ``keys`` (a single key or a list of keys)."""
    excluded = set(_as_key_list(keys))
    return filtered_dict(obj, lambda key, _: key not in excluded)


def pick(obj: Mapping[str, Any], keys: Any) -> dict[str, Any]:
    """Copy of ``obj`` holding only ``keys``, in the order they were requested."""
    return {key: obj[key] for key in _as_key_list(keys) if key in obj}


def deep_keys(obj: Mapping[str, Any], prefix: str = "") -> list[str]:
    """Every dotted key, parents before their children."""
    result: list[str] = []
    for key, value in obj.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        result.append(full_key)
        if isinstance(value, Mapping):
            result.extend(deep_keys(value, full_key))
    return result


def deep_values(obj: Mapping[str, Any]) -> list[Any]:
    """Leaf values of nested mappings, depth-first."""
    result: list[Any] = []
    for value in obj.values():
        if isinstance(value, Mapping) and value:
            result.extend(deep_values(value))
        else:
            result.append(value)
    return result


# -----------------------------------------------------------------------------
# Flattening
# -----------------------------------------------------------------------------


def flatten(
    data: Mapping[str, Any],
    separator: str = ".",
    parent_key: str = "",
) -> dict[str, Any]:
    """
    Flatten nested mappings and lists using ``separator`` between keys.

    Args:
        data: Mapping to flatten (can be nested).
        separator: String to join nested keys (default: ".").
        parent_key: Prefix for keys (used in recursion).

    Returns:
        Flat dictionary with joined keys.

    Examples:
        >>> flatten({'a': {'b': {'c': 1}}})
        {'a.b.c': 1}
        >>> flatten({'a': [1, {'b': 2}]})
        {'a.0': 1, 'a.1.b': 2}
        >>> flatten({'a': {}, 'b': []})
        {'a': {}, 'b': []}
    """
    items: list[tuple[str, Any]] = []

    if isinstance(data, Mapping):
        children: Iterable[tuple[Any, Any]] = data.items()
    else:
        children = enumerate(data)

    for key, value in children:
        new_key = f"{parent_key}{separator}{key}" if parent_key else str(key)

        if isinstance(value, (Mapping, list)) and value:
            items.extend(flatten(value, separator, new_key).items())
        elif isinstance(value, Mapping):
            items.append((new_key, {}))
        elif isinstance(value, list):
            items.append((new_key, []))
        else:
            items.append((new_key, value))

    return dict(items)


def _container_for(segment: str) -> list[Any] | dict[str, Any]:
    return [] if _is_index(segment) else {}


def unflatten(data: Mapping[str, Any], separator: str = ".") -> dict[str, Any]:
    """
    Rebuild a nested structure from a flat mapping produced by :func:`flatten`.

    Examples:
        >>> unflatten({'a.b': 1, 'a.c.0': 'x', 'a.c.1': 'y'})
        {'a': {'b': 1, 'c': ['x', 'y']}}
    """
    result: dict[str, Any] = {}
    for flat_key, value in data.items():
        segments = str(flat_key).split(separator)
        current: Any = result
        for segment, following in zip(segments, segments[1:]):
            if isinstance(current, list):
                index = _list_slot(current, segment, str(flat_key))
                if not isinstance(current[index], (dict, list)):
                    current[index] = _container_for(following)
                current = current[index]
            else:
                if not isinstance(current.get(segment), (dict, list)):
                    current[segment] = _container_for(following)
                current = current[segment]

        last = segments[-1]
        if isinstance(current, list):
            current[_list_slot(current, last, str(flat_key))] = deep_clone(value)
        else:
            current[last] = deep_clone(value)
    return result


# -----------------------------------------------------------------------------
# Transforms and comparison
# -----------------------------------------------------------------------------


def invert(obj: Mapping[Any, Any]) -> dict[Any, Any]:
    """Swap keys and values; later keys win when values repeat."""
    return {value: key for key, value in obj.items()}


def map_values(
    obj: Mapping[str, Any], transformer: Callable[[Any, str], Any]
) -> dict[str, Any]:
    return {key: transformer(value, key) for key, value in obj.items()}


def map_keys(
    obj: Mapping[str, Any], transformer: Callable[[Any, str], Any]
) -> dict[Any, Any]:
    return {transformer(value, key): value for key, value in obj.items()}


def is_equal(first: Any, second: Any) -> bool:
    """Deep structural equality (lists vs tuples are considered different)."""
    if isinstance(first, Mapping) and isinstance(second, Mapping):
        if first.keys() != second.keys():
            return False
        return all(is_equal(first[k], second[k]) for k in first)
    if isinstance(first, (list, tuple)) and isinstance(second, (list, tuple)):
        if type(first) is not type(second) or len(first) != len(second):
            return False
        return all(is_equal(a, b) for a, b in zip(first, second))
    return first == second


def size(obj: Any) -> int:
    """Number of entries of a collection or characters of a string; 0 for None."""
    if obj is None:
        return 0
    return len(obj)


def from_pairs(pairs: Iterable[Iterable[Any]]) -> dict[Any, Any]:
    return {key: value for key, value in pairs}


def to_pairs(obj: Mapping[Any, Any]) -> list[list[Any]]:
    return [[key, value] for key, value in obj.items()]
