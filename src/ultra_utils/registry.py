# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""
Function registry used by the command line.

Every public function of the category modules is registered under a
camelCase command name (``levenshtein_distance`` -> ``levenshteinDistance``).
A few functions keep the short historical names listed in ``_ALIASES``
(``format_bytes`` is ``bytes``, ``get_path`` is ``get``, ...).

Lookups accept both the command name and the Python name::

    >>> find_function("slugify") is find_function("slugify")
    True
    >>> find_function("levenshtein_distance") is find_function("levenshteinDistance")
    True
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any

from . import (
    array_utils,
    color_utils,
    crypto_utils,
    date_utils,
    fs_utils,
    misc_utils,
    number_utils,
    object_utils,
    string_utils,
    url_utils,
    validate,
)

__all__ = [
    "Category",
    "CATEGORIES",
    "command_name",
    "find_function",
    "find_category",
    "suggest",
    "all_function_names",
]

# Python name -> command name, where the command name is not plain camelCase.
_ALIASES = {
    "sub_days": "subtractDays",
    "sub_months": "subtractMonths",
    "sub_years": "subtractYears",
    "zip_lists": "zip",
    "range_list": "range",
    "max_value": "max",
    "min_value": "min",
    "sum_values": "sum",
    "deep_clone": "clone",
    "get_path": "get",
    "set_path": "set",
    "has_path": "has",
    "deep_keys": "keys",
    "deep_values": "values",
    "format_bytes": "bytes",
    "round_to": "round",
    "ceil_to": "ceil",
    "floor_to": "floor",
    "ordinal": "toOrdinal",
    "hash_data": "hash",
    "hmac_digest": "hmac",
}


@dataclass(frozen=True)
class Category:
    key: str
    title: str
    functions: dict[str, Callable[..., Any]] = field(default_factory=dict)

    def __contains__(self, name: str) -> bool:
        return name in self.functions

    def __len__(self) -> int:
        return len(self.functions)


def command_name(python_name: str) -> str:
    """
    Command-line name of a Python function name.

    Examples:
        >>> command_name("to_title_case")
        'toTitleCase'
        >>> command_name("format_bytes")
        'bytes'
    """
    if python_name in _ALIASES:
        return _ALIASES[python_name]
    head, *rest = python_name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _category(key: str, title: str, module: ModuleType) -> Category:
    functions: dict[str, Callable[..., Any]] = {}
    for name in module.__all__:
        obj = getattr(module, name)
        if inspect.isfunction(obj):
            functions[command_name(name)] = obj
    return Category(key, title, functions)


CATEGORIES: dict[str, Category] = {
    category.key: category
    for category in (
        _category("string", "String Utilities", string_utils),
        _category("date", "Date & Time Utilities", date_utils),
        _category("array", "Array Utilities", array_utils),
        _category("object", "Object Utilities", object_utils),
        _category("number", "Number & Math Utilities", number_utils),
        _category("crypto", "Crypto & Hash Utilities", crypto_utils),
        _category("color", "Color Utilities", color_utils),
        _category("url", "URL & Web Utilities", url_utils),
        _category("fs", "File System Utilities", fs_utils),
        _category("validate", "Validation Utilities", validate),
        _category("misc", "Miscellaneous Utilities", misc_utils),
    )
}

_BY_COMMAND: dict[str, Callable[..., Any]] = {}
_BY_PYTHON_NAME: dict[str, Callable[..., Any]] = {}
for _cat in CATEGORIES.values():
    for _name, _func in _cat.functions.items():
        _BY_COMMAND.setdefault(_name, _func)
        _BY_PYTHON_NAME.setdefault(_func.__name__, _func)
del _cat, _name, _func


def find_function(name: str) -> Callable[..., Any] | None:
    """Callable registered as ``name`` (command or Python name), or None."""
    return _BY_COMMAND.get(name) or _BY_PYTHON_NAME.get(name)


def find_category(name: str) -> Category | None:
    """Category holding the function ``name``, or None if it is unknown."""
    func = find_function(name)
    if func is None:
        return None
    for category in CATEGORIES.values():
        if func in category.functions.values():
            return category
    return None


def all_function_names() -> list[str]:
    """Every command name, in category order."""
    return list(_BY_COMMAND)


def suggest(name: str, limit: int = 5) -> list[str]:
    """
    Command names similar to ``name``: either one contains the other,
    ignoring case.

    Examples:
        >>> suggest("slug")
        ['slugify']
    """
    needle = name.lower()
    matches = [
        candidate
        for candidate in _BY_COMMAND
        if needle in candidate.lower() or candidate.lower() in needle
    ]
    return matches[:limit]
