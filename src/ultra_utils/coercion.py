# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""
Turn command-line strings into call arguments.

Two strategies are available:

``parse_argument(text)``
    Untyped heuristic: JSON first, then a finite number, otherwise the
    string itself.

``bind_arguments(func, args)``
    Typed coercion driven by the target function's signature. Each
    positional string is converted according to the parameter annotation::

        str, bytes, PathLike     raw string, untouched ("123" stays "123")
        int, float               explicit numeric conversion
        bool                     true/yes/on/1 and false/no/off/0
        list, dict, Sequence...  parsed as JSON
        anything else            the heuristic above

Conversion failures raise ``ArgumentError`` naming the parameter.
"""

from __future__ import annotations

import inspect
import json
import logging
import math
import os
import types
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

__all__ = ["ArgumentError", "parse_argument", "coerce", "bind_arguments"]

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Type Conversion Constants
# -----------------------------------------------------------------------------

_BOOL_TRUE = frozenset({"true", "yes", "on", "1"})
_BOOL_FALSE = frozenset({"false", "no", "off", "0"})
_RAW_TYPES = (str, bytes, os.PathLike)
_JSON_ORIGINS = (list, dict, tuple, set, frozenset, Sequence, Mapping, Iterable)


class ArgumentError(ValueError):
    """A command-line argument does not fit the target parameter."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_argument(text: str) -> Any:
    """
    Coerce a command-line string with the JSON / number / string heuristic.

    Examples:
        >>> parse_argument('[1, 2]')
        [1, 2]
        >>> parse_argument('+5')
        5
        >>> parse_argument('hello')
        'hello'
        >>> parse_argument('NaN')
        'NaN'
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        pass
    if "_" not in text:
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            pass
        else:
            if math.isfinite(number):
                return number
    return text


# -----------------------------------------------------------------------------
# Annotation helpers
# -----------------------------------------------------------------------------


def _unwrap_annotated(annotation: Any) -> Any:
    if get_origin(annotation) is Annotated:
        return get_args(annotation)[0]
    return annotation


def _union_members(type_hint: Any) -> tuple[Any, ...] | None:
    """Members of a union hint without ``None``; None if it is not a union."""
    origin = get_origin(type_hint)
    if origin is Union or isinstance(type_hint, types.UnionType):
        return tuple(a for a in get_args(type_hint) if a is not type(None))
    return None


def _is_raw(type_hint: Any) -> bool:
    return isinstance(type_hint, type) and issubclass(type_hint, _RAW_TYPES)


def _is_json(type_hint: Any) -> bool:
    target = get_origin(type_hint) or type_hint
    return isinstance(target, type) and issubclass(target, _JSON_ORIGINS) and not _is_raw(target)


def _resolve_hints(func: Callable[..., Any]) -> dict[str, Any]:
    try:
        return get_type_hints(func, include_extras=True)
    except (NameError, TypeError) as exc:
        logger.debug("Cannot resolve type hints of %r: %s", func, exc)
        return {}


# -----------------------------------------------------------------------------
# Coercion
# -----------------------------------------------------------------------------


def coerce(text: str, type_hint: Any, name: str = "argument") -> Any:
    """
    Convert ``text`` for a parameter annotated with ``type_hint``.

    Raises:
        ArgumentError: If ``text`` cannot be converted to the annotated type.
    """
    hint = _unwrap_annotated(type_hint)
    members = _union_members(hint)
    if members is not None:
        if len(members) == 1:
            hint = _unwrap_annotated(members[0])
        elif all(_is_raw(m) for m in members):
            return text
        else:
            return parse_argument(text)

    if hint is bool:
        lowered = text.strip().lower()
        if lowered in _BOOL_TRUE:
            return True
        if lowered in _BOOL_FALSE:
            return False
        raise ArgumentError(f"{name}: expected a boolean, got {text!r}")
    if hint is int or hint is float:
        # an int is acceptable wherever a float is
        converters = (int,) if hint is int else (int, float)
        for convert in converters:
            try:
                return convert(text)
            except ValueError:
                continue
        raise ArgumentError(f"{name}: expected {hint.__name__}, got {text!r}")
    if _is_raw(hint):
        return text
    if _is_json(hint):
        try:
            return json.loads(text)
        except ValueError:
            raise ArgumentError(f"{name}: expected JSON, got {text!r}") from None
    return parse_argument(text)


def bind_arguments(func: Callable[..., Any], args: Sequence[str]) -> list[Any]:
    """
    Convert positional command-line strings for a call to ``func``.

    Args:
        func: Target callable; its signature and type hints drive conversion.
        args: Raw command-line strings, in positional order.

    Returns:
        The converted positional arguments.

    Raises:
        ArgumentError: On a failed conversion, a missing required argument
            or too many arguments.

    Examples:
        >>> def pad(text: str, length: int, fill: str = " "): ...
        >>> bind_arguments(pad, ["42", "5"])
        ['42', 5]
    """
    hints = _resolve_hints(func)
    values: list[Any] = []
    index = 0

    for param in inspect.signature(func).parameters.values():
        hint = hints.get(param.name, Any)
        if param.kind is param.VAR_POSITIONAL:
            values.extend(coerce(arg, hint, param.name) for arg in args[index:])
            index = len(args)
            break
        if param.kind in (param.KEYWORD_ONLY, param.VAR_KEYWORD):
            break
        if index >= len(args):
            if param.default is param.empty:
                raise ArgumentError(f"Missing argument '{param.name}'")
            break
        values.append(coerce(args[index], hint, param.name))
        index += 1

    if index < len(args):
        raise ArgumentError(
            f"Too many arguments: expected at most {index}, got {len(args)}"
        )
    return values
