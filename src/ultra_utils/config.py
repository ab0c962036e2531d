# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""
Command-line settings loaded from multiple sources.

Sources are merged in priority order (lowest first)::

    DEFAULTS < config file < ULTRA_UTILS_* environment < explicit overrides

Nested file sections are flattened with ``_``, so ``[output] indent = 4`` in
a TOML or INI file becomes ``output_indent``. Values coming from INI files
and environment variables are strings; keys listed in ``TYPES`` are
converted explicitly, and a failed conversion keeps the original value.

Supported file formats
----------------------

- ``.ini`` - ConfigParser (values are strings)
- ``.json`` - JSON
- ``.toml`` - tomllib (Python 3.11+) or the tomli package
- ``.yaml``, ``.yml`` - requires the ``pyyaml`` package (``yaml`` extra)

Example::

    settings = load_settings("ultra-utils.toml", overrides={"output_indent": 4})
    settings.output_indent   # 4
    settings.missing_key     # None
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Iterator, Mapping
from configparser import ConfigParser
from pathlib import Path
from types import SimpleNamespace
from typing import Any

from .object_utils import flatten

__all__ = [
    "ENV_PREFIX",
    "DEFAULTS",
    "TYPES",
    "Settings",
    "load_ini",
    "load_json",
    "load_toml",
    "load_yaml",
    "load_file",
    "load_env",
    "load_settings",
]

ENV_PREFIX = "ULTRA_UTILS"

DEFAULTS: dict[str, Any] = {
    "output_indent": 2,
    "output_color": True,
    "log_level": "WARNING",
}

TYPES: dict[str, type] = {
    "output_indent": int,
    "output_color": bool,
    "log_level": str,
}

_BOOL_TRUE = frozenset({"true", "yes", "on", "1"})


# -----------------------------------------------------------------------------
# File Loaders
# -----------------------------------------------------------------------------


def _existing(path: str | Path) -> Path:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return path


def load_ini(path: str | Path) -> dict[str, Any]:
    """
    Load an .ini file as ``{section: {option: value}}``; values are strings.

    Raises:
        FileNotFoundError: If file does not exist.
    """
    parser = ConfigParser()
    parser.read(_existing(path))
    return {section: dict(parser.items(section)) for section in parser.sections()}


def load_json(path: str | Path) -> dict[str, Any]:
    with _existing(path).open(encoding="utf-8") as f:
        return json.load(f)


def load_toml(path: str | Path) -> dict[str, Any]:
    """
    Load a .toml file.

    Uses tomllib on Python 3.11+ and the tomli package before that.
    """
    path = _existing(path)
    if sys.version_info >= (3, 11):
        import tomllib
    else:  # pragma: no cover
        import tomli as tomllib

    with path.open("rb") as f:
        return tomllib.load(f)


def load_yaml(path: str | Path) -> dict[str, Any]:
    """
    Load a .yaml/.yml file.

    Raises:
        FileNotFoundError: If file does not exist.
        ImportError: If pyyaml is not installed.
    """
    path = _existing(path)
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError:  # pragma: no cover
        raise ImportError(
            "YAML support requires 'pyyaml' package. "
            "Install with: pip install ultra-utils[yaml]"
        ) from None

    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


_LOADERS = {
    ".ini": load_ini,
    ".json": load_json,
    ".toml": load_toml,
    ".yaml": load_yaml,
    ".yml": load_yaml,
}


def load_file(path: str | Path) -> dict[str, Any]:
    """
    Load a configuration file, picking the format from its extension.

    Raises:
        FileNotFoundError: If file does not exist.
        ValueError: If the extension is not supported.
    """
    suffix = Path(path).suffix.lower()
    loader = _LOADERS.get(suffix)
    if loader is None:
        raise ValueError(
            f"Unsupported config file format: {suffix or path}. "
            f"Supported: {', '.join(_LOADERS)}"
        )
    return loader(path)


def load_env(prefix: str = ENV_PREFIX) -> dict[str, str]:
    """
    Environment variables starting with ``prefix_``, prefix stripped and
    key lowercased.

    Examples:
        With ``ULTRA_UTILS_OUTPUT_INDENT=4`` in the environment:

        >>> load_env("ULTRA_UTILS")
        {'output_indent': '4'}
    """
    head = f"{prefix}_"
    return {
        key[len(head):].lower(): value
        for key, value in os.environ.items()
        if key.startswith(head)
    }


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------


def _convert_value(value: Any, type_cls: type) -> Any:
    if value is None or isinstance(value, type_cls):
        return value
    try:
        if type_cls is bool and isinstance(value, str):
            return value.strip().lower() in _BOOL_TRUE
        return type_cls(value)
    except (ValueError, TypeError):
        return value


class Settings(SimpleNamespace):
    """
    Attribute namespace over the merged settings.

    Missing keys read as ``None`` instead of raising ``AttributeError``.
    """

    def __init__(self, data: Mapping[str, Any] | None = None):
        data = dict(data or {})
        object.__setattr__(self, "_data", data)
        super().__init__(**data)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def __setattr__(self, key: str, value: Any):
        self._data[key] = value
        super().__setattr__(key, value)

    def __getattr__(self, key: str) -> Any:
        if key.startswith("_"):
            raise AttributeError(key)
        return self._data.get(key)

    def __getitem__(self, key: str) -> Any:
        return self._data.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)


def load_settings(
    config_file: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    *,
    env_prefix: str = ENV_PREFIX,
    types: Mapping[str, type] | None = None,
) -> Settings:
    """
    Merge defaults, a config file, the environment and explicit overrides.

    Args:
        config_file: Optional config file (.ini, .json, .toml, .yaml, .yml).
        overrides: Highest-priority values; ``None`` entries are ignored so
            unset command-line options do not mask lower sources.
        env_prefix: Environment variable prefix, without the trailing ``_``.
        types: Conversion map, defaults to ``TYPES``.

    Raises:
        FileNotFoundError: If ``config_file`` does not exist.
        ValueError: If ``config_file`` has an unsupported extension.
    """
    merged: dict[str, Any] = dict(DEFAULTS)
    if config_file is not None:
        merged.update(flatten(load_file(config_file), separator="_"))
    merged.update(load_env(env_prefix))
    merged.update({k: v for k, v in (overrides or {}).items() if v is not None})

    for key, type_cls in (TYPES if types is None else types).items():
        if key in merged:
            merged[key] = _convert_value(merged[key], type_cls)
    return Settings(merged)
