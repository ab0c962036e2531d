# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""
Filesystem helpers.

These are thin wrappers that never raise for I/O problems: readers return
None, writers return False and listings return an empty list. The underlying
exception is logged at DEBUG level on the ``ultra_utils.fs_utils`` logger.
Pure path helpers (``get_extension``, ``join_path``, ...) never touch the
disk.
"""

from __future__ import annotations

import json
import logging
import os
import re
import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

__all__ = [
    "FileStats",
    "exists",
    "read_file",
    "write_file",
    "read_json",
    "write_json",
    "get_stats",
    "get_file_size",
    "list_dir",
    "create_dir",
    "delete_file",
    "copy_file",
    "get_extension",
    "get_basename",
    "get_dirname",
    "resolve_path",
    "join_path",
    "find_files",
]

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike


@dataclass(frozen=True)
class FileStats:
    size: int
    is_file: bool
    is_directory: bool
    created: datetime
    modified: datetime
    accessed: datetime


def exists(path: PathLike) -> bool:
    try:
        return Path(path).exists()
    except (OSError, ValueError) as exc:
        logger.debug("exists(%r) failed: %s", path, exc)
        return False


def read_file(path: PathLike, encoding: str = "utf-8") -> str | None:
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None


def write_file(path: PathLike, content: str, encoding: str = "utf-8") -> bool:
    try:
        Path(path).write_text(content, encoding=encoding)
    except (OSError, UnicodeEncodeError, LookupError) as exc:
        logger.debug("Cannot write %s: %s", path, exc)
        return False
    return True


def read_json(path: PathLike) -> Any:
    """Parsed JSON content of ``path``, or None if unreadable or invalid."""
    try:
        with Path(path).open(encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("Cannot read JSON from %s: %s", path, exc)
        return None


def write_json(path: PathLike, data: Any, indent: int | None = 2) -> bool:
    """Serialize ``data`` to ``path``; False if it cannot be serialized or written."""
    try:
        content = json.dumps(data, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        logger.debug("Cannot serialize data for %s: %s", path, exc)
        return False
    return write_file(path, content)


def get_stats(path: PathLike) -> FileStats | None:
    """
    Size, kind and timestamps of ``path``.

    ``created`` is the birth time where the platform records one, and the
    inode change time otherwise.
    """
    try:
        st = Path(path).stat()
    except (OSError, ValueError) as exc:
        logger.debug("Cannot stat %s: %s", path, exc)
        return None
    created = getattr(st, "st_birthtime", st.st_ctime)
    p = Path(path)
    return FileStats(
        size=st.st_size,
        is_file=p.is_file(),
        is_directory=p.is_dir(),
        created=datetime.fromtimestamp(created),
        modified=datetime.fromtimestamp(st.st_mtime),
        accessed=datetime.fromtimestamp(st.st_atime),
    )


def get_file_size(path: PathLike) -> int | None:
    try:
        return Path(path).stat().st_size
    except (OSError, ValueError) as exc:
        logger.debug("Cannot stat %s: %s", path, exc)
        return None


def list_dir(path: PathLike, recursive: bool = False) -> list[str]:
    """
    Names of the entries in ``path``.

    With ``recursive=True``, only files are listed, as paths relative to
    ``path``. Entries are sorted for a stable output.
    """
    root = Path(path)
    try:
        if not recursive:
            return sorted(entry.name for entry in root.iterdir())
        return sorted(
            str(entry.relative_to(root)) for entry in root.rglob("*") if not entry.is_dir()
        )
    except OSError as exc:
        logger.debug("Cannot list %s: %s", path, exc)
        return []


def create_dir(path: PathLike) -> bool:
    """Create ``path`` and any missing parents; True if it exists afterwards."""
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.debug("Cannot create directory %s: %s", path, exc)
        return False
    return True


def delete_file(path: PathLike) -> bool:
    try:
        Path(path).unlink()
    except OSError as exc:
        logger.debug("Cannot delete %s: %s", path, exc)
        return False
    return True


def copy_file(source: PathLike, destination: PathLike) -> bool:
    try:
        shutil.copyfile(source, destination)
    except (OSError, shutil.SameFileError) as exc:
        logger.debug("Cannot copy %s to %s: %s", source, destination, exc)
        return False
    return True


# -----------------------------------------------------------------------------
# Path helpers
# -----------------------------------------------------------------------------


def get_extension(path: PathLike) -> str:
    """``get_extension('archive.tar.gz') == 'gz'``."""
    return Path(path).suffix[1:]


def get_basename(path: PathLike) -> str:
    """File name without its last extension."""
    return Path(path).stem


def get_dirname(path: PathLike) -> str:
    return os.path.dirname(os.fspath(path)) or "."


def resolve_path(path: PathLike) -> str:
    return str(Path(path).resolve())


def join_path(*segments: PathLike) -> str:
    if not segments:
        return "."
    return os.path.normpath(os.path.join(*segments))


def find_files(path: PathLike, pattern: str, recursive: bool = False) -> list[str]:
    """
    Entries of :func:`list_dir` whose name matches the regular expression ``pattern``.

    An invalid pattern is logged and yields an empty list.
    """
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        logger.debug("Invalid pattern %r: %s", pattern, exc)
        return []
    return [name for name in list_dir(path, recursive) if regex.search(name)]
