# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""
Console logging for the command line.

The library modules only create loggers (``logging.getLogger(__name__)``);
handlers are installed by :func:`configure_logging`, which the CLI calls once
per invocation.
"""

from __future__ import annotations

import logging
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["verbosity_level", "config_console_handler", "configure_logging"]

ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]


def verbosity_level(base: int | str = logging.WARNING, verbose: int = 0, quiet: int = 0) -> int:
    """
    Shift ``base`` one level down per ``-v`` and one level up per ``-q``.

    The result is clamped to DEBUG..CRITICAL. Unknown level names fall back
    to WARNING.

    Examples:
        >>> verbosity_level(logging.WARNING, verbose=2) == logging.DEBUG
        True
        >>> verbosity_level("error", quiet=5) == logging.CRITICAL
        True
    """
    if isinstance(base, str):
        resolved = logging.getLevelName(base.strip().upper())
        base = resolved if isinstance(resolved, int) else logging.WARNING
    level = base - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(level: int = logging.WARNING, color: bool = True) -> RichHandler:
    """
    RichHandler writing to stderr.

    At DEBUG level the handler also shows the source path of each record.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)
    debug_mode = level <= logging.DEBUG
    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s"))
    return handler


def configure_logging(level: int = logging.WARNING, color: bool = True) -> RichHandler:
    """Install a console handler on the root logger, replacing existing ones."""
    handler = config_console_handler(level=level, color=color)
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return handler
