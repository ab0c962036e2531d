# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Assorted helpers: identifiers, clipboard and terminal colors."""

from __future__ import annotations

import logging
import shutil
import subprocess
import uuid as _uuid

import click

__all__ = ["uuid", "copy_to_clipboard", "colorize", "COLORS"]

logger = logging.getLogger(__name__)

COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

# Tried in order; the first one found on PATH wins.
_CLIPBOARD_COMMANDS = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def uuid() -> str:
    """Random (version 4) UUID in its canonical 36-character form."""
    return str(_uuid.uuid4())


def copy_to_clipboard(text: str) -> bool:
    """
    Put ``text`` on the system clipboard.

    Uses the first available clipboard command (pbcopy, wl-copy, xclip, xsel,
    clip). When none is available or it fails, the text is echoed as
    ``Copy this: <text>`` so the user can copy it by hand.

    Returns:
        True if a clipboard command accepted the text, False otherwise.
    """
    for command in _CLIPBOARD_COMMANDS:
        if shutil.which(command[0]) is None:
            continue
        try:
            subprocess.run(command, input=text.encode("utf-8"), check=True, timeout=5)
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("Clipboard command %s failed: %s", command[0], exc)
            continue
        return True
    click.echo(f"Copy this: {text}")
    return False


def colorize(text: str, color: str = "white") -> str:
    """
    Wrap ``text`` in ANSI escape codes for ``color``.

    Unknown color names fall back to white.

    Examples:
        >>> colorize("ok", "green")
        '\\x1b[32mok\\x1b[0m'
    """
    name = color.lower() if isinstance(color, str) else "white"
    if name not in COLORS:
        name = "white"
    return click.style(text, fg=name)
