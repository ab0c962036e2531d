# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Validation predicates."""

import re
from collections.abc import Sized
from typing import Any

from .url_utils import is_valid_url

__all__ = ["is_email", "is_url", "is_empty"]

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_email(email: str) -> bool:
    """
    Loose email check: something@something.tld with no whitespace.

    Examples:
        >>> is_email("test@example.com")
        True
        >>> is_email("invalid-email")
        False
    """
    return isinstance(email, str) and _EMAIL_RE.match(email) is not None


def is_url(url: str) -> bool:
    return is_valid_url(url)


def is_empty(value: Any) -> bool:
    """True for None, whitespace-only strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, Sized):
        return len(value) == 0
    return False
