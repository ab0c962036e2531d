# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""String helpers: case conversion, padding, encoding and edit distance.

Every function is pure: it takes text and returns new text (or a number,
list or bool) without touching its input.
"""

from __future__ import annotations

import base64
import binascii
import html
import re
import secrets
import string
import unicodedata

__all__ = [
    "slugify",
    "to_title_case",
    "truncate",
    "camel_case",
    "pascal_case",
    "snake_case",
    "kebab_case",
    "capitalize",
    "reverse",
    "swap_case",
    "is_palindrome",
    "is_anagram",
    "word_count",
    "pad_start",
    "pad_end",
    "repeat",
    "escape_html",
    "unescape_html",
    "base64_encode",
    "base64_decode",
    "random_string",
    "levenshtein_distance",
    "similarity",
    "remove_accents",
    "extract_numbers",
    "extract_emails",
    "mask",
    "longest_common_substring",
    "compress",
    "decompress",
]

_ALPHANUMERIC = string.ascii_letters + string.digits

_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^\w-]+", re.ASCII)
_DASH_RUN_RE = re.compile(r"-{2,}")

# Words are runs of uppercase-led letters, lowercase letters, or digits.
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")
_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")
_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_RLE_RE = re.compile(r"(\D)(\d+)", re.DOTALL)


# -----------------------------------------------------------------------------
# Basic transforms
# -----------------------------------------------------------------------------


def slugify(text: str) -> str:
    """
    Convert text to a lowercase, hyphen-delimited, URL-safe slug.

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("  --Already--a--slug--  ")
        'already-a-slug'
    """
    slug = str(text).lower().strip()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _NON_SLUG_RE.sub("", slug)
    slug = _DASH_RUN_RE.sub("-", slug)
    return slug.strip("-")


def to_title_case(text: str) -> str:
    """Uppercase the first letter of every space-separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


def truncate(text: str, length: int, suffix: str = "...") -> str:
    """
    Cut ``text`` to ``length`` characters, suffix included.

    When ``length`` is shorter than ``suffix`` only the suffix is returned.

    Examples:
        >>> truncate("Long text here", 10)
        'Long te...'
        >>> truncate("Short", 10)
        'Short'
    """
    if len(text) <= length:
        return text
    keep = max(length - len(suffix), 0)
    return text[:keep] + suffix


def _words(text: str) -> list[str]:
    return _WORD_RE.findall(remove_accents(text))


def camel_case(text: str) -> str:
    """``"hello-world"`` -> ``"helloWorld"``."""
    words = _words(text)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(w.capitalize() for w in rest)


def pascal_case(text: str) -> str:
    """``"hello-world"`` -> ``"HelloWorld"``."""
    return "".join(w.capitalize() for w in _words(text))


def snake_case(text: str) -> str:
    """``"helloWorld"`` -> ``"hello_world"``."""
    return "_".join(w.lower() for w in _words(text))


def kebab_case(text: str) -> str:
    """``"helloWorld"`` -> ``"hello-world"``."""
    return "-".join(w.lower() for w in _words(text))


def capitalize(text: str) -> str:
    """Uppercase the first character, leave the rest untouched."""
    return text[:1].upper() + text[1:]


def reverse(text: str) -> str:
    return text[::-1]


def swap_case(text: str) -> str:
    return text.swapcase()


def _alnum_lower(text: str) -> str:
    return "".join(ch for ch in text.lower() if ch.isalnum())


def is_palindrome(text: str) -> bool:
    """True if text reads the same backwards, ignoring case and punctuation."""
    cleaned = _alnum_lower(text)
    return cleaned == cleaned[::-1]


def is_anagram(first: str, second: str) -> bool:
    """True if both strings use the same letters, ignoring case and punctuation."""
    return sorted(_alnum_lower(first)) == sorted(_alnum_lower(second))


def word_count(text: str) -> int:
    return len(text.split())


# -----------------------------------------------------------------------------
# Padding
# -----------------------------------------------------------------------------


def _padding(text: str, length: int, char: str) -> str:
    missing = length - len(text)
    if missing <= 0 or not char:
        return ""
    return (char * (missing // len(char) + 1))[:missing]


def pad_start(text: str, length: int, char: str = " ") -> str:
    """
    Pad ``text`` on the left up to ``length`` using ``char`` (can be longer than one).

    Examples:
        >>> pad_start("5", 3, "0")
        '005'
        >>> pad_start("abc", 8, "12")
        '12121abc'
    """
    return _padding(text, length, char) + text


def pad_end(text: str, length: int, char: str = " ") -> str:
    """Pad ``text`` on the right up to ``length`` using ``char``."""
    return text + _padding(text, length, char)


def repeat(text: str, count: int, separator: str = "") -> str:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return separator.join([text] * count)


# -----------------------------------------------------------------------------
# Encoding
# -----------------------------------------------------------------------------


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for safe inclusion in HTML."""
    return html.escape(text, quote=True)


def unescape_html(text: str) -> str:
    return html.unescape(text)


def base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_decode(data: str) -> str:
    """
    Decode base64 ``data`` into UTF-8 text.

    Raises:
        ValueError: If ``data`` is not valid base64 or not valid UTF-8.
    """
    try:
        return base64.b64decode(data, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValueError(f"Invalid base64 input: {exc}") from exc


def random_string(length: int = 16, charset: str = _ALPHANUMERIC) -> str:
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if not charset:
        raise ValueError("charset cannot be empty")
    return "".join(secrets.choice(charset) for _ in range(length))


# -----------------------------------------------------------------------------
# Edit distance
# -----------------------------------------------------------------------------


def levenshtein_distance(first: str, second: str) -> int:
    """
    Minimum number of single-character edits turning ``first`` into ``second``.

    Insertions, deletions and substitutions all cost 1. Runs in O(n*m) time,
    keeping only the previous row of the table in memory.

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("", "abc")
        3
    """
    if first == second:
        return 0
    if not first:
        return len(second)
    if not second:
        return len(first)

    previous = list(range(len(second) + 1))
    for i, ch_a in enumerate(first, start=1):
        current = [i]
        for j, ch_b in enumerate(second, start=1):
            cost = 0 if ch_a == ch_b else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current
    return previous[-1]


def similarity(first: str, second: str) -> float:
    """
    Normalized similarity in ``[0, 1]`` derived from the edit distance.

    Computed as ``(max_len - distance) / max_len``; two empty strings are
    identical (1.0).

    Examples:
        >>> round(similarity("kitten", "sitting"), 3)
        0.571
    """
    longest = max(len(first), len(second))
    if longest == 0:
        return 1.0
    return (longest - levenshtein_distance(first, second)) / longest


# -----------------------------------------------------------------------------
# Extraction and masking
# -----------------------------------------------------------------------------


def remove_accents(text: str) -> str:
    """``"Crème brûlée"`` -> ``"Creme brulee"``."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def extract_numbers(text: str) -> list[int | float]:
    """Return every integer or decimal number found in text, in order."""
    numbers: list[int | float] = []
    for match in _NUMBER_RE.findall(text):
        numbers.append(float(match) if "." in match else int(match))
    return numbers


def extract_emails(text: str) -> list[str]:
    return _EMAIL_RE.findall(text)


def mask(text: str, visible: int = 4, char: str = "*") -> str:
    """
    Hide all but the last ``visible`` characters.

    Examples:
        >>> mask("4111111111111111")
        '************1111'
    """
    if visible <= 0:
        return char * len(text)
    if len(text) <= visible:
        return text
    return char * (len(text) - visible) + text[-visible:]


def longest_common_substring(first: str, second: str) -> str:
    """Longest contiguous run shared by both strings (first one found wins ties)."""
    if not first or not second:
        return ""
    best_len = 0
    best_end = 0
    previous = [0] * (len(second) + 1)
    for i, ch_a in enumerate(first, start=1):
        current = [0] * (len(second) + 1)
        for j, ch_b in enumerate(second, start=1):
            if ch_a == ch_b:
                current[j] = previous[j - 1] + 1
                if current[j] > best_len:
                    best_len = current[j]
                    best_end = i
        previous = current
    return first[best_end - best_len : best_end]


# -----------------------------------------------------------------------------
# Run-length encoding
# -----------------------------------------------------------------------------


def compress(text: str) -> str:
    """
    Run-length encode ``text``: each run becomes the character and its count.

    Digits cannot be encoded unambiguously and raise ``ValueError``.

    Examples:
        >>> compress("aaabcc")
        'a3b1c2'
    """
    if any(ch.isdigit() for ch in text):
        raise ValueError("compress() does not support digits in the input")
    parts: list[str] = []
    i = 0
    while i < len(text):
        j = i
        while j < len(text) and text[j] == text[i]:
            j += 1
        parts.append(f"{text[i]}{j - i}")
        i = j
    return "".join(parts)


def decompress(text: str) -> str:
    """Inverse of :func:`compress`."""
    pairs = _RLE_RE.findall(text)
    if "".join(ch + count for ch, count in pairs) != text:
        raise ValueError(f"Not a run-length encoded string: {text!r}")
    return "".join(ch * int(count) for ch, count in pairs)
