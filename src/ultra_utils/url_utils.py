# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""
URL parsing, building and query-string helpers over ``urllib.parse``.

An *absolute* URL is considered valid when it has a syntactically valid
scheme and, for the network schemes (http, https, ws, wss, ftp), a host and a
numeric port (if any). Parsing helpers return ``None`` for invalid input
instead of raising.

``ParsedUrl`` mirrors the component names browsers expose: ``protocol`` keeps
its trailing ``:``, ``search`` and ``hash`` keep their ``?`` and ``#``
prefixes (empty strings when absent), and ``port`` is empty when it is the
scheme's default.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import SplitResult, quote, unquote, urlencode, urlsplit, urlunsplit

__all__ = [
    "ParsedUrl",
    "parse_url",
    "build_url",
    "get_query_params",
    "build_query_string",
    "add_query_params",
    "remove_query_params",
    "is_valid_url",
    "get_domain",
    "get_subdomain",
    "get_root_domain",
    "normalize_url",
    "join_paths",
    "encode_url",
    "decode_url",
    "extract_urls",
]

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*$")
_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}
_URL_RE = re.compile(
    r"https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()@:%_+.~#?&/=]*)"
)
# unreserved characters; everything else in a component is percent-encoded
_COMPONENT_SAFE = "-_.~"


@dataclass(frozen=True)
class ParsedUrl:
    protocol: str
    hostname: str
    port: str
    pathname: str
    search: str
    hash: str
    origin: str
    host: str


def _split(url: str) -> SplitResult | None:
    """Split and validate ``url``; None when it is not a valid absolute URL."""
    if not isinstance(url, str):
        return None
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except ValueError as exc:
        logger.debug("Invalid URL %r: %s", url, exc)
        return None
    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return None
    if parts.scheme in _DEFAULT_PORTS and not parts.hostname:
        return None
    if port is not None and not 0 <= port <= 65535:
        return None
    return parts


def _host_of(parts: SplitResult) -> tuple[str, str]:
    hostname = parts.hostname or ""
    if ":" in hostname:
        hostname = f"[{hostname}]"
    port = parts.port
    if port is None or _DEFAULT_PORTS.get(parts.scheme) == port:
        return hostname, ""
    return hostname, str(port)


def _split_fragment(url: str) -> tuple[str, str]:
    base, sep, fragment = url.partition("#")
    return base, sep + fragment


def _encode_component(value: Any) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe=_COMPONENT_SAFE)


# -----------------------------------------------------------------------------
# Parsing and building
# -----------------------------------------------------------------------------


def parse_url(url: str) -> ParsedUrl | None:
    """
    Split ``url`` into its components.

    Returns:
        A ``ParsedUrl``, or None when ``url`` is not a valid absolute URL.

    Examples:
        >>> parse_url("https://example.com:8080/a?b=1#c").port
        '8080'
        >>> parse_url("not-a-url") is None
        True
    """
    parts = _split(url)
    if parts is None:
        return None
    hostname, port = _host_of(parts)
    host = f"{hostname}:{port}" if port else hostname
    protocol = f"{parts.scheme}:"
    special = parts.scheme in _DEFAULT_PORTS
    return ParsedUrl(
        protocol=protocol,
        hostname=hostname,
        port=port,
        pathname=parts.path or ("/" if special else ""),
        search=f"?{parts.query}" if parts.query else "",
        hash=f"#{parts.fragment}" if parts.fragment else "",
        origin=f"{protocol}//{host}" if special else "null",
        host=host,
    )


def build_url(
    hostname: str,
    protocol: str = "https:",
    port: int | str | None = None,
    pathname: str = "",
    search: str = "",
    hash: str = "",
) -> str:
    """
    Assemble a URL from components (the inverse of :func:`parse_url`).

    Examples:
        >>> build_url("example.com", pathname="/api", search="q=1")
        'https://example.com/api?q=1'
    """
    if not protocol.endswith(":"):
        protocol += ":"
    url = f"{protocol}//{hostname}"
    if port:
        url += f":{port}"
    url += pathname
    if search:
        url += search if search.startswith("?") else f"?{search}"
    if hash:
        url += hash if hash.startswith("#") else f"#{hash}"
    return url


# -----------------------------------------------------------------------------
# Query strings
# -----------------------------------------------------------------------------


def get_query_params(url: str) -> dict[str, str]:
    """
    Decode the query string of ``url`` (or a bare query string) into a dict.

    Keys without a value map to an empty string; repeated keys keep the last
    value.
    """
    base, _ = _split_fragment(url)
    query = base.split("?", 1)[1] if "?" in base else base
    params: dict[str, str] = {}
    for pair in query.split("&"):
        key, _, value = pair.partition("=")
        if key:
            params[unquote(key)] = unquote(value)
    return params


def build_query_string(params: Mapping[str, Any]) -> str:
    """``build_query_string({'q': 'a b', 'skip': None}) == 'q=a%20b'``."""
    return "&".join(
        f"{_encode_component(key)}={_encode_component(value)}"
        for key, value in params.items()
        if value is not None
    )


def add_query_params(url: str, params: Mapping[str, Any]) -> str:
    query = build_query_string(params)
    if not query:
        return url
    base, fragment = _split_fragment(url)
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{query}{fragment}"


def remove_query_params(url: str, names: list[str] | None = None) -> str:
    """
    Drop the named query parameters, or the whole query when ``names`` is None.
    """
    base, fragment = _split_fragment(url)
    path, _, query = base.partition("?")
    if not query or names is None:
        return path + fragment
    params = get_query_params(query)
    for name in names:
        params.pop(name, None)
    query = build_query_string(params)
    return f"{path}?{query}{fragment}" if query else path + fragment


# -----------------------------------------------------------------------------
# Inspection
# -----------------------------------------------------------------------------


def is_valid_url(url: str) -> bool:
    return _split(url) is not None


def get_domain(url: str) -> str | None:
    parsed = parse_url(url)
    return parsed.hostname if parsed else None


def get_subdomain(url: str) -> str | None:
    """``get_subdomain('https://api.v2.example.com') == 'api.v2'``; None without one."""
    hostname = get_domain(url)
    if not hostname:
        return None
    labels = hostname.split(".")
    if len(labels) > 2:
        return ".".join(labels[:-2])
    return None


def get_root_domain(url: str) -> str | None:
    hostname = get_domain(url)
    if hostname is None:
        return None
    labels = hostname.split(".")
    if len(labels) >= 2:
        return ".".join(labels[-2:])
    return hostname


def normalize_url(url: str) -> str:
    """
    Lowercase ``url``, drop a trailing path slash and sort the query parameters.

    Invalid URLs are returned unchanged.

    Examples:
        >>> normalize_url("HTTPS://Example.com/Path/?b=2&a=1")
        'https://example.com/path?a=1&b=2'
    """
    parts = _split(url.lower()) if isinstance(url, str) else None
    if parts is None:
        return url
    path = parts.path or ("/" if parts.scheme in _DEFAULT_PORTS else "")
    if path != "/" and path.endswith("/"):
        path = path[:-1]
    pairs = []
    for pair in parts.query.split("&") if parts.query else []:
        key, _, value = pair.partition("=")
        pairs.append((unquote(key.replace("+", " ")), unquote(value.replace("+", " "))))
    pairs.sort(key=lambda kv: kv[0])
    hostname, port = _host_of(parts)
    netloc = hostname + (f":{port}" if port else "")
    if parts.username:
        userinfo = parts.username + (f":{parts.password}" if parts.password else "")
        netloc = f"{userinfo}@{netloc}"
    return urlunsplit((parts.scheme, netloc, path, urlencode(pairs), parts.fragment))


# -----------------------------------------------------------------------------
# Paths and encoding
# -----------------------------------------------------------------------------


def join_paths(*paths: str) -> str:
    """
    Join URL path segments with single slashes.

    Examples:
        >>> join_paths("https://api.example.com/", "/v1/", "users")
        'https://api.example.com/v1/users'
    """
    cleaned = []
    for index, path in enumerate(paths):
        cleaned.append(path.rstrip("/") if index == 0 else path.strip("/"))
    return "/".join(p for p in cleaned if p)


def encode_url(text: str) -> str:
    """Percent-encode ``text`` for use as a single URL component."""
    return quote(text, safe=_COMPONENT_SAFE)


def decode_url(text: str) -> str:
    """Percent-decode ``text``; returns it unchanged when it is not valid UTF-8."""
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError as exc:
        logger.debug("Cannot decode %r: %s", text, exc)
        return text


def extract_urls(text: str) -> list[str]:
    return [match.group(0) for match in _URL_RE.finditer(text)]
