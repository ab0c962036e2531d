# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Hashing, HMAC and password helpers over ``hashlib``, ``hmac`` and ``secrets``.

Text arguments are encoded as UTF-8 before hashing; ``bytes`` are used as is.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import string
from dataclasses import dataclass

__all__ = [
    "PasswordHash",
    "md5",
    "sha1",
    "sha256",
    "sha512",
    "hmac_sha256",
    "hmac_sha512",
    "hash_data",
    "hmac_digest",
    "random_hex",
    "random_token",
    "hash_password",
    "verify_password",
    "xor_cipher",
]

DEFAULT_ITERATIONS = 100_000
DEFAULT_KEY_LENGTH = 64

_TOKEN_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits
_ENCODINGS = ("hex", "base64", "base64url", "latin1")
_XOR_MASK = 0x7FF


@dataclass(frozen=True)
class PasswordHash:
    """Result of :func:`hash_password`; every field is needed to verify later."""

    salt: str
    hash: str
    iterations: int
    key_length: int


def _to_bytes(data: str | bytes) -> bytes:
    return data if isinstance(data, bytes) else str(data).encode("utf-8")


def _encode(digest: bytes, encoding: str) -> str:
    if encoding == "hex":
        return digest.hex()
    if encoding == "base64":
        return base64.b64encode(digest).decode("ascii")
    if encoding == "base64url":
        return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
    if encoding in ("latin1", "binary"):
        return digest.decode("latin-1")
    raise ValueError(
        f"Unsupported encoding: {encoding!r}. Supported: {', '.join(_ENCODINGS)}"
    )


def _new_hash(algorithm: str):
    try:
        return hashlib.new(algorithm.lower())
    except ValueError as exc:
        raise ValueError(f"Unsupported hash algorithm: {algorithm!r}") from exc


# -----------------------------------------------------------------------------
# Digests
# -----------------------------------------------------------------------------


def hash_data(data: str | bytes, algorithm: str = "sha256", encoding: str = "hex") -> str:
    """
    Digest ``data`` with any algorithm known to ``hashlib``.

    Args:
        data: Text (UTF-8 encoded) or bytes to hash.
        algorithm: Algorithm name (md5, sha1, sha256, sha3_256, blake2b, ...).
        encoding: Output encoding: hex, base64, base64url or latin1.

    Raises:
        ValueError: If the algorithm or encoding is not supported.
    """
    hasher = _new_hash(algorithm)
    hasher.update(_to_bytes(data))
    return _encode(hasher.digest(), encoding)


def md5(data: str | bytes) -> str:
    return hash_data(data, "md5")


def sha1(data: str | bytes) -> str:
    return hash_data(data, "sha1")


def sha256(data: str | bytes) -> str:
    """
    Examples:
        >>> sha256("hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hash_data(data, "sha256")


def sha512(data: str | bytes) -> str:
    return hash_data(data, "sha512")


def hmac_digest(
    data: str | bytes,
    key: str | bytes,
    algorithm: str = "sha256",
    encoding: str = "hex",
) -> str:
    """Keyed digest of ``data``; same algorithm and encoding rules as :func:`hash_data`."""
    _new_hash(algorithm)
    mac = hmac.new(_to_bytes(key), _to_bytes(data), algorithm.lower())
    return _encode(mac.digest(), encoding)


def hmac_sha256(data: str | bytes, key: str | bytes) -> str:
    return hmac_digest(data, key, "sha256")


def hmac_sha512(data: str | bytes, key: str | bytes) -> str:
    return hmac_digest(data, key, "sha512")


# -----------------------------------------------------------------------------
# Random values
# -----------------------------------------------------------------------------


def random_hex(size: int = 16, encoding: str = "hex") -> str:
    """``size`` cryptographically secure random bytes, encoded as requested."""
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    return _encode(secrets.token_bytes(size), encoding)


def random_token(length: int = 32) -> str:
    """Alphanumeric token drawn with ``secrets.choice`` (no modulo bias)."""
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    return "".join(secrets.choice(_TOKEN_CHARS) for _ in range(length))


# -----------------------------------------------------------------------------
# Passwords
# -----------------------------------------------------------------------------


def _pbkdf2(password: str, salt: str, iterations: int, key_length: int) -> str:
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")
    if key_length < 1:
        raise ValueError(f"key_length must be >= 1, got {key_length}")
    return hashlib.pbkdf2_hmac(
        "sha512", _to_bytes(password), _to_bytes(salt), iterations, dklen=key_length
    ).hex()


def hash_password(
    password: str,
    salt: str | None = None,
    iterations: int = DEFAULT_ITERATIONS,
    key_length: int = DEFAULT_KEY_LENGTH,
) -> PasswordHash:
    """
    Derive a PBKDF2-HMAC-SHA512 hash for ``password``.

    A 32-byte random hex salt is generated when ``salt`` is not given.

    Examples:
        >>> record = hash_password("secret", iterations=1000)
        >>> verify_password("secret", record.salt, record.hash, iterations=1000)
        True
    """
    actual_salt = salt or secrets.token_hex(32)
    return PasswordHash(
        salt=actual_salt,
        hash=_pbkdf2(password, actual_salt, iterations, key_length),
        iterations=iterations,
        key_length=key_length,
    )


def verify_password(
    password: str,
    salt: str,
    hash: str,
    iterations: int = DEFAULT_ITERATIONS,
    key_length: int = DEFAULT_KEY_LENGTH,
) -> bool:
    """Check ``password`` against a stored hash using a constant-time comparison."""
    candidate = _pbkdf2(password, salt, iterations, key_length)
    return hmac.compare_digest(candidate, hash)


def xor_cipher(text: str, key: str) -> str:
    """
    XOR every character of ``text`` with the repeating ``key``.

    Only the low 11 bits of each key character are used. XOR with a value
    below 0x800 keeps a code point inside its 0x800-aligned block, so the
    result is always valid text without surrogates, and applying the cipher
    twice with the same key gives back the original text. For ASCII keys
    this is a plain character XOR. This is an obfuscation toy, not
    encryption.
    """
    if not key:
        raise ValueError("key cannot be empty")
    return "".join(
        chr(ord(ch) ^ (ord(key[i % len(key)]) & _XOR_MASK)) for i, ch in enumerate(text)
    )
