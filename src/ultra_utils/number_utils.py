# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Number formatting and small math helpers.

Functions that need a finite number raise ``ValueError`` on NaN or infinity
instead of silently producing nonsense strings.
"""

from __future__ import annotations

import math
import random
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, Decimal

__all__ = [
    "comma_number",
    "format_bytes",
    "random_int",
    "random_float",
    "round_to",
    "ceil_to",
    "floor_to",
    "clamp",
    "in_range",
    "to_percent",
    "from_percent",
    "to_currency",
    "factorial",
    "gcd",
    "lcm",
    "is_prime",
    "is_even",
    "is_odd",
    "to_radians",
    "to_degrees",
    "distance",
    "lerp",
    "map_range",
    "fibonacci",
    "ordinal",
]

_BYTE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

# currency code -> (symbol, minor-unit digits)
_CURRENCIES = {
    "USD": ("$", 2),
    "EUR": ("€", 2),
    "GBP": ("£", 2),
    "JPY": ("¥", 0),
    "CNY": ("CN¥", 2),
    "INR": ("₹", 2),
    "CHF": ("CHF", 2),
    "CAD": ("CA$", 2),
    "AUD": ("A$", 2),
    "BRL": ("R$", 2),
    "KRW": ("₩", 0),
}

# locale -> (group separator, decimal separator, symbol after amount)
_LOCALES = {
    "en-US": (",", ".", False),
    "en-GB": (",", ".", False),
    "ja-JP": (",", ".", False),
    "de-DE": (".", ",", True),
    "it-IT": (".", ",", True),
    "es-ES": (".", ",", True),
    "fr-FR": (" ", ",", True),
}


def _require_finite(value: float, name: str = "value") -> None:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value}")


def _quantize(num: float, decimals: int, rounding: str) -> float:
    _require_finite(num, "num")
    exponent = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(num)).quantize(exponent, rounding=rounding))


def _trim_zeros(text: str) -> str:
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _group_digits(integer_part: str, separator: str) -> str:
    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)
    return separator.join(groups)


# -----------------------------------------------------------------------------
# Formatting
# -----------------------------------------------------------------------------


def comma_number(num: float) -> str:
    """
    Insert thousands separators into the integer part.

    Examples:
        >>> comma_number(1234567)
        '1,234,567'
        >>> comma_number(-1234.5)
        '-1,234.5'
    """
    _require_finite(num, "num")
    text = str(num)
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    integer_part, dot, fraction = text.partition(".")
    return sign + _group_digits(integer_part, ",") + dot + fraction


def format_bytes(num: float, decimals: int = 2) -> str:
    """
    Human readable size using 1024-based units.

    Trailing zeros are dropped from the number.

    Raises:
        ValueError: If ``num`` is negative or not finite.

    Examples:
        >>> format_bytes(0)
        '0 Bytes'
        >>> format_bytes(1048576)
        '1 MB'
        >>> format_bytes(1536)
        '1.5 KB'
    """
    _require_finite(num, "num")
    if num < 0:
        raise ValueError(f"Byte count cannot be negative, got {num}")
    if num == 0:
        return "0 Bytes"
    decimals = max(decimals, 0)
    value = float(num)
    index = 0
    while value >= 1024 and index < len(_BYTE_UNITS) - 1:
        value /= 1024
        index += 1
    value = round(value, decimals)
    return f"{_trim_zeros(f'{value:.{decimals}f}')} {_BYTE_UNITS[index]}"


def to_percent(num: float, decimals: int = 0) -> str:
    """``to_percent(0.256, 1) == '25.6%'``."""
    _require_finite(num, "num")
    return f"{num * 100:.{decimals}f}%"


def from_percent(value: str | float) -> float:
    """``from_percent('25%') == 0.25``."""
    if isinstance(value, str):
        value = float(value.strip().rstrip("%"))
    return value / 100


def to_currency(amount: float, currency: str = "USD", locale: str = "en-US") -> str:
    """
    Format ``amount`` as money.

    Uses the currency's minor-unit digits and the grouping conventions of
    ``locale``. Unknown currency codes are printed as the code itself and
    unknown locales fall back to ``en-US``.

    Examples:
        >>> to_currency(1234.5)
        '$1,234.50'
        >>> to_currency(1234.5, "EUR", "de-DE")
        '1.234,50 €'
    """
    _require_finite(amount, "amount")
    code = currency.upper()
    symbol, digits = _CURRENCIES.get(code, (code, 2))
    group, decimal_sep, symbol_after = _LOCALES.get(locale, _LOCALES["en-US"])

    rounded = Decimal(repr(abs(amount))).quantize(
        Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP
    )
    integer_part, _, fraction = f"{rounded:f}".partition(".")
    number = _group_digits(integer_part, group)
    if fraction:
        number += decimal_sep + fraction

    sign = "-" if amount < 0 else ""
    if symbol_after:
        return f"{sign}{number} {symbol}"
    if len(symbol) > 1 and symbol.isalpha():
        return f"{sign}{symbol} {number}"
    return f"{sign}{symbol}{number}"


def ordinal(num: int) -> str:
    """
    Number with its English ordinal suffix.

    Examples:
        >>> [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 102, 111)]
        ['1st', '2nd', '3rd', '4th', '11th', '12th', '13th', '21st', '102nd', '111th']
    """
    if 10 <= abs(num) % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(abs(num) % 10, "th")
    return f"{num}{suffix}"


# -----------------------------------------------------------------------------
# Random
# -----------------------------------------------------------------------------


def random_int(minimum: int, maximum: int) -> int:
    """Random integer in ``[minimum, maximum]``."""
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) is greater than maximum ({maximum})")
    return random.randint(int(minimum), int(maximum))


def random_float(minimum: float, maximum: float, decimals: int = 2) -> float:
    _require_finite(minimum, "minimum")
    _require_finite(maximum, "maximum")
    return round(random.uniform(minimum, maximum), decimals)


# -----------------------------------------------------------------------------
# Rounding and ranges
# -----------------------------------------------------------------------------


def round_to(num: float, decimals: int = 0) -> float:
    """Round half away from zero (``round_to(2.5) == 3``, unlike ``round``)."""
    return _quantize(num, decimals, ROUND_HALF_UP)


def ceil_to(num: float, decimals: int = 0) -> float:
    return _quantize(num, decimals, ROUND_CEILING)


def floor_to(num: float, decimals: int = 0) -> float:
    return _quantize(num, decimals, ROUND_FLOOR)


def clamp(num: float, minimum: float, maximum: float) -> float:
    return min(max(num, minimum), maximum)


def in_range(num: float, minimum: float, maximum: float) -> bool:
    """Inclusive on both ends."""
    return minimum <= num <= maximum


# -----------------------------------------------------------------------------
# Math
# -----------------------------------------------------------------------------


def factorial(n: int) -> int | None:
    """``n!``, or None for negative input."""
    if n < 0:
        return None
    return math.factorial(n)


def gcd(first: int, second: int) -> int:
    return math.gcd(first, second)


def lcm(first: int, second: int) -> int:
    if first == 0 or second == 0:
        return 0
    return abs(first * second) // math.gcd(first, second)


def is_prime(num: int) -> bool:
    if num < 2:
        return False
    for divisor in range(2, math.isqrt(num) + 1):
        if num % divisor == 0:
            return False
    return True


def is_even(num: int) -> bool:
    return num % 2 == 0


def is_odd(num: int) -> bool:
    return num % 2 != 0


def to_radians(degrees: float) -> float:
    return math.radians(degrees)


def to_degrees(radians: float) -> float:
    return math.degrees(radians)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def map_range(
    value: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """
    Re-map ``value`` from ``[in_min, in_max]`` to ``[out_min, out_max]``.

    Raises:
        ValueError: If the input range is empty.
    """
    if in_max == in_min:
        raise ValueError("Input range cannot be empty")
    return (value - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def fibonacci(n: int) -> list[int]:
    """First ``n`` Fibonacci numbers starting from 0."""
    sequence: list[int] = []
    a, b = 0, 1
    for _ in range(max(n, 0)):
        sequence.append(a)
        a, b = b, a + b
    return sequence
