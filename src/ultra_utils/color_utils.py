# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""
Color conversion and manipulation.

Colors travel between functions as hex strings (``#rrggbb``), ``Rgb`` triples
(channels 0-255) or ``Hsl`` triples (hue 0-360, saturation and lightness
0-100, all rounded to integers).

Hex input may omit the ``#`` and may use the 3-digit shorthand; hex output is
always ``#`` plus 6 lowercase digits.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass

__all__ = [
    "Rgb",
    "Hsl",
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "random_color",
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "complement",
    "generate_palette",
    "contrast_ratio",
    "is_light",
    "is_dark",
    "mix",
]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class Hsl:
    h: int
    s: int
    l: int  # noqa: E741


def _round_half_up(value: float) -> int:
    """Round half up, matching how browsers round color channels."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def _check_channel(name: str, value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"Channel {name} must be within 0-255, got {value}")
    return int(value)


def normalize_hex(color: str) -> str:
    """
    Canonical ``#rrggbb`` form of a hex color.

    Raises:
        ValueError: If ``color`` is not a 3 or 6 digit hex color.

    Examples:
        >>> normalize_hex("ABC")
        '#aabbcc'
    """
    match = _HEX_RE.match(color.strip())
    if match is None:
        raise ValueError(f"Invalid hex color: {color!r}")
    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


# -----------------------------------------------------------------------------
# Conversion
# -----------------------------------------------------------------------------


def hex_to_rgb(color: str) -> Rgb:
    digits = normalize_hex(color)[1:]
    return Rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """``rgb_to_hex(255, 87, 51) == '#ff5733'``."""
    r, g, b = (_check_channel(n, v) for n, v in (("r", r), ("g", g), ("b", b)))
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(r: int, g: int, b: int) -> Hsl:
    """
    Convert RGB channels to rounded HSL.

    Examples:
        >>> rgb_to_hsl(255, 0, 0)
        Hsl(h=0, s=100, l=50)
    """
    rf, gf, bf = (_check_channel(n, v) / 255 for n, v in (("r", r), ("g", g), ("b", b)))
    high = max(rf, gf, bf)
    low = min(rf, gf, bf)
    lightness = (high + low) / 2

    if high == low:
        hue = saturation = 0.0
    else:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)
        if high == rf:
            hue = (gf - bf) / delta + (6 if gf < bf else 0)
        elif high == gf:
            hue = (bf - rf) / delta + 2
        else:
            hue = (rf - gf) / delta + 4
        hue /= 6

    return Hsl(
        _round_half_up(hue * 360),
        _round_half_up(saturation * 100),
        _round_half_up(lightness * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Rgb:  # noqa: E741
    """Convert hue (degrees), saturation and lightness (percent) to RGB."""
    hue = (h % 360) / 360
    saturation = min(max(s, 0), 100) / 100
    lightness = min(max(l, 0), 100) / 100

    if saturation == 0:
        red = green = blue = lightness
    else:
        if lightness < 0.5:
            q = lightness * (1 + saturation)
        else:
            q = lightness + saturation - lightness * saturation
        p = 2 * lightness - q
        red = _hue_to_channel(p, q, hue + 1 / 3)
        green = _hue_to_channel(p, q, hue)
        blue = _hue_to_channel(p, q, hue - 1 / 3)

    return Rgb(_round_half_up(red * 255), _round_half_up(green * 255), _round_half_up(blue * 255))


def random_color(fmt: str = "hex") -> str | Rgb | Hsl:
    """Random color as ``hex`` (default), ``rgb`` or ``hsl``."""
    r, g, b = (random.randint(0, 255) for _ in range(3))
    if fmt == "rgb":
        return Rgb(r, g, b)
    if fmt == "hsl":
        return rgb_to_hsl(r, g, b)
    return rgb_to_hex(r, g, b)


# -----------------------------------------------------------------------------
# Adjustments
# -----------------------------------------------------------------------------


def _to_hsl(color: str) -> Hsl:
    rgb = hex_to_rgb(color)
    return rgb_to_hsl(rgb.r, rgb.g, rgb.b)


def _from_hsl(h: float, s: float, l: float) -> str:  # noqa: E741
    rgb = hsl_to_rgb(h, s, l)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def lighten(color: str, amount: float) -> str:
    hsl = _to_hsl(color)
    return _from_hsl(hsl.h, hsl.s, min(100, hsl.l + amount))


def darken(color: str, amount: float) -> str:
    hsl = _to_hsl(color)
    return _from_hsl(hsl.h, hsl.s, max(0, hsl.l - amount))


def saturate(color: str, amount: float) -> str:
    hsl = _to_hsl(color)
    return _from_hsl(hsl.h, min(100, hsl.s + amount), hsl.l)


def desaturate(color: str, amount: float) -> str:
    hsl = _to_hsl(color)
    return _from_hsl(hsl.h, max(0, hsl.s - amount), hsl.l)


def complement(color: str) -> str:
    """Color on the opposite side of the hue wheel."""
    hsl = _to_hsl(color)
    return _from_hsl((hsl.h + 180) % 360, hsl.s, hsl.l)


def generate_palette(base_color: str, count: int = 5) -> list[str]:
    """``count`` colors with hues evenly spaced around the wheel from ``base_color``."""
    if count < 1:
        return []
    hsl = _to_hsl(base_color)
    return [
        _from_hsl((hsl.h + (360 / count) * i) % 360, hsl.s, hsl.l)
        for i in range(count)
    ]


# -----------------------------------------------------------------------------
# Analysis
# -----------------------------------------------------------------------------


def _relative_luminance(color: str) -> float:
    def linear(channel: int) -> float:
        c = channel / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    rgb = hex_to_rgb(color)
    return 0.2126 * linear(rgb.r) + 0.7152 * linear(rgb.g) + 0.0722 * linear(rgb.b)


def contrast_ratio(first: str, second: str) -> float:
    """
    WCAG contrast ratio, from 1 (same color) to 21 (black on white).

    Examples:
        >>> round(contrast_ratio("#000000", "#ffffff"), 1)
        21.0
    """
    lum_a = _relative_luminance(first)
    lum_b = _relative_luminance(second)
    return (max(lum_a, lum_b) + 0.05) / (min(lum_a, lum_b) + 0.05)


def is_light(color: str) -> bool:
    """Perceived brightness (YIQ weights) above 128."""
    rgb = hex_to_rgb(color)
    brightness = (rgb.r * 299 + rgb.g * 587 + rgb.b * 114) / 1000
    return brightness > 128


def is_dark(color: str) -> bool:
    return not is_light(color)


def mix(first: str, second: str, weight: float = 50) -> str:
    """Blend two colors; ``weight`` is the percentage of ``first`` in the result."""
    a = hex_to_rgb(first)
    b = hex_to_rgb(second)
    w = min(max(weight, 0), 100) / 100
    return rgb_to_hex(
        _round_half_up(a.r * w + b.r * (1 - w)),
        _round_half_up(a.g * w + b.g * (1 - w)),
        _round_half_up(a.b * w + b.b * (1 - w)),
    )
