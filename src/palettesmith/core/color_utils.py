"""
Pure-Python color math: hex/RGB/HSL conversion, HSL adjustments, and
WCAG relative luminance and contrast.

All functions take and return ``#rrggbb`` strings or the channel types from
:mod:`palettesmith.core.ir`. No external color libraries required.
"""

from __future__ import annotations

import math
import re
from dataclasses import replace

from .errors import InvalidColorError
from .ir import HSL, RGB

_HEX_PATTERN = re.compile(r"#([0-9a-f]{3}|[0-9a-f]{6})", re.IGNORECASE)
_HEX6_PATTERN = re.compile(r"[0-9a-f]{6}", re.IGNORECASE)
_CSS_HEX_PATTERN = re.compile(r"#[0-9A-Fa-f]{3,6}")

# WCAG 2.x sRGB linearization and luminance weights
_SRGB_KNEE = 0.03928
_LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (not banker's rounding)."""
    return math.floor(value + 0.5)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# =============================================================================
# Conversion
# =============================================================================


def hex_to_rgb(hex_color: str) -> RGB:
    """Parse a 6-digit hex color (leading ``#`` optional).

    3-digit shorthand is not accepted here; run :func:`expand_hex` first.

    Raises:
        InvalidColorError: If the digits are not exactly six hex characters.
    """
    if not isinstance(hex_color, str):
        raise InvalidColorError(hex_color)
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if not _HEX6_PATTERN.fullmatch(digits):
        raise InvalidColorError(hex_color)

    return RGB(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def rgb_to_hex(rgb: RGB) -> str:
    """Encode RGB as lowercase ``#rrggbb``, rounding and clamping each channel."""

    def to_hex(channel: float) -> str:
        return f"{round_half_up(_clamp(channel, 0, 255)):02x}"

    return f"#{to_hex(rgb.r)}{to_hex(rgb.g)}{to_hex(rgb.b)}"


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert RGB to integer HSL.

    Achromatic colors (all channels equal) get hue 0 and saturation 0.
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    high = max(r, g, b)
    low = min(r, g, b)
    diff = high - low

    h = 0.0
    s = 0.0
    lightness = (high + low) / 2

    if diff != 0:
        if lightness > 0.5:
            s = diff / (2 - high - low)
        else:
            s = diff / (high + low)

        if high == r:
            h = ((g - b) / diff + (6 if g < b else 0)) / 6
        elif high == g:
            h = ((b - r) / diff + 2) / 6
        else:
            h = ((r - g) / diff + 4) / 6

    return HSL(
        h=round_half_up(h * 360) % 360,
        s=round_half_up(s * 100),
        l=round_half_up(lightness * 100),
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


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert HSL to integer RGB channels."""
    h = hsl.h / 360
    s = hsl.s / 100
    lightness = hsl.l / 100

    if s == 0:
        r = g = b = lightness
    else:
        q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
        p = 2 * lightness - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(
        r=round_half_up(r * 255),
        g=round_half_up(g * 255),
        b=round_half_up(b * 255),
    )


def hex_to_hsl(hex_color: str) -> HSL:
    return rgb_to_hsl(hex_to_rgb(hex_color))


def hsl_to_hex(hsl: HSL) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))


# =============================================================================
# Validation
# =============================================================================


def is_valid_hex(color: str) -> bool:
    """True for ``#`` followed by exactly 3 or 6 hex digits."""
    return isinstance(color, str) and _HEX_PATTERN.fullmatch(color) is not None


def expand_hex(color: str) -> str:
    """Normalize a 3- or 6-digit hex color to lowercase ``#rrggbb``.

    Raises:
        InvalidColorError: If ``color`` is not a valid 3/6-digit hex color.
    """
    if not is_valid_hex(color):
        raise InvalidColorError(color)

    if len(color) == 4:
        return "#" + "".join(digit * 2 for digit in color[1:]).lower()
    return color.lower()


def extract_colors_from_css(css_content: str) -> list[str]:
    """Find hex colors in a stylesheet.

    Returns expanded ``#rrggbb`` values, deduplicated in first-seen order.
    Tokens that are not 3 or 6 digits long are ignored.
    """
    seen: dict[str, None] = {}
    for match in _CSS_HEX_PATTERN.findall(css_content):
        if is_valid_hex(match):
            seen.setdefault(expand_hex(match), None)
    return list(seen)


# =============================================================================
# Adjustment
# =============================================================================


def adjust_lightness(color: str, amount: float) -> str:
    """Shift HSL lightness by ``amount`` percent, clamped to 0-100."""
    hsl = hex_to_hsl(color)
    return hsl_to_hex(replace(hsl, l=_clamp(hsl.l + amount, 0, 100)))


def adjust_saturation(color: str, amount: float) -> str:
    """Shift HSL saturation by ``amount`` percent, clamped to 0-100."""
    hsl = hex_to_hsl(color)
    return hsl_to_hex(replace(hsl, s=_clamp(hsl.s + amount, 0, 100)))


def rotate_hue(color: str, degrees: float) -> str:
    """Rotate the hue by ``degrees``; negative rotations wrap into 0-360."""
    hsl = hex_to_hsl(color)
    return hsl_to_hex(replace(hsl, h=(hsl.h + degrees) % 360))


# =============================================================================
# Luminance and contrast
# =============================================================================


def _linearize(channel: float) -> float:
    value = channel / 255
    if value <= _SRGB_KNEE:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """WCAG relative luminance of a 6-digit hex color, in 0-1."""
    rgb = hex_to_rgb(color)
    wr, wg, wb = _LUMINANCE_WEIGHTS
    return wr * _linearize(rgb.r) + wg * _linearize(rgb.g) + wb * _linearize(rgb.b)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """WCAG contrast ratio between two colors, rounded to 2 decimals.

    Symmetric in its arguments; ranges from 1.0 to 21.0.
    """
    lum_a = relative_luminance(color_a)
    lum_b = relative_luminance(color_b)
    ratio = (max(lum_a, lum_b) + 0.05) / (min(lum_a, lum_b) + 0.05)
    return round_half_up(ratio * 100) / 100


def optimal_text_color(background: str) -> str:
    """Black or white, whichever reads better on ``background``."""
    return "#000000" if relative_luminance(background) > 0.5 else "#ffffff"
