"""
HSL palette scale generation.

Builds 10-step tonal scales (50 through 900) from a seed color and a style
profile, the warm-gray neutral scale, the four status scales, and the full
base palette that combines them.
"""

from __future__ import annotations

from .color_utils import expand_hex, hex_to_hsl, hsl_to_hex, rotate_hue
from .errors import InvalidArgumentError
from .ir import (
    HSL,
    SCALE_STEPS,
    BasePalette,
    ColorScale,
    PaletteStyle,
    SecondaryScheme,
    StyleProfile,
)

_STYLE_PROFILES: dict[PaletteStyle, StyleProfile] = {
    PaletteStyle.MODERN: StyleProfile(saturation_boost=0, lightness_range=(5, 95)),
    PaletteStyle.VIBRANT: StyleProfile(saturation_boost=15, lightness_range=(10, 90)),
    PaletteStyle.MUTED: StyleProfile(saturation_boost=-20, lightness_range=(15, 85)),
    PaletteStyle.MINIMAL: StyleProfile(saturation_boost=-30, lightness_range=(20, 80)),
}

# Target lightness per step; 500 is the seed's tonal representative
_LIGHTNESS_STEPS: dict[int, int] = {
    50: 95,  # near white
    100: 90,
    200: 80,
    300: 70,
    400: 60,
    500: 50,
    600: 40,
    700: 30,
    800: 20,
    900: 10,  # near black
}

# Lighter steps lose saturation, darker steps gain it
_SATURATION_ADJUSTMENTS: dict[int, int] = {
    50: -40,
    100: -30,
    200: -20,
    300: -10,
    400: -5,
    500: 0,
    600: 5,
    700: 10,
    800: 15,
    900: 20,
}

STATUS_SEEDS: dict[str, str] = {
    "success": "#22c55e",
    "error": "#ef4444",
    "warning": "#f59e0b",
    "info": "#3b82f6",
}

NEUTRAL_HUE = 30

_SCHEME_ROTATIONS: dict[SecondaryScheme, int] = {
    SecondaryScheme.ANALOGOUS: 30,
    SecondaryScheme.COMPLEMENTARY: 180,
    SecondaryScheme.TRIADIC: 120,
}


def resolve_style(style: PaletteStyle | str) -> PaletteStyle:
    """Coerce a style name to PaletteStyle.

    Raises:
        InvalidArgumentError: For names outside modern/vibrant/muted/minimal.
    """
    try:
        return PaletteStyle(style)
    except ValueError:
        valid = ", ".join(s.value for s in PaletteStyle)
        raise InvalidArgumentError(f"Unknown palette style '{style}'. Valid: {valid}") from None


def get_style_profile(style: PaletteStyle | str) -> StyleProfile:
    return _STYLE_PROFILES[resolve_style(style)]


def _clamp_lightness(target: int, profile: StyleProfile) -> int:
    low, high = profile.lightness_range
    return max(low, min(high, target))


def generate_color_scale(
    seed_color: str, style: PaletteStyle | str = PaletteStyle.MODERN
) -> ColorScale:
    """Generate a 10-step scale around the hue and saturation of ``seed_color``.

    Args:
        seed_color: 3- or 6-digit hex color with leading ``#``.
        style: Style profile name.

    Returns:
        Dict mapping each step (50..900) to a ``#rrggbb`` color.

    Raises:
        InvalidColorError: If the seed is not a valid hex color.
        InvalidArgumentError: If the style is unknown.
    """
    base = hex_to_hsl(expand_hex(seed_color))
    profile = get_style_profile(style)

    scale: ColorScale = {}
    for step in SCALE_STEPS:
        saturation = base.s + profile.saturation_boost + _SATURATION_ADJUSTMENTS[step]
        saturation = max(0, min(100, saturation))
        lightness = _clamp_lightness(_LIGHTNESS_STEPS[step], profile)
        scale[step] = hsl_to_hex(HSL(h=base.h, s=saturation, l=lightness))
    return scale


def generate_neutral_scale(style: PaletteStyle | str = PaletteStyle.MODERN) -> ColorScale:
    """Generate the warm-gray neutral scale (hue 30, saturation 0 or 2)."""
    resolved = resolve_style(style)
    profile = _STYLE_PROFILES[resolved]
    saturation = 0 if resolved is PaletteStyle.MINIMAL else 2

    return {
        step: hsl_to_hex(
            HSL(h=NEUTRAL_HUE, s=saturation, l=_clamp_lightness(_LIGHTNESS_STEPS[step], profile))
        )
        for step in SCALE_STEPS
    }


def generate_status_colors(
    style: PaletteStyle | str = PaletteStyle.MODERN,
) -> dict[str, ColorScale]:
    """Generate success/error/warning/info scales from their canonical seeds."""
    return {name: generate_color_scale(seed, style) for name, seed in STATUS_SEEDS.items()}


def generate_base_palette(
    seed_color: str, style: PaletteStyle | str = PaletteStyle.MODERN
) -> BasePalette:
    """Generate the full six-scale palette for a brand color.

    All scales share the same style profile. Raises before building any scale
    if the seed or style is invalid.
    """
    resolved = resolve_style(style)
    primary = generate_color_scale(seed_color, resolved)

    return BasePalette(
        primary=primary,
        neutral=generate_neutral_scale(resolved),
        **generate_status_colors(resolved),
    )


def suggest_secondary_color(
    seed_color: str, scheme: SecondaryScheme | str = SecondaryScheme.ANALOGOUS
) -> str:
    """Suggest a secondary color by rotating the seed around the color wheel.

    analogous: +30 degrees, complementary: +180, triadic: +120.
    """
    try:
        resolved = SecondaryScheme(scheme)
    except ValueError:
        valid = ", ".join(s.value for s in SecondaryScheme)
        raise InvalidArgumentError(f"Unknown color scheme '{scheme}'. Valid: {valid}") from None
    return rotate_hue(expand_hex(seed_color), _SCHEME_ROTATIONS[resolved])
