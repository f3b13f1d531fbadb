"""
Palette exporters.

Turns a BasePalette (plus optional extra name -> color entries) into text for
CSS custom properties, a Tailwind config, SCSS variables, Figma tokens, or a
React Native constant. Colors are emitted as the palette's own ``#rrggbb``
strings or as ``r g b`` triplets decoded from them, so values round-trip
without loss.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import Any

from .color_utils import hex_to_rgb
from .errors import InvalidArgumentError
from .ir import BasePalette, OutputFormat

ExtraColors = Mapping[str, str]

# Semantic aliases shared by the SCSS and React Native exports: name -> (scale, step)
_SEMANTIC_ALIASES: list[tuple[str, str, int]] = [
    ("background", "neutral", 50),
    ("text", "neutral", 800),
    ("text-muted", "neutral", 600),
    ("border", "neutral", 200),
    ("accent", "primary", 500),
]

_CARD_COLOR = "#ffffff"

# Extra names that would shadow a scale or a semantic mapping get this prefix
EXTRA_PREFIX = "custom-"

# Variables only the CSS export defines
_CSS_SEMANTIC_NAMES = (
    "border-focus",
    "text-subtle",
    "button-primary",
    "button-primary-hover",
    "button-primary-text",
    "button-secondary",
    "button-secondary-hover",
    "button-secondary-text",
    "button-secondary-border",
)

_RESERVED_NAMES = frozenset(
    [
        *BasePalette.model_fields,
        "card",
        *(alias for alias, _, _ in _SEMANTIC_ALIASES),
        *_CSS_SEMANTIC_NAMES,
    ]
)


def _rgb_triplet(color: str) -> str:
    rgb = hex_to_rgb(color)
    return f"{rgb.r} {rgb.g} {rgb.b}"


def _camel_case(name: str) -> str:
    head, *rest = name.split("-")
    return head + "".join(part.capitalize() for part in rest)


def _js_key(name: str) -> str:
    return name if name.isidentifier() else f"'{name}'"


def resolve_extra_colors(extra: ExtraColors | None) -> dict[str, str]:
    """Copy ``extra``, prefixing names that collide with a scale or semantic alias.

    ``{"success": "#22c55e"}`` becomes ``{"custom-success": "#22c55e"}`` so the
    ten-step success scale is never replaced by a single color.
    """
    return {
        f"{EXTRA_PREFIX}{name}" if name in _RESERVED_NAMES else name: color
        for name, color in (extra or {}).items()
    }


# =============================================================================
# CSS
# =============================================================================


def export_css(palette: BasePalette, extra: ExtraColors | None = None) -> str:
    """CSS custom properties with RGB triplets, semantic aliases, and dark mode."""
    extra = resolve_extra_colors(extra)
    lines = [":root {"]

    for name, scale in palette.scales().items():
        lines.append(f"  /* {name.capitalize()} colors */")
        for step, color in scale.items():
            lines.append(f"  --color-{name}-{step}: {_rgb_triplet(color)};")
        lines.append("")

    lines.extend(
        [
            "  /* Semantic colors */",
            "  --color-background: var(--color-neutral-50);",
            f"  --color-card: {_rgb_triplet(_CARD_COLOR)};",
            "  --color-border: var(--color-neutral-200);",
            "  --color-border-focus: var(--color-primary-500);",
            "  --color-accent: var(--color-primary-500);",
            "",
            "  --color-text: var(--color-neutral-800);",
            "  --color-text-muted: var(--color-neutral-600);",
            "  --color-text-subtle: var(--color-neutral-500);",
            "",
            "  /* Button system */",
            "  --color-button-primary: var(--color-primary-500);",
            "  --color-button-primary-hover: var(--color-primary-600);",
            "  --color-button-primary-text: var(--color-neutral-900);",
            "",
            "  --color-button-secondary: var(--color-card);",
            "  --color-button-secondary-hover: var(--color-neutral-50);",
            "  --color-button-secondary-text: var(--color-text);",
            "  --color-button-secondary-border: var(--color-border);",
            "",
        ]
    )

    if extra:
        lines.append("  /* Project-specific colors */")
        for name, color in extra.items():
            lines.append(f"  --color-{name}: {_rgb_triplet(color)};")
        lines.append("")

    lines.extend(
        [
            "}",
            "",
            "/* Dark mode */",
            '[data-theme="dark"] {',
            "  --color-background: var(--color-neutral-900);",
            "  --color-card: var(--color-neutral-800);",
            "  --color-border: var(--color-neutral-700);",
            "  --color-text: var(--color-neutral-100);",
            "  --color-text-muted: var(--color-neutral-400);",
            "  --color-text-subtle: var(--color-neutral-500);",
            "}",
        ]
    )
    return "\n".join(lines)


# =============================================================================
# Tailwind
# =============================================================================


def build_tailwind_config(palette: BasePalette, extra: ExtraColors | None = None) -> dict[str, Any]:
    """Tailwind ``theme.extend.colors`` config as a dict."""
    extra = resolve_extra_colors(extra)
    colors: dict[str, Any] = {
        name: {str(step): color for step, color in scale.items()}
        for name, scale in palette.scales().items()
    }
    colors.update(extra or {})
    return {"theme": {"extend": {"colors": colors}}}


def export_tailwind(palette: BasePalette, extra: ExtraColors | None = None) -> str:
    config = build_tailwind_config(palette, extra)
    return f"module.exports = {json.dumps(config, indent=2)};"


# =============================================================================
# SCSS
# =============================================================================


def export_scss(palette: BasePalette, extra: ExtraColors | None = None) -> str:
    """SCSS ``$scale-step`` variables followed by semantic mappings."""
    extra = resolve_extra_colors(extra)
    lines = ["// Generated color palette"]

    for name, scale in palette.scales().items():
        lines.append("")
        lines.append(f"// {name.capitalize()} colors")
        for step, color in scale.items():
            lines.append(f"${name}-{step}: {color};")

    if extra:
        lines.append("")
        lines.append("// Project-specific colors")
        for name, color in extra.items():
            lines.append(f"${name}: {color};")

    lines.append("")
    lines.append("// Semantic mappings")
    lines.append(f"$card: {_CARD_COLOR};")
    for alias, scale_name, step in _SEMANTIC_ALIASES:
        lines.append(f"${alias}: ${scale_name}-{step};")

    return "\n".join(lines)


# =============================================================================
# Figma tokens
# =============================================================================


def build_figma_tokens(palette: BasePalette, extra: ExtraColors | None = None) -> dict[str, Any]:
    """Figma Tokens tree: ``{"color": {scale: {step: {"value", "type"}}}}``."""
    extra = resolve_extra_colors(extra)
    tokens: dict[str, Any] = {}
    for name, scale in palette.scales().items():
        tokens[name] = {
            str(step): {"value": color, "type": "color"} for step, color in scale.items()
        }
    for name, color in (extra or {}).items():
        tokens[name] = {"value": color, "type": "color"}
    return {"color": tokens}


def export_figma(palette: BasePalette, extra: ExtraColors | None = None) -> str:
    return json.dumps(build_figma_tokens(palette, extra), indent=2)


# =============================================================================
# React Native
# =============================================================================


def export_react_native(palette: BasePalette, extra: ExtraColors | None = None) -> str:
    """An ``export const colors`` object for React Native StyleSheets."""
    extra = resolve_extra_colors(extra)
    lines = ["export const colors = {", "  // Base palette"]

    for name, scale in palette.scales().items():
        lines.append(f"  {name}: {{")
        for step, color in scale.items():
            lines.append(f"    {step}: '{color}',")
        lines.append("  },")

    if extra:
        lines.append("  // Project colors")
        for name, color in extra.items():
            lines.append(f"  {_js_key(name)}: '{color}',")

    scales = palette.scales()
    lines.append("  // Semantic mappings")
    lines.append(f"  card: '{_CARD_COLOR}',")
    for alias, scale_name, step in _SEMANTIC_ALIASES:
        lines.append(f"  {_camel_case(alias)}: '{scales[scale_name][step]}',")
    lines.append("};")

    return "\n".join(lines)


# =============================================================================
# Dispatch
# =============================================================================

_EXPORTERS: dict[OutputFormat, Callable[[BasePalette, ExtraColors | None], str]] = {
    OutputFormat.CSS: export_css,
    OutputFormat.TAILWIND: export_tailwind,
    OutputFormat.SCSS: export_scss,
    OutputFormat.FIGMA: export_figma,
    OutputFormat.REACT_NATIVE: export_react_native,
}


def export_palette(
    palette: BasePalette,
    fmt: OutputFormat | str = OutputFormat.CSS,
    extra: ExtraColors | None = None,
) -> str:
    """Export a palette in the named format.

    Raises:
        InvalidArgumentError: If ``fmt`` is not a supported format.
    """
    try:
        resolved = OutputFormat(fmt)
    except ValueError:
        valid = ", ".join(f.value for f in OutputFormat)
        raise InvalidArgumentError(f"Unsupported format '{fmt}'. Valid: {valid}") from None
    return _EXPORTERS[resolved](palette, extra)
