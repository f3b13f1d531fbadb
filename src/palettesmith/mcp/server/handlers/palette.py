"""Palette generation MCP handlers.

Operations:
- ``generate_palette``: base palette + accessibility audit + export
- ``extend_palette_for_project``: adds project-type semantic colors
- ``import_existing_colors``: rebuilds a palette from colors found in CSS
- ``preview_palette``: HTML page showing the palette on sample components
- ``generate_dynamic_colors``: colors inferred from a project description
- ``suggest_secondary_color`` / ``generate_color_scale``: single-step helpers
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from palettesmith.core.accessibility import validate_palette_accessibility
from palettesmith.core.color_utils import expand_hex, extract_colors_from_css
from palettesmith.core.errors import InvalidArgumentError
from palettesmith.core.exporters import export_palette, resolve_extra_colors
from palettesmith.core.inference import infer_colors_from_text
from palettesmith.core.ir import BasePalette, PaletteStyle
from palettesmith.core.palette import (
    generate_base_palette,
    generate_color_scale,
    suggest_secondary_color,
)
from palettesmith.core.preview import generate_preview_html
from palettesmith.core.project_colors import generate_project_colors

from ..schemas import (
    ExtendPaletteArgs,
    GenerateColorScaleArgs,
    GenerateDynamicColorsArgs,
    GeneratePaletteArgs,
    ImportColorsArgs,
    PreviewPaletteArgs,
    SuggestSecondaryArgs,
)
from ..state import get_config
from .common import handler_error_json, parse_args, to_json

logger = logging.getLogger(__name__)


def _palette_defaults() -> dict[str, Any]:
    config = get_config()
    return {
        "style": config.palette.default_style,
        "format": config.palette.default_format,
    }


def _metadata(style: PaletteStyle, **extra: Any) -> dict[str, Any]:
    return {
        "generated_at": datetime.now(UTC).isoformat(),
        "style": style.value,
        **extra,
    }


def _audit(palette: BasePalette) -> dict[str, Any]:
    return {
        name: check.model_dump(mode="json")
        for name, check in validate_palette_accessibility(palette).items()
    }


@handler_error_json
def generate_palette_handler(args: dict[str, Any]) -> str:
    """Generate a full palette from a brand color, audit it, and export it."""
    parsed = parse_args(GeneratePaletteArgs, args, _palette_defaults())
    logger.debug("Generating %s palette for %s", parsed.style, parsed.brand_color)

    palette = generate_base_palette(parsed.brand_color, parsed.style)

    return to_json(
        {
            "palette": palette.model_dump(mode="json"),
            "accessibility": _audit(palette),
            "exports": {parsed.format.value: export_palette(palette, parsed.format)},
            "metadata": _metadata(parsed.style),
        }
    )


@handler_error_json
def extend_palette_handler(args: dict[str, Any]) -> str:
    """Generate a palette plus the semantic colors for a project type."""
    parsed = parse_args(ExtendPaletteArgs, args, _palette_defaults())

    palette = generate_base_palette(parsed.primary_color, parsed.style)
    project_colors = resolve_extra_colors(
        generate_project_colors(parsed.project_type, parsed.primary_color, parsed.custom_needs)
    )

    return to_json(
        {
            "palette": palette.model_dump(mode="json"),
            "project_colors": project_colors,
            "accessibility": _audit(palette),
            "exports": {
                parsed.format.value: export_palette(palette, parsed.format, project_colors)
            },
            "metadata": _metadata(parsed.style, project_type=parsed.project_type.value),
        }
    )


@handler_error_json
def import_existing_colors_handler(args: dict[str, Any]) -> str:
    """Extract hex colors from CSS and rebuild a modern palette from the first one."""
    parsed = parse_args(ImportColorsArgs, args, {"format": get_config().palette.default_format})

    extracted = extract_colors_from_css(parsed.css_content)
    if not extracted:
        raise InvalidArgumentError("No valid hex colors found in the CSS content")

    primary = extracted[0]
    palette = generate_base_palette(primary, PaletteStyle.MODERN)

    preserved: dict[str, str] = {}
    if parsed.preserve_custom:
        preserved = {f"imported-{i}": color for i, color in enumerate(extracted[1:], start=1)}

    return to_json(
        {
            "extracted_colors": extracted,
            "primary_color_used": primary,
            "modernized_palette": palette.model_dump(mode="json"),
            "preserved_colors": preserved,
            "exports": {
                parsed.format.value: export_palette(palette, parsed.format, preserved or None)
            },
        }
    )


@handler_error_json
def preview_palette_handler(args: dict[str, Any]) -> str:
    """Render an HTML preview of a generated palette."""
    parsed = parse_args(PreviewPaletteArgs, args, {"style": get_config().palette.default_style})

    palette = generate_base_palette(parsed.primary_color, parsed.style)
    html = generate_preview_html(palette, parsed.components)

    return to_json({"primary_color": expand_hex(parsed.primary_color), "html": html})


@handler_error_json
def generate_dynamic_colors_handler(args: dict[str, Any]) -> str:
    """Infer named colors from a project description and export them."""
    config = get_config()
    parsed = parse_args(
        GenerateDynamicColorsArgs,
        args,
        {"format": config.palette.default_format, "max_colors": config.dynamic.max_colors},
    )

    inferred = infer_colors_from_text(
        parsed.project_description, parsed.primary_color, parsed.max_colors
    )
    # Export names never shadow a palette scale
    colors = resolve_extra_colors({item.name: item.color for item in inferred})
    palette = generate_base_palette(parsed.primary_color, config.palette.default_style)

    return to_json(
        {
            "count": len(inferred),
            "colors": colors,
            "inferred": [item.model_dump(mode="json") for item in inferred],
            "export": export_palette(palette, parsed.format, colors),
            "format": parsed.format.value,
        }
    )


@handler_error_json
def suggest_secondary_color_handler(args: dict[str, Any]) -> str:
    parsed = parse_args(SuggestSecondaryArgs, args)
    color = suggest_secondary_color(parsed.primary_color, parsed.scheme)
    return to_json(
        {
            "primary_color": expand_hex(parsed.primary_color),
            "scheme": parsed.scheme.value,
            "color": color,
        }
    )


@handler_error_json
def generate_color_scale_handler(args: dict[str, Any]) -> str:
    parsed = parse_args(GenerateColorScaleArgs, args, {"style": get_config().palette.default_style})
    scale = generate_color_scale(parsed.seed_color, parsed.style)
    return to_json(
        {
            "seed_color": expand_hex(parsed.seed_color),
            "style": parsed.style.value,
            "scale": {str(step): color for step, color in scale.items()},
        }
    )
