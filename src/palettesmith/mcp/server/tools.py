"""
MCP Server tool definitions.

Tool input schemas are generated from the pydantic argument models in
:mod:`.schemas`, so the advertised schema and the validation stay in step.
"""

from __future__ import annotations

from mcp.types import Tool
from pydantic import BaseModel

from .schemas import (
    ExtendPaletteArgs,
    GenerateColorScaleArgs,
    GenerateDynamicColorsArgs,
    GeneratePaletteArgs,
    ImportColorsArgs,
    PreviewPaletteArgs,
    SuggestSecondaryArgs,
    ValidateAccessibilityArgs,
)

# name -> (description, argument model)
_TOOL_SPECS: dict[str, tuple[str, type[BaseModel]]] = {
    "generate_palette": (
        "Generate a complete color palette from a brand color: 50-900 scales for primary, "
        "neutral, success, error, warning and info, with a WCAG audit and an export.",
        GeneratePaletteArgs,
    ),
    "extend_palette_for_project": (
        "Generate a palette plus project-specific semantic colors for ecommerce, "
        "dashboard, webrtc, blog or custom projects.",
        ExtendPaletteArgs,
    ),
    "validate_accessibility": (
        "Check the WCAG AA/AAA contrast of a foreground/background pair and suggest "
        "a corrected foreground when it falls short.",
        ValidateAccessibilityArgs,
    ),
    "import_existing_colors": (
        "Extract hex colors from existing CSS and convert them into a modern palette, "
        "optionally keeping the other colors as custom tokens.",
        ImportColorsArgs,
    ),
    "preview_palette": (
        "Render an HTML page showing a generated palette applied to sample components.",
        PreviewPaletteArgs,
    ),
    "generate_dynamic_colors": (
        "Infer named color variables from a natural-language project description.",
        GenerateDynamicColorsArgs,
    ),
    "suggest_secondary_color": (
        "Suggest a secondary color (analogous, complementary or triadic) for a primary color.",
        SuggestSecondaryArgs,
    ),
    "generate_color_scale": (
        "Generate a single 10-step (50-900) color scale from a seed color.",
        GenerateColorScaleArgs,
    ),
}

TOOL_NAMES: tuple[str, ...] = tuple(_TOOL_SPECS)


def get_all_tools() -> list[Tool]:
    """Get all palettesmith tools."""
    return [
        Tool(name=name, description=description, inputSchema=model.model_json_schema())
        for name, (description, model) in _TOOL_SPECS.items()
    ]
