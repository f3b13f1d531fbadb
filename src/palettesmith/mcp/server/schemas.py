"""
Argument schemas for the MCP tools.

Each tool's ``inputSchema`` is the JSON schema of its model here, and the
handlers validate incoming arguments against the same model.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from palettesmith.core.config import MAX_DYNAMIC_COLORS
from palettesmith.core.ir import (
    ContrastLevel,
    OutputFormat,
    PaletteStyle,
    ProjectType,
    SecondaryScheme,
)

HexColor = Annotated[
    str,
    StringConstraints(pattern=r"^#[0-9A-Fa-f]{3,6}$"),
    Field(description="Hex color such as #3b82f6 or #38f"),
]


class _ToolArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")


class GeneratePaletteArgs(_ToolArgs):
    brand_color: HexColor
    style: PaletteStyle = Field(default=PaletteStyle.MODERN, description="Palette style")
    format: OutputFormat = Field(default=OutputFormat.CSS, description="Export format")


class ExtendPaletteArgs(_ToolArgs):
    project_type: ProjectType
    primary_color: HexColor
    style: PaletteStyle = PaletteStyle.MODERN
    custom_needs: list[str] | None = Field(
        default=None, description="Extra color names, e.g. ['delete-button', 'vip-badge']"
    )
    format: OutputFormat = OutputFormat.CSS


class ValidateAccessibilityArgs(_ToolArgs):
    foreground: HexColor
    background: HexColor
    level: ContrastLevel = ContrastLevel.AA
    is_large_text: bool = False


class ImportColorsArgs(_ToolArgs):
    css_content: str = Field(description="Stylesheet text to scan for hex colors")
    preserve_custom: bool = Field(
        default=True, description="Export the other extracted colors alongside the palette"
    )
    format: OutputFormat = OutputFormat.CSS


class PreviewPaletteArgs(_ToolArgs):
    primary_color: HexColor
    style: PaletteStyle = PaletteStyle.MODERN
    components: list[str] = Field(
        default_factory=lambda: ["button", "card"],
        description="Any of button, card, form, navigation, all",
    )


class GenerateDynamicColorsArgs(_ToolArgs):
    project_description: Annotated[str, StringConstraints(min_length=5)] = Field(
        description="Natural-language description of the project"
    )
    primary_color: HexColor
    max_colors: int = Field(default=15, ge=1, le=MAX_DYNAMIC_COLORS)
    format: OutputFormat = OutputFormat.CSS


class SuggestSecondaryArgs(_ToolArgs):
    primary_color: HexColor
    scheme: SecondaryScheme = SecondaryScheme.ANALOGOUS


class GenerateColorScaleArgs(_ToolArgs):
    seed_color: HexColor
    style: PaletteStyle = PaletteStyle.MODERN
