"""
Value types shared by the color core, exporters, and MCP handlers.

Plain channel triples (RGB, HSL) and style profiles are frozen dataclasses;
results that cross the tool boundary (palettes, accessibility checks,
inferred colors) are frozen pydantic models so they serialize to JSON
directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class PaletteStyle(StrEnum):
    """Named saturation/lightness policies applied to a whole palette."""

    MODERN = "modern"
    VIBRANT = "vibrant"
    MUTED = "muted"
    MINIMAL = "minimal"


class OutputFormat(StrEnum):
    """Export targets."""

    CSS = "css"
    TAILWIND = "tailwind"
    SCSS = "scss"
    FIGMA = "figma"
    REACT_NATIVE = "react-native"


class ProjectType(StrEnum):
    """Project kinds with their own semantic color extensions."""

    ECOMMERCE = "ecommerce"
    DASHBOARD = "dashboard"
    WEBRTC = "webrtc"
    BLOG = "blog"
    CUSTOM = "custom"


class ContrastLevel(StrEnum):
    """WCAG conformance levels."""

    AA = "AA"
    AAA = "AAA"


class SecondaryScheme(StrEnum):
    """Color-wheel relationships for secondary color suggestions."""

    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"


# =============================================================================
# Channel types
# =============================================================================


@dataclass(frozen=True)
class RGB:
    """RGB channels, nominally integers in 0-255."""

    r: float
    g: float
    b: float


@dataclass(frozen=True)
class HSL:
    """Hue in degrees (0-360), saturation and lightness in percent (0-100)."""

    h: float
    s: float
    l: float  # noqa: E741


@dataclass(frozen=True)
class StyleProfile:
    """Saturation boost and lightness clamp for one PaletteStyle."""

    saturation_boost: int
    lightness_range: tuple[int, int]


# =============================================================================
# Palette types
# =============================================================================

# Step key -> "#rrggbb", always the ten keys of SCALE_STEPS in order
ColorScale = dict[int, str]

SCALE_STEPS: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)


class BasePalette(BaseModel):
    """The six color scales of a generated palette."""

    model_config = ConfigDict(frozen=True)

    primary: ColorScale
    neutral: ColorScale
    success: ColorScale
    error: ColorScale
    warning: ColorScale
    info: ColorScale

    def scales(self) -> dict[str, ColorScale]:
        """Return the scales keyed by name, in declaration order."""
        return {name: getattr(self, name) for name in type(self).model_fields}


class AccessibilityCheck(BaseModel):
    """Contrast result for one foreground/background pair."""

    model_config = ConfigDict(frozen=True)

    contrast_ratio: float
    wcag_aa: bool = Field(description="Ratio meets 4.5:1 (AA, normal text)")
    wcag_aaa: bool = Field(description="Ratio meets 7:1 (AAA, normal text)")
    level: ContrastLevel = ContrastLevel.AA
    is_large_text: bool = False
    threshold: float = Field(description="Threshold for the requested level and text size")
    passes: bool = Field(description="Ratio meets the requested threshold")
    suggested_color: str | None = None
    recommendation: str | None = None


class InferredColor(BaseModel):
    """A color inferred from a word in a project description."""

    model_config = ConfigDict(frozen=True)

    name: str
    color: str
    reasoning: str
