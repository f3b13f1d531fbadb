"""Core palettesmith functionality: color math, palette scales, accessibility, exporters."""

from . import ir
from .accessibility import (
    suggest_corrective_color,
    validate_accessibility,
    validate_palette_accessibility,
)
from .color_utils import (
    adjust_lightness,
    adjust_saturation,
    contrast_ratio,
    expand_hex,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    rotate_hue,
)
from .errors import ConfigError, InvalidArgumentError, InvalidColorError, PalettesmithError
from .exporters import export_palette
from .palette import (
    generate_base_palette,
    generate_color_scale,
    generate_neutral_scale,
    generate_status_colors,
    suggest_secondary_color,
)

__all__ = [
    "ir",
    # Errors
    "PalettesmithError",
    "InvalidColorError",
    "InvalidArgumentError",
    "ConfigError",
    # Color math
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "is_valid_hex",
    "expand_hex",
    "adjust_lightness",
    "adjust_saturation",
    "rotate_hue",
    "relative_luminance",
    "contrast_ratio",
    # Palettes
    "generate_color_scale",
    "generate_neutral_scale",
    "generate_status_colors",
    "generate_base_palette",
    "suggest_secondary_color",
    # Accessibility
    "validate_accessibility",
    "validate_palette_accessibility",
    "suggest_corrective_color",
    # Export
    "export_palette",
]
