"""
MCP Server state management.

Holds the process-wide configuration loaded at start-up. Tool handlers read
their defaults (style, format, dynamic color count) from here.
"""

from __future__ import annotations

import logging

from palettesmith.core.config import PalettesmithConfig

logger = logging.getLogger("palettesmith.mcp")

# ============================================================================
# Server State
# ============================================================================

_config: PalettesmithConfig = PalettesmithConfig()


def set_config(config: PalettesmithConfig) -> None:
    """Replace the active server configuration."""
    global _config
    _config = config
    logger.debug(
        "Config set: style=%s format=%s max_colors=%d",
        config.palette.default_style,
        config.palette.default_format,
        config.dynamic.max_colors,
    )


def get_config() -> PalettesmithConfig:
    """Get the active server configuration."""
    return _config


def reset_config() -> None:
    """Restore the default configuration."""
    set_config(PalettesmithConfig())
