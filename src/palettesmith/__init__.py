"""
palettesmith - brand-color palette generation with WCAG contrast checks.

Generates 10-step color scales from a seed color, extends them with
project-specific semantic colors, audits contrast, and exports to CSS,
Tailwind, SCSS, Figma tokens, and React Native. Exposed as MCP tools and
as a command-line interface.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ConfigError, InvalidArgumentError, InvalidColorError, PalettesmithError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "PalettesmithError",
    "InvalidColorError",
    "InvalidArgumentError",
    "ConfigError",
]
