"""
palettesmith.toml configuration.

Example::

    [palette]
    default_style = "modern"
    default_format = "css"

    [server]
    name = "palettesmith"
    log_level = "INFO"

    [dynamic]
    max_colors = 15

Every section and key is optional; a missing file yields the defaults.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .ir import OutputFormat, PaletteStyle

CONFIG_FILENAME = "palettesmith.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

MAX_DYNAMIC_COLORS = 30


@dataclass
class PaletteConfig:
    """Defaults applied when a tool call omits style or format."""

    default_style: PaletteStyle = PaletteStyle.MODERN
    default_format: OutputFormat = OutputFormat.CSS


@dataclass
class ServerConfig:
    """MCP server settings."""

    name: str = "palettesmith"
    log_level: str = "INFO"


@dataclass
class DynamicConfig:
    """Defaults for description-based color inference."""

    max_colors: int = 15


@dataclass
class PalettesmithConfig:
    palette: PaletteConfig = field(default_factory=PaletteConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    dynamic: DynamicConfig = field(default_factory=DynamicConfig)

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.server.log_level)


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def parse_config(data: dict[str, Any]) -> PalettesmithConfig:
    """Build a config from already-parsed TOML data.

    Raises:
        ConfigError: On unknown styles/formats/log levels or bad color counts.
    """
    palette_data = _section(data, "palette")
    server_data = _section(data, "server")
    dynamic_data = _section(data, "dynamic")

    try:
        palette = PaletteConfig(
            default_style=PaletteStyle(palette_data.get("default_style", PaletteStyle.MODERN)),
            default_format=OutputFormat(palette_data.get("default_format", OutputFormat.CSS)),
        )
    except ValueError as e:
        raise ConfigError(f"Invalid [palette] setting: {e}") from e

    log_level = str(server_data.get("log_level", "INFO")).upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            f"Invalid [server] log_level '{log_level}'. Valid: {', '.join(_LOG_LEVELS)}"
        )
    server = ServerConfig(name=str(server_data.get("name", "palettesmith")), log_level=log_level)

    max_colors = dynamic_data.get("max_colors", 15)
    if not isinstance(max_colors, int) or not 1 <= max_colors <= MAX_DYNAMIC_COLORS:
        raise ConfigError(f"[dynamic] max_colors must be an integer in 1-{MAX_DYNAMIC_COLORS}")
    dynamic = DynamicConfig(max_colors=max_colors)

    return PalettesmithConfig(palette=palette, server=server, dynamic=dynamic)


def load_config(path: Path | None = None) -> PalettesmithConfig:
    """Load configuration from ``path`` (default: ./palettesmith.toml).

    A missing file is not an error; defaults are returned instead.

    Raises:
        ConfigError: If the file exists but is not valid TOML or has bad values.
    """
    config_path = path or Path.cwd() / CONFIG_FILENAME
    if not config_path.exists():
        return PalettesmithConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e

    return parse_config(data)
