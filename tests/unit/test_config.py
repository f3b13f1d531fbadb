"""Tests for palettesmith.toml loading."""

import logging
from pathlib import Path

import pytest

from palettesmith.core.config import (
    CONFIG_FILENAME,
    PalettesmithConfig,
    load_config,
    parse_config,
)
from palettesmith.core.errors import ConfigError
from palettesmith.core.ir import OutputFormat, PaletteStyle


class TestLoadConfig:
    """load_config."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / CONFIG_FILENAME)
        assert config == PalettesmithConfig()
        assert config.palette.default_style is PaletteStyle.MODERN
        assert config.palette.default_format is OutputFormat.CSS
        assert config.dynamic.max_colors == 15

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text(
            """
[palette]
default_style = "vibrant"
default_format = "tailwind"

[server]
name = "brand-colors"
log_level = "debug"

[dynamic]
max_colors = 5
"""
        )
        config = load_config(path)
        assert config.palette.default_style is PaletteStyle.VIBRANT
        assert config.palette.default_format is OutputFormat.TAILWIND
        assert config.server.name == "brand-colors"
        assert config.server.log_level == "DEBUG"
        assert config.log_level == logging.DEBUG
        assert config.dynamic.max_colors == 5

    def test_default_location_is_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text('[palette]\ndefault_style = "muted"\n')
        monkeypatch.chdir(tmp_path)
        assert load_config().palette.default_style is PaletteStyle.MUTED

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[palette\n")
        with pytest.raises(ConfigError, match="Could not parse"):
            load_config(path)


class TestParseConfig:
    """parse_config validation."""

    def test_partial_sections(self) -> None:
        config = parse_config({"dynamic": {"max_colors": 30}})
        assert config.dynamic.max_colors == 30
        assert config.palette.default_style is PaletteStyle.MODERN

    @pytest.mark.parametrize(
        "data",
        [
            {"palette": {"default_style": "neon"}},
            {"palette": {"default_format": "pdf"}},
            {"server": {"log_level": "LOUD"}},
            {"dynamic": {"max_colors": 0}},
            {"dynamic": {"max_colors": 31}},
            {"dynamic": {"max_colors": "many"}},
            {"palette": "modern"},
        ],
    )
    def test_invalid_values(self, data: dict) -> None:
        with pytest.raises(ConfigError):
            parse_config(data)
