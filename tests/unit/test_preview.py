"""Tests for the HTML palette preview."""

import pytest

from palettesmith.core.errors import InvalidArgumentError
from palettesmith.core.exporters import export_css
from palettesmith.core.ir import BasePalette
from palettesmith.core.preview import generate_preview_html


class TestPreview:
    """generate_preview_html."""

    def test_default_components(self, modern_palette: BasePalette) -> None:
        html = generate_preview_html(modern_palette)
        assert html.startswith("<!DOCTYPE html>")
        assert "Buttons" in html
        assert "Cards" in html
        assert "Form Elements" not in html

    def test_embeds_css_export(self, modern_palette: BasePalette) -> None:
        assert export_css(modern_palette) in generate_preview_html(modern_palette)

    def test_all_components(self, modern_palette: BasePalette) -> None:
        html = generate_preview_html(modern_palette, ["all"])
        for heading in ("Buttons", "Cards", "Form Elements", "Navigation"):
            assert heading in html

    def test_selected_component_only(self, modern_palette: BasePalette) -> None:
        html = generate_preview_html(modern_palette, ["navigation"])
        assert "Navigation" in html
        assert "Buttons" not in html

    def test_unknown_component(self, modern_palette: BasePalette) -> None:
        with pytest.raises(InvalidArgumentError, match="carousel"):
            generate_preview_html(modern_palette, ["button", "carousel"])
