"""Tests for project-type extension colors and custom needs."""

import pytest

from palettesmith.core.color_utils import adjust_lightness, is_valid_hex, rotate_hue
from palettesmith.core.errors import InvalidArgumentError, InvalidColorError
from palettesmith.core.ir import ProjectType
from palettesmith.core.project_colors import (
    color_for_need,
    generate_project_colors,
    need_offset,
)


class TestProjectTypes:
    """Fixed color sets per project type."""

    def test_ecommerce(self, brand_color: str) -> None:
        colors = generate_project_colors("ecommerce", brand_color)
        assert colors["price-sale"] == "#ef4444"
        assert colors["stock-out"] == "#6b7280"
        assert colors["product-featured"] == rotate_hue(brand_color, 30)
        assert colors["price-original"] == adjust_lightness(brand_color, -10)

    def test_dashboard_chart_lines(self, brand_color: str) -> None:
        """Chart series start at the primary and step 60 degrees around the wheel."""
        colors = generate_project_colors(ProjectType.DASHBOARD, brand_color)
        assert colors["chart-line-1"] == brand_color
        assert colors["chart-line-2"] == rotate_hue(brand_color, 60)
        assert colors["chart-line-5"] == rotate_hue(brand_color, 240)

    def test_webrtc(self, brand_color: str) -> None:
        colors = generate_project_colors("webrtc", brand_color)
        assert colors["connection-lost"] == "#991b1b"
        assert colors["screen-request"] == adjust_lightness(brand_color, -15)

    def test_blog(self, brand_color: str) -> None:
        colors = generate_project_colors("blog", brand_color)
        assert colors["category-tech"] == brand_color
        assert colors["highlight-important"] == "#fef3c7"

    def test_custom_starts_empty(self, brand_color: str) -> None:
        assert generate_project_colors("custom", brand_color) == {}

    @pytest.mark.parametrize("project_type", list(ProjectType))
    def test_all_values_are_hex(self, project_type: ProjectType, brand_color: str) -> None:
        for name, color in generate_project_colors(project_type, brand_color, ["extra"]).items():
            assert is_valid_hex(color), name
            assert name == name.lower()

    def test_shorthand_primary(self) -> None:
        colors = generate_project_colors("blog", "#38f")
        assert colors["category-tech"] == "#3388ff"

    def test_unknown_project_type(self, brand_color: str) -> None:
        with pytest.raises(InvalidArgumentError, match="ecommerce"):
            generate_project_colors("crm", brand_color)

    def test_invalid_primary(self) -> None:
        with pytest.raises(InvalidColorError):
            generate_project_colors("blog", "navy")


class TestCustomNeeds:
    """Free-form extra color names."""

    def test_keyword_needs(self, brand_color: str) -> None:
        colors = generate_project_colors(
            "custom", brand_color, ["delete-button", "task-complete", "blue-link", "premium-tier"]
        )
        assert colors == {
            "delete-button": "#ef4444",
            "task-complete": "#22c55e",
            "blue-link": "#3b82f6",
            "premium-tier": "#8b5cf6",
        }

    def test_unmatched_need_uses_stable_offset(self, brand_color: str) -> None:
        """Unmatched needs shift the primary's lightness by a reproducible amount."""
        first = color_for_need(brand_color, "vip-badge")
        assert first == adjust_lightness(brand_color, need_offset("vip-badge"))
        assert color_for_need(brand_color, "vip-badge") == first

    def test_offset_range(self) -> None:
        for need in ("hero", "vip-badge", "sidebar", "footer-bg", "x"):
            assert -10 <= need_offset(need) <= 10

    def test_needs_apply_to_every_type(self, brand_color: str) -> None:
        colors = generate_project_colors("dashboard", brand_color, ["delete-button"])
        assert colors["delete-button"] == "#ef4444"
        assert "metric-positive" in colors

    def test_existing_names_are_kept(self, brand_color: str) -> None:
        """A need that collides with a built-in name does not replace it."""
        colors = generate_project_colors("ecommerce", brand_color, ["stock-out"])
        assert colors["stock-out"] == "#6b7280"
