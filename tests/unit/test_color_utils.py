"""Tests for hex/RGB/HSL conversion, HSL adjusters, and WCAG contrast."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from palettesmith.core.color_utils import (
    adjust_lightness,
    adjust_saturation,
    contrast_ratio,
    expand_hex,
    extract_colors_from_css,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    optimal_text_color,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    rotate_hue,
    round_half_up,
)
from palettesmith.core.errors import InvalidColorError
from palettesmith.core.ir import HSL, RGB

hex_colors = st.integers(min_value=0, max_value=0xFFFFFF).map(lambda n: f"#{n:06x}")
gray_colors = st.integers(min_value=0, max_value=255).map(lambda v: f"#{v:02x}{v:02x}{v:02x}")


def _channel_distance(a: str, b: str) -> int:
    rgb_a, rgb_b = hex_to_rgb(a), hex_to_rgb(b)
    return max(abs(rgb_a.r - rgb_b.r), abs(rgb_a.g - rgb_b.g), abs(rgb_a.b - rgb_b.b))


class TestRounding:
    """Half-up rounding used throughout the color math."""

    def test_half_rounds_up(self) -> None:
        """0.5 and 2.5 round up rather than to even."""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3

    def test_below_half_rounds_down(self) -> None:
        assert round_half_up(2.49) == 2


class TestHexParsing:
    """Parsing and validation of hex color strings."""

    def test_hex_to_rgb(self) -> None:
        """A 6-digit color decodes to its three channels."""
        assert hex_to_rgb("#3b82f6") == RGB(59, 130, 246)

    def test_hex_to_rgb_without_hash(self) -> None:
        """The leading # is optional."""
        assert hex_to_rgb("3B82F6") == RGB(59, 130, 246)

    @pytest.mark.parametrize("value", ["#38f", "#12345", "#ggg000", "blue", "", "#3b82f6\n"])
    def test_hex_to_rgb_rejects_invalid(self, value: str) -> None:
        """Anything but six hex digits raises InvalidColorError."""
        with pytest.raises(InvalidColorError) as exc_info:
            hex_to_rgb(value)
        assert exc_info.value.value == value
        assert "Invalid hex color" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["#fff", "#FFFFFF", "#3b82f6", "#A1b"])
    def test_valid_hex(self, value: str) -> None:
        assert is_valid_hex(value)

    @pytest.mark.parametrize(
        "value", ["fff", "#ffff", "#12345", "#ggg000", "#1234567", "#3b82f6\n", "#fff\n"]
    )
    def test_invalid_hex(self, value: str) -> None:
        """Missing #, wrong length, or non-hex digits are invalid."""
        assert not is_valid_hex(value)

    def test_expand_shorthand(self) -> None:
        """3-digit shorthand doubles each digit and lowercases."""
        assert expand_hex("#ABC") == "#aabbcc"

    def test_expand_full_form_lowercases(self) -> None:
        assert expand_hex("#3B82F6") == "#3b82f6"

    def test_expand_rejects_invalid(self) -> None:
        with pytest.raises(InvalidColorError):
            expand_hex("#12")

    def test_trailing_newline_is_not_stripped(self) -> None:
        """A trailing newline is rejected rather than silently accepted."""
        with pytest.raises(InvalidColorError):
            expand_hex("#3b82f6\n")


class TestConversion:
    """RGB/HSL conversion."""

    def test_rgb_to_hex_clamps_and_rounds(self) -> None:
        """Channels are rounded half-up and clamped into 0-255."""
        assert rgb_to_hex(RGB(300, -5, 127.5)) == "#ff0080"

    def test_brand_blue_to_hsl(self) -> None:
        assert hex_to_hsl("#3b82f6") == HSL(217, 91, 60)

    def test_gray_has_no_hue_or_saturation(self) -> None:
        """Achromatic colors decode to hue 0 and saturation 0."""
        hsl = rgb_to_hsl(RGB(136, 136, 136))
        assert hsl.h == 0
        assert hsl.s == 0

    def test_primary_hues(self) -> None:
        assert hsl_to_hex(HSL(0, 100, 50)) == "#ff0000"
        assert hsl_to_hex(HSL(120, 100, 50)) == "#00ff00"
        assert hsl_to_hex(HSL(240, 100, 50)) == "#0000ff"

    def test_mid_gray(self) -> None:
        """Lightness 50 with no saturation is #808080."""
        assert hsl_to_rgb(HSL(0, 0, 50)) == RGB(128, 128, 128)

    @given(hex_colors)
    @settings(max_examples=200)
    def test_rgb_roundtrip_is_exact(self, color: str) -> None:
        """Invariant: hex -> RGB -> hex is lossless."""
        assert rgb_to_hex(hex_to_rgb(color)) == color

    @given(gray_colors)
    def test_gray_hsl_roundtrip_within_one(self, color: str) -> None:
        """Invariant: grays survive hex -> HSL -> hex within 1 per channel."""
        assert _channel_distance(hsl_to_hex(hex_to_hsl(color)), color) <= 1

    @given(hex_colors)
    @settings(max_examples=300)
    def test_hsl_roundtrip_bounded(self, color: str) -> None:
        """Invariant: integer HSL keeps every channel within 6 of the original."""
        assert _channel_distance(hsl_to_hex(hex_to_hsl(color)), color) <= 6

    @given(hex_colors)
    def test_hsl_components_in_range(self, color: str) -> None:
        hsl = hex_to_hsl(color)
        assert 0 <= hsl.h < 360
        assert 0 <= hsl.s <= 100
        assert 0 <= hsl.l <= 100


class TestAdjusters:
    """Lightness, saturation, and hue adjustment."""

    def test_rotate_hue(self) -> None:
        assert rotate_hue("#ff0000", 120) == "#00ff00"

    def test_negative_rotation_wraps(self) -> None:
        """-120 degrees from red lands on blue (hue 240)."""
        assert rotate_hue("#ff0000", -120) == "#0000ff"

    def test_rotation_stays_in_range(self) -> None:
        assert hex_to_hsl(rotate_hue("#ff0000", 350)).h == 350

    def test_lightness_clamps_at_black(self) -> None:
        assert adjust_lightness("#000000", -10) == "#000000"

    def test_saturation_to_zero_gives_gray(self) -> None:
        rgb = hex_to_rgb(adjust_saturation("#3b82f6", -100))
        assert rgb.r == rgb.g == rgb.b

    @given(hex_colors)
    def test_extreme_lightness_reaches_white_and_black(self, color: str) -> None:
        """Invariant: lightness is clamped, so huge shifts saturate to white/black."""
        assert adjust_lightness(color, 200) == "#ffffff"
        assert adjust_lightness(color, -200) == "#000000"

    @given(hex_colors)
    def test_full_turn_is_identity_rotation(self, color: str) -> None:
        """Invariant: rotating by 360 matches rotating by 0."""
        assert rotate_hue(color, 360) == rotate_hue(color, 0)

    def test_adjusters_reject_invalid_colors(self) -> None:
        with pytest.raises(InvalidColorError):
            adjust_lightness("not-a-color", 10)


class TestContrast:
    """WCAG relative luminance and contrast ratio."""

    def test_luminance_extremes(self) -> None:
        assert relative_luminance("#000000") == 0
        assert relative_luminance("#ffffff") == pytest.approx(1.0)

    def test_black_on_white(self) -> None:
        assert contrast_ratio("#000000", "#ffffff") == 21.0

    def test_same_color(self) -> None:
        assert contrast_ratio("#3b82f6", "#3b82f6") == 1.0

    def test_known_aa_boundary_gray(self) -> None:
        """#767676 is the lightest gray passing AA on white."""
        assert contrast_ratio("#767676", "#ffffff") == 4.54

    @given(hex_colors, hex_colors)
    @settings(max_examples=200)
    def test_ratio_bounds_and_symmetry(self, a: str, b: str) -> None:
        """Invariant: 1 <= ratio <= 21 and the ratio ignores argument order."""
        ratio = contrast_ratio(a, b)
        assert 1.0 <= ratio <= 21.0
        assert ratio == contrast_ratio(b, a)

    def test_optimal_text_color(self) -> None:
        assert optimal_text_color("#ffffff") == "#000000"
        assert optimal_text_color("#000000") == "#ffffff"


class TestCssExtraction:
    """Pulling hex colors out of stylesheet text."""

    def test_extracts_expands_and_dedupes(self) -> None:
        """Shorthand is expanded, duplicates dropped, invalid lengths skipped."""
        css = "a { color: #FFF } b { color: #ffffff; background: #3b82f6 } c { color: #1234 }"
        assert extract_colors_from_css(css) == ["#ffffff", "#3b82f6"]

    def test_no_colors(self) -> None:
        assert extract_colors_from_css("body { color: red; }") == []
