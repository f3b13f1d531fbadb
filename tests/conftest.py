"""Shared pytest fixtures for palettesmith tests."""

import pytest

from palettesmith.core.ir import BasePalette
from palettesmith.core.palette import generate_base_palette

BRAND_BLUE = "#3b82f6"


@pytest.fixture
def brand_color() -> str:
    """Return the brand color used across tests."""
    return BRAND_BLUE


@pytest.fixture
def modern_palette() -> BasePalette:
    """Return a modern palette generated from the brand color."""
    return generate_base_palette(BRAND_BLUE, "modern")
