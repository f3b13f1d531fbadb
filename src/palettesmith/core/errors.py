"""
Error types for palette generation, accessibility checks, and configuration.
"""

from __future__ import annotations


class PalettesmithError(Exception):
    """Base exception for all palettesmith errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidColorError(PalettesmithError):
    """
    Raised when a color string fails hex-format validation.

    Examples:
    - Wrong length (``#12345``)
    - Non-hex characters (``#ggg000``)
    - Missing ``#`` where the 3/6-digit form is required

    The offending input is kept on ``value`` and repeated in the message.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid hex color: {value}")


class InvalidArgumentError(PalettesmithError):
    """
    Raised when a tool or function argument violates its schema.

    Examples:
    - Unknown style, format, or project type name
    - Description too short, color count out of range
    """

    pass


class ConfigError(PalettesmithError):
    """Raised when a palettesmith.toml file cannot be read or is invalid."""

    pass
