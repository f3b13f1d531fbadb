"""Accessibility MCP handler: WCAG contrast check for one color pair."""

from __future__ import annotations

from typing import Any

from palettesmith.core.accessibility import validate_accessibility

from ..schemas import ValidateAccessibilityArgs
from .common import handler_error_json, parse_args, to_json


@handler_error_json
def validate_accessibility_handler(args: dict[str, Any]) -> str:
    """Check foreground/background contrast and suggest a fix when it fails."""
    parsed = parse_args(ValidateAccessibilityArgs, args)
    result = validate_accessibility(
        parsed.foreground, parsed.background, parsed.level, parsed.is_large_text
    )
    return to_json(result.model_dump(mode="json"))
