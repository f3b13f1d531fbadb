"""
WCAG contrast auditing.

Checks foreground/background pairs against AA/AAA thresholds and searches
for a corrected foreground when a pair falls short. The search is a
best-effort hint: when no adjusted color passes, the original foreground is
returned unchanged.
"""

from __future__ import annotations

import logging

from .color_utils import adjust_lightness, contrast_ratio, expand_hex
from .errors import InvalidArgumentError
from .ir import AccessibilityCheck, BasePalette, ContrastLevel

logger = logging.getLogger(__name__)

# (level, is_large_text) -> minimum contrast ratio
WCAG_THRESHOLDS: dict[tuple[ContrastLevel, bool], float] = {
    (ContrastLevel.AA, False): 4.5,
    (ContrastLevel.AA, True): 3.0,
    (ContrastLevel.AAA, False): 7.0,
    (ContrastLevel.AAA, True): 4.5,
}

AA_NORMAL = WCAG_THRESHOLDS[(ContrastLevel.AA, False)]
AAA_NORMAL = WCAG_THRESHOLDS[(ContrastLevel.AAA, False)]

_SEARCH_STEP = 5
_SEARCH_LIMIT = 50

WHITE = "#ffffff"


def suggest_corrective_color(foreground: str, background: str, target_ratio: float) -> str:
    """Find a foreground lightness shift that reaches ``target_ratio``.

    Moves darker while the ratio is below target and lighter while above,
    in steps of 5 up to a total shift of 50. Returns the first adjusted color
    reaching the target, or ``foreground`` unchanged if none does.
    """
    current = contrast_ratio(foreground, background)
    step = -_SEARCH_STEP if current < target_ratio else _SEARCH_STEP

    adjustment = step
    while abs(adjustment) <= _SEARCH_LIMIT:
        candidate = adjust_lightness(foreground, adjustment)
        if contrast_ratio(candidate, background) >= target_ratio:
            return candidate
        adjustment += step

    logger.debug(
        "No lightness shift of %s reaches %.2f:1 on %s", foreground, target_ratio, background
    )
    return foreground


def validate_accessibility(
    foreground: str,
    background: str,
    level: ContrastLevel | str = ContrastLevel.AA,
    is_large_text: bool = False,
) -> AccessibilityCheck:
    """Check a color pair against WCAG contrast requirements.

    ``wcag_aa`` and ``wcag_aaa`` always use the normal-text thresholds
    (4.5 and 7.0). The requested ``level`` and ``is_large_text`` select the
    threshold behind ``passes`` and the recommendation.

    Raises:
        InvalidColorError: If either color is not a valid hex color.
        InvalidArgumentError: If ``level`` is not AA or AAA.
    """
    try:
        resolved_level = ContrastLevel(level)
    except ValueError:
        raise InvalidArgumentError(f"Unknown WCAG level '{level}'. Valid: AA, AAA") from None

    fg = expand_hex(foreground)
    bg = expand_hex(background)

    ratio = contrast_ratio(fg, bg)
    threshold = WCAG_THRESHOLDS[(resolved_level, bool(is_large_text))]
    passes = ratio >= threshold

    suggested: str | None = None
    recommendation: str | None = None
    if not passes:
        suggested = suggest_corrective_color(fg, bg, threshold)
        recommendation = (
            f"Contrast ratio {ratio}:1 is below the required {threshold}:1. "
            f"Change the text color to {suggested} or adjust the background color."
        )

    return AccessibilityCheck(
        contrast_ratio=ratio,
        wcag_aa=ratio >= AA_NORMAL,
        wcag_aaa=ratio >= AAA_NORMAL,
        level=resolved_level,
        is_large_text=bool(is_large_text),
        threshold=threshold,
        passes=passes,
        suggested_color=suggested,
        recommendation=recommendation,
    )


def validate_palette_accessibility(palette: BasePalette) -> dict[str, AccessibilityCheck]:
    """Run AA checks over the commonly used role combinations of a palette."""
    combinations = [
        ("primary-on-white", palette.primary[500], WHITE),
        ("white-on-primary", WHITE, palette.primary[500]),
        ("primary-dark-on-white", palette.primary[700], WHITE),
        ("neutral-text-on-white", palette.neutral[700], WHITE),
        ("muted-text-on-white", palette.neutral[500], WHITE),
        ("error-on-white", palette.error[500], WHITE),
        ("success-on-white", palette.success[500], WHITE),
    ]

    return {
        name: validate_accessibility(fg, bg, ContrastLevel.AA) for name, fg, bg in combinations
    }
