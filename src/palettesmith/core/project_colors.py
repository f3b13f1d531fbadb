"""
Project-specific semantic colors.

Each project type adds a fixed set of named colors on top of the base
palette: some are canonical hexes (stock levels, connection quality), others
derive from the primary color through the HSL adjusters.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable, Iterable

from .color_utils import adjust_lightness, adjust_saturation, expand_hex, rotate_hue
from .errors import InvalidArgumentError
from .ir import ProjectType

ProjectColors = dict[str, str]

# Keyword groups for custom needs, checked in order
_NEED_KEYWORDS: list[tuple[tuple[str, ...], str]] = [
    (("danger", "error", "delete"), "#ef4444"),
    (("success", "complete", "done"), "#22c55e"),
    (("warning", "caution", "pending"), "#f59e0b"),
    (("info", "notice", "blue"), "#3b82f6"),
    (("purple", "premium", "special"), "#8b5cf6"),
]

_JITTER_RANGE = 10


def _ecommerce_colors(primary: str) -> ProjectColors:
    return {
        # Pricing
        "price-original": adjust_lightness(primary, -10),
        "price-discount": "#dc2626",
        "price-sale": "#ef4444",
        # Stock
        "stock-high": "#22c55e",
        "stock-medium": "#f59e0b",
        "stock-low": "#ef4444",
        "stock-out": "#6b7280",
        # Shipping
        "shipping-free": "#059669",
        "shipping-express": "#8b5cf6",
        "shipping-standard": "#6b7280",
        # Product badges
        "product-new": "#3b82f6",
        "product-bestseller": "#f59e0b",
        "product-featured": rotate_hue(primary, 30),
        # Payment
        "secure-payment": "#22c55e",
        "payment-pending": "#f59e0b",
        "payment-failed": "#dc2626",
    }


def _dashboard_colors(primary: str) -> ProjectColors:
    return {
        # Metrics
        "metric-positive": "#22c55e",
        "metric-negative": "#ef4444",
        "metric-neutral": "#6b7280",
        "metric-trending-up": "#059669",
        "metric-trending-down": "#dc2626",
        # Chart series, spaced 60 degrees apart
        "chart-line-1": primary,
        "chart-line-2": rotate_hue(primary, 60),
        "chart-line-3": rotate_hue(primary, 120),
        "chart-line-4": rotate_hue(primary, 180),
        "chart-line-5": rotate_hue(primary, 240),
        # Presence
        "status-online": "#22c55e",
        "status-offline": "#6b7280",
        "status-busy": "#ef4444",
        "status-away": "#f59e0b",
        # Notifications
        "notification-high": "#dc2626",
        "notification-medium": "#f59e0b",
        "notification-low": "#3b82f6",
        "badge-new": adjust_saturation(primary, 20),
        "badge-updated": "#3b82f6",
    }


def _webrtc_colors(primary: str) -> ProjectColors:
    return {
        "camera-active": "#22c55e",
        "camera-inactive": "#ef4444",
        "camera-loading": "#f59e0b",
        "mic-active": "#22c55e",
        "mic-inactive": "#ef4444",
        "mic-muted": "#6b7280",
        "connection-excellent": "#22c55e",
        "connection-good": "#65a30d",
        "connection-fair": "#f59e0b",
        "connection-poor": "#ef4444",
        "connection-lost": "#991b1b",
        "recording-active": "#dc2626",
        "recording-paused": "#f59e0b",
        "recording-stopped": "#6b7280",
        "screen-sharing": "#8b5cf6",
        "screen-request": adjust_lightness(primary, -15),
        "participant-host": adjust_saturation(primary, 30),
        "participant-speaking": "#22c55e",
        "participant-muted": "#6b7280",
    }


def _blog_colors(primary: str) -> ProjectColors:
    return {
        # Categories
        "category-tech": primary,
        "category-design": rotate_hue(primary, 60),
        "category-business": rotate_hue(primary, 120),
        "category-personal": rotate_hue(primary, 180),
        # Tags
        "tag-featured": adjust_saturation(primary, 20),
        "tag-trending": "#f59e0b",
        "tag-new": "#3b82f6",
        # Post state
        "post-published": "#22c55e",
        "post-draft": "#6b7280",
        "post-scheduled": "#f59e0b",
        "post-archived": "#9ca3af",
        # Interactions
        "like-active": "#ef4444",
        "bookmark-active": "#f59e0b",
        "share-active": "#3b82f6",
        # Highlights
        "highlight-quote": adjust_lightness(primary, 30),
        "highlight-code": "#f3f4f6",
        "highlight-important": "#fef3c7",
    }


_GENERATORS: dict[ProjectType, Callable[[str], ProjectColors]] = {
    ProjectType.ECOMMERCE: _ecommerce_colors,
    ProjectType.DASHBOARD: _dashboard_colors,
    ProjectType.WEBRTC: _webrtc_colors,
    ProjectType.BLOG: _blog_colors,
    ProjectType.CUSTOM: lambda primary: {},
}


def need_offset(need: str) -> int:
    """Stable lightness offset in [-10, 10] for an unmatched need."""
    digest = hashlib.sha256(need.encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big") % (2 * _JITTER_RANGE + 1) - _JITTER_RANGE


def color_for_need(primary: str, need: str) -> str:
    """Pick a color for a free-form need such as ``"delete-button"``.

    Known keywords map to canonical status colors; anything else gets the
    primary with a small, reproducible lightness offset.
    """
    lowered = need.lower()
    for keywords, color in _NEED_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return color
    return adjust_lightness(primary, need_offset(lowered))


def generate_project_colors(
    project_type: ProjectType | str,
    primary_color: str,
    custom_needs: Iterable[str] | None = None,
) -> ProjectColors:
    """Generate the extension colors for a project type.

    Args:
        project_type: ecommerce | dashboard | webrtc | blog | custom
        primary_color: Brand color (3- or 6-digit hex).
        custom_needs: Extra names to add; existing names are not replaced.

    Returns:
        Ordered dict of kebab-case color names to ``#rrggbb`` values.
    """
    try:
        resolved = ProjectType(project_type)
    except ValueError:
        valid = ", ".join(p.value for p in ProjectType)
        raise InvalidArgumentError(
            f"Unknown project type '{project_type}'. Valid: {valid}"
        ) from None

    primary = expand_hex(primary_color)
    colors = _GENERATORS[resolved](primary)

    for need in custom_needs or ():
        if need not in colors:
            colors[need] = color_for_need(primary, need)

    return colors
