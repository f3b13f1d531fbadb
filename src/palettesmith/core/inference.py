"""
Keyword-based color inference from natural-language project descriptions.

Each meaningful word of a description is matched, in order, against:

1. Direct patterns (``"premium"`` -> purple, ``"loss"`` -> red, ...)
2. Semantic keyword categories (positive, negative, warning, info, special)
3. Domain regexes that derive a color from the primary (payments, users,
   data, communication, time)

Words with no match are skipped, as are words whose color is already taken.
"""

from __future__ import annotations

import re

from .color_utils import adjust_lightness, adjust_saturation, expand_hex, rotate_hue
from .ir import InferredColor

MAX_WORDS = 50

_WORD_PATTERN = re.compile(r"[a-z]{2,}")

_STOP_WORDS = frozenset(
    {"the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by"}
)

# Substring -> color; first match wins
_COLOR_PATTERNS: dict[str, str] = {
    # Status / emotion
    "danger": "#dc2626",
    "error": "#ef4444",
    "warning": "#f59e0b",
    "success": "#22c55e",
    "info": "#3b82f6",
    "love": "#ec4899",
    "happy": "#fbbf24",
    "calm": "#06b6d4",
    "energy": "#f97316",
    "trust": "#3b82f6",
    # Functional
    "premium": "#8b5cf6",
    "discount": "#dc2626",
    "new": "#22c55e",
    "popular": "#f59e0b",
    "featured": "#8b5cf6",
    # State
    "active": "#22c55e",
    "inactive": "#6b7280",
    "pending": "#f59e0b",
    "completed": "#22c55e",
    "cancelled": "#ef4444",
    # Business
    "profit": "#22c55e",
    "loss": "#ef4444",
    "neutral": "#6b7280",
    "growth": "#059669",
    "decline": "#dc2626",
}

# category -> (keywords, color)
_SEMANTIC_CATEGORIES: dict[str, tuple[tuple[str, ...], str]] = {
    "positive": (
        (
            "success",
            "complete",
            "done",
            "good",
            "best",
            "premium",
            "featured",
            "favorite",
            "like",
            "love",
        ),
        "#22c55e",
    ),
    "negative": (
        ("error", "fail", "danger", "bad", "delete", "remove", "cancel", "reject"),
        "#ef4444",
    ),
    "warning": (
        ("warning", "caution", "pending", "wait", "review", "draft", "temporary"),
        "#f59e0b",
    ),
    "info": (("info", "detail", "note", "tip", "help", "guide", "tutorial"), "#3b82f6"),
    "special": (("premium", "vip", "pro", "plus", "featured", "highlight", "important"), "#8b5cf6"),
}

# (regex, label, operation, amount) applied to the primary color
_DOMAIN_RULES: list[tuple[re.Pattern[str], str, str, int]] = [
    (re.compile(r"pay|payment|card|bank|money|price|cost|fee"), "payment", "lightness", -15),
    (re.compile(r"user|account|profile|member|login|auth"), "user", "saturation", -20),
    (re.compile(r"data|chart|graph|metric|analytics|report"), "data", "hue", 180),
    (re.compile(r"connect|network|signal|wifi|call|message"), "communication", "hue", 120),
    (re.compile(r"time|date|schedule|calendar|event|deadline"), "time", "lightness", 25),
]


def extract_meaningful_words(text: str) -> list[str]:
    """Lowercase words of two or more letters, minus stop words, capped at 50."""
    words = _WORD_PATTERN.findall(text.lower())
    return [word for word in words if word not in _STOP_WORDS][:MAX_WORDS]


def color_variable_name(word: str) -> str:
    """Kebab-case CSS variable name for a word."""
    name = re.sub(r"[\s_]+", "-", word.lower())
    name = re.sub(r"[^a-z0-9-]", "", name)
    name = re.sub(r"-+", "-", name)
    return name.strip("-")


def _derive(primary: str, operation: str, amount: int) -> str:
    if operation == "lightness":
        return adjust_lightness(primary, amount)
    if operation == "saturation":
        return adjust_saturation(primary, amount)
    return rotate_hue(primary, amount)


def infer_single_color(word: str, primary_color: str) -> tuple[str, str] | None:
    """Return ``(color, reasoning)`` for one word, or None if nothing matches."""
    for pattern, color in _COLOR_PATTERNS.items():
        if pattern in word:
            return color, f'Keyword "{word}" matches the "{pattern}" pattern'

    for category, (keywords, color) in _SEMANTIC_CATEGORIES.items():
        if any(keyword in word for keyword in keywords):
            return color, f'"{word}" falls in the {category} category'

    for regex, label, operation, amount in _DOMAIN_RULES:
        if regex.search(word):
            return (
                _derive(primary_color, operation, amount),
                f'Detected {label}-related keyword "{word}"',
            )

    return None


def infer_colors_from_text(
    text: str, primary_color: str, max_colors: int = 20
) -> list[InferredColor]:
    """Infer named colors from a project description.

    Args:
        text: Free-form description.
        primary_color: Brand color used by the domain rules.
        max_colors: Upper bound on the number of results.

    Returns:
        Inferred colors in word order, each color used at most once.
    """
    primary = expand_hex(primary_color)
    inferred: list[InferredColor] = []
    used: set[str] = set()

    for word in extract_meaningful_words(text):
        if len(inferred) >= max_colors:
            break
        match = infer_single_color(word, primary)
        if match is None:
            continue
        color, reasoning = match
        if color in used:
            continue
        inferred.append(
            InferredColor(name=color_variable_name(word), color=color, reasoning=reasoning)
        )
        used.add(color)

    return inferred
