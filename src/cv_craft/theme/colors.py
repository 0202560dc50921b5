"""Semantic color resolution against a theme's palette."""

import re

from cv_craft.models.theme import ThemeConfig

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

DEFAULT_TERTIARY = "#f59e0b"
DEFAULT_ON_TERTIARY = "#ffffff"
DEFAULT_MUTED = "#f1f5f9"
DEFAULT_ON_MUTED = "#334155"

COLOR_PAIR_KEYS = (
    "primary",
    "secondary",
    "tertiary",
    "muted",
    "custom1",
    "custom2",
    "custom3",
    "custom4",
)


def hex_to_rgba(hex_color: str, opacity: float) -> str:
    """Convert ``#rgb`` / ``#rrggbb`` to an ``rgba()`` string.

    Values that are not hex colors (named colors, ``var(...)``) are returned
    unchanged since their channels cannot be recovered here.
    """
    match = _HEX_RE.match(hex_color.strip())
    if not match:
        return hex_color
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {opacity:g})"


def _tertiary(config: ThemeConfig) -> str:
    return config.colors.tertiary or config.colors.accent or DEFAULT_TERTIARY


def _semantic_palette(config: ThemeConfig) -> dict[str, str]:
    colors = config.colors
    return {
        "primary": colors.primary,
        "secondary": colors.secondary,
        "tertiary": _tertiary(config),
        "muted": colors.muted or DEFAULT_MUTED,
        "text-primary": colors.text.primary,
        "text-secondary": colors.text.secondary,
        "text-muted": colors.text.muted,
        "custom1": colors.custom1,
        "custom2": colors.custom2,
        "custom3": colors.custom3,
        "custom4": colors.custom4,
        "on-primary": colors.on_primary,
        "on-secondary": colors.on_secondary,
        "on-tertiary": colors.on_tertiary or DEFAULT_ON_TERTIARY,
        "on-muted": colors.on_muted or DEFAULT_ON_MUTED,
        "on-custom1": colors.on_custom1,
        "on-custom2": colors.on_custom2,
        "on-custom3": colors.on_custom3,
        "on-custom4": colors.on_custom4,
    }


def resolve_semantic_color(
    color_key: str | None, config: ThemeConfig, opacity: float = 1.0
) -> str | None:
    """Resolve a semantic key such as ``primary`` or ``text-secondary``.

    Args:
        color_key: Semantic color key, or None.
        config: Theme supplying the palette.
        opacity: 0-1; anything below 1 yields an ``rgba()`` value.

    Returns:
        The resolved color, or None when no key is given so callers can fall
        back to a literal color. Unknown keys resolve to the primary text color.
    """
    if not color_key:
        return None
    color = _semantic_palette(config).get(color_key, config.colors.text.primary)
    if opacity >= 1.0:
        return color
    return hex_to_rgba(color, opacity)


def resolve_color_pair(pair: str, config: ThemeConfig) -> tuple[str, str]:
    """Return ``(base, on)`` colors for a pair key, defaulting to tertiary."""
    colors = config.colors
    pairs = {
        "primary": (colors.primary, colors.on_primary),
        "secondary": (colors.secondary, colors.on_secondary),
        "tertiary": (_tertiary(config), colors.on_tertiary or DEFAULT_ON_TERTIARY),
        "muted": (colors.muted or DEFAULT_MUTED, colors.on_muted or DEFAULT_ON_MUTED),
        "custom1": (colors.custom1, colors.on_custom1),
        "custom2": (colors.custom2, colors.on_custom2),
        "custom3": (colors.custom3, colors.on_custom3),
        "custom4": (colors.custom4, colors.on_custom4),
    }
    return pairs.get(pair, pairs["tertiary"])
