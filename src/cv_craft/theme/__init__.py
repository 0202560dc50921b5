"""Theme to CSS translation: color resolution, variables and web fonts."""

from cv_craft.theme.colors import hex_to_rgba, resolve_color_pair, resolve_semantic_color
from cv_craft.theme.fonts import (
    KNOWN_GOOGLE_FONTS,
    detect_google_fonts,
    extract_google_font,
    generate_google_fonts_url,
)
from cv_craft.theme.variables import (
    calculate_font_size,
    calculate_main_width,
    ensure_margin_units,
    generate_css_variables,
)

__all__ = [
    "KNOWN_GOOGLE_FONTS",
    "calculate_font_size",
    "calculate_main_width",
    "detect_google_fonts",
    "ensure_margin_units",
    "extract_google_font",
    "generate_css_variables",
    "generate_google_fonts_url",
    "hex_to_rgba",
    "resolve_color_pair",
    "resolve_semantic_color",
]
