"""Web font detection and Google Fonts stylesheet URLs."""

from cv_craft.models.theme import ThemeConfig

GOOGLE_FONTS_CSS_URL = "https://fonts.googleapis.com/css2"

# Families served by Google Fonts; anything else is treated as a system font
KNOWN_GOOGLE_FONTS = frozenset(
    {
        "Inter",
        "Roboto",
        "Open Sans",
        "Lato",
        "Montserrat",
        "Poppins",
        "IBM Plex Sans",
        "IBM Plex Serif",
        "Source Sans Pro",
        "Source Serif Pro",
        "Crimson Text",
        "Crimson Pro",
        "Playfair Display",
        "Merriweather",
        "Libre Baskerville",
        "EB Garamond",
        "Cormorant Garamond",
        "Spectral",
        "Fira Sans",
        "Nunito",
        "Raleway",
        "Work Sans",
        "DM Sans",
        "Mulish",
        "Cardo",
        "Josefin Sans",
        "Oswald",
        "PT Sans",
        "PT Serif",
        "Quicksand",
        "Rubik",
        "Ubuntu",
        "Cabin",
        "Barlow",
        "Manrope",
        "Space Grotesk",
    }
)

FONT_WEIGHTS = (400, 500, 600, 700)


def extract_google_font(font_stack: str | None) -> str | None:
    """Return the first family of a CSS font stack if it is a known web font."""
    if not font_stack:
        return None
    first = font_stack.split(",")[0].strip().strip("'\"").strip()
    return first if first in KNOWN_GOOGLE_FONTS else None


def detect_google_fonts(config: ThemeConfig) -> list[str]:
    """List the heading and body web fonts a theme uses, heading first, no duplicates."""
    fonts: list[str] = []
    for stack in (config.typography.font_family.heading, config.typography.font_family.body):
        family = extract_google_font(stack)
        if family and family not in fonts:
            fonts.append(family)
    return fonts


def generate_google_fonts_url(fonts: list[str]) -> str:
    """Build a CSS2 API URL loading regular and italic 400-700 for each family.

    Args:
        fonts: Family names, e.g. ``["Inter", "Open Sans"]``.

    Returns:
        Stylesheet URL, or an empty string when there is nothing to load.
    """
    unique = list(dict.fromkeys(font for font in fonts if font))
    if not unique:
        return ""
    axes = ";".join([f"0,{w}" for w in FONT_WEIGHTS] + [f"1,{w}" for w in FONT_WEIGHTS])
    families = "&".join(f"family={font.replace(' ', '+')}:ital,wght@{axes}" for font in unique)
    return f"{GOOGLE_FONTS_CSS_URL}?{families}&display=swap"
