"""Translate a theme configuration into CSS custom properties.

``generate_css_variables`` is the single source of truth for the variable
map shared by the web preview and the PDF documents. It is a pure function:
the same theme always yields the same, identically ordered mapping.
"""

import re

from cv_craft.models.theme import TextStyle, ThemeConfig
from cv_craft.theme.colors import (
    DEFAULT_MUTED,
    DEFAULT_ON_MUTED,
    DEFAULT_ON_TERTIARY,
    DEFAULT_TERTIARY,
    hex_to_rgba,
    resolve_color_pair,
    resolve_semantic_color,
)

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-z%]*)\s*$", re.IGNORECASE)
_LENGTH_RE = re.compile(r"^(\d+(?:\.\d+)?)(mm|px|rem|%)?$")
_BARE_NUMBER_RE = re.compile(r"^\d+(\.\d+)?$")

SHADOWS = {
    "none": "none",
    "sm": "0 1px 2px rgba(0, 0, 0, 0.05)",
    "md": "0 4px 6px rgba(0, 0, 0, 0.1)",
    "lg": "0 10px 15px rgba(0, 0, 0, 0.1)",
    "xl": "0 20px 25px rgba(0, 0, 0, 0.15)",
}

PHOTO_FILTERS = {
    "none": "none",
    "grayscale": "grayscale(100%)",
    "sepia": "sepia(100%)",
}


def calculate_font_size(scale: float, base_font_size: str) -> str:
    """Scale a base size, keeping its unit: ``(1.6, "10pt") -> "16.0pt"``."""
    match = _SIZE_RE.match(base_font_size)
    if not match:
        return base_font_size
    value, unit = match.groups()
    return f"{float(value) * scale:.1f}{unit}"


def ensure_margin_units(value: str | float | None, default: str = "20mm") -> str:
    """Give bare numeric margins an ``mm`` unit; empty values take the default."""
    if value is None or value == "":
        return default
    text = str(value).strip()
    if isinstance(value, float) and value.is_integer():
        text = str(int(value))
    if _BARE_NUMBER_RE.match(text):
        return f"{text}mm"
    return text


def calculate_main_width(page_width: str, sidebar_width: str) -> str:
    """Main column width as page minus sidebar, or a ``calc()`` for mixed units."""
    page = _LENGTH_RE.match(page_width)
    sidebar = _LENGTH_RE.match(sidebar_width)
    if page and sidebar:
        page_unit = page.group(2) or "mm"
        sidebar_unit = sidebar.group(2) or "mm"
        if page_unit == sidebar_unit and page_unit != "%":
            width = float(page.group(1)) - float(sidebar.group(1))
            return f"{width:g}{page_unit}"
    return f"calc({page_width} - {sidebar_width})"


def _styled_color(style: TextStyle, config: ThemeConfig, fallback: str) -> str:
    return (
        resolve_semantic_color(style.color_key, config, style.color_opacity)
        or style.color
        or fallback
    )


def _text_style_variables(
    prefix: str,
    style: TextStyle,
    config: ThemeConfig,
    *,
    font_size: str,
    font_weight: int,
    color: str,
    line_height: float,
    defaults: dict[str, str],
) -> dict[str, str]:
    """Variables shared by the name, section header and job title styles."""
    return {
        f"--{prefix}-font-size": style.font_size or font_size,
        f"--{prefix}-font-weight": str(style.font_weight or font_weight),
        f"--{prefix}-color": _styled_color(style, config, color),
        f"--{prefix}-letter-spacing": style.letter_spacing or defaults["letter_spacing"],
        f"--{prefix}-text-transform": style.text_transform or defaults["text_transform"],
        f"--{prefix}-line-height": f"{style.line_height or line_height:g}",
        f"--{prefix}-font-style": style.font_style or "normal",
        f"--{prefix}-margin-top": style.margin_top or defaults["margin_top"],
        f"--{prefix}-margin-bottom": style.margin_bottom or defaults["margin_bottom"],
        f"--{prefix}-padding": style.padding or defaults["padding"],
        f"--{prefix}-shadow": SHADOWS.get(style.shadow, "none"),
    }


def generate_css_variables(config: ThemeConfig) -> dict[str, str]:
    """Generate the CSS custom property map for a theme.

    Args:
        config: Theme configuration.

    Returns:
        Mapping of ``--variable-name`` to CSS value.
    """
    colors = config.colors
    typography = config.typography
    layout = config.layout
    components = config.components
    scale = typography.font_scale
    base = typography.base_font_size or "10pt"

    margin = layout.page_margin
    margin_top = ensure_margin_units(margin.top)
    margin_right = ensure_margin_units(margin.right)
    margin_bottom = ensure_margin_units(margin.bottom)
    margin_left = ensure_margin_units(margin.left)

    tertiary = colors.tertiary or colors.accent or DEFAULT_TERTIARY
    tags = components.tags
    tag_base, tag_on = resolve_color_pair(tags.color_pair, config)

    links = components.links
    contact = components.contact_info
    photo = components.profile_photo
    date_line = components.date_line
    org = components.organization_name

    variables: dict[str, str] = {
        # Color pairs
        "--primary-color": colors.primary,
        "--on-primary-color": colors.on_primary,
        "--secondary-color": colors.secondary,
        "--on-secondary-color": colors.on_secondary,
        "--tertiary-color": tertiary,
        "--on-tertiary-color": colors.on_tertiary or DEFAULT_ON_TERTIARY,
        "--muted-color": colors.muted or DEFAULT_MUTED,
        "--on-muted-color": colors.on_muted or DEFAULT_ON_MUTED,
        "--background-color": colors.background,
        "--on-background-color": colors.text.primary,
        "--custom1-color": colors.custom1,
        "--on-custom1-color": colors.on_custom1,
        "--custom2-color": colors.custom2,
        "--on-custom2-color": colors.on_custom2,
        "--custom3-color": colors.custom3,
        "--on-custom3-color": colors.on_custom3,
        "--custom4-color": colors.custom4,
        "--on-custom4-color": colors.on_custom4,
        # Older stylesheets still read these names
        "--accent-color": tertiary,
        "--surface-color": colors.secondary,
        "--text-color": colors.text.primary,
        "--text-secondary": colors.text.secondary,
        "--text-muted": colors.text.muted,
        "--border-color": colors.borders,
        # Links
        "--link-color": (
            resolve_semantic_color(links.color_key, config)
            or links.color
            or colors.links.default
        ),
        "--link-hover-color": (
            resolve_semantic_color(links.hover_color_key, config)
            or links.hover_color
            or colors.links.hover
        ),
        "--link-font-weight": str(links.font_weight),
        # Typography
        "--font-family": typography.font_family.body,
        "--heading-font-family": typography.font_family.heading,
        "--monospace-font-family": typography.font_family.monospace,
        "--base-font-size": base,
        "--title-font-size": calculate_font_size(scale.h1, base),
        "--h2-font-size": calculate_font_size(scale.h2, base),
        "--h3-font-size": calculate_font_size(scale.h3, base),
        "--body-font-size": calculate_font_size(scale.body, base),
        "--small-font-size": calculate_font_size(scale.small, base),
        "--tiny-font-size": calculate_font_size(scale.tiny, base),
        "--tag-font-size": calculate_font_size(scale.tag, base),
        "--date-line-font-size": calculate_font_size(scale.date_line, base),
        "--inline-code-font-size": calculate_font_size(scale.inline_code, base),
        "--heading-weight": str(typography.font_weight.heading),
        "--subheading-weight": str(typography.font_weight.subheading),
        "--body-weight": str(typography.font_weight.body),
        "--bold-weight": str(typography.font_weight.bold),
        "--heading-line-height": f"{typography.line_height.heading:g}",
        "--body-line-height": f"{typography.line_height.body:g}",
        "--compact-line-height": f"{typography.line_height.compact:g}",
        # Layout
        "--page-width": layout.page_width or "210mm",
        "--page-margin-top": margin_top,
        "--page-margin-right": margin_right,
        "--page-margin-bottom": margin_bottom,
        "--page-margin-left": margin_left,
        "--section-spacing": layout.section_spacing or "24px",
        "--paragraph-spacing": layout.paragraph_spacing or "12px",
        "--sidebar-width": layout.sidebar_width or "84mm",
        "--main-width": calculate_main_width(
            layout.page_width or "210mm", layout.sidebar_width or "84mm"
        ),
        # Tags
        "--tag-bg-color": hex_to_rgba(tag_base, tags.background_opacity),
        "--tag-text-color": hex_to_rgba(tag_on, tags.text_opacity),
        "--tag-border-radius": tags.border_radius,
        "--tag-font-size-custom": tags.font_size or calculate_font_size(scale.tag, base),
        "--tag-font-weight": str(tags.font_weight),
        "--tag-padding": tags.padding or "4px 8px",
        "--tag-gap": tags.gap or "8px",
        # Date line
        "--date-line-color": (
            resolve_semantic_color(date_line.color_key, config, date_line.color_opacity)
            or date_line.color
            or colors.text.secondary
        ),
        "--date-line-font-size-custom": (
            date_line.font_size or calculate_font_size(scale.date_line, base)
        ),
        "--date-line-font-weight": str(date_line.font_weight),
        "--date-line-font-style": date_line.font_style or "italic",
        "--date-line-alignment": date_line.alignment or "right",
    }

    variables.update(
        _text_style_variables(
            "name",
            components.name,
            config,
            font_size=calculate_font_size(scale.h1, base),
            font_weight=700,
            color=colors.primary or "#0f172a",
            line_height=1.2,
            defaults={
                "letter_spacing": "-0.02em",
                "text_transform": "uppercase",
                "margin_top": "0px",
                "margin_bottom": "8px",
                "padding": "0px",
            },
        )
    )
    variables["--name-alignment"] = components.name.alignment or "left"

    variables.update(
        {
            # Contact
            "--contact-layout": contact.layout,
            "--contact-icon-size": contact.icon_size or "16px",
            "--contact-icon-color": (
                resolve_semantic_color(contact.icon_color_key, config)
                or contact.icon_color
                or colors.text.secondary
            ),
            "--contact-spacing": contact.spacing or "12px",
            "--contact-font-size": contact.font_size or calculate_font_size(scale.small, base),
            "--contact-color": contact.text_color or colors.text.secondary,
            # Photo
            "--profile-photo-size": photo.size or "160px",
            "--profile-photo-border-radius": photo.border_radius or "50%",
            "--profile-photo-border-width": photo.border_width,
            "--profile-photo-border-style": photo.border_style,
            "--profile-photo-border-color": photo.border_color,
            "--profile-photo-border": (
                f"{photo.border_width} {photo.border_style} {photo.border_color}"
            ),
            "--profile-photo-position": photo.position or "center",
            "--profile-photo-margin-bottom": photo.margin_bottom or "16px",
            "--profile-photo-opacity": f"{photo.opacity:g}",
            "--profile-photo-shadow": SHADOWS.get(photo.shadow, "none"),
            "--profile-photo-filter": PHOTO_FILTERS.get(photo.filter, "none"),
        }
    )

    section_header = components.section_header
    variables.update(
        _text_style_variables(
            "section-header",
            section_header,
            config,
            font_size=calculate_font_size(scale.h2, base),
            font_weight=700,
            color=colors.primary,
            line_height=1.2,
            defaults={
                "letter_spacing": "0.05em",
                "text_transform": "uppercase",
                "margin_top": "24px",
                "margin_bottom": "12px",
                "padding": "4px 12px",
            },
        )
    )
    variables["--section-header-border-bottom"] = section_header.border_bottom or "2px solid"
    variables["--section-header-border-color"] = colors.primary

    variables.update(
        _text_style_variables(
            "job-title",
            components.job_title,
            config,
            font_size=calculate_font_size(scale.h3, base),
            font_weight=600,
            color=colors.text.primary,
            line_height=1.3,
            defaults={
                "letter_spacing": "0em",
                "text_transform": "none",
                "margin_top": "0px",
                "margin_bottom": "4px",
                "padding": "0px",
            },
        )
    )

    variables.update(
        {
            # Organisation names
            "--org-name-font-size": org.font_size or calculate_font_size(scale.body, base),
            "--org-name-font-weight": str(org.font_weight or 500),
            "--org-name-color": _styled_color(org, config, colors.text.secondary),
            "--org-name-font-style": org.font_style or "normal",
            # Bullets
            "--bullet-level1-color": components.list.level1.color or colors.primary,
            "--bullet-level2-color": components.list.level2.color or colors.text.secondary,
            "--bullet-level3-color": components.list.level3.color or colors.text.muted,
            "--bullet-level1-indent": components.list.level1.indent or "20px",
            "--bullet-level2-indent": components.list.level2.indent or "40px",
            "--bullet-level3-indent": components.list.level3.indent or "60px",
            # Effects
            "--animation-duration": "0.2s" if config.advanced.animations else "0s",
            "--shadow-default": (
                "0 1px 3px rgba(0, 0, 0, 0.1)" if config.advanced.shadows else "none"
            ),
            "--shadow-hover": (
                "0 4px 12px rgba(0, 0, 0, 0.15)" if config.advanced.shadows else "none"
            ),
        }
    )
    return variables
