"""Standalone HTML documents for the overlay export and the web preview.

The export renders three independent A4 documents:

- sidebar: photo, contact block and sidebar sections in the left 84mm
- main: name, job title and main sections in the right 126mm
- background: one page holding both column colors

Column documents have transparent backgrounds outside their own content so
the layers can be stacked without hiding each other.
"""

import logging

from pydantic import BaseModel, ConfigDict

from cv_craft.geometry import MAIN_INNER_PADDING_MM, SIDEBAR_INNER_PADDING_MM
from cv_craft.models.cv import CVContent, Frontmatter, Section
from cv_craft.models.theme import ThemeConfig
from cv_craft.rendering.classify import SectionKind, classify_section, split_sections
from cv_craft.rendering.contact import render_contact_info
from cv_craft.rendering.escape import escape_html
from cv_craft.rendering.photo import render_profile_photo
from cv_craft.rendering.sections import render_section
from cv_craft.rendering.skills import render_skills_section
from cv_craft.styles import (
    advanced_effects_css,
    background_layer_css,
    column_break_css,
    column_container_css,
    component_css,
    custom_css,
    generate_cv_css,
    page_rule_css,
    pagination_css,
    resolve_column_colors,
    root_variables_css,
    two_column_header_css,
)
from cv_craft.theme import detect_google_fonts, generate_css_variables, generate_google_fonts_url

logger = logging.getLogger(__name__)

FONTS_LOADED_SCRIPT = (
    "<script>document.fonts.ready.then(function () "
    "{ document.body.classList.add('fonts-loaded'); });</script>"
)

SIDEBAR_INNER_PADDING = f"{SIDEBAR_INNER_PADDING_MM}mm"
MAIN_INNER_PADDING = f"{MAIN_INNER_PADDING_MM}mm"


class ExportDocuments(BaseModel):
    """The three HTML documents rendered for one export."""

    model_config = ConfigDict(frozen=True)

    sidebar: str
    main: str
    background: str


def _style_block(css: str) -> str:
    # A "</style>" inside theme values must not end the block
    return "<style>\n" + css.replace("</", "<\\/") + "\n</style>"


def _fonts_link(fonts_url: str) -> str:
    if not fonts_url:
        return ""
    return (
        '<link rel="preconnect" href="https://fonts.googleapis.com">\n'
        '<link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>\n'
        f'<link href="{escape_html(fonts_url)}" rel="stylesheet">'
    )


def _html_document(
    title: str, css: str, body: str, fonts_url: str = "", script: bool = True
) -> str:
    head = [
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>{escape_html(title)}</title>",
    ]
    if fonts_url:
        head.append(_fonts_link(fonts_url))
    head.append(_style_block(css))
    tail = f"\n{FONTS_LOADED_SCRIPT}" if script else ""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n" + "\n".join(head) + "\n</head>\n"
        f"<body>\n{body}{tail}\n</body>\n"
        "</html>\n"
    )


def theme_fonts_url(config: ThemeConfig) -> str:
    """Google Fonts stylesheet URL for the theme, empty for system fonts."""
    return generate_google_fonts_url(detect_google_fonts(config))


def render_sidebar_sections(
    sections: list[Section], config: ThemeConfig, pagination: bool = False
) -> str:
    """Render sidebar sections, giving skills sections the tag treatment."""
    parts = []
    for section in sections:
        if classify_section(section) is SectionKind.SIDEBAR_SKILLS:
            parts.append(render_skills_section(section, config))
        else:
            parts.append(render_section(section, pagination))
    return "\n".join(parts)


def render_main_header(frontmatter: Frontmatter) -> str:
    """Name heading and optional job title for the main column."""
    html = f"<h1>{escape_html(frontmatter.name or 'Your Name')}</h1>"
    if frontmatter.title:
        html += f'\n<p class="job-title">{escape_html(frontmatter.title)}</p>'
    return html


def _column_css(column: str, config: ThemeConfig, variables: dict[str, str]) -> str:
    # Outer page margins become padding on the outside edge of each column
    if column == "sidebar":
        padding = f"0 {SIDEBAR_INNER_PADDING} 0 {variables['--page-margin-left']}"
    else:
        padding = f"0 {variables['--page-margin-right']} 0 {MAIN_INNER_PADDING}"
    return (
        root_variables_css(variables)
        + component_css()
        + two_column_header_css()
        + page_rule_css(
            margin_top=variables["--page-margin-top"],
            margin_bottom=variables["--page-margin-bottom"],
        )
        + pagination_css()
        + column_break_css()
        + column_container_css(column, padding)
        + advanced_effects_css()
        + custom_css(config)
    )


def _column_body(column: str, content_html: str) -> str:
    content_class = "sidebar" if column == "sidebar" else "main-content"
    return (
        '<div class="column-container">\n'
        f'<div class="column-content {content_class}">\n{content_html}\n</div>\n'
        "</div>"
    )


def _inline_photo(photo: str | None) -> str | None:
    if not photo or photo.strip().lower().startswith("data:"):
        return photo
    logger.warning("Skipping remote photo %s in PDF export, store it as an asset instead", photo)
    return None


def build_sidebar_document(
    frontmatter: Frontmatter,
    sections: list[Section],
    config: ThemeConfig,
    photo_data_uri: str | None = None,
) -> str:
    """Sidebar column document: photo, contact block, then sidebar sections.

    The photo block is left out entirely when there is no photo source. Only
    inlined photos are used: a frontmatter photo URL would be fetched from
    inside the headless page, so it is skipped unless it is a data URI.
    """
    variables = generate_css_variables(config)
    parts = [
        render_profile_photo(
            photo_data_uri or _inline_photo(frontmatter.photo), None, placeholder=False
        ),
        render_contact_info(frontmatter, layout="vertical", show_icons=True, linkable=True),
        render_sidebar_sections(sections, config, pagination=True),
    ]
    content_html = "\n".join(part for part in parts if part)
    return _html_document(
        "CV - sidebar",
        _column_css("sidebar", config, variables),
        _column_body("sidebar", content_html),
        fonts_url=theme_fonts_url(config),
    )


def build_main_document(
    frontmatter: Frontmatter, sections: list[Section], config: ThemeConfig
) -> str:
    """Main column document: name, job title, then main sections in pagination mode."""
    variables = generate_css_variables(config)
    content_html = "\n".join(
        part
        for part in (
            render_main_header(frontmatter),
            "\n".join(render_section(section, pagination=True) for section in sections),
        )
        if part
    )
    return _html_document(
        "CV - main",
        _column_css("main", config, variables),
        _column_body("main", content_html),
        fonts_url=theme_fonts_url(config),
    )


def build_background_document(sidebar_color: str, main_color: str) -> str:
    """Single-page document painting both column colors edge to edge."""
    body = '<div class="bg">\n<div class="sidebar-bg"></div>\n<div class="main-bg"></div>\n</div>'
    return _html_document(
        "CV - background",
        background_layer_css(sidebar_color, main_color),
        body,
        script=False,
    )


def build_export_documents(
    content: CVContent, config: ThemeConfig, photo_data_uri: str | None = None
) -> ExportDocuments:
    """Split the sections and build the sidebar, main and background documents."""
    split = split_sections(content.sections)
    logger.info(
        "Building export documents: %d sidebar sections, %d main sections",
        len(split.sidebar),
        len(split.main),
    )
    sidebar_color, main_color = resolve_column_colors(config, generate_css_variables(config))
    return ExportDocuments(
        sidebar=build_sidebar_document(content.frontmatter, split.sidebar, config, photo_data_uri),
        main=build_main_document(content.frontmatter, split.main, config),
        background=build_background_document(sidebar_color, main_color),
    )


def build_preview_document(
    content: CVContent, config: ThemeConfig, photo_data_uri: str | None = None
) -> str:
    """Single-document web preview using the same fragments as the export.

    Columns are laid out with flexbox over fixed background strips. Entries
    render without pagination groups and a placeholder stands in for a
    missing photo.
    """
    frontmatter = content.frontmatter
    split = split_sections(content.sections)
    sidebar_html = "\n".join(
        part
        for part in (
            render_profile_photo(photo_data_uri, frontmatter.photo),
            render_contact_info(frontmatter, layout="vertical"),
            render_sidebar_sections(split.sidebar, config),
        )
        if part
    )
    main_html = "\n".join(
        [render_main_header(frontmatter)]
        + [render_section(section) for section in split.main]
    )
    body = (
        '<div class="bg-sidebar"></div>\n'
        '<div class="bg-main"></div>\n'
        '<div class="cv-content">\n'
        f'<div class="sidebar-container sidebar">\n{sidebar_html}\n</div>\n'
        f'<div class="main-content">\n{main_html}\n</div>\n'
        "</div>"
    )
    return _html_document(
        frontmatter.name or "CV",
        generate_cv_css(config),
        body,
        fonts_url=theme_fonts_url(config),
    )
