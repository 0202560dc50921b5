"""Stylesheet composition from a theme."""

from cv_craft.models.theme import ThemeConfig
from cv_craft.styles.layout import (
    fixed_background_css,
    two_column_header_css,
    two_column_layout_css,
)
from cv_craft.styles.pagination import all_pagination_css
from cv_craft.styles.semantic import (
    advanced_effects_css,
    base_css,
    contact_css,
    name_header_css,
    photo_css,
    semantic_css,
)
from cv_craft.theme.variables import generate_css_variables

DEFAULT_SIDEBAR_COLOR = "#f5f0e8"
DEFAULT_MAIN_COLOR = "#ffffff"


def root_variables_css(variables: dict[str, str]) -> str:
    """Emit a variable map as a ``:root`` block."""
    body = "\n".join(f"  {name}: {value};" for name, value in variables.items())
    return f":root {{\n{body}\n}}\n"


def resolve_column_colors(config: ThemeConfig, variables: dict[str, str]) -> tuple[str, str]:
    """Background colors for the sidebar and main columns."""
    sidebar = variables.get("--surface-color") or config.colors.secondary or DEFAULT_SIDEBAR_COLOR
    main = variables.get("--background-color") or config.colors.background or DEFAULT_MAIN_COLOR
    return sidebar, main


def custom_css(config: ThemeConfig) -> str:
    """User CSS from the theme, appended last so it wins ties."""
    css = config.advanced.custom_css.strip()
    return f"\n/* Custom */\n{css}\n" if css else ""


def component_css() -> str:
    """Rules for every renderer fragment, shared by all documents."""
    return base_css() + photo_css() + contact_css() + name_header_css() + semantic_css()


def generate_cv_css(
    config: ThemeConfig,
    *,
    include_two_column: bool = True,
    include_pagination: bool = False,
    include_advanced_effects: bool = True,
    sidebar_color: str | None = None,
    main_color: str | None = None,
) -> str:
    """Full stylesheet for a single two-column CV document.

    Args:
        config: Theme configuration.
        include_two_column: Add column skins, flex layout and fixed backgrounds.
        include_pagination: Add ``@page`` and break rules.
        include_advanced_effects: Add shadow/transition effects.
        sidebar_color: Override for the sidebar background.
        main_color: Override for the main column background.

    Returns:
        CSS text, variables first and custom CSS last.
    """
    variables = generate_css_variables(config)
    default_sidebar, default_main = resolve_column_colors(config, variables)

    css = root_variables_css(variables) + component_css()
    if include_pagination:
        css += all_pagination_css(
            margin_top=variables["--page-margin-top"],
            margin_bottom=variables["--page-margin-bottom"],
        )
    if include_two_column:
        css += two_column_header_css()
        css += two_column_layout_css()
        css += fixed_background_css(sidebar_color or default_sidebar, main_color or default_main)
    if include_advanced_effects:
        css += advanced_effects_css()
    return css + custom_css(config)
