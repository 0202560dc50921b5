"""CSS generation: pure functions returning stylesheet text."""

from cv_craft.styles.layout import (
    background_layer_css,
    column_container_css,
    fixed_background_css,
    two_column_header_css,
    two_column_layout_css,
)
from cv_craft.styles.pagination import (
    all_pagination_css,
    column_break_css,
    page_rule_css,
    pagination_css,
)
from cv_craft.styles.semantic import (
    advanced_effects_css,
    base_css,
    contact_css,
    name_header_css,
    photo_css,
    semantic_css,
)
from cv_craft.styles.stylesheet import (
    component_css,
    custom_css,
    generate_cv_css,
    resolve_column_colors,
    root_variables_css,
)

__all__ = [
    "advanced_effects_css",
    "all_pagination_css",
    "background_layer_css",
    "base_css",
    "column_break_css",
    "column_container_css",
    "component_css",
    "contact_css",
    "custom_css",
    "fixed_background_css",
    "generate_cv_css",
    "name_header_css",
    "page_rule_css",
    "pagination_css",
    "photo_css",
    "resolve_column_colors",
    "root_variables_css",
    "semantic_css",
    "two_column_header_css",
    "two_column_layout_css",
]
