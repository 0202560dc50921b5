"""Tests for stylesheet generation."""

from cv_craft.models.theme import ThemeConfig
from cv_craft.styles import (
    all_pagination_css,
    background_layer_css,
    column_container_css,
    generate_cv_css,
    page_rule_css,
    pagination_css,
    resolve_column_colors,
    root_variables_css,
)
from cv_craft.theme import generate_css_variables


class TestRootVariables:
    """Tests for root_variables_css function."""

    def test_emits_root_block(self) -> None:
        """Test variables land in a :root block in order."""
        css = root_variables_css({"--a": "1px", "--b": "red"})
        assert css == ":root {\n  --a: 1px;\n  --b: red;\n}\n"


class TestPaginationCss:
    """Tests for page and break rules."""

    def test_page_rule_vertical_margins(self) -> None:
        """Test vertical margins repeat on every page and horizontal stay zero."""
        css = page_rule_css(margin_top="15mm", margin_bottom="25mm")
        assert "size: 210mm 297mm;" in css
        assert "margin: 15mm 0 25mm 0;" in css

    def test_keep_together_groups(self) -> None:
        """Test atomic groups avoid breaks and flowing groups allow them."""
        css = pagination_css()
        avoid_block = css.split(".entry-start,")[1].split("}")[0]
        assert ".entry-bullet-bridge" in avoid_block
        assert ".skill-category-block" in avoid_block
        assert "break-inside: avoid;" in avoid_block

        auto_block = css.split(".cv-section,")[1].split("}")[0]
        assert ".entry-bullets-continue" in auto_block
        assert "break-inside: auto;" in auto_block

    def test_headers_stick_to_content(self) -> None:
        """Test section headers never end a page."""
        assert "break-after: avoid;" in pagination_css().split("h2.section-header")[1]

    def test_all_pagination(self) -> None:
        """Test the combined stylesheet carries the page rule."""
        css = all_pagination_css(margin_top="10mm", margin_bottom="12mm")
        assert "margin: 10mm 0 12mm 0;" in css
        assert ".entry-bullet-bridge" in css


class TestColumnCss:
    """Tests for column placement and background layer rules."""

    def test_sidebar_container(self) -> None:
        """Test the sidebar sits at the left edge, 84mm wide."""
        css = column_container_css("sidebar", "0 6mm 0 20mm")
        assert "left: 0;" in css
        assert "width: 84mm;" in css
        assert "padding: 0 6mm 0 20mm;" in css
        assert "background: transparent;" in css

    def test_main_container(self) -> None:
        """Test the main column starts at 84mm and is 126mm wide."""
        css = column_container_css("main", "0 20mm 0 8mm")
        assert "left: 84mm;" in css
        assert "width: 126mm;" in css

    def test_background_layer(self) -> None:
        """Test both colors fill a zero-margin page."""
        css = background_layer_css("#eeeeee", "#ffffff")
        assert "margin: 0; }" in css
        assert "width: 84mm; height: 297mm; background: #eeeeee;" in css
        assert "width: 126mm; height: 297mm; background: #ffffff;" in css

    def test_resolve_column_colors(self, default_theme: ThemeConfig) -> None:
        """Test sidebar takes the surface color and main the background."""
        variables = generate_css_variables(default_theme)
        assert resolve_column_colors(default_theme, variables) == ("#64748b", "#ffffff")


class TestGenerateCvCss:
    """Tests for generate_cv_css function."""

    def test_variables_first_custom_last(self) -> None:
        """Test ordering of the stylesheet sections."""
        theme = ThemeConfig.model_validate({"advanced": {"customCss": ".mine { color: red; }"}})
        css = generate_cv_css(theme)
        assert css.startswith(":root {")
        assert css.rstrip().endswith(".mine { color: red; }")

    def test_optional_parts(self, default_theme: ThemeConfig) -> None:
        """Test the include flags."""
        full = generate_cv_css(default_theme, include_pagination=True)
        assert "@page" in full
        assert ".cv-content" in full

        bare = generate_cv_css(
            default_theme, include_two_column=False, include_advanced_effects=False
        )
        assert "@page" not in bare
        assert ".bg-sidebar" not in bare
        assert "/* Advanced effects */" not in bare

    def test_color_overrides(self, default_theme: ThemeConfig) -> None:
        """Test explicit column colors replace the theme's."""
        css = generate_cv_css(default_theme, sidebar_color="#010101", main_color="#020202")
        assert "background-color: #010101;" in css
        assert "background-color: #020202;" in css
