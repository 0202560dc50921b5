"""Tests for theme color resolution, web fonts and CSS variables."""

import pytest

from cv_craft.models.theme import ThemeConfig
from cv_craft.theme import (
    calculate_font_size,
    calculate_main_width,
    detect_google_fonts,
    ensure_margin_units,
    extract_google_font,
    generate_css_variables,
    generate_google_fonts_url,
    hex_to_rgba,
    resolve_color_pair,
    resolve_semantic_color,
)


class TestColors:
    """Tests for color helpers."""

    def test_hex_to_rgba(self) -> None:
        """Test six and three digit hex colors."""
        assert hex_to_rgba("#f59e0b", 0.2) == "rgba(245, 158, 11, 0.2)"
        assert hex_to_rgba("#fff", 1.0) == "rgba(255, 255, 255, 1)"

    def test_hex_to_rgba_passthrough(self) -> None:
        """Test non-hex colors are returned as-is."""
        assert hex_to_rgba("var(--x)", 0.5) == "var(--x)"
        assert hex_to_rgba("red", 0.5) == "red"

    def test_resolve_semantic_color(self, default_theme: ThemeConfig) -> None:
        """Test semantic keys map onto the palette."""
        assert resolve_semantic_color("primary", default_theme) == "#2563eb"
        assert resolve_semantic_color("text-secondary", default_theme) == "#475569"
        assert resolve_semantic_color("on-tertiary", default_theme) == "#ffffff"

    def test_resolve_semantic_color_opacity(self, default_theme: ThemeConfig) -> None:
        """Test partial opacity yields rgba."""
        assert resolve_semantic_color("primary", default_theme, 0.5) == "rgba(37, 99, 235, 0.5)"

    def test_resolve_semantic_color_without_key(self, default_theme: ThemeConfig) -> None:
        """Test no key gives None so literal colors can apply."""
        assert resolve_semantic_color(None, default_theme) is None
        assert resolve_semantic_color("", default_theme) is None

    def test_unknown_key_falls_back_to_text(self, default_theme: ThemeConfig) -> None:
        """Test unknown keys resolve to the primary text color."""
        assert resolve_semantic_color("sparkly", default_theme) == "#0f172a"

    def test_tertiary_from_accent(self) -> None:
        """Test old themes with only an accent color."""
        theme = ThemeConfig.model_validate({"colors": {"tertiary": None, "accent": "#123456"}})
        assert resolve_semantic_color("tertiary", theme) == "#123456"

    def test_color_pair(self, default_theme: ThemeConfig) -> None:
        """Test pairs and the tertiary fallback."""
        assert resolve_color_pair("primary", default_theme) == ("#2563eb", "#ffffff")
        assert resolve_color_pair("nope", default_theme) == ("#f59e0b", "#ffffff")


class TestFonts:
    """Tests for web font detection."""

    def test_extract_google_font(self) -> None:
        """Test the first family of a stack is checked."""
        assert extract_google_font("'Open Sans', Arial, sans-serif") == "Open Sans"
        assert extract_google_font('"Inter", system-ui') == "Inter"
        assert extract_google_font("Georgia, serif") is None
        assert extract_google_font(None) is None

    def test_detect_google_fonts(self) -> None:
        """Test heading first, body second, duplicates dropped."""
        theme = ThemeConfig.model_validate(
            {"typography": {"fontFamily": {"heading": "Poppins, sans-serif", "body": "Inter"}}}
        )
        assert detect_google_fonts(theme) == ["Poppins", "Inter"]

        same = ThemeConfig.model_validate(
            {"typography": {"fontFamily": {"heading": "Inter", "body": "Inter, sans-serif"}}}
        )
        assert detect_google_fonts(same) == ["Inter"]

    def test_system_fonts(self, system_font_theme: ThemeConfig) -> None:
        """Test system-only themes need no web fonts."""
        assert detect_google_fonts(system_font_theme) == []

    def test_google_fonts_url(self) -> None:
        """Test the CSS2 API URL format."""
        url = generate_google_fonts_url(["Open Sans", "Inter"])
        assert url.startswith("https://fonts.googleapis.com/css2?family=Open+Sans:ital,wght@")
        assert "0,400;0,500;0,600;0,700;1,400;1,500;1,600;1,700" in url
        assert "&family=Inter:" in url
        assert url.endswith("&display=swap")

    def test_google_fonts_url_empty(self) -> None:
        """Test nothing to load means no URL."""
        assert generate_google_fonts_url([]) == ""


class TestVariableHelpers:
    """Tests for the unit helpers used by the variable map."""

    @pytest.mark.parametrize(
        ("scale", "base", "expected"),
        [(1.6, "10pt", "16.0pt"), (2.4, "10pt", "24.0pt"), (1.5, "12px", "18.0px")],
    )
    def test_calculate_font_size(self, scale: float, base: str, expected: str) -> None:
        """Test scaling keeps the unit."""
        assert calculate_font_size(scale, base) == expected

    def test_calculate_font_size_unparseable(self) -> None:
        """Test odd base sizes pass through."""
        assert calculate_font_size(2.0, "medium") == "medium"

    def test_ensure_margin_units(self) -> None:
        """Test bare numbers become millimetres."""
        assert ensure_margin_units(15) == "15mm"
        assert ensure_margin_units(12.5) == "12.5mm"
        assert ensure_margin_units("15") == "15mm"
        assert ensure_margin_units("0.5in") == "0.5in"
        assert ensure_margin_units(None) == "20mm"
        assert ensure_margin_units("") == "20mm"

    def test_calculate_main_width(self) -> None:
        """Test same-unit subtraction and calc() fallback."""
        assert calculate_main_width("210mm", "84mm") == "126mm"
        assert calculate_main_width("210mm", "30%") == "calc(210mm - 30%)"


class TestGenerateCssVariables:
    """Tests for generate_css_variables function."""

    def test_defaults(self, default_theme: ThemeConfig) -> None:
        """Test key variables for the default theme."""
        variables = generate_css_variables(default_theme)
        assert variables["--primary-color"] == "#2563eb"
        assert variables["--surface-color"] == "#64748b"
        assert variables["--background-color"] == "#ffffff"
        assert variables["--sidebar-width"] == "84mm"
        assert variables["--main-width"] == "126mm"
        assert variables["--title-font-size"] == "32.0pt"
        assert variables["--tag-bg-color"] == "rgba(245, 158, 11, 0.2)"
        for side in ("top", "right", "bottom", "left"):
            assert variables[f"--page-margin-{side}"] == "20mm"

    def test_deterministic(self, default_theme: ThemeConfig) -> None:
        """Test the same theme yields the same ordered map."""
        first = generate_css_variables(default_theme)
        second = generate_css_variables(ThemeConfig())
        assert list(first.items()) == list(second.items())

    def test_every_value_is_text(self, default_theme: ThemeConfig) -> None:
        """Test values are CSS-ready strings."""
        for name, value in generate_css_variables(default_theme).items():
            assert name.startswith("--")
            assert isinstance(value, str)

    def test_bare_margins(self) -> None:
        """Test numeric margins get units."""
        theme = ThemeConfig.model_validate({"layout": {"pageMargin": {"top": 15, "left": "10"}}})
        variables = generate_css_variables(theme)
        assert variables["--page-margin-top"] == "15mm"
        assert variables["--page-margin-left"] == "10mm"

    def test_color_key_beats_literal(self) -> None:
        """Test a semantic key overrides a literal component color."""
        theme = ThemeConfig.model_validate(
            {"components": {"name": {"color": "#000000", "colorKey": "primary"}}}
        )
        assert generate_css_variables(theme)["--name-color"] == "#2563eb"

    def test_literal_color_without_key(self) -> None:
        """Test literal component colors apply when no key is set."""
        theme = ThemeConfig.model_validate({"components": {"name": {"color": "#abcdef"}}})
        assert generate_css_variables(theme)["--name-color"] == "#abcdef"

    def test_effects_toggle(self) -> None:
        """Test animations and shadows switch their variables."""
        off = generate_css_variables(ThemeConfig())
        assert off["--animation-duration"] == "0s"
        assert off["--shadow-default"] == "none"

        on = generate_css_variables(
            ThemeConfig.model_validate({"advanced": {"animations": True, "shadows": True}})
        )
        assert on["--animation-duration"] == "0.2s"
        assert on["--shadow-default"] != "none"
