"""Pytest configuration and fixtures."""

from collections.abc import Callable

import pytest
from fpdf import FPDF

from cv_craft.config import Settings
from cv_craft.models.cv import CVContent, Entry, Frontmatter, Section
from cv_craft.models.theme import ThemeConfig


@pytest.fixture
def default_theme() -> ThemeConfig:
    """Theme with every default."""
    return ThemeConfig()


@pytest.fixture
def system_font_theme() -> ThemeConfig:
    """Theme that uses only system fonts, so no web font link is emitted."""
    return ThemeConfig.model_validate(
        {"typography": {"fontFamily": {"heading": "Georgia, serif", "body": "Arial, sans-serif"}}}
    )


@pytest.fixture
def sample_frontmatter() -> Frontmatter:
    """Create a sample Frontmatter with every contact field."""
    return Frontmatter(
        name="Jane Doe",
        title="Staff Engineer",
        email="jane@x.com",
        phone="+1 555 0100",
        location="Lisbon, Portugal",
        linkedin="linkedin.com/in/janedoe",
        github="https://github.com/janedoe",
        website="https://jane.dev",
    )


@pytest.fixture
def jane_doe_content() -> CVContent:
    """Minimal CV: one skills section and one experience entry."""
    return CVContent(
        frontmatter=Frontmatter(name="Jane Doe", email="jane@x.com"),
        sections=[
            Section(type="skills", title="Skills", content="**Languages:** Python, Go"),
            Section(
                type="experience",
                title="Experience",
                content=[
                    Entry(title="Engineer", company="Acme", bullets=["Built X", "Shipped Y"])
                ],
            ),
        ],
    )


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings isolated from the environment, with fast render timings."""
    return Settings(
        _env_file=None,
        storage_root=tmp_path / "storage",
        font_timeout_seconds=0.05,
        settle_delay_ms=0,
    )


@pytest.fixture
def make_pdf() -> Callable[[int, str], bytes]:
    """Factory for small A4 PDFs whose pages carry ``"<label> page <n>"``."""

    def _make(pages: int, label: str = "Layer") -> bytes:
        pdf = FPDF(format="A4")
        pdf.set_font("Helvetica", size=12)
        for i in range(1, pages + 1):
            pdf.add_page()
            pdf.cell(0, 10, f"{label} page {i}")
        return bytes(pdf.output())

    return _make
