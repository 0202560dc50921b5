"""Tests for CV content, theme and export models."""

import json

import pytest
from pydantic import ValidationError

from cv_craft.models.cv import CVContent, Entry, Section, SkillCategory
from cv_craft.models.export import MergedPDF
from cv_craft.models.theme import ThemeConfig


class TestEntry:
    """Tests for Entry model."""

    def test_paragraphs_split_on_blank_lines(self) -> None:
        """Test description paragraphs and dropping of empty ones."""
        entry = Entry(title="Engineer", description="First.\n\nSecond.\n\n  \n\nThird.")
        assert entry.paragraphs == ["First.", "Second.", "Third."]

    def test_no_description_has_no_paragraphs(self) -> None:
        """Test missing description yields no paragraphs."""
        assert Entry(title="Engineer").paragraphs == []

    def test_bullets_string_is_not_comma_split(self) -> None:
        """Test a single bullet string stays one bullet."""
        entry = Entry(bullets="Cut costs, improved latency")
        assert entry.bullets == ["Cut costs, improved latency"]

    def test_bullets_from_dicts(self) -> None:
        """Test bullets given as objects with text keys."""
        entry = Entry(bullets=[{"text": "Built X"}, {"text": ""}, "Shipped Y"])
        assert entry.bullets == ["Built X", "Shipped Y"]


class TestSkillCategory:
    """Tests for SkillCategory model."""

    def test_skills_from_comma_string(self) -> None:
        """Test comma-separated skills are split."""
        category = SkillCategory(category="Languages", skills="Python, Go,Rust")
        assert category.skills == ["Python", "Go", "Rust"]

    def test_skills_from_json_string(self) -> None:
        """Test JSON array strings are parsed."""
        category = SkillCategory(category="Tools", skills='["Docker", "Git"]')
        assert category.skills == ["Docker", "Git"]


class TestSection:
    """Tests for Section model."""

    def test_dict_items_become_models(self) -> None:
        """Test content dicts are routed to Entry or SkillCategory."""
        section = Section(
            type="mixed",
            content=[
                {"title": "Engineer", "company": "Acme"},
                {"category": "Languages", "skills": ["Python"]},
                "plain text",
            ],
        )
        assert isinstance(section.content[0], Entry)
        assert isinstance(section.content[1], SkillCategory)
        assert section.content[2] == "plain text"

    def test_string_content_kept(self) -> None:
        """Test free-text content stays a string."""
        section = Section(type="summary", title="Summary", content="Hello")
        assert section.content == "Hello"

    def test_none_fields_default(self) -> None:
        """Test None title, type and content are normalised."""
        section = Section(type=None, title=None, content=None)
        assert section.type == ""
        assert section.title == ""
        assert section.content == []

    def test_frozen(self) -> None:
        """Test sections are immutable."""
        section = Section(title="Skills")
        with pytest.raises(ValidationError):
            section.title = "Other"


class TestCVContent:
    """Tests for CVContent model."""

    def test_from_json(self) -> None:
        """Test loading the parser's JSON output."""
        raw = json.dumps(
            {
                "frontmatter": {"name": "Jane Doe", "email": "jane@x.com", "unknown": 1},
                "sections": [
                    {"type": "skills", "title": "Skills", "content": "**Languages:** Python"},
                    {
                        "type": "experience",
                        "title": "Experience",
                        "content": [{"title": "Engineer", "bullets": ["Built X"]}],
                    },
                ],
            }
        )
        content = CVContent.from_json(raw)
        assert content.frontmatter.name == "Jane Doe"
        assert len(content.sections) == 2
        assert content.sections[1].content[0].bullets == ["Built X"]

    def test_empty_defaults(self) -> None:
        """Test an empty object is valid content."""
        content = CVContent.model_validate({})
        assert content.frontmatter.name is None
        assert content.sections == []


class TestThemeConfig:
    """Tests for ThemeConfig model."""

    def test_camel_case_keys(self) -> None:
        """Test the editor's camelCase JSON validates."""
        theme = ThemeConfig.model_validate(
            {
                "colors": {"onPrimary": "#000000"},
                "layout": {"sidebarWidth": "80mm", "pageMargin": {"top": 15}},
                "components": {"tags": {"style": "inline", "separator": "|"}},
                "advanced": {"customCss": ".x { color: red; }"},
            }
        )
        assert theme.colors.on_primary == "#000000"
        assert theme.layout.sidebar_width == "80mm"
        assert theme.layout.page_margin.top == 15
        assert theme.components.tags.style == "inline"
        assert theme.advanced.custom_css == ".x { color: red; }"

    def test_snake_case_keys(self) -> None:
        """Test Python field names are accepted too."""
        theme = ThemeConfig.model_validate({"colors": {"on_primary": "#111111"}})
        assert theme.colors.on_primary == "#111111"

    def test_defaults_complete(self) -> None:
        """Test an empty theme has every section filled in."""
        theme = ThemeConfig.from_json("{}")
        assert theme.typography.base_font_size == "10pt"
        assert theme.components.tags.style == "pill"
        assert theme.pdf.page_size == "A4"

    def test_invalid_tag_style(self) -> None:
        """Test unknown tag styles are rejected."""
        with pytest.raises(ValidationError):
            ThemeConfig.model_validate({"components": {"tags": {"style": "bubble"}}})


class TestMergedPDF:
    """Tests for MergedPDF model."""

    def test_negative_page_count_rejected(self) -> None:
        """Test page counts cannot be negative."""
        with pytest.raises(ValidationError):
            MergedPDF(data=b"", page_count=-1)
