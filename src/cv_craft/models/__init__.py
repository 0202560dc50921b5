"""Data models for CV Craft."""

from cv_craft.models.cv import ContentItem, CVContent, Entry, Frontmatter, Section, SkillCategory
from cv_craft.models.export import ExportResult, MergedPDF
from cv_craft.models.theme import ThemeConfig

__all__ = [
    "ContentItem",
    "CVContent",
    "Entry",
    "Frontmatter",
    "Section",
    "SkillCategory",
    "ExportResult",
    "MergedPDF",
    "ThemeConfig",
]
