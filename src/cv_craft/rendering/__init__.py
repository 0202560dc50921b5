"""HTML renderers and document assembly for the CV export."""

from cv_craft.rendering.classify import (
    ColumnSplit,
    SectionKind,
    classify_section,
    is_sidebar_section,
    is_skills_section,
    split_sections,
)
from cv_craft.rendering.contact import render_contact_info, strip_protocol
from cv_craft.rendering.document import (
    ExportDocuments,
    build_background_document,
    build_export_documents,
    build_main_document,
    build_preview_document,
    build_sidebar_document,
)
from cv_craft.rendering.escape import escape_html, sanitize_url
from cv_craft.rendering.photo import render_photo, render_profile_photo
from cv_craft.rendering.sections import (
    render_entry,
    render_section,
    render_sections,
    render_skill_category,
)
from cv_craft.rendering.skills import parse_skill_string, render_skills_section

__all__ = [
    "ColumnSplit",
    "ExportDocuments",
    "SectionKind",
    "build_background_document",
    "build_export_documents",
    "build_main_document",
    "build_preview_document",
    "build_sidebar_document",
    "classify_section",
    "escape_html",
    "is_sidebar_section",
    "is_skills_section",
    "parse_skill_string",
    "render_contact_info",
    "render_entry",
    "render_photo",
    "render_profile_photo",
    "render_section",
    "render_sections",
    "render_skill_category",
    "render_skills_section",
    "sanitize_url",
    "split_sections",
    "strip_protocol",
]
