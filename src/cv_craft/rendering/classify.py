"""Section classification and the sidebar/main column split.

All keyword matching on free-form section types and titles lives here.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from cv_craft.models.cv import Section

SIDEBAR_KEYWORDS = ("skills", "languages", "interests", "tools", "certifications")
SKILLS_TITLE_KEYWORDS = ("skill", "programming")


class SectionKind(str, Enum):
    """Where a section goes and how it is rendered there."""

    SIDEBAR_SKILLS = "sidebar_skills"
    SIDEBAR = "sidebar"
    MAIN = "main"


class ColumnSplit(BaseModel):
    """Sections partitioned by column, original order kept within each."""

    model_config = ConfigDict(frozen=True)

    sidebar: list[Section] = Field(default_factory=list)
    main: list[Section] = Field(default_factory=list)


def is_sidebar_section(section: Section) -> bool:
    """Exact match on ``type`` or case-insensitive substring match on ``title``.

    Substring matching on titles is loose: "Tools I built at work" lands in
    the sidebar. Kept as-is so existing CVs lay out the same way.
    """
    title = section.title.lower()
    return any(section.type == keyword or keyword in title for keyword in SIDEBAR_KEYWORDS)


def is_skills_section(section: Section) -> bool:
    """Whether a section gets the tag/inline skills treatment."""
    if section.type == "skills":
        return True
    title = section.title.lower()
    return any(keyword in title for keyword in SKILLS_TITLE_KEYWORDS)


def classify_section(section: Section) -> SectionKind:
    """Tag a section with its column and renderer."""
    if not is_sidebar_section(section):
        return SectionKind.MAIN
    if is_skills_section(section):
        return SectionKind.SIDEBAR_SKILLS
    return SectionKind.SIDEBAR


def split_sections(sections: list[Section]) -> ColumnSplit:
    """Partition sections into sidebar and main columns.

    Every section lands in exactly one column. The function is pure and total.
    """
    sidebar: list[Section] = []
    main: list[Section] = []
    for section in sections:
        if classify_section(section) is SectionKind.MAIN:
            main.append(section)
        else:
            sidebar.append(section)
    return ColumnSplit(sidebar=sidebar, main=main)
