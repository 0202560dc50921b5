"""CV content models.

The content is produced by the markdown parser upstream and consumed
read-only by the renderers, so every model here is frozen.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _item_text(item: Any) -> str:
    """Pull display text out of a string or a ``{"text": ...}`` / ``{"name": ...}`` dict."""
    if isinstance(item, dict):
        return str(item.get("text") or item.get("name") or "")
    return str(item)


def _coerce_to_list(v: Any) -> list[str]:
    """Coerce various inputs to a list of strings."""
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [text for text in (_item_text(item) for item in v) if text]
    if isinstance(v, str):
        # Try to parse as JSON array first
        v = v.strip()
        if v.startswith("["):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return _coerce_to_list(parsed)
            except json.JSONDecodeError:
                pass
        # Treat as comma-separated or single item
        if "," in v:
            return [item.strip() for item in v.split(",") if item.strip()]
        return [v] if v else []
    return [str(v)]


class Frontmatter(BaseModel):
    """Identity and contact block from the top of the CV."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str | None = None
    title: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None
    photo: str | None = None


class Entry(BaseModel):
    """A job, degree or project."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = ""
    company: str | None = None
    date: str | None = None
    location: str | None = None
    description: str | None = None
    bullets: list[str] = Field(default_factory=list)

    @field_validator("bullets", mode="before")
    @classmethod
    def coerce_bullets(cls, v: Any) -> list[str]:
        # Bullets are never comma-split: commas are ordinary prose here
        if isinstance(v, str):
            return [v] if v.strip() else []
        return _coerce_to_list(v)

    @property
    def paragraphs(self) -> list[str]:
        """Description split on blank lines, empty paragraphs dropped."""
        if not self.description:
            return []
        return [p for p in self.description.split("\n\n") if p.strip()]


class SkillCategory(BaseModel):
    """A named group of skills, e.g. ``Languages: Python, Go``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    category: str
    skills: list[str] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_skills(cls, v: Any) -> list[str]:
        return _coerce_to_list(v)


ContentItem = str | Entry | SkillCategory


def _coerce_content_item(item: Any) -> Any:
    """Route a raw dict to the model its keys describe."""
    if isinstance(item, dict):
        if "category" in item:
            return SkillCategory.model_validate(item)
        return Entry.model_validate(item)
    if isinstance(item, (str, Entry, SkillCategory)):
        return item
    return str(item)


class Section(BaseModel):
    """One titled block of the CV.

    ``type`` is a free-form tag ("skills", "experience", ...). It only steers
    rendering decisions; unknown values fall back to generic rendering.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str = ""
    title: str = ""
    content: str | list[ContentItem] = Field(default_factory=list)

    @field_validator("title", "type", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("content", mode="before")
    @classmethod
    def coerce_content(cls, v: Any) -> str | list[Any]:
        if v is None:
            return []
        if isinstance(v, str):
            return v
        if isinstance(v, (list, tuple)):
            return [_coerce_content_item(item) for item in v]
        return [_coerce_content_item(v)]


class CVContent(BaseModel):
    """Parsed CV: frontmatter plus ordered sections."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    frontmatter: Frontmatter = Field(default_factory=Frontmatter)
    sections: list[Section] = Field(default_factory=list)

    @field_validator("sections", mode="before")
    @classmethod
    def coerce_sections(cls, v: Any) -> list[Any]:
        if v is None:
            return []
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                try:
                    parsed = json.loads(v)
                    if isinstance(parsed, list):
                        return parsed
                except json.JSONDecodeError:
                    pass
            return []
        return v

    @classmethod
    def from_json(cls, raw: str) -> "CVContent":
        """Build content from the parser's JSON output."""
        return cls.model_validate_json(raw)
