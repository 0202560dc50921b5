"""Sidebar skills rendering: pill tags or inline separated text."""

import re

from cv_craft.models.cv import Entry, Section, SkillCategory
from cv_craft.models.theme import ThemeConfig
from cv_craft.rendering.escape import escape_html

_SKILL_LINE_RE = re.compile(r"^\*{0,2}([^:*]+)\*{0,2}:\s*(.+)$")
_SKILL_SPLIT_RE = re.compile(r",\s*")


def _sanitize_markdown_bold(text: str) -> str:
    """Fix malformed bold markers around a category label.

    Hand-written CVs often carry `*Category:**` or `**Category:*`; both
    normalise to `**Category:**` so the category still parses.
    """
    text = re.sub(r"(?<!\*)\*([^*]+):\*\*", r"**\1:**", text)
    text = re.sub(r"\*\*([^*]+):\*(?!\*)", r"**\1:**", text)
    return text


def parse_skill_string(text: str) -> SkillCategory | None:
    """Parse ``"**Category:** skill1, skill2"`` into a skill category.

    Args:
        text: One line of skills text.

    Returns:
        The parsed category, or None when the line has no ``Category:`` label.
    """
    match = _SKILL_LINE_RE.match(_sanitize_markdown_bold(text.strip()))
    if not match:
        return None
    category = match.group(1).strip()
    parts = _SKILL_SPLIT_RE.split(match.group(2))
    skills = [
        token
        for token in (part.replace("**", "").strip() for part in parts)
        if token
    ]
    return SkillCategory(category=category, skills=skills)


def _flatten_items(content: str | list) -> list:
    """Split multi-line strings into one item per non-blank line."""
    raw = [content] if isinstance(content, str) else list(content)
    items: list = []
    for item in raw:
        if isinstance(item, str) and "\n" in item:
            items.extend(line.strip() for line in item.split("\n") if line.strip())
        else:
            items.append(item)
    return items


def _render_category(category: SkillCategory, config: ThemeConfig) -> str:
    tags = config.components.tags
    title = f'<h4 class="skill-category-title">{escape_html(category.category)}</h4>'
    if tags.style == "pill":
        pills = "".join(f'<span class="skill-tag">{escape_html(s)}</span>' for s in category.skills)
        body = f'<div class="skill-tags">{pills}</div>'
    else:
        separator = tags.separator or "·"
        joiner = " " if separator == "none" else f" {escape_html(separator)} "
        inline = joiner.join(escape_html(s) for s in category.skills)
        body = f'<div class="skill-inline">{inline}</div>'
    return f'<div class="skill-category-block">{title}{body}</div>'


def render_skills_section(section: Section, config: ThemeConfig) -> str:
    """Render a sidebar skills section.

    Categories without any skills are omitted. Lines without a category
    label render as plain ``skill-item`` paragraphs.
    """
    parts: list[str] = []
    for item in _flatten_items(section.content):
        if isinstance(item, SkillCategory):
            category = item
        elif isinstance(item, str):
            category = parse_skill_string(item)
            if category is None:
                if item.strip():
                    parts.append(f'<p class="skill-item">{escape_html(item.strip())}</p>')
                continue
        elif isinstance(item, Entry):
            parts.append(f'<p class="skill-item">{escape_html(item.title)}</p>')
            continue
        else:
            continue
        if category.category and category.skills:
            parts.append(_render_category(category, config))

    title = escape_html(section.title or "Skills")
    return (
        '<section class="cv-section sidebar-section" data-type="skills">'
        f'<h2 class="section-header">{title}</h2>'
        f'<div class="section-content">{"".join(parts)}</div>'
        "</section>"
    )
