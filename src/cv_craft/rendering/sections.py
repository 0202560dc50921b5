"""Semantic HTML for CV sections and entries.

The same markup feeds the web preview and the PDF column documents; only
the stylesheet differs between them. In pagination mode each entry is split
into groups with their own page-break behaviour:

- ``entry-start``: header, meta row and the first two paragraphs. Kept together.
- ``entry-description-continue``: middle paragraphs. Breaks freely.
- ``entry-bullet-bridge``: last paragraph (when there are more than two)
  plus the first bullet. Kept together.
- ``entry-bullets-continue``: remaining bullets. Breaks between items only.
"""

from cv_craft.models.cv import Entry, Section, SkillCategory
from cv_craft.rendering.escape import escape_html

START_PARAGRAPHS = 2


def render_sections(sections: list[Section], pagination: bool = False) -> str:
    """Render sections in order, one ``<section>`` each."""
    return "\n".join(render_section(section, pagination) for section in sections)


def render_section(section: Section, pagination: bool = False) -> str:
    """Render a single section with its header and content."""
    return (
        f'<section class="cv-section" data-type="{escape_html(section.type)}">\n'
        f'<h2 class="section-header">{escape_html(section.title)}</h2>\n'
        f'<div class="section-content">\n{_render_content(section, pagination)}\n</div>\n'
        "</section>"
    )


def _render_content(section: Section, pagination: bool) -> str:
    content = section.content
    if isinstance(content, str):
        if not content.strip():
            return ""
        return f'<p class="content-text">{escape_html(content)}</p>'

    text_class = "skill-item" if section.type == "skills" else "content-text"
    parts: list[str] = []
    for item in content:
        if isinstance(item, Entry):
            parts.append(render_entry(item, pagination))
        elif isinstance(item, SkillCategory):
            parts.append(render_skill_category(item))
        elif item.strip():
            parts.append(f'<p class="{text_class}">{escape_html(item)}</p>')
    return "\n".join(parts)


def render_skill_category(category: SkillCategory) -> str:
    """Main-column rendering of a skill category: bold label plus comma list."""
    skills = ", ".join(escape_html(skill) for skill in category.skills)
    return (
        '<div class="skill-category">'
        f'<strong class="skill-category-name">{escape_html(category.category)}:</strong> '
        f'<span class="skill-list">{skills}</span>'
        "</div>"
    )


def _render_meta(entry: Entry) -> str:
    parts = []
    if entry.company:
        parts.append(f'<span class="entry-company">{escape_html(entry.company)}</span>')
    if entry.date:
        parts.append(f'<span class="entry-date">{escape_html(entry.date)}</span>')
    if entry.location:
        parts.append(f'<span class="entry-location">{escape_html(entry.location)}</span>')
    if not parts:
        return ""
    return f'<p class="entry-meta">{" | ".join(parts)}</p>'


def _render_header(entry: Entry) -> str:
    meta = _render_meta(entry)
    if not entry.title and not meta:
        return ""
    title = f'<h3 class="entry-title">{escape_html(entry.title)}</h3>' if entry.title else ""
    return f'<div class="entry-header">{title}{meta}</div>'


def _paragraphs(paragraphs: list[str]) -> str:
    return "".join(f"<p>{escape_html(p)}</p>" for p in paragraphs)


def _bullets(bullets: list[str]) -> str:
    return "".join(f"<li>{escape_html(b)}</li>" for b in bullets)


def render_entry(entry: Entry, pagination: bool = False) -> str:
    """Render a job, degree or project.

    Args:
        entry: The entry to render.
        pagination: Split into keep-together/breakable groups for print.

    Returns:
        An ``<article class="entry">`` fragment.
    """
    if pagination:
        return _render_paginated_entry(entry)

    parts = [_render_header(entry)]
    if entry.paragraphs:
        parts.append(f'<div class="entry-description">{_paragraphs(entry.paragraphs)}</div>')
    if entry.bullets:
        parts.append(f'<ul class="entry-bullets">{_bullets(entry.bullets)}</ul>')
    body = "\n".join(part for part in parts if part)
    return f'<article class="entry">\n{body}\n</article>'


def _render_paginated_entry(entry: Entry) -> str:
    paragraphs = entry.paragraphs
    bullets = entry.bullets

    start = paragraphs[:START_PARAGRAPHS]
    rest = paragraphs[START_PARAGRAPHS:]
    # The last paragraph only bridges to the bullets when there are bullets to bridge to
    bridge_paragraph = rest[-1] if rest and bullets else None
    middle = rest[:-1] if bridge_paragraph is not None else rest

    groups: list[str] = []

    start_html = _render_header(entry)
    if start:
        start_html += f'<div class="entry-description">{_paragraphs(start)}</div>'
    groups.append(f'<div class="entry-start">{start_html}</div>')

    if middle:
        groups.append(
            '<div class="entry-description entry-description-continue">'
            f"{_paragraphs(middle)}</div>"
        )

    if bullets:
        bridge = ""
        if bridge_paragraph is not None:
            bridge += f'<p class="entry-description-last">{escape_html(bridge_paragraph)}</p>'
        bridge += f'<ul class="entry-bullets">{_bullets(bullets[:1])}</ul>'
        groups.append(f'<div class="entry-bullet-bridge">{bridge}</div>')

    if len(bullets) > 1:
        groups.append(
            '<ul class="entry-bullets entry-bullets-continue">'
            f"{_bullets(bullets[1:])}</ul>"
        )

    body = "\n".join(groups)
    return f'<article class="entry">\n{body}\n</article>'
