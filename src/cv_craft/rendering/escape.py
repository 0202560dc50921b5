"""The one boundary where user text and URLs enter generated HTML."""

import re

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}
_HTML_ESCAPE_RE = re.compile(r"[&<>\"']")

_BLOCKED_PROTOCOLS = re.compile(r"^\s*(javascript|vbscript|data)\s*:", re.IGNORECASE)
_ALLOWED_PROTOCOLS = re.compile(r"^(https?:|mailto:|tel:)", re.IGNORECASE)


def escape_html(text: object) -> str:
    """Escape ``& < > " '`` so text can sit in element content or a quoted attribute."""
    if text is None:
        return ""
    return _HTML_ESCAPE_RE.sub(lambda m: _HTML_ESCAPES[m.group(0)], str(text))


def sanitize_url(url: str | None) -> str:
    """Neutralise dangerous link targets.

    ``javascript:``, ``vbscript:`` and ``data:`` become ``#``. ``http(s):``,
    ``mailto:``, ``tel:``, relative paths and scheme-less values such as
    ``example.com`` pass through trimmed. Any other scheme becomes ``#``.
    """
    if not url or not isinstance(url, str):
        return "#"
    trimmed = url.strip()
    if not trimmed or _BLOCKED_PROTOCOLS.match(trimmed):
        return "#"
    if _ALLOWED_PROTOCOLS.match(trimmed) or trimmed.startswith(("/", "#", ".")):
        return trimmed
    if ":" not in trimmed:
        return trimmed
    return "#"
