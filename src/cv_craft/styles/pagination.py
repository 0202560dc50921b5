"""Print pagination rules for the column documents.

Keep-together groups are ``.entry-start``, ``.entry-bullet-bridge``, single
list items and the atomic sidebar blocks. Whole entries and sections are
allowed to break so long content can flow onto the next page.
"""

from cv_craft.geometry import PAGE_HEIGHT_MM, PAGE_WIDTH_MM


def page_rule_css(
    margin_top: str = "20mm",
    margin_bottom: str = "20mm",
    margin_left: str = "0",
    margin_right: str = "0",
) -> str:
    """``@page`` geometry.

    Vertical margins repeat on every printed page, continuation pages
    included. Horizontal margins stay zero in the column documents; the
    columns pad themselves instead.
    """
    return f"""
/* Page configuration */
@page {{
  size: {PAGE_WIDTH_MM}mm {PAGE_HEIGHT_MM}mm;
  margin: {margin_top} {margin_right} {margin_bottom} {margin_left};
}}

@media print {{
  html, body {{
    width: {PAGE_WIDTH_MM}mm;
    -webkit-print-color-adjust: exact !important;
    print-color-adjust: exact !important;
  }}
}}
"""


def pagination_css() -> str:
    """Break rules for headers, entry groups, lists and atomic blocks."""
    return """
/* Pagination control */
.section-header,
h2.section-header {
  page-break-after: avoid;
  break-after: avoid;
  orphans: 2;
  widows: 2;
}

h1, h2, h3, h4, h5, h6 {
  page-break-after: avoid;
  break-after: avoid;
}

p {
  orphans: 2;
  widows: 2;
}

.cv-section,
.entry,
.entry-description-continue,
.entry-bullets-continue {
  page-break-inside: auto;
  break-inside: auto;
}

.entry-start,
.entry-bullet-bridge,
.skill-category-block,
.contact-info,
.photo-container,
.keep-together,
li {
  page-break-inside: avoid;
  break-inside: avoid;
}
"""


def column_break_css() -> str:
    """Flow hints for the sidebar and main content containers."""
    return """
/* Column flow */
.sidebar {
  break-after: avoid;
}

.main-content {
  break-inside: auto;
}
"""


def all_pagination_css(margin_top: str = "20mm", margin_bottom: str = "20mm") -> str:
    """Page rule, break rules and column hints in one stylesheet."""
    return (
        page_rule_css(margin_top=margin_top, margin_bottom=margin_bottom)
        + pagination_css()
        + column_break_css()
    )
