"""Two-column geometry: column skins, column containers and background layers."""

from cv_craft.geometry import (
    MAIN_INNER_PADDING_MM,
    MAIN_WIDTH_MM,
    PAGE_HEIGHT_MM,
    PAGE_WIDTH_MM,
    SIDEBAR_INNER_PADDING_MM,
    SIDEBAR_WIDTH_MM,
)


def two_column_header_css() -> str:
    """Section headers as filled bars: tertiary in the sidebar, primary in main."""
    return """
/* Two-column section headers */
.sidebar .cv-section > h2.section-header,
.sidebar .sidebar-section > h2.section-header,
.main-content .cv-section > h2.section-header {
  font-family: var(--heading-font-family, Georgia), serif;
  font-size: var(--h3-font-size, 20px);
  font-weight: var(--section-header-font-weight, bold);
  text-transform: var(--section-header-text-transform, uppercase);
  letter-spacing: var(--section-header-letter-spacing, 0.05em);
  margin-bottom: var(--section-header-margin-bottom, 12px);
  padding: var(--section-header-padding, 4px 12px);
  border-radius: 4px;
  border-bottom: none;
}

.sidebar .cv-section > h2.section-header,
.sidebar .sidebar-section > h2.section-header {
  margin-top: var(--section-header-margin-top, 8px);
  color: var(--on-tertiary-color, #ffffff);
  background-color: var(--accent-color, #f59e0b);
}

.main-content .cv-section > h2.section-header {
  margin-top: 12px;
  color: var(--on-primary-color, #ffffff);
  background-color: var(--primary-color, #2563eb);
}

.main-content .cv-section:first-of-type > h2.section-header {
  margin-top: 0;
}
"""


def two_column_layout_css() -> str:
    """Flex layout of the web preview, with margins as column padding."""
    return f"""
/* Two-column page layout */
.cv-content {{
  display: flex;
  width: {PAGE_WIDTH_MM}mm;
  min-height: 100vh;
  position: relative;
  z-index: 1;
}}

.sidebar-container {{
  width: var(--sidebar-width, {SIDEBAR_WIDTH_MM}mm);
  min-width: var(--sidebar-width, {SIDEBAR_WIDTH_MM}mm);
  max-width: var(--sidebar-width, {SIDEBAR_WIDTH_MM}mm);
  padding: var(--page-margin-top, 20mm) {SIDEBAR_INNER_PADDING_MM}mm var(--page-margin-bottom, 20mm) var(--page-margin-left, {SIDEBAR_INNER_PADDING_MM}mm);
  flex-shrink: 0;
}}

.sidebar {{
  overflow: hidden;
  max-width: 100%;
}}

.sidebar * {{
  max-width: 100%;
  word-wrap: break-word;
  overflow-wrap: break-word;
}}

.main-content {{
  width: var(--main-width, {MAIN_WIDTH_MM}mm);
  min-width: var(--main-width, {MAIN_WIDTH_MM}mm);
  max-width: var(--main-width, {MAIN_WIDTH_MM}mm);
  padding: var(--page-margin-top, 20mm) var(--page-margin-right, {MAIN_INNER_PADDING_MM}mm) var(--page-margin-bottom, 20mm) {MAIN_INNER_PADDING_MM}mm;
}}
"""


def fixed_background_css(sidebar_color: str, main_color: str) -> str:
    """Full-height fixed column backgrounds behind the preview.

    The colors are passed in already resolved so the preview and the PDF
    background layer can take them from wherever the caller finds them.
    """
    return f"""
/* Fixed background columns */
.bg-sidebar,
.bg-main {{
  position: fixed;
  top: 0;
  height: 100%;
  z-index: -2;
  -webkit-print-color-adjust: exact !important;
  print-color-adjust: exact !important;
}}

.bg-sidebar {{
  left: 0;
  width: var(--sidebar-width, {SIDEBAR_WIDTH_MM}mm);
  background-color: {sidebar_color};
}}

.bg-main {{
  left: var(--sidebar-width, {SIDEBAR_WIDTH_MM}mm);
  width: var(--main-width, {MAIN_WIDTH_MM}mm);
  background-color: {main_color};
}}
"""


def column_container_css(column: str, inner_padding: str) -> str:
    """Place one column's content at its x-offset on an otherwise transparent page.

    Args:
        column: ``sidebar`` or ``main``.
        inner_padding: CSS padding shorthand for the content box.
    """
    if column == "sidebar":
        left, width = "0", f"{SIDEBAR_WIDTH_MM}mm"
        color = "var(--on-secondary-color, #4a3d2a)"
    else:
        left, width = f"{SIDEBAR_WIDTH_MM}mm", f"{MAIN_WIDTH_MM}mm"
        color = "var(--text-color, #0f172a)"
    return f"""
/* Column container */
html, body {{
  background: transparent;
}}

.column-container {{
  position: absolute;
  left: {left};
  top: 0;
  width: {width};
  min-height: 100%;
  background: transparent;
}}

.column-content {{
  padding: {inner_padding};
  color: {color};
}}

.column-content.sidebar,
.column-content.main-content {{
  width: auto;
  min-width: 0;
  max-width: none;
}}
"""


def background_layer_css(sidebar_color: str, main_color: str) -> str:
    """One full-bleed page with the two column colors side by side."""
    return f"""
* {{ margin: 0; padding: 0; }}
@page {{ size: {PAGE_WIDTH_MM}mm {PAGE_HEIGHT_MM}mm; margin: 0; }}
html, body {{ width: {PAGE_WIDTH_MM}mm; height: {PAGE_HEIGHT_MM}mm; overflow: hidden; }}
.bg {{ display: flex; width: {PAGE_WIDTH_MM}mm; height: {PAGE_HEIGHT_MM}mm; }}
.sidebar-bg {{ width: {SIDEBAR_WIDTH_MM}mm; height: {PAGE_HEIGHT_MM}mm; background: {sidebar_color}; }}
.main-bg {{ width: {MAIN_WIDTH_MM}mm; height: {PAGE_HEIGHT_MM}mm; background: {main_color}; }}
html, body, .bg, .sidebar-bg, .main-bg {{
  -webkit-print-color-adjust: exact !important;
  print-color-adjust: exact !important;
}}
"""
