"""PDF pipeline: headless rendering, overlay merge and export."""

from cv_craft.pdf.assets import AssetResolver
from cv_craft.pdf.browser import BrowserManager
from cv_craft.pdf.exporter import PDFExporter, close_exporter, get_exporter
from cv_craft.pdf.merger import count_pages, merge_overlay

__all__ = [
    "AssetResolver",
    "BrowserManager",
    "PDFExporter",
    "close_exporter",
    "count_pages",
    "get_exporter",
    "merge_overlay",
]
