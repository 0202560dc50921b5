"""Overlay composition of the sidebar, main and background layers."""

import io
import logging

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PyPdfError

from cv_craft.exceptions import MergeError
from cv_craft.geometry import PAGE_HEIGHT_PT, PAGE_WIDTH_PT
from cv_craft.models.export import MergedPDF

logger = logging.getLogger(__name__)


def _read(pdf_bytes: bytes | None, label: str) -> PdfReader | None:
    if not pdf_bytes:
        return None
    try:
        return PdfReader(io.BytesIO(pdf_bytes))
    except Exception as e:
        raise MergeError(f"Could not read {label} PDF: {e}") from e


def count_pages(pdf_bytes: bytes | None) -> int:
    """Number of pages in a PDF; empty or missing input counts as zero."""
    reader = _read(pdf_bytes, "input")
    return len(reader.pages) if reader is not None else 0


def merge_overlay(
    sidebar_pdf: bytes | None, main_pdf: bytes | None, background_pdf: bytes
) -> MergedPDF:
    """Stack the three layers page by page.

    Output page ``i`` is a blank A4 page with background page 0 drawn first,
    then sidebar page ``i`` and main page ``i`` when those exist. The longer
    column decides the page count.

    Args:
        sidebar_pdf: Sidebar column PDF, possibly empty.
        main_pdf: Main column PDF, possibly empty.
        background_pdf: Single-page background layer.

    Returns:
        The merged document and its page count.

    Raises:
        MergeError: If a layer cannot be read or the background has no pages.
    """
    background = _read(background_pdf, "background")
    if background is None or len(background.pages) == 0:
        raise MergeError("Background PDF has no pages")
    sidebar = _read(sidebar_pdf, "sidebar")
    main = _read(main_pdf, "main")

    sidebar_pages = len(sidebar.pages) if sidebar is not None else 0
    main_pages = len(main.pages) if main is not None else 0
    total_pages = max(sidebar_pages, main_pages)
    logger.info(
        "Merging layers: sidebar=%d, main=%d, output=%d pages",
        sidebar_pages,
        main_pages,
        total_pages,
    )

    writer = PdfWriter()
    try:
        background_page = background.pages[0]
        for i in range(total_pages):
            page = writer.add_blank_page(width=PAGE_WIDTH_PT, height=PAGE_HEIGHT_PT)
            page.merge_page(background_page)
            if i < sidebar_pages:
                page.merge_page(sidebar.pages[i])
            if i < main_pages:
                page.merge_page(main.pages[i])

        output = io.BytesIO()
        writer.write(output)
    except PyPdfError as e:
        raise MergeError(f"Failed to merge PDF layers: {e}") from e

    return MergedPDF(data=output.getvalue(), page_count=total_pages)
