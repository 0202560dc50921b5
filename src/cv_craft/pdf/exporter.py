"""Two-column PDF export: build, render, merge and write one CV."""

import asyncio
import contextlib
import logging
import os
import re
import tempfile
from functools import lru_cache
from pathlib import Path

from cv_craft.config import Settings, get_settings
from cv_craft.exceptions import ContentError, CVCraftError, ExportError
from cv_craft.models.cv import CVContent
from cv_craft.models.export import ExportResult
from cv_craft.models.theme import ThemeConfig
from cv_craft.pdf.assets import AssetResolver
from cv_craft.pdf.browser import BrowserManager
from cv_craft.pdf.merger import merge_overlay
from cv_craft.rendering.document import ExportDocuments, build_export_documents

logger = logging.getLogger(__name__)


def default_filename(content: CVContent) -> str:
    """``<name-slug>-cv.pdf``, or ``cv.pdf`` when the CV has no name."""
    slug = re.sub(r"[^a-z0-9]+", "-", (content.frontmatter.name or "").lower()).strip("-")
    return f"{slug}-cv.pdf" if slug else "cv.pdf"


def write_atomic(path: Path, data: bytes) -> None:
    """Write via a temp file in the same directory, then rename into place."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise


class PDFExporter:
    """Export CVs through a shared browser.

    The browser is owned by the caller (or by ``get_exporter``); the
    exporter itself keeps no per-export state, so concurrent exports are safe.
    """

    def __init__(
        self,
        browser: BrowserManager | None = None,
        settings: Settings | None = None,
        assets: AssetResolver | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.browser = browser or BrowserManager(self.settings)
        self.assets = assets or AssetResolver(self.settings.assets_path)

    async def export(
        self,
        content: CVContent | None,
        theme: ThemeConfig | None,
        output_path: Path | str | None = None,
        photo_asset_id: str | None = None,
    ) -> ExportResult:
        """Render a CV to a merged two-column PDF on disk.

        Args:
            content: Parsed CV content.
            theme: Theme configuration; defaults apply when None.
            output_path: Target file. Defaults to the exports directory.
            photo_asset_id: Optional photo asset to inline in the sidebar.

        Returns:
            Descriptor of the written file.

        Raises:
            ContentError: If content is missing or renders to no pages.
            BrowserLaunchError: If the browser cannot be started.
            RenderError: If any layer fails to render.
            MergeError: If the layers cannot be composited.
            ExportError: For any other failure. No file is written.
        """
        if content is None:
            raise ContentError("CV content has not been parsed")
        theme = theme or ThemeConfig()
        target = (
            Path(output_path)
            if output_path
            else self.settings.exports_path / default_filename(content)
        )

        photo_data_uri = await self.assets.resolve(photo_asset_id) if photo_asset_id else None

        try:
            documents = build_export_documents(content, theme, photo_data_uri)
        except Exception as e:
            logger.exception("Failed to build export documents")
            raise ExportError(f"Failed to generate HTML: {e}") from e

        try:
            sidebar_pdf, main_pdf, background_pdf = await self._render_layers(documents)
            merged = merge_overlay(sidebar_pdf, main_pdf, background_pdf)
        except CVCraftError:
            logger.exception("Export aborted")
            raise
        except Exception as e:
            logger.exception("Export aborted")
            raise ExportError(f"Export failed: {e}") from e

        if merged.page_count == 0:
            raise ContentError("Nothing to export: both columns are empty")

        try:
            await asyncio.to_thread(write_atomic, target, merged.data)
        except OSError as e:
            raise ExportError(f"Failed to write {target}: {e}") from e

        logger.info("Exported %s (%d pages, %d bytes)", target, merged.page_count, len(merged.data))
        return ExportResult(
            filename=target.name,
            filepath=target,
            byte_size=len(merged.data),
            page_count=merged.page_count,
        )

    async def _render_layers(self, documents: ExportDocuments) -> tuple[bytes, bytes, bytes]:
        tasks = [
            asyncio.ensure_future(self.browser.render_pdf(documents.sidebar)),
            asyncio.ensure_future(self.browser.render_pdf(documents.main)),
            asyncio.ensure_future(self.browser.render_background_pdf(documents.background)),
        ]
        try:
            sidebar_pdf, main_pdf, background_pdf = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            # Siblings close their pages before the failure propagates
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return sidebar_pdf, main_pdf, background_pdf


@lru_cache
def get_exporter() -> PDFExporter:
    """Process-wide exporter sharing one browser.

    The browser, its lock and the Playwright handles are bound to the event
    loop that first uses them, so every export through this instance must run
    on one long-lived loop. Call ``close_exporter()`` on that loop before it
    shuts down; the next ``get_exporter()`` then starts fresh.
    """
    settings = get_settings()
    return PDFExporter(BrowserManager(settings), settings)


async def close_exporter() -> None:
    """Close the process-wide exporter's browser, if one was created."""
    if get_exporter.cache_info().currsize == 0:
        return
    await get_exporter().browser.close()
    get_exporter.cache_clear()
