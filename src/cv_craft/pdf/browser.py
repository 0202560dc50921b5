"""Headless Chromium rendering via Playwright.

One browser process is shared by every render; each render gets its own
page so concurrent exports never see each other's state.
"""

import asyncio
import logging
from types import TracebackType

from playwright.async_api import Browser, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from cv_craft.config import Settings, get_settings
from cv_craft.exceptions import BrowserLaunchError, RenderError
from cv_craft.geometry import DEVICE_SCALE_FACTOR, VIEWPORT_HEIGHT_PX, VIEWPORT_WIDTH_PX

logger = logging.getLogger(__name__)

FONTS_READY_SCRIPT = "() => document.fonts.ready.then(() => document.fonts.status)"

PDF_MARGINS = {"top": "0", "right": "0", "bottom": "0", "left": "0"}


class BrowserManager:
    """Owns the Playwright driver and one lazily launched Chromium.

    Use as an async context manager, or call ``close()`` when done.

    Example:
        async with BrowserManager(settings) as browser:
            pdf_bytes = await browser.render_pdf(html)
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._lock = asyncio.Lock()

    async def __aenter__(self) -> "BrowserManager":
        await self.get_browser()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def is_running(self) -> bool:
        return self._browser is not None and self._browser.is_connected()

    async def get_browser(self) -> Browser:
        """Return the shared browser, launching it on first use.

        Raises:
            BrowserLaunchError: If Playwright or Chromium fails to start.
        """
        async with self._lock:
            if self.is_running:
                return self._browser
            await self._launch()
            return self._browser

    async def _launch(self) -> None:
        executable = self.settings.browser_executable
        logger.info(
            "Launching Chromium (headless=%s, executable=%s)",
            self.settings.headless,
            executable or "bundled",
        )
        try:
            if self._playwright is None:
                self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self.settings.headless,
                executable_path=str(executable) if executable else None,
                args=list(self.settings.browser_args),
            )
        except Exception as e:
            await self._stop_playwright()
            raise BrowserLaunchError(f"Failed to launch browser: {e}") from e

    async def close(self) -> None:
        """Close the browser and stop the Playwright driver."""
        async with self._lock:
            browser, self._browser = self._browser, None
            if browser is not None:
                try:
                    await browser.close()
                except PlaywrightError as e:
                    logger.warning("Error closing browser: %s", e)
            await self._stop_playwright()

    async def _stop_playwright(self) -> None:
        playwright, self._playwright = self._playwright, None
        if playwright is not None:
            try:
                await playwright.stop()
            except Exception as e:
                logger.warning("Error stopping Playwright: %s", e)

    async def render_pdf(self, html: str, *, wait_for_fonts: bool = True) -> bytes:
        """Render one HTML document to A4 PDF bytes.

        Args:
            html: Complete HTML document with every asset inlined.
            wait_for_fonts: Wait (bounded) for web fonts before capture.

        Returns:
            The PDF produced by Chromium's print pipeline.

        Raises:
            BrowserLaunchError: If the browser cannot be started.
            RenderError: If loading or printing the page fails.
        """
        browser = await self.get_browser()
        content_timeout_ms = self.settings.content_timeout_seconds * 1000

        page = await browser.new_page(
            viewport={"width": VIEWPORT_WIDTH_PX, "height": VIEWPORT_HEIGHT_PX},
            device_scale_factor=DEVICE_SCALE_FACTOR,
        )
        try:
            await page.set_content(html, wait_until="domcontentloaded", timeout=content_timeout_ms)
            try:
                await page.wait_for_load_state("networkidle", timeout=content_timeout_ms)
            except PlaywrightTimeoutError:
                logger.warning("Network did not go idle, rendering with what has loaded")

            if wait_for_fonts:
                await self._wait_for_fonts(page)
                if self.settings.settle_delay_ms:
                    await page.wait_for_timeout(self.settings.settle_delay_ms)

            return await page.pdf(
                format="A4",
                print_background=True,
                prefer_css_page_size=True,
                margin=PDF_MARGINS,
            )
        except PlaywrightError as e:
            raise RenderError(f"Failed to render PDF: {e}") from e
        finally:
            try:
                await page.close()
            except PlaywrightError as e:
                logger.warning("Error closing page: %s", e)

    async def render_background_pdf(self, html: str) -> bytes:
        """Render the background layer, which has no text to wait fonts for."""
        return await self.render_pdf(html, wait_for_fonts=False)

    async def _wait_for_fonts(self, page) -> None:
        timeout = self.settings.font_timeout_seconds
        try:
            status = await asyncio.wait_for(page.evaluate(FONTS_READY_SCRIPT), timeout=timeout)
            logger.debug("Fonts ready (status=%s)", status)
        except (asyncio.TimeoutError, PlaywrightTimeoutError):
            logger.warning("Font loading timed out after %.1fs, using fallback fonts", timeout)
