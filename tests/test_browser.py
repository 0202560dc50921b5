"""Tests for the Playwright browser manager, with Playwright mocked out."""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from playwright.async_api import Error as PlaywrightError

from cv_craft.config import Settings
from cv_craft.exceptions import BrowserLaunchError, RenderError
from cv_craft.pdf.browser import BrowserManager


def _mock_playwright(page: MagicMock | None = None) -> tuple[MagicMock, MagicMock, MagicMock]:
    """Build (async_playwright factory, playwright, browser) mocks around a page."""
    page = page or _mock_page()
    browser = MagicMock()
    browser.is_connected.return_value = True
    browser.new_page = AsyncMock(return_value=page)
    browser.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    playwright.stop = AsyncMock()

    factory = MagicMock()
    factory.return_value.start = AsyncMock(return_value=playwright)
    return factory, playwright, browser


def _mock_page() -> MagicMock:
    page = MagicMock()
    page.set_content = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    page.evaluate = AsyncMock(return_value="loaded")
    page.wait_for_timeout = AsyncMock()
    page.pdf = AsyncMock(return_value=b"%PDF-1.7 fake")
    page.close = AsyncMock()
    return page


class TestBrowserLifecycle:
    """Tests for launching and closing the browser."""

    def test_lazy_launch_and_reuse(self, test_settings: Settings) -> None:
        """Test the browser launches once and is reused."""
        factory, playwright, _ = _mock_playwright()

        async def run() -> None:
            manager = BrowserManager(test_settings)
            assert not manager.is_running
            first = await manager.get_browser()
            second = await manager.get_browser()
            assert first is second
            await manager.close()

        with patch("cv_craft.pdf.browser.async_playwright", factory):
            asyncio.run(run())

        playwright.chromium.launch.assert_awaited_once()
        kwargs = playwright.chromium.launch.call_args.kwargs
        assert kwargs["headless"] is True
        assert kwargs["executable_path"] is None
        assert "--no-sandbox" in kwargs["args"]

    def test_concurrent_first_use_launches_once(self, test_settings: Settings) -> None:
        """Test simultaneous callers share a single launch."""
        factory, playwright, _ = _mock_playwright()

        async def run() -> None:
            manager = BrowserManager(test_settings)
            await asyncio.gather(*(manager.get_browser() for _ in range(5)))
            await manager.close()

        with patch("cv_craft.pdf.browser.async_playwright", factory):
            asyncio.run(run())

        playwright.chromium.launch.assert_awaited_once()

    def test_context_manager_closes(self, test_settings: Settings) -> None:
        """Test leaving the context closes browser and driver."""
        factory, playwright, browser = _mock_playwright()

        async def run() -> None:
            async with BrowserManager(test_settings) as manager:
                assert manager.is_running

        with patch("cv_craft.pdf.browser.async_playwright", factory):
            asyncio.run(run())

        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()

    def test_launch_failure(self, test_settings: Settings) -> None:
        """Test launch errors surface as BrowserLaunchError and stop the driver."""
        factory, playwright, _ = _mock_playwright()
        playwright.chromium.launch.side_effect = PlaywrightError("Executable doesn't exist")

        with patch("cv_craft.pdf.browser.async_playwright", factory):
            with pytest.raises(BrowserLaunchError, match="Executable doesn't exist"):
                asyncio.run(BrowserManager(test_settings).get_browser())

        playwright.stop.assert_awaited_once()

    def test_custom_executable(self, tmp_path) -> None:
        """Test a configured executable path is passed through."""
        settings = Settings(_env_file=None, browser_executable=tmp_path / "chrome", headless=False)
        factory, playwright, _ = _mock_playwright()

        with patch("cv_craft.pdf.browser.async_playwright", factory):
            asyncio.run(BrowserManager(settings).get_browser())

        kwargs = playwright.chromium.launch.call_args.kwargs
        assert kwargs["executable_path"] == str(tmp_path / "chrome")
        assert kwargs["headless"] is False


class TestRenderPdf:
    """Tests for render_pdf and render_background_pdf."""

    def test_render_sequence(self, test_settings: Settings) -> None:
        """Test viewport, load waits, font wait and print options."""
        page = _mock_page()
        factory, _, browser = _mock_playwright(page)

        with patch("cv_craft.pdf.browser.async_playwright", factory):
            result = asyncio.run(BrowserManager(test_settings).render_pdf("<html></html>"))

        assert result == b"%PDF-1.7 fake"
        new_page_kwargs = browser.new_page.call_args.kwargs
        assert new_page_kwargs["viewport"] == {"width": 794, "height": 1123}
        assert new_page_kwargs["device_scale_factor"] == 2

        page.set_content.assert_awaited_once()
        assert page.set_content.call_args.kwargs["wait_until"] == "domcontentloaded"
        page.wait_for_load_state.assert_awaited_once()
        assert page.wait_for_load_state.call_args.args[0] == "networkidle"
        page.evaluate.assert_awaited_once()

        pdf_kwargs = page.pdf.call_args.kwargs
        assert pdf_kwargs["format"] == "A4"
        assert pdf_kwargs["print_background"] is True
        assert pdf_kwargs["prefer_css_page_size"] is True
        assert pdf_kwargs["margin"] == {"top": "0", "right": "0", "bottom": "0", "left": "0"}
        page.close.assert_awaited_once()

    def test_settle_delay(self, tmp_path) -> None:
        """Test the settle pause after fonts are ready."""
        settings = Settings(_env_file=None, settle_delay_ms=250, font_timeout_seconds=1)
        page = _mock_page()
        factory, _, _ = _mock_playwright(page)

        with patch("cv_craft.pdf.browser.async_playwright", factory):
            asyncio.run(BrowserManager(settings).render_pdf("<html></html>"))

        page.wait_for_timeout.assert_awaited_once_with(250)

    def test_font_timeout_degrades(self, test_settings: Settings, caplog) -> None:
        """Test a font signal that never resolves still yields a PDF."""
        page = _mock_page()

        async def never_ready(*args, **kwargs):
            await asyncio.sleep(3600)

        page.evaluate = AsyncMock(side_effect=never_ready)
        factory, _, _ = _mock_playwright(page)

        with patch("cv_craft.pdf.browser.async_playwright", factory):
            with caplog.at_level(logging.WARNING, logger="cv_craft.pdf.browser"):
                result = asyncio.run(
                    asyncio.wait_for(
                        BrowserManager(test_settings).render_pdf("<html></html>"), timeout=5
                    )
                )

        assert result == b"%PDF-1.7 fake"
        assert "Font loading timed out" in caplog.text

    def test_network_idle_timeout_is_not_fatal(self, test_settings: Settings, caplog) -> None:
        """Test an unreachable font CDN does not fail the render."""
        from playwright.async_api import TimeoutError as PlaywrightTimeoutError

        page = _mock_page()
        page.wait_for_load_state.side_effect = PlaywrightTimeoutError("networkidle")
        factory, _, _ = _mock_playwright(page)

        with patch("cv_craft.pdf.browser.async_playwright", factory):
            with caplog.at_level(logging.WARNING, logger="cv_craft.pdf.browser"):
                result = asyncio.run(BrowserManager(test_settings).render_pdf("<html></html>"))

        assert result == b"%PDF-1.7 fake"
        assert "Network did not go idle" in caplog.text

    def test_page_closed_on_failure(self, test_settings: Settings) -> None:
        """Test print failures raise RenderError and still close the page."""
        page = _mock_page()
        page.pdf.side_effect = PlaywrightError("Target closed")
        factory, _, _ = _mock_playwright(page)

        with patch("cv_craft.pdf.browser.async_playwright", factory):
            with pytest.raises(RenderError, match="Target closed"):
                asyncio.run(BrowserManager(test_settings).render_pdf("<html></html>"))

        page.close.assert_awaited_once()

    def test_background_skips_font_wait(self, test_settings: Settings) -> None:
        """Test the background layer does not wait for fonts."""
        page = _mock_page()
        factory, _, _ = _mock_playwright(page)

        with patch("cv_craft.pdf.browser.async_playwright", factory):
            asyncio.run(BrowserManager(test_settings).render_background_pdf("<html></html>"))

        page.evaluate.assert_not_awaited()
        page.wait_for_timeout.assert_not_awaited()
        page.pdf.assert_awaited_once()
