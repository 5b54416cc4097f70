"""Tests for the Playwright page renderer (browser mocked)."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeout

from pitchscan.crawler.render import PageRenderer, RendererConfig
from pitchscan.exceptions import FetchError, InvalidURLError, RenderTimeoutError

RENDERED = "<html><body><div id='app'><h1>Rendret</h1></div></body></html>"


def mock_playwright(page: AsyncMock) -> tuple[MagicMock, MagicMock, AsyncMock]:
    """Build an async_playwright() stand-in returning the given page."""
    browser = AsyncMock()
    browser.new_page.return_value = page

    pw = MagicMock()
    pw.chromium.launch = AsyncMock(return_value=browser)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=pw)
    context.__aexit__ = AsyncMock(return_value=False)
    return context, pw, browser


def mock_page(url: str = "https://example.no/") -> AsyncMock:
    page = AsyncMock()
    page.content.return_value = RENDERED
    page.url = url
    return page


class TestPageRenderer:
    """Tests for PageRenderer.fetch."""

    @pytest.mark.asyncio
    async def test_returns_rendered_dom(self) -> None:
        page = mock_page("https://example.no/hjem")
        context, pw, browser = mock_playwright(page)

        with patch("pitchscan.crawler.render.async_playwright", return_value=context):
            result = await PageRenderer().fetch("https://example.no/")

        assert result.html == RENDERED
        assert result.url == "https://example.no/"
        assert result.final_url == "https://example.no/hjem"
        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_waits_for_network_idle_with_timeout(self) -> None:
        page = mock_page()
        context, pw, _ = mock_playwright(page)

        with patch("pitchscan.crawler.render.async_playwright", return_value=context):
            await PageRenderer(RendererConfig(timeout=1234)).fetch("https://example.no/")

        page.goto.assert_awaited_once_with(
            "https://example.no/", wait_until="networkidle", timeout=1234
        )
        launch_kwargs = pw.chromium.launch.call_args.kwargs
        assert launch_kwargs["headless"] is True
        assert "--no-sandbox" in launch_kwargs["args"]

    def test_default_timeout_is_sixty_seconds(self) -> None:
        assert RendererConfig().timeout == 60000

    @pytest.mark.asyncio
    async def test_timeout_closes_browser(self) -> None:
        page = mock_page()
        page.goto.side_effect = PlaywrightTimeout("Timeout 60000ms exceeded.")
        context, _, browser = mock_playwright(page)

        with patch("pitchscan.crawler.render.async_playwright", return_value=context):
            with pytest.raises(RenderTimeoutError) as exc_info:
                await PageRenderer().fetch("https://example.no/")

        assert exc_info.value.code == "render_timeout"
        assert exc_info.value.timeout_ms == 60000
        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_navigation_error_closes_browser(self) -> None:
        page = mock_page()
        page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")
        context, _, browser = mock_playwright(page)

        with patch("pitchscan.crawler.render.async_playwright", return_value=context):
            with pytest.raises(FetchError) as exc_info:
                await PageRenderer().fetch("https://finnesikke.example/")

        assert not isinstance(exc_info.value, RenderTimeoutError)
        assert "ERR_NAME_NOT_RESOLVED" in exc_info.value.message
        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_url_never_launches_browser(self) -> None:
        context, pw, _ = mock_playwright(mock_page())

        with patch("pitchscan.crawler.render.async_playwright", return_value=context):
            with pytest.raises(InvalidURLError):
                await PageRenderer().fetch("mailto:post@example.no")

        pw.chromium.launch.assert_not_called()

    @pytest.mark.asyncio
    async def test_driver_start_failure_is_fetch_error(self) -> None:
        context, pw, _ = mock_playwright(mock_page())
        context.__aenter__ = AsyncMock(side_effect=PlaywrightError("Executable doesn't exist"))

        with patch("pitchscan.crawler.render.async_playwright", return_value=context):
            with pytest.raises(FetchError) as exc_info:
                await PageRenderer().fetch("https://example.no/")

        assert "Executable doesn't exist" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, PlaywrightError)
        pw.chromium.launch.assert_not_called()

    @pytest.mark.asyncio
    async def test_close_failure_does_not_mask_timeout(self) -> None:
        page = mock_page()
        page.goto.side_effect = PlaywrightTimeout("Timeout 60000ms exceeded.")
        context, _, browser = mock_playwright(page)
        browser.close.side_effect = PlaywrightError("Browser has been closed")

        with patch("pitchscan.crawler.render.async_playwright", return_value=context):
            with pytest.raises(RenderTimeoutError):
                await PageRenderer().fetch("https://example.no/")

        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_failure_after_success_keeps_page(self) -> None:
        context, _, browser = mock_playwright(mock_page())
        browser.close.side_effect = PlaywrightError("Browser has been closed")

        with patch("pitchscan.crawler.render.async_playwright", return_value=context):
            result = await PageRenderer().fetch("https://example.no/")

        assert result.html == RENDERED
