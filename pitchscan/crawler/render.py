"""Headless-browser page rendering for JavaScript-heavy sites."""

from collections.abc import Sequence
from dataclasses import dataclass

import structlog
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeout
from playwright.async_api import async_playwright

from pitchscan.crawler.page import Page
from pitchscan.crawler.url import validate_url
from pitchscan.exceptions import FetchError, RenderTimeoutError

logger = structlog.get_logger(__name__)


@dataclass
class RendererConfig:
    """Configuration for the renderer."""

    timeout: int = 60000  # ms, navigation cap
    wait_until: str = "networkidle"
    launch_args: Sequence[str] = ("--no-sandbox", "--disable-setuid-sandbox")
    user_agent: str | None = None


class PageRenderer:
    """Renders pages using a Playwright headless Chromium."""

    def __init__(self, config: RendererConfig | None = None):
        self.config = config or RendererConfig()

    async def fetch(self, url: str) -> Page:
        """
        Render a page and return the resulting DOM as HTML.

        A fresh browser is launched per call and always closed, also when
        navigation fails.

        Args:
            url: URL to render

        Returns:
            Page with the rendered HTML

        Raises:
            InvalidURLError: URL rejected before launching the browser
            RenderTimeoutError: Network never went idle within the timeout
            FetchError: Any other browser or navigation failure
        """
        target = validate_url(url)

        logger.info("render_started", url=target, timeout_ms=self.config.timeout)

        try:
            async with async_playwright() as pw:
                html, final_url = await self._render(pw, target)
        except PlaywrightError as e:
            raise FetchError(target, f"Browser driver failed for {target}: {e}") from e

        logger.info("fetch_complete", url=target, final_url=final_url, bytes=len(html))
        return Page(url=target, final_url=final_url, html=html)

    async def _render(self, pw, target: str) -> tuple[str, str]:
        browser = None
        try:
            browser = await pw.chromium.launch(
                headless=True,
                args=list(self.config.launch_args),
            )
            page = await browser.new_page(user_agent=self.config.user_agent)
            await page.goto(
                target,
                wait_until=self.config.wait_until,
                timeout=self.config.timeout,
            )
            return await page.content(), page.url or target
        except PlaywrightTimeout as e:
            raise RenderTimeoutError(target, self.config.timeout) from e
        except PlaywrightError as e:
            raise FetchError(target, f"Error rendering {target}: {e}") from e
        finally:
            if browser is not None:
                await self._close(browser, target)

    async def _close(self, browser, target: str) -> None:
        """Close the browser; a failed close never replaces the render outcome."""
        try:
            await browser.close()
        except PlaywrightError as e:
            logger.warning("browser_close_failed", url=target, error=str(e))
