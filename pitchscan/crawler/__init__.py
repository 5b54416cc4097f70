"""Page fetching strategies."""

from pitchscan.config import RenderMode, Settings
from pitchscan.crawler.page import HtmlSource, Page

__all__ = [
    "HtmlSource",
    "Page",
    "get_html_source",
]


def get_html_source(settings: Settings) -> HtmlSource:
    """Pick the fetch strategy configured by ``settings.render_mode``."""
    if settings.render_mode == RenderMode.STATIC:
        from pitchscan.crawler.fetcher import HttpFetcher

        return HttpFetcher(
            user_agent=settings.user_agent,
            timeout=settings.fetch_timeout,
            max_redirects=settings.max_redirects,
        )

    # Playwright is only imported when rendering is requested
    from pitchscan.crawler.render import PageRenderer, RendererConfig

    return PageRenderer(RendererConfig(timeout=settings.render_timeout_ms))
