"""Plain HTTP fetcher with a capped redirect chain."""

import httpx
import structlog

from pitchscan.crawler.page import Page
from pitchscan.crawler.url import validate_url
from pitchscan.exceptions import (
    FetchError,
    FetchTimeoutError,
    HTTPStatusError,
    TooManyRedirectsError,
)

logger = structlog.get_logger(__name__)

DEFAULT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "nb-NO,nb;q=0.9,en-US;q=0.7,en;q=0.5",
}


class HttpFetcher:
    """Fetches raw HTML over HTTP(S) without executing JavaScript."""

    def __init__(
        self,
        user_agent: str,
        timeout: float = 30.0,
        max_redirects: int = 5,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_redirects = max_redirects
        self._transport = transport

    async def fetch(self, url: str) -> Page:
        """
        Fetch a URL, following up to ``max_redirects`` redirects.

        Args:
            url: Absolute http(s) URL

        Returns:
            Page with the body of the final response

        Raises:
            InvalidURLError: URL rejected before any request
            TooManyRedirectsError: Redirect chain longer than the cap
            FetchTimeoutError: Request timed out
            HTTPStatusError: Final response had a 4xx/5xx status
            FetchError: Any other transport failure
        """
        start_url = validate_url(url)

        logger.info("fetch_started", url=start_url, strategy="http")

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            max_redirects=self.max_redirects,
            transport=self._transport,
            headers={"User-Agent": self.user_agent, **DEFAULT_HEADERS},
        ) as client:
            response = await self._get(client, start_url)

        for hop, redirect in enumerate(response.history, start=1):
            logger.debug(
                "redirect_followed",
                status_code=redirect.status_code,
                from_url=str(redirect.url),
                location=redirect.headers.get("location"),
                hop=hop,
            )

        final_url = str(response.url)
        if response.status_code >= 400:
            raise HTTPStatusError(final_url, response.status_code)

        logger.info(
            "fetch_complete",
            url=start_url,
            final_url=final_url,
            status_code=response.status_code,
            redirects=len(response.history),
            bytes=len(response.content),
        )
        return Page(url=start_url, final_url=final_url, html=response.text)

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        """Issue the GET (redirects included), mapping httpx errors onto fetch errors."""
        try:
            return await client.get(url)
        except httpx.TimeoutException as e:
            raise FetchTimeoutError(url, f"Request timed out: {url}") from e
        except httpx.TooManyRedirects as e:
            raise TooManyRedirectsError(url, self.max_redirects) from e
        except httpx.InvalidURL as e:
            raise FetchError(url, f"Invalid URL: {url}", code="invalid_url") from e
        except httpx.HTTPError as e:
            raise FetchError(url, f"{type(e).__name__}: {e}") from e
