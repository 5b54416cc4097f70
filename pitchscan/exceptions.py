"""Custom exceptions and error handling."""

from typing import Any


class PitchscanError(Exception):
    """Base exception for the report generator."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(PitchscanError):
    """Required configuration is missing or invalid."""

    def __init__(self, message: str, setting: str | None = None):
        details = {"setting": setting} if setting else {}
        super().__init__(message=message, code="configuration_error", details=details)


class FetchError(PitchscanError):
    """The target page could not be retrieved."""

    def __init__(self, url: str, message: str, code: str = "fetch_error"):
        self.url = url
        super().__init__(message=message, code=code, details={"url": url})


class InvalidURLError(FetchError):
    """URL is malformed or uses an unsupported scheme."""

    def __init__(self, url: str):
        super().__init__(url, f"Invalid URL: {url!r}", code="invalid_url")


class TooManyRedirectsError(FetchError):
    """Redirect chain exceeded the configured cap."""

    def __init__(self, url: str, max_redirects: int):
        self.max_redirects = max_redirects
        super().__init__(
            url,
            f"Too many redirects (more than {max_redirects}) fetching {url}",
            code="too_many_redirects",
        )


class FetchTimeoutError(FetchError):
    """Request did not complete in time."""

    def __init__(self, url: str, message: str | None = None, code: str = "fetch_timeout"):
        super().__init__(url, message or f"Request timed out: {url}", code=code)


class RenderTimeoutError(FetchTimeoutError):
    """Headless browser did not reach network idle in time."""

    def __init__(self, url: str, timeout_ms: int):
        self.timeout_ms = timeout_ms
        super().__init__(
            url,
            f"Timeout rendering {url} after {timeout_ms} ms",
            code="render_timeout",
        )


class HTTPStatusError(FetchError):
    """Server answered with an error status."""

    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"HTTP error: {status_code} for {url}", code="http_status")
