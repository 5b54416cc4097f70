"""Fetched page value object and the HTML source contract."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Page:
    """A fetched document."""

    url: str  # As requested
    final_url: str  # After redirects
    html: str


class HtmlSource(Protocol):
    """Anything that can turn a URL into HTML."""

    async def fetch(self, url: str) -> Page:
        """Fetch a URL, raising a FetchError subclass on failure."""
        ...
