"""Element counts used by the accessibility and page-speed sections."""

from dataclasses import dataclass

import structlog
from bs4 import BeautifulSoup

from pitchscan.extraction.cleaner import parse_html

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PageCounts:
    """Tag counts for one page."""

    image_count: int = 0
    script_count: int = 0
    missing_alt_count: int = 0  # No alt attribute, or only whitespace
    link_count: int = 0  # <a> with an href
    has_nav: bool = False

    def to_dict(self) -> dict:
        return {
            "images": self.image_count,
            "scripts": self.script_count,
            "missing_alt": self.missing_alt_count,
            "links": self.link_count,
            "has_nav": self.has_nav,
        }


def is_missing_alt(img) -> bool:
    """An image lacks alt text if the attribute is absent or blank."""
    alt = img.get("alt")
    return alt is None or not str(alt).strip()


def count_elements(html: str, soup: BeautifulSoup | None = None) -> PageCounts:
    """
    Count images, scripts, links and images without alt text.

    Args:
        html: Raw HTML string
        soup: Optional already-parsed document

    Returns:
        PageCounts, all zero for an empty document
    """
    soup = soup if soup is not None else parse_html(html)
    images = soup.find_all("img")

    counts = PageCounts(
        image_count=len(images),
        script_count=len(soup.find_all("script")),
        missing_alt_count=sum(1 for img in images if is_missing_alt(img)),
        link_count=len(soup.find_all("a", href=True)),
        has_nav=soup.find("nav") is not None,
    )

    logger.debug("element_counts_complete", **counts.to_dict())
    return counts
