"""Main keyword (industry / core service) guess."""

from bs4 import BeautifulSoup

from pitchscan.crawler.url import extract_host
from pitchscan.extraction.cleaner import element_text, normalize_whitespace, parse_html

DEFAULT_KEYWORD_PLACEHOLDER = "din tjeneste"

MIN_TOKEN_LENGTH = 3
MAX_TOKENS = 2


def _keyword_source(soup: BeautifulSoup, url: str) -> str:
    """First non-empty of: first <h1>, <title>, URL host."""
    h1 = soup.find("h1")
    if h1 is not None:
        text = element_text(h1)
        if text:
            return text

    if soup.title is not None:
        text = element_text(soup.title)
        if text:
            return text

    return extract_host(url)


def guess_main_keyword(
    html: str,
    url: str,
    placeholder: str = DEFAULT_KEYWORD_PLACEHOLDER,
    soup: BeautifulSoup | None = None,
) -> str:
    """
    Guess what the business offers from its most prominent text.

    Takes the first two tokens longer than two characters from the H1,
    falling back to the title and then the host name.

    Args:
        html: Raw HTML string
        url: Page URL, used when the document has no H1 or title
        placeholder: Returned when no token qualifies
        soup: Optional already-parsed document

    Returns:
        Keyword phrase of one or two tokens, or the placeholder
    """
    soup = soup if soup is not None else parse_html(html)
    source = normalize_whitespace(_keyword_source(soup, url))
    words = [w for w in source.split(" ") if len(w) >= MIN_TOKEN_LENGTH]
    if not words:
        return placeholder
    return " ".join(words[:MAX_TOKENS])
