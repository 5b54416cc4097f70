"""Boolean content signals: structured data, FAQ, service headings."""

from bs4 import BeautifulSoup

from pitchscan.extraction.cleaner import element_text, parse_html

JSON_LD_TYPE = "application/ld+json"

FAQ_PHRASES = (
    "faq",
    "ofte stilte spørsmål",
    "frequently asked questions",
)

# Headings that tell search engines what the business sells
SERVICE_PHRASES = (
    "tjenester",
    "produkter",
    "vi tilbyr",
    "våre tjenester",
    "services",
    "products",
    "we offer",
    "our services",
)

SERVICE_HEADING_TAGS = ["h1", "h2", "h3"]


def _is_json_ld(type_attr: str | None) -> bool:
    return bool(type_attr) and type_attr.strip().lower() == JSON_LD_TYPE


def has_structured_data(html: str, soup: BeautifulSoup | None = None) -> bool:
    """True if the page declares a JSON-LD script block."""
    soup = soup if soup is not None else parse_html(html)
    return soup.find("script", attrs={"type": _is_json_ld}) is not None


def has_faq(html: str, soup: BeautifulSoup | None = None) -> bool:
    """
    True if the page mentions an FAQ or uses a disclosure widget.

    The phrase check runs over the raw markup, so FAQ links and ids count.
    """
    lower = (html or "").lower()
    if any(phrase in lower for phrase in FAQ_PHRASES):
        return True

    soup = soup if soup is not None else parse_html(html)
    return any(details.find("summary") is not None for details in soup.find_all("details"))


def service_heading_text(html: str, soup: BeautifulSoup | None = None) -> str:
    """Lowercased text of all H1-H3 headings, space separated."""
    soup = soup if soup is not None else parse_html(html)
    return " ".join(element_text(tag) for tag in soup.find_all(SERVICE_HEADING_TAGS)).lower()


def has_service_terms(html: str, soup: BeautifulSoup | None = None) -> bool:
    """True if any H1-H3 heading names services or products."""
    headings = service_heading_text(html, soup)
    return any(phrase in headings for phrase in SERVICE_PHRASES)
