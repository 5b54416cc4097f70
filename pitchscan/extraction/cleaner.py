"""HTML parsing and visible-text extraction."""

import re

from bs4 import (
    BeautifulSoup,
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
)

# Tags whose text never counts as page copy
REMOVE_TAGS = frozenset(["script", "style"])

# String subclasses that are markup, not text
NON_TEXT_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)

WHITESPACE = re.compile(r"\s+")


def parse_html(html: str | None) -> BeautifulSoup:
    """Parse HTML leniently; empty or missing input yields an empty document."""
    return BeautifulSoup(html or "", "html.parser")


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim."""
    return WHITESPACE.sub(" ", text).strip()


def _text_nodes(soup: BeautifulSoup) -> list[str]:
    """Text nodes outside script/style, in document order."""
    nodes: list[str] = []
    for node in soup.find_all(string=True):
        if not isinstance(node, NavigableString) or isinstance(node, NON_TEXT_STRINGS):
            continue
        if node.parent is not None and node.parent.name in REMOVE_TAGS:
            continue
        nodes.append(str(node))
    return nodes


def extract_text(html: str, soup: BeautifulSoup | None = None) -> str:
    """
    Extract the visible text of a page.

    Scripts, styles and comments are dropped, every remaining text node is
    joined with a space and whitespace is collapsed.

    Args:
        html: Raw HTML string
        soup: Optional already-parsed document (not modified)

    Returns:
        Normalized text, empty string for empty documents
    """
    soup = soup if soup is not None else parse_html(html)
    return normalize_whitespace(" ".join(_text_nodes(soup)))


def extract_text_lines(html: str, soup: BeautifulSoup | None = None) -> list[str]:
    """Visible text split per text node, each normalized, blanks dropped."""
    soup = soup if soup is not None else parse_html(html)
    lines = (normalize_whitespace(node) for node in _text_nodes(soup))
    return [line for line in lines if line]


def element_text(tag) -> str:
    """Text of a single element with child markup replaced by spaces."""
    return normalize_whitespace(tag.get_text(separator=" "))
