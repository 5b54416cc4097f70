"""Low-contrast text heuristics.

No colour maths: this only spots markup that often produces light-grey
text on a light background (utility classes, inline colours, a body
colour rule).
"""

import re
from dataclasses import dataclass
from enum import StrEnum

import structlog
from bs4 import BeautifulSoup

from pitchscan.extraction.cleaner import parse_html

logger = structlog.get_logger(__name__)

MAX_EXAMPLES = 5
CONTEXT_LENGTH = 50

# Tailwind-style light text utilities
LIGHT_TEXT_CLASS = re.compile(
    r"text-(?:gray|slate|neutral|zinc|stone)-[23]00|text-muted", re.IGNORECASE
)
INLINE_COLOR = re.compile(r"color:\s*(#[0-9a-f]{3,6}|rgba?\([^)]*\))", re.IGNORECASE)
BODY_COLOR_RULE = re.compile(r"body\s*\{[^}]*color:\s*(#[0-9a-f]{3,6})", re.IGNORECASE)


class ContrastExampleKind(StrEnum):
    """Which pattern produced an example."""

    CLASS = "class"
    INLINE_STYLE = "inline_style"
    BODY_RULE = "body_rule"


class ContrastRisk(StrEnum):
    """Coarse contrast risk level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class ContrastExample:
    """A single suspicious piece of markup."""

    kind: ContrastExampleKind
    value: str  # Matched class name or colour
    context: str = ""  # Truncated class attribute, class examples only

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "value": self.value, "context": self.context}


@dataclass(frozen=True)
class ContrastScan:
    """Examples kept for the report plus the total number of hits."""

    examples: tuple[ContrastExample, ...]
    total_matches: int


def _iter_matches(soup: BeautifulSoup):
    """Yield examples in pattern order: classes, inline styles, body rules."""
    for tag in soup.find_all(class_=True):
        classes = tag.get("class", [])
        class_attr = " ".join(classes) if isinstance(classes, list) else str(classes)
        match = LIGHT_TEXT_CLASS.search(class_attr)
        if match:
            yield ContrastExample(
                kind=ContrastExampleKind.CLASS,
                value=match.group(0),
                context=class_attr[:CONTEXT_LENGTH],
            )

    for tag in soup.find_all(style=True):
        match = INLINE_COLOR.search(str(tag.get("style", "")))
        if match:
            yield ContrastExample(kind=ContrastExampleKind.INLINE_STYLE, value=match.group(1))

    for block in soup.find_all("style"):
        match = BODY_COLOR_RULE.search(block.get_text())
        if match:
            yield ContrastExample(kind=ContrastExampleKind.BODY_RULE, value=match.group(1))


def scan_contrast(html: str, soup: BeautifulSoup | None = None) -> ContrastScan:
    """
    Collect up to five contrast-risk examples and count every match.

    Args:
        html: Raw HTML string
        soup: Optional already-parsed document

    Returns:
        ContrastScan with capped examples and the uncapped match count
    """
    soup = soup if soup is not None else parse_html(html)
    examples: list[ContrastExample] = []
    total = 0

    for example in _iter_matches(soup):
        total += 1
        if len(examples) < MAX_EXAMPLES:
            examples.append(example)

    logger.debug("contrast_scan_complete", matches=total, kept=len(examples))
    return ContrastScan(examples=tuple(examples), total_matches=total)


def estimate_contrast_risk(match_count: int) -> ContrastRisk:
    """More than five hits is high, any hit is medium, none is low."""
    if match_count > MAX_EXAMPLES:
        return ContrastRisk.HIGH
    if match_count > 0:
        return ContrastRisk.MEDIUM
    return ContrastRisk.LOW
