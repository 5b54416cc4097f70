"""Single-pass page analysis combining every extractor and the scorer."""

from dataclasses import dataclass, field

import structlog

from pitchscan.extraction.cleaner import extract_text, parse_html
from pitchscan.extraction.contrast import (
    ContrastExample,
    ContrastRisk,
    estimate_contrast_risk,
    scan_contrast,
)
from pitchscan.extraction.counts import count_elements
from pitchscan.extraction.signals import has_faq, has_service_terms, has_structured_data
from pitchscan.scoring.calculator import (
    DEFAULT_SCORING,
    ScoringConfig,
    calculate_seo_score,
    is_very_low_text,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """All signals extracted from one page."""

    text: str = ""
    text_length: int = 0

    # Content signals
    has_schema: bool = False
    has_faq: bool = False
    has_service_words: bool = False
    very_low_text: bool = True

    # Contrast
    contrast_examples: tuple[ContrastExample, ...] = field(default_factory=tuple)
    contrast_matches: int = 0
    contrast_risk: ContrastRisk = ContrastRisk.LOW

    # Counts
    image_count: int = 0
    script_count: int = 0
    missing_alt_count: int = 0
    link_count: int = 0
    has_nav: bool = False

    seo_score: int = 0

    def to_dict(self) -> dict:
        return {
            "text_length": self.text_length,
            "has_schema": self.has_schema,
            "has_faq": self.has_faq,
            "has_service_words": self.has_service_words,
            "very_low_text": self.very_low_text,
            "contrast": {
                "risk": self.contrast_risk.value,
                "matches": self.contrast_matches,
                "examples": [e.to_dict() for e in self.contrast_examples],
            },
            "counts": {
                "images": self.image_count,
                "scripts": self.script_count,
                "missing_alt": self.missing_alt_count,
                "links": self.link_count,
                "has_nav": self.has_nav,
            },
            "seo_score": self.seo_score,
        }


def analyze_html(html: str, scoring: ScoringConfig = DEFAULT_SCORING) -> AnalysisResult:
    """
    Run every extractor over a page and score it.

    Never raises on odd markup: missing signals degrade to their defaults.

    Args:
        html: Raw (or rendered) HTML
        scoring: Score penalties and thresholds

    Returns:
        AnalysisResult for the page
    """
    soup = parse_html(html)

    text = extract_text(html, soup)
    text_length = len(text)
    very_low_text = is_very_low_text(text_length, scoring)

    schema = has_structured_data(html, soup)
    faq = has_faq(html, soup)
    service_words = has_service_terms(html, soup)

    contrast = scan_contrast(html, soup)
    counts = count_elements(html, soup)

    score = calculate_seo_score(
        has_schema=schema,
        very_low_text=very_low_text,
        has_service_words=service_words,
        config=scoring,
    )

    result = AnalysisResult(
        text=text,
        text_length=text_length,
        has_schema=schema,
        has_faq=faq,
        has_service_words=service_words,
        very_low_text=very_low_text,
        contrast_examples=contrast.examples,
        contrast_matches=contrast.total_matches,
        contrast_risk=estimate_contrast_risk(contrast.total_matches),
        image_count=counts.image_count,
        script_count=counts.script_count,
        missing_alt_count=counts.missing_alt_count,
        link_count=counts.link_count,
        has_nav=counts.has_nav,
        seo_score=score,
    )

    logger.info(
        "analysis_complete",
        text_length=text_length,
        seo_score=score,
        has_schema=schema,
        has_faq=faq,
        contrast_risk=result.contrast_risk.value,
    )
    logger.debug("analysis_signals", **result.to_dict())
    return result
