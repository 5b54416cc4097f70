"""SEO score from content signals.

A flat additive rule set: start at 100 and subtract a fixed penalty for
each missing signal. The constants are heuristics, not a calibrated model.
"""

from dataclasses import dataclass
from enum import StrEnum


class ScoreLabel(StrEnum):
    """Score level classifications."""

    HIGH = "high"  # 80-100
    MEDIUM = "medium"  # 60-79
    MEDIUM_WEAK = "medium/weak"  # 40-59
    WEAK = "weak"  # 0-39


@dataclass(frozen=True)
class ScoringConfig:
    """Penalties and thresholds for the SEO score."""

    start: int = 100
    penalty: int = 20
    low_text_threshold: int = 1500  # characters of visible text

    high_threshold: int = 80
    medium_threshold: int = 60
    weak_threshold: int = 40

    min_score: int = 0
    max_score: int = 100


DEFAULT_SCORING = ScoringConfig()


def is_very_low_text(text_length: int, config: ScoringConfig = DEFAULT_SCORING) -> bool:
    """True when the page has less visible text than the threshold."""
    return text_length < config.low_text_threshold


def calculate_seo_score(
    has_schema: bool,
    very_low_text: bool,
    has_service_words: bool,
    config: ScoringConfig = DEFAULT_SCORING,
) -> int:
    """
    Calculate the 0-100 SEO score.

    Args:
        has_schema: Page declares JSON-LD structured data
        very_low_text: Page has too little visible text
        has_service_words: Headings name services or products
        config: Penalty and clamp settings

    Returns:
        Integer score clamped to [min_score, max_score]
    """
    score = config.start
    if not has_schema:
        score -= config.penalty
    if very_low_text:
        score -= config.penalty
    if not has_service_words:
        score -= config.penalty
    return max(config.min_score, min(config.max_score, score))


def seo_label(score: int, config: ScoringConfig = DEFAULT_SCORING) -> ScoreLabel:
    """Map a score to its label."""
    if score >= config.high_threshold:
        return ScoreLabel.HIGH
    elif score >= config.medium_threshold:
        return ScoreLabel.MEDIUM
    elif score >= config.weak_threshold:
        return ScoreLabel.MEDIUM_WEAK
    else:
        return ScoreLabel.WEAK
