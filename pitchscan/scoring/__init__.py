"""SEO scoring."""

from pitchscan.scoring.calculator import (
    DEFAULT_SCORING,
    ScoreLabel,
    ScoringConfig,
    calculate_seo_score,
    seo_label,
)

__all__ = [
    "DEFAULT_SCORING",
    "ScoreLabel",
    "ScoringConfig",
    "calculate_seo_score",
    "seo_label",
]
