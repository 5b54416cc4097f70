"""Heuristic HTML extractors."""

from pitchscan.extraction.analyzer import AnalysisResult, analyze_html
from pitchscan.extraction.keyword import guess_main_keyword
from pitchscan.extraction.locale import LocaleGuess, guess_city, guess_locale, guess_region

__all__ = [
    "AnalysisResult",
    "LocaleGuess",
    "analyze_html",
    "guess_city",
    "guess_locale",
    "guess_main_keyword",
    "guess_region",
]
