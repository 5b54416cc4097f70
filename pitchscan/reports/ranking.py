"""Expected search visibility per synthesized query term."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pitchscan.reports.copy import ReportCopy


class Visibility(StrEnum):
    """Expected visibility tier for a query."""

    MEDIUM_GOOD = "medium-good"
    MEDIUM_WEAK = "medium-weak"
    WEAK = "weak"


class RankingReason(StrEnum):
    """Why a query got its tier."""

    NO_CONTENT = "no_content"
    LIMITED_CONTENT = "limited_content"
    SOME_CONTENT = "some_content"


@dataclass(frozen=True)
class RankingConfig:
    """Thresholds and column widths for the ranking table."""

    good_min_occurrences: int = 3
    good_min_score: int = 80
    weak_min_occurrences: int = 1
    weak_min_score: int = 60

    term_width: int = 33
    visibility_width: int = 19
    reason_width: int = 45


DEFAULT_RANKING = RankingConfig()


@dataclass(frozen=True)
class RankingRow:
    """One row of the ranking table."""

    term: str
    occurrences: int
    visibility: Visibility
    reason: RankingReason


def synthesize_terms(
    keyword: str,
    city: str | None,
    region: str | None,
    qualifier: str = "beste",
) -> list[str]:
    """
    Build the query terms to evaluate, without duplicates.

    City terms come first, then region terms; with neither, the bare
    keyword is used. Order of first occurrence is kept.
    """
    terms: list[str] = []
    if city:
        terms += [f"{keyword} {city}", f"{qualifier} {keyword} {city}"]
    if region:
        terms += [f"{keyword} {region}", f"{qualifier} {keyword} {region}"]
    if not terms:
        terms += [keyword, f"{qualifier} {keyword}"]
    return list(dict.fromkeys(terms))


def count_occurrences(text: str, term: str) -> int:
    """Case-insensitive count of the exact term in the text."""
    if not term.strip():
        return 0
    return len(re.findall(re.escape(term.lower()), text.lower()))


def expected_visibility(
    score: int, occurrences: int, config: RankingConfig = DEFAULT_RANKING
) -> Visibility:
    """Tier from how often the term appears and the overall score."""
    if occurrences >= config.good_min_occurrences and score >= config.good_min_score:
        return Visibility.MEDIUM_GOOD
    if occurrences >= config.weak_min_occurrences and score >= config.weak_min_score:
        return Visibility.MEDIUM_WEAK
    return Visibility.WEAK


def ranking_reason(
    score: int, occurrences: int, config: RankingConfig = DEFAULT_RANKING
) -> RankingReason:
    """Justification key for a row."""
    if occurrences == 0:
        return RankingReason.NO_CONTENT
    if score < config.weak_min_score:
        return RankingReason.LIMITED_CONTENT
    return RankingReason.SOME_CONTENT


def build_ranking_rows(
    keyword: str,
    city: str | None,
    region: str | None,
    score: int,
    text: str,
    qualifier: str = "beste",
    config: RankingConfig = DEFAULT_RANKING,
) -> list[RankingRow]:
    """
    Evaluate every synthesized term against the page text.

    Args:
        keyword: Guessed main keyword
        city: Guessed city, if any
        region: Region (or its fallback), if any
        score: SEO score of the page
        text: Visible page text
        qualifier: Word prefixed to the "best ..." variants
        config: Tier thresholds

    Returns:
        One row per unique term, in synthesis order
    """
    rows = []
    for term in synthesize_terms(keyword, city, region, qualifier):
        occurrences = count_occurrences(text, term)
        rows.append(
            RankingRow(
                term=term,
                occurrences=occurrences,
                visibility=expected_visibility(score, occurrences, config),
                reason=ranking_reason(score, occurrences, config),
            )
        )
    return rows


def render_ranking_table(
    rows: list[RankingRow],
    copy: ReportCopy,
    config: RankingConfig = DEFAULT_RANKING,
) -> str:
    """Fixed-width three-column table: term | visibility | reason."""
    term_header, visibility_header, reason_header = copy.ranking_header
    lines = [
        copy.ranking_title,
        f"{term_header.ljust(config.term_width)} | "
        f"{visibility_header.ljust(config.visibility_width)} | {reason_header}",
        f"{'-' * config.term_width} | {'-' * config.visibility_width} | "
        f"{'-' * config.reason_width}",
    ]
    for row in rows:
        visibility = copy.visibility_labels[row.visibility]
        lines.append(
            f"{row.term.ljust(config.term_width)} | "
            f"{visibility.ljust(config.visibility_width)} | "
            f"{copy.ranking_reasons[row.reason]}"
        )
    return "\n".join(lines) + "\n"
