"""Sales-pitch report composition.

The report has three parts:

1. SEO score and a realistic ranking table (keyword + city + region)
2. Four problem categories (SEO, accessibility, speed, AEO), each with a
   headline, a "why" list drawn from the analysis and static consequences
3. Summary and offer, static text

Composition is pure string formatting and cannot fail.
"""

from dataclasses import dataclass

from pitchscan.config import ReportLanguage
from pitchscan.extraction.analyzer import AnalysisResult
from pitchscan.extraction.contrast import ContrastRisk
from pitchscan.extraction.keyword import guess_main_keyword
from pitchscan.extraction.locale import LocaleGuess, guess_locale
from pitchscan.reports.copy import ReportCopy, get_copy
from pitchscan.reports.ranking import (
    DEFAULT_RANKING,
    RankingConfig,
    build_ranking_rows,
    render_ranking_table,
)
from pitchscan.scoring.calculator import DEFAULT_SCORING, ScoringConfig, seo_label

MAX_LISTED_CONTRAST_EXAMPLES = 3


@dataclass(frozen=True)
class ProblemThresholds:
    """When the "why" bullets of part 2 kick in."""

    little_text_below: int = 3000  # characters
    many_images_above: int = 20
    many_scripts_above: int = 10


DEFAULT_THRESHOLDS = ProblemThresholds()


def pick_headline(headlines: tuple[str, ...], seed: int) -> str:
    """Stable choice: the same seed always gives the same headline."""
    return headlines[seed % len(headlines)]


def _bullets(items: list[str], marker: str = "-") -> str:
    return "".join(f"{marker} {item}\n" for item in items)


def _arrows(items: list[str]) -> str:
    return "".join(f"→ {item}\n" for item in items)


def build_score_section(
    url: str,
    keyword: str,
    city: str | None,
    region: str,
    analysis: AnalysisResult,
    copy: ReportCopy,
    scoring: ScoringConfig = DEFAULT_SCORING,
    ranking: RankingConfig = DEFAULT_RANKING,
) -> str:
    """Part 1: score, weak-ranking narrative and ranking table."""
    label = copy.score_labels[seo_label(analysis.seo_score, scoring)]
    your_page, score_intro = copy.score_intro

    out = f"{copy.part_heading.format(number=1)}\n"
    out += f"{your_page.format(url=url)}\n"
    out += f"{score_intro}\n"
    out += f"{analysis.seo_score} / 100 ({label})\n\n"

    out += f"{copy.weak_ranking_intro.format(url=url)}\n"
    phrases = copy.weak_phrases_with_city if city else copy.weak_phrases_without_city
    out += phrases.format(
        keyword=keyword,
        city=city,
        region=region,
        best=copy.best_qualifier,
        price=copy.price_word,
    )
    out += "\n\n"

    rows = build_ranking_rows(
        keyword,
        city,
        region,
        analysis.seo_score,
        analysis.text,
        qualifier=copy.best_qualifier,
        config=ranking,
    )
    out += render_ranking_table(rows, copy, ranking)
    return out


def _seo_reasons(
    analysis: AnalysisResult, copy: ReportCopy, thresholds: ProblemThresholds
) -> list[str]:
    reasons = []
    if not analysis.has_schema:
        reasons.append(copy.seo_no_schema)
    if analysis.text_length < thresholds.little_text_below:
        reasons.append(copy.seo_little_text.format(length=analysis.text_length))
    if not analysis.has_service_words:
        reasons.append(copy.seo_no_service_headings)
    if not analysis.has_nav:
        reasons.append(copy.seo_no_nav)
    return reasons


def _accessibility_reasons(analysis: AnalysisResult, copy: ReportCopy) -> str:
    out = ""
    if analysis.contrast_risk == ContrastRisk.HIGH:
        out += _bullets([copy.uu_high_risk])
    elif analysis.contrast_risk == ContrastRisk.MEDIUM:
        out += _bullets([copy.uu_medium_risk])

    if analysis.contrast_examples:
        out += _bullets([copy.uu_examples_intro])
        examples = [
            copy.contrast_example_formats[ex.kind].format(value=ex.value, context=ex.context)
            for ex in analysis.contrast_examples[:MAX_LISTED_CONTRAST_EXAMPLES]
        ]
        out += "".join(f"  * {ex}\n" for ex in examples)
    elif analysis.contrast_risk == ContrastRisk.LOW:
        out += _bullets([copy.uu_no_issues])

    if analysis.missing_alt_count > 0:
        out += _bullets([copy.uu_missing_alt.format(count=analysis.missing_alt_count)])
    return out


def _speed_reasons(
    analysis: AnalysisResult, copy: ReportCopy, thresholds: ProblemThresholds
) -> list[str]:
    many_images = analysis.image_count > thresholds.many_images_above
    many_scripts = analysis.script_count > thresholds.many_scripts_above

    reasons = []
    if many_images:
        reasons.append(copy.speed_many_images.format(count=analysis.image_count))
    if many_scripts:
        reasons.append(copy.speed_many_scripts.format(count=analysis.script_count))
    if not many_images and not many_scripts:
        reasons.append(copy.speed_no_obvious_issues)
    return reasons


def _aeo_reasons(analysis: AnalysisResult, copy: ReportCopy) -> list[str]:
    reasons = []
    if not analysis.has_schema:
        reasons.append(copy.aeo_no_schema)
    if not analysis.has_faq:
        reasons.append(copy.aeo_no_faq)
    if analysis.has_schema and analysis.has_faq:
        reasons.append(copy.aeo_thin_qa)
    return reasons


def _category(
    title: str, headline: str, why: str, consequences: list[str], copy: ReportCopy
) -> str:
    out = f"{title}\n{headline}\n\n"
    out += f"{copy.why_heading}\n{why}"
    out += f"\n{copy.consequences_heading}\n"
    out += _arrows(consequences)
    return out


def build_problems_section(
    url: str,
    keyword: str,
    place: str,
    analysis: AnalysisResult,
    copy: ReportCopy,
    thresholds: ProblemThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """Part 2: the four problem categories."""
    seed = analysis.text_length or 1

    categories = [
        _category(
            copy.seo_title,
            pick_headline(copy.seo_headlines, seed),
            _bullets(_seo_reasons(analysis, copy, thresholds)),
            [c.format(keyword=keyword, place=place) for c in copy.seo_consequences],
            copy,
        ),
        _category(
            copy.uu_title,
            pick_headline(copy.uu_headlines, seed),
            _accessibility_reasons(analysis, copy),
            list(copy.uu_consequences),
            copy,
        ),
        _category(
            copy.speed_title,
            pick_headline(copy.speed_headlines, seed),
            _bullets(_speed_reasons(analysis, copy, thresholds)),
            list(copy.speed_consequences),
            copy,
        ),
        _category(
            copy.aeo_title,
            pick_headline(copy.aeo_headlines, seed),
            _bullets(_aeo_reasons(analysis, copy)),
            list(copy.aeo_consequences),
            copy,
        ),
    ]

    out = f"{copy.part_heading.format(number=2)}\n"
    out += f"{copy.problems_title.format(url=url)}\n\n"
    out += "\n\n".join(categories)
    return out


def build_summary_section(copy: ReportCopy) -> str:
    """Part 3: static summary and offer."""
    findings_title, findings_intro = copy.findings_intro

    out = f"{copy.part_heading.format(number=3)}\n"
    out += f"{copy.summary_title}\n\n"
    out += f"{findings_title}\n{findings_intro}\n"
    out += _bullets(list(copy.findings), marker="*")
    out += f"\n{copy.offer_title}\n"
    out += _bullets(list(copy.offers), marker="*")
    return out


def build_report(
    url: str,
    html: str,
    analysis: AnalysisResult,
    language: ReportLanguage | str = ReportLanguage.NB,
    scoring: ScoringConfig = DEFAULT_SCORING,
    ranking: RankingConfig = DEFAULT_RANKING,
    locale: LocaleGuess | None = None,
) -> str:
    """
    Assemble the full three-part report.

    The region falls back to the city and then to a placeholder, and that
    fallback is used both in the narrative and in the ranking terms.

    Args:
        url: Page URL as requested
        html: Page HTML, used for keyword and locale guesses
        analysis: Result of analyze_html for the same HTML
        language: Report language
        scoring: Score label thresholds
        ranking: Ranking table thresholds
        locale: Precomputed locale guess, guessed from the HTML when omitted

    Returns:
        The report text
    """
    copy = get_copy(language)
    keyword = guess_main_keyword(html, url, placeholder=copy.keyword_placeholder)
    locale = locale if locale is not None else guess_locale(html)
    city = locale.city
    region = locale.region or city or copy.region_placeholder

    part1 = build_score_section(url, keyword, city, region, analysis, copy, scoring, ranking)
    part2 = build_problems_section(url, keyword, city or region, analysis, copy)
    part3 = build_summary_section(copy)

    return f"{part1}\n\n{part2}\n\n{part3}"
