"""End-to-end report run: fetch, analyze, compose, write."""

from pathlib import Path

import structlog

from pitchscan.config import ReportLanguage, Settings
from pitchscan.crawler import HtmlSource, get_html_source
from pitchscan.extraction.analyzer import analyze_html
from pitchscan.reports.composer import build_report
from pitchscan.scoring.calculator import DEFAULT_SCORING, ScoringConfig

logger = structlog.get_logger(__name__)


async def generate_report(
    url: str,
    source: HtmlSource,
    language: ReportLanguage | str = ReportLanguage.NB,
    scoring: ScoringConfig = DEFAULT_SCORING,
) -> str:
    """
    Fetch one page and return its report text.

    Fetch errors propagate unchanged; nothing after the fetch can fail.

    Args:
        url: Target URL
        source: Fetch strategy
        language: Report language
        scoring: Score penalties and thresholds

    Returns:
        The three-part report
    """
    page = await source.fetch(url)
    analysis = analyze_html(page.html, scoring)
    return build_report(page.url, page.html, analysis, language=language, scoring=scoring)


def write_report(report: str, path: Path) -> Path:
    """Write the report as UTF-8, replacing any existing file."""
    path.write_text(report, encoding="utf-8")
    return path


async def run(settings: Settings, source: HtmlSource | None = None) -> Path:
    """
    Produce the report file described by ``settings``.

    Args:
        settings: Configuration; ``target_url`` must be set
        source: Fetch strategy override, defaults to the configured one

    Returns:
        Path of the written report

    Raises:
        ConfigurationError: TARGET_URL missing
        FetchError: The page could not be retrieved
    """
    url = settings.require_target_url()
    source = source or get_html_source(settings)

    log = logger.bind(url=url, render_mode=settings.render_mode.value)
    log.info("report_started", language=settings.report_language.value)

    report = await generate_report(url, source, language=settings.report_language)
    path = write_report(report, settings.report_path)

    log.info("report_written", path=str(path), chars=len(report))
    return path
