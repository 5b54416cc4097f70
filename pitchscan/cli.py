"""Command-line entry point.

Usage:
    TARGET_URL=https://example.no pitchscan
    pitchscan https://example.no --static --output rapport.txt --language en
"""

import argparse
import asyncio
from pathlib import Path

import structlog

from pitchscan.config import RenderMode, ReportLanguage, Settings, get_settings
from pitchscan.exceptions import PitchscanError
from pitchscan.logging import setup_logging
from pitchscan.pipeline import run

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pitchscan",
        description="Fetch a web page and write a heuristic SEO/UU/AEO sales report",
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="Page to analyze (defaults to TARGET_URL)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--static",
        dest="render_mode",
        action="store_const",
        const=RenderMode.STATIC,
        help="Plain HTTP fetch without JavaScript",
    )
    mode.add_argument(
        "--render",
        dest="render_mode",
        action="store_const",
        const=RenderMode.RENDERED,
        help="Render the page in headless Chromium (default)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Report file path (defaults to REPORT_PATH)",
    )
    parser.add_argument(
        "--language",
        choices=[lang.value for lang in ReportLanguage],
        help="Report language (defaults to REPORT_LANGUAGE)",
    )
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Apply command-line overrides on top of environment settings."""
    settings = base or get_settings()
    overrides: dict = {}
    if args.url:
        overrides["target_url"] = args.url
    if args.render_mode:
        overrides["render_mode"] = args.render_mode
    if args.output:
        overrides["report_path"] = args.output
    if args.language:
        overrides["report_language"] = ReportLanguage(args.language)
    return settings.model_copy(update=overrides)


def main(argv: list[str] | None = None) -> int:
    """Run the report and return a process exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = resolve_settings(args)
    except PitchscanError as e:
        setup_logging(Settings.model_construct())
        logger.error("report_failed", code=e.code, error=e.message)
        return 1

    setup_logging(settings)

    try:
        asyncio.run(run(settings))
    except PitchscanError as e:
        logger.error("report_failed", code=e.code, error=e.message, **e.details)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
