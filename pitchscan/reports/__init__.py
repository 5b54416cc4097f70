"""Ranking table and report composition."""

from pitchscan.reports.composer import build_report
from pitchscan.reports.copy import ReportCopy, get_copy
from pitchscan.reports.ranking import (
    RankingConfig,
    RankingRow,
    build_ranking_rows,
    render_ranking_table,
    synthesize_terms,
)

__all__ = [
    "RankingConfig",
    "RankingRow",
    "ReportCopy",
    "build_ranking_rows",
    "build_report",
    "get_copy",
    "render_ranking_table",
    "synthesize_terms",
]
