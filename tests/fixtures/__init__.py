"""Test fixtures: HTML builders and fake HTML sources."""

from tests.fixtures.pages import FailingSource, StaticSource, filler_text, make_html

__all__ = [
    "FailingSource",
    "StaticSource",
    "filler_text",
    "make_html",
]
