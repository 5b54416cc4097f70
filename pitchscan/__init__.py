"""Heuristic single-page SEO, accessibility and AEO sales report."""

__version__ = "0.1.0"
