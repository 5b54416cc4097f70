"""Tests for HTML parsing and visible-text extraction."""

from pitchscan.extraction.cleaner import (
    extract_text,
    extract_text_lines,
    normalize_whitespace,
    parse_html,
)
from tests.fixtures import make_html


class TestExtractText:
    """Tests for extract_text function."""

    def test_basic_extraction(self) -> None:
        html = make_html(body="<p>Hello world</p>", title="Title")

        assert extract_text(html) == "Title Hello world"

    def test_removes_script_tags(self) -> None:
        html = make_html(body="<p>Content</p><script>alert('test');</script><p>More</p>")
        text = extract_text(html)

        assert "alert" not in text
        assert text == "Content More"

    def test_removes_style_tags(self) -> None:
        html = make_html(body="<p>Content</p>", head="<style>.test { color: red; }</style>")

        assert "color: red" not in extract_text(html)

    def test_removes_comments_and_doctype(self) -> None:
        html = make_html(body="<!-- This is a comment --><p>Visible content</p>")
        text = extract_text(html)

        assert "This is a comment" not in text
        assert text == "Visible content"

    def test_normalizes_whitespace(self) -> None:
        html = make_html(body="<p>  Lots\n\n of\t\tspace  </p>")

        assert extract_text(html) == "Lots of space"

    def test_handles_empty_html(self) -> None:
        assert extract_text("") == ""
        assert extract_text(None) == ""  # type: ignore[arg-type]

    def test_does_not_modify_given_soup(self) -> None:
        html = make_html(body="<p>Text</p><script>var x = 1;</script>")
        soup = parse_html(html)

        extract_text(html, soup)

        assert soup.find("script") is not None


class TestExtractTextLines:
    """Tests for extract_text_lines function."""

    def test_one_line_per_text_node(self) -> None:
        html = make_html(body="<p>Storgata 1</p><p>2830 Raufoss</p><p>   </p>")

        assert extract_text_lines(html) == ["Storgata 1", "2830 Raufoss"]


def test_normalize_whitespace() -> None:
    assert normalize_whitespace("  a \n b\t") == "a b"
