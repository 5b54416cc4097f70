"""Tests for structured data, FAQ and service-heading signals."""

from pitchscan.extraction.signals import (
    has_faq,
    has_service_terms,
    has_structured_data,
    service_heading_text,
)
from tests.fixtures import make_html


class TestHasStructuredData:
    """Tests for has_structured_data function."""

    def test_json_ld_block(self) -> None:
        html = make_html(head='<script type="application/ld+json">{}</script>')

        assert has_structured_data(html) is True

    def test_type_attribute_is_normalized(self) -> None:
        html = make_html(head='<script type=" Application/LD+JSON ">{}</script>')

        assert has_structured_data(html) is True

    def test_other_scripts_ignored(self) -> None:
        html = make_html(head='<script type="text/javascript">var a;</script><script></script>')

        assert has_structured_data(html) is False

    def test_mention_outside_script_ignored(self) -> None:
        html = make_html(body="<p>We use application/ld+json</p>")

        assert has_structured_data(html) is False


class TestHasFaq:
    """Tests for has_faq function."""

    def test_faq_anchor(self) -> None:
        assert has_faq(make_html(body='<a href="#faq">Spørsmål</a>')) is True

    def test_norwegian_heading(self) -> None:
        assert has_faq(make_html(body="<h2>Ofte stilte spørsmål</h2>")) is True

    def test_english_heading(self) -> None:
        assert has_faq(make_html(body="<h2>Frequently Asked Questions</h2>")) is True

    def test_details_with_summary(self) -> None:
        html = make_html(body="<details><summary>Hva koster det?</summary><p>Lite.</p></details>")

        assert has_faq(html) is True

    def test_details_without_summary(self) -> None:
        assert has_faq(make_html(body="<details><p>Innhold</p></details>")) is False

    def test_no_faq(self) -> None:
        assert has_faq(make_html(body="<p>Velkommen</p>")) is False


class TestServiceTerms:
    """Tests for has_service_terms and service_heading_text."""

    def test_norwegian_heading(self) -> None:
        assert has_service_terms(make_html(body="<h2>Våre tjenester</h2>")) is True

    def test_english_heading(self) -> None:
        assert has_service_terms(make_html(body="<h3>Our Services</h3>")) is True

    def test_paragraph_does_not_count(self) -> None:
        assert has_service_terms(make_html(body="<p>Våre tjenester</p>")) is False

    def test_lower_headings_do_not_count(self) -> None:
        assert has_service_terms(make_html(body="<h4>Tjenester</h4>")) is False

    def test_heading_text(self) -> None:
        html = make_html(body="<h1>Maler</h1><p>x</p><h3>Vi TILBYR</h3><h5>Ikke med</h5>")

        assert service_heading_text(html) == "maler vi tilbyr"
