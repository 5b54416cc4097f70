"""Pytest configuration and fixtures."""

import os

import pytest

from tests.fixtures.pages import filler_text, make_html

# Set test environment before any app code reads settings
os.environ["ENV"] = "test"
os.environ.pop("TARGET_URL", None)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test reads settings fresh from its own environment."""
    from pitchscan.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def local_business_html() -> str:
    """A small-business page with address markup, nav and service headings."""
    json_ld = (
        '<script type="application/ld+json">'
        '{"@context": "https://schema.org", "@type": "LocalBusiness", '
        '"name": "Raufoss Rør", "address": {"@type": "PostalAddress", '
        '"addressLocality": "Raufoss", "addressRegion": "Innlandet", "postalCode": "2830"}}'
        "</script>"
    )
    body = (
        "<nav><a href='/'>Hjem</a><a href='/kontakt'>Kontakt</a></nav>"
        "<h1>Rørlegger Raufoss</h1>"
        "<h2>Våre tjenester</h2>"
        f"<p>{filler_text(1600, 'vann')}</p>"
        "<p>Vi er din rørlegger raufoss. Ring rørlegger raufoss i dag.</p>"
        "<img src='bad.jpg' alt='Baderom fra Raufoss Rør'>"
        "<footer>Storgata 1, 2830 Raufoss</footer>"
    )
    return make_html(body=body, title="Raufoss Rør AS", head=json_ld)
