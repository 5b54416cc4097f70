"""City and region guesses from address markup and page copy.

Both guesses are tuned for Norwegian sites: four-digit postal codes
followed by a place name, and the county (fylke) names.
"""

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup

from pitchscan.extraction.cleaner import extract_text_lines

ADDRESS_LOCALITY = re.compile(r'"addresslocality"\s*:\s*"([^"]+)"', re.IGNORECASE)
ADDRESS_REGION = re.compile(r'"addressregion"\s*:\s*"([^"]+)"', re.IGNORECASE)

# "2830 Raufoss"
POSTCODE_PLACE = re.compile(r"\b(\d{4})\s+([a-zæøå\- ]{2,})\b")

MIN_PLACE_LENGTH = 3

# Country names that follow postal codes in footers ("0150 Oslo, Norge")
COUNTRY_NAMES = ("norge", "norway")

# Checked in this order; the first one present wins
KNOWN_REGIONS = (
    "innlandet",
    "vestland",
    "rogaland",
    "trøndelag",
    "nordland",
    "oslo",
    "viken",
    "vestfold og telemark",
    "møre og romsdal",
    "troms og finnmark",
    "agder",
    "telemark",
    "buskerud",
    "hordaland",
    "sogn og fjordane",
    "oppland",
    "hedmark",
)


@dataclass(frozen=True)
class LocaleGuess:
    """Where the business probably operates. Either part may be unknown."""

    city: str | None = None
    region: str | None = None


def title_case(value: str) -> str:
    """Upper-case the first letter of every space-separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in value.split(" "))


def _is_place_name(candidate: str) -> bool:
    if len(candidate) < MIN_PLACE_LENGTH:
        return False
    return not any(country in candidate for country in COUNTRY_NAMES)


def guess_city(html: str, soup: BeautifulSoup | None = None) -> str | None:
    """
    Guess the city from JSON-LD ``addressLocality`` or a postal-code line.

    The first non-empty structured-data value wins over postal codes found
    in the copy and is taken as-is. Postal-code candidates that name the
    country or are very short are skipped.
    """
    lower = (html or "").lower()

    match = ADDRESS_LOCALITY.search(lower)
    if match and match.group(1).strip():
        return title_case(match.group(1).strip())

    for line in extract_text_lines(html, soup):
        for match in POSTCODE_PLACE.finditer(line.lower()):
            candidate = match.group(2).strip()
            if _is_place_name(candidate):
                return title_case(candidate)

    return None


def guess_region(html: str) -> str | None:
    """Guess the county from JSON-LD ``addressRegion`` or a known county name."""
    lower = (html or "").lower()

    match = ADDRESS_REGION.search(lower)
    if match and match.group(1).strip():
        return title_case(match.group(1).strip())

    for region in KNOWN_REGIONS:
        if region in lower:
            return title_case(region)

    return None


def guess_locale(html: str, soup: BeautifulSoup | None = None) -> LocaleGuess:
    """Guess city and region independently."""
    return LocaleGuess(city=guess_city(html, soup), region=guess_region(html))
