"""URL validation helpers for the fetchers."""

import re
from urllib.parse import urlparse

from pitchscan.exceptions import InvalidURLError

ALLOWED_SCHEMES = frozenset(["http", "https"])

SCHEME_PREFIX = re.compile(r"^https?://", re.IGNORECASE)


def validate_url(url: str) -> str:
    """
    Check that a URL can be fetched.

    Args:
        url: Candidate URL

    Returns:
        The URL with surrounding whitespace removed

    Raises:
        InvalidURLError: If the URL is not an absolute http(s) URL with a host
    """
    candidate = (url or "").strip()
    try:
        parsed = urlparse(candidate)
        port = parsed.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise InvalidURLError(url) from e

    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not parsed.hostname:
        raise InvalidURLError(url)
    if port is not None and not 0 < port < 65536:
        raise InvalidURLError(url)
    if any(ch.isspace() for ch in candidate):
        raise InvalidURLError(url)

    return candidate


def extract_host(url: str) -> str:
    """
    Host part of a URL as typed, without scheme or path.

    Keeps ``www.`` and any port; used as a last-resort keyword source.
    """
    return SCHEME_PREFIX.sub("", url.strip()).split("/")[0]
