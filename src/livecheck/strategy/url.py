"""
URL eligibility check for HTTP-based strategies.
"""

from __future__ import annotations

from urllib.parse import urlparse

HTTP_SCHEMES = frozenset({"http", "https"})


def match(url: str) -> bool:
    """Return True if ``url`` uses an http or https scheme."""
    try:
        parsed_url = urlparse(url)
        return parsed_url.scheme.lower() in HTTP_SCHEMES
    except (ValueError, AttributeError, TypeError):
        return False
