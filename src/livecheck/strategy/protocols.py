"""
Protocols for the collaborators a strategy depends on.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from livecheck.crawler.models import PageContent


@runtime_checkable
class Fetcher(Protocol):
    """Source of page content for a URL."""

    async def fetch(self, url: str) -> PageContent:
        """Fetch the text of ``url``.

        Network errors are raised to the caller unchanged.
        """
        ...
