"""
Data models for fetched pages.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PageContent:
    """Body text of a fetched page and whether it came from the page cache."""

    content: str
    cached: bool = False
