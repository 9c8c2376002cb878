"""
Page fetching for livecheck strategies.
"""

from .models import PageContent
from .page_fetcher import PageCache, PageFetcher

__all__ = ["PageCache", "PageContent", "PageFetcher"]
