"""
HTTP page fetcher with retries and a short-lived page cache.
"""

from __future__ import annotations

import asyncio
import random
import time
from typing import Any, Dict, Optional, Tuple

import aiohttp
import structlog

from livecheck.config.config import Config

from .models import PageContent

logger = structlog.get_logger(__name__)


class PageCache:
    """In-memory page cache with a fixed time-to-live."""

    def __init__(self, ttl_seconds: float = 300):
        self.ttl_seconds = ttl_seconds
        self._entries: Dict[str, Tuple[float, str]] = {}
        self._lock = asyncio.Lock()

    def _is_expired(self, stored_at: float, now: float) -> bool:
        return now - stored_at >= self.ttl_seconds

    async def get(self, url: str) -> Optional[str]:
        async with self._lock:
            entry = self._entries.get(url)
            if entry is None:
                return None
            stored_at, content = entry
            if self._is_expired(stored_at, time.monotonic()):
                del self._entries[url]
                return None
            return content

    async def put(self, url: str, content: str) -> None:
        """Store ``content`` for ``url``, dropping every expired entry."""
        if self.ttl_seconds <= 0:
            return
        async with self._lock:
            now = time.monotonic()
            expired = [key for key, (stored_at, _) in self._entries.items() if self._is_expired(stored_at, now)]
            for key in expired:
                del self._entries[key]
            self._entries[url] = (now, content)

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class PageFetcher:
    """Fetches page text for strategies, retrying transient failures."""

    def __init__(self, config: Optional[Config] = None, session: Optional[aiohttp.ClientSession] = None):
        self.config = config or Config()
        self.fetch_config = self.config.fetch
        self.cache = PageCache(ttl_seconds=self.fetch_config.cache_ttl_seconds)

        self.session = session
        self._owns_session = session is None

        self._requests = 0
        self._cache_hits = 0
        self._retries = 0

    async def initialize(self) -> None:
        """Create the HTTP session if none was supplied."""
        if self.session is None:
            timeout = aiohttp.ClientTimeout(total=self.fetch_config.timeout)
            self.session = aiohttp.ClientSession(
                timeout=timeout, headers={"User-Agent": self.fetch_config.user_agent}
            )
            self._owns_session = True
            logger.debug("Page fetcher session initialized", user_agent=self.fetch_config.user_agent)

    async def close(self) -> None:
        """Close the HTTP session if this fetcher created it."""
        if self.session is not None and self._owns_session:
            await self.session.close()
        self.session = None

    async def __aenter__(self) -> "PageFetcher":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _should_retry(self, status: int, attempt: int) -> bool:
        return attempt <= self.fetch_config.max_retries and status in self.fetch_config.retry_statuses

    def _calculate_backoff_delay(self, attempt: int) -> float:
        """Exponential backoff with jitter."""
        base_delay = 2 ** (attempt - 1)  # 1s, 2s, 4s
        jitter = random.uniform(0.8, 1.2)
        return base_delay * jitter

    async def _get_text(self, url: str, attempt: int) -> Tuple[int, str]:
        assert self.session is not None
        async with asyncio.timeout(self.fetch_config.timeout):
            async with self.session.get(url, allow_redirects=self.fetch_config.follow_redirects) as response:
                if self._should_retry(response.status, attempt):
                    return response.status, ""
                response.raise_for_status()
                return response.status, await response.text()

    async def fetch(self, url: str) -> PageContent:
        """
        Fetch the text of ``url``.

        Args:
            url: URL to fetch

        Returns:
            PageContent with the body text and whether it was served from cache

        Raises:
            aiohttp.ClientError: If the request fails after all retries
            asyncio.TimeoutError: If the final attempt timed out
        """
        cached_content = await self.cache.get(url)
        if cached_content is not None:
            self._cache_hits += 1
            logger.debug("Page cache hit", url=url)
            return PageContent(content=cached_content, cached=True)

        await self.initialize()

        attempt = 0
        while True:
            attempt += 1
            self._requests += 1
            try:
                status, content = await self._get_text(url, attempt)
            except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as e:
                if attempt > self.fetch_config.max_retries:
                    logger.warning("Request failed", url=url, attempts=attempt, error=str(e))
                    raise
                logger.info("Retrying request", url=url, attempt=attempt, error=str(e))
            else:
                if not self._should_retry(status, attempt):
                    await self.cache.put(url, content)
                    return PageContent(content=content, cached=False)
                logger.info("Retrying request", url=url, status=status, attempt=attempt)

            self._retries += 1
            await asyncio.sleep(self._calculate_backoff_delay(attempt))

    def get_stats(self) -> Dict[str, Any]:
        """Get current fetcher statistics."""
        return {
            "requests": self._requests,
            "cache_hits": self._cache_hits,
            "retries": self._retries,
            "cached_pages": len(self.cache),
        }
