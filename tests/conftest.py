"""
Test configuration for livecheck.

Shared fixtures for strategy, fetcher and configuration tests.
"""

import os
import re
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from livecheck.config import Config, LazyConfig
from livecheck.crawler import PageContent, PageFetcher

os.environ.setdefault("LIVECHECK_MONITORING__LOG_LEVEL", "DEBUG")

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")
    config.addinivalue_line("markers", "network: Tests requiring network access")


# ============================================================================
# URL and Pattern Fixtures
# ============================================================================


@pytest.fixture
def http_url() -> str:
    return "https://brew.sh/blog/"


@pytest.fixture
def non_http_url() -> str:
    return "ftp://brew.sh/"


@pytest.fixture
def regex() -> "re.Pattern[str]":
    return re.compile(r"^v?(\d+(?:\.\d+)+)$", re.IGNORECASE)


# ============================================================================
# YAML Content Fixtures
# ============================================================================


@pytest.fixture
def content() -> str:
    """Release list with pre-releases and one entry missing its version."""
    return """\
versions:
  - version: 1.1.2
  - version: 1.1.2b
  - version: 1.1.2a
  - version: 1.1.1
  - version: 1.1.0
  - version: 1.1.0-rc3
  - version: 1.1.0-rc2
  - version: 1.1.0-rc1
  - version: 1.0.x-last
  - version: 1.0.3
  - version: 1.0.3-rc3
  - version: 1.0.3-rc2
  - version: 1.0.3-rc1
  - version: 1.0.2
  - version: 1.0.2-rc1
  - version: 1.0.1
  - version: 1.0.1-rc1
  - version: 1.0.0
  - version: 1.0.0-rc1
  - other: version is omitted from this object for testing
"""


@pytest.fixture
def content_simple() -> str:
    return "version: 1.2.3"


@pytest.fixture
def content_invalid() -> str:
    """Block scalar indicator followed by garbage, a YAML scanner error."""
    return ">~"


@pytest.fixture
def content_matches() -> list:
    return ["1.1.2", "1.1.1", "1.1.0", "1.0.3", "1.0.2", "1.0.1", "1.0.0"]


@pytest.fixture
def content_simple_matches() -> list:
    return ["1.2.3"]


@pytest.fixture
def filter_versions():
    """Two-argument routine that keeps entries whose version matches the regex."""

    def routine(yaml_data, regex):
        return [
            regex.match(item["version"]).group(1)
            for item in yaml_data["versions"]
            if isinstance(item.get("version"), str) and regex.match(item["version"])
        ]

    return routine


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Configuration with short timeouts and no retries."""
    config = Config()
    config.fetch.timeout = 5.0
    config.fetch.max_retries = 0
    config.fetch.user_agent = "TestBot/1.0"
    config.monitoring.log_file = str(tmp_path / "livecheck.log")
    return config


@pytest.fixture(autouse=True)
def reset_lazy_config():
    """Make every test load the lazy settings from scratch."""
    LazyConfig.reset()
    yield
    LazyConfig.reset()


# ============================================================================
# Fetcher Fixtures
# ============================================================================


class StubFetcher:
    """Fetcher returning canned content and recording requested URLs."""

    def __init__(self, content: str = "", cached: bool = False):
        self.content = content
        self.cached = cached
        self.calls: list = []

    async def fetch(self, url: str) -> PageContent:
        self.calls.append(url)
        return PageContent(content=self.content, cached=self.cached)


@pytest.fixture
def stub_fetcher_cls() -> type:
    return StubFetcher


@pytest.fixture
def stub_fetcher() -> StubFetcher:
    return StubFetcher()


@pytest_asyncio.fixture
async def page_fetcher(test_config) -> AsyncGenerator[PageFetcher, None]:
    """Initialized page fetcher backed by a real aiohttp session."""
    async with PageFetcher(test_config) as fetcher:
        yield fetcher
