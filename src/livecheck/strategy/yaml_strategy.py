"""
YAML version strategy.

Fetches (or accepts) a YAML document, parses it and lets a caller-supplied
routine pick the version strings out of the parsed data::

    strategy = YamlStrategy()
    match_data = await strategy.find_versions(
        "https://example.com/releases.yml",
        regex=re.compile(r"^v?(\\d+(?:\\.\\d+)+)$", re.I),
        routine=lambda data, regex: [
            match_scalar(item.get("version"), regex) for item in iter_items(data, "versions")
        ],
    )

The strategy is never picked automatically (``PRIORITY = 0``); it only runs
when a routine is supplied.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Optional, Union

import structlog
from structlog.contextvars import bound_contextvars

from ..version import Version
from .errors import MissingBlockError
from .extraction import Routine, extract
from .models import MatchData
from .parser import parse_yaml
from .tree import is_blank
from .url import match

if TYPE_CHECKING:
    from livecheck.config.config import Config

    from .protocols import Fetcher

logger = structlog.get_logger(__name__)

PatternLike = Union[str, "re.Pattern[str]"]


def _compile(regex: Optional[PatternLike]) -> Optional["re.Pattern[str]"]:
    if regex is None or isinstance(regex, re.Pattern):
        return regex
    return re.compile(regex)


def versions_from_content(
    content: Optional[str], regex: Optional[PatternLike] = None, routine: Optional[Routine] = None
) -> List[str]:
    """
    Parse ``content`` as YAML and run ``routine`` over it.

    Returns an empty list for blank content or when no routine is given.

    Raises:
        ParseError: If the content is not valid YAML
        ArityError: If the routine needs a regex and none was given
        InvalidReturnTypeError: If the routine returned an unsupported value
    """
    if routine is None or content is None or is_blank(content):
        return []
    return extract(parse_yaml(content), _compile(regex), routine)


class YamlStrategy:
    """Finds versions in YAML documents using a caller-supplied routine."""

    NAME = "yaml"
    PRIORITY = 0

    match = staticmethod(match)
    parse_yaml = staticmethod(parse_yaml)
    extract = staticmethod(extract)
    versions_from_content = staticmethod(versions_from_content)

    def __init__(self, fetcher: Optional[Fetcher] = None, config: Optional[Config] = None) -> None:
        self._fetcher = fetcher
        self._owns_fetcher = False
        self.config = config

    @property
    def fetcher(self) -> Fetcher:
        """The page fetcher, created from config on first use."""
        if self._fetcher is None:
            from livecheck.config.config import settings
            from livecheck.crawler.page_fetcher import PageFetcher

            self._fetcher = PageFetcher(self.config or settings)
            self._owns_fetcher = True
        return self._fetcher

    async def close(self) -> None:
        """Close the page fetcher if this strategy created it."""
        if self._fetcher is not None and self._owns_fetcher:
            await self._fetcher.close()
            self._fetcher = None
            self._owns_fetcher = False

    async def __aenter__(self) -> "YamlStrategy":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def find_versions(
        self,
        url: str,
        regex: Optional[PatternLike] = None,
        provided_content: Optional[str] = None,
        routine: Optional[Routine] = None,
    ) -> MatchData:
        """
        Find versions in the YAML document at ``url``.

        Args:
            url: URL of the YAML document
            regex: Optional pattern, passed to routines that take two arguments
                and echoed back unchanged in the result
            provided_content: Pre-fetched content to use instead of fetching ``url``
            routine: Extraction routine

        Returns:
            MatchData mapping each version string to its ``Version``

        Raises:
            MissingBlockError: If no routine was given
            ParseError: If the content is not valid YAML
            ArityError: If the routine needs a regex and none was given
            InvalidReturnTypeError: If the routine returned an unsupported value
        """
        if routine is None:
            raise MissingBlockError()

        match_data = MatchData(url=url, regex=regex)
        if is_blank(url):
            logger.debug("Blank URL, skipping", strategy=self.NAME)
            return match_data

        with bound_contextvars(strategy=self.NAME, url=url, regex=regex):
            if isinstance(provided_content, str):
                content = provided_content
            else:
                page = await self.fetcher.fetch(url)
                content = page.content
                logger.debug("Fetched content", page_cached=page.cached, length=len(content))
            match_data.cached = True

            if is_blank(content):
                logger.debug("Blank content, no versions to extract")
                return match_data

            versions = extract(parse_yaml(content), _compile(regex), routine)
            match_data.matches = {version: Version(version) for version in versions}
            logger.debug("Versions found", count=len(versions))

        return match_data


async def find_versions(
    url: str,
    regex: Optional[PatternLike] = None,
    provided_content: Optional[str] = None,
    routine: Optional[Routine] = None,
    *,
    fetcher: Optional[Fetcher] = None,
) -> MatchData:
    """
    Shortcut for ``YamlStrategy(fetcher).find_versions(...)``.

    A fetcher created for the call is closed before returning.
    """
    async with YamlStrategy(fetcher=fetcher) as strategy:
        return await strategy.find_versions(url, regex=regex, provided_content=provided_content, routine=routine)
