"""
Version-finding strategies.

The YAML strategy hands a parsed YAML document to a caller-supplied routine and
turns whatever it returns into an ordered mapping of version strings to
``Version`` values.
"""

from .errors import (
    INVALID_BLOCK_RETURN_VALUE_MSG,
    ArityError,
    InvalidReturnTypeError,
    MissingBlockError,
    ParseError,
    StrategyError,
)
from .extraction import (
    Empty,
    Many,
    PatternAwareExtractor,
    RawResult,
    Single,
    SingleArgExtractor,
    extract,
    normalize_versions,
    routine_arity,
    to_raw_result,
)
from .models import MatchData
from .parser import parse_yaml
from .protocols import Fetcher
from .tree import dig, is_blank, iter_items, match_scalar
from .url import match
from .yaml_strategy import YamlStrategy, find_versions, versions_from_content

__all__ = [
    "INVALID_BLOCK_RETURN_VALUE_MSG",
    "ArityError",
    "Empty",
    "Fetcher",
    "InvalidReturnTypeError",
    "Many",
    "MatchData",
    "MissingBlockError",
    "ParseError",
    "PatternAwareExtractor",
    "RawResult",
    "Single",
    "SingleArgExtractor",
    "StrategyError",
    "YamlStrategy",
    "dig",
    "extract",
    "find_versions",
    "is_blank",
    "iter_items",
    "match",
    "match_scalar",
    "normalize_versions",
    "parse_yaml",
    "routine_arity",
    "to_raw_result",
    "versions_from_content",
]
