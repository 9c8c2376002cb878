"""
Error types raised by livecheck strategies.

Every error here is a usage or content error: none of them are retried and a
raised error aborts the whole `find_versions` call.
"""

from __future__ import annotations

PARSE_ERROR_MSG = "Content could not be parsed as YAML."
MISSING_BLOCK_MSG = "Yaml requires a `strategy` block"
ARITY_ERROR_MSG = "Two arguments found in `strategy` block but no regex provided."
INVALID_BLOCK_RETURN_VALUE_MSG = "Return value of a strategy block must be a string or array of strings."


class StrategyError(Exception):
    """Base exception for strategy errors."""

    pass


class ParseError(StrategyError):
    """Raised when content cannot be parsed as YAML."""

    def __init__(self, message: str = PARSE_ERROR_MSG) -> None:
        super().__init__(message)


class MissingBlockError(StrategyError, ValueError):
    """Raised when no extraction routine was supplied."""

    def __init__(self, message: str = MISSING_BLOCK_MSG) -> None:
        super().__init__(message)


class ArityError(StrategyError, ValueError):
    """Raised when a two-argument routine is used without a regex."""

    def __init__(self, message: str = ARITY_ERROR_MSG) -> None:
        super().__init__(message)


class InvalidReturnTypeError(StrategyError, TypeError):
    """Raised when a routine returns something other than a string, a list of strings or None."""

    def __init__(self, message: str = INVALID_BLOCK_RETURN_VALUE_MSG) -> None:
        super().__init__(message)
