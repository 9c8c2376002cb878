"""
YAML parsing for the YAML strategy.

Wraps PyYAML so callers only ever have to handle a single ``ParseError``.
"""

from __future__ import annotations

from typing import Any

import structlog
import yaml

from .errors import ParseError

logger = structlog.get_logger(__name__)


def parse_yaml(content: str) -> Any:
    """
    Parse YAML text into plain Python data.

    Args:
        content: YAML text

    Returns:
        Nested dicts, lists and scalars as produced by ``yaml.safe_load``

    Raises:
        ParseError: If the content is not valid YAML
    """
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        logger.debug("YAML syntax error", error=str(e))
        raise ParseError() from e
    except Exception as e:
        logger.debug("YAML parser failed", error=str(e), error_type=type(e).__name__)
        raise ParseError() from e
