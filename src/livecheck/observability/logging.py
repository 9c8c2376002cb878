"""
Configures structured logging for livecheck using structlog.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import TYPE_CHECKING, Any, Dict, List

import structlog

if TYPE_CHECKING:
    from livecheck.config.config import MonitoringConfig


def render_patterns(logger: Any, method_name: str, event_dict: Dict[Any, Any]) -> Dict[Any, Any]:
    """
    Replaces compiled regular expressions in the record with their source text.
    """
    for key, value in event_dict.items():
        if isinstance(value, re.Pattern):
            event_dict[key] = value.pattern
    return event_dict


def configure_logging(config: MonitoringConfig) -> None:
    """
    Sets up structlog to handle all logging for livecheck.

    Records go to ``config.log_file`` as JSON lines when it is set, otherwise
    to stderr through the console renderer.
    """
    shared_processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        render_patterns,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    log_renderer: Any
    if config.log_file:
        log_renderer = structlog.processors.JSONRenderer()
        handler: logging.Handler = logging.FileHandler(config.log_file, encoding="utf-8")
    else:
        log_renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        handler = logging.StreamHandler(sys.stderr)

    # stdlib records (aiohttp, asyncio) share the structlog pipeline
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                log_renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(config.log_level)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.get_logger("livecheck.logging").info(
        "Logging configured", level=config.log_level, output=config.log_file or "console"
    )
