"""maxbot logging configuration.

maxbot logs through ``structlog``. The library itself never configures
logging; applications (and examples) call ``setup_logging`` once at startup.

Two output modes:
- Human (default): colored console output to stderr
- JSON: structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

from maxbot.constants import ENV_LOG_LEVEL

DEFAULT_LOG_LEVEL = "WARNING"


def resolve_level(level: str | None = None) -> int:
    """Level from the argument, else ``MAXBOT_LOG_LEVEL``, else WARNING.

    Raises:
        ValueError: If the level name is unknown
    """
    name = (level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {name}")
    return resolved


def setup_logging(level: str | None = None, *, json_output: bool = False) -> None:
    """Configure structlog processors and output routing.

    Args:
        level: Optional override for ``MAXBOT_LOG_LEVEL``
        json_output: Use the JSON renderer instead of the console renderer
    """
    maxbot_level = resolve_level(level)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("maxbot").setLevel(maxbot_level)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
