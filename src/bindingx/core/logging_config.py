"""Structured logging configuration using structlog.

Provides JSON logs in production and colored console output in development.
The package never configures logging itself; applications call
:func:`setup_logging` once at startup, usually with
``get_settings().observability``.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from bindingx.core.config import ObservabilityConfig


def setup_logging(config: ObservabilityConfig) -> None:
    """Route stdlib log records through structlog's formatter on stderr."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    final_processors: list = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if sys.stderr.isatty():
        # Dev mode: colored console
        final_processors.append(structlog.dev.ConsoleRenderer())
    else:
        # Production: JSON lines
        final_processors.append(structlog.processors.format_exc_info)
        final_processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=final_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("bindingx").setLevel(level)
