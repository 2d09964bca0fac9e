"""Logging setup for themectl.

Library code logs through ``get_logger(__name__)``, which wraps a standard
``logging`` logger in a structlog bound logger. Events stay silent until an
application configures output, either with ``configure_logging`` or with its
own ``logging`` handlers.
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

PACKAGE_LOGGER = "themectl"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str):
    """Structlog logger backed by the standard library logger ``name``."""
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(level: str = "WARNING", json_output: bool = False, stream: Optional[TextIO] = None) -> None:
    """Write themectl events to stderr with a level filter.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render events as JSON lines instead of console text
        stream: Destination stream, stderr by default
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(log_level)
    package_logger.propagate = False
