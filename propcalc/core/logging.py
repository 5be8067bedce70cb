"""Structured logging for propcalc.

structlog renders onto the stdlib ``propcalc`` logger only, so an embedding
application keeps control of the root logger. Level and renderer come from
AppSettings unless passed explicitly.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from propcalc.core.settings import get_settings

PACKAGE_LOGGER = "propcalc"

_configured: bool = False


def _processors(json_output: bool) -> list[Any]:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> structlog.stdlib.BoundLogger:
    """Configure structlog for the engine. Repeated calls are no-ops.

    Args:
        level: Log level name. Defaults to settings.log_level.
        json_output: Render JSON lines instead of console text.
            Defaults to settings.log_json.

    Returns:
        Logger bound to the package logger.
    """
    global _configured

    if not _configured:
        settings = get_settings()
        level_name = (level or settings.log_level).upper()
        if json_output is None:
            json_output = settings.log_json

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(getattr(logging, level_name, logging.INFO))
        if not package_logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter("%(message)s"))
            package_logger.addHandler(handler)

        structlog.configure(
            processors=_processors(json_output),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        _configured = True

    return structlog.get_logger(PACKAGE_LOGGER)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Module logger, configuring logging on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name or PACKAGE_LOGGER)
