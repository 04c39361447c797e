"""Logging for envdoc: structlog events routed through stdlib `logging`.

Registry events never touch stdout, which carries usage text and fatal
diagnostics. Until `configure_logging()` runs, only warnings and errors
surface, through `logging`'s last-resort stderr handler.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


_LOG_CONFIGURED = False


def _build_processors(json_logs: bool) -> list[Any]:
    renderer: Any
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


# Shared by every logger from get_logger(); configure_logging() edits it in place.
_PROCESSORS: list[Any] = _build_processors(json_logs=False)


def get_logger(name: str = "envdoc") -> Any:
    """Bound logger writing to the stdlib logger `name`."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Send envdoc and structlog output to stderr at `level`, once per process."""
    global _LOG_CONFIGURED
    if _LOG_CONFIGURED:
        return

    normalized = str(level or "INFO").upper()
    log_level = getattr(logging, normalized, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("envdoc").setLevel(log_level)

    _PROCESSORS[:] = _build_processors(json_logs)

    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _LOG_CONFIGURED = True
