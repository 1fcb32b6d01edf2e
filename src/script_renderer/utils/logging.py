"""Logging configuration for Script Renderer."""

import logging
import sys
from typing import Any, List, Optional, TextIO

import structlog
from structlog.stdlib import BoundLogger, LoggerFactory

from script_renderer.config import get_settings


def _shared_processors() -> List[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(stream: Optional[TextIO] = None) -> None:
    """Configure structured logging for the application.

    Log lines go to stderr by default so that command output on stdout
    stays machine-readable.
    """
    settings = get_settings()

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=getattr(logging, settings.log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=[*_shared_processors(), render_processor()],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )


def render_processor() -> Any:
    """Choose renderer based on environment."""
    settings = get_settings()

    if settings.log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        return structlog.dev.ConsoleRenderer()


def get_logger(name: str) -> BoundLogger:
    """Get a logger instance.

    The logger writes to the standard library logger of the same name and
    picks up processors from ``setup_logging`` or the host application's
    structlog configuration. Structlog's global configuration is left alone,
    so until the host configures logging the library's debug events are
    dropped by the standard library's default level.
    """
    bound_logger: BoundLogger = structlog.wrap_logger(logging.getLogger(name))
    return bound_logger
