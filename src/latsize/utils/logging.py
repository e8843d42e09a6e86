"""Structured logging configuration using structlog.

The package is a library first: until ``configure_logging`` is called,
loggers drop everything below WARNING so the core stays silent inside a
caller's loop. The CLI configures JSON or colored console output and tags
each line with the sampling run and the polygon being reduced.
"""

import logging
import sys
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any, cast

import structlog
from structlog.types import Processor

from latsize.config import settings

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)
_polygon_id: ContextVar[str | None] = ContextVar("polygon_id", default=None)


@contextmanager
def correlation_scope(
    run_id: str | None = None,
    polygon_id: str | None = None,
) -> Iterator[None]:
    """Tag log lines emitted inside the block, restoring previous IDs on exit.

    Args:
        run_id: Identifier of a CLI invocation or sampling run.
        polygon_id: Identifier of the polygon being reduced.
    """
    tokens: list[tuple[ContextVar[str | None], Token[str | None]]] = []
    if run_id is not None:
        tokens.append((_run_id, _run_id.set(run_id)))
    if polygon_id is not None:
        tokens.append((_polygon_id, _polygon_id.set(polygon_id)))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


def clear_correlation_context() -> None:
    """Clear all correlation context variables."""
    _run_id.set(None)
    _polygon_id.set(None)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add correlation IDs to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    run_id = _run_id.get()
    polygon_id = _polygon_id.get()

    if run_id is not None:
        event_dict["run_id"] = run_id
    if polygon_id is not None:
        event_dict["polygon_id"] = polygon_id

    return event_dict


def _configure_quiet_default() -> None:
    """Drop events below WARNING unless the application configured structlog."""
    if structlog.is_configured():
        return
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
    )


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_correlation_ids,
    ]

    if log_format == "json":
        renderer: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=[*shared_processors, *renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Reconfigure on every call; the CLI may run several times per process
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger; silent below WARNING until logging is configured."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


_configure_quiet_default()
