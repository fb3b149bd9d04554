"""structlog configuration for mitt.

Loggers returned by :func:`get_logger` write through the standard library
``mitt`` logger, which carries a ``NullHandler`` and stays silent until
:func:`configure_logging` installs an output handler.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from pydantic import ValidationError

from mitt.config.settings import Settings, get_settings
from mitt.core.exceptions import ConfigurationError

LOG_FORMATS = ("console", "json")

ROOT_LOGGER_NAME = "mitt"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)
_root_logger.addHandler(logging.NullHandler())

_handler: logging.Handler | None = None
_trace_dispatch = False


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {name}",
            details={"log_level": name},
        )
    return level


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid MITT_* environment settings",
            details={"errors": exc.errors()},
        ) from exc


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog from *settings* (defaults to :func:`get_settings`).

    Log records are rendered by structlog and written to stdout through a
    handler on the ``mitt`` logger, filtered at ``settings.log_level``.
    """
    global _handler, _trace_dispatch

    settings = settings or _load_settings()
    level = _resolve_level(settings.log_level)

    log_format = settings.log_format.lower()
    if log_format not in LOG_FORMATS:
        raise ConfigurationError(
            f"Unknown log format: {settings.log_format}",
            details={"log_format": settings.log_format, "allowed": list(LOG_FORMATS)},
        )

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        cache_logger_on_first_use=False,
    )

    if _handler is not None:
        _root_logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    _root_logger.addHandler(_handler)
    _root_logger.setLevel(level)
    _root_logger.propagate = False

    _trace_dispatch = settings.trace_dispatch


def reset_logging() -> None:
    """Undo :func:`configure_logging`, returning to silent defaults."""
    global _handler, _trace_dispatch

    structlog.reset_defaults()
    if _handler is not None:
        _root_logger.removeHandler(_handler)
        _handler = None
    _root_logger.setLevel(logging.NOTSET)
    _root_logger.propagate = True
    _trace_dispatch = False


def trace_dispatch_enabled() -> bool:
    """Whether emit calls should be logged, as set by :func:`configure_logging`."""
    return _trace_dispatch


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger writing through the stdlib logger *name*."""
    return structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER_NAME),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
