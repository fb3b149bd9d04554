"""Configuration module for mitt."""

from mitt.config.logging import (
    configure_logging,
    get_logger,
    reset_logging,
    trace_dispatch_enabled,
)
from mitt.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "reset_logging",
    "trace_dispatch_enabled",
]
