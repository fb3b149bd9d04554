"""Custom exceptions for mitt.

Emitter operations never raise these: handler failures propagate to the
caller of ``emit`` unchanged.
"""


class MittError(Exception):
    """Base exception for all mitt errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MittError):
    """Raised when there's a configuration problem."""
