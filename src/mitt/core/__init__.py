"""Core definitions for mitt."""

from mitt.core.exceptions import ConfigurationError, MittError

__all__ = ["ConfigurationError", "MittError"]
