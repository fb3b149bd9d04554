"""Library settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``MITT_*`` environment variables.

    Values are only normalized here; ``configure_logging`` rejects unknown
    levels and formats with a ``ConfigurationError``.
    """

    model_config = SettingsConfigDict(
        env_prefix="MITT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_format: str = "console"

    # Log every emit call at debug level
    trace_dispatch: bool = False

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("log_format", mode="after")
    @classmethod
    def _lower_format(cls, v: str) -> str:
        return v.strip().lower()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
