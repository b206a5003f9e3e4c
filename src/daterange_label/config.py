"""
Application settings.

Values are read from the environment with the ``DATE_RANGE_LABEL_`` prefix,
e.g. ``DATE_RANGE_LABEL_FALLBACK_LOCALE=en-GB``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the formatter and CLI."""

    model_config = SettingsConfigDict(env_prefix="DATE_RANGE_LABEL_")

    app_name: str = "date-range-label"

    # Used when the host exposes no locale (headless/server contexts)
    fallback_locale: str = "en-US"

    # Month and weekday names
    date_locale: str = "en_US"

    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
