"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
discovery and decoding behaviour that has no single right answer.

Usage:
    from rdfmodels.config import ModelSettings, get_settings

    # Load from environment variables (RDFMODELS_*)
    settings = get_settings()

    # Or override with explicit values
    settings = ModelSettings(include_blank_nodes=True)
"""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ModelSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for entity discovery and attribute decoding.

    Attributes:
        include_blank_nodes: Accept blank-node subjects during discovery. Their
            identity is scoped to the dataset they were found in.
        lenient_email_literals: Also decode literal-encoded mailbox values,
            not only ``mailto:`` IRIs.
        default_count: Discovery cap used when the caller passes no count.
        log_level: Level applied to the ``rdfmodels`` logger by
            ``configure_logging()``. None leaves logging untouched.

    Environment Variables:
        RDFMODELS_INCLUDE_BLANK_NODES
        RDFMODELS_LENIENT_EMAIL_LITERALS
        RDFMODELS_DEFAULT_COUNT
        RDFMODELS_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="RDFMODELS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    include_blank_nodes: bool = False
    lenient_email_literals: bool = False
    default_count: int | None = None
    log_level: str | None = None

    @field_validator("default_count")
    @classmethod
    def _positive_count(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError(f"default_count must be positive, got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


_settings: ModelSettings | None = None


def get_settings() -> ModelSettings:
    """Get the process-wide settings, loading them on first use.

    Returns:
        The cached ModelSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = ModelSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None


def configure_logging(settings: ModelSettings | None = None) -> None:
    """Apply the configured log level to the package logger.

    Args:
        settings: Settings to apply (defaults to get_settings()).
    """
    settings = settings or get_settings()
    if settings.log_level is not None:
        logging.getLogger("rdfmodels").setLevel(settings.log_level)
