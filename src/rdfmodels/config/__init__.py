"""Configuration module using Pydantic Settings.

Usage:
    from rdfmodels.config import ModelSettings, get_settings

    settings = ModelSettings(lenient_email_literals=True)
"""

from rdfmodels.config.settings import (
    ModelSettings,
    configure_logging,
    get_settings,
    reset_settings,
)

__all__ = [
    "ModelSettings",
    "configure_logging",
    "get_settings",
    "reset_settings",
]
