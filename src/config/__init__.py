"""Configuration package."""

from src.config.settings import (
    AppSettings,
    GeminiSettings,
    SendGridSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "GeminiSettings",
    "SendGridSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
