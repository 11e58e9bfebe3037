"""
Configuration Management for Hair Simulation adapters

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
API keys are optional at load time. A missing key is reported when the
adapter is actually called, as ProviderUnconfiguredError, so one unconfigured
provider never prevents the other from working.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Value shipped in the example .env; treated the same as "no key".
PLACEHOLDER_API_KEYS = frozenset({
    "your_gemini_api_key_here",
    "your_sendgrid_api_key_here",
})


def _normalize_api_key(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value or value in PLACEHOLDER_API_KEYS:
        return None
    return value


class SendGridSettings(BaseSettings):
    """SendGrid transactional email configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SENDGRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    api_key: Optional[str] = Field(
        default=None,
        description="SendGrid API key"
    )
    from_email: str = Field(
        default="noreply@hairsimulation.app",
        description="Verified sender address"
    )
    from_name: str = Field(
        default="AI Hair Simulation",
        description="Sender display name"
    )

    @field_validator("api_key")
    @classmethod
    def normalize_api_key(cls, v: Optional[str]) -> Optional[str]:
        return _normalize_api_key(v)

    @property
    def is_configured(self) -> bool:
        return self.api_key is not None


class GeminiSettings(BaseSettings):
    """Gemini image generation configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    api_key: Optional[str] = Field(
        default=None,
        description="Gemini API key"
    )
    model_name: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini model used for image editing"
    )

    @field_validator("api_key")
    @classmethod
    def normalize_api_key(cls, v: Optional[str]) -> Optional[str]:
        return _normalize_api_key(v)

    @property
    def is_configured(self) -> bool:
        return self.api_key is not None


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for structured logs"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Sub-settings are loaded lazily to allow partial configuration

    @property
    def sendgrid(self) -> SendGridSettings:
        return SendGridSettings()

    @property
    def gemini(self) -> GeminiSettings:
        return GeminiSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Report which providers are configured.

    Returns a dict of {setting_name: is_valid}, plus "<name>_error" entries
    for settings that failed to load. Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    for name in ("sendgrid", "gemini"):
        try:
            results[name] = getattr(settings, name).is_configured
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
