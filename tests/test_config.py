"""
Tests for settings loading and component wiring.
"""

import logging

import pytest

from src.audit import AuditLogger, configure_logging, create_correlation_id
from src.config import (
    AppSettings,
    GeminiSettings,
    SendGridSettings,
    get_settings,
    validate_all_settings,
)
from src.models.audit import AuditEventBuilder
from src.orchestrator import create_app_components
from src.services import GeminiHairService, SendGridEmailService


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestProviderSettings:
    """Tests for provider settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SENDGRID_API_KEY", "SG.env-key")
        monkeypatch.setenv("SENDGRID_FROM_EMAIL", "hello@example.com")
        settings = SendGridSettings(_env_file=None)
        assert settings.api_key == "SG.env-key"
        assert settings.from_email == "hello@example.com"
        assert settings.from_name == "AI Hair Simulation"
        assert settings.is_configured is True

    def test_sender_defaults(self):
        settings = SendGridSettings(_env_file=None)
        assert settings.api_key is None
        assert settings.from_email == "noreply@hairsimulation.app"
        assert settings.is_configured is False

    def test_gemini_defaults(self):
        settings = GeminiSettings(_env_file=None)
        assert settings.model_name == "gemini-2.5-flash-image"
        assert settings.is_configured is False

    @pytest.mark.parametrize("value", ["", "   ", "your_gemini_api_key_here"])
    def test_blank_or_placeholder_key_is_unconfigured(self, monkeypatch, value):
        monkeypatch.setenv("GEMINI_API_KEY", value)
        settings = GeminiSettings(_env_file=None)
        assert settings.api_key is None
        assert settings.is_configured is False

    def test_key_is_stripped(self):
        settings = GeminiSettings(api_key="  key  ", _env_file=None)
        assert settings.api_key == "key"


class TestAppSettings:
    """Tests for application settings."""

    def test_log_level_normalized(self):
        assert AppSettings(log_level="debug", _env_file=None).log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError):
            AppSettings(log_level="chatty", _env_file=None)


class TestValidateAllSettings:
    """Tests for the startup configuration report."""

    def test_reports_each_provider(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "gemini-key")
        monkeypatch.setenv("SENDGRID_API_KEY", "")
        results = validate_all_settings()
        assert results["gemini"] is True
        assert results["sendgrid"] is False
        assert results["app"] is True

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()


class TestCreateAppComponents:
    """Tests for component wiring."""

    def test_builds_both_services(self, monkeypatch):
        monkeypatch.setenv("SENDGRID_API_KEY", "SG.key")
        components = create_app_components()
        assert isinstance(components.email_service, SendGridEmailService)
        assert isinstance(components.hair_service, GeminiHairService)
        assert isinstance(components.audit_logger, AuditLogger)

    def test_services_get_their_settings(self, monkeypatch):
        """Test that each service holds the settings it was built with."""
        monkeypatch.setenv("SENDGRID_API_KEY", "SG.key")
        monkeypatch.setenv("GEMINI_API_KEY", "gemini-key")
        components = create_app_components()
        assert components.email_service._settings.api_key == "SG.key"
        assert components.hair_service._settings.api_key == "gemini-key"

    def test_log_level_applied_to_root_logger(self, monkeypatch, restore_root_level):
        """Test that LOG_LEVEL from settings sets the root logger level."""
        root = logging.getLogger()
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        create_app_components()

        assert root.level == logging.ERROR


class TestAuditLogger:
    """Tests for the structlog-backed audit logger."""

    def test_configure_logging_overrides_earlier_level(self, restore_root_level):
        """Test that a second configure call still changes the level."""
        root = logging.getLogger()

        configure_logging("INFO")
        configure_logging("WARNING")

        assert root.level == logging.WARNING

    def test_log_returns_true(self):
        event = AuditEventBuilder.provider_unconfigured("sendgrid", create_correlation_id())
        assert AuditLogger().log(event) is True

    def test_log_failure_does_not_raise(self):
        class BrokenLogger:
            def info(self, *args, **kwargs):
                raise RuntimeError("log sink down")

        audit_logger = AuditLogger()
        audit_logger._logger = BrokenLogger()
        event = AuditEventBuilder.email_sent("verify_email", "a@b.com", 202)
        assert audit_logger.log(event) is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
