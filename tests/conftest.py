"""
Pytest configuration and fixtures for all tests.

No test talks to SendGrid or Gemini. Vendor clients are replaced with mocks
and provider settings are built explicitly, never read from a local .env.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.audit import AuditLogger
from src.config import GeminiSettings, SendGridSettings, get_settings


PROVIDER_ENV_VARS = (
    "SENDGRID_API_KEY",
    "SENDGRID_FROM_EMAIL",
    "SENDGRID_FROM_NAME",
    "GEMINI_API_KEY",
    "GEMINI_MODEL_NAME",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Start every test without provider credentials in the environment."""
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def audit_logger():
    return MagicMock(spec=AuditLogger)


@pytest.fixture
def sendgrid_settings():
    return SendGridSettings(
        api_key="SG.test-key",
        from_email="noreply@example.com",
        from_name="AI Hair Simulation",
        _env_file=None,
    )


@pytest.fixture
def unconfigured_sendgrid_settings():
    return SendGridSettings(api_key=None, _env_file=None)


@pytest.fixture
def gemini_settings():
    return GeminiSettings(api_key="gemini-test-key", _env_file=None)


@pytest.fixture
def unconfigured_gemini_settings():
    return GeminiSettings(api_key=None, _env_file=None)


@pytest.fixture
def sendgrid_client():
    """SendGrid client whose send() returns an accepted response."""
    client = MagicMock()
    client.send.return_value = SimpleNamespace(
        status_code=202,
        headers={"X-Message-Id": "msg-123"},
        body=b"",
    )
    return client


def make_part(text=None, data=None, mime_type=None):
    """Build a response part shaped like the Gemini SDK's."""
    inline = SimpleNamespace(data=data, mime_type=mime_type) if data is not None else None
    return SimpleNamespace(text=text, inline_data=inline)


def make_response(*parts, block_reason=None):
    """Build a generate_content response with one candidate."""
    candidates = []
    if parts:
        candidates.append(SimpleNamespace(content=SimpleNamespace(parts=list(parts))))
    return SimpleNamespace(
        candidates=candidates,
        prompt_feedback=SimpleNamespace(block_reason=block_reason),
    )


@pytest.fixture
def gemini_model():
    """Gemini model mock returning one PNG image part after a text part."""
    model = MagicMock()
    model.generate_content_async = AsyncMock(return_value=make_response(
        make_part(text="Here is the new hairstyle."),
        make_part(data=b"\x89PNG-result", mime_type="image/png"),
    ))
    return model
