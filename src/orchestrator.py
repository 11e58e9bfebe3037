"""
Component wiring for the Hair Simulation adapters

The HTTP layer calls create_app_components() once at startup and keeps
the returned services. Each service gets its own settings object, so
nothing downstream reads configuration from process-wide state.

The two adapters are independent: an unconfigured email provider does not
stop hairstyle transformation, and vice versa. Missing configuration only
surfaces when the affected adapter is called.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from src.audit import AuditLogger, configure_logging
from src.config import Settings, get_settings
from src.services.email import SendGridEmailService
from src.services.image import GeminiHairService


@dataclass
class AppComponents:
    """The services the request handlers use."""
    email_service: SendGridEmailService
    hair_service: GeminiHairService
    audit_logger: AuditLogger


def create_app_components(settings: Optional[Settings] = None) -> AppComponents:
    """
    Create all application components.

    Call once at startup.
    """
    settings = settings or get_settings()
    configure_logging(settings.app.log_level)

    audit_logger = AuditLogger()
    sendgrid_settings = settings.sendgrid
    gemini_settings = settings.gemini
    structlog.get_logger(__name__).info(
        "providers_configured",
        sendgrid=sendgrid_settings.is_configured,
        gemini=gemini_settings.is_configured,
    )

    return AppComponents(
        email_service=SendGridEmailService(
            settings=sendgrid_settings,
            audit_logger=audit_logger,
        ),
        hair_service=GeminiHairService(
            settings=gemini_settings,
            audit_logger=audit_logger,
        ),
        audit_logger=audit_logger,
    )
