"""
Audit Models for Hair Simulation adapters

Every provider call is logged for audit purposes.
This provides:
1. Traceability of every email and every transformation request
2. Debugging information when a provider fails
3. A record of which provider was unconfigured, and when

DESIGN DECISION: Audit events are log records only. Nothing is persisted.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Email delivery
    EMAIL_SENT = "email_sent"
    EMAIL_FAILED = "email_failed"

    # Hairstyle transformation
    TRANSFORM_REQUESTED = "transform_requested"
    TRANSFORM_COMPLETED = "transform_completed"
    TRANSFORM_FAILED = "transform_failed"

    # System events
    PROVIDER_UNCONFIGURED = "provider_unconfigured"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


def mask_email(address: str) -> str:
    """
    Mask the local part of an email address for logs.

    "sam.jones@example.com" -> "s***@example.com"
    """
    local, sep, domain = address.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every provider call creates at least one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Which provider the event is about
    provider: Optional[str] = Field(
        default=None,
        description="Provider name (e.g., 'sendgrid', 'gemini')"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., requested and completed)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "provider": self.provider,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.email_sent("verify_email", recipient, 202)
        event = AuditEventBuilder.transform_failed(error, correlation_id)
    """

    @staticmethod
    def email_sent(
        template: str,
        recipient: str,
        status_code: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EMAIL_SENT,
            provider="sendgrid",
            correlation_id=correlation_id,
            description=f"Email sent: {template}",
            details={
                "template": template,
                "recipient": mask_email(recipient),
                "status_code": status_code,
            },
        )

    @staticmethod
    def email_failed(
        template: str,
        recipient: str,
        error: Exception,
        status_code: Optional[int] = None,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EMAIL_FAILED,
            severity=AuditSeverity.ERROR,
            provider="sendgrid",
            correlation_id=correlation_id,
            description=f"Email delivery failed: {template}",
            details={
                "template": template,
                "recipient": mask_email(recipient),
                "status_code": status_code,
            },
            error_code=type(error).__name__,
            error_message=str(error),
        )

    @staticmethod
    def transform_requested(
        hairstyle: str,
        hair_color: str,
        mime_type: str,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSFORM_REQUESTED,
            provider="gemini",
            correlation_id=correlation_id,
            description=f"Hairstyle transform requested: {hairstyle}",
            details={
                "hairstyle": hairstyle,
                "hair_color": hair_color,
                "source_mime_type": mime_type,
            },
        )

    @staticmethod
    def transform_completed(
        mime_type: str,
        size_bytes: int,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSFORM_COMPLETED,
            provider="gemini",
            correlation_id=correlation_id,
            description="Hairstyle transform completed",
            details={
                "result_mime_type": mime_type,
                "result_size_bytes": size_bytes,
            },
        )

    @staticmethod
    def transform_failed(
        error: Exception,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSFORM_FAILED,
            severity=AuditSeverity.ERROR,
            provider="gemini",
            correlation_id=correlation_id,
            description=f"Hairstyle transform failed: {type(error).__name__}",
            error_code=type(error).__name__,
            error_message=str(error),
        )

    @staticmethod
    def provider_unconfigured(
        provider: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PROVIDER_UNCONFIGURED,
            severity=AuditSeverity.WARNING,
            provider=provider,
            correlation_id=correlation_id,
            description=f"Provider not configured: {provider}",
        )
