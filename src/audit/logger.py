"""
Audit Logger

DESIGN DECISION: Every provider call is logged as a structured event.
This provides:
1. Traceability of every email and transformation
2. Debugging capability when a vendor misbehaves

The audit logger:
- Never raises (a logging failure must not break the adapter call)
- Supports correlation IDs to trace related events
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

import structlog

from src.models.audit import AuditEvent, AuditEventBuilder


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog for JSON output through stdlib logging."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=level)
    # basicConfig is a no-op once a handler exists
    logging.getLogger().setLevel(level)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()


class AuditLogger:
    """Central audit logging service for both adapters."""

    def __init__(self, logger_name: str = "audit"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns False if the log call itself failed.
        """
        log_dict = event.to_log_dict()

        try:
            if event.severity.value in ("error", "critical"):
                self._logger.error("audit_event", **log_dict)
            elif event.severity.value == "warning":
                self._logger.warning("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except Exception:
            return False

        return True

    def log_email_sent(
        self,
        template: str,
        recipient: str,
        status_code: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a provider-accepted email."""
        self.log(AuditEventBuilder.email_sent(
            template=template,
            recipient=recipient,
            status_code=status_code,
            correlation_id=correlation_id,
        ))

    def log_email_failed(
        self,
        template: str,
        recipient: str,
        error: Exception,
        status_code: Optional[int] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a rejected email."""
        self.log(AuditEventBuilder.email_failed(
            template=template,
            recipient=recipient,
            error=error,
            status_code=status_code,
            correlation_id=correlation_id,
        ))

    def log_transform_requested(
        self,
        hairstyle: str,
        hair_color: str,
        mime_type: str,
        correlation_id: UUID,
    ) -> None:
        self.log(AuditEventBuilder.transform_requested(
            hairstyle=hairstyle,
            hair_color=hair_color,
            mime_type=mime_type,
            correlation_id=correlation_id,
        ))

    def log_transform_completed(
        self,
        mime_type: str,
        size_bytes: int,
        correlation_id: UUID,
    ) -> None:
        self.log(AuditEventBuilder.transform_completed(
            mime_type=mime_type,
            size_bytes=size_bytes,
            correlation_id=correlation_id,
        ))

    def log_transform_failed(
        self,
        error: Exception,
        correlation_id: UUID,
    ) -> None:
        self.log(AuditEventBuilder.transform_failed(
            error=error,
            correlation_id=correlation_id,
        ))

    def log_provider_unconfigured(
        self,
        provider: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.provider_unconfigured(
            provider=provider,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a provider call and pass it to
    every event the call emits.
    """
    return uuid4()
