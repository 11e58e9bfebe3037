"""
Data Models Package

This package contains all Pydantic models used by the provider adapters.
"""

from src.models.email import (
    DeliveryReceipt,
    EmailMessage,
    EmailTemplate,
)
from src.models.transform import (
    SourceImage,
    StyleOptions,
    TransformRequest,
    TransformResult,
)
from src.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Email models
    "DeliveryReceipt",
    "EmailMessage",
    "EmailTemplate",
    # Transform models
    "SourceImage",
    "StyleOptions",
    "TransformRequest",
    "TransformResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
