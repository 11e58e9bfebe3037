"""
Email Models

Messages are built per call, sent once, and discarded.
They are frozen so a rendered message cannot be altered between
rendering and submission.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EmailTemplate(str, Enum):
    """
    The two transactional emails the application sends.

    Each template has a fixed link lifetime that is stated in the email.
    """
    VERIFY_EMAIL = "verify_email"
    RESET_PASSWORD = "reset_password"

    @property
    def expiry_text(self) -> str:
        """Human-readable link lifetime."""
        if self is EmailTemplate.VERIFY_EMAIL:
            return "24 hours"
        return "1 hour"


class EmailMessage(BaseModel):
    """A fully rendered email, ready to hand to the provider."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    recipient_address: str = Field(..., min_length=3)
    sender_address: str = Field(..., min_length=3)
    sender_display_name: str
    subject: str = Field(..., min_length=1)
    plain_text_body: str
    html_body: str

    @property
    def from_header(self) -> str:
        """Sender formatted as `"Display Name" <address>`."""
        return f'"{self.sender_display_name}" <{self.sender_address}>'


class DeliveryReceipt(BaseModel):
    """What the provider told us about a send call."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    provider_status_code: int
    message_id: Optional[str] = None
