"""Email services package."""

from src.services.email.sendgrid_service import SendGridEmailService
from src.services.email.templates import (
    RenderedEmail,
    render_email,
    render_password_reset_email,
    render_verification_email,
)

__all__ = [
    "RenderedEmail",
    "SendGridEmailService",
    "render_email",
    "render_password_reset_email",
    "render_verification_email",
]
