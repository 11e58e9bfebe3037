"""
Transactional Email Service using SendGrid

This service handles:
1. Rendering the verify-email and reset-password templates
2. Submitting the rendered message to SendGrid
3. Mapping the SendGrid response to a DeliveryReceipt

CRITICAL: A missing API key fails the call loudly with
ProviderUnconfiguredError. We never pretend an email was sent.
"""

import asyncio
from typing import Optional
from uuid import UUID

from pydantic import ValidationError
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import From, Mail, To

from src.audit import AuditLogger, create_correlation_id
from src.config import SendGridSettings, get_settings
from src.models.email import DeliveryReceipt, EmailMessage, EmailTemplate
from src.services.email.templates import render_email
from src.services.errors import (
    DeliveryFailedError,
    InvalidMessageError,
    ProviderUnconfiguredError,
)


PROVIDER_NAME = "sendgrid"


class SendGridEmailService:
    """
    Sends account emails through SendGrid.

    Settings are passed in at construction; the SendGrid client is
    created on first send.
    """

    def __init__(
        self,
        settings: Optional[SendGridSettings] = None,
        client: Optional[SendGridAPIClient] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._settings = settings or get_settings().sendgrid
        self._client = client
        self._audit_logger = audit_logger or AuditLogger()

    def _ensure_configured(self, correlation_id: Optional[UUID] = None) -> None:
        if not self._settings.is_configured:
            self._audit_logger.log_provider_unconfigured(PROVIDER_NAME, correlation_id)
            raise ProviderUnconfiguredError(
                PROVIDER_NAME,
                "Email service not configured. Set SENDGRID_API_KEY.",
            )

    def _get_client(self) -> SendGridAPIClient:
        """Get or create the SendGrid client."""
        if self._client is None:
            self._client = SendGridAPIClient(self._settings.api_key)
        return self._client

    def build_message(
        self,
        template: EmailTemplate,
        recipient: str,
        link: str,
        display_name: Optional[str] = None,
    ) -> EmailMessage:
        """Render a template into an EmailMessage without sending it."""
        rendered = render_email(template, link, display_name)
        return EmailMessage(
            recipient_address=recipient,
            sender_address=self._settings.from_email,
            sender_display_name=self._settings.from_name,
            subject=rendered.subject,
            plain_text_body=rendered.text,
            html_body=rendered.html,
        )

    @staticmethod
    def _to_mail(message: EmailMessage) -> Mail:
        return Mail(
            from_email=From(message.sender_address, message.sender_display_name),
            to_emails=To(message.recipient_address),
            subject=message.subject,
            plain_text_content=message.plain_text_body,
            html_content=message.html_body,
        )

    async def send(
        self,
        template: EmailTemplate,
        recipient: str,
        link: str,
        display_name: Optional[str] = None,
        correlation_id: Optional[UUID] = None,
    ) -> DeliveryReceipt:
        """
        Render and send one templated email.

        Raises:
            ProviderUnconfiguredError: No API key is configured
            InvalidMessageError: The recipient or link is unusable
            DeliveryFailedError: SendGrid rejected the request
        """
        correlation_id = correlation_id or create_correlation_id()
        self._ensure_configured(correlation_id)

        try:
            message = self.build_message(template, recipient, link, display_name)
        except ValidationError as e:
            error = InvalidMessageError(f"Cannot build {template.value} email: {e}")
            self._audit_logger.log_email_failed(
                template=template.value,
                recipient=recipient,
                error=error,
                correlation_id=correlation_id,
            )
            raise error from e

        client = self._get_client()

        try:
            response = await asyncio.to_thread(client.send, self._to_mail(message))
        except Exception as e:
            # python_http_client.HTTPError carries the status code
            status_code = getattr(e, "status_code", None)
            self._audit_logger.log_email_failed(
                template=template.value,
                recipient=recipient,
                error=e,
                status_code=status_code,
                correlation_id=correlation_id,
            )
            raise DeliveryFailedError(e, status_code=status_code) from e

        status_code = int(response.status_code)
        headers = getattr(response, "headers", None) or {}
        receipt = DeliveryReceipt(
            accepted=200 <= status_code < 300,
            provider_status_code=status_code,
            message_id=headers.get("X-Message-Id"),
        )

        self._audit_logger.log_email_sent(
            template=template.value,
            recipient=recipient,
            status_code=status_code,
            correlation_id=correlation_id,
        )
        return receipt

    async def send_verification(
        self,
        recipient: str,
        verification_link: str,
        display_name: Optional[str] = None,
    ) -> DeliveryReceipt:
        """Send the verify-email message (link valid for 24 hours)."""
        return await self.send(
            EmailTemplate.VERIFY_EMAIL,
            recipient,
            verification_link,
            display_name,
        )

    async def send_password_reset(
        self,
        recipient: str,
        reset_link: str,
        display_name: Optional[str] = None,
    ) -> DeliveryReceipt:
        """Send the reset-password message (link valid for 1 hour)."""
        return await self.send(
            EmailTemplate.RESET_PASSWORD,
            recipient,
            reset_link,
            display_name,
        )
