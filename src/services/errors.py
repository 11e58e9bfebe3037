"""
Exceptions raised by the provider adapters.

Every adapter failure is raised to the caller as one of these.
Nothing is retried and nothing is swallowed.
"""

from typing import Optional


class ServiceError(Exception):
    """Base exception for all provider adapter errors."""
    pass


class ProviderUnconfiguredError(ServiceError):
    """No credential is configured for the provider."""

    def __init__(self, provider: str, message: Optional[str] = None):
        self.provider = provider
        super().__init__(message or f"{provider} is not configured")


# =============================================================================
# EMAIL
# =============================================================================

class EmailError(ServiceError):
    """Base exception for email delivery errors."""
    pass


class InvalidMessageError(EmailError):
    """The message could not be built from the given recipient or link."""
    pass


class DeliveryFailedError(EmailError):
    """The email provider rejected the send call."""

    def __init__(
        self,
        provider_error: Exception,
        status_code: Optional[int] = None,
    ):
        self.provider_error = provider_error
        self.status_code = status_code
        super().__init__(f"Email delivery failed: {provider_error}")


# =============================================================================
# IMAGE TRANSFORMATION
# =============================================================================

class ImageTransformError(ServiceError):
    """Base exception for hairstyle transformation errors."""
    pass


class InvalidSourceImageError(ImageTransformError):
    """The uploaded image could not be used as input."""
    pass


class InvalidCredentialError(ImageTransformError):
    """The provider rejected the configured API key."""
    pass


class QuotaExceededError(ImageTransformError):
    """The provider quota for this key is exhausted."""
    pass


class ContentBlockedError(ImageTransformError):
    """The provider's safety filters blocked the request or response."""
    pass


class NoImageReturnedError(ImageTransformError):
    """The provider answered without any inline image data."""
    pass


class ProviderError(ImageTransformError):
    """Unclassified provider failure."""

    def __init__(self, raw_message: str):
        self.raw_message = raw_message
        super().__init__(f"Failed to generate with Gemini: {raw_message}")
