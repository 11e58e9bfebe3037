"""Services package."""

from src.services.email import SendGridEmailService
from src.services.errors import (
    ContentBlockedError,
    DeliveryFailedError,
    EmailError,
    ImageTransformError,
    InvalidCredentialError,
    InvalidMessageError,
    InvalidSourceImageError,
    NoImageReturnedError,
    ProviderError,
    ProviderUnconfiguredError,
    QuotaExceededError,
    ServiceError,
)
from src.services.image import GeminiHairService

__all__ = [
    # Email services
    "SendGridEmailService",
    # Image services
    "GeminiHairService",
    # Errors
    "ContentBlockedError",
    "DeliveryFailedError",
    "EmailError",
    "ImageTransformError",
    "InvalidCredentialError",
    "InvalidMessageError",
    "InvalidSourceImageError",
    "NoImageReturnedError",
    "ProviderError",
    "ProviderUnconfiguredError",
    "QuotaExceededError",
    "ServiceError",
]
