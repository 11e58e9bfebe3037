"""
Hairstyle Transformation Service using Gemini

This service handles:
1. Decoding the uploaded image (data URI or raw base64)
2. Building the hairstyle instruction
3. Sending instruction + image to the Gemini image model
4. Returning the first generated image from the response

CRITICAL: The instruction always asks the model to keep the person's
face, pose, outfit and background. Only the hair may change.

Provider errors are mapped to our exception types in one place:
classify_provider_error().
"""

import binascii
import re
from typing import Any, Optional
from uuid import UUID

import google.generativeai as genai

from src.audit import AuditLogger, create_correlation_id
from src.config import GeminiSettings, get_settings
from src.models.transform import (
    DEFAULT_HAIR_COLOR,
    DEFAULT_HAIRSTYLE,
    DEFAULT_RESULT_MIME_TYPE,
    DEFAULT_SOURCE_MIME_TYPE,
    SourceImage,
    StyleOptions,
    TransformRequest,
    TransformResult,
)
from src.services.errors import (
    ContentBlockedError,
    ImageTransformError,
    InvalidCredentialError,
    InvalidSourceImageError,
    NoImageReturnedError,
    ProviderError,
    ProviderUnconfiguredError,
    QuotaExceededError,
)


PROVIDER_NAME = "gemini"

_DATA_URI_PATTERN = re.compile(r"^data:([^;]+);base64,(.+)$", re.DOTALL)

# Colors that mean "leave the color alone"
_UNCHANGED_COLORS = frozenset({"", "natural", "no change"})

# (substring, exception type, user-facing message), checked in order
_ERROR_RULES = (
    (
        "API key",
        InvalidCredentialError,
        "Invalid Gemini API key. Please check GEMINI_API_KEY.",
    ),
    (
        "quota",
        QuotaExceededError,
        "Gemini API quota exceeded. Please try again later.",
    ),
    (
        "safety",
        ContentBlockedError,
        "Image was blocked by safety filters. Please try a different image.",
    ),
)


def decode_source_image(image: str) -> SourceImage:
    """
    Split an uploaded image string into payload and media type.

    "data:image/png;base64,AAAA" -> SourceImage(data="AAAA", mime_type="image/png")
    "AAAA"                       -> SourceImage(data="AAAA", mime_type="image/jpeg")
    """
    if image is None or not image.strip():
        raise InvalidSourceImageError("No image provided")

    image = image.strip()
    if image.startswith("data:"):
        match = _DATA_URI_PATTERN.match(image)
        if match:
            return SourceImage(data=match.group(2), mime_type=match.group(1))

    return SourceImage(data=image, mime_type=DEFAULT_SOURCE_MIME_TYPE)


def build_hairstyle_prompt(style: StyleOptions) -> str:
    """Build the single instruction sent along with the photo."""
    hairstyle = style.hairstyle or DEFAULT_HAIRSTYLE
    color = (style.hair_color or DEFAULT_HAIR_COLOR).strip()

    color_clause = ""
    if color.lower() not in _UNCHANGED_COLORS:
        color_clause = f" with {color} hair color"

    return (
        "Keep the uploaded person's exact face, body pose, outfit and background, "
        f"but change the hairstyle to a {hairstyle}{color_clause}. "
        "Make the new hair look natural, realistic, and consistent with lighting "
        "and head shape. Maintain photo-realistic skin texture and full likeness "
        "of the original image."
    )


def classify_provider_error(error: Exception) -> ImageTransformError:
    """Map an exception raised by the Gemini SDK to our error types."""
    message = str(error)
    for needle, error_type, user_message in _ERROR_RULES:
        if needle in message:
            return error_type(user_message)
    return ProviderError(message)


def extract_first_image(response: Any) -> Optional[TransformResult]:
    """
    Return the first inline image in the response, or None.

    Only the first candidate is read; its parts are scanned in order.
    When the model returns several images, the first one wins.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    for part in getattr(content, "parts", None) or []:
        inline = getattr(part, "inline_data", None)
        if inline is not None and getattr(inline, "data", None):
            return TransformResult(
                data=inline.data,
                mime_type=getattr(inline, "mime_type", None) or DEFAULT_RESULT_MIME_TYPE,
            )
    return None


def _block_reason(response: Any) -> Optional[str]:
    feedback = getattr(response, "prompt_feedback", None)
    reason = getattr(feedback, "block_reason", None)
    if not reason:
        return None
    return getattr(reason, "name", str(reason))


class GeminiHairService:
    """
    Changes the hairstyle in a photo using the Gemini image model.

    Settings are passed in at construction; the model is created on
    first use.
    """

    def __init__(
        self,
        settings: Optional[GeminiSettings] = None,
        model: Optional[Any] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._settings = settings or get_settings().gemini
        self._model = model
        self._audit_logger = audit_logger or AuditLogger()

    def _ensure_configured(self, correlation_id: Optional[UUID] = None) -> None:
        if not self._settings.is_configured:
            self._audit_logger.log_provider_unconfigured(PROVIDER_NAME, correlation_id)
            raise ProviderUnconfiguredError(
                PROVIDER_NAME,
                "Gemini API key not configured. Please add GEMINI_API_KEY to .env file.",
            )

    def _get_model(self) -> Any:
        """Configure the Gemini SDK and create the model."""
        if self._model is None:
            genai.configure(api_key=self._settings.api_key)
            self._model = genai.GenerativeModel(
                model_name=self._settings.model_name,
                generation_config={
                    "response_modalities": ["TEXT", "IMAGE"],
                },
            )
        return self._model

    async def transform(
        self,
        request: TransformRequest,
        correlation_id: Optional[UUID] = None,
    ) -> TransformResult:
        """
        Apply the requested hairstyle to the source image.

        Raises:
            ProviderUnconfiguredError: No API key is configured
            InvalidSourceImageError: The payload is not valid base64
            InvalidCredentialError / QuotaExceededError / ContentBlockedError /
            ProviderError: Gemini raised an error
            ContentBlockedError: The prompt was blocked
            NoImageReturnedError: Gemini answered without an image
        """
        correlation_id = correlation_id or create_correlation_id()
        self._ensure_configured(correlation_id)

        source = request.source_image
        style = request.style
        self._audit_logger.log_transform_requested(
            hairstyle=style.hairstyle,
            hair_color=style.hair_color,
            mime_type=source.mime_type,
            correlation_id=correlation_id,
        )

        try:
            image_bytes = source.to_bytes()
        except (binascii.Error, ValueError) as e:
            error = InvalidSourceImageError(f"Image is not valid base64: {e}")
            self._audit_logger.log_transform_failed(error, correlation_id)
            raise error from e

        prompt = build_hairstyle_prompt(style)
        image_part = {"mime_type": source.mime_type, "data": image_bytes}

        model = self._get_model()
        try:
            response = await model.generate_content_async([prompt, image_part])
        except Exception as e:
            error = classify_provider_error(e)
            self._audit_logger.log_transform_failed(error, correlation_id)
            raise error from e

        result = extract_first_image(response)
        if result is None:
            reason = _block_reason(response)
            if reason:
                error = ContentBlockedError(
                    f"Image was blocked by safety filters ({reason}). "
                    "Please try a different image."
                )
            else:
                error = NoImageReturnedError("No image generated in Gemini response")
            self._audit_logger.log_transform_failed(error, correlation_id)
            raise error

        self._audit_logger.log_transform_completed(
            mime_type=result.mime_type,
            size_bytes=len(result.data),
            correlation_id=correlation_id,
        )
        return result

    async def transform_data_uri(
        self,
        image: str,
        haircut: Optional[str] = None,
        hair_color: Optional[str] = None,
    ) -> TransformResult:
        """Transform an uploaded image string using form-style options."""
        correlation_id = create_correlation_id()
        self._ensure_configured(correlation_id)
        try:
            source_image = decode_source_image(image)
        except InvalidSourceImageError as e:
            self._audit_logger.log_transform_failed(e, correlation_id)
            raise
        request = TransformRequest(
            source_image=source_image,
            style=StyleOptions(haircut=haircut, hair_color=hair_color),
        )
        return await self.transform(request, correlation_id=correlation_id)
