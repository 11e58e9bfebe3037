"""Image transformation services package."""

from src.services.image.gemini_service import (
    GeminiHairService,
    build_hairstyle_prompt,
    classify_provider_error,
    decode_source_image,
    extract_first_image,
)

__all__ = [
    "GeminiHairService",
    "build_hairstyle_prompt",
    "classify_provider_error",
    "decode_source_image",
    "extract_first_image",
]
