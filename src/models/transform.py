"""
Hairstyle Transformation Models

DESIGN DECISION: Uploaded images stay base64 strings until they are sent.
The upstream handler receives uploads as data URIs and the provider
accepts raw bytes, so decoding happens once, right before the call.
Generated images come back as raw bytes and are re-encoded on request.
"""

import base64
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_SOURCE_MIME_TYPE = "image/jpeg"
DEFAULT_RESULT_MIME_TYPE = "image/png"
DEFAULT_HAIRSTYLE = "natural waves"
DEFAULT_HAIR_COLOR = "natural"


class SourceImage(BaseModel):
    """The uploaded photo: base64 payload plus declared media type."""

    model_config = ConfigDict(frozen=True)

    data: str = Field(..., min_length=1, description="Base64 payload")
    mime_type: str = Field(default=DEFAULT_SOURCE_MIME_TYPE)

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)


class StyleOptions(BaseModel):
    """
    Requested look.

    Accepts the field names the upload form posts (`haircut`, `hair_color`)
    as well as the attribute names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    hairstyle: str = Field(default=DEFAULT_HAIRSTYLE, alias="haircut")
    hair_color: str = Field(default=DEFAULT_HAIR_COLOR)

    @field_validator("hairstyle", mode="before")
    @classmethod
    def default_empty_hairstyle(cls, v: Optional[str]) -> str:
        """Blank or missing hairstyle falls back to the default."""
        if v is None or not str(v).strip():
            return DEFAULT_HAIRSTYLE
        return v

    @field_validator("hair_color", mode="before")
    @classmethod
    def default_empty_color(cls, v: Optional[str]) -> str:
        if v is None or not str(v).strip():
            return DEFAULT_HAIR_COLOR
        return v


class TransformRequest(BaseModel):
    """One hairstyle change: a photo and the look to apply."""

    model_config = ConfigDict(frozen=True)

    source_image: SourceImage
    style: StyleOptions = Field(default_factory=StyleOptions)


class TransformResult(BaseModel):
    """The generated image returned by the provider."""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(..., description="Raw image bytes")
    mime_type: str = Field(default=DEFAULT_RESULT_MIME_TYPE)

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def to_data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.to_base64()}"
