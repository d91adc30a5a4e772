"""Pydantic request models for the Toonify Blend API.

These models define the JSON schema for every API endpoint that takes a
body. FastAPI uses them for automatic request validation and OpenAPI
documentation generation.

Models
------
CompilePromptRequest
    Payload for ``POST /api/prompt/compile``: a style and the chosen
    artist influences.
TransformRequest
    Payload for ``POST /api/transform``: the photo plus the same style and
    artist choices.
DownloadRequest
    Payload for ``POST /api/download``: a transformed image data URL to turn
    into a PNG attachment.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from toonify.core.catalog import DEFAULT_STYLE


class CompilePromptRequest(BaseModel):
    """Request body for ``POST /api/prompt/compile``.

    Attributes:
        style_id: Style identifier. Accepts the ``ArtStyle`` value
            (``"3D Animation Movie"``) or member name (``"PIXAR_3D"``).
        artists: Ordered artist names to blend. The route rejects more
            than three.
    """

    style_id: str = Field(
        default=DEFAULT_STYLE.id.value,
        description="Art style identifier (value or member name)",
    )
    artists: list[str] = Field(
        default_factory=list,
        description="Artist names to blend, in selection order",
    )


class TransformRequest(CompilePromptRequest):
    """Request body for ``POST /api/transform``.

    Attributes:
        image: The photo as a ``data:`` URL or a bare base64 string.
        mime_type: MIME type of the photo. When omitted it is taken from
            the data URL header, or detected from the decoded bytes.
    """

    image: str = Field(..., description="Photo as a data URL or bare base64")
    mime_type: str | None = Field(
        default=None,
        description="MIME type of the photo; detected when omitted",
    )

    @field_validator("image")
    @classmethod
    def image_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("image must not be empty")
        return value


class DownloadRequest(BaseModel):
    """Request body for ``POST /api/download``."""

    data_url: str = Field(..., description="Transformed image as a data URL")
