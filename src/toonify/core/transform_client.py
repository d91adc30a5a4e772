"""Gemini transformation client for Toonify Blend.

This module provides :class:`TransformationClient`, the single point of
contact with the hosted image model. One call to :meth:`transform_image`
issues exactly one ``generate_content`` request carrying the source image,
the compiled instruction, and a fixed system instruction that frames the
model as a non-photorealistic illustrator.

Key Responsibilities
--------------------
- **Credential gate**: with no API key configured, every call fails with
  :class:`MissingCredentialError` before the SDK client is even created.
- **Request shaping**: the image travels as an inline bytes part with its
  MIME type, followed by the instruction as a text part.
- **Response extraction**: the first content part holding inline image data
  is returned as a ``data:image/png;base64,...`` URL.
- **Error surfacing**: a response with no image raises
  :class:`EmptyResultError` carrying the model's own text when it gave one
  (usually a refusal). Anything else is re-raised as
  :class:`TransformationError` with the original message.

There are no retries, no timeouts and no streaming. The request/response is
a single round trip.

Usage
-----
::

    from toonify.core.config import config
    from toonify.core.transform_client import create_client

    client = create_client(config)
    url = client.transform_image(source_data_url, instruction, "image/jpeg")
"""

from __future__ import annotations

import base64
import logging

from google import genai
from google.genai import types

from toonify.core.config import ToonifyConfig
from toonify.core.images import encode_data_url, split_data_url

logger = logging.getLogger(__name__)

DEFAULT_MODEL_ID = "gemini-2.5-flash-image"

SYSTEM_INSTRUCTION = (
    "You are a world-class comic book artist and illustrator. Your goal is to recreate photos "
    "as highly stylized art. You NEVER produce photorealistic images. You focus on bold "
    "linework, cel-shading, hatching, and non-realistic color palettes. Every output must look "
    "like a hand-drawn illustration or a digital painting, never like a filtered photograph."
)

MISSING_KEY_MESSAGE = "API Key is missing. Please check your environment variables."
EMPTY_RESULT_MESSAGE = "The model could not generate the transformed image."
FALLBACK_ERROR_MESSAGE = "Failed to transform image. Please try again."


class TransformationError(Exception):
    """A transformation attempt failed.

    The message is intended to be displayed directly to the user.
    """

    pass


class MissingCredentialError(TransformationError):
    """No API credential is configured."""

    pass


class EmptyResultError(TransformationError):
    """The model answered without an image."""

    pass


class TransformationClient:
    """Sends a source image and instruction to a Gemini image model.

    Attributes:
        model_id: Gemini model identifier.
        system_instruction: Fixed framing sent with every request.
    """

    def __init__(
        self,
        api_key: str | None,
        model_id: str = DEFAULT_MODEL_ID,
        system_instruction: str = SYSTEM_INSTRUCTION,
    ) -> None:
        self._api_key = (api_key or "").strip()
        self.model_id = model_id
        self.system_instruction = system_instruction

        # Created on first transform; never with a missing key
        self._client: genai.Client | None = None

    @property
    def has_credential(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def transform_image(self, image: str, prompt: str, mime_type: str = "image/jpeg") -> str:
        """Stylize an image according to the instruction.

        Args:
            image: The source image as a data URL or bare base64 string.
            prompt: The compiled transformation instruction.
            mime_type: MIME type of the source image.

        Returns:
            The transformed image as a ``data:image/png;base64,...`` URL.

        Raises:
            MissingCredentialError: If no API key is configured.
            EmptyResultError: If the model returned no image.
            TransformationError: For any service or transport failure.
        """
        if not self.has_credential:
            raise MissingCredentialError(MISSING_KEY_MESSAGE)

        try:
            _, payload = split_data_url(image)
            contents = [
                types.Part.from_bytes(data=base64.b64decode(payload), mime_type=mime_type),
                types.Part.from_text(text=prompt),
            ]
            generation_config = types.GenerateContentConfig(
                system_instruction=self.system_instruction,
                response_modalities=[types.Modality.IMAGE, types.Modality.TEXT],
            )

            logger.info(f"Requesting transformation from {self.model_id} ({mime_type})")
            response = self._get_client().models.generate_content(
                model=self.model_id,
                contents=contents,
                config=generation_config,
            )

            transformed = self._extract_image(response)
            if transformed is None:
                refusal_text = getattr(response, "text", None)
                raise EmptyResultError(refusal_text or EMPTY_RESULT_MESSAGE)

            logger.info("Transformation complete")
            return transformed

        except EmptyResultError as e:
            logger.error(f"Transformation error: {e}")
            raise
        except Exception as e:
            logger.error(f"Transformation error: {e}", exc_info=True)
            raise TransformationError(str(e) or FALLBACK_ERROR_MESSAGE) from e

    @staticmethod
    def _extract_image(response) -> str | None:
        """Return the first inline image part as a PNG data URL, if any."""
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            return None

        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None) or []
        for part in parts:
            inline_data = getattr(part, "inline_data", None)
            if inline_data and inline_data.data:
                return encode_data_url(inline_data.data, "image/png")
        return None


def create_client(config: ToonifyConfig) -> TransformationClient:
    """Build a transformation client from application configuration."""
    return TransformationClient(api_key=config.api_key, model_id=config.model_id)
