"""Image payload helpers: data URLs, MIME detection, and the result file."""

from __future__ import annotations

import base64
import binascii
import logging
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

RESULT_FILENAME = "toonify-blend.png"


def encode_data_url(data: bytes | str, mime_type: str) -> str:
    """Wrap image data as a ``data:<mime>;base64,...`` URL.

    Args:
        data: Raw image bytes, or a string that is already base64-encoded.
        mime_type: MIME type to declare in the URL.
    """
    if isinstance(data, (bytes, bytearray)):
        payload = base64.b64encode(data).decode("utf-8")
    else:
        payload = data
    return f"data:{mime_type};base64,{payload}"


def split_data_url(value: str) -> tuple[str | None, str]:
    """Split a data URL into its MIME type and base64 payload.

    A bare base64 string (no ``data:`` prefix) is returned unchanged with a
    ``None`` MIME type.

    Returns:
        Tuple of ``(mime_type, payload)``.
    """
    if value.startswith("data:") and "," in value:
        header, payload = value.split(",", 1)
        mime_type = header[len("data:"):].split(";", 1)[0] or None
        return mime_type, payload
    return None, value


def decode_data_url(value: str) -> bytes:
    """Decode a data URL (or bare base64) to raw bytes.

    Raises:
        ValueError: If the payload is not valid base64.
    """
    _, payload = split_data_url(value)
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 image payload: {e}") from e


def detect_mime_type(data: bytes) -> str:
    """Identify an image's MIME type with Pillow.

    Raises:
        ValueError: If the bytes are not a readable image.
    """
    try:
        with Image.open(BytesIO(data)) as img:
            image_format = img.format
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError("The selected file is not a readable image.") from e

    mime_type = Image.MIME.get(image_format or "")
    if not mime_type:
        raise ValueError(f"Unsupported image format: {image_format}")
    return mime_type


def write_result_png(data_url: str, output_dir: Path) -> Path:
    """Write a transformed image to ``output_dir/toonify-blend.png``.

    The payload is re-encoded through Pillow so the file is always a PNG,
    whatever the model actually returned.

    Args:
        data_url: The transformed image as a data URL.
        output_dir: Directory to write into (created if missing).

    Returns:
        Path of the written file.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / RESULT_FILENAME

    raw = decode_data_url(data_url)
    with Image.open(BytesIO(raw)) as img:
        img.save(filepath, format="PNG")

    logger.info(f"Result written to {filepath}")
    return filepath


def png_bytes(data_url: str) -> bytes:
    """Return a data URL's image re-encoded as PNG bytes."""
    buffer = BytesIO()
    with Image.open(BytesIO(decode_data_url(data_url))) as img:
        img.save(buffer, format="PNG")
    return buffer.getvalue()
