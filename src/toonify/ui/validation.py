"""Validation utilities for Toonify studio inputs.

Size and artist checks live in :mod:`toonify.core.validation` so the REST API
shares them; they are re-exported here for the studio handlers.
"""

import logging
from pathlib import Path

from toonify.core.images import detect_mime_type
from toonify.core.validation import (
    ValidationError,
    oversized_file_message,
    validate_artists,
    validate_upload_size,
)

from .models import MAX_UPLOAD_BYTES, NO_FILE_MESSAGE, SourceImage

logger = logging.getLogger(__name__)

__all__ = [
    "ValidationError",
    "load_source_image",
    "oversized_file_message",
    "validate_artists",
    "validate_upload_size",
]


def load_source_image(path: str | Path, max_bytes: int = MAX_UPLOAD_BYTES) -> SourceImage:
    """Read and validate an uploaded photo.

    The size check happens before the file is read, so an oversized upload
    is rejected without touching its contents.

    Args:
        path: Path of the uploaded file
        max_bytes: Upload size limit

    Returns:
        SourceImage with bytes and detected MIME type

    Raises:
        ValidationError: If the file is missing, too large, or not an image
    """
    if not path:
        raise ValidationError(NO_FILE_MESSAGE)

    file_path = Path(path)
    if not file_path.is_file():
        raise ValidationError(f"File not found: {file_path.name}")

    size_bytes = file_path.stat().st_size
    validate_upload_size(size_bytes, max_bytes)

    data = file_path.read_bytes()
    try:
        mime_type = detect_mime_type(data)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    logger.debug(f"Loaded {file_path.name} ({mime_type}, {size_bytes} bytes)")
    return SourceImage(
        path=str(file_path),
        data=data,
        mime_type=mime_type,
        size_bytes=size_bytes,
    )
