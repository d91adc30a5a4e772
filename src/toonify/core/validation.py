"""Validation shared by the studio and the REST API."""

import logging
from collections.abc import Sequence

from toonify.core.catalog import get_artist
from toonify.core.config import DEFAULT_MAX_UPLOAD_BYTES
from toonify.core.prompt_builder import MAX_ARTISTS

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


def oversized_file_message(max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES) -> str:
    """Message shown when an upload exceeds the size limit."""
    limit_mb = max_bytes / (1024 * 1024)
    limit = f"{limit_mb:g}MB" if limit_mb >= 1 else f"{max_bytes} bytes"
    return f"File size too large. Please select an image under {limit}."


def validate_upload_size(size_bytes: int, max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES) -> None:
    """Reject uploads larger than the limit.

    Raises:
        ValidationError: If the file is larger than ``max_bytes``
    """
    if size_bytes > max_bytes:
        logger.warning(f"Rejected upload of {size_bytes} bytes (limit {max_bytes})")
        raise ValidationError(oversized_file_message(max_bytes))


def validate_artists(artists: Sequence[str], max_artists: int = MAX_ARTISTS) -> None:
    """Validate an artist selection coming from outside the state machine.

    Raises:
        ValidationError: If there are too many, duplicates, or unknown names
    """
    if len(artists) > max_artists:
        raise ValidationError(
            f"Select at most {max_artists} artists (got {len(artists)})."
        )

    if len(set(artists)) != len(artists):
        raise ValidationError("Each artist can only be selected once.")

    for name in artists:
        try:
            get_artist(name)
        except KeyError as e:
            raise ValidationError(f"Unknown artist: {name}") from e
