"""UI event handlers organized by feature area.

This package provides handlers for all Gradio UI events:
- studio: Photo upload and clearing, style choice, artist picker and reset
- generation: The Generate Art transformation and session teardown
"""

from .generation import (
    end_session,
    get_client,
    session_guards,
    transform,
)
from .studio import (
    change_style,
    clear_image,
    describe_style,
    pick_artists,
    reset_studio,
    search_artists,
    upload_image,
)

__all__ = [
    # Studio handlers
    "change_style",
    "clear_image",
    "describe_style",
    "pick_artists",
    "reset_studio",
    "search_artists",
    "upload_image",
    # Generation handlers
    "end_session",
    "get_client",
    "session_guards",
    "transform",
]
