"""Upload, style, artist picker and reset handlers."""

import logging

import gradio as gr

from toonify.core.catalog import get_style
from toonify.core.config import config

from ..components import ArtistPickerUI, render_style_description, render_view
from ..models import StudioState
from ..state import (
    clear_file,
    reset,
    select_file,
    select_style,
    set_artists,
    set_search,
    show_error,
)
from ..validation import ValidationError, load_source_image

logger = logging.getLogger(__name__)


def upload_image(path: str | None, state: StudioState) -> tuple:
    """Handle a new photo from the upload widget.

    Oversized or unreadable files are rejected here, before anything can be
    sent to the model; the widget is reverted to the previous photo.

    Args:
        path: Filepath of the uploaded image (None if cleared)
        state: Studio state

    Returns:
        Tuple of (image_update, *view_updates, updated_state)
    """
    if not path:
        return (gr.update(), *render_view(state), state)

    try:
        source = load_source_image(path, config.max_upload_bytes)
    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        state = show_error(state, str(e))
        previous = state.source.preview_url if state.source else None
        return (gr.update(value=previous), *render_view(state), state)

    state = select_file(state, source)
    return (gr.update(value=source.preview_url), *render_view(state), state)


def clear_image(state: StudioState) -> tuple:
    """Handle the upload widget's clear button.

    Ignored while a transform is in flight; the running request keeps its
    photo and the final result is applied as usual.

    Returns:
        Tuple of (*view_updates, updated_state)
    """
    if state.is_processing:
        return (*render_view(state), state)

    state = clear_file(state)
    return (*render_view(state), state)


def change_style(style_key: str, state: StudioState) -> tuple[str, StudioState]:
    """Switch the active style.

    Args:
        style_key: ArtStyle member name from the style radio
        state: Studio state

    Returns:
        Tuple of (description_markdown, updated_state)
    """
    try:
        state = select_style(state, style_key)
    except KeyError as e:
        logger.warning(f"Unknown style selected: {e}")
    return render_style_description(state.active_style), state


def search_artists(term: str, state: StudioState) -> tuple:
    """Filter the artist picker.

    Returns:
        Tuple of (checkbox_update, counter_markdown, updated_state)
    """
    state = set_search(state, term)
    return (*ArtistPickerUI.render(state), state)


def pick_artists(names: list[str] | None, state: StudioState) -> tuple:
    """Apply the user's checkbox selection.

    A fourth tick is ignored by the state machine; re-rendering the checkbox
    value un-ticks it in the widget.

    Returns:
        Tuple of (checkbox_update, counter_markdown, updated_state)
    """
    state = set_artists(state, list(names or []))
    return (*ArtistPickerUI.render(state), state)


def reset_studio(state: StudioState) -> tuple:
    """Clear photo, result, error, artist selection and search.

    Returns:
        Tuple of (image_update, search_update, checkbox_update, counter_markdown,
        *view_updates, updated_state)
    """
    state = reset(state)
    return (
        gr.update(value=None),
        gr.update(value=""),
        *ArtistPickerUI.render(state),
        *render_view(state),
        state,
    )


def describe_style(style_key: str) -> str:
    """Description markdown for a style key (used for the initial render)."""
    return render_style_description(get_style(style_key))
