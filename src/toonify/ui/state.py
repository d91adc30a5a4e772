"""State transitions for the Toonify studio.

Every function here is pure: it takes a :class:`StudioState` and returns a
new one, leaving the input untouched. Together they form the session state
machine::

    idle -> selected -> processing -> succeeded | failed
      ^________________________________________________| reset

``processing`` is only reachable with a source image, so a processing state
without a photo cannot be constructed through these transitions.
"""

import logging
from dataclasses import replace
from pathlib import Path

from toonify.core.catalog import (
    LOADING_MESSAGES,
    Artist,
    ArtStyle,
    filter_artists,
    get_style,
)

from .models import (
    DEFAULT_ERROR_MESSAGE,
    MAX_ARTISTS,
    NO_FILE_MESSAGE,
    Phase,
    SourceImage,
    StudioState,
    TransformationResult,
)
from .validation import ValidationError

logger = logging.getLogger(__name__)


def initial_state() -> StudioState:
    """Return a fresh session state."""
    return StudioState()


def select_file(state: StudioState, source: SourceImage) -> StudioState:
    """Use a new photo, discarding any previous preview, result and error."""
    logger.info(
        f"Selected source image {source.path} ({source.mime_type}, {source.size_bytes} bytes)"
    )
    return replace(
        state,
        phase=Phase.SELECTED,
        source=source,
        error=None,
        result=None,
        result_path=None,
    )


def clear_file(state: StudioState) -> StudioState:
    """Forget the photo after the user removes it from the upload widget.

    Returns to idle with no source, result or error. Style, artists and
    search are kept.
    """
    logger.info("Source image cleared")
    return replace(
        state,
        phase=Phase.IDLE,
        source=None,
        error=None,
        result=None,
        result_path=None,
    )


def show_error(state: StudioState, message: str) -> StudioState:
    """Surface a local validation error without changing phase or photo."""
    return replace(state, error=message)


def select_style(state: StudioState, style_id: ArtStyle | str) -> StudioState:
    """Switch the active style.

    Raises:
        KeyError: If the style is not in the catalog
    """
    return replace(state, active_style=get_style(style_id))


def toggle_artist(state: StudioState, name: str) -> StudioState:
    """Select or deselect an artist influence.

    Deselecting removes only that artist. Selecting a new artist when
    MAX_ARTISTS are already chosen leaves the state unchanged.
    """
    if name in state.selected_artists:
        remaining = tuple(n for n in state.selected_artists if n != name)
        return replace(state, selected_artists=remaining)

    if len(state.selected_artists) >= MAX_ARTISTS:
        logger.debug(f"Ignoring artist {name!r}: already {MAX_ARTISTS} selected")
        return state

    return replace(state, selected_artists=state.selected_artists + (name,))


def set_artists(state: StudioState, names: list[str]) -> StudioState:
    """Reconcile the selection with a list coming from a multi-select widget.

    Names that disappeared are deselected; new names are toggled on in the
    order given, so the limit applies exactly as with single toggles.
    """
    wanted = list(dict.fromkeys(names))
    for name in state.selected_artists:
        if name not in wanted:
            state = toggle_artist(state, name)
    for name in wanted:
        if name not in state.selected_artists:
            state = toggle_artist(state, name)
    return state


def set_search(state: StudioState, term: str | None) -> StudioState:
    return replace(state, search_term=term or "")


def visible_artists(state: StudioState) -> list[Artist]:
    """Artists matching the session's current search text."""
    return filter_artists(state.search_term)


def begin_transform(state: StudioState) -> StudioState:
    """Enter the processing phase.

    Raises:
        ValidationError: If no photo has been selected
    """
    if state.source is None:
        raise ValidationError(NO_FILE_MESSAGE)

    return replace(
        state,
        phase=Phase.PROCESSING,
        error=None,
        result=None,
        result_path=None,
        status_message=LOADING_MESSAGES[0],
    )


def set_status(state: StudioState, message: str) -> StudioState:
    """Update the rotating status message while processing."""
    if not state.is_processing:
        return state
    return replace(state, status_message=message)


def complete_transform(
    state: StudioState,
    result: TransformationResult,
    result_path: Path | None = None,
) -> StudioState:
    """Store a successful result, replacing any earlier one."""
    return replace(
        state,
        phase=Phase.SUCCEEDED,
        result=result,
        result_path=result_path,
        error=None,
    )


def fail_transform(state: StudioState, message: str | None) -> StudioState:
    """Record a failed attempt. Any previous result stays cleared."""
    return replace(
        state,
        phase=Phase.FAILED,
        error=message or DEFAULT_ERROR_MESSAGE,
        result=None,
        result_path=None,
    )


def reset(state: StudioState) -> StudioState:
    """Return to idle, clearing photo, result, error, artists and search.

    The chosen style is kept.
    """
    logger.info("Resetting studio state")
    return StudioState(active_style=state.active_style)
