"""Transformation handler: the Generate Art action."""

import logging
import shutil
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from pathlib import Path

import gradio as gr

from toonify.core.catalog import LOADING_MESSAGES
from toonify.core.config import config
from toonify.core.images import write_result_png
from toonify.core.prompt_builder import build_prompt_for_style
from toonify.core.transform_client import (
    TransformationClient,
    TransformationError,
    create_client,
)

from ..components import render_view
from ..models import StudioState, TransformationResult
from ..processing import SessionGuards, StatusTicker
from ..state import begin_transform, complete_transform, fail_transform, set_status, show_error
from ..validation import ValidationError

logger = logging.getLogger(__name__)

# How often the handler checks on the in-flight request
POLL_SECONDS = 0.25

session_guards = SessionGuards()

_client: TransformationClient | None = None


def get_client() -> TransformationClient:
    """Return the shared transformation client, creating it on first use."""
    global _client
    if _client is None:
        _client = create_client(config)
    return _client


def _session_id(request: gr.Request | None) -> str | None:
    return getattr(request, "session_hash", None) if request is not None else None


def _output_dir(session_id: str | None) -> Path:
    return config.outputs_dir / (session_id or "default")


def transform(state: StudioState, request: gr.Request = None) -> Iterator[tuple]:
    """Run one transformation, streaming status updates to the UI.

    The request itself runs on a worker thread. While it is in flight the
    handler yields the rotating status message; when it finishes, the final
    result or error. At most one transform runs per session at a time.

    Args:
        state: Studio state
        request: Gradio request (injected; provides the session id)

    Yields:
        Tuples of (*view_updates, updated_state)
    """
    session_id = _session_id(request)
    guard = session_guards.for_session(session_id)

    with guard.attempt() as acquired:
        if not acquired:
            logger.warning(f"Transform already in progress for session {session_id}")
            yield (*render_view(state), state)
            return

        try:
            state = begin_transform(state)
        except ValidationError as e:
            logger.warning(f"Validation error: {e}")
            state = show_error(state, str(e))
            yield (*render_view(state), state)
            return

        yield (*render_view(state), state)

        source = state.source
        style = state.active_style
        influences = state.selected_artists
        instruction = build_prompt_for_style(style, influences)
        logger.info(
            f"Transforming with style {style.id.name} and "
            f"{len(influences)} influence(s): {', '.join(influences) or '(none)'}"
        )

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="transform")
        try:
            with StatusTicker(LOADING_MESSAGES, config.status_interval_seconds) as ticker:
                future = executor.submit(
                    get_client().transform_image,
                    source.data_url,
                    instruction,
                    source.mime_type,
                )
                while True:
                    try:
                        transformed_url = future.result(timeout=POLL_SECONDS)
                        break
                    except FutureTimeoutError:
                        if ticker.current != state.status_message:
                            state = set_status(state, ticker.current)
                            yield (*render_view(state), state)

            result_path = write_result_png(transformed_url, _output_dir(session_id))
            result = TransformationResult(
                original_url=source.preview_url,
                transformed_url=transformed_url,
                style=style.id.value,
                influences=influences,
            )
            state = complete_transform(state, result, result_path)

        except TransformationError as e:
            state = fail_transform(state, str(e))

        except Exception as e:
            logger.error(f"Error transforming image: {e}", exc_info=True)
            state = fail_transform(state, str(e))

        finally:
            # Abandoned requests finish on their own thread
            executor.shutdown(wait=False)

        yield (*render_view(state), state)


def end_session(request: gr.Request = None) -> None:
    """Drop the session's guard and saved result when the browser tab closes."""
    session_id = _session_id(request)
    session_guards.discard(session_id)
    shutil.rmtree(_output_dir(session_id), ignore_errors=True)
    logger.info(f"Session {session_id} ended")
