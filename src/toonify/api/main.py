"""Toonify Blend FastAPI Application.

This module defines the FastAPI ``app`` instance, all REST API routes, and
the ``main()`` CLI function that launches the uvicorn server. It exposes the
same catalog, prompt compilation, and transformation the Gradio studio
uses, for scripted or headless clients.

Architecture
------------
The application is stateless apart from one shared
:class:`~toonify.core.transform_client.TransformationClient`, created in
the lifespan handler and stored on ``app.state``. Nothing is persisted:
the transformed image is returned inline as a data URL, and
``POST /api/download`` turns such a data URL back into a PNG attachment.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/api/config``               Styles, artists, limits, messages
GET       ``/api/artists``              Artist roster filtered by ``q``
POST      ``/api/prompt/compile``       Preview the compiled instruction
POST      ``/api/transform``            Transform a photo
POST      ``/api/download``             Return a result as a PNG attachment
========  ============================  ====================================

Usage
-----
CLI (installed entry point)::

    toonify

Direct invocation::

    python -m toonify.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from toonify import __version__
from toonify.api.models import CompilePromptRequest, DownloadRequest, TransformRequest
from toonify.core.catalog import (
    ART_STYLES,
    ARTISTS,
    LOADING_MESSAGES,
    StyleOption,
    filter_artists,
    get_style,
)
from toonify.core.config import config
from toonify.core.images import (
    RESULT_FILENAME,
    decode_data_url,
    detect_mime_type,
    png_bytes,
    split_data_url,
)
from toonify.core.prompt_builder import MAX_ARTISTS, build_prompt_for_style
from toonify.core.transform_client import (
    MissingCredentialError,
    TransformationClient,
    TransformationError,
    create_client,
)
from toonify.core.validation import ValidationError, oversized_file_message, validate_artists

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application lifecycle: one shared transformation client.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the transformation client on startup.

    The SDK client inside it is built lazily on the first transform, so a
    server without a credential still starts and serves the catalog.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    app.state.client = create_client(config)
    if not config.has_api_key:
        logger.warning("No API key configured; /api/transform will return 503")
    logger.info(f"Transformation client ready (model {config.model_id}).")

    yield


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Toonify Blend",
    description="Photo-to-comic transformation with blended artist influences.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Request resolution helpers.
# ---------------------------------------------------------------------------


def _resolve_selection(style_id: str, artists: list[str]) -> StyleOption:
    """Look up the style and validate the artist list.

    Raises:
        HTTPException: 400 for an unknown style, or an artist list that is
            too long, repeats a name, or names an unknown artist.
    """
    try:
        style = get_style(style_id)
    except KeyError:
        raise HTTPException(status_code=400, detail=f"Unknown style: {style_id}")

    try:
        validate_artists(artists, MAX_ARTISTS)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return style


def _resolve_image(req: TransformRequest) -> tuple[bytes, str]:
    """Decode and size-check the uploaded photo, and settle its MIME type.

    The MIME type comes from the request field, then the data URL header,
    then Pillow's detection on the decoded bytes.

    Returns:
        Tuple of ``(raw_bytes, mime_type)``.

    Raises:
        HTTPException: 400 for an undecodable or unreadable image, 413 when
            the decoded image exceeds the upload limit.
    """
    try:
        raw = decode_data_url(req.image)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if len(raw) > config.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=oversized_file_message(config.max_upload_bytes),
        )

    header_mime, _ = split_data_url(req.image)
    mime_type = req.mime_type or header_mime
    if not mime_type:
        try:
            mime_type = detect_mime_type(raw)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return raw, mime_type


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/api/config")
async def get_config() -> dict:
    """Return the catalog and limits the frontend needs.

    Returns:
        Dictionary with keys ``version``, ``styles``, ``artists``,
        ``loading_messages``, ``max_artists``, and ``max_upload_bytes``.
    """
    return {
        "version": __version__,
        "styles": [style.to_dict() for style in ART_STYLES],
        "artists": [artist.to_dict() for artist in ARTISTS],
        "loading_messages": list(LOADING_MESSAGES),
        "max_artists": MAX_ARTISTS,
        "max_upload_bytes": config.max_upload_bytes,
    }


@app.get("/api/artists")
async def list_artists(q: str = "") -> dict:
    """Return the artist roster filtered by a name or specialty substring.

    Args:
        q: Search text. Blank returns the full roster.

    Returns:
        Dictionary with keys ``query``, ``total``, and ``artists``.
    """
    matches = filter_artists(q)
    return {
        "query": q,
        "total": len(matches),
        "artists": [artist.to_dict() for artist in matches],
    }


@app.post("/api/prompt/compile")
async def compile_prompt(req: CompilePromptRequest) -> dict:
    """Preview the instruction that would be sent with a photo.

    Args:
        req: Style and artist selection.

    Returns:
        Dictionary with key ``compiled_prompt``.

    Raises:
        HTTPException: 400 for an unknown style or an invalid artist list.
    """
    style = _resolve_selection(req.style_id, req.artists)
    return {"compiled_prompt": build_prompt_for_style(style, req.artists)}


@app.post("/api/transform")
def transform(req: TransformRequest, request: Request) -> dict:
    """Transform a photo into the selected style and artist blend.

    Runs in FastAPI's worker thread pool because the model call blocks.

    Args:
        req: Photo plus style and artist selection.
        request: Incoming request (for the shared client on ``app.state``).

    Returns:
        Dictionary with keys ``success``, ``transformed_url``, ``style``,
        ``influences``, and ``compiled_prompt``.

    Raises:
        HTTPException: 400 for invalid input, 413 for an oversized photo,
            503 when no API key is configured, 502 when the model returns
            no image or the call fails.
    """
    style = _resolve_selection(req.style_id, req.artists)
    raw, mime_type = _resolve_image(req)
    compiled_prompt = build_prompt_for_style(style, req.artists)

    client: TransformationClient = request.app.state.client
    logger.info(
        f"API transform: {len(raw)} bytes ({mime_type}), style {style.id.name}, "
        f"{len(req.artists)} influence(s)"
    )

    try:
        transformed_url = client.transform_image(req.image, compiled_prompt, mime_type)
    except MissingCredentialError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except TransformationError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return {
        "success": True,
        "transformed_url": transformed_url,
        "style": style.id.value,
        "influences": list(req.artists),
        "compiled_prompt": compiled_prompt,
    }


@app.post("/api/download")
async def download(req: DownloadRequest) -> Response:
    """Return a transformed image as a PNG file attachment.

    Args:
        req: The transformed image data URL.

    Returns:
        PNG bytes with an attachment ``Content-Disposition``.

    Raises:
        HTTPException: 400 if the data URL does not hold a readable image.
    """
    try:
        content = png_bytes(req.data_url)
    except (ValueError, OSError) as e:
        raise HTTPException(status_code=400, detail=f"Cannot read image: {e}")

    return Response(
        content=content,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{RESULT_FILENAME}"'},
    )


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~toonify.core.config.config` (which
    loads from ``TOONIFY_SERVER_HOST`` and ``TOONIFY_SERVER_PORT``
    environment variables). Defaults to ``0.0.0.0:8000``.

    This function is registered as the ``toonify`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "toonify.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
