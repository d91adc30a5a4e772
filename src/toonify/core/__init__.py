"""Core functionality for Toonify Blend.

This module provides the pieces both front-ends share:

- **Catalog**: the static styles, artist roster, and loading messages
- **build_prompt**: deterministic instruction compilation
- **TransformationClient**: the single Gemini round trip
- **ToonifyConfig**: configuration management using Pydantic Settings
- **config**: global configuration instance (loads from environment variables)
- **Validation**: upload size and artist checks raising ``ValidationError``

Usage Example
-------------
    from toonify.core import build_prompt, create_client, config, get_style

    style = get_style("ANIME_MANGA")
    instruction = build_prompt(style.prompt, ["Jim Lee"])
    url = create_client(config).transform_image(data_url, instruction, "image/png")
"""

from toonify.core.catalog import (
    ART_STYLES,
    ARTISTS,
    DEFAULT_STYLE,
    LOADING_MESSAGES,
    Artist,
    ArtStyle,
    StyleOption,
    filter_artists,
    get_artist,
    get_style,
)
from toonify.core.config import ToonifyConfig, config
from toonify.core.prompt_builder import build_prompt, build_prompt_for_style
from toonify.core.transform_client import (
    EmptyResultError,
    MissingCredentialError,
    TransformationClient,
    TransformationError,
    create_client,
)
from toonify.core.validation import ValidationError, validate_artists, validate_upload_size

__all__ = [
    "ART_STYLES",
    "ARTISTS",
    "DEFAULT_STYLE",
    "LOADING_MESSAGES",
    "Artist",
    "ArtStyle",
    "StyleOption",
    "filter_artists",
    "get_artist",
    "get_style",
    "ToonifyConfig",
    "config",
    "build_prompt",
    "build_prompt_for_style",
    "EmptyResultError",
    "MissingCredentialError",
    "TransformationClient",
    "TransformationError",
    "create_client",
    "ValidationError",
    "validate_artists",
    "validate_upload_size",
]
