"""Configuration management for Toonify Blend.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the TOONIFY_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (TOONIFY_* prefix)
2. .env file in the project root
3. Default values defined in ToonifyConfig

The API credential is also accepted under the unprefixed names used by the
Gemini tooling (``API_KEY``, ``GEMINI_API_KEY``, ``GOOGLE_API_KEY``).

Example .env file:
    TOONIFY_API_KEY=your-gemini-key
    TOONIFY_MODEL_ID=gemini-2.5-flash-image
    TOONIFY_OUTPUTS_DIR=outputs

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

Usage Example
-------------
    from toonify.core.config import config

    print(config.model_id)
    print(config.has_api_key)

Missing Credential
------------------
An empty ``api_key`` is a valid configuration. The application starts, and
every transformation attempt fails before any network call is made.
"""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Upload ceiling enforced before any request is made
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024


class ToonifyConfig(BaseSettings):
    """Main configuration for Toonify Blend.

    Attributes
    ----------
    Model Settings:
        api_key : str
            Gemini API key. Empty means every transformation fails up front.
        model_id : str
            Gemini image model used for transformations.

    Studio Settings:
        max_upload_bytes : int
            Largest accepted source image, in bytes (5MB)
        status_interval_seconds : float
            How often the processing status message rotates

    Paths:
        outputs_dir : Path
            Directory where the downloadable result is written

    Server Settings:
        server_host / server_port : REST API bind address
        gradio_server_name / gradio_server_port / gradio_share : studio UI

    Examples
    --------
        >>> custom_config = ToonifyConfig(api_key="test", outputs_dir="/tmp/out")
        >>> custom_config.has_api_key
        True
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TOONIFY_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Model settings
    api_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "api_key", "TOONIFY_API_KEY", "API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY"
        ),
        description="Gemini API key (empty disables transformations)",
    )
    model_id: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini image model used for transformations",
    )

    # Studio settings
    max_upload_bytes: int = Field(
        default=DEFAULT_MAX_UPLOAD_BYTES,
        description="Largest accepted source image in bytes",
        ge=1,
    )
    status_interval_seconds: float = Field(
        default=2.5,
        description="Seconds between rotating status messages",
        gt=0,
    )

    # Paths
    outputs_dir: Path = Field(
        default=Path("outputs"),
        description="Directory for the downloadable result image",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logging level for the entry points",
    )

    # REST API settings
    server_host: str = Field(
        default="0.0.0.0",
        description="API bind address",
    )
    server_port: int = Field(
        default=8000,
        description="API port",
        ge=1024,
        le=65535,
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the outputs directory."""
        super().__init__(**kwargs)
        self.outputs_dir.mkdir(parents=True, exist_ok=True)

    @property
    def has_api_key(self) -> bool:
        """Whether a non-blank API credential is configured."""
        return bool(self.api_key and self.api_key.strip())


# Global configuration instance
config = ToonifyConfig()
