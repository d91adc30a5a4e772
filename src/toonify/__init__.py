"""Toonify Blend - Photo-to-comic stylization with blended artist influences."""

__version__ = "0.1.0"

from toonify.core.config import ToonifyConfig, config
from toonify.core.transform_client import TransformationClient, create_client

__all__ = [
    "ToonifyConfig",
    "config",
    "TransformationClient",
    "create_client",
]
