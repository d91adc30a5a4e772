"""Shared pytest fixtures for Toonify tests."""

import base64
import shutil
import tempfile
from io import BytesIO
from pathlib import Path
from typing import Generator

import pytest
from PIL import Image

from toonify.core.config import ToonifyConfig
from toonify.ui.models import SourceImage, StudioState
from toonify.ui.state import select_file


def make_image_bytes(image_format: str = "PNG", size: tuple[int, int] = (8, 8)) -> bytes:
    """Encode a small solid-colour image in the given format."""
    buffer = BytesIO()
    Image.new("RGB", size, color=(200, 40, 40)).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> ToonifyConfig:
    """Create a test configuration with a temporary outputs directory.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        ToonifyConfig instance for testing
    """
    return ToonifyConfig(
        _env_file=None,
        api_key="test-key",
        outputs_dir=temp_dir / "outputs",
        status_interval_seconds=0.05,
    )


@pytest.fixture
def png_bytes_data() -> bytes:
    """Raw bytes of a tiny PNG."""
    return make_image_bytes("PNG")


@pytest.fixture
def png_data_url(png_bytes_data: bytes) -> str:
    """The tiny PNG as a data URL."""
    return "data:image/png;base64," + base64.b64encode(png_bytes_data).decode("utf-8")


@pytest.fixture
def sample_png_path(temp_dir: Path, png_bytes_data: bytes) -> Path:
    """A PNG file on disk."""
    path = temp_dir / "photo.png"
    path.write_bytes(png_bytes_data)
    return path


@pytest.fixture
def sample_jpeg_path(temp_dir: Path) -> Path:
    """A JPEG file on disk."""
    path = temp_dir / "photo.jpg"
    path.write_bytes(make_image_bytes("JPEG"))
    return path


@pytest.fixture
def source_image(sample_png_path: Path, png_bytes_data: bytes) -> SourceImage:
    """A validated source image."""
    return SourceImage(
        path=str(sample_png_path),
        data=png_bytes_data,
        mime_type="image/png",
        size_bytes=len(png_bytes_data),
    )


@pytest.fixture
def studio_state() -> StudioState:
    """Create an idle studio state for testing.

    Returns:
        StudioState instance
    """
    return StudioState()


@pytest.fixture
def selected_state(source_image: SourceImage) -> StudioState:
    """A studio state with a photo selected."""
    return select_file(StudioState(), source_image)
