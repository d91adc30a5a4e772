"""Unit tests for studio data models."""

import base64
from dataclasses import FrozenInstanceError

import pytest

from toonify.core import prompt_builder
from toonify.core.catalog import DEFAULT_STYLE, LOADING_MESSAGES
from toonify.core.images import encode_data_url
from toonify.ui.models import (
    MAX_ARTISTS,
    MAX_UPLOAD_BYTES,
    Phase,
    SourceImage,
    StudioState,
    TransformationResult,
)


class TestSourceImage:
    """Tests for SourceImage dataclass."""

    def test_data_url(self, source_image, png_bytes_data):
        expected = "data:image/png;base64," + base64.b64encode(png_bytes_data).decode()
        assert source_image.data_url == expected

    def test_data_url_matches_image_helper(self, source_image, png_bytes_data):
        assert source_image.data_url == encode_data_url(png_bytes_data, "image/png")

    def test_preview_url_is_path(self, source_image, sample_png_path):
        assert source_image.preview_url == str(sample_png_path)

    def test_repr_omits_bytes(self, source_image):
        assert "data=" not in repr(source_image)


class TestStudioState:
    """Tests for StudioState dataclass."""

    def test_defaults(self, studio_state):
        assert studio_state.phase is Phase.IDLE
        assert studio_state.source is None
        assert studio_state.active_style == DEFAULT_STYLE
        assert studio_state.selected_artists == ()
        assert studio_state.search_term == ""
        assert studio_state.status_message == LOADING_MESSAGES[0]
        assert studio_state.error is None
        assert studio_state.result is None
        assert studio_state.result_path is None

    def test_is_frozen(self, studio_state):
        with pytest.raises(FrozenInstanceError):
            studio_state.error = "nope"

    def test_cannot_transform_without_source(self, studio_state):
        assert studio_state.can_transform is False

    def test_can_transform_with_source(self, selected_state):
        assert selected_state.can_transform is True

    def test_cannot_transform_while_processing(self, source_image):
        state = StudioState(phase=Phase.PROCESSING, source=source_image)
        assert state.is_processing is True
        assert state.can_transform is False

    def test_repr(self, selected_state):
        text = repr(selected_state)
        assert "phase=selected" in text
        assert "style=CLASSIC_COMIC" in text


class TestTransformationResult:
    def test_default_influences(self):
        result = TransformationResult("a", "b", "Classic Comic Book")
        assert result.influences == ()


def test_constants():
    assert MAX_ARTISTS == 3
    assert MAX_ARTISTS == prompt_builder.MAX_ARTISTS
    assert MAX_UPLOAD_BYTES == 5 * 1024 * 1024
