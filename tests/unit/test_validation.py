"""Unit tests for validation utilities."""

import pytest

from toonify.core import validation as core_validation
from toonify.ui.models import NO_FILE_MESSAGE
from toonify.ui.validation import (
    ValidationError,
    load_source_image,
    oversized_file_message,
    validate_artists,
    validate_upload_size,
)


class TestUploadSize:
    """Tests for upload size checks."""

    def test_message_for_default_limit(self):
        assert oversized_file_message() == (
            "File size too large. Please select an image under 5MB."
        )

    def test_message_for_small_limit(self):
        assert oversized_file_message(100) == (
            "File size too large. Please select an image under 100 bytes."
        )

    def test_at_limit_is_allowed(self):
        validate_upload_size(5 * 1024 * 1024)

    def test_over_limit_raises(self):
        with pytest.raises(ValidationError, match="File size too large"):
            validate_upload_size(5 * 1024 * 1024 + 1)


class TestLoadSourceImage:
    """Tests for load_source_image function."""

    def test_png(self, sample_png_path, png_bytes_data):
        source = load_source_image(sample_png_path)

        assert source.path == str(sample_png_path)
        assert source.data == png_bytes_data
        assert source.mime_type == "image/png"
        assert source.size_bytes == len(png_bytes_data)

    def test_jpeg(self, sample_jpeg_path):
        assert load_source_image(str(sample_jpeg_path)).mime_type == "image/jpeg"

    @pytest.mark.parametrize("path", [None, ""])
    def test_no_path(self, path):
        with pytest.raises(ValidationError, match=NO_FILE_MESSAGE):
            load_source_image(path)

    def test_missing_file(self, temp_dir):
        with pytest.raises(ValidationError, match="File not found"):
            load_source_image(temp_dir / "missing.png")

    def test_oversized_file(self, sample_png_path):
        with pytest.raises(ValidationError, match="File size too large"):
            load_source_image(sample_png_path, max_bytes=10)

    def test_not_an_image(self, temp_dir):
        path = temp_dir / "notes.png"
        path.write_text("definitely not a picture")
        with pytest.raises(ValidationError, match="not a readable image"):
            load_source_image(path)


class TestValidateArtists:
    """Tests for validate_artists function."""

    def test_empty_is_valid(self):
        validate_artists([])

    def test_three_known_artists(self):
        validate_artists(["Jock", "Jim Lee", "Fiona Staples"])

    def test_too_many(self):
        with pytest.raises(ValidationError, match="at most 3"):
            validate_artists(["Jock", "Jim Lee", "Fiona Staples", "Sean Phillips"])

    def test_duplicates(self):
        with pytest.raises(ValidationError, match="only be selected once"):
            validate_artists(["Jock", "Jock"])

    def test_unknown_artist(self):
        with pytest.raises(ValidationError, match="Unknown artist: Banksy"):
            validate_artists(["Banksy"])


class TestSharedValidation:
    """The studio re-exports the checks the REST API uses."""

    def test_studio_and_core_share_error_type(self):
        assert ValidationError is core_validation.ValidationError

    def test_core_checks_work_without_the_studio(self):
        with pytest.raises(core_validation.ValidationError, match="at most 3"):
            core_validation.validate_artists(["Jock", "Jim Lee", "Fiona Staples", "Sean Phillips"])
