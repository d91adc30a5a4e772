"""Unit tests for the style and artist catalog."""

import pytest

from toonify.core.catalog import (
    ART_STYLES,
    ARTISTS,
    DEFAULT_STYLE,
    LOADING_MESSAGES,
    ArtStyle,
    filter_artists,
    get_artist,
    get_style,
)


class TestStyles:
    """Tests for the style catalog."""

    def test_three_styles_offered(self):
        """The studio offers comic, 3D and anime styles."""
        assert [style.id for style in ART_STYLES] == [
            ArtStyle.CLASSIC_COMIC,
            ArtStyle.PIXAR_3D,
            ArtStyle.ANIME_MANGA,
        ]

    def test_default_is_classic_comic(self):
        assert DEFAULT_STYLE.id is ArtStyle.CLASSIC_COMIC

    def test_every_style_has_prompt_and_preview(self):
        for style in ART_STYLES:
            assert style.prompt.strip()
            assert style.preview_url.startswith("https://")

    def test_get_style_by_member(self):
        assert get_style(ArtStyle.ANIME_MANGA).name == "Anime/Manga"

    def test_get_style_by_value(self):
        assert get_style("3D Animation Movie").id is ArtStyle.PIXAR_3D

    def test_get_style_by_member_name(self):
        assert get_style("ANIME_MANGA").id is ArtStyle.ANIME_MANGA

    def test_get_style_unknown_raises(self):
        with pytest.raises(KeyError):
            get_style("Oil Painting")

    def test_get_style_outside_catalog_raises(self):
        """Enum members without a catalog entry are not selectable."""
        with pytest.raises(KeyError):
            get_style(ArtStyle.WATERCOLOR)

    def test_to_dict_uses_enum_value(self):
        data = DEFAULT_STYLE.to_dict()
        assert data["id"] == "Classic Comic Book"
        assert set(data) == {"id", "name", "description", "preview_url", "prompt"}


class TestArtists:
    """Tests for the artist roster and lookups."""

    def test_roster_size(self):
        assert len(ARTISTS) == 51

    def test_names_are_unique(self):
        names = [artist.name for artist in ARTISTS]
        assert len(names) == len(set(names))

    def test_get_artist(self):
        assert get_artist("Jock").specialty.startswith("High-contrast")

    def test_get_artist_unknown_raises(self):
        with pytest.raises(KeyError):
            get_artist("Nobody In Particular")

    def test_loading_messages(self):
        assert len(LOADING_MESSAGES) == 6
        assert LOADING_MESSAGES[0] == "Mixing the ink..."


class TestFilterArtists:
    """Tests for filter_artists function."""

    def test_empty_term_returns_all(self):
        assert filter_artists("") == list(ARTISTS)

    def test_none_returns_all(self):
        assert filter_artists(None) == list(ARTISTS)

    def test_whitespace_returns_all(self):
        assert filter_artists("   ") == list(ARTISTS)

    def test_matches_name_case_insensitive(self):
        names = [artist.name for artist in filter_artists("jim")]
        assert names == ["Jim Lee", "Jim Valentino"]

    def test_matches_specialty(self):
        names = [artist.name for artist in filter_artists("watercolor")]
        assert "Dustin Nguyen" in names
        assert "Peach Momoko" in names

    def test_term_is_trimmed(self):
        assert filter_artists("  jock  ") == [get_artist("Jock")]

    def test_no_match(self):
        assert filter_artists("zzzz-no-such-artist") == []

    def test_preserves_catalog_order(self):
        matches = filter_artists("gritty")
        positions = [ARTISTS.index(artist) for artist in matches]
        assert positions == sorted(positions)
