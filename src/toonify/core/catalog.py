"""Static style and artist catalog for Toonify Blend.

The catalog is the fixed menu the studio offers: a handful of visual styles,
each carrying the natural-language prompt fragment that forms the base of the
generation instruction, and a roster of illustrators whose names are blended
into the instruction as influences.

Everything here is immutable and loaded once at import time. Lookups and the
artist search are plain functions so both the Gradio studio and the REST API
share them.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class ArtStyle(str, Enum):
    """Visual styles the studio knows about."""

    CLASSIC_COMIC = "Classic Comic Book"
    ANIME_MANGA = "Vibrant Anime/Manga"
    PIXAR_3D = "3D Animation Movie"
    POP_ART = "Lichtenstein Pop Art"
    CYBERPUNK = "Neon Cyberpunk Toon"
    WATERCOLOR = "Artistic Watercolor Illustration"
    SKETCH = "Hand-drawn Charcoal Sketch"


@dataclass(frozen=True)
class StyleOption:
    """A selectable visual style.

    Attributes:
        id: The style identifier.
        name: Short display name.
        description: One-line description shown under the name.
        preview_url: Thumbnail shown in the style picker.
        prompt: Prompt fragment that opens the generation instruction.
    """

    id: ArtStyle
    name: str
    description: str
    preview_url: str
    prompt: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["id"] = self.id.value
        return data


@dataclass(frozen=True)
class Artist:
    """An illustrator influence and a short descriptor of their style."""

    name: str
    specialty: str

    def to_dict(self) -> dict:
        return asdict(self)


ART_STYLES: tuple[StyleOption, ...] = (
    StyleOption(
        id=ArtStyle.CLASSIC_COMIC,
        name="Classic Comic",
        description="Bold outlines, high contrast, and retro Ben-Day dots.",
        preview_url="https://picsum.photos/seed/comic/400/400",
        prompt=(
            "Transform this photo into a highly stylized classic 1960s comic book illustration. "
            "Use heavy, thick black ink outlines and vibrant, non-realistic primary colors. "
            "This must look like hand-drawn art on paper, completely avoiding any photographic "
            "realism."
        ),
    ),
    StyleOption(
        id=ArtStyle.PIXAR_3D,
        name="3D Animation",
        description="Modern 3D movie look with soft lighting.",
        preview_url="https://picsum.photos/seed/pixar/400/400",
        prompt=(
            "Convert this image into a stylized 3D animated movie character. "
            "Use expressive, exaggerated features and smooth, simplified textures. "
            "It should look like a character from a high-end animation studio, "
            "not a realistic human."
        ),
    ),
    StyleOption(
        id=ArtStyle.ANIME_MANGA,
        name="Anime/Manga",
        description="Vibrant Japanese animation style.",
        preview_url="https://picsum.photos/seed/anime/400/400",
        prompt=(
            "Redraw this photo as a vibrant Japanese Anime or Manga illustration. "
            "Use sharp cel-shading, stylized linework, and dramatic, non-photorealistic "
            "lighting. The final result must be a 2D drawing."
        ),
    ),
)

DEFAULT_STYLE: StyleOption = ART_STYLES[0]

ARTISTS: tuple[Artist, ...] = (
    Artist("Todd McFarlane", "Intricate detail, dark atmospheres, flowing capes"),
    Artist("Jim Lee", "Heroic anatomy, dynamic cross-hatching"),
    Artist("Rob Liefeld", "Extreme energy, exaggerated anatomy, many pouches"),
    Artist("Marc Silvestri", "Elegant line work, high-fashion aesthetic"),
    Artist("Erik Larsen", "Golden-age energy, bold muscularity"),
    Artist("Whilce Portacio", "Tech-organic details, gritty textures"),
    Artist("Jim Valentino", "Clean, classic superhero lines"),
    Artist("Greg Capullo", "Gothic energy, expressive faces"),
    Artist("Stephen Platt", "Hyper-detailed rendering"),
    Artist("J. Scott Campbell", "Stylized, elongated figures, clean lines"),
    Artist("Brett Booth", "Hyper-dynamic poses, intricate hatching"),
    Artist("Sam Kieth", "Abstract, exaggerated proportions, surrealism"),
    Artist("Travis Charest", "European-influenced ultra-detail"),
    Artist("Dale Keown", "Massive muscular power, realistic lighting"),
    Artist("Tony Daniel", "Polished, modern DC-style aesthetic"),
    Artist("Bart Sears", "Vast, powerful anatomy"),
    Artist("Jae Lee", "Stylized, silhouette-heavy gothic art"),
    Artist("Ryan Ottley", "High-octane kinetic energy, visceral detail"),
    Artist("Charlie Adlard", "Gritty, realistic charcoal/ink feel"),
    Artist("Fiona Staples", "Clean, digital-paint hybrid, unique palette"),
    Artist("Jamie McKelvie", "Perfect clean-line pop aesthetic"),
    Artist("Sean Phillips", "Gritty noir, heavy shadows"),
    Artist("Frank Quitely", "Unique textural line work, distinct anatomy"),
    Artist("Jerome Opeña", "Atmospheric painterly textures"),
    Artist("Matteo Scalera", "Sharp, angular dynamic movement"),
    Artist("Wes Craig", "Experimental layouts, bold flat colors"),
    Artist("Rob Guillory", "Stylized, cartoonish, expressive energy"),
    Artist("Dustin Nguyen", "Soft watercolor comic style"),
    Artist("Cliff Chiang", "Iconic, graphic design-oriented lines"),
    Artist("Jock", "High-contrast, abstract energy, ink splatters"),
    Artist("Christian Ward", "Psychedelic colors, cosmic energy"),
    Artist("Skottie Young", "Whimsical, baby-variant aesthetic"),
    Artist("Gabriel Bá", "European-infused, rhythmic line work"),
    Artist("Fábio Moon", "Atmospheric, poetic brushstrokes"),
    Artist("Nick Dragotta", "Retro-futuristic, clean Manga influence"),
    Artist("Greg Tocchini", "Abstract, painterly sci-fi art"),
    Artist("Tula Lotay", "Ethereal, layered watercolor/pencil"),
    Artist("Jason Latour", "Punchy, gritty street aesthetic"),
    Artist("Ryan Stegman", "90s influence, high detail, sharp lines"),
    Artist("Cory Walker", "Clean, efficiency-driven lines"),
    Artist("Martin Simmonds", "Mixed-media, collage, unsettling noir"),
    Artist("Daniel Warren Johnson", "Hyper-kinetic energy, sound-effect heavy"),
    Artist("Zoe Thorogood", "Raw, emotional, sketchbook style"),
    Artist("Alvaro Martinez Bueno", "Detailed, atmospheric modern horror"),
    Artist("Sana Takeda", "Ornate, detailed digital painting/Manga"),
    Artist("Elsa Charretier", "Classic golden age/Darwin Cooke vibe"),
    Artist("Sanford Greene", "Hip-hop energy, graffiti influenced lines"),
    Artist("Jakub Rebelka", "Detailed, medieval sci-fi hybrid"),
    Artist("Peach Momoko", "Traditional Japanese ink and watercolor"),
    Artist("Artyom Topilin", "Gritty, textured indie aesthetic"),
    Artist("Jason Shawn Alexander", "Dark, expressive, ink-heavy realism"),
)

LOADING_MESSAGES: tuple[str, ...] = (
    "Mixing the ink...",
    "Blending the palettes...",
    "Studying the pencil work...",
    "Applying legendary cross-hatching...",
    "Summoning the art gods...",
    "Inking the final pages...",
)

_STYLES_BY_ID: dict[ArtStyle, StyleOption] = {style.id: style for style in ART_STYLES}
_ARTISTS_BY_NAME: dict[str, Artist] = {artist.name: artist for artist in ARTISTS}


def get_style(style_id: ArtStyle | str) -> StyleOption:
    """Look up a style by enum member, enum value, or member name.

    Args:
        style_id: ``ArtStyle.ANIME_MANGA``, ``"Vibrant Anime/Manga"`` or
            ``"ANIME_MANGA"`` all resolve to the same style.

    Returns:
        The matching StyleOption.

    Raises:
        KeyError: If no catalog style matches.
    """
    if isinstance(style_id, ArtStyle):
        key = style_id
    else:
        try:
            key = ArtStyle(style_id)
        except ValueError:
            try:
                key = ArtStyle[style_id]
            except KeyError:
                raise KeyError(f"Unknown style: {style_id}") from None

    try:
        return _STYLES_BY_ID[key]
    except KeyError:
        raise KeyError(f"Style not available in catalog: {key.value}") from None


def get_artist(name: str) -> Artist:
    """Look up an artist by exact name.

    Raises:
        KeyError: If the name is not in the roster.
    """
    try:
        return _ARTISTS_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown artist: {name}") from None


def filter_artists(search_term: str | None = None) -> list[Artist]:
    """Return artists whose name or specialty contains the search term.

    Matching is a case-insensitive substring test. A blank term returns the
    whole roster in catalog order.
    """
    term = (search_term or "").strip().lower()
    if not term:
        return list(ARTISTS)

    matches = [
        artist
        for artist in ARTISTS
        if term in artist.name.lower() or term in artist.specialty.lower()
    ]
    logger.debug(f"Artist search {term!r} matched {len(matches)} of {len(ARTISTS)}")
    return matches
