"""Instruction compilation for the Toonify Blend transformation.

The final instruction sent to the image model is built from two variable
inputs, the chosen style's prompt fragment and an ordered list of up to three
artist influences, interleaved with fixed constraint text that keeps the model
away from photorealism.

Structure (no artists)::

    [Style fragment] [Illustration constraint]

Structure (with artists)::

    [Style fragment] [Illustration constraint] [Artist fusion clause]

The artist names appear twice in the fusion clause, comma-joined and in the
order the user selected them: once as the styles to blend and once as the
hand-drawn characteristics the result must exhibit.

Usage
-----
::

    compiled = build_prompt(
        "Redraw this photo as a vibrant Japanese Anime or Manga illustration.",
        ["Jim Lee", "Jock"],
    )
"""

from __future__ import annotations

from collections.abc import Sequence

from toonify.core.catalog import StyleOption

MAX_ARTISTS = 3

# ---------------------------------------------------------------------------
# Fixed sections appended after the style fragment.
# ---------------------------------------------------------------------------

_ILLUSTRATION_CONSTRAINT = (
    "CRITICAL CONSTRAINT: The output must look like a 2D illustration, drawing, or cartoon. "
    "Do NOT produce a realistic photograph or a simple photo filter. "
    "Ensure heavy stylization and non-photorealistic rendering."
)

_FUSION_TEMPLATE = (
    "Additionally, reconstruct this image as a MASTERFUL BLEND of the iconic art styles of: "
    "{artists}. "
    "Meticulously fuse their unique visual signatures (line weight, hatching, and aesthetic "
    "flair). "
    "The result should be a high-end comic book illustration that clearly exhibits the "
    "hand-drawn characteristics of {artists}. "
    "Keep the subject recognizable but transform them entirely into a comic character."
)


def build_prompt(style_prompt: str, artists: Sequence[str] = ()) -> str:
    """Compile the full transformation instruction.

    Args:
        style_prompt: The chosen style's prompt fragment.
        artists: Ordered artist names (0-3). Order is preserved in the output.

    Returns:
        The compiled instruction. Identical inputs always give identical text.

    Raises:
        ValueError: If more than three artists are given.
    """
    if len(artists) > MAX_ARTISTS:
        raise ValueError(f"At most {MAX_ARTISTS} artists can be blended, got {len(artists)}")

    parts: list[str] = [style_prompt.strip(), _ILLUSTRATION_CONSTRAINT]

    if artists:
        parts.append(_FUSION_TEMPLATE.format(artists=", ".join(artists)))

    return " ".join(parts)


def build_prompt_for_style(style: StyleOption, artists: Sequence[str] = ()) -> str:
    """Compile the instruction for a catalog style."""
    return build_prompt(style.prompt, artists)
