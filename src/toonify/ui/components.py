"""Reusable UI components and view rendering for the Toonify Gradio interface."""

import gradio as gr

from toonify.core.catalog import ART_STYLES, ARTISTS, StyleOption

from .models import MAX_ARTISTS, Phase, StudioState, TransformationResult
from .state import visible_artists

STANDARD_TOON_LABEL = "Standard Toon"


def style_choices() -> list[tuple[str, str]]:
    """(label, value) pairs for the style radio; values are ArtStyle member names."""
    return [(style.name, style.id.name) for style in ART_STYLES]


def render_style_description(style: StyleOption) -> str:
    return f"**{style.name}** · {style.description}"


def artist_choices(state: StudioState) -> list[tuple[str, str]]:
    """Checkbox choices for the artist picker.

    Shows the artists matching the current search, plus any selected artist
    that the search hides, so the widget never drops a selection. Catalog
    order is kept.
    """
    visible = {artist.name for artist in visible_artists(state)}
    visible.update(state.selected_artists)
    return [
        (f"{artist.name} · {artist.specialty}", artist.name)
        for artist in ARTISTS
        if artist.name in visible
    ]


def render_selected_artists(state: StudioState) -> str:
    """Counter and list of chosen influences."""
    count = len(state.selected_artists)
    header = f"**Selected Influences ({count}/{MAX_ARTISTS})**"
    if not count:
        return f"{header}\n\n*No artists selected. The style prompt is used on its own.*"
    return f"{header}\n\n" + " · ".join(state.selected_artists)


def render_influences(result: TransformationResult | None) -> str:
    """Caption shown above the before/after comparison."""
    if result is None:
        return ""
    names = result.influences or (STANDARD_TOON_LABEL,)
    return f"### Masterpiece Rendered\n**Styles:** {', '.join(names)}"


def render_status(state: StudioState) -> str:
    """Markdown for the status panel."""
    if state.error:
        return f"❌ **Error**\n\n{state.error}"

    if state.phase is Phase.PROCESSING:
        methods = len(state.selected_artists) or 1
        return (
            f"⏳ **{state.status_message}**\n\n"
            f"Drawing your photo using {methods} distinct artistic "
            f"{'methodology' if methods == 1 else 'methodologies'}."
        )

    if state.phase is Phase.SUCCEEDED:
        return "✅ **Masterpiece rendered.** Download it below."

    if state.phase is Phase.SELECTED:
        return f"*Photo loaded. Pick a style and up to {MAX_ARTISTS} artists, then Generate Art.*"

    return (
        f"*Ready to illustrate. Upload a photo and select up to {MAX_ARTISTS} artists "
        f"to blend their line-work and shading.*"
    )


def render_view(state: StudioState) -> tuple:
    """Updates for the components that mirror the session state.

    Order matches :meth:`StudioUI.view_outputs`: status, generate button,
    before image, after image, influences caption, download button.
    """
    result = state.result
    result_file = str(state.result_path) if state.result_path else None
    return (
        render_status(state),
        gr.update(interactive=state.can_transform),
        gr.update(value=result.original_url if result else None),
        gr.update(value=result_file),
        render_influences(result),
        gr.update(value=result_file, visible=result_file is not None),
    )


class ArtistPickerUI:
    """Search box, filtered checkbox list, and selection counter.

    Each picker has:
    - Search textbox (matches name or specialty)
    - CheckboxGroup of matching artists
    - Markdown counter "Selected Influences (n/3)"
    """

    def __init__(self, state: StudioState):
        """Initialize the picker for a starting state.

        Args:
            state: Initial studio state (for choices and counter)
        """
        with gr.Group():
            self.search = gr.Textbox(
                label="Artist Search",
                placeholder=f"Search {len(ARTISTS)} artists by name or style...",
                lines=1,
            )
            self.checkboxes = gr.CheckboxGroup(
                label=f"Artist Blend (up to {MAX_ARTISTS})",
                choices=artist_choices(state),
                value=list(state.selected_artists),
            )
            self.counter = gr.Markdown(render_selected_artists(state))

    @staticmethod
    def render(state: StudioState) -> tuple:
        """Updates for (checkboxes, counter)."""
        return (
            gr.update(choices=artist_choices(state), value=list(state.selected_artists)),
            render_selected_artists(state),
        )


class StudioUI:
    """The result panel: status, action buttons, before/after, download."""

    def __init__(self, state: StudioState):
        self.status = gr.Markdown(render_status(state))

        with gr.Row():
            self.generate_btn = gr.Button(
                "Generate Art",
                variant="primary",
                size="lg",
                interactive=state.can_transform,
            )
            self.reset_btn = gr.Button("Reset Studio", variant="secondary", size="lg")

        self.influences = gr.Markdown("")
        with gr.Row():
            self.before = gr.Image(label="Source Data", type="filepath", interactive=False)
            self.after = gr.Image(label="Final Ink", type="filepath", interactive=False)

        self.download = gr.DownloadButton("Download Art", visible=False)

    def view_outputs(self) -> list:
        """Components updated by :func:`render_view`, in the same order."""
        return [
            self.status,
            self.generate_btn,
            self.before,
            self.after,
            self.influences,
            self.download,
        ]
