"""Gradio UI for Toonify Blend."""

import logging

import gradio as gr

from toonify.core.catalog import ARTISTS, DEFAULT_STYLE
from toonify.core.config import config

from .components import ArtistPickerUI, StudioUI, style_choices
from .handlers import (
    change_style,
    clear_image,
    describe_style,
    end_session,
    pick_artists,
    reset_studio,
    search_artists,
    transform,
    upload_image,
)
from .models import MAX_ARTISTS
from .state import initial_state

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> tuple[gr.Blocks, str]:
    """Create the Gradio UI.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    custom_css = """
    .toonify-upload {
        min-height: 320px;
    }
    .toonify-status {
        border: 1px solid #374151;
        border-radius: 6px;
        padding: 12px;
    }
    """

    start = initial_state()
    app = gr.Blocks(title="Toonify Blend")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(start)

        gr.Markdown(
            f"""
            # Toonify Blend
            ### Turn a photo into a cartoon, blending up to {MAX_ARTISTS} of {len(ARTISTS)} comic artists
            """
        )

        with gr.Row():
            with gr.Column(scale=1):
                image_input = gr.Image(
                    label="Source Photo",
                    type="filepath",
                    sources=["upload"],
                    elem_classes="toonify-upload",
                )

                style_radio = gr.Radio(
                    label="Art Style",
                    choices=style_choices(),
                    value=DEFAULT_STYLE.id.name,
                )
                style_description = gr.Markdown(describe_style(DEFAULT_STYLE.id.name))

                picker = ArtistPickerUI(start)

            with gr.Column(scale=1, elem_classes="toonify-status"):
                studio = StudioUI(start)

        view_outputs = studio.view_outputs()

        # Photo upload
        image_input.upload(
            fn=upload_image,
            inputs=[image_input, ui_state],
            outputs=[image_input, *view_outputs, ui_state],
        )

        # Photo removed with the widget's clear button
        image_input.clear(
            fn=clear_image,
            inputs=[ui_state],
            outputs=[*view_outputs, ui_state],
        )

        # Style choice
        style_radio.change(
            fn=change_style,
            inputs=[style_radio, ui_state],
            outputs=[style_description, ui_state],
        )

        # Artist search and selection (user edits only, not programmatic updates)
        picker.search.input(
            fn=search_artists,
            inputs=[picker.search, ui_state],
            outputs=[picker.checkboxes, picker.counter, ui_state],
        )
        picker.checkboxes.input(
            fn=pick_artists,
            inputs=[picker.checkboxes, ui_state],
            outputs=[picker.checkboxes, picker.counter, ui_state],
        )

        # Generate Art - one in flight per session, sessions run independently
        studio.generate_btn.click(
            fn=transform,
            inputs=[ui_state],
            outputs=[*view_outputs, ui_state],
            concurrency_limit=None,
        )

        # Reset
        studio.reset_btn.click(
            fn=reset_studio,
            inputs=[ui_state],
            outputs=[
                image_input,
                picker.search,
                picker.checkboxes,
                picker.counter,
                *view_outputs,
                ui_state,
            ],
        )

        app.unload(end_session)

    return app, custom_css


def main():
    """Main entry point for the studio UI."""
    logger.info("Starting Toonify Blend studio...")
    logger.info(f"Configuration: {config.model_dump(exclude={'api_key'})}")

    if not config.has_api_key:
        logger.warning("No API key configured; transformations will fail until one is set")

    app, custom_css = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
        allowed_paths=[str(config.outputs_dir)],
    )


if __name__ == "__main__":
    main()
