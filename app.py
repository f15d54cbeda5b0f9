"""
Gradio entrypoint for the buup text transformer.

Pick a transformer, type into the input box and the output updates on every
change. The swap button switches to the inverse transformer (when there is
one) and moves the output into the input.
"""

from __future__ import annotations

import logging

import gradio as gr

from buup.inverse import inverse_of
from buup.listing import selector_choices
from buup.registry import get_registry, lookup_transformer
from buup.utils.env import load_settings
from buup.utils.logging import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_TRANSFORMER = "base64encode"
NO_INVERSE_MESSAGE = "No inverse transformer available"


def describe(transformer_id: str | None) -> str:
    """
    Describe the selected transformer.

    Parameters
    ----------
    transformer_id : str or None
        Selected transformer id.

    Returns
    -------
    str
        Markdown line with the title, description and inverse, if any.
    """
    transformer = lookup_transformer(transformer_id) if transformer_id else None
    if transformer is None:
        return "Select a transformer"
    text = f"**{transformer.name}** ({transformer.category.label}): {transformer.description}"
    inverse_id = inverse_of(transformer.id)
    if inverse_id is not None:
        text += f"  \nInverse: `{inverse_id}`"
    return text


def run_transform(transformer_id: str | None, text: str | None) -> str:
    """
    Transform the input text with the selected transformer.

    Parameters
    ----------
    transformer_id : str or None
        Selected transformer id.
    text : str or None
        Input text.

    Returns
    -------
    str
        Transformed text, or the error message when the input is rejected.
    """
    transformer = lookup_transformer(transformer_id) if transformer_id else None
    if transformer is None:
        return f"Unknown transformer: {transformer_id}"
    return transformer.safe_transform(text or "")


def swap(
    transformer_id: str | None,
    text: str | None,
    output: str | None,
) -> tuple[str | None, str | None, str, str]:
    """
    Switch to the inverse transformer and feed it the previous output.

    Parameters
    ----------
    transformer_id : str or None
        Selected transformer id.
    text : str or None
        Current input text.
    output : str or None
        Current output text.

    Returns
    -------
    tuple[str | None, str | None, str, str]
        New transformer id, input, output and status message. Without an
        inverse the id and input are unchanged.
    """
    inverse_id = inverse_of(transformer_id) if transformer_id else None
    if inverse_id is None:
        return transformer_id, text, output or "", NO_INVERSE_MESSAGE
    new_input = output or ""
    logger.debug("Swapping %s -> %s", transformer_id, inverse_id)
    return inverse_id, new_input, run_transform(inverse_id, new_input), f"Switched to {inverse_id}"


def build_app() -> gr.Blocks:
    """
    Build the Gradio application.

    Returns
    -------
    gradio.Blocks
        The Gradio Blocks app.
    """
    choices = selector_choices()
    default_id = DEFAULT_TRANSFORMER if DEFAULT_TRANSFORMER in get_registry() else choices[0][1]

    with gr.Blocks(title="buup") as demo:
        gr.Markdown("# buup")
        gr.Markdown("Text transformations: encoders, decoders, formatters, hashes, compression and colors.")

        with gr.Row():
            transformer = gr.Dropdown(
                choices=choices,
                value=default_id,
                label="Transformer",
                filterable=True,
            )
            swap_btn = gr.Button("Swap", variant="secondary")

        description = gr.Markdown(describe(default_id))
        status = gr.Markdown("")

        with gr.Row():
            input_text = gr.Textbox(label="Input", lines=12, placeholder="Type or paste text here...")
            output_text = gr.Textbox(label="Output", lines=12, interactive=False)

        # Wire up callbacks
        input_text.change(run_transform, inputs=[transformer, input_text], outputs=[output_text])
        transformer.change(run_transform, inputs=[transformer, input_text], outputs=[output_text])
        transformer.change(describe, inputs=[transformer], outputs=[description])
        swap_btn.click(
            swap,
            inputs=[transformer, input_text, output_text],
            outputs=[transformer, input_text, output_text, status],
        )

    return demo


def main() -> None:
    """
    Run the Gradio app locally.
    """
    settings = load_settings()
    setup_logging(settings.log_level)
    app = build_app()
    app.launch(server_name=settings.server_name, server_port=settings.server_port)


if __name__ == "__main__":
    main()
