# frontend/cluemart_web/main.py
# Assembles the landing page and wires the event handlers.

import os
import gradio as gr

from .config import config
from . import handlers
from . import ui

COUNTDOWN_TICK_SECONDS = 1
TEASER_ROTATE_SECONDS = 5


def build_demo():
    """Builds the Gradio Blocks app without launching it."""
    with gr.Blocks(theme=gr.themes.Soft(primary_hue="green", secondary_hue="lime"), css=ui.PAGE_CSS, title="ClueMart Beta") as demo:
        page = ui.create_landing_page()

        # --- Load & timers ---
        demo.load(handlers.check_backend_status, outputs=page["backend_status"])
        demo.load(handlers.tick_countdown, outputs=page["countdown"])

        countdown_timer = gr.Timer(COUNTDOWN_TICK_SECONDS)
        countdown_timer.tick(handlers.tick_countdown, outputs=page["countdown"])

        teaser_timer = gr.Timer(TEASER_ROTATE_SECONDS)
        teaser_timer.tick(handlers.rotate_teaser, inputs=page["teaser_index"], outputs=[page["teaser_index"], page["teaser"]])

        # --- Signup form ---
        edit_outputs = [page["form_state"], page["status_output"], page["submit_btn"]]
        page["role_radio"].change(
            handlers.on_role_change,
            inputs=[page["form_state"], page["role_radio"]],
            outputs=edit_outputs,
        )
        page["email_input"].input(
            handlers.on_email_edit,
            inputs=[page["form_state"], page["email_input"]],
            outputs=edit_outputs,
        )
        page["email_input"].focus(
            handlers.on_email_focus,
            inputs=[page["form_state"]],
            outputs=edit_outputs,
        )

        submit_inputs = [page["form_state"], page["email_input"], page["role_radio"]]
        submit_outputs = [page["form_state"], page["status_output"], page["email_input"], page["submit_btn"]]
        page["submit_btn"].click(handlers.handle_submit, inputs=submit_inputs, outputs=submit_outputs)
        page["email_input"].submit(handlers.handle_submit, inputs=submit_inputs, outputs=submit_outputs)

    return demo


def main():
    """
    Builds the Gradio UI, wires up all the event handlers, and launches the interface.
    """
    os.environ["GRADIO_ANALYTICS_ENABLED"] = "false"
    demo = build_demo()
    print("ClueMart 落地页即将启动...")
    demo.launch(server_name="0.0.0.0", server_port=config.run_port, inbrowser=False)
