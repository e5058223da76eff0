# frontend/cluemart_web/ui.py

import gradio as gr

from .countdown import TEASER_MESSAGES
from .state import FormState, ROLE_CHOICES

PAGE_CSS = """
.hero-text { text-align: center; }
.teaser-line { text-align: center; min-height: 2.5em; }
.countdown { display: flex; gap: 1rem; justify-content: center; }
.time-box { text-align: center; min-width: 4.5rem; }
.time-value { font-size: 2.5rem; font-weight: 700; font-variant-numeric: tabular-nums; }
.time-label { font-size: 0.8rem; text-transform: uppercase; opacity: 0.8; }
.status-message { text-align: center; font-weight: 600; }
.status-success { color: #2e7d32; }
.status-error { color: #c62828; }
"""


def create_landing_page():
    """Builds the hero, countdown and signup form of the landing page."""
    backend_status = gr.Markdown()
    gr.Markdown("# Something new is coming to your market…", elem_classes=["hero-text"])

    teaser_index = gr.State(0)
    teaser = gr.Markdown(f"*{TEASER_MESSAGES[0]}*", elem_classes=["teaser-line"])

    gr.Markdown("### ClueMart Beta opens in", elem_classes=["hero-text"])
    countdown = gr.HTML()

    gr.Markdown("Sign up and we'll notify you the moment ClueMart Beta launches.", elem_classes=["hero-text"])

    with gr.Group():
        form_state = gr.State(FormState())
        role_radio = gr.Radio(
            label="Choose your profile",
            choices=ROLE_CHOICES,
            value=None,
            interactive=True,
        )
        status_output = gr.HTML()
        with gr.Row():
            email_input = gr.Textbox(
                label="Email",
                placeholder="you@example.com",
                show_label=False,
                scale=4,
            )
            submit_btn = gr.Button("Notify me", variant="primary", interactive=False, scale=1)

    components = {
        "backend_status": backend_status,
        "teaser_index": teaser_index, "teaser": teaser, "countdown": countdown,
        "form_state": form_state, "role_radio": role_radio, "status_output": status_output,
        "email_input": email_input, "submit_btn": submit_btn,
    }
    return components
