# frontend/cluemart_web/handlers.py
# The "controller" layer: Gradio callbacks that feed user events into the
# SignupFormController and turn the resulting FormState into component updates.

import html

import gradio as gr

from . import api_client
from .config import config
from .countdown import TEASER_MESSAGES, calculate_time_left, next_teaser_index, render_countdown
from .form_controller import SignupFormController
from .state import FormState, Status

controller = SignupFormController()

# --- UI Logic & Helper Functions ---

def render_status(form_state: FormState) -> str:
    """Status line shown above the email input; empty when there is nothing to say."""
    if not form_state.status_message:
        return ""
    css_class = "status-success" if form_state.status == Status.SUCCESS else "status-error"
    return f'<p class="status-message {css_class}">{html.escape(form_state.status_message)}</p>'


def submit_button_update(form_state: FormState):
    label = "Submitting..." if form_state.status == Status.LOADING else "Notify me"
    return gr.update(interactive=controller.can_submit(form_state), value=label)


def email_input_update(form_state: FormState, **kwargs):
    """The email box is read-only while a submission is in flight."""
    return gr.update(interactive=controller.email_editable(form_state), **kwargs)


def render_teaser(index: int) -> str:
    return f"*{TEASER_MESSAGES[index]}*"

# --- Gradio Callback Handlers ---

def check_backend_status():
    """Callback to check backend status on load."""
    return api_client.check_backend()


def tick_countdown():
    return render_countdown(calculate_time_left(config.launch_at))


def rotate_teaser(index: int):
    index = next_teaser_index(index or 0)
    return index, render_teaser(index)


def on_email_edit(form_state: FormState, email: str):
    """Typing in the email box clears a previous error."""
    controller.edit_email(form_state, email)
    return form_state, render_status(form_state), submit_button_update(form_state)


def on_email_focus(form_state: FormState):
    """Focusing the email box before choosing a role prompts for the role."""
    controller.require_role(form_state)
    return form_state, render_status(form_state), submit_button_update(form_state)


def on_role_change(form_state: FormState, role: str):
    """Picking a role clears a previous error and enables the submit button."""
    controller.choose_role(form_state, role)
    return form_state, render_status(form_state), submit_button_update(form_state)


def handle_submit(form_state: FormState, email: str, role: str):
    """
    Callback for the signup form. A generator, so the 'loading' state (email
    box and button disabled) reaches the browser before the request to the backend is made.
    """
    if form_state.status == Status.LOADING:
        # Enter in the email box while a request is in flight
        yield form_state, render_status(form_state), email_input_update(form_state), submit_button_update(form_state)
        return

    form_state.email = email or ""
    controller.choose_role(form_state, role)

    for snapshot in controller.submit(form_state):
        if snapshot.status == Status.ERROR:
            gr.Warning(snapshot.status_message)
        yield (
            snapshot,
            render_status(snapshot),
            email_input_update(snapshot, value=snapshot.email),
            submit_button_update(snapshot),
        )
