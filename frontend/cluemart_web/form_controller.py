# frontend/cluemart_web/form_controller.py
"""
The signup form's state machine.

    idle --submit--> loading --2xx--> success
      ^                 |
      |                 +--non-2xx / exception--> error
      +---- email or role edited <---------------------+

Local validation failures jump straight from idle to error without touching
the network. Exactly one request is sent per valid submission and nothing is
retried.
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional

import requests

from . import api_client
from .state import FormState, Role, Status

logger = logging.getLogger(__name__)

INVALID_EMAIL_MESSAGE = "Please enter a valid email address."
ROLE_REQUIRED_MESSAGE = "Please choose if you're a stallholder, an organiser, or a visitor first."
SUCCESS_MESSAGE = "You're in! We'll email you as soon as ClueMart Beta launches."
GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


def parse_json_body(response) -> Optional[Dict[str, Any]]:
    """Decodes a response body as a JSON object; empty, malformed or non-object bodies give None."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def get_api_error_message(data: Optional[Dict[str, Any]]) -> Optional[str]:
    if not data:
        return None
    message = data.get("error")
    return message if isinstance(message, str) and message else None


class SignupFormController:
    """Drives a FormState through one signup attempt at a time."""

    def __init__(self, transport: Callable[[str, str], Any] = None):
        # transport(email, source) -> requests.Response
        self.transport = transport or api_client.post_subscription

    @staticmethod
    def clear_error(state: FormState) -> FormState:
        if state.status == Status.ERROR:
            state.status = Status.IDLE
            state.status_message = ""
        return state

    def edit_email(self, state: FormState, value: str) -> FormState:
        state.email = value or ""
        return self.clear_error(state)

    def choose_role(self, state: FormState, role) -> FormState:
        state.role = Role.from_choice(role)
        return self.clear_error(state)

    @staticmethod
    def can_submit(state: FormState) -> bool:
        return state.status != Status.LOADING and state.role is not None

    @staticmethod
    def email_editable(state: FormState) -> bool:
        return state.status != Status.LOADING

    def require_role(self, state: FormState) -> FormState:
        """Focusing the email box before picking a role shows the role prompt straight away."""
        if state.role is None:
            self._fail(state, ROLE_REQUIRED_MESSAGE)
        return state

    def _fail(self, state: FormState, message: str) -> FormState:
        state.status = Status.ERROR
        state.status_message = message
        return state

    def submit(self, state: FormState) -> Iterator[FormState]:
        """Yields the state after every transition of one submission."""
        if not state.email or "@" not in state.email:
            yield self._fail(state, INVALID_EMAIL_MESSAGE)
            return

        if state.role is None:
            yield self._fail(state, ROLE_REQUIRED_MESSAGE)
            return

        state.status = Status.LOADING
        state.status_message = ""
        yield state

        try:
            response = self.transport(state.email, state.role.value)

            if not response.ok:
                error_message = get_api_error_message(parse_json_body(response))
                logger.warning(f"Signup rejected with HTTP {response.status_code}: {error_message}")
                yield self._fail(state, error_message or GENERIC_ERROR_MESSAGE)
                return

            state.status = Status.SUCCESS
            state.status_message = SUCCESS_MESSAGE
            state.email = ""
            yield state
        except requests.RequestException as e:
            logger.error(f"Signup request failed: {e}")
            yield self._fail(state, str(e) or GENERIC_ERROR_MESSAGE)
        except Exception as e:
            logger.error(f"Unexpected error while submitting signup: {e}", exc_info=True)
            yield self._fail(state, str(e) or GENERIC_ERROR_MESSAGE)
