# frontend/cluemart_web/state.py
# Client-side state of the signup form. One FormState lives in a gr.State per browser session.

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class Role(str, Enum):
    STALLHOLDER = "stallholder"
    ORGANISER = "organiser"
    VISITOR = "visitor"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_choice(cls, value) -> Optional["Role"]:
        """Turns a radio value back into a Role; blank or unknown values mean no role chosen."""
        if isinstance(value, cls):
            return value
        for role in cls:
            if value in (role.value, role.label):
                return role
        return None


# (label, value) pairs for the role toggle.
ROLE_CHOICES = [(role.label, role.value) for role in Role]


@dataclass
class FormState:
    email: str = ""
    role: Optional[Role] = None
    status: Status = Status.IDLE
    status_message: str = ""
