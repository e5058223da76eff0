# backend/cluemart_api/models.py
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .core.errors import InvalidInput


class Source(str, Enum):
    """Self-identified signup role, forwarded as the SOURCE merge field."""
    STALLHOLDER = "stallholder"
    ORGANISER = "organiser"
    VISITOR = "visitor"
    UNKNOWN = "unknown"

    @classmethod
    def normalize(cls, value: Any) -> "Source":
        """Maps a raw payload value onto a known role, anything else becomes UNKNOWN."""
        if isinstance(value, str):
            for member in (cls.STALLHOLDER, cls.ORGANISER, cls.VISITOR):
                if value == member.value:
                    return member
        return cls.UNKNOWN


def parse_json_body(raw: bytes) -> Optional[Dict[str, Any]]:
    """Returns the decoded JSON object, or None for an empty, malformed or non-object body."""
    if not raw:
        return None
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


@dataclass(frozen=True)
class SubscriptionRequest:
    email: str
    source: Source = Source.UNKNOWN

    @classmethod
    def from_payload(cls, payload: Optional[Dict[str, Any]]) -> "SubscriptionRequest":
        payload = payload or {}
        email = payload.get("email")
        if not email or not isinstance(email, str) or "@" not in email:
            raise InvalidInput(f"Rejected email value of type {type(email).__name__}")
        return cls(email=email, source=Source.normalize(payload.get("source")))
