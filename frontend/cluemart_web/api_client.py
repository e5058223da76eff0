# frontend/cluemart_web/api_client.py
# Encapsulates every HTTP request the landing page makes to the backend.

import requests

from .config import config


def check_backend():
    """Checks the backend service status."""
    try:
        response = requests.get(config.ROOT_URL, timeout=2)
        if response.status_code == 200:
            return "🟢 Signup service online"
        return f"🟡 Signup service degraded (status code: {response.status_code})"
    except requests.RequestException:
        return "🔴 Signup service unreachable"


def post_subscription(email, source):
    """
    Posts a signup to the backend and returns the raw response.
    Non-2xx responses are not raised; the form controller reads their error body.
    """
    return requests.post(config.SUBSCRIBE_URL, json={"email": email, "source": source})
