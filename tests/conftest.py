import json

import httpx
import pytest
from fastapi.testclient import TestClient

from cluemart_api.api.subscribe import get_forwarder
from cluemart_api.core.config import MailchimpSettings
from cluemart_api.main import app
from cluemart_api.services.mailchimp_service import SubscriptionForwarder


CONFIGURED = MailchimpSettings(api_key="key-us21", audience_id="aud123", server_prefix="us21")


class FakeMailchimp:
    """Stands in for the Mailchimp members endpoint and records every call."""

    def __init__(self):
        self.calls = []
        self.status_code = 200
        self.body = {"id": "member-1", "status": "subscribed"}
        self.error = None

    def respond(self, status_code, body=None):
        self.status_code = status_code
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        if self.body is None:
            return httpx.Response(self.status_code, request=request)
        return httpx.Response(self.status_code, json=self.body, request=request)

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)

    def last_payload(self):
        return json.loads(self.calls[-1].content)


@pytest.fixture
def mailchimp():
    return FakeMailchimp()


@pytest.fixture
def make_client(mailchimp):
    clients = []

    def _make(settings=CONFIGURED):
        app.dependency_overrides[get_forwarder] = lambda: SubscriptionForwarder(settings, transport=mailchimp.transport)
        client = TestClient(app)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()
