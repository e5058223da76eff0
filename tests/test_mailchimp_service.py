import asyncio

import httpx
import pytest

from cluemart_api.core.config import MailchimpSettings
from cluemart_api.core.errors import NotConfigured, ProviderError, UnexpectedError
from cluemart_api.models import Source, SubscriptionRequest
from cluemart_api.services.mailchimp_service import SubscriptionForwarder

from conftest import CONFIGURED


def _subscribe(forwarder, email="a@b.com", source=Source.VISITOR):
    return asyncio.run(forwarder.subscribe(SubscriptionRequest(email=email, source=source)))


def test_build_member_payload_uses_source_value():
    forwarder = SubscriptionForwarder(CONFIGURED)
    payload = forwarder.build_member_payload(SubscriptionRequest("a@b.com", Source.STALLHOLDER))
    assert payload == {
        "email_address": "a@b.com",
        "status": "subscribed",
        "merge_fields": {"SOURCE": "stallholder"},
    }


def test_success_returns_ok(mailchimp):
    forwarder = SubscriptionForwarder(CONFIGURED, transport=mailchimp.transport)
    assert _subscribe(forwarder) == {"ok": True}
    assert len(mailchimp.calls) == 1


def test_not_configured_raises_before_any_call(mailchimp):
    forwarder = SubscriptionForwarder(MailchimpSettings(api_key="k"), transport=mailchimp.transport)

    with pytest.raises(NotConfigured) as exc_info:
        _subscribe(forwarder)

    assert "MAILCHIMP_AUDIENCE_ID" in exc_info.value.detail
    assert "MAILCHIMP_API_KEY" not in exc_info.value.detail
    assert mailchimp.calls == []


def test_already_member_detail_is_idempotent(mailchimp):
    mailchimp.respond(400, {"detail": "foo@bar.com is already a list member of Audience"})
    forwarder = SubscriptionForwarder(CONFIGURED, transport=mailchimp.transport)

    assert _subscribe(forwarder, email="foo@bar.com") == {"ok": True}


def test_already_member_needs_400_status(mailchimp):
    mailchimp.respond(409, {"detail": "foo@bar.com is already a list member of Audience"})
    forwarder = SubscriptionForwarder(CONFIGURED, transport=mailchimp.transport)

    with pytest.raises(ProviderError):
        _subscribe(forwarder, email="foo@bar.com")


def test_provider_error_keeps_detail_for_logs_only(mailchimp, caplog):
    mailchimp.respond(400, {"detail": "Your merge fields were invalid."})
    forwarder = SubscriptionForwarder(CONFIGURED, transport=mailchimp.transport)

    with caplog.at_level("ERROR"):
        with pytest.raises(ProviderError) as exc_info:
            _subscribe(forwarder)

    assert exc_info.value.public_message == "Failed to subscribe with Mailchimp."
    assert "Your merge fields were invalid." in exc_info.value.detail
    assert "Your merge fields were invalid." in caplog.text


def test_non_json_provider_body_is_a_provider_error():
    def handler(request):
        return httpx.Response(502, content=b"<html>Bad gateway</html>", request=request)

    forwarder = SubscriptionForwarder(CONFIGURED, transport=httpx.MockTransport(handler))

    with pytest.raises(ProviderError):
        _subscribe(forwarder)


def test_transport_error_becomes_unexpected_error(mailchimp):
    mailchimp.error = httpx.ReadTimeout("timed out")
    forwarder = SubscriptionForwarder(CONFIGURED, transport=mailchimp.transport)

    with pytest.raises(UnexpectedError):
        _subscribe(forwarder)
    assert len(mailchimp.calls) == 1
