# backend/cluemart_api/services/mailchimp_service.py
import httpx
import logging

from ..core.config import MailchimpSettings
from ..core.errors import NotConfigured, ProviderError, UnexpectedError
from ..core.logging_config import mask_email
from ..models import SubscriptionRequest, parse_json_body

logger = logging.getLogger(__name__)


class SubscriptionForwarder:
    """
    把落地页的订阅请求转发到 Mailchimp 的 audience。

    每个请求只做一次转发尝试，不重试，也不在本地保存任何订阅数据；
    Mailchimp 是订阅者数据的唯一来源。
    """

    ALREADY_MEMBER_MARKER = "is already a list member"

    def __init__(self, settings: MailchimpSettings, transport: httpx.AsyncBaseTransport = None):
        self.settings = settings
        self.transport = transport

    def build_member_payload(self, request: SubscriptionRequest) -> dict:
        return {
            "email_address": request.email,
            "status": "subscribed",
            "merge_fields": {
                "SOURCE": request.source.value,
            },
        }

    async def subscribe(self, request: SubscriptionRequest) -> dict:
        """
        Creates the list member for ``request``.

        :return: ``{"ok": True}`` when Mailchimp accepted the member or already had it.
        :raises NotConfigured: the credentials are incomplete; Mailchimp is not called.
        :raises ProviderError: Mailchimp rejected the member for any other reason.
        :raises UnexpectedError: the request never got a response.
        """
        try:
            self.settings.validate()
        except NotConfigured as exc:
            logger.error(f"Subscription refused, backend not configured: {exc.detail}")
            raise

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"apikey {self.settings.api_key}",
        }
        logger.info(f"Forwarding signup {mask_email(request.email)} (source={request.source.value}) to Mailchimp...")

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.settings.request_timeout) as client:
                response = await client.post(
                    self.settings.members_url,
                    headers=headers,
                    json=self.build_member_payload(request),
                )
        except httpx.RequestError as req_err:
            logger.error(f"Network error while calling Mailchimp ({self.settings.server_prefix}): {req_err}", exc_info=True)
            raise UnexpectedError(str(req_err)) from req_err

        body = parse_json_body(response.content)

        if response.is_success:
            logger.info(f"Mailchimp accepted {mask_email(request.email)}.")
            return {"ok": True}

        detail = body.get("detail") if body else None
        if response.status_code == 400 and isinstance(detail, str) and self.ALREADY_MEMBER_MARKER in detail:
            logger.info(f"{mask_email(request.email)} is already subscribed, treating as success.")
            return {"ok": True}

        logger.error(f"Mailchimp rejected {mask_email(request.email)}: HTTP {response.status_code}, detail={detail!r}")
        raise ProviderError(f"HTTP {response.status_code}: {detail}")
