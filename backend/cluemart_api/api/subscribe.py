# backend/cluemart_api/api/subscribe.py
from fastapi import APIRouter, Depends, Request
import logging

from ..core.config import MailchimpSettings, get_mailchimp_settings
from ..core.errors import InvalidInput, SubscriptionError, UnexpectedError
from ..models import SubscriptionRequest, parse_json_body
from ..services.mailchimp_service import SubscriptionForwarder

router = APIRouter()
logger = logging.getLogger(__name__)


def get_forwarder(mailchimp: MailchimpSettings = Depends(get_mailchimp_settings)) -> SubscriptionForwarder:
    return SubscriptionForwarder(mailchimp)


@router.post("/subscribe")
async def subscribe(request: Request, forwarder: SubscriptionForwarder = Depends(get_forwarder)):
    """
    接收落地页提交的邮箱和身份 (stallholder / organiser / visitor)，转发到 Mailchimp。
    请求体无法解析时按空请求处理，即返回 400。
    """
    try:
        payload = parse_json_body(await request.body())
        subscription = SubscriptionRequest.from_payload(payload)
        return await forwarder.subscribe(subscription)
    except InvalidInput as e:
        logger.warning(f"Rejected signup: {e.detail}")
        raise
    except SubscriptionError:
        raise
    except Exception as e:
        logger.error(f"Subscribe route error: {e}", exc_info=True)
        raise UnexpectedError(str(e)) from e
