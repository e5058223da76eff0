# backend/cluemart_api/core/errors.py
"""
Failure kinds of the subscription flow.

Each error carries the HTTP status it maps to and the message that is safe to
show to the visitor. Anything more detailed goes to the log only.
"""


class SubscriptionError(Exception):
    status_code = 500
    public_message = "Unexpected error. Please try again later."

    def __init__(self, detail: str = None):
        super().__init__(detail or self.public_message)
        self.detail = detail


class InvalidInput(SubscriptionError):
    status_code = 400
    public_message = "Invalid email address."


class NotConfigured(SubscriptionError):
    status_code = 500
    public_message = "Subscription backend is not configured."


class ProviderError(SubscriptionError):
    status_code = 500
    public_message = "Failed to subscribe with Mailchimp."


class UnexpectedError(SubscriptionError):
    status_code = 500
    public_message = "Unexpected error. Please try again later."
