"""
Innochannel Webhooks — Public API
===================================
Typed events for webhook deliveries and the router that fires them.
"""

from innochannel.webhooks.events import (
    BookingWebhookReceived,
    GeneralWebhookReceived,
    InventoryWebhookReceived,
    PropertyWebhookReceived,
    ReservationWebhookReceived,
    WebhookReceived,
)
from innochannel.webhooks.router import WebhookResult, WebhookRouter, resolve_channel

__all__ = [
    "WebhookReceived",
    "BookingWebhookReceived",
    "ReservationWebhookReceived",
    "PropertyWebhookReceived",
    "InventoryWebhookReceived",
    "GeneralWebhookReceived",
    "WebhookRouter",
    "WebhookResult",
    "resolve_channel",
]
