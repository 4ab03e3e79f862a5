"""
Innochannel Webhooks — Router
===============================
Turns a decoded webhook delivery into a typed event and fires
it through the event manager.

Flow:
1. Reject anything that is not a mapping with a string event_type
2. Pick the channel (explicit, else event_type prefix, else general)
3. Build the channel's *WebhookReceived event
4. Fire it; report whether listeners let it propagate

This module does NOT:
- Read HTTP requests or parse JSON
- Verify signatures
- Persist or queue deliveries
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from innochannel.core.events.manager import EventManager, get_event_manager
from innochannel.webhooks.events import (
    CHANNEL_GENERAL,
    WEBHOOK_EVENT_CLASSES,
)

logger = logging.getLogger("innochannel.webhooks")

UNKNOWN_EVENT_TYPE = "unknown"


@dataclass(frozen=True)
class WebhookResult:
    """Outcome of routing one webhook delivery."""

    accepted: bool
    channel: Optional[str] = None
    event_type: Optional[str] = None
    event_name: Optional[str] = None
    propagated: bool = False
    error_code: Optional[str] = None
    error_message: Optional[str] = None


def resolve_channel(event_type: Optional[str]) -> str:
    """'booking.cancelled' → 'booking'; unknown prefixes → 'general'."""
    if not isinstance(event_type, str) or "." not in event_type:
        return CHANNEL_GENERAL
    prefix = event_type.split(".", 1)[0]
    return prefix if prefix in WEBHOOK_EVENT_CLASSES else CHANNEL_GENERAL


class WebhookRouter:
    def __init__(self, event_manager: Optional[EventManager] = None) -> None:
        self._manager = event_manager

    @property
    def manager(self) -> EventManager:
        return self._manager if self._manager is not None else get_event_manager()

    def route(
        self,
        payload: Any,
        headers: Optional[Mapping[str, Any]] = None,
        channel: Optional[str] = None,
    ) -> WebhookResult:
        if not isinstance(payload, Mapping):
            logger.warning(
                f"Webhook rejected: payload is {type(payload).__name__}, "
                f"expected a mapping"
            )
            return WebhookResult(
                accepted=False,
                error_code="INVALID_PAYLOAD",
                error_message="Webhook payload must be a mapping.",
            )

        event_type = payload.get("event_type") or UNKNOWN_EVENT_TYPE
        if not isinstance(event_type, str):
            logger.warning(
                f"Webhook rejected: event_type is {type(event_type).__name__}, "
                f"expected a string"
            )
            return WebhookResult(
                accepted=False,
                error_code="INVALID_PAYLOAD",
                error_message="Webhook event_type must be a string.",
            )

        if channel is None:
            channel = resolve_channel(event_type)
        elif channel not in WEBHOOK_EVENT_CLASSES:
            logger.warning(f"Webhook rejected: unknown channel '{channel}'")
            return WebhookResult(
                accepted=False,
                channel=channel,
                event_type=event_type,
                error_code="UNKNOWN_CHANNEL",
                error_message=f"No webhook channel named '{channel}'.",
            )

        event = WEBHOOK_EVENT_CLASSES[channel](payload, headers)
        logger.info(
            f"Webhook received: {event_type} on channel {channel} "
            f"(webhook_id: {event.get_webhook_id()})"
        )
        propagated = self.manager.fire(event)

        return WebhookResult(
            accepted=True,
            channel=channel,
            event_type=event_type,
            event_name=event.name,
            propagated=propagated,
        )
