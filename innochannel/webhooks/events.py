"""
Innochannel Webhooks — Received Events
========================================
Payload-carrying events built from an Innochannel webhook
delivery. The host framework decodes the request; these
classes only interpret the decoded mapping:

    {
        "event_type": "booking.cancelled",
        "webhook_id": "wh_123",
        "severity":   "info",
        "data":       {...}
    }
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Optional

from innochannel.core.events.event import Event, thaw_value

CHANNEL_BOOKING     = "booking"
CHANNEL_RESERVATION = "reservation"
CHANNEL_PROPERTY    = "property"
CHANNEL_INVENTORY   = "inventory"
CHANNEL_GENERAL     = "general"

WEBHOOK_BOOKING_RECEIVED     = "webhook.booking.received"
WEBHOOK_RESERVATION_RECEIVED = "webhook.reservation.received"
WEBHOOK_PROPERTY_RECEIVED    = "webhook.property.received"
WEBHOOK_INVENTORY_RECEIVED   = "webhook.inventory.received"
WEBHOOK_GENERAL_RECEIVED     = "webhook.general.received"


class WebhookReceived(Event):
    CHANNEL: ClassVar[str] = CHANNEL_GENERAL
    EVENT_NAME: ClassVar[str] = WEBHOOK_GENERAL_RECEIVED

    def __init__(
        self,
        webhook: Mapping[str, Any],
        headers: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(name=self.EVENT_NAME, payload={
            "webhook": dict(webhook),
            "headers": {str(k).lower(): v for k, v in (headers or {}).items()},
        })

    @property
    def webhook(self) -> Dict[str, Any]:
        return self.get_value("webhook")

    @property
    def headers(self) -> Dict[str, Any]:
        return self.get_value("headers")

    def get_header(self, name: str, default: Any = None) -> Any:
        return thaw_value(self.payload["headers"].get(name.lower(), default))

    def get_event_type(self) -> Optional[str]:
        event_type = self.payload["webhook"].get("event_type")
        return event_type if isinstance(event_type, str) else None

    def get_webhook_id(self) -> Optional[str]:
        return self.payload["webhook"].get("webhook_id")

    def get_webhook_data(self) -> Dict[str, Any]:
        return thaw_value(self._data())

    def _data(self) -> Mapping[str, Any]:
        # "data" that is not an object is treated as empty.
        data = self.payload["webhook"].get("data")
        return data if isinstance(data, Mapping) else {}

    def _data_get(self, key: str, default: Any = None) -> Any:
        return thaw_value(self._data().get(key, default))

    def _is(self, event_type: str) -> bool:
        return self.get_event_type() == event_type


class BookingWebhookReceived(WebhookReceived):
    CHANNEL = CHANNEL_BOOKING
    EVENT_NAME = WEBHOOK_BOOKING_RECEIVED

    def get_booking_id(self) -> Optional[str]:
        return self._data_get("id")

    def get_booking_data(self) -> Dict[str, Any]:
        return self.get_webhook_data()

    def is_booking_created(self) -> bool:
        return self._is("booking.created")

    def is_booking_updated(self) -> bool:
        return self._is("booking.updated")

    def is_booking_cancelled(self) -> bool:
        return self._is("booking.cancelled")

    def is_booking_modified(self) -> bool:
        return self._is("booking.modified")


class ReservationWebhookReceived(WebhookReceived):
    CHANNEL = CHANNEL_RESERVATION
    EVENT_NAME = WEBHOOK_RESERVATION_RECEIVED

    def get_reservation_id(self) -> Optional[str]:
        return self._data_get("id")

    def get_reservation_data(self) -> Dict[str, Any]:
        return self.get_webhook_data()

    def is_reservation_created(self) -> bool:
        return self._is("reservation.created")

    def is_reservation_updated(self) -> bool:
        return self._is("reservation.updated")

    def is_reservation_cancelled(self) -> bool:
        return self._is("reservation.cancelled")

    def is_reservation_modified(self) -> bool:
        return self._is("reservation.modified")


class PropertyWebhookReceived(WebhookReceived):
    CHANNEL = CHANNEL_PROPERTY
    EVENT_NAME = WEBHOOK_PROPERTY_RECEIVED

    def get_property_id(self) -> Optional[str]:
        return self._data_get("id")

    def get_property_data(self) -> Dict[str, Any]:
        return self.get_webhook_data()

    def is_property_created(self) -> bool:
        return self._is("property.created")

    def is_property_updated(self) -> bool:
        return self._is("property.updated")

    def is_property_deleted(self) -> bool:
        return self._is("property.deleted")

    def is_property_status_changed(self) -> bool:
        return self._is("property.status_changed")


class InventoryWebhookReceived(WebhookReceived):
    CHANNEL = CHANNEL_INVENTORY
    EVENT_NAME = WEBHOOK_INVENTORY_RECEIVED

    def get_property_id(self) -> Optional[str]:
        return self._data_get("property_id")

    def get_inventory_data(self) -> Dict[str, Any]:
        return self.get_webhook_data()

    def is_rates_updated(self) -> bool:
        return self._is("inventory.rates_updated")

    def is_availability_updated(self) -> bool:
        return self._is("inventory.availability_updated")

    def is_restrictions_updated(self) -> bool:
        return self._is("inventory.restrictions_updated")

    def is_bulk_inventory_updated(self) -> bool:
        return self._is("inventory.bulk_updated")

    def get_date_range(self) -> Dict[str, Optional[str]]:
        return {
            "start_date": self._data_get("start_date"),
            "end_date":   self._data_get("end_date"),
        }

    def get_room_types(self) -> List[Any]:
        return list(self._data_get("room_types", []) or [])


class GeneralWebhookReceived(WebhookReceived):
    CHANNEL = CHANNEL_GENERAL
    EVENT_NAME = WEBHOOK_GENERAL_RECEIVED

    def get_event_data(self) -> Dict[str, Any]:
        return self.get_webhook_data()

    def is_system_notification(self) -> bool:
        return self._is("system.notification")

    def is_maintenance_event(self) -> bool:
        return (self.get_event_type() or "").startswith("maintenance.")

    def is_api_status_event(self) -> bool:
        return (self.get_event_type() or "").startswith("api.status.")

    def is_webhook_test(self) -> bool:
        return self._is("webhook.test")

    def get_notification_message(self) -> Optional[str]:
        if not self.is_system_notification():
            return None
        return self._data_get("message")

    def get_severity(self) -> str:
        return self.payload["webhook"].get("severity") or "info"


WEBHOOK_EVENT_CLASSES = {
    cls.CHANNEL: cls
    for cls in (
        BookingWebhookReceived,
        ReservationWebhookReceived,
        PropertyWebhookReceived,
        InventoryWebhookReceived,
        GeneralWebhookReceived,
    )
}
