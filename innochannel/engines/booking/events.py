"""
Innochannel Booking — Event Types
===================================
Lifecycle events fired by the Booking model.

Every booking event carries the booking itself plus its
identifying fields, so listeners rarely need to reach back
into the model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional

from innochannel.core.events.event import Event

if TYPE_CHECKING:
    from innochannel.engines.booking.models import Booking

BOOKING_CREATED   = "booking.created"
BOOKING_UPDATED   = "booking.updated"
BOOKING_CONFIRMED = "booking.confirmed"
BOOKING_CANCELLED = "booking.cancelled"
BOOKING_DELETED   = "booking.deleted"

BOOKING_EVENT_TYPES = (
    BOOKING_CREATED, BOOKING_UPDATED, BOOKING_CONFIRMED,
    BOOKING_CANCELLED, BOOKING_DELETED,
)


class BookingEvent(Event):
    EVENT_NAME: ClassVar[str] = ""

    def __init__(
        self, booking: "Booking", additional_data: Optional[Dict[str, Any]] = None
    ) -> None:
        data = {
            "booking":     booking,
            "booking_id":  booking.id,
            "property_id": booking.property_id,
            "room_id":     booking.room_id,
            "status":      booking.status,
        }
        data.update(additional_data or {})
        super().__init__(name=self.EVENT_NAME, payload=data)

    def get_booking(self) -> "Booking":
        return self.payload["booking"]


class BookingCreated(BookingEvent):
    EVENT_NAME = BOOKING_CREATED


class BookingUpdated(BookingEvent):
    EVENT_NAME = BOOKING_UPDATED

    def __init__(
        self,
        booking: "Booking",
        original_data: Optional[Dict[str, Any]] = None,
        changed_fields: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(booking, {
            "original_data":  dict(original_data or {}),
            "changed_fields": dict(changed_fields or {}),
        })

    def get_original_data(self) -> Dict[str, Any]:
        return self.get_value("original_data")

    def get_changed_fields(self) -> Dict[str, Any]:
        return self.get_value("changed_fields")


class BookingConfirmed(BookingEvent):
    EVENT_NAME = BOOKING_CONFIRMED


class BookingCancelled(BookingEvent):
    EVENT_NAME = BOOKING_CANCELLED

    def __init__(self, booking: "Booking", reason: Optional[str] = None) -> None:
        super().__init__(booking, {"cancellation_reason": reason})

    def get_cancellation_reason(self) -> Optional[str]:
        return self.payload["cancellation_reason"]


class BookingDeleted(BookingEvent):
    EVENT_NAME = BOOKING_DELETED
