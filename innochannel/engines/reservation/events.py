"""
Innochannel Reservation — Event Types
=======================================
Lifecycle events fired by the Reservation model (OTA
reservations flowing between channels and the PMS).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional

from innochannel.core.events.event import Event

if TYPE_CHECKING:
    from innochannel.engines.reservation.models import Reservation

RESERVATION_CREATED   = "reservation.created"
RESERVATION_UPDATED   = "reservation.updated"
RESERVATION_CONFIRMED = "reservation.confirmed"
RESERVATION_CANCELLED = "reservation.cancelled"
RESERVATION_DELETED   = "reservation.deleted"

RESERVATION_EVENT_TYPES = (
    RESERVATION_CREATED, RESERVATION_UPDATED, RESERVATION_CONFIRMED,
    RESERVATION_CANCELLED, RESERVATION_DELETED,
)


class ReservationEvent(Event):
    EVENT_NAME: ClassVar[str] = ""

    def __init__(
        self,
        reservation: "Reservation",
        additional_data: Optional[Dict[str, Any]] = None,
    ) -> None:
        data = {
            "reservation":        reservation,
            "reservation_id":     reservation.id,
            "property_id":        reservation.property_id,
            "ota_name":           reservation.ota_name,
            "ota_reservation_id": reservation.ota_reservation_id,
            "status":             reservation.status,
        }
        data.update(additional_data or {})
        super().__init__(name=self.EVENT_NAME, payload=data)

    def get_reservation(self) -> "Reservation":
        return self.payload["reservation"]


class ReservationCreated(ReservationEvent):
    EVENT_NAME = RESERVATION_CREATED


class ReservationUpdated(ReservationEvent):
    EVENT_NAME = RESERVATION_UPDATED

    def __init__(
        self,
        reservation: "Reservation",
        original_data: Optional[Dict[str, Any]] = None,
        changed_fields: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(reservation, {
            "original_data":  dict(original_data or {}),
            "changed_fields": dict(changed_fields or {}),
        })

    def get_original_data(self) -> Dict[str, Any]:
        return self.get_value("original_data")

    def get_changed_fields(self) -> Dict[str, Any]:
        return self.get_value("changed_fields")


class ReservationConfirmed(ReservationEvent):
    EVENT_NAME = RESERVATION_CONFIRMED


class ReservationCancelled(ReservationEvent):
    EVENT_NAME = RESERVATION_CANCELLED

    def __init__(
        self, reservation: "Reservation", reason: Optional[str] = None
    ) -> None:
        super().__init__(reservation, {"cancellation_reason": reason})

    def get_cancellation_reason(self) -> Optional[str]:
        return self.payload["cancellation_reason"]


class ReservationDeleted(ReservationEvent):
    EVENT_NAME = RESERVATION_DELETED
