"""
Innochannel Booking — Model
=============================
A guest booking as exposed by the Innochannel API.

Status transitions to 'confirmed' and 'cancelled' fire their
own events in addition to 'booking.updated'.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from innochannel.core.events.event import Event
from innochannel.core.time.temporal import nights_between, parse_date, parse_datetime
from innochannel.core.tracking.observable import Attribute, ObservableEntity
from innochannel.engines.booking.events import (
    BookingCancelled,
    BookingConfirmed,
    BookingCreated,
    BookingDeleted,
    BookingUpdated,
)

STATUS_PENDING   = "pending"
STATUS_CONFIRMED = "confirmed"
STATUS_CANCELLED = "cancelled"


class Booking(ObservableEntity):
    DOMAIN = "booking"

    id                  = Attribute()
    property_id         = Attribute()
    room_id             = Attribute()
    rate_plan_id        = Attribute()
    guest_name          = Attribute()
    guest_email         = Attribute()
    guest_phone         = Attribute()
    check_in            = Attribute(parser=parse_date)
    check_out           = Attribute(parser=parse_date)
    adults              = Attribute(1, parser=int)
    children            = Attribute(0, parser=int)
    total_amount        = Attribute(parser=float)
    currency            = Attribute()
    status              = Attribute(STATUS_PENDING)
    source              = Attribute()
    confirmation_code   = Attribute()
    special_requests    = Attribute()
    cancellation_reason = Attribute()
    created_at          = Attribute(parser=parse_datetime)
    updated_at          = Attribute(parser=parse_datetime)

    # ── setters ───────────────────────────────────────────────

    def set_guest_name(self, guest_name: Optional[str]) -> "Booking":
        self._set_attribute("guest_name", guest_name)
        return self

    def set_guest_email(self, guest_email: Optional[str]) -> "Booking":
        self._set_attribute("guest_email", guest_email)
        return self

    def set_guest_phone(self, guest_phone: Optional[str]) -> "Booking":
        self._set_attribute("guest_phone", guest_phone)
        return self

    def set_room_id(self, room_id: Any) -> "Booking":
        self._set_attribute("room_id", room_id)
        return self

    def set_rate_plan_id(self, rate_plan_id: Any) -> "Booking":
        self._set_attribute("rate_plan_id", rate_plan_id)
        return self

    def set_check_in(self, check_in) -> "Booking":
        self._set_attribute("check_in", check_in)
        return self

    def set_check_out(self, check_out) -> "Booking":
        self._set_attribute("check_out", check_out)
        return self

    def set_adults(self, adults: int) -> "Booking":
        self._set_attribute("adults", adults)
        return self

    def set_children(self, children: int) -> "Booking":
        self._set_attribute("children", children)
        return self

    def set_total_amount(self, total_amount: Optional[float]) -> "Booking":
        self._set_attribute("total_amount", total_amount)
        return self

    def set_currency(self, currency: Optional[str]) -> "Booking":
        self._set_attribute("currency", currency)
        return self

    def set_special_requests(self, special_requests: Optional[str]) -> "Booking":
        self._set_attribute("special_requests", special_requests)
        return self

    def set_status(self, status: str) -> "Booking":
        self._set_attribute("status", status)
        return self

    # ── lifecycle ─────────────────────────────────────────────

    def confirm(self) -> "Booking":
        return self.set_status(STATUS_CONFIRMED)

    def cancel(self, reason: Optional[str] = None) -> "Booking":
        if reason is not None:
            self._set_attribute("cancellation_reason", reason)
        return self.set_status(STATUS_CANCELLED)

    def is_confirmed(self) -> bool:
        return self.status == STATUS_CONFIRMED

    def is_cancelled(self) -> bool:
        return self.status == STATUS_CANCELLED

    def get_nights(self) -> int:
        return nights_between(self.check_in, self.check_out)

    # ── event hooks ───────────────────────────────────────────

    def _created_event(self) -> Event:
        return BookingCreated(self)

    def _updated_event(self, original_data, changed_fields) -> Event:
        return BookingUpdated(self, original_data, changed_fields)

    def _deleted_event(self) -> Event:
        return BookingDeleted(self)

    def _specific_events(self, name: str, old: Any, new: Any) -> Iterable[Event]:
        if name != "status":
            return ()
        if new == STATUS_CONFIRMED:
            return (BookingConfirmed(self),)
        if new == STATUS_CANCELLED:
            return (BookingCancelled(self, self.cancellation_reason),)
        return ()
