"""
Innochannel Reservation — Model
=================================
A reservation received from an OTA connection.

Status transitions:
- any → 'confirmed'  fires reservation.confirmed
- any → 'cancelled'  fires reservation.cancelled
Other status values ('new', 'modified', ...) only fire
reservation.updated.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from innochannel.core.events.event import Event
from innochannel.core.time.temporal import nights_between, parse_date, parse_datetime
from innochannel.core.tracking.observable import Attribute, ObservableEntity
from innochannel.engines.reservation.events import (
    ReservationCancelled,
    ReservationConfirmed,
    ReservationCreated,
    ReservationDeleted,
    ReservationUpdated,
)

STATUS_NEW       = "new"
STATUS_CONFIRMED = "confirmed"
STATUS_CANCELLED = "cancelled"


def _as_request_list(value: Any) -> List[str]:
    # The API sends a single free-text request or a list of them.
    if isinstance(value, str):
        return [value]
    return list(value)


class Reservation(ObservableEntity):
    DOMAIN = "reservation"

    id                         = Attribute()
    property_id                = Attribute()
    property_ota_connection_id = Attribute()
    ota_name                   = Attribute()
    ota_reservation_id         = Attribute()
    pms_reservation_id         = Attribute()
    status                     = Attribute(STATUS_NEW)
    payment_status             = Attribute()
    check_in_date              = Attribute(parser=parse_date)
    check_out_date             = Attribute(parser=parse_date)
    nights                     = Attribute(0, parser=int)
    adults                     = Attribute(1, parser=int)
    children                   = Attribute(0, parser=int)
    guest_name                 = Attribute()
    guest_email                = Attribute()
    guest_phone                = Attribute()
    guest_document             = Attribute()
    guest_address              = Attribute()
    special_requests           = Attribute(parser=_as_request_list)
    total_amount               = Attribute(parser=float)
    currency                   = Attribute()
    commission_amount          = Attribute(parser=float)
    cancellation_reason        = Attribute()
    acknowledged_to_ota        = Attribute(False, parser=bool)
    synced_to_pms              = Attribute(False, parser=bool)
    created_at                 = Attribute(parser=parse_datetime)
    updated_at                 = Attribute(parser=parse_datetime)

    # ── setters ───────────────────────────────────────────────

    def set_id(self, reservation_id: Optional[str]) -> "Reservation":
        self._set_attribute("id", reservation_id)
        return self

    def set_property_id(self, property_id: Optional[int]) -> "Reservation":
        self._set_attribute("property_id", property_id)
        return self

    def set_ota_name(self, ota_name: Optional[str]) -> "Reservation":
        self._set_attribute("ota_name", ota_name)
        return self

    def set_ota_reservation_id(self, ota_reservation_id: Optional[str]) -> "Reservation":
        self._set_attribute("ota_reservation_id", ota_reservation_id)
        return self

    def set_pms_reservation_id(self, pms_reservation_id: Optional[str]) -> "Reservation":
        self._set_attribute("pms_reservation_id", pms_reservation_id)
        return self

    def set_status(self, status: str) -> "Reservation":
        self._set_attribute("status", status)
        return self

    def set_check_in_date(self, check_in_date) -> "Reservation":
        self._set_attribute("check_in_date", check_in_date)
        return self

    def set_check_out_date(self, check_out_date) -> "Reservation":
        self._set_attribute("check_out_date", check_out_date)
        return self

    def set_nights(self, nights: int) -> "Reservation":
        self._set_attribute("nights", nights)
        return self

    def set_adults(self, adults: int) -> "Reservation":
        self._set_attribute("adults", adults)
        return self

    def set_children(self, children: int) -> "Reservation":
        self._set_attribute("children", children)
        return self

    def set_guest_name(self, guest_name: Optional[str]) -> "Reservation":
        self._set_attribute("guest_name", guest_name)
        return self

    def set_guest_email(self, guest_email: Optional[str]) -> "Reservation":
        self._set_attribute("guest_email", guest_email)
        return self

    def set_guest_phone(self, guest_phone: Optional[str]) -> "Reservation":
        self._set_attribute("guest_phone", guest_phone)
        return self

    def set_guest_document(self, guest_document: Optional[str]) -> "Reservation":
        self._set_attribute("guest_document", guest_document)
        return self

    def set_guest_address(self, guest_address: Optional[str]) -> "Reservation":
        self._set_attribute("guest_address", guest_address)
        return self

    def set_special_requests(self, special_requests) -> "Reservation":
        self._set_attribute("special_requests", special_requests)
        return self

    def set_total_amount(self, total_amount: Optional[float]) -> "Reservation":
        self._set_attribute("total_amount", total_amount)
        return self

    def set_currency(self, currency: Optional[str]) -> "Reservation":
        self._set_attribute("currency", currency)
        return self

    def set_commission_amount(self, commission_amount: Optional[float]) -> "Reservation":
        self._set_attribute("commission_amount", commission_amount)
        return self

    def set_cancellation_reason(self, reason: Optional[str]) -> "Reservation":
        self._set_attribute("cancellation_reason", reason)
        return self

    # ── lifecycle ─────────────────────────────────────────────

    def confirm(self) -> "Reservation":
        return self.set_status(STATUS_CONFIRMED)

    def cancel(self, reason: Optional[str] = None) -> "Reservation":
        if reason is not None:
            self.set_cancellation_reason(reason)
        return self.set_status(STATUS_CANCELLED)

    def mark_acknowledged(self) -> "Reservation":
        """Record that the OTA was told we received the reservation."""
        self._set_attribute("acknowledged_to_ota", True)
        return self

    def mark_synced_to_pms(self, pms_reservation_id: Optional[str] = None) -> "Reservation":
        if pms_reservation_id is not None:
            self.set_pms_reservation_id(pms_reservation_id)
        self._set_attribute("synced_to_pms", True)
        return self

    def is_confirmed(self) -> bool:
        return self.status == STATUS_CONFIRMED

    def is_cancelled(self) -> bool:
        return self.status == STATUS_CANCELLED

    def get_length_of_stay(self) -> int:
        """Nights from the stored count, else from the stay dates."""
        return self.nights or nights_between(self.check_in_date, self.check_out_date)

    # ── event hooks ───────────────────────────────────────────

    def _created_event(self) -> Event:
        return ReservationCreated(self)

    def _updated_event(self, original_data, changed_fields) -> Event:
        return ReservationUpdated(self, original_data, changed_fields)

    def _deleted_event(self) -> Event:
        return ReservationDeleted(self)

    def _specific_events(self, name: str, old: Any, new: Any) -> Iterable[Event]:
        if name != "status":
            return ()
        if new == STATUS_CONFIRMED:
            return (ReservationConfirmed(self),)
        if new == STATUS_CANCELLED:
            return (ReservationCancelled(self, self.cancellation_reason),)
        return ()
