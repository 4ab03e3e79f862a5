"""
Innochannel Property — Model
==============================
A hotel property connected to Innochannel and its PMS.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from innochannel.core.events.event import Event
from innochannel.core.time.temporal import parse_datetime
from innochannel.core.tracking.observable import Attribute, ObservableEntity
from innochannel.engines.property.events import (
    PropertyActivated,
    PropertyCreated,
    PropertyDeactivated,
    PropertyDeleted,
    PropertyPmsCredentialsUpdated,
    PropertyStatusChanged,
    PropertyUpdated,
)


class Property(ObservableEntity):
    DOMAIN = "property"

    id              = Attribute()
    name            = Attribute("")
    description     = Attribute()
    pms_type        = Attribute("")
    pms_credentials = Attribute({}, parser=dict)
    address         = Attribute()
    city            = Attribute()
    state           = Attribute()
    country         = Attribute()
    postal_code     = Attribute()
    phone           = Attribute()
    email           = Attribute()
    website         = Attribute()
    amenities       = Attribute([], parser=list)
    policies        = Attribute({}, parser=dict)
    is_active       = Attribute(True, parser=bool)
    created_at      = Attribute(parser=parse_datetime)
    updated_at      = Attribute(parser=parse_datetime)

    def set_name(self, name: str) -> "Property":
        self._set_attribute("name", name)
        return self

    def set_description(self, description: Optional[str]) -> "Property":
        self._set_attribute("description", description)
        return self

    def set_pms_type(self, pms_type: str) -> "Property":
        self._set_attribute("pms_type", pms_type)
        return self

    def set_pms_credentials(self, credentials: Dict[str, Any]) -> "Property":
        self._set_attribute("pms_credentials", credentials)
        return self

    def set_address(self, address: Optional[str]) -> "Property":
        self._set_attribute("address", address)
        return self

    def set_city(self, city: Optional[str]) -> "Property":
        self._set_attribute("city", city)
        return self

    def set_country(self, country: Optional[str]) -> "Property":
        self._set_attribute("country", country)
        return self

    def set_email(self, email: Optional[str]) -> "Property":
        self._set_attribute("email", email)
        return self

    def set_phone(self, phone: Optional[str]) -> "Property":
        self._set_attribute("phone", phone)
        return self

    def set_amenities(self, amenities: List[str]) -> "Property":
        self._set_attribute("amenities", amenities)
        return self

    def set_policies(self, policies: Dict[str, Any]) -> "Property":
        self._set_attribute("policies", policies)
        return self

    def set_policy(self, key: str, value: Any) -> "Property":
        policies = dict(self.policies)
        policies[key] = value
        return self.set_policies(policies)

    def get_policy(self, key: str, default: Any = None) -> Any:
        return self.policies.get(key, default)

    def set_is_active(self, is_active: bool) -> "Property":
        self._set_attribute("is_active", is_active)
        return self

    def activate(self) -> "Property":
        return self.set_is_active(True)

    def deactivate(self) -> "Property":
        return self.set_is_active(False)

    # ── event hooks ───────────────────────────────────────────

    def _created_event(self) -> Event:
        return PropertyCreated(self)

    def _updated_event(self, original_data, changed_fields) -> Event:
        return PropertyUpdated(self, original_data, changed_fields)

    def _deleted_event(self) -> Event:
        return PropertyDeleted(self)

    def _specific_events(self, name: str, old: Any, new: Any) -> Iterable[Event]:
        if name == "is_active":
            toggled = PropertyActivated(self) if new else PropertyDeactivated(self)
            return (toggled, PropertyStatusChanged(self, was_active=bool(old)))
        if name == "pms_credentials":
            return (PropertyPmsCredentialsUpdated(self, old),)
        return ()
