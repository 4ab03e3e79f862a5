"""
Innochannel Property — Event Types
====================================
Events fired by the Property model.

Toggling is_active fires activated/deactivated AND the
generic property.status_changed carrying both states.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional

from innochannel.core.events.event import Event
from innochannel.core.tracking.observable import serialize_value

if TYPE_CHECKING:
    from innochannel.engines.property.models import Property

PROPERTY_CREATED                 = "property.created"
PROPERTY_UPDATED                 = "property.updated"
PROPERTY_ACTIVATED               = "property.activated"
PROPERTY_DEACTIVATED             = "property.deactivated"
PROPERTY_STATUS_CHANGED          = "property.status_changed"
PROPERTY_DELETED                 = "property.deleted"
PROPERTY_PMS_CREDENTIALS_UPDATED = "property.pms_credentials_updated"

PROPERTY_EVENT_TYPES = (
    PROPERTY_CREATED, PROPERTY_UPDATED, PROPERTY_ACTIVATED,
    PROPERTY_DEACTIVATED, PROPERTY_STATUS_CHANGED, PROPERTY_DELETED,
    PROPERTY_PMS_CREDENTIALS_UPDATED,
)


class PropertyEvent(Event):
    EVENT_NAME: ClassVar[str] = ""

    def __init__(
        self, prop: "Property", additional_data: Optional[Dict[str, Any]] = None
    ) -> None:
        data = {
            "property":      prop,
            "property_id":   prop.id,
            "property_name": prop.name,
            "pms_type":      prop.pms_type,
            "is_active":     prop.is_active,
        }
        data.update(additional_data or {})
        super().__init__(name=self.EVENT_NAME, payload=data)

    def get_property(self) -> "Property":
        return self.payload["property"]


class PropertyCreated(PropertyEvent):
    EVENT_NAME = PROPERTY_CREATED


class PropertyUpdated(PropertyEvent):
    EVENT_NAME = PROPERTY_UPDATED

    def __init__(
        self,
        prop: "Property",
        original_data: Optional[Dict[str, Any]] = None,
        changed_fields: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(prop, {
            "original_data":  dict(original_data or {}),
            "changed_fields": dict(changed_fields or {}),
        })

    def get_original_data(self) -> Dict[str, Any]:
        return self.get_value("original_data")

    def get_changed_fields(self) -> Dict[str, Any]:
        return self.get_value("changed_fields")


class PropertyActivated(PropertyEvent):
    EVENT_NAME = PROPERTY_ACTIVATED


class PropertyDeactivated(PropertyEvent):
    EVENT_NAME = PROPERTY_DEACTIVATED


class PropertyStatusChanged(PropertyEvent):
    EVENT_NAME = PROPERTY_STATUS_CHANGED

    def __init__(self, prop: "Property", was_active: bool) -> None:
        super().__init__(prop, {
            "old_status": "active" if was_active else "inactive",
            "new_status": "active" if prop.is_active else "inactive",
        })


class PropertyDeleted(PropertyEvent):
    EVENT_NAME = PROPERTY_DELETED


class PropertyPmsCredentialsUpdated(PropertyEvent):
    EVENT_NAME = PROPERTY_PMS_CREDENTIALS_UPDATED

    def __init__(
        self, prop: "Property", old_credentials: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(prop, {
            "old_credentials": serialize_value(old_credentials or {}),
            "new_credentials": serialize_value(prop.pms_credentials),
        })

    def get_old_credentials(self) -> Dict[str, Any]:
        return self.get_value("old_credentials")
