"""
Innochannel Room — Event Types
================================
Events fired by the Room model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Dict, List, Optional

from innochannel.core.events.event import Event
from innochannel.core.tracking.observable import serialize_value

if TYPE_CHECKING:
    from innochannel.engines.room.models import Room

ROOM_CREATED           = "room.created"
ROOM_UPDATED           = "room.updated"
ROOM_ACTIVATED         = "room.activated"
ROOM_DEACTIVATED       = "room.deactivated"
ROOM_DELETED           = "room.deleted"
ROOM_AMENITIES_UPDATED = "room.amenities_updated"
ROOM_BED_TYPES_UPDATED = "room.bed_types_updated"
ROOM_CAPACITY_UPDATED  = "room.capacity_updated"

ROOM_EVENT_TYPES = (
    ROOM_CREATED, ROOM_UPDATED, ROOM_ACTIVATED, ROOM_DEACTIVATED,
    ROOM_DELETED, ROOM_AMENITIES_UPDATED, ROOM_BED_TYPES_UPDATED,
    ROOM_CAPACITY_UPDATED,
)


class RoomEvent(Event):
    EVENT_NAME: ClassVar[str] = ""

    def __init__(
        self, room: "Room", additional_data: Optional[Dict[str, Any]] = None
    ) -> None:
        data = {
            "room":          room,
            "room_id":       room.id,
            "property_id":   room.property_id,
            "room_name":     room.name,
            "room_type":     room.room_type,
            "max_occupancy": room.max_occupancy,
            "max_adults":    room.max_adults,
            "max_children":  room.max_children,
            "is_active":     room.is_active,
        }
        data.update(additional_data or {})
        super().__init__(name=self.EVENT_NAME, payload=data)

    def get_room(self) -> "Room":
        return self.payload["room"]


class RoomCreated(RoomEvent):
    EVENT_NAME = ROOM_CREATED


class RoomUpdated(RoomEvent):
    EVENT_NAME = ROOM_UPDATED

    def __init__(
        self,
        room: "Room",
        original_data: Optional[Dict[str, Any]] = None,
        changed_fields: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(room, {
            "original_data":  dict(original_data or {}),
            "changed_fields": dict(changed_fields or {}),
        })

    def get_original_data(self) -> Dict[str, Any]:
        return self.get_value("original_data")

    def get_changed_fields(self) -> Dict[str, Any]:
        return self.get_value("changed_fields")


class RoomActivated(RoomEvent):
    EVENT_NAME = ROOM_ACTIVATED


class RoomDeactivated(RoomEvent):
    EVENT_NAME = ROOM_DEACTIVATED


class RoomDeleted(RoomEvent):
    EVENT_NAME = ROOM_DELETED


class RoomAmenitiesUpdated(RoomEvent):
    EVENT_NAME = ROOM_AMENITIES_UPDATED

    def __init__(self, room: "Room", old_amenities: Optional[List[str]] = None) -> None:
        super().__init__(room, {
            "old_amenities": serialize_value(old_amenities or []),
            "new_amenities": serialize_value(room.amenities),
        })

    def get_old_amenities(self) -> List[str]:
        return self.get_value("old_amenities")


class RoomBedTypesUpdated(RoomEvent):
    EVENT_NAME = ROOM_BED_TYPES_UPDATED

    def __init__(self, room: "Room", old_bed_types: Optional[List[str]] = None) -> None:
        super().__init__(room, {
            "old_bed_types": serialize_value(old_bed_types or []),
            "new_bed_types": serialize_value(room.bed_types),
        })

    def get_old_bed_types(self) -> List[str]:
        return self.get_value("old_bed_types")


class RoomCapacityUpdated(RoomEvent):
    EVENT_NAME = ROOM_CAPACITY_UPDATED

    def __init__(self, room: "Room", old_capacity: Dict[str, int]) -> None:
        super().__init__(room, {
            "old_max_occupancy": old_capacity["max_occupancy"],
            "old_max_adults":    old_capacity["max_adults"],
            "old_max_children":  old_capacity["max_children"],
            "new_max_occupancy": room.max_occupancy,
            "new_max_adults":    room.max_adults,
            "new_max_children":  room.max_children,
        })
