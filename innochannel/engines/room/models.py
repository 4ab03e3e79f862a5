"""
Innochannel Room — Model
==========================
A room type offered by a property.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from innochannel.core.events.event import Event
from innochannel.core.time.temporal import parse_datetime
from innochannel.core.tracking.observable import Attribute, ObservableEntity
from innochannel.engines.room.events import (
    RoomActivated,
    RoomAmenitiesUpdated,
    RoomBedTypesUpdated,
    RoomCapacityUpdated,
    RoomCreated,
    RoomDeactivated,
    RoomDeleted,
    RoomUpdated,
)

CAPACITY_FIELDS = ("max_occupancy", "max_adults", "max_children")


class Room(ObservableEntity):
    DOMAIN = "room"

    id            = Attribute()
    property_id   = Attribute()
    name          = Attribute("")
    room_type     = Attribute("")
    description   = Attribute()
    max_occupancy = Attribute(1, parser=int)
    max_adults    = Attribute(1, parser=int)
    max_children  = Attribute(0, parser=int)
    size          = Attribute(parser=float)
    size_unit     = Attribute("m2")
    amenities     = Attribute([], parser=list)
    bed_types     = Attribute([], parser=list)
    view_type     = Attribute()
    is_active     = Attribute(True, parser=bool)
    created_at    = Attribute(parser=parse_datetime)
    updated_at    = Attribute(parser=parse_datetime)

    def set_name(self, name: str) -> "Room":
        self._set_attribute("name", name)
        return self

    def set_room_type(self, room_type: str) -> "Room":
        self._set_attribute("room_type", room_type)
        return self

    def set_description(self, description: Optional[str]) -> "Room":
        self._set_attribute("description", description)
        return self

    def set_max_occupancy(self, max_occupancy: int) -> "Room":
        self._set_attribute("max_occupancy", max_occupancy)
        return self

    def set_max_adults(self, max_adults: int) -> "Room":
        self._set_attribute("max_adults", max_adults)
        return self

    def set_max_children(self, max_children: int) -> "Room":
        self._set_attribute("max_children", max_children)
        return self

    def set_size(self, size: Optional[float], unit: Optional[str] = None) -> "Room":
        self._set_attribute("size", size)
        if unit is not None:
            self._set_attribute("size_unit", unit)
        return self

    def set_amenities(self, amenities: List[str]) -> "Room":
        self._set_attribute("amenities", amenities)
        return self

    def set_bed_types(self, bed_types: List[str]) -> "Room":
        self._set_attribute("bed_types", bed_types)
        return self

    def set_view_type(self, view_type: Optional[str]) -> "Room":
        self._set_attribute("view_type", view_type)
        return self

    def set_is_active(self, is_active: bool) -> "Room":
        self._set_attribute("is_active", is_active)
        return self

    def activate(self) -> "Room":
        return self.set_is_active(True)

    def deactivate(self) -> "Room":
        return self.set_is_active(False)

    def can_accommodate(self, adults: int, children: int = 0) -> bool:
        return (
            adults <= self.max_adults
            and children <= self.max_children
            and adults + children <= self.max_occupancy
        )

    # ── event hooks ───────────────────────────────────────────

    def _created_event(self) -> Event:
        return RoomCreated(self)

    def _updated_event(self, original_data, changed_fields) -> Event:
        return RoomUpdated(self, original_data, changed_fields)

    def _deleted_event(self) -> Event:
        return RoomDeleted(self)

    def _specific_events(self, name: str, old: Any, new: Any) -> Iterable[Event]:
        if name == "is_active":
            return (RoomActivated(self) if new else RoomDeactivated(self),)
        if name == "amenities":
            return (RoomAmenitiesUpdated(self, old),)
        if name == "bed_types":
            return (RoomBedTypesUpdated(self, old),)
        if name in CAPACITY_FIELDS:
            old_capacity: Dict[str, int] = {f: getattr(self, f) for f in CAPACITY_FIELDS}
            old_capacity[name] = old
            return (RoomCapacityUpdated(self, old_capacity),)
        return ()
