"""
Tests for engines.property, engines.room and engines.rate_plan —
field-specific events beyond '<domain>.updated'.
"""

import pytest

from innochannel.engines.property.events import (
    PROPERTY_ACTIVATED,
    PROPERTY_CREATED,
    PROPERTY_DEACTIVATED,
    PROPERTY_EVENT_TYPES,
    PROPERTY_PMS_CREDENTIALS_UPDATED,
    PROPERTY_STATUS_CHANGED,
    PROPERTY_UPDATED,
)
from innochannel.engines.property.models import Property
from innochannel.engines.rate_plan.events import (
    RATE_PLAN_ACTIVATED,
    RATE_PLAN_CANCELLATION_POLICY_UPDATED,
    RATE_PLAN_DEACTIVATED,
    RATE_PLAN_EVENT_TYPES,
    RATE_PLAN_RESTRICTIONS_UPDATED,
    RATE_PLAN_UPDATED,
)
from innochannel.engines.rate_plan.models import RatePlan
from innochannel.engines.room.events import (
    ROOM_ACTIVATED,
    ROOM_AMENITIES_UPDATED,
    ROOM_BED_TYPES_UPDATED,
    ROOM_CAPACITY_UPDATED,
    ROOM_DEACTIVATED,
    ROOM_EVENT_TYPES,
    ROOM_UPDATED,
)
from innochannel.engines.room.models import Room


# ══════════════════════════════════════════════════════════════
# PROPERTY
# ══════════════════════════════════════════════════════════════


@pytest.fixture
def property_events(record_all):
    return record_all(*PROPERTY_EVENT_TYPES)


def make_property(**overrides):
    data = {
        "id": 10,
        "name": "Hotel Atlantico",
        "pms_type": "opera",
        "pms_credentials": {"user": "api", "token": "old"},
    }
    data.update(overrides)
    return Property(data)


class TestProperty:
    def test_created_payload(self, property_events):
        prop = make_property()
        event = property_events.events[0]
        assert event.name == PROPERTY_CREATED
        assert event.get_property() is prop
        assert event.get_data()["property_name"] == "Hotel Atlantico"
        assert event.get_data()["is_active"] is True

    def test_deactivate(self, property_events):
        make_property().deactivate()
        assert property_events.names == [
            PROPERTY_CREATED, PROPERTY_UPDATED,
            PROPERTY_DEACTIVATED, PROPERTY_STATUS_CHANGED,
        ]
        status = property_events.events[-1].get_data()
        assert status["old_status"] == "active"
        assert status["new_status"] == "inactive"

    def test_activate(self, property_events):
        make_property(is_active=False).activate()
        assert property_events.names[-2:] == [PROPERTY_ACTIVATED, PROPERTY_STATUS_CHANGED]

    def test_activate_when_active_fires_nothing(self, property_events):
        make_property().activate()
        assert property_events.names == [PROPERTY_CREATED]

    def test_credentials_updated(self, property_events):
        make_property().set_pms_credentials({"user": "api", "token": "new"})
        event = property_events.events[-1]
        assert event.name == PROPERTY_PMS_CREDENTIALS_UPDATED
        assert event.get_old_credentials() == {"user": "api", "token": "old"}
        assert event.get_data()["new_credentials"]["token"] == "new"

    def test_set_policy(self, property_events):
        prop = make_property()
        prop.set_policy("check_in_time", "14:00")
        assert prop.get_policy("check_in_time") == "14:00"
        assert prop.get_policy("pets", "no") == "no"
        assert property_events.events[-1].get_changed_fields() == {
            "policies": {"check_in_time": "14:00"},
        }


# ══════════════════════════════════════════════════════════════
# ROOM
# ══════════════════════════════════════════════════════════════


@pytest.fixture
def room_events(record_all):
    return record_all(*ROOM_EVENT_TYPES)


def make_room(**overrides):
    data = {
        "id": 20,
        "property_id": 10,
        "name": "Deluxe",
        "room_type": "double",
        "max_occupancy": 3,
        "max_adults": 2,
        "max_children": 1,
        "amenities": ["wifi"],
        "bed_types": ["queen"],
    }
    data.update(overrides)
    return Room(data)


class TestRoom:
    def test_can_accommodate(self):
        room = make_room()
        assert room.can_accommodate(2, 1)
        assert not room.can_accommodate(3)
        assert not room.can_accommodate(1, 2)

    def test_capacity_updated(self, room_events):
        make_room().set_max_occupancy(4)
        event = room_events.events[-1]
        assert event.name == ROOM_CAPACITY_UPDATED
        data = event.get_data()
        assert data["old_max_occupancy"] == 3
        assert data["new_max_occupancy"] == 4
        assert data["old_max_adults"] == data["new_max_adults"] == 2

    def test_amenities_updated(self, room_events):
        make_room().set_amenities(["wifi", "minibar"])
        event = room_events.events[-1]
        assert event.name == ROOM_AMENITIES_UPDATED
        assert event.get_old_amenities() == ["wifi"]

    def test_bed_types_updated(self, room_events):
        make_room().set_bed_types(["twin", "twin"])
        event = room_events.events[-1]
        assert event.name == ROOM_BED_TYPES_UPDATED
        assert event.get_old_bed_types() == ["queen"]

    def test_deactivate_then_activate(self, room_events):
        room = make_room()
        room.deactivate()
        room.activate()
        assert [n for n in room_events.names if n != ROOM_UPDATED][1:] == [
            ROOM_DEACTIVATED, ROOM_ACTIVATED,
        ]

    def test_set_size_with_unit(self, room_events):
        room = make_room().set_size(32, "sqft")
        assert room.size == 32.0
        assert room.size_unit == "sqft"
        assert room_events.names.count(ROOM_UPDATED) == 2


# ══════════════════════════════════════════════════════════════
# RATE PLAN
# ══════════════════════════════════════════════════════════════


@pytest.fixture
def rate_plan_events(record_all):
    return record_all(*RATE_PLAN_EVENT_TYPES)


def make_rate_plan(**overrides):
    data = {"id": 30, "property_id": 10, "name": "Flexible"}
    data.update(overrides)
    return RatePlan(data)


class TestRatePlan:
    def test_defaults(self):
        plan = make_rate_plan()
        assert plan.currency == "BRL"
        assert plan.rate_type == "per_night"
        assert plan.is_refundable is True

    def test_min_stay_fires_restrictions_updated(self, rate_plan_events):
        plan = make_rate_plan().set_min_stay(2)
        assert rate_plan_events.names[-2:] == [RATE_PLAN_UPDATED, RATE_PLAN_RESTRICTIONS_UPDATED]
        assert rate_plan_events.events[-1].get_old_restrictions() == {}
        assert plan.get_restriction("min_stay") == 2
        assert plan.has_restriction("min_stay")
        assert not plan.has_restriction("max_stay")

    def test_advance_booking_restrictions(self):
        plan = make_rate_plan().set_min_advance_booking(1).set_max_advance_booking(90)
        assert plan.restrictions == {"min_advance_booking": 1, "max_advance_booking": 90}

    def test_cancellation_policy(self, rate_plan_events):
        make_rate_plan().set_cancellation_policy({"free_until_days": 3})
        event = rate_plan_events.events[-1]
        assert event.name == RATE_PLAN_CANCELLATION_POLICY_UPDATED
        assert event.get_data()["new_cancellation_policy"] == {"free_until_days": 3}

    def test_toggle_active(self, rate_plan_events):
        plan = make_rate_plan()
        plan.deactivate()
        plan.activate()
        assert RATE_PLAN_DEACTIVATED in rate_plan_events.names
        assert rate_plan_events.names[-1] == RATE_PLAN_ACTIVATED

    def test_allowed_days(self):
        plan = make_rate_plan(restrictions={"allowed_checkin_days": ["Friday", "Saturday"]})
        assert plan.allows_checkin_on("friday")
        assert not plan.allows_checkin_on("monday")
        assert plan.allows_checkout_on("monday")
