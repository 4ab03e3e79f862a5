"""
Innochannel Rate Plan — Model
===============================
Pricing plan of a property, with stay restrictions and a
cancellation policy.

Restriction keys understood here:
    min_stay, max_stay, min_advance_booking, max_advance_booking,
    allowed_checkin_days, allowed_checkout_days
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from innochannel.core.events.event import Event
from innochannel.core.time.temporal import parse_datetime
from innochannel.core.tracking.observable import Attribute, ObservableEntity
from innochannel.engines.rate_plan.events import (
    RatePlanActivated,
    RatePlanCancellationPolicyUpdated,
    RatePlanCreated,
    RatePlanDeactivated,
    RatePlanDeleted,
    RatePlanRestrictionsUpdated,
    RatePlanUpdated,
)


class RatePlan(ObservableEntity):
    DOMAIN = "rate_plan"

    id                  = Attribute()
    property_id         = Attribute()
    name                = Attribute("")
    description         = Attribute()
    currency            = Attribute("BRL")
    rate_type           = Attribute("per_night")
    restrictions        = Attribute({}, parser=dict)
    cancellation_policy = Attribute({}, parser=dict)
    is_refundable       = Attribute(True, parser=bool)
    is_active           = Attribute(True, parser=bool)
    created_at          = Attribute(parser=parse_datetime)
    updated_at          = Attribute(parser=parse_datetime)

    def set_name(self, name: str) -> "RatePlan":
        self._set_attribute("name", name)
        return self

    def set_description(self, description: Optional[str]) -> "RatePlan":
        self._set_attribute("description", description)
        return self

    def set_currency(self, currency: str) -> "RatePlan":
        self._set_attribute("currency", currency)
        return self

    def set_rate_type(self, rate_type: str) -> "RatePlan":
        self._set_attribute("rate_type", rate_type)
        return self

    def set_is_refundable(self, is_refundable: bool) -> "RatePlan":
        self._set_attribute("is_refundable", is_refundable)
        return self

    def set_is_active(self, is_active: bool) -> "RatePlan":
        self._set_attribute("is_active", is_active)
        return self

    def activate(self) -> "RatePlan":
        return self.set_is_active(True)

    def deactivate(self) -> "RatePlan":
        return self.set_is_active(False)

    def set_cancellation_policy(self, policy: Dict[str, Any]) -> "RatePlan":
        self._set_attribute("cancellation_policy", policy)
        return self

    # ── restrictions ──────────────────────────────────────────

    def set_restrictions(self, restrictions: Dict[str, Any]) -> "RatePlan":
        self._set_attribute("restrictions", restrictions)
        return self

    def get_restriction(self, key: str) -> Any:
        return self.restrictions.get(key)

    def has_restriction(self, key: str) -> bool:
        return self.restrictions.get(key) is not None

    def set_restriction(self, key: str, value: Any) -> "RatePlan":
        restrictions = dict(self.restrictions)
        restrictions[key] = value
        return self.set_restrictions(restrictions)

    def set_min_stay(self, nights: int) -> "RatePlan":
        return self.set_restriction("min_stay", nights)

    def set_max_stay(self, nights: int) -> "RatePlan":
        return self.set_restriction("max_stay", nights)

    def set_min_advance_booking(self, days: int) -> "RatePlan":
        return self.set_restriction("min_advance_booking", days)

    def set_max_advance_booking(self, days: int) -> "RatePlan":
        return self.set_restriction("max_advance_booking", days)

    def allows_checkin_on(self, day_of_week: str) -> bool:
        return self._allows_day("allowed_checkin_days", day_of_week)

    def allows_checkout_on(self, day_of_week: str) -> bool:
        return self._allows_day("allowed_checkout_days", day_of_week)

    def _allows_day(self, key: str, day_of_week: str) -> bool:
        allowed = self.get_restriction(key)
        if not isinstance(allowed, (list, tuple)):
            return True
        return day_of_week.lower() in {d.lower() for d in allowed}

    # ── event hooks ───────────────────────────────────────────

    def _created_event(self) -> Event:
        return RatePlanCreated(self)

    def _updated_event(self, original_data, changed_fields) -> Event:
        return RatePlanUpdated(self, original_data, changed_fields)

    def _deleted_event(self) -> Event:
        return RatePlanDeleted(self)

    def _specific_events(self, name: str, old: Any, new: Any) -> Iterable[Event]:
        if name == "is_active":
            return (RatePlanActivated(self) if new else RatePlanDeactivated(self),)
        if name == "restrictions":
            return (RatePlanRestrictionsUpdated(self, old),)
        if name == "cancellation_policy":
            return (RatePlanCancellationPolicyUpdated(self, old),)
        return ()
