"""
Innochannel Rate Plan — Event Types
=====================================
Events fired by the RatePlan model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional

from innochannel.core.events.event import Event
from innochannel.core.tracking.observable import serialize_value

if TYPE_CHECKING:
    from innochannel.engines.rate_plan.models import RatePlan

RATE_PLAN_CREATED                     = "rate_plan.created"
RATE_PLAN_UPDATED                     = "rate_plan.updated"
RATE_PLAN_ACTIVATED                   = "rate_plan.activated"
RATE_PLAN_DEACTIVATED                 = "rate_plan.deactivated"
RATE_PLAN_DELETED                     = "rate_plan.deleted"
RATE_PLAN_RESTRICTIONS_UPDATED        = "rate_plan.restrictions_updated"
RATE_PLAN_CANCELLATION_POLICY_UPDATED = "rate_plan.cancellation_policy_updated"

RATE_PLAN_EVENT_TYPES = (
    RATE_PLAN_CREATED, RATE_PLAN_UPDATED, RATE_PLAN_ACTIVATED,
    RATE_PLAN_DEACTIVATED, RATE_PLAN_DELETED,
    RATE_PLAN_RESTRICTIONS_UPDATED, RATE_PLAN_CANCELLATION_POLICY_UPDATED,
)


class RatePlanEvent(Event):
    EVENT_NAME: ClassVar[str] = ""

    def __init__(
        self, rate_plan: "RatePlan", additional_data: Optional[Dict[str, Any]] = None
    ) -> None:
        data = {
            "rate_plan":      rate_plan,
            "rate_plan_id":   rate_plan.id,
            "property_id":    rate_plan.property_id,
            "rate_plan_name": rate_plan.name,
            "currency":       rate_plan.currency,
            "rate_type":      rate_plan.rate_type,
            "is_active":      rate_plan.is_active,
            "is_refundable":  rate_plan.is_refundable,
        }
        data.update(additional_data or {})
        super().__init__(name=self.EVENT_NAME, payload=data)

    def get_rate_plan(self) -> "RatePlan":
        return self.payload["rate_plan"]


class RatePlanCreated(RatePlanEvent):
    EVENT_NAME = RATE_PLAN_CREATED


class RatePlanUpdated(RatePlanEvent):
    EVENT_NAME = RATE_PLAN_UPDATED

    def __init__(
        self,
        rate_plan: "RatePlan",
        original_data: Optional[Dict[str, Any]] = None,
        changed_fields: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(rate_plan, {
            "original_data":  dict(original_data or {}),
            "changed_fields": dict(changed_fields or {}),
        })

    def get_original_data(self) -> Dict[str, Any]:
        return self.get_value("original_data")

    def get_changed_fields(self) -> Dict[str, Any]:
        return self.get_value("changed_fields")


class RatePlanActivated(RatePlanEvent):
    EVENT_NAME = RATE_PLAN_ACTIVATED


class RatePlanDeactivated(RatePlanEvent):
    EVENT_NAME = RATE_PLAN_DEACTIVATED


class RatePlanDeleted(RatePlanEvent):
    EVENT_NAME = RATE_PLAN_DELETED


class RatePlanRestrictionsUpdated(RatePlanEvent):
    EVENT_NAME = RATE_PLAN_RESTRICTIONS_UPDATED

    def __init__(
        self, rate_plan: "RatePlan", old_restrictions: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(rate_plan, {
            "old_restrictions": serialize_value(old_restrictions or {}),
            "new_restrictions": serialize_value(rate_plan.restrictions),
        })

    def get_old_restrictions(self) -> Dict[str, Any]:
        return self.get_value("old_restrictions")


class RatePlanCancellationPolicyUpdated(RatePlanEvent):
    EVENT_NAME = RATE_PLAN_CANCELLATION_POLICY_UPDATED

    def __init__(
        self, rate_plan: "RatePlan", old_policy: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(rate_plan, {
            "old_cancellation_policy": serialize_value(old_policy or {}),
            "new_cancellation_policy": serialize_value(rate_plan.cancellation_policy),
        })

    def get_old_cancellation_policy(self) -> Dict[str, Any]:
        return self.get_value("old_cancellation_policy")
