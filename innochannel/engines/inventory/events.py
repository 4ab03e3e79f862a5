"""
Innochannel Inventory — Event Types
=====================================
Inventory (availability/rates per room and date) has no model
of its own; callers build InventoryUpdated from the record and
the change set produced by dirty tracking or the API.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from innochannel.core.events.event import Event
from innochannel.core.tracking.changes import ABSENT

INVENTORY_UPDATED = "inventory.updated"


class InventoryUpdated(Event):
    EVENT_NAME = INVENTORY_UPDATED

    def __init__(
        self,
        inventory: Mapping[str, Any],
        changes: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ) -> None:
        super().__init__(name=self.EVENT_NAME, payload={
            "inventory": dict(inventory),
            "changes":   {k: dict(v) for k, v in (changes or {}).items()},
        })

    def get_inventory(self) -> Dict[str, Any]:
        return self.get_value("inventory")

    def get_changes(self) -> Dict[str, Dict[str, Any]]:
        return self.get_value("changes")

    def has_changed(self, field: str) -> bool:
        return field in self.payload["changes"]

    def get_old_value(self, field: str) -> Any:
        old = self.payload["changes"].get(field, {}).get("old")
        return None if old is ABSENT else old

    def get_new_value(self, field: str) -> Any:
        return self.payload["changes"].get(field, {}).get("new")
