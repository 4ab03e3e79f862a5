"""
Innochannel Events — Event Value
==================================
A named, timestamped payload broadcast to listeners.

Events are immutable once built: the payload is copied at
construction and frozen all the way down (mappings become
read-only views, lists become tuples), so no listener can alter
what the next listener sees. get_data() hands out a plain,
mutable copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping

from innochannel.core.time.clock import now_utc


def freeze_value(value: Any) -> Any:
    """Read-only copy of nested mappings and lists; other values as-is."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze_value(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(v) for v in value)
    return value


def thaw_value(value: Any) -> Any:
    """Plain dict/list copy of a frozen value."""
    if isinstance(value, Mapping):
        return {k: thaw_value(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw_value(v) for v in value]
    return value


@dataclass(frozen=True, eq=False)
class Event:
    """
    Base event type.

    Fields:
        name:      opaque event name, by convention '<domain>.<verb>'
        payload:   event data (read-only view over a private copy)
        timestamp: UTC instant the event was built
    """

    name: str
    payload: Mapping[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=now_utc)

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", freeze_value(self.payload))

    def get_name(self) -> str:
        return self.name

    def get_data(self) -> Dict[str, Any]:
        """Return the payload as a plain dict (a fresh copy)."""
        return thaw_value(self.payload)

    def get_value(self, key: str, default: Any = None) -> Any:
        """Mutable copy of one payload entry."""
        return thaw_value(self.payload.get(key, default))

    def get_timestamp(self) -> datetime:
        return self.timestamp

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_name": self.name,
            "timestamp": self.timestamp.isoformat(),
            "data": thaw_value(self.payload),
        }
