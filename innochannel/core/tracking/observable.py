"""
Innochannel Tracking — Observable Entity
==========================================
Base for domain models that announce their own lifecycle.

A model HOLDS a ChangeTracker (dirty tracking) and an
EventEmitter (per-instance gate) and delegates to them.
Concrete models declare their fields as Attribute descriptors
and decide which specific events a field change maps to.

Lifecycle:
- construction with data → '<domain>.created'
- any changing mutator   → '<domain>.updated' + model-specific events
- delete()               → '<domain>.deleted'

Mutations always take effect; suppression only silences events.
"""

from __future__ import annotations

import copy
from datetime import date, datetime
from typing import (
    Any, Callable, ClassVar, Dict, Iterable, Mapping, Optional, Tuple,
)

from innochannel.core.events.event import Event
from innochannel.core.events.manager import EventManager
from innochannel.core.tracking.changes import ChangeTracker
from innochannel.core.tracking.emitter import EventEmitter


def serialize_value(value: Any) -> Any:
    """Plain, comparable form of an attribute value."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


class Attribute:
    """
    Read-only view onto one entry of an entity's attribute map.

    Writes go through the model's set_* methods so that every
    change passes the event plumbing.
    """

    def __init__(
        self,
        default: Any = None,
        *,
        parser: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        self.default = default
        self.parser = parser
        self.name = ""

    def __set_name__(self, owner, name: str) -> None:
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance._attributes[self.name]

    def __set__(self, instance, value) -> None:
        raise AttributeError(
            f"'{self.name}' is read-only; use set_{self.name}()."
        )

    def parse(self, value: Any) -> Any:
        if value is None or self.parser is None:
            return value
        return self.parser(value)

    def initial(self) -> Any:
        return copy.deepcopy(self.default)


class ObservableEntity:
    """Dirty tracking and event emission for a domain model."""

    DOMAIN: ClassVar[str] = "entity"
    _attribute_names: ClassVar[Tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        names = []
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Attribute) and name not in names:
                    names.append(name)
        cls._attribute_names = tuple(names)

    def __init__(
        self,
        data: Optional[Mapping[str, Any]] = None,
        *,
        event_manager: Optional[EventManager] = None,
    ) -> None:
        self._attributes: Dict[str, Any] = {}
        self._deleted = False
        self._emitter = EventEmitter(event_manager)
        self._tracker = ChangeTracker(self.to_dict)

        for name in self._attribute_names:
            self._attributes[name] = self._attribute(name).initial()
        if data:
            self._assign(data)

        self.initialize_events()
        if data:
            self.fire_event(self._created_event())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], **kwargs):
        return cls(data, **kwargs)

    @classmethod
    def _attribute(cls, name: str) -> Attribute:
        return getattr(cls, name)

    def _assign(self, data: Mapping[str, Any]) -> None:
        # All values parse before any is stored; a bad field changes nothing.
        parsed = {
            name: self._attribute(name).parse(data[name])
            for name in self._attribute_names
            if name in data
        }
        self._attributes.update(parsed)

    # ── serialization ─────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        return {
            name: serialize_value(self._attributes[name])
            for name in self._attribute_names
        }

    def __repr__(self) -> str:
        ident = self._attributes.get("id")
        return f"{type(self).__name__}(id={ident!r})"

    # ── event plumbing ────────────────────────────────────────

    def initialize_events(self) -> None:
        """Snapshot the freshly populated state as clean."""
        self._tracker.sync()

    def fire_event(self, event: Event) -> bool:
        return self._emitter.fire(event)

    def enable_events(self):
        self._emitter.enable()
        return self

    def disable_events(self):
        self._emitter.disable()
        return self

    def events_are_enabled(self) -> bool:
        return self._emitter.enabled

    def without_events(self, callback: Callable[..., Any], *args, **kwargs) -> Any:
        """Run callback with this instance's events disabled."""
        return self._emitter.without_events(callback, *args, **kwargs)

    # ── dirty tracking ────────────────────────────────────────

    def is_dirty(self) -> bool:
        return self._tracker.is_dirty()

    def get_changes(self) -> Dict[str, Dict[str, Any]]:
        return self._tracker.get_changes()

    def get_original_attributes(self) -> Dict[str, Any]:
        return self._tracker.original

    def sync_original_attributes(self) -> None:
        """Mark the current state clean, e.g. after persisting."""
        self._tracker.sync()

    # ── mutation ──────────────────────────────────────────────

    def _set_attribute(self, name: str, value: Any) -> bool:
        """Store a value; fire update events if it changed."""
        value = self._attribute(name).parse(value)
        old = self._attributes[name]
        if old == value:
            return False

        self._attributes[name] = value
        self.fire_event(self._updated_event(
            {name: serialize_value(old)}, {name: serialize_value(value)},
        ))
        for event in self._specific_events(name, old, value):
            self.fire_event(event)
        return True

    def fill(self, data: Mapping[str, Any]):
        """
        Update several attributes at once.

        Fires a single '<domain>.updated' carrying the full state
        before and the changed fields after, then the specific
        events of each changed field.
        """
        before_values = dict(self._attributes)
        before = self.to_dict()
        self._assign(data)
        after = self.to_dict()
        if before == after:
            return self

        changed = {k: v for k, v in after.items() if before.get(k) != v}
        self.fire_event(self._updated_event(before, changed))
        for name in self._attribute_names:
            old, new = before_values[name], self._attributes[name]
            if old != new:
                for event in self._specific_events(name, old, new):
                    self.fire_event(event)
        return self

    def delete(self) -> None:
        self._deleted = True
        self.fire_event(self._deleted_event())

    def is_deleted(self) -> bool:
        return self._deleted

    # ── hooks for concrete models ─────────────────────────────

    def _created_event(self) -> Event:
        return Event(f"{self.DOMAIN}.created", {self.DOMAIN: self})

    def _updated_event(
        self, original_data: Dict[str, Any], changed_fields: Dict[str, Any]
    ) -> Event:
        return Event(f"{self.DOMAIN}.updated", {
            self.DOMAIN: self,
            "original_data": original_data,
            "changed_fields": changed_fields,
        })

    def _deleted_event(self) -> Event:
        return Event(f"{self.DOMAIN}.deleted", {self.DOMAIN: self})

    def _specific_events(self, name: str, old: Any, new: Any) -> Iterable[Event]:
        """Events a change of one field maps to, beyond '.updated'."""
        return ()
