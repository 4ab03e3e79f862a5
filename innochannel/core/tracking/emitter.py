"""
Innochannel Tracking — Event Emitter
======================================
Per-instance gate in front of the event manager.

An event reaches listeners only if BOTH the instance flag here
and the manager's global flag are enabled.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from innochannel.core.events.event import Event
from innochannel.core.events.manager import EventManager, get_event_manager


class EventEmitter:
    def __init__(self, manager: Optional[EventManager] = None) -> None:
        self._manager = manager
        self.enabled = True

    @property
    def manager(self) -> EventManager:
        """Injected manager, or the shared default at call time."""
        return self._manager if self._manager is not None else get_event_manager()

    def fire(self, event: Event) -> bool:
        if not self.enabled:
            return True
        return self.manager.fire(event)

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    @contextmanager
    def suppressed(self) -> Iterator["EventEmitter"]:
        was_enabled = self.enabled
        self.enabled = False
        try:
            yield self
        finally:
            self.enabled = was_enabled

    def without_events(self, callback: Callable[..., Any], *args, **kwargs) -> Any:
        with self.suppressed():
            return callback(*args, **kwargs)
