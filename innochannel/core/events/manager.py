"""
Innochannel Events — Manager
==============================
Access point wrapping one dispatcher plus a global on/off switch.

The manager is an ordinary object: applications may build and
pass their own. For code that wants "the" manager, a shared
default is created lazily on first access and lives for the
process (get_event_manager / EventManager.get_instance).

Rules:
- fire() is a no-op while disabled (events are dropped, not queued)
- without_events()/suppressed() restore the prior flag on every exit path
- clear_listeners() swaps in a fresh dispatcher; the flag is untouched
- The manager never raises from fire(); failures stay in the dispatcher
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from threading import Lock
from typing import Any, Callable, Iterator, Optional, Tuple

from innochannel.core.events.dispatcher import (
    ErrorSink,
    EventDispatcher,
    Listener,
)
from innochannel.core.events.event import Event

logger = logging.getLogger("innochannel.events")


class EventManager:
    """Coordinates event delivery for models and integrations."""

    def __init__(
        self,
        dispatcher: Optional[EventDispatcher] = None,
        *,
        enabled: bool = True,
        error_sink: Optional[ErrorSink] = None,
    ) -> None:
        if dispatcher is None:
            dispatcher = EventDispatcher(error_sink=error_sink)
        self._dispatcher = dispatcher
        self._error_sink = error_sink or getattr(dispatcher, "error_sink", None)
        self._enabled = enabled

    @classmethod
    def get_instance(cls) -> "EventManager":
        """Return the process-wide default manager."""
        return get_event_manager()

    # ── dispatcher ────────────────────────────────────────────

    def get_dispatcher(self) -> EventDispatcher:
        return self._dispatcher

    def set_dispatcher(self, dispatcher: EventDispatcher) -> None:
        """Swap the dispatcher; clear_listeners() then keeps its sink."""
        self._dispatcher = dispatcher
        self._error_sink = dispatcher.error_sink

    def clear_listeners(self) -> None:
        """Drop every listener by replacing the dispatcher."""
        self._dispatcher = EventDispatcher(error_sink=self._error_sink)
        logger.debug("Event listeners cleared")

    # ── global switch ─────────────────────────────────────────

    def is_enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    @contextmanager
    def suppressed(self) -> Iterator["EventManager"]:
        """Disable events for the duration of the block."""
        was_enabled = self._enabled
        self._enabled = False
        try:
            yield self
        finally:
            self._enabled = was_enabled

    def without_events(self, callback: Callable[..., Any], *args, **kwargs) -> Any:
        """Run callback with events disabled and return its result."""
        with self.suppressed():
            return callback(*args, **kwargs)

    # ── delivery ──────────────────────────────────────────────

    def fire(self, event: Event) -> bool:
        """
        Dispatch the event if events are enabled.

        Returns the dispatcher's continue/halt signal; a dropped
        event reports True since nothing stopped it.
        """
        if not self._enabled:
            logger.debug(f"Events disabled, dropped '{event.name}'")
            return True
        return self._dispatcher.dispatch(event)

    # ── pass-through registration ─────────────────────────────

    def add_listener(
        self, event_name: str, listener: Listener, priority: int = 0
    ) -> None:
        self._dispatcher.add_listener(event_name, listener, priority)

    def remove_listener(self, event_name: str, listener: Listener) -> None:
        self._dispatcher.remove_listener(event_name, listener)

    def has_listeners(self, event_name: str) -> bool:
        return self._dispatcher.has_listeners(event_name)

    def get_listeners(self, event_name: str) -> Tuple[Listener, ...]:
        return self._dispatcher.get_listeners(event_name)


# ══════════════════════════════════════════════════════════════
# DEFAULT MANAGER
# ══════════════════════════════════════════════════════════════

_DEFAULT_LOCK = Lock()
_default_manager: Optional[EventManager] = None


def get_event_manager() -> EventManager:
    """Return the shared manager, creating it on first access."""
    global _default_manager
    with _DEFAULT_LOCK:
        if _default_manager is None:
            _default_manager = EventManager()
        return _default_manager


def set_event_manager(manager: EventManager) -> None:
    """Install a manager as the shared default."""
    global _default_manager
    with _DEFAULT_LOCK:
        _default_manager = manager


def reset_event_manager() -> None:
    """Forget the shared manager; the next access builds a fresh one."""
    global _default_manager
    with _DEFAULT_LOCK:
        _default_manager = None
