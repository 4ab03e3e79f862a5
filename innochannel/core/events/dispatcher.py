"""
Innochannel Events — Dispatcher
=================================
Holds listeners per event name and runs them in priority order.

Dispatch behavior:
1. Resolve listeners for event.name (none → True, nothing to do)
2. Run them highest priority first, ties in registration order
3. A listener returning exactly False stops propagation → False
4. A listener raising is reported to the error sink and skipped
5. Every listener ran without stopping → True

Listener failure must NOT:
- Break dispatch of later listeners
- Reach the code that fired the event

The sorted listener order is cached per event name and
invalidated only for the name whose registrations changed.
"""

from __future__ import annotations

import inspect
import itertools
import logging
from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Dict, List, Optional, Tuple

from innochannel.core.events.errors import (
    InvalidEventNameError,
    InvalidListenerError,
)
from innochannel.core.events.event import Event

logger = logging.getLogger("innochannel.events")

Listener = Callable[[Event], Optional[bool]]
ErrorSink = Callable[[Event, Listener, Exception], None]


def _listener_name(listener: Any) -> str:
    return getattr(listener, "__qualname__", None) or repr(listener)


def log_listener_failure(
    event: Event, listener: Listener, exc: Exception
) -> None:
    """Default error sink: log the failure with its traceback."""
    logger.error(
        f"Listener failed: {_listener_name(listener)} for "
        f"event '{event.name}': {exc}",
        exc_info=exc,
    )


@dataclass(frozen=True)
class ListenerRegistration:
    listener: Listener
    priority: int
    sequence: int

    def sort_key(self) -> Tuple[int, int]:
        return (-self.priority, self.sequence)

    def matches(self, listener: Any) -> bool:
        if self.listener is listener:
            return True
        # Bound methods are rebuilt on every attribute access.
        return inspect.ismethod(listener) and self.listener == listener


class EventDispatcher:
    """
    Priority-ordered, failure-isolating event dispatcher.

    The error sink is injected so that swallowed listener
    failures stay observable; it defaults to logging.
    """

    def __init__(self, error_sink: Optional[ErrorSink] = None) -> None:
        self._listeners: Dict[str, List[ListenerRegistration]] = {}
        self._sorted: Dict[str, Tuple[Listener, ...]] = {}
        self._sequence = itertools.count()
        self._lock = Lock()
        self.error_sink: ErrorSink = error_sink or log_listener_failure

    @staticmethod
    def _validate_event_name(event_name: Any) -> None:
        if not isinstance(event_name, str) or not event_name.strip():
            raise InvalidEventNameError(event_name)

    # ── registration ──────────────────────────────────────────

    def add_listener(
        self, event_name: str, listener: Listener, priority: int = 0
    ) -> None:
        self._validate_event_name(event_name)
        if not callable(listener):
            raise InvalidListenerError(event_name, listener)

        with self._lock:
            registration = ListenerRegistration(
                listener=listener,
                priority=priority,
                sequence=next(self._sequence),
            )
            self._listeners.setdefault(event_name, []).append(registration)
            self._sorted.pop(event_name, None)

        logger.debug(
            f"Listener registered: {_listener_name(listener)} → "
            f"{event_name} (priority: {priority})"
        )

    def remove_listener(self, event_name: str, listener: Listener) -> None:
        """Remove the first matching registration; no-op if absent."""
        with self._lock:
            registrations = self._listeners.get(event_name)
            if not registrations:
                return
            for index, registration in enumerate(registrations):
                if registration.matches(listener):
                    del registrations[index]
                    self._sorted.pop(event_name, None)
                    if not registrations:
                        del self._listeners[event_name]
                    logger.debug(
                        f"Listener removed: {_listener_name(listener)} "
                        f"from {event_name}"
                    )
                    return

    # ── queries ───────────────────────────────────────────────

    def get_listeners(self, event_name: str) -> Tuple[Listener, ...]:
        """Listeners for an event name in dispatch order."""
        with self._lock:
            cached = self._sorted.get(event_name)
            if cached is not None:
                return cached
            registrations = self._listeners.get(event_name)
            if not registrations:
                return ()
            ordered = tuple(
                r.listener
                for r in sorted(registrations, key=ListenerRegistration.sort_key)
            )
            self._sorted[event_name] = ordered
            return ordered

    def has_listeners(self, event_name: str) -> bool:
        with self._lock:
            return bool(self._listeners.get(event_name))

    def listener_count(self, event_name: str) -> int:
        with self._lock:
            return len(self._listeners.get(event_name, ()))

    def get_event_names(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._listeners.keys())

    # ── dispatch ──────────────────────────────────────────────

    def dispatch(self, event: Event) -> bool:
        """
        Run every listener registered for event.name.

        Returns False if a listener stopped propagation, else True.
        This method never raises because of a listener.
        """
        listeners = self.get_listeners(event.name)
        if not listeners:
            logger.debug(f"No listeners for event '{event.name}'")
            return True

        failed = 0
        for listener in listeners:
            try:
                result = listener(event)
            except Exception as exc:
                failed += 1
                self._report_failure(event, listener, exc)
                continue

            if result is False:
                logger.debug(
                    f"Propagation stopped by {_listener_name(listener)} "
                    f"for event '{event.name}'"
                )
                return False

        logger.debug(
            f"Dispatch complete: {event.name} — "
            f"{len(listeners)} listeners, {failed} failed"
        )
        return True

    def _report_failure(
        self, event: Event, listener: Listener, exc: Exception
    ) -> None:
        try:
            self.error_sink(event, listener, exc)
        except Exception:
            logger.exception(
                f"Error sink raised while reporting failure of "
                f"{_listener_name(listener)} for event '{event.name}'"
            )
