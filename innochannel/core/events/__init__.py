"""
Innochannel Events — Public API
=================================
Event values, the priority dispatcher, and the manager
that gates delivery.
"""

from innochannel.core.events.dispatcher import (
    ErrorSink,
    EventDispatcher,
    Listener,
    ListenerRegistration,
    log_listener_failure,
)
from innochannel.core.events.errors import (
    EventError,
    InvalidEventNameError,
    InvalidListenerError,
)
from innochannel.core.events.event import Event
from innochannel.core.events.log_listener import EventLogListener
from innochannel.core.events.manager import (
    EventManager,
    get_event_manager,
    reset_event_manager,
    set_event_manager,
)

__all__ = [
    "Event",
    "EventDispatcher",
    "EventManager",
    "EventLogListener",
    "ListenerRegistration",
    "Listener",
    "ErrorSink",
    "log_listener_failure",
    "get_event_manager",
    "set_event_manager",
    "reset_event_manager",
    "EventError",
    "InvalidEventNameError",
    "InvalidListenerError",
]
