"""
Innochannel Events — Errors
=============================
Error types for listener registration.

Listener failures during dispatch are NOT represented here:
they are contained by the dispatcher and reported to its
error sink, never raised to the firer.
"""


class EventError(Exception):
    """Base error for the event layer."""
    pass


class InvalidEventNameError(EventError, ValueError):
    """Event name is empty or not a string."""

    def __init__(self, event_name):
        self.event_name = event_name
        super().__init__(
            f"Event name must be a non-empty string, got {event_name!r}."
        )


class InvalidListenerError(EventError, TypeError):
    """Registered listener is not callable."""

    def __init__(self, event_name: str, listener):
        self.event_name = event_name
        self.listener = listener
        super().__init__(
            f"Listener for '{event_name}' must be callable, "
            f"got {type(listener).__name__}."
        )
