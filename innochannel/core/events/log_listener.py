"""
Innochannel Events — Log Listener
===================================
Listener that writes every event it receives to the
'innochannel.events.log' logger. Register it like any other
listener, usually with a high priority so it sees events
before a later listener can stop propagation.
"""

from __future__ import annotations

import logging
from typing import Union

from innochannel.core.events.event import Event

logger = logging.getLogger("innochannel.events.log")


class EventLogListener:
    def __init__(
        self, level: Union[int, str] = logging.INFO, include_payload: bool = False
    ) -> None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown log level {level!r}.")
        self.level = level
        self.include_payload = include_payload

    def __call__(self, event: Event) -> None:
        if self.include_payload:
            logger.log(
                self.level,
                f"Event fired: {event.name} at {event.timestamp.isoformat()} "
                f"payload={event.get_data()!r}",
            )
        else:
            logger.log(
                self.level,
                f"Event fired: {event.name} at {event.timestamp.isoformat()} "
                f"keys={sorted(event.payload)}",
            )
