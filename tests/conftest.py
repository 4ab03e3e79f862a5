"""
Shared fixtures: every test starts with a fresh default event
manager and the system clock.
"""

from datetime import datetime, timezone

import pytest

from innochannel.core.events.manager import EventManager, reset_event_manager, set_event_manager
from innochannel.core.time.clock import FixedClock, SystemClock, set_default_clock

FIXED_NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _isolate_event_state():
    reset_event_manager()
    yield
    reset_event_manager()
    set_default_clock(SystemClock())


@pytest.fixture
def fixed_clock():
    clock = FixedClock(FIXED_NOW)
    set_default_clock(clock)
    return clock


class Recorder:
    """Listener that remembers every event it receives."""

    def __init__(self, result=None):
        self.events = []
        self.result = result

    def __call__(self, event):
        self.events.append(event)
        return self.result

    @property
    def names(self):
        return [e.name for e in self.events]


@pytest.fixture
def manager():
    """A fresh manager installed as the shared default."""
    mgr = EventManager()
    set_event_manager(mgr)
    return mgr


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def record_all(manager):
    """Returns a function that subscribes one recorder to many names."""

    def _subscribe(*event_names):
        rec = Recorder()
        for name in event_names:
            manager.add_listener(name, rec)
        return rec

    return _subscribe
