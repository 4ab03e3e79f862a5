"""
Innochannel Core Time — Event Clock
=====================================
Every event is stamped at construction by now_utc(). The
clock behind it is swappable so tests can pin timestamps
and host applications can supply their own time source
(any object with a now_utc() method returning an aware
datetime).
"""

from __future__ import annotations

from datetime import datetime, timezone


class SystemClock:
    def now_utc(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Clock pinned to one instant.

    Usage:
        set_default_clock(FixedClock(datetime(2024, 1, 15, tzinfo=timezone.utc)))
        assert BookingCreated(booking).timestamp.day == 15
    """

    def __init__(self, fixed_dt: datetime) -> None:
        if fixed_dt.tzinfo is None:
            raise ValueError("FixedClock requires timezone-aware datetime.")
        self._fixed_dt = fixed_dt

    def now_utc(self) -> datetime:
        return self._fixed_dt


_event_clock = SystemClock()


def set_default_clock(clock):
    """Install the clock used for event timestamps; returns the previous one."""
    global _event_clock
    previous, _event_clock = _event_clock, clock
    return previous


def now_utc() -> datetime:
    return _event_clock.now_utc()
