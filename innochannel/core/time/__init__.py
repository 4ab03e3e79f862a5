"""
Innochannel Core Time — Public API
====================================
Clock used to timestamp events, and date parsing helpers.
"""

from innochannel.core.time.clock import (
    FixedClock,
    SystemClock,
    now_utc,
    set_default_clock,
)
from innochannel.core.time.temporal import (
    nights_between,
    parse_date,
    parse_datetime,
)

__all__ = [
    "FixedClock",
    "SystemClock",
    "set_default_clock",
    "now_utc",
    "parse_date",
    "parse_datetime",
    "nights_between",
]
