"""
Innochannel Tracking — Public API
===================================
Dirty tracking and per-instance event emission for models.
"""

from innochannel.core.tracking.changes import ABSENT, ChangeTracker
from innochannel.core.tracking.emitter import EventEmitter
from innochannel.core.tracking.observable import (
    Attribute,
    ObservableEntity,
    serialize_value,
)

__all__ = [
    "ABSENT",
    "Attribute",
    "ChangeTracker",
    "EventEmitter",
    "ObservableEntity",
    "serialize_value",
]
