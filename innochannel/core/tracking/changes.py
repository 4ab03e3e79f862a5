"""
Innochannel Tracking — Change Tracker
=======================================
Compares an entity's current serialization against a snapshot.

The snapshot is a deep copy, so later in-place mutation of a
nested list or dict on the entity still shows up as a change.
"""

from __future__ import annotations

import copy
from typing import Any, Callable, Dict


class _Absent:
    """Marks a field missing from the original snapshot."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<ABSENT>"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


class ChangeTracker:
    """
    Dirty tracking over a serializer callable.

    Usage:
        tracker = ChangeTracker(model.to_dict)
        tracker.sync()
        ...
        if tracker.is_dirty():
            tracker.get_changes()  # {"name": {"old": "Test", "new": "X"}}
    """

    def __init__(self, serializer: Callable[[], Dict[str, Any]]) -> None:
        self._serializer = serializer
        self._original: Dict[str, Any] = {}

    def sync(self) -> None:
        """Take the current serialization as the new clean state."""
        self._original = copy.deepcopy(self._serializer())

    @property
    def original(self) -> Dict[str, Any]:
        return copy.deepcopy(self._original)

    def is_dirty(self) -> bool:
        return self._serializer() != self._original

    def get_changes(self) -> Dict[str, Dict[str, Any]]:
        changes: Dict[str, Dict[str, Any]] = {}
        for key, value in self._serializer().items():
            old = self._original.get(key, ABSENT)
            if old is ABSENT or old != value:
                changes[key] = {"old": old, "new": value}
        return changes
