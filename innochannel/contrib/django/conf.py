"""
Innochannel Django — Settings
===============================
Reads settings.INNOCHANNEL_EVENTS and applies it to an
EventManager.

    INNOCHANNEL_EVENTS = {
        "enabled": True,
        "listeners": {
            "booking.created": [
                "myapp.listeners.notify_front_desk",
                ("myapp.listeners.BookingAudit", 10),
            ],
        },
        "logging": {
            "enabled": True,
            "level": "INFO",
            "include_payload": False,
            "events": [],          # empty → every event in "listeners"
        },
    }

Listener paths may point at a function, a callable instance,
or a class; classes are instantiated without arguments and
their handle() method is used when instances aren't callable.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Tuple

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from innochannel.core.events.dispatcher import Listener
from innochannel.core.events.log_listener import EventLogListener
from innochannel.core.events.manager import EventManager

logger = logging.getLogger("innochannel.django")

SETTINGS_NAME = "INNOCHANNEL_EVENTS"

# Runs ahead of application listeners.
LOG_LISTENER_PRIORITY = 1000

DEFAULTS: Dict[str, Any] = {
    "enabled": True,
    "listeners": {},
    "logging": {
        "enabled": False,
        "level": "INFO",
        "include_payload": False,
        "events": [],
    },
}


def get_events_config() -> Dict[str, Any]:
    """Project settings merged over DEFAULTS."""
    user_config = getattr(settings, SETTINGS_NAME, None) or {}
    if not isinstance(user_config, Mapping):
        raise ImproperlyConfigured(f"{SETTINGS_NAME} must be a dict.")

    config = dict(DEFAULTS)
    config.update(user_config)
    logging_config = dict(DEFAULTS["logging"])
    logging_config.update(user_config.get("logging") or {})
    config["logging"] = logging_config

    if not isinstance(config["listeners"], Mapping):
        raise ImproperlyConfigured(
            f"{SETTINGS_NAME}['listeners'] must map event names to lists."
        )
    return config


def parse_listener_entry(event_name: str, entry: Any) -> Tuple[str, int]:
    """'path' → (path, 0); ('path', 10) → (path, 10)."""
    if isinstance(entry, str):
        return entry, 0
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        path, priority = entry
        if isinstance(path, str) and isinstance(priority, int):
            return path, priority
    raise ImproperlyConfigured(
        f"Invalid listener entry for '{event_name}': {entry!r}. "
        f"Use 'dotted.path' or ('dotted.path', priority)."
    )


def load_listener(path: str) -> Listener:
    try:
        target = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(
            f"Cannot import event listener '{path}': {exc}"
        ) from exc

    if isinstance(target, type):
        target = target()
        if not callable(target) and callable(getattr(target, "handle", None)):
            target = target.handle
    if not callable(target):
        raise ImproperlyConfigured(f"Event listener '{path}' is not callable.")
    return target


def configure_event_manager(
    manager: EventManager, config: Mapping[str, Any]
) -> int:
    """
    Register configured listeners and apply the enabled flag.

    Returns the number of listeners registered.
    """
    registered = 0
    listeners: Mapping[str, Any] = config.get("listeners") or {}

    for event_name, entries in listeners.items():
        if isinstance(entries, (str, tuple)):
            entries = [entries]
        for entry in entries:
            path, priority = parse_listener_entry(event_name, entry)
            manager.add_listener(event_name, load_listener(path), priority)
            registered += 1

    logging_config = config.get("logging") or {}
    if logging_config.get("enabled"):
        log_listener = EventLogListener(
            level=logging_config.get("level", "INFO"),
            include_payload=bool(logging_config.get("include_payload")),
        )
        logged: List[str] = list(logging_config.get("events") or listeners.keys())
        for event_name in logged:
            manager.add_listener(event_name, log_listener, LOG_LISTENER_PRIORITY)
            registered += 1

    if config.get("enabled", True):
        manager.enable()
    else:
        manager.disable()

    return registered
