"""
Tests for contrib.django — INNOCHANNEL_EVENTS settings loading,
listener resolution and the AppConfig.ready() wiring.
"""

import logging

import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured

from innochannel.contrib.django.conf import (
    LOG_LISTENER_PRIORITY,
    configure_event_manager,
    get_events_config,
    load_listener,
    parse_listener_entry,
)
from innochannel.core.events.event import Event
from innochannel.core.events.log_listener import EventLogListener
from innochannel.core.events.manager import EventManager, get_event_manager


class HandleOnlyListener:
    """Stub resolved through its handle() method."""

    def handle(self, event):
        return None


class TestGetEventsConfig:
    def test_defaults_merged(self, settings):
        settings.INNOCHANNEL_EVENTS = {"enabled": False}
        config = get_events_config()
        assert config["enabled"] is False
        assert config["listeners"] == {}
        assert config["logging"]["enabled"] is False
        assert config["logging"]["level"] == "INFO"

    def test_partial_logging_section(self, settings):
        settings.INNOCHANNEL_EVENTS = {"logging": {"enabled": True}}
        config = get_events_config()
        assert config["logging"]["enabled"] is True
        assert config["logging"]["include_payload"] is False

    def test_missing_setting(self, settings):
        del settings.INNOCHANNEL_EVENTS
        assert get_events_config()["enabled"] is True

    def test_rejects_non_dict(self, settings):
        settings.INNOCHANNEL_EVENTS = ["nope"]
        with pytest.raises(ImproperlyConfigured):
            get_events_config()

    def test_rejects_bad_listeners(self, settings):
        settings.INNOCHANNEL_EVENTS = {"listeners": ["booking.created"]}
        with pytest.raises(ImproperlyConfigured):
            get_events_config()


class TestListenerResolution:
    def test_parse_plain_path(self):
        assert parse_listener_entry("e", "pkg.mod.fn") == ("pkg.mod.fn", 0)

    def test_parse_path_with_priority(self):
        assert parse_listener_entry("e", ("pkg.mod.fn", 10)) == ("pkg.mod.fn", 10)

    @pytest.mark.parametrize("entry", [42, ("only",), ("path", "high")])
    def test_parse_invalid(self, entry):
        with pytest.raises(ImproperlyConfigured):
            parse_listener_entry("e", entry)

    def test_load_function(self):
        assert load_listener("builtins.len") is len

    def test_load_class_instantiates(self):
        listener = load_listener("innochannel.core.events.log_listener.EventLogListener")
        assert isinstance(listener, EventLogListener)

    def test_load_class_with_handle(self):
        listener = load_listener(f"{__name__}.HandleOnlyListener")
        assert listener.__name__ == "handle"

    def test_unimportable(self):
        with pytest.raises(ImproperlyConfigured, match="Cannot import"):
            load_listener("innochannel.nowhere.listener")

    def test_not_callable(self):
        with pytest.raises(ImproperlyConfigured, match="not callable"):
            load_listener("innochannel.contrib.django.conf.SETTINGS_NAME")


class TestConfigureEventManager:
    def test_registers_listeners_in_priority_order(self):
        manager = EventManager()
        count = configure_event_manager(manager, {
            "listeners": {
                "booking.created": ["builtins.len", ("builtins.repr", 10)],
                "booking.cancelled": "builtins.id",
            },
        })
        assert count == 3
        assert manager.get_listeners("booking.created") == (repr, len)
        assert manager.get_listeners("booking.cancelled") == (id,)

    def test_applies_enabled_flag(self):
        manager = EventManager()
        configure_event_manager(manager, {"enabled": False, "listeners": {}})
        assert not manager.is_enabled()

    def test_logging_listener_on_configured_names(self):
        manager = EventManager()
        configure_event_manager(manager, {
            "listeners": {"booking.created": ["builtins.len"]},
            "logging": {"enabled": True, "level": "DEBUG"},
        })
        first = manager.get_listeners("booking.created")[0]
        assert isinstance(first, EventLogListener)
        assert first.level == logging.DEBUG

    def test_logging_listener_on_explicit_names(self):
        manager = EventManager()
        count = configure_event_manager(manager, {
            "listeners": {},
            "logging": {"enabled": True, "events": ["webhook.booking.received"]},
        })
        assert count == 1
        assert manager.has_listeners("webhook.booking.received")

    def test_log_listener_writes_record(self, caplog):
        manager = EventManager()
        manager.add_listener("booking.created", EventLogListener(), LOG_LISTENER_PRIORITY)
        with caplog.at_level(logging.INFO, logger="innochannel.events.log"):
            manager.fire(Event("booking.created", {"booking_id": "bk_1"}))
        assert "Event fired: booking.created" in caplog.text
        assert "booking_id" in caplog.text

    def test_log_listener_rejects_unknown_level(self):
        with pytest.raises(ValueError):
            EventLogListener(level="LOUD")


class TestAppConfig:
    def test_app_registered(self):
        config = apps.get_app_config("innochannel_events")
        assert config.name == "innochannel.contrib.django"

    def test_ready_configures_default_manager(self, settings):
        settings.INNOCHANNEL_EVENTS = {
            "enabled": True,
            "listeners": {"booking.created": ["builtins.len"]},
        }
        apps.get_app_config("innochannel_events").ready()
        assert get_event_manager().get_listeners("booking.created") == (len,)
