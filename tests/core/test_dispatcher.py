"""
Tests for core.events.dispatcher — priority ordering,
failure isolation, propagation stop and listener bookkeeping.
"""

import logging

import pytest

from innochannel.core.events.dispatcher import EventDispatcher, log_listener_failure
from innochannel.core.events.errors import (
    EventError,
    InvalidEventNameError,
    InvalidListenerError,
)
from innochannel.core.events.event import Event


class RecordingSink:
    def __init__(self):
        self.failures = []

    def __call__(self, event, listener, exc):
        self.failures.append((event.name, listener, exc))


def make_listener(calls, tag, result=None):
    def listener(event):
        calls.append(tag)
        return result
    return listener


class Greeter:
    def __init__(self):
        self.seen = []

    def on_event(self, event):
        self.seen.append(event.name)


# ══════════════════════════════════════════════════════════════
# ORDERING
# ══════════════════════════════════════════════════════════════


class TestOrdering:
    def test_higher_priority_runs_first(self):
        calls = []
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", make_listener(calls, "low"), priority=5)
        dispatcher.add_listener("e", make_listener(calls, "high"), priority=10)
        dispatcher.dispatch(Event("e"))
        assert calls == ["high", "low"]

    def test_ties_keep_registration_order(self):
        calls = []
        dispatcher = EventDispatcher()
        for tag in ("a", "b", "c"):
            dispatcher.add_listener("e", make_listener(calls, tag))
        dispatcher.dispatch(Event("e"))
        assert calls == ["a", "b", "c"]

    def test_mixed_priorities_and_ties(self):
        calls = []
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", make_listener(calls, "a0"))
        dispatcher.add_listener("e", make_listener(calls, "b5"), priority=5)
        dispatcher.add_listener("e", make_listener(calls, "c0"))
        dispatcher.add_listener("e", make_listener(calls, "d5"), priority=5)
        dispatcher.add_listener("e", make_listener(calls, "e-1"), priority=-1)
        dispatcher.dispatch(Event("e"))
        assert calls == ["b5", "d5", "a0", "c0", "e-1"]

    def test_late_registration_invalidates_cached_order(self):
        calls = []
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", make_listener(calls, "first"))
        dispatcher.dispatch(Event("e"))
        dispatcher.add_listener("e", make_listener(calls, "urgent"), priority=100)
        calls.clear()
        dispatcher.dispatch(Event("e"))
        assert calls == ["urgent", "first"]

    def test_other_names_unaffected(self):
        calls = []
        dispatcher = EventDispatcher()
        dispatcher.add_listener("a", make_listener(calls, "a"))
        dispatcher.add_listener("b", make_listener(calls, "b"))
        dispatcher.dispatch(Event("a"))
        assert calls == ["a"]


# ══════════════════════════════════════════════════════════════
# DISPATCH RESULTS
# ══════════════════════════════════════════════════════════════


class TestDispatch:
    def test_no_listeners_returns_true(self):
        assert EventDispatcher().dispatch(Event("nobody.listens")) is True

    def test_all_listeners_ran_returns_true(self):
        calls = []
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", make_listener(calls, "a", result=True))
        dispatcher.add_listener("e", make_listener(calls, "b"))
        assert dispatcher.dispatch(Event("e")) is True
        assert calls == ["a", "b"]

    def test_false_halts_propagation(self):
        calls = []
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", make_listener(calls, "stop", result=False), priority=1)
        dispatcher.add_listener("e", make_listener(calls, "never"))
        assert dispatcher.dispatch(Event("e")) is False
        assert calls == ["stop"]

    def test_falsy_non_false_does_not_halt(self):
        calls = []
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", make_listener(calls, "zero", result=0))
        dispatcher.add_listener("e", make_listener(calls, "empty", result=""))
        dispatcher.add_listener("e", make_listener(calls, "last"))
        assert dispatcher.dispatch(Event("e")) is True
        assert calls == ["zero", "empty", "last"]

    def test_listener_receives_event(self):
        received = []
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", received.append)
        event = Event("e", {"id": 42})
        dispatcher.dispatch(event)
        assert received == [event]


# ══════════════════════════════════════════════════════════════
# FAILURE ISOLATION
# ══════════════════════════════════════════════════════════════


class TestFailureIsolation:
    def test_raising_listener_does_not_stop_chain(self):
        calls = []
        sink = RecordingSink()
        dispatcher = EventDispatcher(error_sink=sink)

        def broken(event):
            raise RuntimeError("boom")

        dispatcher.add_listener("e", broken, priority=10)
        dispatcher.add_listener("e", make_listener(calls, "after"))

        assert dispatcher.dispatch(Event("e")) is True
        assert calls == ["after"]
        assert len(sink.failures) == 1
        name, listener, exc = sink.failures[0]
        assert name == "e"
        assert listener is broken
        assert isinstance(exc, RuntimeError)

    def test_default_sink_logs_error(self, caplog):
        dispatcher = EventDispatcher()

        def broken(event):
            raise ValueError("bad payload")

        dispatcher.add_listener("booking.created", broken)
        with caplog.at_level(logging.ERROR, logger="innochannel.events"):
            assert dispatcher.dispatch(Event("booking.created")) is True

        assert "booking.created" in caplog.text
        assert "bad payload" in caplog.text
        assert dispatcher.error_sink is log_listener_failure

    def test_failing_sink_is_contained(self, caplog):
        calls = []

        def bad_sink(event, listener, exc):
            raise RuntimeError("sink down")

        def broken(event):
            raise RuntimeError("boom")

        dispatcher = EventDispatcher(error_sink=bad_sink)
        dispatcher.add_listener("e", broken, priority=1)
        dispatcher.add_listener("e", make_listener(calls, "after"))

        with caplog.at_level(logging.ERROR, logger="innochannel.events"):
            assert dispatcher.dispatch(Event("e")) is True
        assert calls == ["after"]
        assert "Error sink raised" in caplog.text


# ══════════════════════════════════════════════════════════════
# REGISTRATION BOOKKEEPING
# ══════════════════════════════════════════════════════════════


class TestRegistration:
    def test_remove_listener(self):
        calls = []
        listener = make_listener(calls, "x")
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", listener)
        dispatcher.remove_listener("e", listener)
        dispatcher.dispatch(Event("e"))
        assert calls == []
        assert not dispatcher.has_listeners("e")

    def test_remove_unknown_listener_is_noop(self):
        calls = []
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", make_listener(calls, "kept"))
        dispatcher.remove_listener("e", make_listener(calls, "stranger"))
        dispatcher.remove_listener("missing", make_listener(calls, "stranger"))
        dispatcher.dispatch(Event("e"))
        assert calls == ["kept"]

    def test_remove_only_first_duplicate(self):
        calls = []
        listener = make_listener(calls, "dup")
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", listener)
        dispatcher.add_listener("e", listener)
        dispatcher.remove_listener("e", listener)
        assert dispatcher.listener_count("e") == 1

    def test_remove_bound_method(self):
        greeter = Greeter()
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", greeter.on_event)
        dispatcher.remove_listener("e", greeter.on_event)
        dispatcher.dispatch(Event("e"))
        assert greeter.seen == []

    def test_bound_methods_of_other_instances_not_removed(self):
        first, second = Greeter(), Greeter()
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", first.on_event)
        dispatcher.remove_listener("e", second.on_event)
        dispatcher.dispatch(Event("e"))
        assert first.seen == ["e"]

    def test_get_listeners_sorted(self):
        a, b = (lambda e: None), (lambda e: None)
        dispatcher = EventDispatcher()
        dispatcher.add_listener("e", a)
        dispatcher.add_listener("e", b, priority=3)
        assert dispatcher.get_listeners("e") == (b, a)
        assert dispatcher.get_listeners("unknown") == ()

    def test_counts_and_names(self):
        dispatcher = EventDispatcher()
        dispatcher.add_listener("a", lambda e: None)
        dispatcher.add_listener("a", lambda e: None)
        dispatcher.add_listener("b", lambda e: None)
        assert dispatcher.listener_count("a") == 2
        assert dispatcher.listener_count("c") == 0
        assert dispatcher.get_event_names() == {"a", "b"}

    def test_listener_added_during_dispatch_waits_for_next_event(self):
        calls = []
        dispatcher = EventDispatcher()
        late = make_listener(calls, "late")

        def subscribing(event):
            calls.append("subscribing")
            dispatcher.add_listener("e", late)

        dispatcher.add_listener("e", subscribing)
        dispatcher.dispatch(Event("e"))
        assert calls == ["subscribing"]

    @pytest.mark.parametrize("bad_name", ["", "   ", None, 42])
    def test_invalid_event_name(self, bad_name):
        with pytest.raises(InvalidEventNameError):
            EventDispatcher().add_listener(bad_name, lambda e: None)

    def test_invalid_event_name_is_value_error(self):
        with pytest.raises(ValueError):
            EventDispatcher().add_listener("", lambda e: None)

    def test_non_callable_listener(self):
        with pytest.raises(InvalidListenerError):
            EventDispatcher().add_listener("e", "not callable")

    def test_error_hierarchy(self):
        assert issubclass(InvalidEventNameError, EventError)
        assert issubclass(InvalidListenerError, TypeError)
