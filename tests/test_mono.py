"""Tests for synchronous events."""

from __future__ import annotations

import logging
from typing import Any
from unittest.mock import MagicMock

import pytest

from mono_event import MonoEvent
from mono_event import mono


class Counter:
    def __init__(self) -> None:
        self.total = 0

    def increment(self, amount: int) -> None:
        self.total += amount


class TestEmit:
    def test_listeners_called_in_registration_order(self) -> None:
        event = mono()
        order: list[tuple[str, int]] = []
        for name in ("first", "second", "third"):
            event.add(lambda value, name=name: order.append((name, value)))

        event.emit(7)

        assert order == [("first", 7), ("second", 7), ("third", 7)]

    def test_emit_without_listeners_is_noop(self) -> None:
        event = mono()

        event.emit("nothing")

        assert event.listener_count == 0
        assert not event.has_listeners

    def test_empty_event_is_truthy(self) -> None:
        event = mono()

        assert len(event) == 0
        assert event
        event.add(MagicMock())
        assert len(event) == 1

    def test_caller_context(self) -> None:
        event = mono()
        counter = Counter()
        event.add(counter, Counter.increment)

        event.emit(2)
        event.emit(3)

        assert counter.total == 5

    def test_mock_handler_with_caller_receives_caller_first(self) -> None:
        event = mono()
        caller = object()
        handler = MagicMock()
        event.add(caller, handler)

        event.emit("value")

        handler.assert_called_once_with(caller, "value")

    def test_factory_returns_mono_event(self) -> None:
        assert isinstance(mono(), MonoEvent)


class TestOnce:
    def test_once_listener_called_only_for_first_emit(self) -> None:
        event = mono()
        handler = MagicMock()
        event.add(handler, once=True)

        event.emit("first")
        event.emit("second")

        handler.assert_called_once_with("first")
        assert event.listener_count == 0

    def test_once_listeners_run_after_persistent(self) -> None:
        event = mono()
        order: list[str] = []
        event.add(lambda _: order.append("once"), once=True)
        event.add(lambda _: order.append("persistent"))

        event.emit(None)

        assert order == ["persistent", "once"]

    def test_reentrant_emit_from_once_listener(self) -> None:
        event = mono()
        received: list[int] = []

        def once_handler(value: int) -> None:
            received.append(value)
            if value == 1:
                event.emit(2)

        event.add(once_handler, once=True)
        event.emit(1)

        assert received == [1]

    def test_once_listener_removed_even_when_it_raises(self) -> None:
        event = mono()
        handler = MagicMock(side_effect=ValueError("boom"))
        event.add(handler, once=True)

        with pytest.raises(ValueError, match="boom"):
            event.emit(1)
        event.emit(2)

        handler.assert_called_once_with(1)

    def test_unsubscribe_once_listener_before_emit(self) -> None:
        event = mono()
        handler = MagicMock()
        unsubscribe = event.add(handler, once=True)

        unsubscribe()
        event.emit(1)

        handler.assert_not_called()


class TestMutationDuringEmit:
    def test_removed_listener_still_receives_current_pass(self) -> None:
        event = mono()
        calls: list[tuple[str, int]] = []

        def second(value: int) -> None:
            calls.append(("second", value))

        def first(value: int) -> None:
            calls.append(("first", value))
            event.remove(second)

        event.add(first)
        event.add(second)

        event.emit(1)
        event.emit(2)

        assert calls == [("first", 1), ("second", 1), ("first", 2)]

    def test_listener_added_during_pass_waits_for_next_pass(self) -> None:
        event = mono()
        late = MagicMock()

        def adder(value: int) -> None:
            if value == 1:
                event.add(late)

        event.add(adder)
        event.emit(1)
        late.assert_not_called()

        event.emit(2)
        late.assert_called_once_with(2)

    def test_once_listener_added_during_pass_waits_for_next_pass(self) -> None:
        event = mono()
        late = MagicMock()

        def adder(value: int) -> None:
            if value == 1:
                event.add(late, once=True)

        event.add(adder)
        event.emit(1)
        late.assert_not_called()
        assert event.listener_count == 2

        event.emit(2)
        event.emit(3)
        late.assert_called_once_with(2)

    def test_once_listener_removed_mid_pass_does_not_run(self) -> None:
        event = mono()
        once = MagicMock()
        unsubscribe_once = event.add(once, once=True)
        event.add(lambda _: unsubscribe_once())

        event.emit(1)

        once.assert_not_called()
        assert event.listener_count == 1

    def test_remove_all_during_pass_affects_future_passes(self) -> None:
        event = mono()
        tail = MagicMock()
        event.add(lambda _: event.remove_all())
        event.add(tail)

        event.emit("a")
        event.emit("b")

        tail.assert_called_once_with("a")


class TestErrorPolicy:
    def test_error_propagates_and_stops_pass_by_default(self) -> None:
        event = mono()
        after = MagicMock()
        once = MagicMock()
        event.add(MagicMock(side_effect=RuntimeError("fail")))
        event.add(after)
        event.add(once, once=True)

        with pytest.raises(RuntimeError, match="fail"):
            event.emit(1)

        after.assert_not_called()
        once.assert_not_called()
        # The once pass never started, so the once listener is still registered.
        assert event.listener_count == 3

    def test_continue_on_error_runs_remaining_listeners(self) -> None:
        event = mono(continue_on_error=True)
        seen: list[Any] = []
        event.add(lambda v: seen.append(("a", v)))
        event.add(MagicMock(side_effect=ValueError("bad")))
        event.add(lambda v: seen.append(("c", v)))

        event.emit("x")

        assert seen == [("a", "x"), ("c", "x")]

    def test_log_errors_reports_and_reraises(self, caplog: Any) -> None:
        event = mono(log_errors=True)

        def broken(value: int) -> None:
            raise KeyError("missing")

        event.add(broken)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(KeyError):
                event.emit(1)

        assert "missing" in caplog.text
        assert "broken" in caplog.text

    def test_errors_not_logged_by_default(self, caplog: Any) -> None:
        event = mono(continue_on_error=True)
        event.add(MagicMock(side_effect=ValueError("quiet")))

        with caplog.at_level(logging.ERROR):
            event.emit(1)

        assert "quiet" not in caplog.text

    def test_coroutine_handler_is_closed_and_warned(self, caplog: Any) -> None:
        event = mono()
        started: list[int] = []

        async def async_handler(value: int) -> None:
            started.append(value)

        event.add(async_handler)

        with caplog.at_level(logging.WARNING):
            event.emit(1)

        assert started == []
        assert "not awaited" in caplog.text
