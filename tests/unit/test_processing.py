"""Unit tests for the single-flight guard and status ticker."""

import threading
import time
from unittest.mock import Mock

import pytest

from toonify.ui.processing import SessionGuards, SingleFlight, StatusTicker

MESSAGES = ("one", "two", "three")


def wait_for(predicate, timeout: float = 2.0) -> bool:
    """Poll until predicate() is true or the timeout passes."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class TestSingleFlight:
    """Tests for SingleFlight class."""

    def test_first_attempt_acquires(self):
        guard = SingleFlight()
        with guard.attempt() as acquired:
            assert acquired is True
            assert guard.busy is True
        assert guard.busy is False

    def test_second_attempt_is_refused(self):
        guard = SingleFlight()
        with guard.attempt() as first:
            with guard.attempt() as second:
                assert first is True
                assert second is False
            # The refused attempt must not release the owner's flight
            assert guard.busy is True

    def test_released_on_exception(self):
        guard = SingleFlight()
        with pytest.raises(RuntimeError):
            with guard.attempt():
                raise RuntimeError("boom")
        assert guard.busy is False

    def test_refused_across_threads(self):
        guard = SingleFlight()
        results = []

        with guard.attempt():
            def other():
                with guard.attempt() as acquired:
                    results.append(acquired)

            thread = threading.Thread(target=other)
            thread.start()
            thread.join()

        assert results == [False]


class TestSessionGuards:
    """Tests for SessionGuards class."""

    def test_same_session_same_guard(self):
        guards = SessionGuards()
        assert guards.for_session("abc") is guards.for_session("abc")

    def test_sessions_are_independent(self):
        guards = SessionGuards()
        with guards.for_session("abc").attempt() as a:
            with guards.for_session("xyz").attempt() as b:
                assert a is True
                assert b is True

    def test_none_session_uses_default(self):
        guards = SessionGuards()
        assert guards.for_session(None) is guards.for_session(None)
        assert len(guards) == 1

    def test_discard(self):
        guards = SessionGuards()
        guards.for_session("abc")
        guards.discard("abc")
        guards.discard("never-created")
        assert len(guards) == 0


class TestStatusTicker:
    """Tests for StatusTicker class."""

    def test_starts_with_first_message(self):
        ticker = StatusTicker(MESSAGES, interval=10)
        assert ticker.current == "one"
        assert ticker.running is False

    def test_rejects_empty_messages(self):
        with pytest.raises(ValueError):
            StatusTicker([], interval=1)

    @pytest.mark.parametrize("interval", [0, -1])
    def test_rejects_non_positive_interval(self, interval):
        with pytest.raises(ValueError):
            StatusTicker(MESSAGES, interval=interval)

    def test_rotates_messages(self):
        seen = []
        with StatusTicker(MESSAGES, interval=0.01, on_tick=seen.append) as ticker:
            assert wait_for(lambda: ticker.ticks >= 3)

        assert len(seen) >= 3
        assert set(seen) <= set(MESSAGES)

    def test_uses_injected_rng(self):
        rng = Mock()
        rng.choice.return_value = "three"
        with StatusTicker(MESSAGES, interval=0.01, rng=rng) as ticker:
            assert wait_for(lambda: ticker.ticks >= 1)
        assert ticker.current == "three"
        rng.choice.assert_called_with(MESSAGES)

    def test_stops_on_exit(self):
        with StatusTicker(MESSAGES, interval=0.01) as ticker:
            assert ticker.running is True
        assert ticker.running is False

        ticks = ticker.ticks
        time.sleep(0.05)
        assert ticker.ticks == ticks

    def test_stops_when_body_raises(self):
        with pytest.raises(RuntimeError):
            with StatusTicker(MESSAGES, interval=0.01) as ticker:
                raise RuntimeError("request failed")
        assert ticker.running is False

    def test_stop_is_idempotent(self):
        ticker = StatusTicker(MESSAGES, interval=0.01).start()
        ticker.stop()
        ticker.stop()
        assert ticker.running is False

    def test_stop_without_start(self):
        StatusTicker(MESSAGES, interval=0.01).stop()

    def test_cannot_start_twice(self):
        ticker = StatusTicker(MESSAGES, interval=0.01).start()
        try:
            with pytest.raises(RuntimeError):
                ticker.start()
        finally:
            ticker.stop()

    def test_callback_errors_do_not_kill_timer(self):
        def explode(message):
            raise RuntimeError("callback failed")

        with StatusTicker(MESSAGES, interval=0.01, on_tick=explode) as ticker:
            assert wait_for(lambda: ticker.ticks >= 2)
