"""Concurrency helpers for the transform action.

Two small pieces keep a studio session well-behaved while a transformation is
in flight:

- :class:`SingleFlight` ensures at most one transform runs per session. A
  second click while one is running is refused rather than queued.
- :class:`StatusTicker` rotates the cosmetic "Mixing the ink..." message on
  a fixed interval. It is a context manager whose lifetime is the processing
  phase: the background thread is stopped on success, on failure, and when
  the Gradio generator is closed because the session went away.
"""

import logging
import random
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class SingleFlight:
    """Non-blocking guard allowing one operation at a time."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def attempt(self) -> Iterator[bool]:
        """Try to enter the guarded section.

        Yields:
            True if the caller owns the flight, False if one is already running
        """
        acquired = self._lock.acquire(blocking=False)
        try:
            yield acquired
        finally:
            if acquired:
                self._lock.release()


class SessionGuards:
    """One SingleFlight per browser session, keyed by session id."""

    def __init__(self) -> None:
        self._guards: dict[str, SingleFlight] = {}
        self._registry_lock = threading.Lock()

    def for_session(self, session_id: str | None) -> SingleFlight:
        key = session_id or "__default__"
        with self._registry_lock:
            guard = self._guards.get(key)
            if guard is None:
                guard = SingleFlight()
                self._guards[key] = guard
            return guard

    def discard(self, session_id: str | None) -> None:
        """Forget a session's guard (called when the session is torn down)."""
        with self._registry_lock:
            self._guards.pop(session_id or "__default__", None)

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._guards)


class StatusTicker:
    """Rotates a status message on a background timer.

    Use as a context manager so the timer can never outlive the processing
    phase::

        with StatusTicker(LOADING_MESSAGES, 2.5) as ticker:
            ...
            show(ticker.current)

    Args:
        messages: Pool of messages to pick from
        interval: Seconds between rotations
        on_tick: Optional callback receiving each new message
        rng: Random source (injectable for tests)
    """

    def __init__(
        self,
        messages: Sequence[str],
        interval: float,
        on_tick: Callable[[str], None] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if not messages:
            raise ValueError("StatusTicker needs at least one message")
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")

        self.messages = tuple(messages)
        self.interval = interval
        self._on_tick = on_tick
        self._rng = rng or random.Random()
        self._current = self.messages[0]
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None
        self.ticks = 0

    @property
    def current(self) -> str:
        return self._current

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "StatusTicker":
        if self._thread is not None:
            raise RuntimeError("StatusTicker can only be started once")
        self._thread = threading.Thread(target=self._run, name="status-ticker", daemon=True)
        self._thread.start()
        return self

    def stop(self) -> None:
        """Cancel the timer. Safe to call more than once."""
        self._stopped.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self.interval + 1.0)

    def _run(self) -> None:
        while not self._stopped.wait(self.interval):
            self._current = self._rng.choice(self.messages)
            self.ticks += 1
            if self._on_tick is not None:
                try:
                    self._on_tick(self._current)
                except Exception as e:
                    logger.error(f"Status tick callback failed: {e}", exc_info=True)

    def __enter__(self) -> "StatusTicker":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
