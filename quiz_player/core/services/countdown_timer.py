"""Per-question countdown running on a background daemon thread."""

from __future__ import annotations

from collections.abc import Callable
import logging
from threading import Event, Lock, Thread, current_thread
import time

from quiz_player.constants.quiz_constants import TIMER_TICK_INTERVAL_SECONDS

_LOGGER = logging.getLogger(__name__)

TickCallback = Callable[[int], None]
ExpireCallback = Callable[[], None]


class CountdownTimer:
    """Counts down whole seconds and fires a single expiry notification.

    Tick boundaries are derived from a monotonic deadline so the countdown does
    not drift when callbacks are slow. Starting a new countdown cancels the
    running one. Callbacks run on the timer thread and are never invoked while
    the timer's own lock is held, so they may call back into ``cancel``.

    ``cancel`` only signals the countdown thread, which then exits without
    further callbacks. It never joins, since a callback in flight may be
    waiting on a lock the canceller holds. Use ``join`` once such locks are
    released.
    """

    def __init__(self, tick_interval: float = TIMER_TICK_INTERVAL_SECONDS) -> None:
        if tick_interval <= 0:
            raise ValueError("Tick interval must be positive.")
        self._tick_interval = tick_interval
        self._lock = Lock()
        self._generation: int = 0
        self._cancel_event: Event | None = None
        self._thread: Thread | None = None
        self._remaining_seconds: int = 0

    def start(
        self,
        duration_seconds: int,
        on_tick: TickCallback | None,
        on_expire: ExpireCallback,
    ) -> None:
        if duration_seconds < 0:
            raise ValueError("Countdown duration must not be negative.")
        with self._lock:
            self._cancel_locked()
            self._generation += 1
            cancel_event = Event()
            self._cancel_event = cancel_event
            self._remaining_seconds = duration_seconds
            thread = Thread(
                target=self._run,
                args=(self._generation, cancel_event, duration_seconds, on_tick, on_expire),
                name=f"QuizCountdown-{self._generation}",
                daemon=True,
            )
            self._thread = thread
            thread.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the most recent countdown thread and report whether it exited.

        Must not be called from a callback.
        """
        with self._lock:
            thread = self._thread
        if thread is None or thread is current_thread():
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def is_active(self) -> bool:
        with self._lock:
            return self._cancel_event is not None

    def get_remaining_seconds(self) -> int:
        with self._lock:
            return self._remaining_seconds

    def _cancel_locked(self) -> None:
        if self._cancel_event is None:
            return
        self._cancel_event.set()
        self._cancel_event = None
        # Any callback still in flight from the old countdown sees a stale generation.
        self._generation += 1

    def _run(
        self,
        generation: int,
        cancel_event: Event,
        duration_seconds: int,
        on_tick: TickCallback | None,
        on_expire: ExpireCallback,
    ) -> None:
        deadline = time.monotonic() + duration_seconds * self._tick_interval
        remaining = duration_seconds
        while remaining > 0:
            next_boundary = deadline - (remaining - 1) * self._tick_interval
            if cancel_event.wait(max(0.0, next_boundary - time.monotonic())):
                return
            remaining -= 1
            if not self._publish_tick(generation, remaining):
                return
            if on_tick is not None:
                on_tick(remaining)

        if not self._claim_expiry(generation):
            return
        _LOGGER.debug("Countdown %d expired", generation)
        on_expire()

    def _publish_tick(self, generation: int, remaining: int) -> bool:
        with self._lock:
            if generation != self._generation:
                return False
            self._remaining_seconds = remaining
            return True

    def _claim_expiry(self, generation: int) -> bool:
        with self._lock:
            if generation != self._generation or self._cancel_event is None:
                return False
            self._cancel_event = None
            return True
