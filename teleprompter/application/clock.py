"""Fixed-interval pacing clock driven by a one-shot tick scheduler."""

from __future__ import annotations

import threading
from typing import Any, Callable

from ..domain.pacing import TICK_INTERVAL_SECONDS
from .ports import TickScheduler


class ThreadingTickScheduler:
    """Schedules ticks on daemon ``threading.Timer`` threads."""

    def __init__(self, *, thread_name: str = "pacing-clock") -> None:
        self.thread_name = thread_name

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(max(0.0, float(delay_seconds)), callback)
        timer.name = self.thread_name
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: Any) -> None:
        if handle is not None:
            handle.cancel()


class PacingClock:
    """Calls ``on_tick(interval)`` every ``interval`` seconds while running.

    Only one tick is ever pending. Each start or stop bumps a generation
    counter so a tick already in flight from an earlier run is discarded.
    """

    def __init__(
        self,
        scheduler: TickScheduler,
        on_tick: Callable[[float], None],
        logger,
        *,
        interval: float = TICK_INTERVAL_SECONDS,
    ) -> None:
        self.scheduler = scheduler
        self.on_tick = on_tick
        self.logger = logger
        self.interval = float(interval)
        self._lock = threading.Lock()
        self._running = False
        self._generation = 0
        self._job: Any = None

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def start(self) -> None:
        with self._lock:
            self._cancel_job_locked()
            self._running = True
            self._generation += 1
            self._arm_locked(self._generation)

    def stop(self) -> None:
        with self._lock:
            self._cancel_job_locked()
            if self._running:
                self._generation += 1
            self._running = False

    def _arm_locked(self, generation: int) -> None:
        self._job = self.scheduler.schedule(
            self.interval,
            lambda: self._fire(generation),
        )

    def _cancel_job_locked(self) -> None:
        if self._job is None:
            return
        try:
            self.scheduler.cancel(self._job)
        except Exception:
            self.logger.exception("Failed to cancel pacing tick")
        self._job = None

    def _fire(self, generation: int) -> None:
        with self._lock:
            if not self._running or generation != self._generation:
                return
            self._job = None
        try:
            self.on_tick(self.interval)
        except Exception:
            self.logger.exception("Pacing tick callback failed")
        with self._lock:
            if self._running and generation == self._generation and self._job is None:
                self._arm_locked(generation)
