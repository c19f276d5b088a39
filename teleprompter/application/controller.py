"""Playback controller: owns reading progress and converts ticks into motion."""

from __future__ import annotations

import math
import threading
from typing import Callable

from ..domain.document import TeleprompterDocument
from ..domain.pacing import (
    DEFAULT_READING_RATE_CPM,
    MIN_CONTENT_HEIGHT,
    MIN_DURATION_SECONDS,
    TICK_INTERVAL_SECONDS,
    advance_progress,
    clamp_progress,
    clamp_speed_multiplier,
    estimate_duration,
    floor_duration,
    percent_to_multiplier,
    progress_to_offset,
)
from ..utils import coerce_float
from .clock import PacingClock
from .ports import TickScheduler
from .speed_channel import SpeedUpdateChannel
from .state import PlaybackSnapshot, PlaybackState

PlaybackObserver = Callable[[PlaybackSnapshot], None]


class PlaybackController:
    """Single writer of PlaybackState.

    Every mutation happens under ``_lock`` and stamps the snapshot it
    publishes with a sequence number. Observers run after ``_lock`` is
    released, so they may call back into the controller; delivery is
    serialized by ``_notify_lock`` and a snapshot older than one already
    delivered is dropped.
    """

    def __init__(
        self,
        scheduler: TickScheduler,
        logger,
        *,
        tick_interval: float = TICK_INTERVAL_SECONDS,
        chars_per_minute: float = DEFAULT_READING_RATE_CPM,
        min_duration_seconds: float = MIN_DURATION_SECONDS,
        speed_channel: SpeedUpdateChannel | None = None,
    ) -> None:
        self.logger = logger
        self.chars_per_minute = float(chars_per_minute)
        self.min_duration_seconds = float(min_duration_seconds)
        self.speed_channel = speed_channel
        self._lock = threading.RLock()
        self._state = PlaybackState(total_duration=self.min_duration_seconds)
        self._observers: list[PlaybackObserver] = []
        self._notify_lock = threading.RLock()
        self._sequence = 0
        self._delivered_sequence = 0
        self.clock = PacingClock(scheduler, self._on_tick, logger, interval=tick_interval)

    # Observation

    def subscribe(self, observer: PlaybackObserver) -> Callable[[], None]:
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def snapshot(self) -> PlaybackSnapshot:
        with self._lock:
            return self._state.snapshot()

    @property
    def is_playing(self) -> bool:
        return self.snapshot().is_playing

    @property
    def progress(self) -> float:
        return self.snapshot().progress

    @property
    def elapsed_time(self) -> float:
        return self.snapshot().elapsed_time

    @property
    def speed_multiplier(self) -> float:
        return self.snapshot().speed_multiplier

    @property
    def speed_percent(self) -> float:
        return self.snapshot().speed_percent

    @property
    def total_duration(self) -> float:
        return self.snapshot().total_duration

    @property
    def scroll_offset(self) -> float:
        return self.snapshot().scroll_offset

    @property
    def content(self) -> str:
        with self._lock:
            return self._state.content

    def _capture_locked(self) -> tuple[int, PlaybackSnapshot]:
        self._sequence += 1
        return self._sequence, self._state.snapshot()

    def _notify(self, published: tuple[int, PlaybackSnapshot]) -> None:
        sequence, snapshot = published
        with self._notify_lock:
            if sequence <= self._delivered_sequence:
                return
            self._delivered_sequence = sequence
            with self._lock:
                observers = list(self._observers)
            for observer in observers:
                # An observer re-entering the controller may already have
                # delivered something newer.
                if sequence < self._delivered_sequence:
                    return
                try:
                    observer(snapshot)
                except Exception:
                    self.logger.exception("Playback observer failed")

    # Document setup

    def setup_text(self, content: str, duration: float | None = None) -> None:
        """Load new text; state is replaced and the speed setting kept."""
        content = content or ""
        value = math.nan if duration is None else coerce_float(duration, default=math.nan)
        if not math.isfinite(value):
            total_duration = estimate_duration(
                content,
                chars_per_minute=self.chars_per_minute,
                min_seconds=self.min_duration_seconds,
            )
        else:
            total_duration = floor_duration(
                value,
                min_seconds=self.min_duration_seconds,
            )
        with self._lock:
            self.clock.stop()
            previous = self._state
            self._state = PlaybackState(
                content=content,
                total_duration=total_duration,
                speed_multiplier=previous.speed_multiplier,
                content_height=previous.content_height,
            )
            published = self._capture_locked()
        self.logger.info(
            "Playback text loaded: chars=%s total_duration=%.1fs",
            len(content),
            total_duration,
        )
        self._notify(published)

    def load_document(self, document: TeleprompterDocument) -> None:
        self.setup_text(document.content, document.estimated_duration)

    def set_content_height(self, height: float) -> None:
        with self._lock:
            state = self._state
            state.content_height = max(
                coerce_float(height, default=MIN_CONTENT_HEIGHT), MIN_CONTENT_HEIGHT
            )
            state.scroll_offset = progress_to_offset(state.progress, state.content_height)
            published = self._capture_locked()
        self._notify(published)

    # Transport

    def play(self) -> None:
        with self._lock:
            state = self._state
            if not state.content:
                return
            if state.is_playing:
                return
            if state.progress >= 1.0:
                self._set_progress_locked(0.0)
            state.is_playing = True
            self.clock.start()
            published = self._capture_locked()
        self.logger.info("Playback started at %.3f", published[1].progress)
        self._notify(published)

    def pause(self) -> None:
        with self._lock:
            changed = self._pause_locked()
            published = self._capture_locked() if changed else None
        if published is not None:
            self.logger.info("Playback paused at %.3f", published[1].progress)
            self._notify(published)

    def toggle_playback(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def reset_playback(self) -> None:
        with self._lock:
            self._pause_locked()
            self._set_progress_locked(0.0)
            published = self._capture_locked()
        self.logger.info("Playback reset")
        self._notify(published)

    def stop(self) -> None:
        self.reset_playback()

    def seek_to(self, progress: float) -> None:
        with self._lock:
            target = coerce_float(progress, default=self._state.progress)
            self._set_progress_locked(clamp_progress(target))
            published = self._capture_locked()
        self._notify(published)

    # Speed

    def update_speed(self, speed_percent: float) -> None:
        """Set speed as a percentage, e.g. 200 plays twice as fast."""
        with self._lock:
            current = self._state.speed_multiplier * 100.0
            multiplier = percent_to_multiplier(coerce_float(speed_percent, default=current))
            self._apply_speed_locked(multiplier)
            published = self._capture_locked()
        self.logger.info("Playback speed set: %.0f%%", published[1].speed_percent)
        self._notify(published)

    def update_speed_multiplier(self, multiplier: float) -> None:
        with self._lock:
            current = self._state.speed_multiplier
            value = clamp_speed_multiplier(coerce_float(multiplier, default=current))
            self._apply_speed_locked(value)
            published = self._capture_locked()
        self.logger.debug("Playback speed multiplier set: %.3f", published[1].speed_multiplier)
        self._notify(published)

    def drain_speed_updates(self) -> int:
        """Apply the newest queued speech multiplier, if any."""
        if self.speed_channel is None:
            return 0
        values = self.speed_channel.drain()
        if values:
            self.update_speed_multiplier(values[-1])
        return len(values)

    def _apply_speed_locked(self, multiplier: float) -> None:
        state = self._state
        state.speed_multiplier = multiplier
        if state.is_playing:
            # Restart so the new rate applies from the next full tick; the
            # partial tick in flight is dropped.
            self.clock.stop()
            self.clock.start()

    # Ticks

    def _on_tick(self, interval: float) -> None:
        finished = False
        with self._lock:
            state = self._state
            if not state.is_playing or state.total_duration <= 0:
                return
            progress = advance_progress(
                state.progress,
                interval=interval,
                speed_multiplier=state.speed_multiplier,
                total_duration=state.total_duration,
            )
            self._set_progress_locked(progress)
            if state.progress >= 1.0:
                finished = self._pause_locked()
            published = self._capture_locked()
        if finished:
            self.logger.info("Playback finished")
        self._notify(published)
        if not finished:
            self.drain_speed_updates()

    def _set_progress_locked(self, progress: float) -> None:
        state = self._state
        state.progress = progress
        state.elapsed_time = state.total_duration * progress
        state.scroll_offset = progress_to_offset(progress, state.content_height)

    def _pause_locked(self) -> bool:
        self.clock.stop()
        if not self._state.is_playing:
            return False
        self._state.is_playing = False
        return True
