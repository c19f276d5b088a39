"""Playback state owned by the playback controller."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.pacing import (
    DEFAULT_SPEED_PERCENT,
    MIN_CONTENT_HEIGHT,
    MIN_DURATION_SECONDS,
    multiplier_to_percent,
)


@dataclass(slots=True)
class PlaybackState:
    """Mutable state; written only by PlaybackController under its lock."""

    content: str = ""
    is_playing: bool = False
    progress: float = 0.0
    elapsed_time: float = 0.0
    speed_multiplier: float = DEFAULT_SPEED_PERCENT / 100.0
    total_duration: float = MIN_DURATION_SECONDS
    scroll_offset: float = 0.0
    content_height: float = MIN_CONTENT_HEIGHT

    def snapshot(self) -> "PlaybackSnapshot":
        return PlaybackSnapshot(
            is_playing=self.is_playing,
            progress=self.progress,
            elapsed_time=self.elapsed_time,
            speed_multiplier=self.speed_multiplier,
            total_duration=self.total_duration,
            scroll_offset=self.scroll_offset,
        )


@dataclass(frozen=True, slots=True)
class PlaybackSnapshot:
    """Read-only view handed to presentation observers."""

    is_playing: bool
    progress: float
    elapsed_time: float
    speed_multiplier: float
    total_duration: float
    scroll_offset: float

    @property
    def speed_percent(self) -> float:
        return multiplier_to_percent(self.speed_multiplier)

    @property
    def is_finished(self) -> bool:
        return self.progress >= 1.0
