"""Pure arithmetic behind the reading pace.

Progress is a normalized fraction of the document. The document is treated
as uniform density: a fixed number of characters per minute, so position
advances linearly with wall-clock time and the speed multiplier.
"""
from __future__ import annotations

import math

from ..utils import clamp

TICK_INTERVAL_SECONDS = 0.1
DEFAULT_READING_RATE_CPM = 200.0
MIN_DURATION_SECONDS = 30.0
MIN_SPEED_MULTIPLIER = 0.1
MAX_SPEED_MULTIPLIER = 3.0
DEFAULT_SPEED_PERCENT = 100.0
MIN_CONTENT_HEIGHT = 1000.0


def estimate_duration(
    content: str,
    *,
    chars_per_minute: float = DEFAULT_READING_RATE_CPM,
    min_seconds: float = MIN_DURATION_SECONDS,
) -> float:
    """Estimated reading time in seconds, never below ``min_seconds``."""
    rate = max(float(chars_per_minute), 1e-6)
    return max(float(min_seconds), len(content or "") / rate * 60.0)


def floor_duration(duration: float | None, *, min_seconds: float = MIN_DURATION_SECONDS) -> float:
    if duration is None or not math.isfinite(float(duration)):
        return float(min_seconds)
    return max(float(min_seconds), float(duration))


def clamp_progress(progress: float) -> float:
    return clamp(float(progress), 0.0, 1.0)


def clamp_speed_multiplier(multiplier: float) -> float:
    # Zero and negative values would stall or reverse the clock.
    return clamp(float(multiplier), MIN_SPEED_MULTIPLIER, MAX_SPEED_MULTIPLIER)


def percent_to_multiplier(speed_percent: float) -> float:
    return clamp_speed_multiplier(float(speed_percent) / 100.0)


def multiplier_to_percent(multiplier: float) -> float:
    return float(multiplier) * 100.0


def tick_increment(interval: float, speed_multiplier: float, total_duration: float) -> float:
    if total_duration <= 0:
        return 0.0
    return float(interval) * float(speed_multiplier) / float(total_duration)


def advance_progress(
    progress: float,
    *,
    interval: float,
    speed_multiplier: float,
    total_duration: float,
) -> float:
    """Progress after one tick; monotonic and capped at 1.0."""
    increment = max(0.0, tick_increment(interval, speed_multiplier, total_duration))
    return min(1.0, clamp_progress(progress) + increment)


def progress_to_offset(progress: float, content_height: float) -> float:
    return clamp_progress(progress) * max(float(content_height), MIN_CONTENT_HEIGHT)


def format_time(seconds: float) -> str:
    """Render seconds as ``m:ss``."""
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes}:{secs:02d}"
