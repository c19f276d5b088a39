"""Pure pacing and speech-rate rules with no runtime dependencies."""

from .document import TeleprompterDocument
from .pacing import (
    DEFAULT_READING_RATE_CPM,
    MAX_SPEED_MULTIPLIER,
    MIN_DURATION_SECONDS,
    MIN_SPEED_MULTIPLIER,
    TICK_INTERVAL_SECONDS,
    advance_progress,
    clamp_progress,
    clamp_speed_multiplier,
    estimate_duration,
    format_time,
    multiplier_to_percent,
    percent_to_multiplier,
    progress_to_offset,
)
from .speech_rate import SpeechRateEstimator, count_spoken_units, speech_multiplier

__all__ = [
    "DEFAULT_READING_RATE_CPM",
    "MAX_SPEED_MULTIPLIER",
    "MIN_DURATION_SECONDS",
    "MIN_SPEED_MULTIPLIER",
    "SpeechRateEstimator",
    "TICK_INTERVAL_SECONDS",
    "TeleprompterDocument",
    "advance_progress",
    "clamp_progress",
    "clamp_speed_multiplier",
    "count_spoken_units",
    "estimate_duration",
    "format_time",
    "multiplier_to_percent",
    "percent_to_multiplier",
    "progress_to_offset",
    "speech_multiplier",
]
