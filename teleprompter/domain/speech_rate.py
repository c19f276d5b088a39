"""Speed-from-speech policy.

A live transcript is sampled into a speaking rate and mapped onto a
playback multiplier around 1.0.
"""
from __future__ import annotations

import re

from ..utils import clamp

NORMAL_SPEECH_RATE = 150.0
MIN_SPEECH_MULTIPLIER = 0.5
MAX_SPEECH_MULTIPLIER = 2.0
SAMPLE_WINDOW_SECONDS = 1.0

# CJK ideographs and kana are spoken one unit per character.
_CJK_CHAR_RE = re.compile(r"[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]")
_WORD_RE = re.compile(r"[^\s\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]+")


def count_spoken_units(text: str) -> int:
    """Count words in a transcript, treating each CJK character as one word."""
    if not text:
        return 0
    return len(_CJK_CHAR_RE.findall(text)) + len(_WORD_RE.findall(text))


def speech_multiplier(
    words_per_minute: float,
    *,
    normal_rate: float = NORMAL_SPEECH_RATE,
    min_multiplier: float = MIN_SPEECH_MULTIPLIER,
    max_multiplier: float = MAX_SPEECH_MULTIPLIER,
) -> float:
    return clamp(float(words_per_minute) / float(normal_rate), min_multiplier, max_multiplier)


class SpeechRateEstimator:
    """Turns cumulative transcript updates into rate-limited multipliers.

    A multiplier is produced only once a full sample window has elapsed
    since ``reset`` (or since the previous produced sample) and only when
    the unit count grew since that sample. Partial transcription updates
    that rewrite the text without adding words are ignored.
    """

    def __init__(
        self,
        *,
        normal_rate: float = NORMAL_SPEECH_RATE,
        sample_window_seconds: float = SAMPLE_WINDOW_SECONDS,
    ) -> None:
        self.normal_rate = float(normal_rate)
        self.sample_window_seconds = float(sample_window_seconds)
        self.started_at: float | None = None
        self.last_unit_count = 0
        self.last_words_per_minute: float | None = None
        self.last_sample_at: float | None = None

    def reset(self, started_at: float) -> None:
        self.started_at = float(started_at)
        self.last_unit_count = 0
        self.last_words_per_minute = None
        self.last_sample_at = None

    def observe(self, transcript: str, now: float) -> float | None:
        if self.started_at is None:
            return None
        now = float(now)
        elapsed = now - self.started_at
        anchor = self.started_at if self.last_sample_at is None else self.last_sample_at
        units = count_spoken_units(transcript)
        if now - anchor <= self.sample_window_seconds or units <= self.last_unit_count:
            return None
        words_per_minute = units / elapsed * 60.0
        self.last_unit_count = units
        self.last_words_per_minute = words_per_minute
        self.last_sample_at = now
        return speech_multiplier(words_per_minute, normal_rate=self.normal_rate)
