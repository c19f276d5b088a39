"""Speech-follow session bridging live transcripts into playback speed."""

from __future__ import annotations

import threading
import time
from typing import Callable

from ..domain.speech_rate import SpeechRateEstimator
from .speed_channel import SpeedUpdateChannel


class SpeechFollowSession:
    """Receives cumulative transcript updates from a recognizer callback.

    Transcription itself happens elsewhere; this session only samples the
    text it is handed and publishes rate-limited multipliers to the
    playback owner through ``channel``.
    """

    def __init__(
        self,
        channel: SpeedUpdateChannel,
        logger,
        *,
        estimator: SpeechRateEstimator | None = None,
        clock: Callable[[], float] = time.monotonic,
        authorized: bool = True,
    ) -> None:
        self.channel = channel
        self.logger = logger
        self.estimator = estimator or SpeechRateEstimator()
        self.clock = clock
        self._lock = threading.Lock()
        self._authorized = bool(authorized)
        self._recording = False
        self._recognized_text = ""

    @property
    def is_authorized(self) -> bool:
        return self._authorized

    @property
    def is_recording(self) -> bool:
        with self._lock:
            return self._recording

    @property
    def recognized_text(self) -> str:
        with self._lock:
            return self._recognized_text

    def set_authorized(self, authorized: bool) -> None:
        self._authorized = bool(authorized)
        if not self._authorized:
            self.stop()

    def start(self) -> bool:
        if not self._authorized:
            self.logger.warning("Speech follow not authorized; not starting")
            return False
        with self._lock:
            self._recognized_text = ""
            self.estimator.reset(self.clock())
            was_recording = self._recording
            self._recording = True
        if was_recording:
            self.logger.info("Speech follow restarted")
        else:
            self.logger.info("Speech follow started")
        return True

    def stop(self) -> None:
        with self._lock:
            if not self._recording:
                return
            self._recording = False
        self.logger.info("Speech follow stopped")

    def toggle(self) -> bool:
        if self.is_recording:
            self.stop()
            return False
        return self.start()

    def feed_transcript(
        self,
        text: str,
        *,
        now: float | None = None,
        is_final: bool = False,
    ) -> float | None:
        """Record a transcript update; returns the multiplier published, if any."""
        with self._lock:
            if not self._recording:
                return None
            self._recognized_text = text or ""
            timestamp = self.clock() if now is None else float(now)
            multiplier = self.estimator.observe(self._recognized_text, timestamp)
        if multiplier is not None:
            self.logger.debug(
                "Speech rate sample: wpm=%.1f multiplier=%.3f",
                self.estimator.last_words_per_minute or 0.0,
                multiplier,
            )
            self.channel.publish(multiplier)
        if is_final:
            self.stop()
        return multiplier
