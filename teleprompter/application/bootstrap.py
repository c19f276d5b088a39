"""Application bootstrap assembly for playback and speech-follow services."""
from __future__ import annotations

from dataclasses import dataclass

from ..config import AppConfig
from ..domain.speech_rate import SpeechRateEstimator
from .clock import ThreadingTickScheduler
from .controller import PlaybackController
from .ports import TickScheduler
from .speech_follow import SpeechFollowSession
from .speed_channel import SpeedUpdateChannel


@dataclass(frozen=True)
class AppServices:
    scheduler: TickScheduler
    speed_channel: SpeedUpdateChannel
    playback_controller: PlaybackController
    speech_session: SpeechFollowSession


def initialize_app_services(
    *,
    config: AppConfig,
    logger,
    scheduler: TickScheduler | None = None,
    speech_authorized: bool = True,
) -> AppServices:
    """Construct playback services and return a typed service bundle."""
    scheduler = scheduler or ThreadingTickScheduler()
    speed_channel = SpeedUpdateChannel(config.speed_update_queue_size, logger)
    controller = PlaybackController(
        scheduler,
        logger,
        tick_interval=config.tick_interval_seconds,
        chars_per_minute=config.reading_rate_cpm,
        min_duration_seconds=config.min_duration_seconds,
        speed_channel=speed_channel,
    )
    controller.set_content_height(config.content_height)
    speech_session = SpeechFollowSession(
        speed_channel,
        logger,
        estimator=SpeechRateEstimator(
            normal_rate=config.normal_speech_rate,
            sample_window_seconds=config.speech_sample_window_seconds,
        ),
        authorized=speech_authorized,
    )
    logger.debug(
        "Playback services ready: tick=%.3fs cpm=%.0f min_duration=%.0fs speech_rate=%.0f",
        config.tick_interval_seconds,
        config.reading_rate_cpm,
        config.min_duration_seconds,
        config.normal_speech_rate,
    )
    if config.speech_follow_enabled:
        speech_session.start()
    return AppServices(
        scheduler=scheduler,
        speed_channel=speed_channel,
        playback_controller=controller,
        speech_session=speech_session,
    )
