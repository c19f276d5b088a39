"""Application layer orchestration."""

from .bootstrap import AppServices, initialize_app_services
from .clock import PacingClock, ThreadingTickScheduler
from .controller import PlaybackController
from .ports import TickScheduler
from .speech_follow import SpeechFollowSession
from .speed_channel import SpeedUpdateChannel
from .state import PlaybackSnapshot, PlaybackState

__all__ = [
    "AppServices",
    "PacingClock",
    "PlaybackController",
    "PlaybackSnapshot",
    "PlaybackState",
    "SpeechFollowSession",
    "SpeedUpdateChannel",
    "ThreadingTickScheduler",
    "TickScheduler",
    "initialize_app_services",
]
