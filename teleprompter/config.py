"""Configuration loading from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .utils import env_flag, parse_float_env, parse_int_env, resolve_path


@dataclass(frozen=True)
class AppConfig:
    log_level: str
    file_log_level: str
    log_dir: str
    log_file: str
    tick_interval_seconds: float = 0.1
    reading_rate_cpm: float = 200.0
    min_duration_seconds: float = 30.0
    normal_speech_rate: float = 150.0
    speech_sample_window_seconds: float = 1.0
    speed_update_queue_size: int = 8
    speech_follow_enabled: bool = False
    content_height: float = 1000.0


def load_config() -> AppConfig:
    base_dir = str(Path(__file__).resolve().parents[1])
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    file_log_level = os.getenv("FILE_LOG_LEVEL", "DEBUG").upper()
    log_dir = resolve_path(os.getenv("LOG_DIR", "logs"), base_dir)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(
        log_dir, f"teleprompter_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.log"
    )
    tick_interval_seconds = parse_float_env(
        "TICK_INTERVAL_SECONDS",
        0.1,
        min_value=0.01,
        max_value=1.0,
    )
    reading_rate_cpm = parse_float_env(
        "READING_RATE_CPM",
        200.0,
        min_value=10.0,
        max_value=2000.0,
    )
    min_duration_seconds = parse_float_env(
        "MIN_DURATION_SECONDS",
        30.0,
        min_value=1.0,
        max_value=3600.0,
    )
    normal_speech_rate = parse_float_env(
        "NORMAL_SPEECH_RATE",
        150.0,
        min_value=10.0,
        max_value=1000.0,
    )
    speech_sample_window_seconds = parse_float_env(
        "SPEECH_SAMPLE_WINDOW_SECONDS",
        1.0,
        min_value=0.1,
        max_value=60.0,
    )
    speed_update_queue_size = parse_int_env(
        "SPEED_UPDATE_QUEUE_SIZE",
        8,
        min_value=1,
        max_value=256,
    )
    speech_follow_enabled = env_flag("SPEECH_FOLLOW_ENABLED", "0")
    content_height = parse_float_env(
        "CONTENT_HEIGHT",
        1000.0,
        min_value=1000.0,
        max_value=1_000_000.0,
    )
    return AppConfig(
        log_level=log_level,
        file_log_level=file_log_level,
        log_dir=log_dir,
        log_file=log_file,
        tick_interval_seconds=tick_interval_seconds,
        reading_rate_cpm=reading_rate_cpm,
        min_duration_seconds=min_duration_seconds,
        normal_speech_rate=normal_speech_rate,
        speech_sample_window_seconds=speech_sample_window_seconds,
        speed_update_queue_size=speed_update_queue_size,
        speech_follow_enabled=speech_follow_enabled,
        content_height=content_height,
    )
