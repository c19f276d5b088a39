import pytest

from teleprompter.application.speech_follow import SpeechFollowSession
from teleprompter.application.speed_channel import SpeedUpdateChannel


class _Logger:
    def __init__(self):
        self.infos = []
        self.warnings = []
        self.debugs = []

    def info(self, message, *args):
        self.infos.append(message % args if args else message)

    def warning(self, message, *args):
        self.warnings.append(message % args if args else message)

    def debug(self, message, *args):
        self.debugs.append(message % args if args else message)


class _Clock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def _session(*, authorized=True):
    clock = _Clock()
    channel = SpeedUpdateChannel(8)
    logger = _Logger()
    session = SpeechFollowSession(channel, logger, clock=clock, authorized=authorized)
    return session, channel, clock, logger


def test_unauthorized_session_refuses_to_start():
    session, channel, _clock, logger = _session(authorized=False)

    assert session.start() is False
    assert session.is_recording is False
    assert session.feed_transcript("one two three", now=5.0) is None
    assert channel.drain() == []
    assert logger.warnings


def test_transcript_updates_publish_multipliers():
    session, channel, clock, _logger = _session()
    assert session.start() is True

    assert session.feed_transcript("one two", now=0.5) is None
    clock.now = 2.0
    multiplier = session.feed_transcript("one two three four five")

    assert multiplier == pytest.approx(1.0)
    assert session.recognized_text == "one two three four five"
    assert channel.drain() == [pytest.approx(1.0)]


def test_final_result_ends_session():
    session, channel, _clock, _logger = _session()
    session.start()

    session.feed_transcript("a b c d e f g h i j k l", now=2.0, is_final=True)

    assert session.is_recording is False
    assert channel.drain() == [pytest.approx(2.0)]
    assert session.feed_transcript("a b c d e f g h i j k l m n", now=3.0) is None


def test_restart_clears_transcript_and_rate_window():
    session, channel, clock, logger = _session()
    session.start()
    session.feed_transcript("a b c", now=2.0)
    channel.drain()

    clock.now = 10.0
    session.start()
    assert session.recognized_text == ""
    assert session.feed_transcript("a b c", now=10.5) is None
    assert "Speech follow restarted" in logger.infos


def test_toggle_and_revoking_authorization_stop_recording():
    session, _channel, _clock, _logger = _session()

    assert session.toggle() is True
    assert session.is_recording is True
    assert session.toggle() is False
    assert session.is_recording is False

    session.start()
    session.set_authorized(False)
    assert session.is_recording is False
    assert session.is_authorized is False
