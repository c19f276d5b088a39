"""Console entrypoint: play a text file at reading pace in the terminal."""
from __future__ import annotations

import argparse
import sys
import threading
from pathlib import Path
from typing import Sequence, TextIO

from .application.bootstrap import initialize_app_services
from .application.ports import TickScheduler
from .application.speech_follow import SpeechFollowSession
from .config import load_config
from .domain.document import TeleprompterDocument
from .logging_config import setup_logging
from .ui.console import ConsolePresenter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="teleprompter",
        description="Scroll through a text file at an estimated reading pace.",
    )
    parser.add_argument("file", type=Path, help="UTF-8 text file to play.")
    parser.add_argument(
        "--speed",
        type=float,
        default=None,
        help="Playback speed in percent (100 = normal).",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="Total reading time in seconds; estimated from length when omitted.",
    )
    parser.add_argument(
        "--speech-follow",
        action="store_true",
        help="Read cumulative transcript lines from stdin and follow the speaker's pace.",
    )
    return parser


def _pump_transcripts(session: SpeechFollowSession, stream: TextIO, logger) -> None:
    try:
        for line in stream:
            if not session.is_recording:
                return
            session.feed_transcript(line.rstrip("\n"))
    except (OSError, ValueError):
        logger.exception("Transcript stream failed")
    finally:
        session.stop()


def main(
    argv: Sequence[str] | None = None,
    *,
    scheduler: TickScheduler | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    logger = setup_logging(config)
    logger.info("Log file: %s", config.log_file)

    path: Path = args.file
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.exception("Failed to read text file: %s", path)
        return 2

    services = initialize_app_services(config=config, logger=logger, scheduler=scheduler)
    controller = services.playback_controller
    session = services.speech_session
    presenter = ConsolePresenter(stdout if stdout is not None else sys.stdout)
    finished = threading.Event()

    def on_snapshot(snapshot) -> None:
        presenter(snapshot)
        if snapshot.is_finished:
            finished.set()

    controller.subscribe(on_snapshot)
    if args.duration is not None:
        controller.setup_text(content, args.duration)
    else:
        controller.load_document(
            TeleprompterDocument(
                title=path.stem,
                content=content,
                chars_per_minute=config.reading_rate_cpm,
                min_duration_seconds=config.min_duration_seconds,
            )
        )
    if args.speed is not None:
        controller.update_speed(args.speed)
    if not content:
        logger.warning("Nothing to play: %s is empty", path)
        return 0

    if args.speech_follow and session.start():
        threading.Thread(
            target=_pump_transcripts,
            args=(session, stdin if stdin is not None else sys.stdin, logger),
            name="transcript-reader",
            daemon=True,
        ).start()

    controller.play()
    try:
        while not finished.wait(0.2):
            pass
    except KeyboardInterrupt:
        controller.pause()
        logger.info("Interrupted at %.1f%%", controller.progress * 100.0)
        return 130
    finally:
        session.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
