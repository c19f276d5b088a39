"""Single-line text renderer for playback snapshots."""

from __future__ import annotations

import sys
from typing import TextIO

from ..application.state import PlaybackSnapshot
from ..domain.pacing import format_time


class ConsolePresenter:
    def __init__(self, stream: TextIO | None = None, *, width: int = 30) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.width = max(1, int(width))
        self._finished_written = False

    def render(self, snapshot: PlaybackSnapshot) -> str:
        filled = int(round(snapshot.progress * self.width))
        bar = "#" * filled + "." * (self.width - filled)
        return (
            f"[{bar}] {snapshot.progress * 100:3.0f}%  "
            f"{format_time(snapshot.elapsed_time)} / {format_time(snapshot.total_duration)}  "
            f"x{snapshot.speed_multiplier:.2f}"
        )

    def __call__(self, snapshot: PlaybackSnapshot) -> None:
        if snapshot.is_finished and self._finished_written:
            return
        self.stream.write("\r" + self.render(snapshot))
        if snapshot.is_finished:
            self.stream.write("\n")
            self._finished_written = True
        else:
            self._finished_written = False
        self.stream.flush()
