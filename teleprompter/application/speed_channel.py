"""Bounded hand-off of speed updates into the playback owner."""

from __future__ import annotations

import queue


class SpeedUpdateChannel:
    """Latest-wins queue of speed multipliers.

    Producers (speech callbacks on their own threads) never block; when the
    queue is full the oldest pending update is discarded.
    """

    def __init__(self, maxsize: int = 8, logger=None) -> None:
        self.maxsize = max(1, int(maxsize))
        self.logger = logger
        self.dropped = 0
        self._queue: queue.Queue[float] = queue.Queue(maxsize=self.maxsize)

    def publish(self, multiplier: float) -> None:
        while True:
            try:
                self._queue.put_nowait(float(multiplier))
                return
            except queue.Full:
                try:
                    stale = self._queue.get_nowait()
                except queue.Empty:
                    continue
                self.dropped += 1
                if self.logger is not None:
                    self.logger.debug("Dropped stale speed update: %.3f", stale)

    def drain(self) -> list[float]:
        values: list[float] = []
        while True:
            try:
                values.append(self._queue.get_nowait())
            except queue.Empty:
                return values

    def __len__(self) -> int:
        return self._queue.qsize()
