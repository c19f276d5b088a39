"""Tick scheduling on a tkinter event loop."""

from __future__ import annotations

from typing import Any, Callable


class TkAfterTickScheduler:
    """Runs pacing ticks through ``root.after`` on the Tk main thread."""

    def __init__(self, root) -> None:
        self.root = root

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> Any:
        delay_ms = max(1, int(round(float(delay_seconds) * 1000.0)))
        return self.root.after(delay_ms, callback)

    def cancel(self, handle: Any) -> None:
        if handle is None:
            return
        self.root.after_cancel(handle)
