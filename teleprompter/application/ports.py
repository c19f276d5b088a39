"""Application-level ports for tick scheduling."""

from __future__ import annotations

from typing import Any, Callable, Protocol


class TickScheduler(Protocol):
    """One-shot delayed callbacks; the pacing clock re-arms after each tick."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> Any: ...

    def cancel(self, handle: Any) -> None: ...
