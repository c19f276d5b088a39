"""Presentation-side adapters."""

from .console import ConsolePresenter
from .tk_scheduler import TkAfterTickScheduler

__all__ = ["ConsolePresenter", "TkAfterTickScheduler"]
