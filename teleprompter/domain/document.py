"""Text document metadata fed into playback."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .pacing import DEFAULT_READING_RATE_CPM, MIN_DURATION_SECONDS, estimate_duration


@dataclass
class TeleprompterDocument:
    title: str
    content: str
    chars_per_minute: float = DEFAULT_READING_RATE_CPM
    min_duration_seconds: float = MIN_DURATION_SECONDS
    created_at: datetime = field(default_factory=datetime.now)
    last_modified: datetime | None = None
    word_count: int = field(init=False, default=0)
    estimated_duration: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        if self.last_modified is None:
            self.last_modified = self.created_at
        self._refresh_metrics()

    def _refresh_metrics(self) -> None:
        # Character count, which is also the word count for CJK scripts.
        self.word_count = len(self.content)
        self.estimated_duration = estimate_duration(
            self.content,
            chars_per_minute=self.chars_per_minute,
            min_seconds=self.min_duration_seconds,
        )

    def update_content(self, content: str) -> None:
        self.content = content or ""
        self.last_modified = datetime.now()
        self._refresh_metrics()

    def update_title(self, title: str) -> None:
        self.title = title
        self.last_modified = datetime.now()

    @property
    def is_empty(self) -> bool:
        return not self.content
