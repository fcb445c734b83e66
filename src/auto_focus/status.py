"""Passive consumers of the tracker's elapsed-focus signal."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class StatusSink(Protocol):
    def update(self, elapsed: timedelta) -> None:
        ...


def format_timer(elapsed: timedelta) -> str:
    """Render elapsed time as MM:SS with minutes allowed past 59."""
    total_seconds = max(int(elapsed.total_seconds()), 0)
    minutes, secs = divmod(total_seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


class LogStatusSink:
    """Writes the current timer to the log on every update."""

    def __init__(self, label: str = "Current Timer") -> None:
        self.label = label

    def update(self, elapsed: timedelta) -> None:
        logger.info("%s: %s", self.label, format_timer(elapsed))


@dataclass(slots=True, frozen=True)
class StatusSnapshot:
    elapsed: timedelta
    updated_at: Optional[datetime]

    @property
    def timer(self) -> str:
        return format_timer(self.elapsed)


class StatusBoard:
    """Holds the latest elapsed value for readers on other threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._elapsed = timedelta(0)
        self._updated_at: Optional[datetime] = None

    def update(self, elapsed: timedelta) -> None:
        with self._lock:
            self._elapsed = elapsed
            self._updated_at = datetime.now()

    def snapshot(self) -> StatusSnapshot:
        with self._lock:
            return StatusSnapshot(elapsed=self._elapsed, updated_at=self._updated_at)
