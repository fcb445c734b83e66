"""Domain models for focus tracking."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class Transition(str, Enum):
    """Classification of a single successful sample."""

    REMAIN_INACTIVE = "remain_inactive"
    BECOME_ACTIVE = "become_active"
    REMAIN_ACTIVE = "remain_active"
    BECOME_INACTIVE = "become_inactive"


@dataclass(slots=True)
class TrackerState:
    """Mutable tracker state, owned by a single FocusTracker."""

    is_focus_app_active: bool = False
    elapsed_focus: timedelta = timedelta(0)
    notifications_suppressed: bool = False

    def reset_session(self) -> None:
        self.elapsed_focus = timedelta(0)
