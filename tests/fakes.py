"""Scripted stand-ins for the observer, toggler and status sink."""

from __future__ import annotations

from datetime import timedelta
from typing import Iterable, Optional, Union

from auto_focus.notifications import NotificationToggleError
from auto_focus.observer import WindowObserverError

Sample = Union[bool, BaseException]


class ScriptedObserver:
    """Replays a list of samples; an exception instance is raised instead of returned."""

    def __init__(self, samples: Iterable[Sample] = (), default: Optional[bool] = None) -> None:
        self.samples = list(samples)
        self.default = default
        self.queries: list[str] = []

    def is_frontmost(self, app_identifier: str) -> bool:
        self.queries.append(app_identifier)
        if not self.samples:
            if self.default is None:
                raise AssertionError("observer ran out of samples")
            return self.default
        sample = self.samples.pop(0)
        if isinstance(sample, BaseException):
            raise sample
        return sample


class RecordingToggler:
    """Records every call; pops queued failures before succeeding."""

    def __init__(self, failures: Iterable[bool] = ()) -> None:
        self.calls: list[bool] = []
        self.failures = list(failures)

    def set_notifications(self, enable: bool) -> None:
        self.calls.append(enable)
        if self.failures and self.failures.pop(0):
            raise NotificationToggleError("script failed")


class RecordingSink:
    def __init__(self) -> None:
        self.updates: list[timedelta] = []

    def update(self, elapsed: timedelta) -> None:
        self.updates.append(elapsed)


def observer_error() -> WindowObserverError:
    return WindowObserverError("System Events did not answer")
