"""Configuration models and helpers for the focus tracker."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

DEFAULT_FOCUS_APP = "com.microsoft.VSCode"
DEFAULT_CHECK_SECONDS = 1
DEFAULT_FOCUS_MINUTES = 12


class ConfigurationError(ValueError):
    """Raised when the tracker cannot start with the supplied settings."""


@dataclass(slots=True, frozen=True)
class TrackerConfig:
    """Immutable runtime configuration for the focus tracker."""

    focus_app: str = DEFAULT_FOCUS_APP
    poll_interval: timedelta = timedelta(seconds=DEFAULT_CHECK_SECONDS)
    focus_threshold: timedelta = timedelta(minutes=DEFAULT_FOCUS_MINUTES)
    display_enabled: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.focus_app, str) or not self.focus_app.strip():
            raise ConfigurationError("focus app identifier must be a non-empty string")
        if self.poll_interval <= timedelta(0):
            raise ConfigurationError("poll interval must be greater than zero")
        if self.focus_threshold <= timedelta(0):
            raise ConfigurationError("focus threshold must be greater than zero")
        if self.focus_threshold < self.poll_interval:
            raise ConfigurationError(
                "focus threshold must be at least one poll interval "
                f"({self.focus_threshold} < {self.poll_interval})"
            )

    @classmethod
    def from_settings(
        cls,
        focus_app: str,
        check_seconds: int,
        focus_minutes: int,
        display_enabled: bool = False,
    ) -> "TrackerConfig":
        for name, value in (("check interval", check_seconds), ("focus time", focus_minutes)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigurationError(f"{name} must be greater than zero, got {value}")
        return cls(
            focus_app=focus_app.strip() if isinstance(focus_app, str) else focus_app,
            poll_interval=timedelta(seconds=check_seconds),
            focus_threshold=timedelta(minutes=focus_minutes),
            display_enabled=display_enabled,
        )
