"""Toggle macOS Focus mode through AppleScript files."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from .observer import OSASCRIPT

logger = logging.getLogger(__name__)

# Turning Focus mode on is what silences notifications, hence the inversion.
ENABLE_NOTIFICATIONS_SCRIPT = "disableFocus.scpt"
DISABLE_NOTIFICATIONS_SCRIPT = "enableFocus.scpt"


class NotificationToggleError(RuntimeError):
    """The notification side effect could not be applied."""


class NotificationToggler(Protocol):
    def set_notifications(self, enable: bool) -> None:
        ...


class AppleScriptNotificationToggler:
    """Runs one of two compiled AppleScripts to switch Focus mode."""

    def __init__(
        self,
        scripts_dir: Path,
        executable: str = OSASCRIPT,
        timeout: float = 10.0,
    ) -> None:
        self.scripts_dir = Path(scripts_dir)
        self._executable = executable
        self._timeout = timeout

    def script_for(self, enable: bool) -> Path:
        name = ENABLE_NOTIFICATIONS_SCRIPT if enable else DISABLE_NOTIFICATIONS_SCRIPT
        return self.scripts_dir / name

    def set_notifications(self, enable: bool) -> None:
        script = self.script_for(enable)
        if not script.is_file():
            raise NotificationToggleError(f"Focus script not found: {script}")

        try:
            result = subprocess.run(
                [self._executable, str(script)],
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise NotificationToggleError(
                f"{script.name} did not finish within {self._timeout:g}s"
            ) from exc
        except OSError as exc:
            raise NotificationToggleError(f"Failed to run {self._executable}: {exc}") from exc

        if result.returncode != 0:
            raise NotificationToggleError(
                f"Failed to set Focus mode: exit status {result.returncode}, "
                f"{result.stderr.strip()}"
            )
        logger.info("Notifications %s.", "enabled" if enable else "disabled")
