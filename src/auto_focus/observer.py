"""Frontmost application probes for macOS."""

from __future__ import annotations

import logging
import subprocess
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

OSASCRIPT = "osascript"
FRONTMOST_QUERY = (
    'tell application "System Events" to get bundle identifier '
    "of application processes whose frontmost is true"
)


class WindowObserverError(RuntimeError):
    """The frontmost application could not be determined."""


class WindowObserver(Protocol):
    def is_frontmost(self, app_identifier: str) -> bool:
        ...


class AppleScriptWindowObserver:
    """Asks System Events for the bundle identifier of the frontmost process."""

    def __init__(self, executable: str = OSASCRIPT, timeout: float = 2.0) -> None:
        self._executable = executable
        self._timeout = timeout

    def frontmost_identifier(self) -> Optional[str]:
        try:
            result = subprocess.run(
                [self._executable, "-e", FRONTMOST_QUERY],
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise WindowObserverError(
                f"{self._executable} did not answer within {self._timeout:g}s"
            ) from exc
        except OSError as exc:
            raise WindowObserverError(f"Failed to run {self._executable}: {exc}") from exc

        if result.returncode != 0:
            raise WindowObserverError(
                f"{self._executable} exited with status {result.returncode}: "
                f"{result.stderr.strip()}"
            )
        return normalize_identifier(result.stdout)

    def is_frontmost(self, app_identifier: str) -> bool:
        identifier = self.frontmost_identifier()
        logger.debug("Frontmost application: %s", identifier)
        return identifier == app_identifier


def normalize_identifier(raw: Optional[str]) -> Optional[str]:
    """Strip whitespace and AppleScript's "missing value" placeholder."""
    if raw is None:
        return None
    value = raw.strip()
    if not value or value == "missing value":
        return None
    return value
