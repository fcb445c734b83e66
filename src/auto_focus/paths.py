"""Per-user locations for the Focus scripts and the daemon log."""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs


APP_NAME = "AutoFocus"
APP_AUTHOR = "AutoFocus"


def get_data_dir() -> Path:
    """Return (and create) the per-user data directory."""
    dirs = PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR, roaming=True)
    path = Path(dirs.user_data_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_scripts_dir() -> Path:
    """Where ``enableFocus.scpt`` and ``disableFocus.scpt`` are looked up by default.

    The directory is not created; the toggler reports a missing script instead.
    """
    return get_data_dir() / "scripts"


def get_log_path() -> Path:
    """Log file shared by ``--log-file`` and the launchd agent's stdout/stderr."""
    return get_data_dir() / "auto-focus.log"
