"""Command-line interface for auto-focus."""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path
from typing import Optional

import typer

from .config import (
    DEFAULT_CHECK_SECONDS,
    DEFAULT_FOCUS_APP,
    DEFAULT_FOCUS_MINUTES,
    ConfigurationError,
    TrackerConfig,
)
from .launchd import DEFAULT_LABEL, write_plist
from .paths import get_log_path, get_scripts_dir

app = typer.Typer(help="Silence notifications while you stay focused in one app.")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@app.callback(no_args_is_help=True)
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
    log_file: bool = typer.Option(
        False, "--log-file", help="Also write logs to the application log file."
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )
    if log_file:
        handler = logging.FileHandler(get_log_path(), encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(handler)


def _build_config(
    focus_app: str, check_seconds: int, focus_minutes: int, show_timer: bool
) -> TrackerConfig:
    try:
        return TrackerConfig.from_settings(
            focus_app=focus_app,
            check_seconds=check_seconds,
            focus_minutes=focus_minutes,
            display_enabled=show_timer,
        )
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def run(
    focus_app: str = typer.Option(
        DEFAULT_FOCUS_APP,
        "--app",
        envvar="AUTO_FOCUS_APP",
        help="Bundle identifier of the application to track.",
    ),
    check_seconds: int = typer.Option(
        DEFAULT_CHECK_SECONDS,
        "--interval",
        envvar="AUTO_FOCUS_CHECK_INTERVAL",
        help="Sampling interval in seconds.",
    ),
    focus_minutes: int = typer.Option(
        DEFAULT_FOCUS_MINUTES,
        "--focus-time",
        envvar="AUTO_FOCUS_FOCUS_TIME",
        help="Minutes of continuous focus before notifications are silenced.",
    ),
    show_timer: bool = typer.Option(
        False,
        "--show-timer/--no-show-timer",
        envvar="AUTO_FOCUS_SHOW_TIMER",
        help="Log the running focus timer on every sample.",
    ),
    scripts_dir: Optional[Path] = typer.Option(
        None,
        "--scripts-dir",
        envvar="AUTO_FOCUS_SCRIPTS_DIR",
        path_type=Path,
        help="Directory holding enableFocus.scpt and disableFocus.scpt.",
    ),
) -> None:
    """Run the focus tracker until interrupted."""
    from .status import LogStatusSink
    from .tracker import create_tracker

    config = _build_config(focus_app, check_seconds, focus_minutes, show_timer)
    tracker = create_tracker(
        config,
        scripts_dir or get_scripts_dir(),
        LogStatusSink() if config.display_enabled else None,
    )
    tracker.run_forever()


@app.command()
def web(
    focus_app: str = typer.Option(
        DEFAULT_FOCUS_APP,
        "--app",
        envvar="AUTO_FOCUS_APP",
        help="Bundle identifier of the application to track.",
    ),
    check_seconds: int = typer.Option(
        DEFAULT_CHECK_SECONDS,
        "--interval",
        envvar="AUTO_FOCUS_CHECK_INTERVAL",
        help="Sampling interval in seconds.",
    ),
    focus_minutes: int = typer.Option(
        DEFAULT_FOCUS_MINUTES,
        "--focus-time",
        envvar="AUTO_FOCUS_FOCUS_TIME",
        help="Minutes of continuous focus before notifications are silenced.",
    ),
    scripts_dir: Optional[Path] = typer.Option(
        None,
        "--scripts-dir",
        envvar="AUTO_FOCUS_SCRIPTS_DIR",
        path_type=Path,
        help="Directory holding enableFocus.scpt and disableFocus.scpt.",
    ),
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind the dashboard."),
    port: int = typer.Option(
        8766, "--port", min=1, max=65535, help="TCP port for the dashboard."
    ),
    open_browser: bool = typer.Option(
        True,
        "--open-browser/--no-open-browser",
        help="Automatically launch the dashboard in your default browser.",
    ),
) -> None:
    """Start the tracker together with a live timer page."""
    from .server_runner import run_dashboard

    config = _build_config(focus_app, check_seconds, focus_minutes, True)
    run_dashboard(
        config,
        scripts_dir=scripts_dir,
        host=host,
        port=port,
        open_browser=open_browser,
    )


@app.command()
def frontmost() -> None:
    """Print the bundle identifier of the frontmost application."""
    from .observer import AppleScriptWindowObserver, WindowObserverError

    try:
        identifier = AppleScriptWindowObserver().frontmost_identifier()
    except WindowObserverError as exc:
        typer.echo(f"Failed to get active window: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(identifier or "(none)")


@app.command()
def plist(
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        path_type=Path,
        help="Where to write the launchd agent (defaults to ./<label>.plist).",
    ),
    label: str = typer.Option(DEFAULT_LABEL, "--label", help="launchd job label."),
    program: Optional[Path] = typer.Option(
        None,
        "--program",
        path_type=Path,
        help="Path of the auto-focus executable launchd should start.",
    ),
) -> None:
    """Generate a launchd agent that starts the tracker at login."""
    target = output or Path(f"{label}.plist")
    executable = program or _default_program()
    write_plist(target, executable, label=label)
    typer.echo(f"{target} generated successfully")


def _default_program() -> Path:
    found = shutil.which("auto-focus")
    if found:
        return Path(found)
    return Path(sys.argv[0]).resolve()
