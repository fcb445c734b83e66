"""Helpers to launch the local status dashboard."""

from __future__ import annotations

import logging
import threading
import time
import webbrowser
from dataclasses import replace
from pathlib import Path
from typing import Optional

import uvicorn

from .config import TrackerConfig
from .paths import get_scripts_dir
from .status import StatusBoard
from .tracker import create_tracker
from .webapp import create_app


def run_dashboard(
    config: TrackerConfig,
    *,
    scripts_dir: Optional[Path] = None,
    host: str = "127.0.0.1",
    port: int = 8766,
    open_browser: bool = True,
    log_level: str = "info",
) -> None:
    """Run the tracker in the background and serve its timer until quit."""
    config = replace(config, display_enabled=True)
    board = StatusBoard()
    resolved_scripts = Path(scripts_dir or get_scripts_dir())
    server: Optional[uvicorn.Server] = None

    def _request_exit() -> None:
        if server is not None:
            server.should_exit = True

    app = create_app(
        config=config,
        tracker_factory=lambda: create_tracker(config, resolved_scripts, board),
        board=board,
        on_quit=_request_exit,
    )

    if open_browser:
        url = f"http://{host}:{port}"
        threading.Thread(
            target=_launch_browser_after_delay, args=(url,), daemon=True
        ).start()

    logging.getLogger("uvicorn.error").setLevel(log_level.upper())
    server = uvicorn.Server(uvicorn.Config(app, host=host, port=port, log_level=log_level))
    server.run()


def _launch_browser_after_delay(url: str) -> None:
    time.sleep(1.0)
    try:
        webbrowser.open(url)
    except Exception:
        logging.getLogger(__name__).exception("Failed to launch browser for %s", url)
