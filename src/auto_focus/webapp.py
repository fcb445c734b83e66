"""FastAPI application that shows the live focus timer."""

from __future__ import annotations

import logging
import threading
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Callable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict

from .config import TrackerConfig
from .status import StatusBoard
from .tracker import FocusTracker

logger = logging.getLogger(__name__)


class TrackerRunner:
    """Manage the focus tracker in a background thread."""

    def __init__(self, tracker_factory: Callable[[], FocusTracker]) -> None:
        self._tracker_factory = tracker_factory
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None

    def start(self) -> None:
        with self._lock:
            if self._thread and self._thread.is_alive():
                return
            stop_event = threading.Event()
            tracker = self._tracker_factory()
            thread = threading.Thread(
                target=tracker.run_until_stopped,
                args=(stop_event,),
                name="focus-tracker",
                daemon=True,
            )
            self._thread = thread
            self._stop_event = stop_event
            thread.start()
            logger.info("Tracker background thread started.")

    def stop(self, timeout: float = 10.0) -> None:
        thread: Optional[threading.Thread] = None
        with self._lock:
            if not self._thread or not self._thread.is_alive() or not self._stop_event:
                return
            self._stop_event.set()
            thread = self._thread
            self._thread = None
            self._stop_event = None
        if thread:
            thread.join(timeout=timeout)
            logger.info("Tracker background thread stopped.")

    def is_running(self) -> bool:
        with self._lock:
            return bool(self._thread and self._thread.is_alive())


class StatusPayload(BaseModel):
    tracker_running: bool
    focus_app: str
    elapsed_seconds: float
    timer: str
    updated_at: Optional[datetime] = None
    poll_seconds: float
    threshold_minutes: float

    model_config = ConfigDict(extra="forbid")


_INDEX_HTML = """<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>Auto-Focus</title>
  <style>
    body { font-family: -apple-system, sans-serif; text-align: center; margin-top: 4rem; }
    #timer { font-size: 4rem; font-variant-numeric: tabular-nums; }
  </style>
</head>
<body>
  <div>Current Timer</div>
  <div id="timer">00:00</div>
  <div id="app"></div>
  <p><button id="quit">Quit</button></p>
  <script>
    async function refresh() {
      const response = await fetch("/api/status");
      if (!response.ok) return;
      const status = await response.json();
      document.getElementById("timer").textContent = status.timer;
      document.getElementById("app").textContent = status.focus_app;
    }
    document.getElementById("quit").addEventListener("click", async () => {
      await fetch("/api/quit", { method: "POST" });
      document.body.textContent = "Auto-Focus stopped.";
    });
    refresh();
    setInterval(refresh, 1000);
  </script>
</body>
</html>
"""


def create_app(
    *,
    config: TrackerConfig,
    tracker_factory: Callable[[], FocusTracker],
    board: StatusBoard,
    on_quit: Optional[Callable[[], None]] = None,
) -> FastAPI:
    """Instantiate the FastAPI application around a tracker factory."""
    runner = TrackerRunner(tracker_factory)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        runner.start()
        try:
            yield
        finally:
            runner.stop()

    app = FastAPI(title="Auto-Focus", version="0.1.0", lifespan=lifespan)
    app.state.tracker_runner = runner
    app.state.status_board = board

    @app.get("/api/status", response_model=StatusPayload)
    def status(request: Request) -> StatusPayload:
        snapshot = request.app.state.status_board.snapshot()
        return StatusPayload(
            tracker_running=request.app.state.tracker_runner.is_running(),
            focus_app=config.focus_app,
            elapsed_seconds=snapshot.elapsed.total_seconds(),
            timer=snapshot.timer,
            updated_at=snapshot.updated_at,
            poll_seconds=config.poll_interval.total_seconds(),
            threshold_minutes=config.focus_threshold.total_seconds() / 60.0,
        )

    @app.post("/api/quit")
    def quit_tracker(request: Request) -> dict[str, bool]:
        logger.info("Quit requested from the dashboard.")
        request.app.state.tracker_runner.stop()
        if on_quit is not None:
            on_quit()
        return {"stopped": True}

    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        return _INDEX_HTML

    return app
