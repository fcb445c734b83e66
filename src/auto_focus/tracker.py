"""Focus tracking loop and suppression state machine."""

from __future__ import annotations

import logging
import signal
import threading
from dataclasses import replace
from datetime import timedelta
from pathlib import Path
from typing import Optional

from .config import TrackerConfig
from .models import TrackerState, Transition
from .notifications import (
    AppleScriptNotificationToggler,
    NotificationToggleError,
    NotificationToggler,
)
from .observer import AppleScriptWindowObserver, WindowObserver, WindowObserverError
from .status import StatusSink

logger = logging.getLogger(__name__)


class FocusTracker:
    """Samples the frontmost app at a fixed interval and toggles notifications.

    A single thread drives :meth:`tick`; it is the only writer of the
    tracker state. Other threads learn about progress through the status
    sink, which receives a copy of the elapsed time after each sample.
    """

    def __init__(
        self,
        observer: WindowObserver,
        toggler: NotificationToggler,
        config: TrackerConfig,
        status_sink: Optional[StatusSink] = None,
    ) -> None:
        self.config = config
        self._observer = observer
        self._toggler = toggler
        self._status_sink = status_sink
        self._state = TrackerState()

    @property
    def state(self) -> TrackerState:
        return replace(self._state)

    @property
    def elapsed(self) -> timedelta:
        return self._state.elapsed_focus

    def run_forever(self) -> None:
        """Run until Ctrl-C or SIGTERM; a tick in progress is allowed to finish."""
        stop_event = threading.Event()

        def _terminate(signum, frame) -> None:
            logger.info("Received signal %s; stopping after the current sample.", signum)
            stop_event.set()

        previous = None
        if threading.current_thread() is threading.main_thread():
            previous = signal.signal(signal.SIGTERM, _terminate)
        try:
            self.run_until_stopped(stop_event)
        except KeyboardInterrupt:
            logger.info("Tracker interrupted.")
        finally:
            if previous is not None:
                signal.signal(signal.SIGTERM, previous)

    def run_until_stopped(self, stop_event: threading.Event) -> None:
        """Run the tracker until the provided event is set."""
        logger.info(
            "Watching %s every %ss; focus threshold %s.",
            self.config.focus_app,
            self.config.poll_interval.total_seconds(),
            self.config.focus_threshold,
        )
        interval = self.config.poll_interval.total_seconds()
        try:
            while not stop_event.is_set():
                self.tick()
                stop_event.wait(interval)
        finally:
            logger.info("Tracker stopped.")

    def tick(self) -> Optional[Transition]:
        """Take one sample and apply it. Returns None when the sample failed."""
        try:
            in_front = self._observer.is_frontmost(self.config.focus_app)
        except WindowObserverError as exc:
            logger.warning("Failed to get active window: %s", exc)
            return None

        transition = self._apply(in_front)
        logger.debug(
            "%s: elapsed=%s suppressed=%s",
            transition.value,
            self._state.elapsed_focus,
            self._state.notifications_suppressed,
        )
        self._publish()
        return transition

    def _apply(self, in_front: bool) -> Transition:
        state = self._state
        if in_front:
            if state.is_focus_app_active:
                transition = Transition.REMAIN_ACTIVE
            else:
                transition = Transition.BECOME_ACTIVE
                state.is_focus_app_active = True
                state.reset_session()
            # The sample that sees the app in front accounts for one interval.
            state.elapsed_focus += self.config.poll_interval
            if (
                not state.notifications_suppressed
                and state.elapsed_focus >= self.config.focus_threshold
            ):
                self._set_notifications(False)
            return transition

        # A latch left set by a failed re-enable is retried here as well.
        if not state.is_focus_app_active and not state.notifications_suppressed:
            return Transition.REMAIN_INACTIVE

        if state.notifications_suppressed:
            self._set_notifications(True)
        state.is_focus_app_active = False
        state.reset_session()
        return Transition.BECOME_INACTIVE

    def _set_notifications(self, enable: bool) -> None:
        try:
            self._toggler.set_notifications(enable)
        except NotificationToggleError as exc:
            logger.error(
                "Could not %s notifications, will retry: %s",
                "enable" if enable else "disable",
                exc,
            )
            return
        self._state.notifications_suppressed = not enable

    def _publish(self) -> None:
        if not self.config.display_enabled or self._status_sink is None:
            return
        try:
            self._status_sink.update(self._state.elapsed_focus)
        except Exception:
            logger.exception("Status update failed.")


def create_tracker(
    config: TrackerConfig,
    scripts_dir: Path,
    status_sink: Optional[StatusSink] = None,
) -> FocusTracker:
    """Wire the AppleScript observer and toggler into a fresh tracker."""
    return FocusTracker(
        observer=AppleScriptWindowObserver(),
        toggler=AppleScriptNotificationToggler(scripts_dir),
        config=config,
        status_sink=status_sink,
    )
