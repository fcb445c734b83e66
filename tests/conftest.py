from __future__ import annotations

from datetime import timedelta

import pytest

from auto_focus.config import TrackerConfig

from tests.fakes import RecordingSink, RecordingToggler


@pytest.fixture
def config() -> TrackerConfig:
    return TrackerConfig(
        focus_app="com.microsoft.VSCode",
        poll_interval=timedelta(seconds=1),
        focus_threshold=timedelta(seconds=3),
        display_enabled=True,
    )


@pytest.fixture
def toggler() -> RecordingToggler:
    return RecordingToggler()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
