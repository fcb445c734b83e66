from __future__ import annotations

import subprocess

import pytest

from auto_focus import notifications as notifications_module
from auto_focus.notifications import AppleScriptNotificationToggler, NotificationToggleError


@pytest.fixture
def scripts_dir(tmp_path):
    (tmp_path / "enableFocus.scpt").write_bytes(b"")
    (tmp_path / "disableFocus.scpt").write_bytes(b"")
    return tmp_path


def test_enabling_notifications_turns_focus_off(monkeypatch, scripts_dir):
    calls = []

    def _run(args, **kwargs):
        calls.append(args)
        return subprocess.CompletedProcess(args, 0, stdout="", stderr="")

    monkeypatch.setattr(notifications_module.subprocess, "run", _run)
    toggler = AppleScriptNotificationToggler(scripts_dir)

    toggler.set_notifications(True)
    toggler.set_notifications(False)

    assert calls == [
        ["osascript", str(scripts_dir / "disableFocus.scpt")],
        ["osascript", str(scripts_dir / "enableFocus.scpt")],
    ]


def test_missing_script_raises(tmp_path):
    toggler = AppleScriptNotificationToggler(tmp_path)
    with pytest.raises(NotificationToggleError, match="not found"):
        toggler.set_notifications(False)


def test_script_failure_carries_stderr(monkeypatch, scripts_dir):
    monkeypatch.setattr(
        notifications_module.subprocess,
        "run",
        lambda args, **kwargs: subprocess.CompletedProcess(
            args, 1, stdout="", stderr="Can't get menu bar 1\n"
        ),
    )
    with pytest.raises(NotificationToggleError, match="Can't get menu bar 1"):
        AppleScriptNotificationToggler(scripts_dir).set_notifications(True)


def test_timeout_raises(monkeypatch, scripts_dir):
    def _run(args, **kwargs):
        raise subprocess.TimeoutExpired(args, kwargs["timeout"])

    monkeypatch.setattr(notifications_module.subprocess, "run", _run)
    with pytest.raises(NotificationToggleError):
        AppleScriptNotificationToggler(scripts_dir, timeout=0.5).set_notifications(False)
