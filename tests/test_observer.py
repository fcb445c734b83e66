from __future__ import annotations

import subprocess

import pytest

from auto_focus import observer as observer_module
from auto_focus.observer import (
    FRONTMOST_QUERY,
    AppleScriptWindowObserver,
    WindowObserverError,
    normalize_identifier,
)


def fake_run(returncode=0, stdout="", stderr="", calls=None):
    def _run(args, **kwargs):
        if calls is not None:
            calls.append((args, kwargs))
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)

    return _run


def test_matches_frontmost_bundle_identifier(monkeypatch):
    calls = []
    monkeypatch.setattr(
        observer_module.subprocess, "run", fake_run(stdout="com.microsoft.VSCode\n", calls=calls)
    )
    probe = AppleScriptWindowObserver(timeout=1.5)

    assert probe.is_frontmost("com.microsoft.VSCode") is True
    assert probe.is_frontmost("com.apple.Safari") is False

    args, kwargs = calls[0]
    assert args == ["osascript", "-e", FRONTMOST_QUERY]
    assert kwargs["timeout"] == 1.5
    assert kwargs["capture_output"] is True


def test_nonzero_exit_raises(monkeypatch):
    monkeypatch.setattr(
        observer_module.subprocess,
        "run",
        fake_run(returncode=1, stderr="execution error: not allowed assistive access"),
    )
    with pytest.raises(WindowObserverError, match="assistive access"):
        AppleScriptWindowObserver().is_frontmost("com.microsoft.VSCode")


def test_timeout_raises(monkeypatch):
    def _run(args, **kwargs):
        raise subprocess.TimeoutExpired(args, kwargs["timeout"])

    monkeypatch.setattr(observer_module.subprocess, "run", _run)
    with pytest.raises(WindowObserverError):
        AppleScriptWindowObserver().frontmost_identifier()


def test_missing_interpreter_raises(monkeypatch):
    def _run(args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", args[0])

    monkeypatch.setattr(observer_module.subprocess, "run", _run)
    with pytest.raises(WindowObserverError, match="Failed to run"):
        AppleScriptWindowObserver().frontmost_identifier()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (" com.apple.Terminal\n", "com.apple.Terminal"),
        ("missing value\n", None),
        ("", None),
        (None, None),
    ],
)
def test_normalize_identifier(raw, expected):
    assert normalize_identifier(raw) == expected
