"""Render a launchd agent so the daemon starts at login."""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from typing import Optional, Sequence

from .paths import get_log_path

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "com.auto-focus.agent"


def build_plist(
    program: Path,
    *,
    label: str = DEFAULT_LABEL,
    arguments: Sequence[str] = ("run",),
    log_path: Optional[Path] = None,
) -> dict[str, object]:
    log = str(log_path or get_log_path())
    return {
        "Label": label,
        "ProgramArguments": [str(program), *arguments],
        "RunAtLoad": True,
        "StandardOutPath": log,
        "StandardErrorPath": log,
    }


def write_plist(
    output: Path,
    program: Path,
    *,
    label: str = DEFAULT_LABEL,
    arguments: Sequence[str] = ("run",),
    log_path: Optional[Path] = None,
) -> Path:
    """Write the agent definition to ``output`` and return the path."""
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    payload = build_plist(program, label=label, arguments=arguments, log_path=log_path)
    with output.open("wb") as fh:
        plistlib.dump(payload, fh)
    logger.info("Wrote %s", output)
    return output
