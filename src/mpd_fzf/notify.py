"""Best-effort user notifications for failures hidden behind fzf."""

from __future__ import annotations

import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)


def _run_quiet(cmd: list[str]) -> bool:
    if not shutil.which(cmd[0]):
        return False
    try:
        result = subprocess.run(cmd, capture_output=True, check=False, timeout=2.0)
    except (subprocess.TimeoutExpired, OSError) as exc:
        logger.debug("Notification via %s failed: %s", cmd[0], exc)
        return False
    return result.returncode == 0


def notify(message: str) -> bool:
    """Show ``message`` in the tmux status line, else as a desktop notification."""
    if _run_quiet(["tmux", "display", message]):
        return True
    return _run_quiet(["notify-send", "--app-name", "mpd-fzf", "mpd-fzf", message])
