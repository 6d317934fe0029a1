"""Logging for mpd-fzf.

Every run (the picker and each ``_play``/``_queue`` callback fzf spawns)
appends to one rotating log file. stderr only receives warnings and worse,
since fzf owns the terminal while the picker is open.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import sys
from types import TracebackType
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(process)d] %(name)s: %(message)s"
LEVEL_ENV = "MPD_FZF_LOG_LEVEL"

logger = logging.getLogger(__name__)


def log_dir() -> Path:
    state_home = os.getenv("XDG_STATE_HOME")
    base = Path(state_home) if state_home else Path.home() / ".local" / "state"
    return base / "mpd-fzf"


def file_level() -> int:
    """Level for the log file, from the environment (INFO when unset or bogus)."""
    level = logging.getLevelName(os.getenv(LEVEL_ENV, "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _has_handler(root: logging.Logger, kind: type[logging.Handler]) -> bool:
    return any(type(handler) is kind for handler in root.handlers)


def init_logging(console_level: int = logging.WARNING) -> Optional[Path]:
    """Attach the file and stderr handlers to the root logger.

    Returns the log file path, or None when the log directory is unusable;
    in that case only stderr logging is set up.
    """
    formatter = logging.Formatter(LOG_FORMAT)
    root = logging.getLogger()
    level = file_level()
    root.setLevel(min(level, console_level))

    if not _has_handler(root, logging.StreamHandler):
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(console_level)
        console.setFormatter(formatter)
        root.addHandler(console)

    log_path: Optional[Path] = log_dir() / "mpd-fzf.log"
    if not _has_handler(root, RotatingFileHandler):
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
            )
        except OSError as exc:
            logger.warning("File logging disabled: %s", exc)
            log_path = None
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
    return log_path


def log_uncaught(
    exc_type: type[BaseException],
    exc: BaseException,
    tb: Optional[TracebackType],
) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return
    logger.critical("Uncaught exception", exc_info=(exc_type, exc, tb))


def install_excepthook() -> None:
    """Route uncaught exceptions into the log instead of a bare traceback."""
    sys.excepthook = log_uncaught
