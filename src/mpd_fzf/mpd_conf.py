"""Locate the MPD database through the MPD configuration file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import re
from typing import Mapping, Optional

from mpd_fzf.errors import ConfigError

logger = logging.getLogger(__name__)

_DB_FILE_RE = re.compile(r'^\s*db_file\s*"([^"]+)"')


def candidate_conf_paths(
    home: Path, environ: Optional[Mapping[str, str]] = None
) -> list[Path]:
    """Return the mpd.conf locations MPD itself probes, in order."""
    env = os.environ if environ is None else environ
    paths: list[Path] = []
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        paths.append(Path(xdg) / "mpd" / "mpd.conf")
    paths.extend(
        [
            home / ".config" / "mpd" / "mpd.conf",
            home / ".mpdconf",
            Path("/etc/mpd.conf"),
        ]
    )
    return paths


def expand_user(path: str, home: Path) -> str:
    if path.startswith("~/"):
        return str(home) + path[1:]
    return path


def read_db_file(conf_path: Path, home: Path) -> Optional[str]:
    """Return the first ``db_file`` value in ``conf_path``, if any."""
    try:
        with conf_path.open("r", encoding="utf-8", errors="replace") as handle:
            for line in handle:
                match = _DB_FILE_RE.match(line)
                if match:
                    return expand_user(match.group(1), home)
    except OSError as exc:
        raise ConfigError(f"Could not read '{conf_path}': {exc}") from exc
    return None


def find_db_file(
    home: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None
) -> Path:
    """Find the database path from the first existing MPD config file."""
    home = Path.home() if home is None else home
    for conf_path in candidate_conf_paths(home, environ):
        if not conf_path.is_file():
            continue
        logger.info("Using MPD config %s", conf_path)
        db_file = read_db_file(conf_path, home)
        if not db_file:
            raise ConfigError(
                f"Could not find 'db_file' in configuration file '{conf_path}'"
            )
        return Path(db_file)
    raise ConfigError("No config file found")
