"""Application settings for mpd-fzf."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """Immutable user settings loaded from disk."""

    fzf_command: str = "fzf"
    mpc_command: str = "mpc"
    self_command: str = "mpd-fzf"
    width_margin: int = 5
    play_key: str = "enter"
    queue_key: str = "alt-enter"
    fzf_args: tuple[str, ...] = field(default_factory=tuple)
    notify: bool = True


def get_config_dir(app_name: str = "mpd-fzf") -> Path:
    """Return the per-user config directory for the current platform."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        root = Path(base) if base else Path.home() / "AppData" / "Roaming"
        return root / app_name
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / app_name


def get_config_path() -> Path:
    """Return the full config file path."""
    return get_config_dir() / "config.json"


def load_config() -> AppConfig:
    """Load settings from disk, falling back to defaults when absent or broken."""
    path = get_config_path()
    if not path.is_file():
        return AppConfig()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.exception("Failed to load config from %s", path)
        return AppConfig()
    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: top level is not an object", path)
        return AppConfig()
    return _config_from_mapping(raw)


def _get_bool(raw: dict[str, Any], key: str, default: bool) -> bool:
    """Fetch a boolean value with fallback for invalid types."""
    value = raw.get(key, default)
    if isinstance(value, bool):
        return value
    return default


def _get_int(
    raw: dict[str, Any],
    key: str,
    default: int,
    *,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """Fetch an integer value with optional clamping."""
    value = raw.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool):
        value = default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def _get_str(raw: dict[str, Any], key: str, default: str) -> str:
    """Fetch a non-empty string value."""
    value = raw.get(key, default)
    if not isinstance(value, str) or not value.strip():
        return default
    return value


def _get_str_list(raw: dict[str, Any], key: str) -> tuple[str, ...]:
    value = raw.get(key, [])
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def _config_from_mapping(raw: dict[str, Any]) -> AppConfig:
    """Normalize raw JSON data into an AppConfig."""
    return AppConfig(
        fzf_command=_get_str(raw, "fzf_command", "fzf"),
        mpc_command=_get_str(raw, "mpc_command", "mpc"),
        self_command=_get_str(raw, "self_command", "mpd-fzf"),
        width_margin=_get_int(raw, "width_margin", 5, min_value=0, max_value=40),
        play_key=_get_str(raw, "play_key", "enter"),
        queue_key=_get_str(raw, "queue_key", "alt-enter"),
        fzf_args=_get_str_list(raw, "fzf_args"),
        notify=_get_bool(raw, "notify", True),
    )
