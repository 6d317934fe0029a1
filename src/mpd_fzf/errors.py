"""Error types raised by mpd-fzf."""

from __future__ import annotations


class MpdFzfError(RuntimeError):
    """Base class for failures that end the run with exit code 1."""


class ConfigError(MpdFzfError):
    """MPD configuration or application settings are unusable."""


class DatabaseReadError(MpdFzfError):
    """The database file could not be opened, decompressed or decoded."""


class CorruptDatabaseError(MpdFzfError):
    """The database stream is structurally invalid."""


class CollaboratorError(MpdFzfError):
    """An external command (fzf, mpc, stty) failed."""

    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class SelectionError(MpdFzfError):
    """A line handed back by fzf does not carry the expected fields."""
