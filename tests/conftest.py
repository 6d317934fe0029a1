"""Pytest configuration for mpd-fzf."""

from __future__ import annotations

import gzip
from pathlib import Path
from typing import Callable

import pytest

SAMPLE_DB = """\
info_begin
format: 2
mpd_version: 0.23.5
fs_charset: UTF-8
tag: Artist
tag: Album
tag: Title
info_end
directory: Alpha
mtime: 1600000000
begin: Alpha
directory: First Album
mtime: 1600000000
begin: Alpha/First Album
song_begin: 01 Intro.flac
Time: 45.120000
Artist: Alpha
Album: First Album
Title: Intro
Genre: Rock
Date: 2001
mtime: 1600000000
song_end
song_begin: 02 Untitled.mp3
Time: 3661
Artist: Alpha
song_end
end: Alpha/First Album
end: Alpha
directory: Beta
mtime: 1600000000
begin: Beta
song_begin: beta.ogg
Artist: Beta
Title: Song: With Colons
song_end
end: Beta
"""


@pytest.fixture(autouse=True)
def _isolate_user_dirs(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))


@pytest.fixture
def write_db(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that gzips database text into a temp file."""

    def write(text: str) -> Path:
        path = tmp_path / "database"
        with gzip.open(path, "wt", encoding="utf-8") as handle:
            handle.write(text)
        return path

    return write


@pytest.fixture
def sample_db() -> str:
    return SAMPLE_DB
