"""Streaming parser for MPD's gzip-compressed database dump.

The dump is a flat sequence of lines. Directory nesting is expressed by
``directory: <name>`` / ``end: <name>`` pairs and each song by a
``song_begin: <file>`` ... ``song_end`` block holding ``Key: value`` tags::

    directory: Artist
    begin: Artist
    song_begin: track.flac
    Time: 213.240000
    Artist: Someone
    song_end
    end: Artist
"""

from __future__ import annotations

from dataclasses import dataclass, field
import gzip
import logging
from pathlib import Path
import posixpath
from typing import Iterable

from mpd_fzf.errors import CorruptDatabaseError, DatabaseReadError
from mpd_fzf.tracks import Track

logger = logging.getLogger(__name__)

_TAG_FIELDS = {
    "Album": "album",
    "Artist": "artist",
    "Date": "date",
    "Genre": "genre",
    "Time": "time",
    "Title": "title",
}


def key_value(line: str) -> tuple[str, str]:
    """Split a database line into its key and (possibly empty) value."""
    index = line.find(":")
    if index < 0:
        return line, ""
    if index == len(line) - 1:
        return line[:index], ""
    skip = 2 if line[index + 1] == " " else 1
    return line[:index], line[index + skip :]


class PathStack:
    """Directory nesting with the joined path cached on every change."""

    def __init__(self) -> None:
        self._segments: list[str] = []
        self._joined: list[str] = [""]

    def __len__(self) -> int:
        return len(self._segments)

    @property
    def depth(self) -> int:
        return len(self._segments)

    @property
    def current_path(self) -> str:
        return self._joined[-1]

    def push(self, segment: str) -> None:
        parent = self._joined[-1]
        self._segments.append(segment)
        self._joined.append(posixpath.join(parent, segment) if segment else parent)

    def pop(self) -> str:
        if not self._segments:
            raise CorruptDatabaseError("Invalid directory state. Corrupted database?")
        self._joined.pop()
        return self._segments.pop()


@dataclass
class ParserState:
    """Mutable state threaded through a single parse."""

    stack: PathStack = field(default_factory=PathStack)
    pending: dict[str, str] = field(default_factory=dict)
    tracks: list[Track] = field(default_factory=list)

    def feed(self, line: str) -> None:
        key, value = key_value(line.rstrip("\r\n"))
        if key == "directory":
            self.stack.push(value)
        elif key == "end":
            self.stack.pop()
        elif key in _TAG_FIELDS:
            self.pending[_TAG_FIELDS[key]] = value
        elif key == "song_begin":
            directory = self.stack.current_path
            self.pending = {
                "filename": value,
                "path": posixpath.join(directory, value) if value else directory,
            }
        elif key == "song_end":
            self.tracks.append(Track(**self.pending))
            self.pending = {}


def parse_lines(lines: Iterable[str]) -> tuple[Track, ...]:
    """Parse database lines into tracks, in database order."""
    state = ParserState()
    for line in lines:
        state.feed(line)
    if state.stack.depth:
        logger.warning(
            "Database ended inside %d unterminated directories (at %r)",
            state.stack.depth,
            state.stack.current_path,
        )
    return tuple(state.tracks)


def read_database(path: Path) -> tuple[Track, ...]:
    """Decompress and parse the database at ``path``."""
    logger.info("Reading database %s", path)
    try:
        with gzip.open(path, "rt", encoding="utf-8") as handle:
            tracks = parse_lines(handle)
    except (OSError, EOFError, UnicodeDecodeError) as exc:
        raise DatabaseReadError(f"Could not read database '{path}': {exc}") from exc
    logger.info("Parsed %d tracks", len(tracks))
    return tracks
