"""Fixed-width picker line formatting."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Callable

from rich.cells import cell_len, set_cell_size

from mpd_fzf.line_codec import DELIMITER, escape, join_line
from mpd_fzf.tracks import Track, format_duration

ELLIPSIS = "... "


def display_info(track: Track) -> str:
    """Return the human readable part of a track line."""
    info = track.title or PurePosixPath(track.filename).stem
    if track.artist:
        info = f"{track.artist} - {info}"
    if track.album:
        info += f" {{{track.album}}}"
    return escape(info)


def truncate(text: str, max_width: int, tail: str = ELLIPSIS) -> str:
    """Crop ``text`` to ``max_width`` terminal cells, marking the cut with ``tail``."""
    if max_width <= 0:
        return ""
    if cell_len(text) <= max_width:
        return text
    tail_width = cell_len(tail)
    if tail_width >= max_width:
        return set_cell_size(tail, max_width)
    return set_cell_size(text, max_width - tail_width) + tail


def align_left_right(width: int, left: str, right: str) -> tuple[str, str]:
    """Fit ``left`` into the cells that ``right`` and a delimiter leave free."""
    budget = max(0, width - cell_len(DELIMITER) - cell_len(right))
    return set_cell_size(truncate(left, budget), budget), right


def format_line(track: Track, width: int) -> str:
    """Format a track as a picker line whose visible part spans ``width`` cells."""
    info, duration = align_left_right(
        width, display_info(track), format_duration(track.time)
    )
    return join_line(info, duration, track.path)


def make_formatter(width: int) -> Callable[[Track], str]:
    def formatter(track: Track) -> str:
        return format_line(track, width)

    return formatter
