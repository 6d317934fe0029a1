"""Field encoding for lines exchanged with fzf.

A picker line carries three fields joined by :data:`DELIMITER`::

    <info, padded><DELIMITER><duration><DELIMITER><path>

fzf is told to search field 1 only, so the path rides along invisibly and
comes back verbatim when a line is selected. The delimiter is U+2002 EN
SPACE, which renders like a normal space but does not occur in tag text
once :func:`escape` has replaced it. The path is always the last field and
may itself contain the delimiter.
"""

from __future__ import annotations

from dataclasses import dataclass

from mpd_fzf.errors import SelectionError

DELIMITER = "\u2002"  # EN SPACE
FIELD_COUNT = 3


@dataclass(frozen=True)
class PickerLine:
    info: str
    duration: str
    path: str


def escape(text: str) -> str:
    """Replace delimiter occurrences in user text with a plain space."""
    return text.replace(DELIMITER, " ")


def join_line(info: str, duration: str, path: str) -> str:
    return DELIMITER.join((escape(info), escape(duration), path))


def split_line(line: str) -> PickerLine:
    """Split a picker line into its fields."""
    fields = line.rstrip("\n").split(DELIMITER, FIELD_COUNT - 1)
    if len(fields) != FIELD_COUNT:
        raise SelectionError("mpd-fzf: split assertion failure")
    info, duration, path = fields
    return PickerLine(info=info, duration=duration, path=path)
