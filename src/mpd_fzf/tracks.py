"""Track records and library-level helpers."""

from __future__ import annotations

from dataclasses import dataclass
import math
import random
from typing import Iterable, Optional

DURATION_PLACEHOLDER = "(-:--)"


@dataclass(frozen=True)
class Track:
    """One song entry from the MPD database."""

    album: str = ""
    artist: str = ""
    date: str = ""
    filename: str = ""
    genre: str = ""
    path: str = ""
    time: str = ""
    title: str = ""


def format_duration(raw: str) -> str:
    """Render a seconds count as ``(M:SS)`` or ``(H:MM:SS)``."""
    try:
        seconds = float(raw)
    except ValueError:
        return DURATION_PLACEHOLDER
    if not math.isfinite(seconds) or seconds < 0:
        return DURATION_PLACEHOLDER
    total = int(seconds)
    minutes, secs = divmod(total, 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"({hours}:{minutes:02d}:{secs:02d})"
    return f"({minutes}:{secs:02d})"


def group_by_artist(
    tracks: Iterable[Track], rng: Optional[random.Random] = None
) -> list[Track]:
    """Keep each artist's tracks together, shuffling the order of artists."""
    buckets: dict[str, list[Track]] = {}
    for track in tracks:
        buckets.setdefault(track.artist, []).append(track)
    groups = list(buckets.values())
    (rng or random.Random()).shuffle(groups)
    return [track for group in groups for track in group]
