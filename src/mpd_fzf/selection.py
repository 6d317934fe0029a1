"""Handle a line selected in fzf."""

from __future__ import annotations

import logging

from mpd_fzf.line_codec import split_line
from mpd_fzf.mpc import MpcClient

logger = logging.getLogger(__name__)


def select(line: str, play: bool, client: MpcClient) -> int:
    """Queue the track behind ``line`` and optionally start playing it.

    Returns the track's 1-based position in the queue.
    """
    path = split_line(line).path
    position, queued = client.find_in_queue(path)
    if not queued:
        logger.info("Adding %s to the queue", path)
        client.add(path)
    if play:
        logger.info("Playing %s at position %d", path, position)
        client.play(position)
    return position
