"""mpc-backed playback control."""

from __future__ import annotations

import logging
import subprocess

from mpd_fzf.errors import CollaboratorError

logger = logging.getLogger(__name__)


class MpcClient:
    """Thin wrapper around the ``mpc`` command line client."""

    def __init__(self, executable: str = "mpc") -> None:
        self.executable = executable

    def run(self, *args: str) -> str:
        """Run mpc and return its combined output, raising on failure."""
        cmd = [self.executable, *args]
        logger.debug("Running %s", cmd)
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise CollaboratorError(f"Could not run {self.executable}: {exc}") from exc
        if result.returncode != 0:
            raise CollaboratorError(
                result.stdout.strip() or f"{self.executable} {args[0]} failed",
                returncode=result.returncode,
            )
        return result.stdout

    def queue(self) -> list[str]:
        """Return the file paths in the current play queue, in order."""
        return self.run("playlist", "-f", "%file%").splitlines()

    def find_in_queue(self, path: str) -> tuple[int, bool]:
        """Return the 1-based queue position of ``path`` and whether it is queued.

        When absent, the position is where ``add`` will append it.
        """
        entries = self.queue()
        for index, entry in enumerate(entries, start=1):
            if entry == path:
                return index, True
        return len(entries) + 1, False

    def add(self, path: str) -> None:
        self.run("add", path)

    def play(self, position: int) -> None:
        """Start playback at a 1-based queue position."""
        self.run("play", str(position))
