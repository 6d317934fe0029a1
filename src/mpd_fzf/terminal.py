"""Terminal size query."""

from __future__ import annotations

import subprocess
import sys

from mpd_fzf.errors import CollaboratorError


def parse_stty_size(output: str) -> tuple[int, int]:
    """Parse ``stty size`` output into ``(rows, columns)``."""
    parts = output.split()
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise CollaboratorError(f"Unexpected 'stty size' output: {output!r}")
    return int(parts[0]), int(parts[1])


def term_width() -> int:
    """Return the column count of the controlling terminal."""
    try:
        result = subprocess.run(
            ["stty", "size"],
            stdin=sys.stdin,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise CollaboratorError(f"Could not run stty: {exc}") from exc
    if result.returncode != 0:
        raise CollaboratorError(
            result.stderr.strip() or "stty size failed", returncode=result.returncode
        )
    _rows, columns = parse_stty_size(result.stdout)
    return columns
