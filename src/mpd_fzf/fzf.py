"""Run fzf as the interactive picker."""

from __future__ import annotations

import contextlib
import logging
import subprocess
from typing import Iterable

from mpd_fzf.config import AppConfig
from mpd_fzf.errors import CollaboratorError
from mpd_fzf.line_codec import DELIMITER

logger = logging.getLogger(__name__)

# fzf exits with 130 when the user aborts with Esc or Ctrl-C.
EXIT_INTERRUPTED = 130


def build_bindings(config: AppConfig) -> str:
    play = f"{config.play_key}:execute-silent({config.self_command} _play {{}})"
    queue = f"{config.queue_key}:execute-silent({config.self_command} _queue {{}})"
    return f"{play},{queue}"


def build_fzf_command(config: AppConfig) -> list[str]:
    """Return the fzf argv: search the info field only, keys call back into us."""
    return [
        config.fzf_command,
        "--no-hscroll",
        "--nth",
        "1",
        "--delimiter",
        DELIMITER,
        "--bind",
        build_bindings(config),
        *config.fzf_args,
    ]


def run_picker(lines: Iterable[str], config: AppConfig) -> None:
    """Stream ``lines`` into fzf and wait for the user to leave it."""
    cmd = build_fzf_command(config)
    try:
        process = subprocess.Popen(
            cmd,
            stdin=subprocess.PIPE,
            stdout=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
        )
    except OSError as exc:
        raise CollaboratorError(f"Could not run {config.fzf_command}: {exc}") from exc
    assert process.stdin is not None
    written = 0
    try:
        for line in lines:
            process.stdin.write(line + "\n")
            written += 1
        process.stdin.close()
    except BrokenPipeError:
        logger.info("fzf closed its input after %d lines", written)
        with contextlib.suppress(BrokenPipeError):
            process.stdin.close()
    returncode = process.wait()
    logger.info("fzf exited with %s after %d lines", returncode, written)
    if returncode in (0, EXIT_INTERRUPTED):
        return
    raise CollaboratorError(
        f"{config.fzf_command} exited with status {returncode}", returncode=returncode
    )
