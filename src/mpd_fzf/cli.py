"""Command-line interface for mpd-fzf."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from mpd_fzf.config import AppConfig, load_config
from mpd_fzf.database import read_database
from mpd_fzf.errors import CollaboratorError, ConfigError, MpdFzfError
from mpd_fzf.formatting import make_formatter
from mpd_fzf.fzf import run_picker
from mpd_fzf.logging_setup import init_logging, install_excepthook
from mpd_fzf.mpc import MpcClient
from mpd_fzf.mpd_conf import find_db_file
from mpd_fzf.notify import notify
from mpd_fzf.selection import select
from mpd_fzf.terminal import term_width
from mpd_fzf.tracks import group_by_artist

logger = logging.getLogger(__name__)

# Called back by fzf key bindings with the highlighted line; not in --help.
SELECT_COMMANDS = {"_play": True, "_queue": False}
USAGE = "Usage: mpd-fzf [--db PATH] [--width N]"


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="mpd-fzf",
        description="Pick MPD tracks with fzf",
        exit_on_error=False,
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Path to the MPD database (default: db_file from mpd.conf)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Line width in columns (default: terminal width minus margin)",
    )
    return parser


def _fail(exc: MpdFzfError, *, send_notification: bool) -> int:
    message = str(exc)
    logger.error("%s: %s", type(exc).__name__, message)
    print(message, file=sys.stderr)
    if send_notification:
        notify(message)
    return 1


def _usage_error(detail: str) -> int:
    print(f"{USAGE}\n{detail}", file=sys.stderr)
    return 1


def _display_width(requested: Optional[int], config: AppConfig) -> int:
    if requested is not None:
        width = requested
    else:
        width = term_width() - config.width_margin
    if width < 1:
        raise ConfigError(f"Display width must be positive, got {width}")
    return width


def run_list(
    db_path: Optional[Path], width: Optional[int], config: AppConfig
) -> int:
    """Feed every track in the database to fzf."""
    try:
        path = db_path if db_path is not None else find_db_file()
        formatter = make_formatter(_display_width(width, config))
        tracks = group_by_artist(read_database(path))
        run_picker((formatter(track) for track in tracks), config)
    except MpdFzfError as exc:
        return _fail(
            exc,
            send_notification=config.notify and isinstance(exc, CollaboratorError),
        )
    return 0


def run_select(line: str, play: bool, config: AppConfig) -> int:
    """Queue, and for ``_play`` start, the track behind a picker line."""
    try:
        select(line, play, MpcClient(config.mpc_command))
    except MpdFzfError as exc:
        return _fail(exc, send_notification=config.notify)
    return 0


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the CLI."""
    init_logging()
    install_excepthook()

    args = list(argv) if argv is not None else sys.argv[1:]
    config = load_config()

    if args and args[0] in SELECT_COMMANDS:
        if len(args) != 2:
            return _usage_error(f"{args[0]} takes exactly one picker line")
        return run_select(args[1], SELECT_COMMANDS[args[0]], config)

    try:
        options, extra = build_parser().parse_known_args(args)
    except argparse.ArgumentError as exc:
        return _usage_error(str(exc))
    if extra:
        return _usage_error(f"unrecognized arguments: {' '.join(extra)}")
    exit_code = run_list(options.db, options.width, config)
    logger.info("Exit code=%s", exit_code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
