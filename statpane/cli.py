"""Command-line front door for statpane.

Parses CLI options, moves into the requested start directory, and sets up
the debug log. Then dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from .app import resolve_settings, run_browser
from .config import load_log_path
from .diagnostics import configure_logging, shutdown_logging
from .ui_theme import available_theme_names


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _enter_start_directory(path: Path) -> None:
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    try:
        os.chdir(path)
    except OSError as exc:
        raise SystemExit(f"Cannot enter {path}: {exc.strerror or exc}") from exc


def main() -> None:
    """Parse CLI arguments and launch the browser in the chosen directory.

    Without a positional path the process working directory is used.
    Returning normally (quit key) exits with status 0.
    """
    parser = argparse.ArgumentParser(
        description="Browse directories with a metadata pane for the selected entry."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to start in. Defaults to current directory.")
    parser.add_argument(
        "--max-entries",
        type=_positive_int,
        default=None,
        help="Maximum entries listed per directory (default: config or 1024).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Append debug log records to this file.")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level (every draw and key).")
    args = parser.parse_args()

    if args.path is not None:
        _enter_start_directory(Path(args.path))

    log_path = args.log_file if args.log_file is not None else load_log_path()
    configure_logging(log_path, logging.DEBUG if args.debug else logging.INFO)
    try:
        run_browser(resolve_settings(max_entries=args.max_entries, theme_name=args.theme))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    main()
