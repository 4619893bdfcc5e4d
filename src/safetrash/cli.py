# Filename: cli.py
# Author: Rich Lewis @RichLewis007
# Description: Command-line interface for Safe Trash. An rm-style shim that moves the given
#              paths to the Trash and reports missing paths and failures on stderr.

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path

from .models.outcome import MoveOptions
from .services import logger as logger_service
from .services.formatting import format_outcome
from .services.trash import move_paths_to_trash


def build_parser() -> argparse.ArgumentParser:
    # Create and configure the command-line argument parser.
    parser = argparse.ArgumentParser(
        prog="safe-trash",
        description="Move files and folders to the Trash instead of deleting them.",
    )
    parser.add_argument("paths", nargs="+", help="Paths to move to the Trash.")
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory relative paths are resolved against (default: current directory).",
    )
    parser.add_argument(
        "-f",
        "--allow-missing",
        action="store_true",
        help="Ignore paths that do not exist instead of reporting them.",
    )
    parser.add_argument(
        "--refuse",
        action="append",
        default=[],
        metavar="PATH",
        help="Extra path (relative to the base dir) that must never be trashed. Repeatable.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console logging level (default: %(default)s).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    # Entry point for the shim; returns 0 only when every path was trashed.
    parser = build_parser()
    args = parser.parse_args(argv)
    logger_service.configure(log_level=args.log_level)

    base_dir = args.base_dir.expanduser() if args.base_dir else Path(os.getcwd())
    if not base_dir.is_dir():
        parser.error(f"Base directory does not exist: {base_dir}")

    options = MoveOptions(allow_missing=args.allow_missing, refuse_paths=tuple(args.refuse))
    outcome = asyncio.run(move_paths_to_trash(args.paths, str(base_dir.absolute()), options))

    for line in format_outcome(outcome):
        print(line, file=sys.stderr)
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
