"""Command-line front door for passviewer.

Parses CLI options, merges them over the config file, sets up logging, and
dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging

from . import __version__
from .config import load_settings
from .logging_setup import configure
from .runtime import run_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passviewer",
        description="Browse a pass password store in the terminal.",
    )
    parser.add_argument(
        "--tty-pinentry",
        action="store_true",
        help="Run pass operations in the foreground so a terminal pinentry can prompt.",
    )
    parser.add_argument(
        "--set-title",
        action="store_true",
        help="Set the terminal window title while running.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the viewer."""
    args = build_parser().parse_args(argv)
    runtime = configure()
    settings = load_settings().with_flags(tty_pinentry=args.tty_pinentry, set_title=args.set_title)
    logger.debug("logging to %s at %s", runtime.file_path or "nowhere", runtime.level_name)
    run_app(settings)
