"""Command-line entry point: run a source file, or start the REPL."""

from __future__ import annotations

import argparse
import logging
import sys

from minischeme import __version__
from minischeme.config import (
    DEFAULT_RECURSION_LIMIT,
    Settings,
    apply_recursion_limit,
    configure_logging,
    settings_from_args,
)
from minischeme.interpreter import Interpreter
from minischeme.printer import to_string
from minischeme.reporting import ErrorHandler
from minischeme.shell import INTRO, Shell
from minischeme.types.unspecified import Unspecified

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minischeme", description="A small Scheme interpreter.")
    parser.add_argument("file", nargs="?", help="source file to run (if omitted, starts the interactive REPL)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--no-color", action="store_true", help="do not colour error messages")
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=DEFAULT_RECURSION_LIMIT,
        help=f"host recursion limit for deeply recursive programs (default: {DEFAULT_RECURSION_LIMIT})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_file(path: str, interp: Interpreter, settings: Settings) -> int:
    """Evaluate `path` and print the last result. Returns the exit status."""
    handler = ErrorHandler(color=settings.color)
    try:
        with handler:
            result = interp.run_file(path)
            if result is not Unspecified:
                print(to_string(result))
    except (OSError, UnicodeDecodeError) as e:
        handler.report(f"cannot read {path}: {e}")
    return 1 if handler.failed else 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    configure_logging(settings.verbose)
    apply_recursion_limit(settings.recursion_limit)

    interp = Interpreter()
    if args.file is not None:
        logger.debug("running %s", args.file)
        return run_file(args.file, interp, settings)

    logger.debug("starting REPL")
    try:
        Shell(interp, settings).cmdloop(intro=INTRO if sys.stdin.isatty() else "")
    except KeyboardInterrupt:
        print()
        return 130
    return 0
