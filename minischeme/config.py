from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass

# Defaults
DEFAULT_PROMPT = "minischeme> "
CONTINUATION_PROMPT = "... "
DEFAULT_RECURSION_LIMIT = 50_000
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    prompt: str = DEFAULT_PROMPT
    continuation_prompt: str = CONTINUATION_PROMPT
    recursion_limit: int = DEFAULT_RECURSION_LIMIT
    verbose: bool = False
    color: bool = True


def settings_from_args(args: argparse.Namespace) -> Settings:
    return Settings(
        recursion_limit=args.recursion_limit,
        verbose=args.verbose,
        color=not args.no_color,
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def apply_recursion_limit(limit: int) -> None:
    # Each nested Scheme call costs about six Python frames; never lower the host default.
    sys.setrecursionlimit(max(sys.getrecursionlimit(), limit))
