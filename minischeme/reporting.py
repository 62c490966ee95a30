"""Error reporting for the driver. Interpreter errors are printed and
suppressed; any other exception is an internal bug and propagates.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from termcolor import colored

from minischeme.errors import SchemeError

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Context manager that reports minischeme errors instead of raising them."""
    ERROR = "red"

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        self._stream = stream
        self.color = color
        self.failed = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def report(self, message: str) -> None:
        """Print `message` as an error and mark this handler as failed."""
        prefix = "error: "
        if self.color:
            prefix = colored(prefix, ErrorHandler.ERROR, attrs=["bold"])
        self.stream.write(prefix + message + "\n")
        self.stream.flush()
        self.failed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            return False
        if issubclass(exc_type, SchemeError):
            self.report(f"{exc_type.__name__}: {exc_val}")
        elif issubclass(exc_type, RecursionError):
            self.report("maximum recursion depth exceeded")
        elif issubclass(exc_type, KeyboardInterrupt):
            self.report("interrupted")
        else:
            return False
        logger.debug("reported %s", exc_type.__name__, exc_info=(exc_type, exc_val, exc_tb))
        return True
