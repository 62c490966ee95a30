"""Interactive read-eval-print loop. Uses cmd as backend."""

from __future__ import annotations

import cmd
import logging
from typing import TextIO

from minischeme.config import Settings
from minischeme.errors import IncompleteInputError
from minischeme.interpreter import Interpreter
from minischeme.printer import to_string
from minischeme.reader.parser import parse
from minischeme.reporting import ErrorHandler
from minischeme.types.unspecified import Unspecified

logger = logging.getLogger(__name__)

INTRO = "minischeme :: type 'help' for more information, Ctrl-D to exit."


class Shell(cmd.Cmd):
    """minischeme interpreter shell."""

    def __init__(
        self,
        interp: Interpreter,
        settings: Settings | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        super().__init__(stdin=stdin, stdout=stdout)
        self.interp = interp
        self.settings = settings or Settings()
        self.use_rawinput = stdin is None
        self.error_handler = ErrorHandler(stderr, color=self.settings.color)
        self.prompt = self.settings.prompt
        self._pending = ""  # source of an expression still waiting for its ')'

    def onecmd(self, line):
        # Only a bare `help` and end of input are shell commands; any other line is source.
        command = line.strip()
        if command == "EOF":
            return self.do_EOF("")
        if self._pending:
            return self.default(line)
        if not command:
            return self.emptyline()
        if command == "help":
            return self.do_help("")
        return self.default(line)

    def default(self, line):
        """Reads and evaluates source, printing every non-unspecified result."""
        source = self._pending + line + "\n"
        self._pending = ""
        self.prompt = self.settings.prompt
        with self.error_handler:
            try:
                exprs = parse(source)
            except IncompleteInputError:
                self._pending = source
                self.prompt = self.settings.continuation_prompt
                return
            logger.debug("read %d expression(s)", len(exprs))
            for value in self.interp.eval_exprs(exprs):
                if value is not Unspecified:
                    self.stdout.write(to_string(value) + "\n")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_help(self, arg):
        """Doesnt list commands, but gives a short intro."""
        self.stdout.write(
            "Enter Scheme expressions, e.g. (define (square x) (* x x)) then (square 4).\n"
            "Expressions may span several lines; input continues until parentheses balance.\n"
            "Definitions persist for the whole session. Ctrl-D exits.\n"
        )

    def do_EOF(self, arg):
        """Exits interpreter."""
        if self._pending:
            self._pending = ""
            self.error_handler.report("IncompleteInputError: Unexpected end of input")
        if self.use_rawinput:
            self.stdout.write("\n")
        return True
