from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from minischeme import SExpression, LispValue
from minischeme.builtin.env_builtin import register
from minischeme.evaluation.evaluator import evaluate
from minischeme.reader.parser import parse
from minischeme.types.environment import Environment
from minischeme.types.unspecified import Unspecified

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating minischeme code.
    Keeps one global Environment alive across calls, so definitions made by
    one call are visible to the next.
    """

    def __init__(self):
        self.env: Environment = Environment()
        register(self.env)

    def eval_exprs(self, exprs: list[SExpression]) -> Iterator[LispValue]:
        """Evaluate parsed expressions in order, yielding each result.

        Side effects of earlier expressions stay in place if a later one fails.
        """
        for expr in exprs:
            yield evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last result."""
        exprs = parse(code)
        logger.debug("evaluating %d expression(s)", len(exprs))
        result: LispValue = Unspecified
        for result in self.eval_exprs(exprs):
            pass
        return result

    def run_file(self, path: str | Path) -> LispValue:
        """Read and evaluate a whole source file; return the last result."""
        source = Path(path).read_text(encoding="utf-8")
        logger.debug("loaded %s (%d chars)", path, len(source))
        return self.eval(source)
