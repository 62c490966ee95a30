"""Core evaluator for the minischeme interpreter.

A strict recursive walk: literals evaluate to themselves, symbols are looked
up, special forms are dispatched through SPECIAL_FORMS and every other
combination is a procedure application.
"""

from __future__ import annotations

from minischeme import SExpression, LispValue
from minischeme.errors import SchemeSyntaxError
from minischeme.evaluation.apply import apply
from minischeme.evaluation.special_forms import SPECIAL_FORMS
from minischeme.types.environment import Environment
from minischeme.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case bool() | int() | float() | str():
            return expr

        case []:
            raise SchemeSyntaxError("Cannot evaluate the empty combination ()")

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case [head, *tail]:
            proc = evaluate(head, env)
            # Arguments are evaluated left-to-right in the caller's environment.
            args = [evaluate(arg, env) for arg in tail]
            return apply(proc, args, evaluate)

    raise SchemeSyntaxError(f"Cannot evaluate {expr!r}")
