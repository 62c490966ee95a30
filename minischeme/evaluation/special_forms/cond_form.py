"""Special form: cond, a multi-branch conditional."""

from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeSyntaxError
from minischeme.evaluation.special_forms.logic_forms import is_true
from minischeme.types.environment import Environment
from minischeme.types.symbol import Symbol
from minischeme.types.unspecified import Unspecified

ELSE = Symbol("else")


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (cond (test expr...) ... (else expr...))

    Evaluates tests in order and runs the body of the first clause whose test
    is not #f. A clause with no body yields the test value. `else` must be the
    last clause. No matching clause yields the unspecified value.
    """
    for i, clause in enumerate(tail):
        if not isinstance(clause, list) or not clause:
            raise SchemeSyntaxError(f"Malformed cond clause {clause!r}")
        test, *body = clause
        if test == ELSE:
            if i != len(tail) - 1:
                raise SchemeSyntaxError("else must be the last cond clause")
            value: LispValue = Unspecified
        else:
            value = evaluate_fn(test, env)
            if not is_true(value):
                continue
        for expr in body:
            value = evaluate_fn(expr, env)
        return value
    return Unspecified
