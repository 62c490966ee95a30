from minischeme import SExpression, LispValue, EvaluatorFn
from minischeme.errors import SchemeSyntaxError
from minischeme.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote datum) returns datum without evaluating it."""
    if len(tail) != 1:
        raise SchemeSyntaxError("quote requires exactly 1 argument")
    return tail[0]
