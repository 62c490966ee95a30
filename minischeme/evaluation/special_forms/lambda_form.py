from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeSyntaxError
from minischeme.types.environment import Environment
from minischeme.types.procedure import Procedure
from minischeme.types.symbol import Symbol
from minischeme.types.unspecified import Unspecified

BEGIN = Symbol("begin")


def make_closure(
    params: SExpression,
    body_forms: list[SExpression],
    env: Environment,
    name: str | None = None,
) -> Procedure:
    """Validate a parameter list and body, and close over `env`.

    Several body forms become an implicit (begin ...); an empty body returns
    the unspecified value when called.
    """
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise SchemeSyntaxError(f"Parameter list must be a list of symbols, got {params!r}")
    if len(set(params)) != len(params):
        raise SchemeSyntaxError(f"Duplicate parameter in {' '.join(map(str, params))}")

    if not body_forms:
        body = [Symbol("quote"), Unspecified]
    elif len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [BEGIN, *body_forms]

    return Procedure.closure(list(params), body, env, name)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(lambda (params...) body...) captures `env` without evaluating the body."""
    if not tail:
        raise SchemeSyntaxError("lambda requires a parameter list")
    return make_closure(tail[0], tail[1:], env)
