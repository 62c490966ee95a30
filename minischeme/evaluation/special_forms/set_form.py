from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeSyntaxError
from minischeme.types.symbol import Symbol
from minischeme.types.environment import Environment
from minischeme.types.unspecified import Unspecified


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise SchemeSyntaxError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise SchemeSyntaxError(f"set! first argument must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return Unspecified
