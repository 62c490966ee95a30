from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeSyntaxError
from minischeme.evaluation.special_forms.lambda_form import make_closure
from minischeme.types.environment import Environment
from minischeme.types.procedure import Procedure, ProcedureKind
from minischeme.types.symbol import Symbol
from minischeme.types.unspecified import Unspecified


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)

    Binds in the current frame, overwriting a local binding of the same name.
    A recursive closure finds itself by lookup when called, after the binding
    exists.
    """
    if not tail:
        raise SchemeSyntaxError("define requires a name")

    target = tail[0]
    if isinstance(target, list):
        if not target or not isinstance(target[0], Symbol):
            raise SchemeSyntaxError("define requires a procedure name")
        name, *params = target
        env.define(name, make_closure(params, tail[1:], env, name.id))
        return Unspecified

    if not isinstance(target, Symbol):
        raise SchemeSyntaxError(f"Cannot define {target!r}: not a symbol")
    if len(tail) != 2:
        raise SchemeSyntaxError("define requires exactly 2 arguments")

    value = evaluate_fn(tail[1], env)
    match value:
        case Procedure(kind=ProcedureKind.CLOSURE, name=None):
            value.name = target.id
    env.define(target, value)
    return Unspecified
