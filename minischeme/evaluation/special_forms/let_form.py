"""(let ((name init) ...) body...)

Evaluated as ((lambda (name ...) body...) init ...), so the new scope is an
ordinary call frame.
"""

from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeSyntaxError
from minischeme.evaluation.apply import apply
from minischeme.evaluation.special_forms.lambda_form import make_closure
from minischeme.types.environment import Environment
from minischeme.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail or not isinstance(tail[0], list):
        raise SchemeSyntaxError("let requires a list of bindings")

    names: list[Symbol] = []
    inits: list[SExpression] = []
    for binding in tail[0]:
        if not (isinstance(binding, list) and len(binding) == 2 and isinstance(binding[0], Symbol)):
            raise SchemeSyntaxError(f"Malformed let binding {binding!r}")
        names.append(binding[0])
        inits.append(binding[1])

    closure = make_closure(names, tail[1:], env)
    args = [evaluate_fn(init, env) for init in inits]
    return apply(closure, args, evaluate_fn)
