from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.errors import SchemeSyntaxError
from minischeme.evaluation.special_forms.logic_forms import is_true
from minischeme.types.environment import Environment
from minischeme.types.unspecified import Unspecified


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise SchemeSyntaxError("if requires a test, a consequent and an optional alternate")

    if is_true(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return Unspecified
