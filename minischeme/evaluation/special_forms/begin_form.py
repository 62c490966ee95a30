from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.types.environment import Environment
from minischeme.types.unspecified import Unspecified


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Unspecified
    for e in tail:
        result = evaluate_fn(e, env)
    return result
