"""Application engine for minischeme.

The single routine used for every procedure call: direct combinations in the
evaluator, and the higher-order built-ins (`map`, `apply`). Built-ins receive
the evaluated argument list; closures get a fresh call frame parented to
their captured environment.
"""

from minischeme import LispValue, EvaluatorFn
from minischeme.errors import SchemeTypeError
from minischeme.printer import to_string
from minischeme.types.procedure import Procedure, ProcedureKind


def apply(proc: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a procedure value to already-evaluated arguments.

    - BUILTIN: call the native function with the argument list.
    - CLOSURE: bind parameters in a new frame (ArityError on mismatch) and
      evaluate the body there.
    - Anything else raises SchemeTypeError.
    """
    match proc:
        case Procedure(kind=ProcedureKind.BUILTIN):
            return proc.fn(args)
        case Procedure(kind=ProcedureKind.CLOSURE):
            frame = proc.extend_env(args)
            return evaluate_fn(proc.body, frame)
    raise SchemeTypeError(f"Cannot apply non-procedure {to_string(proc)}")
