# Core type aliases for the minischeme data model.
# Code and data share plain Python types: int/float/bool/str atoms, Symbol for
# identifiers and Python lists for combinations. Procedures and the
# Unspecified marker only ever appear as runtime values.
#
# Naming guidance:
# - SExpression: reader/special-form code handling syntactic forms.
# - LispValue:   evaluator/runtime code handling evaluated values.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, passed into special forms and the apply engine
EvaluatorFn = Callable[..., LispValue]
